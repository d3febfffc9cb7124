import pytest

from finnpack.bitset import DynamicBitset


def _as_int(bitset):
    return int.from_bytes(bitset.to_bytes(), "little")


@pytest.mark.parametrize("n", [1, 7, 8, 10, 17, 64])
def test_capacity_is_whole_bytes(n):
    bitset = DynamicBitset(n)
    assert len(bitset) == bitset.num_bytes() * 8
    assert n <= len(bitset) < n + 8


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DynamicBitset(-1)


def test_fresh_bitset_is_empty():
    bitset = DynamicBitset(24)
    assert bitset.none()
    assert not bitset.all()


def test_all_after_setting_every_bit():
    bitset = DynamicBitset(16)
    for position in range(16):
        bitset.set_single_bit(position)
    assert bitset.all()
    assert not bitset.none()


def test_single_bit_string():
    bitset = DynamicBitset(8)
    bitset.set_single_bit(0)
    assert str(bitset) == "00000001"


def test_string_length_matches_capacity():
    bitset = DynamicBitset(20)
    bitset.set_single_bit(19)
    text = str(bitset)
    assert len(text) == len(bitset)
    assert text.count("1") == 1
    assert text[len(bitset) - 1 - 19] == "1"


@pytest.mark.parametrize(
    "value, position, width",
    [(5, 0, 1), (5, 3, 1), (0xAB, 4, 1), (0x1234, 7, 2), (0xBEEF, 8, 2), (0xDEADBEEF, 5, 4)],
)
def test_set_byte_places_value(value, position, width):
    bitset = DynamicBitset(position + width * 8 + 8)
    bitset.set_byte(value, position, width)
    mask = (1 << (width * 8)) - 1
    assert (_as_int(bitset) >> position) & mask == value
    assert _as_int(bitset) >> (position + width * 8) == 0


def test_sequential_values_are_recoverable():
    values = [3, 0, 7, 5, 1, 6, 2, 4, 7]
    bits = 3
    bitset = DynamicBitset(len(values) * bits)
    for index, value in enumerate(values):
        bitset.set_byte(value, index * bits)
    packed = _as_int(bitset)
    recovered = [(packed >> (index * bits)) & 0b111 for index in range(len(values))]
    assert recovered == values


def test_set_byte_truncates_at_end():
    bitset = DynamicBitset(8)
    bitset.set_byte(0xFFFF, 0, 2)
    assert bitset.all()
    assert bitset.num_bytes() == 1


def test_set_byte_rejects_oversized_value():
    bitset = DynamicBitset(16)
    with pytest.raises(ValueError):
        bitset.set_byte(256, 0, 1)
    with pytest.raises(ValueError):
        bitset.set_byte(-1, 0, 1)


def test_set_byte_rejects_position_outside():
    bitset = DynamicBitset(8)
    with pytest.raises(IndexError):
        bitset.set_byte(1, 8, 1)


def test_or_merges_bits():
    left = DynamicBitset(16)
    right = DynamicBitset(16)
    left.set_byte(0x0F, 0)
    right.set_byte(0xA5, 4)
    expected = _as_int(left) | _as_int(right)
    left |= right
    assert _as_int(left) == expected


def test_or_rejects_size_mismatch():
    left = DynamicBitset(8)
    with pytest.raises(ValueError):
        left |= DynamicBitset(16)