import pytest

from finnpack.bits import (
    bitshuffle,
    create_mask,
    merge_bitsets,
    reverse_byte,
    storage_bytes,
    to_bitset,
)
from finnpack.datatypes import (
    DatatypeBipolar,
    DatatypeFloat,
    DatatypeInt,
    DatatypeUInt,
)


def _extract(data: bytes, count: int, width: int) -> list[int]:
    number = int.from_bytes(data, "little")
    return [(number >> (i * width)) & create_mask(width) for i in range(count)]


def test_reverse_byte_table_values():
    assert reverse_byte(0) == 0
    assert reverse_byte(1) == 128
    assert reverse_byte(2) == 64
    assert reverse_byte(255) == 255


@pytest.mark.parametrize("value", [0, 1, 17, 100, 200, 255])
def test_reverse_byte_is_involution(value):
    assert reverse_byte(reverse_byte(value)) == value


def test_reverse_byte_rejects_non_byte():
    with pytest.raises(ValueError):
        reverse_byte(256)


def test_create_mask_fixed_values():
    assert create_mask(0) == 0
    assert create_mask(1) == 1
    assert create_mask(8) == 0xFF


def test_create_mask_negative():
    with pytest.raises(ValueError):
        create_mask(-1)


def test_bitshuffle_single_byte_matches_reverse_byte():
    for value in (1, 3, 96, 200):
        assert bitshuffle(value, 1) == reverse_byte(value)


@pytest.mark.parametrize("num_bytes", [1, 2, 4, 8])
def test_bitshuffle_is_involution(num_bytes):
    value = 0x1234567890ABCDEF & create_mask(num_bytes * 8)
    assert bitshuffle(bitshuffle(value, num_bytes), num_bytes) == value


def test_bitshuffle_moves_lowest_bit_to_top():
    assert bitshuffle(1, 4) == 1 << 31


def test_bitshuffle_negative_all_ones():
    assert bitshuffle(-1, 4) == create_mask(32)


def test_bitshuffle_rejects_odd_width():
    with pytest.raises(ValueError):
        bitshuffle(1, 3)


def test_storage_bytes():
    assert storage_bytes(DatatypeInt(5)) == 1
    assert storage_bytes(DatatypeFloat()) == 4
    assert storage_bytes(DatatypeUInt(64)) == 8


def test_storage_bytes_too_wide():
    with pytest.raises(ValueError):
        storage_bytes(DatatypeUInt(65))


def test_to_bitset_reverse_is_involution():
    dtype = DatatypeUInt(5)
    values = [0, 1, 7, 19, 31]
    once = to_bitset(values, dtype)
    assert to_bitset(once, dtype) == values


def test_to_bitset_without_reversal_keeps_values():
    values = [0, 3, 9, 15]
    assert to_bitset(values, DatatypeUInt(4), reverse_bits=False) == values


def test_to_bitset_negative_is_masked():
    result = to_bitset([-1, -8], DatatypeInt(4), element_bytes=1, reverse_bits=False)
    assert result == [create_mask(4), 8]


def test_to_bitset_invert_bytes_false_reverses_order():
    values = [1, 2, 3, 4]
    forward = to_bitset(values, DatatypeUInt(3), reverse_bits=False)
    backward = to_bitset(values, DatatypeUInt(3), invert_bytes=False, reverse_bits=False)
    assert backward == list(reversed(forward))


def test_to_bitset_bipolar_maps_to_binary():
    assert to_bitset([-1, 1, 1, -1], DatatypeBipolar(), element_bytes=1, reverse_bits=False) == [0, 1, 1, 0]


def test_to_bitset_element_too_small():
    with pytest.raises(ValueError):
        to_bitset([1], DatatypeInt(12), element_bytes=1)


def test_to_bitset_value_too_large():
    with pytest.raises(ValueError):
        to_bitset([300], DatatypeUInt(4), element_bytes=1)


@pytest.mark.parametrize("width", [1, 3, 5, 7, 8, 12, 16])
def test_merge_bitsets_round_trip(width):
    dtype = DatatypeUInt(width)
    values = [(i * 37 + 5) & create_mask(width) for i in range(11)]
    merged = merge_bitsets(values, dtype)
    assert len(merged) >= len(values) * width
    assert merged.num_bytes() == -(-len(values) * width // 8)
    assert _extract(merged.to_bytes(), len(values), width) == values


def test_merge_bitsets_full_bytes_are_identity():
    values = [1, 2, 250]
    assert merge_bitsets(values, DatatypeUInt(8)).to_bytes() == bytes(values)


def test_merge_bitsets_empty():
    merged = merge_bitsets([], DatatypeInt(5))
    assert merged.to_bytes() == b""


def test_merge_bitsets_rejects_negative():
    with pytest.raises(ValueError):
        merge_bitsets([-1], DatatypeUInt(4))


def test_to_bitset_then_merge_round_trip_signed():
    dtype = DatatypeInt(5)
    values = [-16, -1, 0, 7, 15]
    masked = to_bitset(values, dtype, element_bytes=1, reverse_bits=False)
    merged = merge_bitsets(masked, dtype)
    restored = _extract(merged.to_bytes(), len(values), 5)
    assert restored == masked
    assert [v - 32 if v >= 16 else v for v in restored] == values