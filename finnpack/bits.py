"""Bit-level helpers used to pack FINN datatypes without padding."""

from __future__ import annotations

from collections.abc import Iterable

from finnpack.bitset import BITS_PER_BYTE, DynamicBitset
from finnpack.datatypes import Datatype, DatatypeBipolar

_MACHINE_WIDTHS = (1, 2, 4, 8)


def _reverse_bits_of_byte(value: int) -> int:
    return int(format(value, "08b")[::-1], 2)


_REVERSED_BYTES: tuple[int, ...] = tuple(_reverse_bits_of_byte(v) for v in range(256))


def reverse_byte(value: int) -> int:
    """Reverse the bit order of a single byte."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Value {value} is not a byte")
    return _REVERSED_BYTES[value]


def create_mask(bits: int) -> int:
    """Mask with the lowest ``bits`` bits set."""
    if bits < 0:
        raise ValueError(f"Mask width must not be negative, got {bits}")
    return (1 << bits) - 1


def _to_unsigned(value: int, num_bytes: int) -> int:
    width = num_bytes * BITS_PER_BYTE
    if not -(1 << (width - 1)) <= value < (1 << width):
        raise ValueError(f"Value {value} does not fit into {num_bytes} byte(s)")
    return value & create_mask(width)


def bitshuffle(value: int, num_bytes: int) -> int:
    """Reverse all bits of a ``num_bytes`` wide value.

    Negative values are taken in two's complement of that width; the result
    is always unsigned.
    """
    if num_bytes not in _MACHINE_WIDTHS:
        raise ValueError(f"Unsupported value width of {num_bytes} bytes")
    raw = _to_unsigned(value, num_bytes).to_bytes(num_bytes, "little")
    reversed_raw = bytes(_REVERSED_BYTES[byte] for byte in reversed(raw))
    return int.from_bytes(reversed_raw, "little")


def storage_bytes(datatype: Datatype) -> int:
    """Bytes of the smallest unsigned machine word that holds one value."""
    width = datatype.bitwidth()
    for num_bytes in _MACHINE_WIDTHS:
        if width <= num_bytes * BITS_PER_BYTE:
            return num_bytes
    raise ValueError(f"Datatypes with more than 64 bits are not supported (got {width})")


def to_bitset(
    values: Iterable[int],
    datatype: Datatype,
    element_bytes: int | None = None,
    invert_bytes: bool = True,
    reverse_bits: bool = True,
) -> list[int]:
    """Reduce each value to the bit pattern ``datatype`` stores for it.

    ``values`` are integers held in ``element_bytes`` wide machine words
    (by default the smallest word fitting the datatype). With
    ``reverse_bits`` the bit order inside each value is reversed; bipolar
    values are mapped to binary (-1 becomes 0, 1 stays 1). With
    ``invert_bytes`` false the order of the returned values is reversed.
    """
    if element_bytes is None:
        element_bytes = storage_bytes(datatype)
    if element_bytes not in _MACHINE_WIDTHS:
        raise ValueError(f"Unsupported element width of {element_bytes} bytes")
    word_bits = element_bytes * BITS_PER_BYTE
    width = datatype.bitwidth()
    if width > word_bits:
        raise ValueError(f"A {width} bit datatype does not fit into {element_bytes} byte elements")

    word_mask = create_mask(word_bits)
    value_mask = create_mask(width)
    bipolar = isinstance(datatype, DatatypeBipolar)
    shift = word_bits - width

    result: list[int] = []
    for value in values:
        word = _to_unsigned(value, element_bytes)
        if reverse_bits:
            word = bitshuffle(word, element_bytes)
            if bipolar:
                word = ((word + 1) >> (shift - 1)) & word_mask
            else:
                word >>= shift
        elif bipolar:
            word = ((word + 1) >> 1) & word_mask
        result.append(word & value_mask)

    if not invert_bytes:
        result.reverse()
    return result


def merge_bitsets(values: Iterable[int], datatype: Datatype) -> DynamicBitset:
    """Concatenate ``bitwidth`` bit values into one bitset, first value lowest."""
    items = list(values)
    width = datatype.bitwidth()
    value_bytes = storage_bytes(datatype)
    limit = create_mask(value_bytes * BITS_PER_BYTE)
    merged = DynamicBitset(len(items) * width)
    for position, value in enumerate(items):
        if not 0 <= value <= limit:
            raise ValueError(f"Value {value} does not fit into {value_bytes} unsigned byte(s)")
        merged.set_byte(value, position * width, value_bytes)
    return merged