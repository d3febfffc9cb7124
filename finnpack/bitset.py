"""A growable-at-construction bitset built for packing data without padding."""

from __future__ import annotations

BITS_PER_BYTE = 8


class DynamicBitset:
    """Stores a fixed number of bits, rounded up to whole bytes.

    Each bit is expected to be set at most once; bits are never cleared.
    Byte 0 holds the lowest bits, and inside a byte bit 0 is the least
    significant one.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Bit count must not be negative, got {n}")
        self._bytes = -(-n // BITS_PER_BYTE)
        self._capacity = self._bytes * BITS_PER_BYTE
        self.bits = bytearray(self._bytes)

    def __len__(self) -> int:
        """Capacity in bits."""
        return self._capacity

    def num_bytes(self) -> int:
        """Number of bytes of storage."""
        return self._bytes

    def all(self) -> bool:
        """Whether every bit is set."""
        return all(byte == 0xFF for byte in self.bits)

    def none(self) -> bool:
        """Whether no bit is set."""
        return not any(self.bits)

    def set_single_bit(self, n: int) -> None:
        """Set bit ``n``."""
        index, bit = divmod(n, BITS_PER_BYTE)
        self.bits[index] |= 1 << bit

    def set_byte(self, value: int, n: int, value_bytes: int = 1) -> None:
        """Place the unsigned ``value_bytes`` wide ``value`` starting at bit ``n``.

        Bits falling past the end of the storage are dropped. The bytes after
        the first touched one are overwritten rather than merged, so values
        are expected to be written in ascending bit order.
        """
        if value_bytes <= 0:
            raise ValueError("Value width must be at least one byte")
        width = value_bytes * BITS_PER_BYTE
        if not 0 <= value < (1 << width):
            raise ValueError(f"Value {value} does not fit into {value_bytes} unsigned byte(s)")
        if not 0 <= n < self._capacity:
            raise IndexError(f"Bit position {n} outside of bitset with {self._capacity} bits")

        byte, bit_offset = divmod(n, BITS_PER_BYTE)
        full_mask = (1 << width) - 1
        if bit_offset:
            bit_shift = width - bit_offset
            overflow = value & ((0xFF << bit_shift) & full_mask)
            if overflow:
                self.bits[byte + value_bytes] |= (overflow >> bit_shift) & 0xFF
            shifted = (value << bit_offset) & full_mask
        else:
            shifted = value
        payload = shifted.to_bytes(value_bytes, "little")

        remaining = self._bytes - byte
        self.bits[byte] |= payload[0]
        if remaining <= 1:
            return
        count = min(value_bytes, remaining) - 1
        self.bits[byte + 1 : byte + 1 + count] = payload[1 : 1 + count]

    def to_bytes(self) -> bytes:
        """The storage bytes, lowest byte first."""
        return bytes(self.bits)

    def __str__(self) -> str:
        """Bits from the most significant one down to bit 0."""
        return "".join(format(byte, "08b") for byte in reversed(self.bits))

    def __ior__(self, other: DynamicBitset) -> DynamicBitset:
        if not isinstance(other, DynamicBitset):
            return NotImplemented
        if other._bytes != self._bytes:
            raise ValueError("Cannot merge bitsets of different sizes")
        for index, byte in enumerate(other.bits):
            self.bits[index] |= byte
        return self