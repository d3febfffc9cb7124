"""Descriptions of the numeric datatypes used by FINN accelerators."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass

_FLOAT32_MAX: float = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]


class Datatype(ABC):
    """A FINN datatype: a bit width plus the range of values it can hold.

    Two datatypes compare equal exactly when they are the same kind with the
    same parameters.
    """

    @abstractmethod
    def sign(self) -> bool:
        """Whether the type is signed."""

    @abstractmethod
    def bitwidth(self) -> int:
        """Number of bits one value occupies."""

    @abstractmethod
    def min_value(self) -> float:
        """Smallest value the type can hold."""

    @abstractmethod
    def max_value(self) -> float:
        """Largest value the type can hold."""

    @abstractmethod
    def is_integer(self) -> bool:
        """Whether the type holds integers."""

    @abstractmethod
    def is_fixed_point(self) -> bool:
        """Whether the type is a fixed point type."""

    def allowed(self, value: float) -> bool:
        """Whether ``value`` can be represented by this type."""
        return self.min_value() <= value <= self.max_value()

    def num_possible_values(self) -> float:
        """Number of distinct values the type can represent."""
        low = self.min_value()
        high = self.max_value()
        return (-low if low < 0 else low) + high + 1

    def required_elements(self, element_bits: int = 8) -> int:
        """Number of ``element_bits`` wide machine words needed for one value.

        For example an INT14 needs two 8-bit words.
        """
        if element_bits <= 0:
            raise ValueError("Element width must be positive")
        width = self.bitwidth()
        if width < element_bits:
            return 1
        return -(-width // element_bits)


def _check_bits(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"Bit width must be positive, got {bits}")


@dataclass(frozen=True)
class DatatypeFloat(Datatype):
    """IEEE 754 single precision floating point data."""

    def sign(self) -> bool:
        return True

    def bitwidth(self) -> int:
        return 32

    def min_value(self) -> float:
        return -_FLOAT32_MAX

    def max_value(self) -> float:
        return _FLOAT32_MAX

    def is_integer(self) -> bool:
        return False

    def is_fixed_point(self) -> bool:
        return False


@dataclass(frozen=True)
class DatatypeInt(Datatype):
    """Signed two's complement integers of ``bits`` bits."""

    bits: int

    def __post_init__(self) -> None:
        _check_bits(self.bits)

    def sign(self) -> bool:
        return True

    def bitwidth(self) -> int:
        return self.bits

    def min_value(self) -> float:
        return -float(1 << (self.bits - 1))

    def max_value(self) -> float:
        return float((1 << (self.bits - 1)) - 1)

    def is_integer(self) -> bool:
        return True

    def is_fixed_point(self) -> bool:
        return False


@dataclass(frozen=True)
class DatatypeUInt(Datatype):
    """Unsigned integers of ``bits`` bits; one bit is the binary type."""

    bits: int

    def __post_init__(self) -> None:
        _check_bits(self.bits)

    def sign(self) -> bool:
        return False

    def bitwidth(self) -> int:
        return self.bits

    def min_value(self) -> float:
        return 0.0

    def max_value(self) -> float:
        return float((1 << self.bits) - 1)

    def is_integer(self) -> bool:
        return True

    def is_fixed_point(self) -> bool:
        return False


DATATYPE_BINARY = DatatypeUInt(1)


@dataclass(frozen=True)
class DatatypeFixed(Datatype):
    """Signed fixed point numbers: ``bits`` in total, ``integer_bits`` before the point."""

    bits: int
    integer_bits: int

    def __post_init__(self) -> None:
        _check_bits(self.bits)
        if not 0 <= self.integer_bits <= self.bits:
            raise ValueError(
                f"Integer bits ({self.integer_bits}) must lie between 0 and the bit width ({self.bits})"
            )

    def sign(self) -> bool:
        return True

    def bitwidth(self) -> int:
        return self.bits

    def int_bits(self) -> int:
        """Bits before the binary point."""
        return self.integer_bits

    def frac_bits(self) -> int:
        """Bits after the binary point."""
        return self.bits - self.integer_bits

    def scale_factor(self) -> float:
        """Value of the least significant bit."""
        return 1.0 / (1 << self.frac_bits())

    def min_value(self) -> float:
        return -float(1 << (self.bits - 1)) * self.scale_factor()

    def max_value(self) -> float:
        return ((1 << (self.bits - 1)) - 1) * self.scale_factor()

    def is_integer(self) -> bool:
        return False

    def is_fixed_point(self) -> bool:
        return True

    def allowed(self, value: float) -> bool:
        scaled = value * (1 << self.integer_bits)
        return self.min_value() <= scaled <= self.max_value()


@dataclass(frozen=True)
class DatatypeBipolar(Datatype):
    """One-bit data taking the values -1 and 1."""

    def sign(self) -> bool:
        return True

    def bitwidth(self) -> int:
        return 1

    def min_value(self) -> float:
        return -1.0

    def max_value(self) -> float:
        return 1.0

    def is_integer(self) -> bool:
        return True

    def is_fixed_point(self) -> bool:
        return False

    def num_possible_values(self) -> float:
        return 2.0

    def allowed(self, value: float) -> bool:
        return value in (-1, 1)


@dataclass(frozen=True)
class DatatypeTernary(Datatype):
    """Two-bit data taking the values -1, 0 and 1."""

    def sign(self) -> bool:
        return True

    def bitwidth(self) -> int:
        return 2

    def min_value(self) -> float:
        return -1.0

    def max_value(self) -> float:
        return 1.0

    def is_integer(self) -> bool:
        return True

    def is_fixed_point(self) -> bool:
        return False

    def num_possible_values(self) -> float:
        return 3.0

    def allowed(self, value: float) -> bool:
        return value in (-1, 0, 1)