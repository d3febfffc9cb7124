"""Enumerations and type aliases shared across the driver utilities."""

from __future__ import annotations

from enum import Enum

Shape = list[int]
"""A tensor shape, outermost dimension first."""

ShapeNormal = Shape
ShapeFolded = Shape
ShapePacked = Shape


class Platform(Enum):
    """Target accelerator platform."""

    ALVEO = 0
    INVALID = -1


class DriverMode(Enum):
    """Mode the driver runs in."""

    EXECUTE = 0
    THROUGHPUT_TEST = 1


class ShapeType(Enum):
    """Which representation of a tensor shape is meant."""

    NORMAL = 0
    FOLDED = 1
    PACKED = 2
    INVALID = -1


class BufferOpResult(Enum):
    """Outcome of a buffer operation."""

    SUCCESS = 0
    FAILURE = -1
    OVER_BOUNDS_WRITE = -2
    OVER_BOUNDS_READ = -3


class TransferMode(Enum):
    """How data is moved to and from the device."""

    MEMORY_BUFFERED = 0
    STREAMED = 1
    INVALID = -1


class IO(Enum):
    """Direction of a data path."""

    INPUT = 0
    OUTPUT = 1
    INOUT = 2
    UNSPECIFIED = -1


class SizeSpecifier(Enum):
    """Unit in which a buffer size is requested."""

    BYTES = 0
    TOTAL_DATA_SIZE = 1
    BATCHSIZE = 4
    FEATUREMAP_SIZE = 5
    INVALID = -1


class Endian(Enum):
    """Byte order."""

    LITTLE = 0
    BIG = 1
    UNSPECIFIED = -1