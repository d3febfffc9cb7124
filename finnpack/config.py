"""Device configuration descriptions and their JSON (de)serialisation."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from finnpack.types import Shape


def _shape_from_json(value: Any, key: str) -> Shape:
    if not isinstance(value, list):
        raise TypeError(f"Field '{key}' must be a list of dimensions")
    shape: Shape = []
    for dim in value:
        if isinstance(dim, bool) or not isinstance(dim, int):
            raise TypeError(f"Field '{key}' contains a non-integer dimension: {dim!r}")
        if dim < 0:
            raise ValueError(f"Field '{key}' contains a negative dimension: {dim}")
        shape.append(dim)
    return shape


def _require(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise KeyError(f"Missing field '{key}'") from None


@dataclass
class BufferDescriptor:
    """Describes one DMA buffer of a kernel.

    ``packed_shape`` counts bytes rather than FINN datatype elements.
    ``slr_index`` is reserved for multi-FPGA use.
    """

    kernel_name: str = ""
    packed_shape: Shape = field(default_factory=list)
    slr_index: int = field(default=0, kw_only=True)


@dataclass
class ExtendedBufferDescriptor(BufferDescriptor):
    """A buffer descriptor that also knows the normal and folded shapes."""

    normal_shape: Shape = field(default_factory=list)
    folded_shape: Shape = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """The JSON object describing this buffer."""
        return {
            "kernelName": self.kernel_name,
            "packedShape": list(self.packed_shape),
            "normalShape": list(self.normal_shape),
            "foldedShape": list(self.folded_shape),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ExtendedBufferDescriptor:
        """Build a descriptor from its JSON object."""
        kernel_name = _require(data, "kernelName")
        if not isinstance(kernel_name, str):
            raise TypeError("Field 'kernelName' must be a string")
        return cls(
            kernel_name,
            _shape_from_json(_require(data, "packedShape"), "packedShape"),
            _shape_from_json(_require(data, "normalShape"), "normalShape"),
            _shape_from_json(_require(data, "foldedShape"), "foldedShape"),
        )


def _descriptors_from_json(value: Any, key: str) -> list[BufferDescriptor | None]:
    if not isinstance(value, list):
        raise TypeError(f"Field '{key}' must be a list")
    return [None if entry is None else ExtendedBufferDescriptor.from_json(entry) for entry in value]


@dataclass
class DeviceWrapper:
    """Everything needed to set up one FPGA device."""

    xclbin: Path = field(default_factory=Path)
    xrt_device_index: int = 0
    idmas: list[BufferDescriptor | None] = field(default_factory=list)
    odmas: list[BufferDescriptor | None] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DeviceWrapper:
        """Build a device description from its JSON object."""
        xclbin = _require(data, "xclbinPath")
        if not isinstance(xclbin, str):
            raise TypeError("Field 'xclbinPath' must be a string")
        index = _require(data, "xrtDeviceIndex")
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise ValueError("Field 'xrtDeviceIndex' must be a non-negative integer")
        return cls(
            Path(xclbin),
            index,
            _descriptors_from_json(_require(data, "idmas"), "idmas"),
            _descriptors_from_json(_require(data, "odmas"), "odmas"),
        )


@dataclass
class Config:
    """A complete configuration: one entry per device."""

    device_wrappers: list[DeviceWrapper] = field(default_factory=list)


def create_config_from_path(config_path: str | Path) -> Config:
    """Read and parse a JSON configuration file."""
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"File {path} not found. Abort.")
    with path.open(encoding="utf-8") as handle:
        data = json.load(handle)
    devices: Iterable[Any]
    if isinstance(data, list):
        devices = data
    elif isinstance(data, dict):
        devices = data.values()
    else:
        raise TypeError("Configuration must be a JSON array of devices")
    return Config([DeviceWrapper.from_json(device) for device in devices])


def get_config_shapes(config: Config, device: int = 0, dma: int = 0) -> tuple[Shape, Shape, Shape]:
    """Normal, folded and packed shape of input DMA ``dma`` on ``device``."""
    if device < 0 or device >= len(config.device_wrappers):
        raise IndexError(f"Device index {device} out of range")
    idmas = config.device_wrappers[device].idmas
    if dma < 0 or dma >= len(idmas):
        raise IndexError(f"DMA index {dma} out of range")
    descriptor = idmas[dma]
    if not isinstance(descriptor, ExtendedBufferDescriptor):
        raise TypeError(f"Input DMA {dma} of device {device} carries no extended shape information")
    return descriptor.normal_shape, descriptor.folded_shape, descriptor.packed_shape