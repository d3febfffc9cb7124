# finnpack

Host-side helpers for drivers of FINN-generated FPGA accelerators: the FINN
datatype system, bit-level building blocks for packing values without padding,
a multi-dimensional view over flat data, and loading of the JSON accelerator
configuration. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Datatypes

`finnpack.datatypes` describes the FINN datatypes: `DatatypeInt(bits)`,
`DatatypeUInt(bits)`, `DatatypeFixed(bits, integer_bits)`, `DatatypeFloat()`,
`DatatypeBipolar()` and `DatatypeTernary()`. `DATATYPE_BINARY` is
`DatatypeUInt(1)`. Every datatype provides `sign()`, `bitwidth()`,
`min_value()`, `max_value()`, `is_integer()`, `is_fixed_point()`,
`num_possible_values()`, `allowed(value)` and `required_elements(element_bits)`.
Fixed point types also have `int_bits()`, `frac_bits()` and `scale_factor()`.
Datatypes are frozen dataclasses, so two compare equal when they are the same
kind with the same parameters. A bit width that is not positive raises
`ValueError`.

```python
from finnpack.datatypes import DatatypeInt, DatatypeFixed

int5 = DatatypeInt(5)
int5.min_value(), int5.max_value()   # (-16.0, 15.0)
int5.allowed(20)                     # False
int5.required_elements(8)            # 1

fixed = DatatypeFixed(8, 4)
fixed.frac_bits(), fixed.scale_factor()   # (4, 0.0625)
```

## Bit-level packing helpers

`finnpack.bits` holds the pieces used to lay values out back to back:

- `reverse_byte(value)` reverses the bits of one byte.
- `bitshuffle(value, num_bytes)` reverses all bits of a 1, 2, 4 or 8 byte
  value (negative values taken in two's complement).
- `create_mask(bits)` returns a mask of the lowest `bits` bits.
- `storage_bytes(datatype)` gives the smallest machine word, in bytes, that
  holds one value of the datatype.
- `to_bitset(values, datatype, element_bytes=None, invert_bytes=True,
  reverse_bits=True)` cuts each value down to the bit pattern the datatype
  stores; bipolar values become binary when bits are reversed.
- `merge_bitsets(values, datatype)` concatenates those patterns into a
  `DynamicBitset`, first value in the lowest bits.

```python
from finnpack.bits import to_bitset, merge_bitsets
from finnpack.datatypes import DatatypeInt

dt = DatatypeInt(5)
patterns = to_bitset([1, -2], dt, reverse_bits=False)   # [1, 30]
merge_bitsets(patterns, dt).to_bytes()                  # b'\xc1\x03'
```

`finnpack.bitset.DynamicBitset(n)` stores `n` bits rounded up to whole bytes.
It offers `len()`, `num_bytes()`, `all()`, `none()`, `set_single_bit(n)`,
`set_byte(value, n, value_bytes=1)`, `to_bytes()`, `str()` (most significant
bit first) and in-place `|=` with a bitset of the same size.

## Multi-dimensional view

`finnpack.mdspan.DynamicMdSpan(data, shape)` interprets a flat, non-empty
sequence as a tensor. `strides()` lists the stride of each dimension,
outermost first and ending in 1; `most_inner_dims()` returns one slice per
innermost row. A shape that is empty or whose element count does not match the
data raises `ValueError`; `set_shape(shape)` reshapes the view.

```python
from finnpack.mdspan import DynamicMdSpan

span = DynamicMdSpan([1, 2, 3, 4, 5, 6], [2, 3])
span.strides()          # [6, 3, 1]
span.most_inner_dims()  # [[1, 2, 3], [4, 5, 6]]
```

## Configuration

`finnpack.config.create_config_from_path(path)` reads the accelerator's JSON
description into a `Config` whose `device_wrappers` are `DeviceWrapper`
entries. The file is an array of devices (an object is also accepted, its
values taken as the devices); each device has `xclbinPath`, `xrtDeviceIndex`,
`idmas` and `odmas`, and each DMA entry has `kernelName`, `packedShape`,
`normalShape` and `foldedShape` and becomes an `ExtendedBufferDescriptor`
(a `null` entry stays `None`). A missing file raises `FileNotFoundError`;
missing or mistyped fields raise `KeyError`, `TypeError` or `ValueError`.

```python
from finnpack.config import create_config_from_path, get_config_shapes

config = create_config_from_path("config.json")
normal, folded, packed = get_config_shapes(config, device=0, dma=0)
```

`ExtendedBufferDescriptor.to_json()` and `ExtendedBufferDescriptor.from_json(data)`
convert a descriptor to and from its JSON object; `DeviceWrapper.from_json(data)`
builds one device.

## Shared types

`finnpack.types` defines the enumerations `Platform`, `DriverMode`,
`ShapeType`, `BufferOpResult`, `TransferMode`, `IO`, `SizeSpecifier` and
`Endian`, and the `Shape` alias (a list of dimensions, outermost first).

## Joining

`finnpack.join.join(items, delimiter=None)` renders each item and puts the
delimiter between neighbours; booleans render as `true`/`false` and floats in
general format.

```python
from finnpack.join import join

join([1, 2, 3], ", ")        # '1, 2, 3'
join([True, False], ",")     # 'true,false'
```

## What the package does not do

finnpack stops at the bit-level building blocks: it has no single call that
packs a whole tensor into bytes or unpacks device output back into values, and
no fixed point or floating point conversion for packing. It provides no
buffering between host and device, no logging setup, no command-line program,
and it does not talk to an FPGA or its runtime.