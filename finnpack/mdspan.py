"""A multi-dimensional view over flat data with a dynamic number of dimensions."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any


class DynamicMdSpan:
    """Interprets a flat sequence as a tensor of a given shape."""

    def __init__(self, data: Sequence[Any], shape: Sequence[int]) -> None:
        self._data = data
        self._count = len(data)
        if self._count == 0:
            raise ValueError("Can not create dynamic mdspan for empty container.")
        self._strides: list[int] = []
        self._most_inner_dims: list[Sequence[Any]] = []
        self.set_shape(shape)

    def set_shape(self, shape: Sequence[int]) -> None:
        """Compute the strides and innermost slices for ``shape``."""
        if not shape:
            raise ValueError("Can not create dynamic mdspan for empty Shape.")
        if self._count != math.prod(shape):
            raise ValueError(
                "Elements in input vector does not match elements in dimensions! "
                f"Distance: {self._count} ; Accumulated Dimensions: {math.prod(shape)}"
            )

        strides = [1]
        for dim in reversed(shape):
            strides.append(strides[-1] * dim)
        strides.reverse()
        self._strides = strides

        inner = strides[-2]
        self._most_inner_dims = [
            self._data[start : start + inner] for start in range(0, self._count, inner)
        ]

    def strides(self) -> list[int]:
        """Stride of each dimension, outermost first, ending with 1."""
        return list(self._strides)

    def most_inner_dims(self) -> list[Sequence[Any]]:
        """Slices of the data, one per innermost row."""
        return list(self._most_inner_dims)