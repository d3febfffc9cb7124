"""Join the elements of an iterable into one delimited string."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _render(item: Any) -> str:
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float):
        return format(item, "g")
    return str(item)


def join(items: Iterable[Any], delimiter: str | None = None) -> str:
    """Render each item and place ``delimiter`` between neighbours.

    Booleans render as ``true``/``false`` and floats in general format with
    six significant digits. A ``None`` delimiter joins without separators.
    """
    if not isinstance(items, Iterable):
        raise TypeError(f"Object of type {type(items).__name__} is not iterable")
    return (delimiter or "").join(_render(item) for item in items)