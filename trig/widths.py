"""
Floating-point width selection.

Maps a width (32 or 64 bits) to its Trig realization, and picks a
realization from a value's own dtype for code that should work with
either width.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

import numpy as np

from .capability import Trig
from .float32 import Float32Trig
from .float64 import Float64Trig


class FloatWidth(IntEnum):
    """Supported IEEE-754 widths."""

    SINGLE = 32
    DOUBLE = 64

    @classmethod
    def parse(cls, value: Any) -> FloatWidth:
        """
        Parse a width from an enum member, a bit count or a name.

        Examples:
            >>> FloatWidth.parse(32)
            <FloatWidth.SINGLE: 32>
            >>> FloatWidth.parse("float64")
            <FloatWidth.DOUBLE: 64>

        Raises:
            ValueError: If the width is not supported
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            alias = _WIDTH_ALIASES.get(value.strip().lower())
            if alias is None:
                raise ValueError(f"Unsupported float width: {value!r}")
            return alias
        if isinstance(value, bool):
            raise ValueError(f"Unsupported float width: {value!r}")
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(f"Unsupported float width: {value!r}") from e


_WIDTH_ALIASES = {
    "32": FloatWidth.SINGLE,
    "f32": FloatWidth.SINGLE,
    "float32": FloatWidth.SINGLE,
    "single": FloatWidth.SINGLE,
    "64": FloatWidth.DOUBLE,
    "f64": FloatWidth.DOUBLE,
    "float64": FloatWidth.DOUBLE,
    "double": FloatWidth.DOUBLE,
}

_REALIZATIONS: dict[FloatWidth, Trig] = {
    FloatWidth.SINGLE: Float32Trig(),
    FloatWidth.DOUBLE: Float64Trig(),
}


def get_trig(width: FloatWidth | int | str = FloatWidth.DOUBLE) -> Trig:
    """
    Get the realization for a width.

    Args:
        width: FloatWidth, 32/64, or a name such as "f32" or "double"

    Returns:
        Shared Trig instance for that width
    """
    return _REALIZATIONS[FloatWidth.parse(width)]


def width_of(value: Any) -> FloatWidth:
    """Width matching a value's dtype; Python numbers count as double."""
    if isinstance(value, (np.float32, np.float16)):
        return FloatWidth.SINGLE
    return FloatWidth.DOUBLE


def trig_for(value: Any) -> Trig:
    """
    Realization matching a value's dtype.

    Lets consuming code stay width-agnostic:

        >>> x = np.float32(90.0)
        >>> trig_for(x).sind(x)
        np.float32(1.0)
    """
    return _REALIZATIONS[width_of(value)]
