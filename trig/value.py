"""
TrigFloat: a scalar value with receiver-style trig calls.

    >>> TrigFloat(90.0).sind()
    TrigFloat(1.0, width=64)
    >>> TrigFloat(-3.0, width=32).atan2d(3.0).is_close(-45.0, 1e-4)   # y=-3, x=3
    True

Each call returns a new TrigFloat of the same width. Comparison is fuzzy,
with the width's round-trip tolerance as the default.
"""

from __future__ import annotations

import functools
import math
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .capability import Trig
from .catalog import CATALOG, get_function_info
from .widths import FloatWidth, get_trig, width_of


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol


def fuzzy_compare(a: float, b: float, tolerance: float, mode: str) -> bool:
    """
    Compare two floats with tolerance.

    NaN equals NaN here, so domain violations on both sides compare equal;
    infinities must match exactly.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value
        mode: Comparison mode (relative, absolute)

    Returns:
        True if values are equal within tolerance
    """
    if a == b:
        return True
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    if math.isinf(a) or math.isinf(b):
        return False

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance

    elif mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        return abs(a - b) / max_abs <= tolerance

    else:
        raise ValueError(f"Unknown tolerance mode: {mode}")


class TrigFloat(BaseModel):
    """
    Floating-point scalar bound to one width.

    Any catalog operation is available as a method. For atan2/atan2d the
    receiver is y and the argument is x.
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(description="The numeric value")
    width: FloatWidth = Field(default=FloatWidth.DOUBLE)

    def __init__(self, value: Any, width: FloatWidth | int | str | None = None, **kwargs):
        """
        Initialize a TrigFloat.

        Args:
            value: Real scalar; NumPy scalars keep their width when width is None
            width: FloatWidth, 32/64, or a width name
        """
        if isinstance(value, TrigFloat):
            width = value.width if width is None else width
            value = value.value
        elif width is None:
            width = width_of(value)
        width = FloatWidth.parse(width)
        value = float(get_trig(width).coerce(value))
        super().__init__(value=value, width=width, **kwargs)

    @field_validator("width", mode="before")
    @classmethod
    def _parse_width(cls, value: Any) -> FloatWidth:
        return FloatWidth.parse(value)

    @property
    def trig(self) -> Trig:
        """Realization for this value's width."""
        return get_trig(self.width)

    def apply(self, name: str, *others: Any) -> TrigFloat:
        """
        Apply a catalog operation with this value as first argument.

        Raises:
            UnknownFunctionError: If name is not a catalog operation
            TypeError: If the number of arguments does not match
        """
        info = get_function_info(name)
        if len(others) != info.arity - 1:
            raise TypeError(f"{name}() takes {info.arity} argument(s), got {len(others) + 1}")
        args = [float(o) if isinstance(o, TrigFloat) else o for o in others]
        result = getattr(self.trig, name)(self.value, *args)
        return TrigFloat(result, width=self.width)

    def __getattr__(self, name: str) -> Any:
        if name in CATALOG:
            return functools.partial(self.apply, name)
        return super().__getattr__(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(CATALOG))

    def to_numpy(self) -> np.floating:
        """Value as a NumPy scalar of this width."""
        return self.trig.coerce(self.value)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def is_infinite(self) -> bool:
        return math.isinf(self.value)

    def is_close(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str = ToleranceMode.ABSOLUTE,
    ) -> bool:
        """
        Fuzzy comparison against another value.

        Args:
            other: TrigFloat or real scalar
            tolerance: Defaults to the width's round-trip tolerance
            mode: "absolute" or "relative"
        """
        if tolerance is None:
            tolerance = self.trig.tolerance
        return fuzzy_compare(self.value, float(other), tolerance, mode)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"TrigFloat({self.value!r}, width={int(self.width)})"
