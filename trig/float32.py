"""
Single-precision (IEEE-754 binary32) realization of the Trig capability.

All constants are computed in float32, so deg2rad(30) equals float32 pi/6
and results carry float32 rounding throughout.

Examples:
    >>> from trig import float32
    >>> float32.sind(90.0)
    np.float32(1.0)
    >>> float32.atan2d(3.0, -3.0)  # ~135 degrees
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from .capability import Trig


class Float32Trig(Trig):
    """Trig functions over numpy.float32 values."""

    dtype: ClassVar[type[np.floating]] = np.float32
    width: ClassVar[int] = 32
    tolerance: ClassVar[float] = 1e-6

    PI: ClassVar[np.floating] = np.float32(np.pi)
    RAD_PER_DEG: ClassVar[np.floating] = np.float32(np.pi) / np.float32(180.0)
    DEG_PER_RAD: ClassVar[np.floating] = np.float32(180.0) / np.float32(np.pi)


_trig = Float32Trig()

# Circular (radians)
sin = _trig.sin
cos = _trig.cos
tan = _trig.tan
csc = _trig.csc
sec = _trig.sec
cot = _trig.cot

# Inverse circular (radians)
asin = _trig.asin
acos = _trig.acos
atan = _trig.atan
atan2 = _trig.atan2
acsc = _trig.acsc
asec = _trig.asec
acot = _trig.acot

# Conversions
deg2rad = _trig.deg2rad
rad2deg = _trig.rad2deg

# Circular (degrees)
sind = _trig.sind
cosd = _trig.cosd
tand = _trig.tand
cscd = _trig.cscd
secd = _trig.secd
cotd = _trig.cotd

# Inverse circular (degrees)
asind = _trig.asind
acosd = _trig.acosd
atand = _trig.atand
atan2d = _trig.atan2d
acscd = _trig.acscd
asecd = _trig.asecd
acotd = _trig.acotd

# Hyperbolic
sinh = _trig.sinh
cosh = _trig.cosh
tanh = _trig.tanh
csch = _trig.csch
sech = _trig.sech
coth = _trig.coth

# Inverse hyperbolic
asinh = _trig.asinh
acosh = _trig.acosh
atanh = _trig.atanh
acsch = _trig.acsch
asech = _trig.asech
acoth = _trig.acoth

__all__ = [
    "Float32Trig",
    "sin", "cos", "tan", "csc", "sec", "cot",
    "asin", "acos", "atan", "atan2", "acsc", "asec", "acot",
    "deg2rad", "rad2deg",
    "sind", "cosd", "tand", "cscd", "secd", "cotd",
    "asind", "acosd", "atand", "atan2d", "acscd", "asecd", "acotd",
    "sinh", "cosh", "tanh", "csch", "sech", "coth",
    "asinh", "acosh", "atanh", "acsch", "asech", "acoth",
]
