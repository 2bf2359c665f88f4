"""
Double-precision (IEEE-754 binary64) realization of the Trig capability.

Results are numpy.float64 scalars, which are Python floats. Unlike the math
module, out-of-domain arguments give NaN (asin(2.0)) and poles give signed
infinity (cot(0.0)) instead of raising ValueError or ZeroDivisionError.

Examples:
    >>> from trig import float64
    >>> float64.sind(90.0)
    np.float64(1.0)
    >>> float64.atan2d(3.0, -3.0)  # ~135 degrees
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from .capability import Trig


class Float64Trig(Trig):
    """Trig functions over numpy.float64 values."""

    dtype: ClassVar[type[np.floating]] = np.float64
    width: ClassVar[int] = 64
    tolerance: ClassVar[float] = 1e-15

    PI: ClassVar[np.floating] = np.float64(np.pi)
    RAD_PER_DEG: ClassVar[np.floating] = np.float64(np.pi) / np.float64(180.0)
    DEG_PER_RAD: ClassVar[np.floating] = np.float64(180.0) / np.float64(np.pi)


_trig = Float64Trig()

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
    "Float64Trig",
    "sin", "cos", "tan", "csc", "sec", "cot",
    "asin", "acos", "atan", "atan2", "acsc", "asec", "acot",
    "deg2rad", "rad2deg",
    "sind", "cosd", "tand", "cscd", "secd", "cotd",
    "asind", "acosd", "atand", "atan2d", "acscd", "asecd", "acotd",
    "sinh", "cosh", "tanh", "csch", "sech", "coth",
    "asinh", "acosh", "atanh", "acsch", "asech", "acoth",
]
