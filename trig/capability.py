"""
Trig capability shared by the per-width realizations.

Every operation is written once here, in terms of a small set of host
primitives (NumPy ufuncs) and scalar arithmetic:

- Circular: sin, cos, tan and reciprocals csc, sec, cot
- Inverse circular: asin, acos, atan, atan2 and acsc, asec, acot
- Degree variants: sind ... acotd, atan2d
- Hyperbolic: sinh, cosh, tanh and reciprocals csch, sech, coth
- Inverse hyperbolic: asinh, acosh, atanh and acsch, asech, acoth
- Conversions: deg2rad, rad2deg

A realization fixes the floating-point dtype and the width-specific
constants; it adds no numerical algorithm of its own.

Domain violations never raise. They surface as IEEE results: NaN for
undefined values, signed infinity for division by zero at a pole.
"""

from __future__ import annotations

import numbers
from abc import ABC
from typing import Any, Callable, ClassVar

import numpy as np


class Trig(ABC):
    """
    Trigonometric and hyperbolic functions over one floating-point width.

    Subclasses must set:
    - dtype: NumPy scalar type (np.float32 or np.float64)
    - width: Bit width of dtype
    - tolerance: Round-trip tolerance appropriate to the width
    - PI, RAD_PER_DEG, DEG_PER_RAD: Constants computed in dtype

    Arguments are coerced to dtype and results are dtype scalars.
    """

    dtype: ClassVar[type[np.floating]]
    width: ClassVar[int]
    tolerance: ClassVar[float]

    PI: ClassVar[np.floating]
    RAD_PER_DEG: ClassVar[np.floating]
    DEG_PER_RAD: ClassVar[np.floating]

    def coerce(self, x: Any) -> np.floating:
        """
        Convert a real scalar to this realization's dtype.

        Integers too large for the dtype become a signed infinity.

        Raises:
            TypeError: If x is not a real scalar (arrays, strings, None)
        """
        if isinstance(x, self.dtype):
            return x
        if not isinstance(x, numbers.Real):
            raise TypeError(
                f"{type(self).__name__} operates on real scalars, got {type(x).__name__}"
            )
        with np.errstate(all="ignore"):
            try:
                return self.dtype(x)
            except OverflowError:
                return self.dtype(np.inf if x > 0 else -np.inf)

    def _apply(self, ufunc: Callable[..., Any], *args: Any) -> np.floating:
        operands = [self.coerce(arg) for arg in args]
        with np.errstate(all="ignore"):
            return ufunc(*operands)

    def _reciprocal(self, x: Any) -> np.floating:
        return self._apply(np.divide, 1.0, x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # =========================================================================
    # CIRCULAR (RADIANS)
    # =========================================================================

    def sin(self, x: Any) -> np.floating:
        """Sine of x [rad]. Range [-1, 1]."""
        return self._apply(np.sin, x)

    def cos(self, x: Any) -> np.floating:
        """Cosine of x [rad]. Range [-1, 1]."""
        return self._apply(np.cos, x)

    def tan(self, x: Any) -> np.floating:
        """Tangent of x [rad]. Undefined at pi/2 + n*pi."""
        return self._apply(np.tan, x)

    def csc(self, x: Any) -> np.floating:
        """
        Cosecant of x [rad], 1/sin(x).

        Domain: all reals except n*pi
        Range: (-inf, -1] U [1, inf)
        """
        return self._reciprocal(self.sin(x))

    def sec(self, x: Any) -> np.floating:
        """
        Secant of x [rad], 1/cos(x).

        Domain: all reals except pi/2 + n*pi
        Range: (-inf, -1] U [1, inf)
        """
        return self._reciprocal(self.cos(x))

    def cot(self, x: Any) -> np.floating:
        """
        Cotangent of x [rad], 1/tan(x).

        cot(0.0) is +inf and cot(-0.0) is -inf.
        """
        return self._reciprocal(self.tan(x))

    # =========================================================================
    # INVERSE CIRCULAR (RADIANS)
    # =========================================================================

    def asin(self, x: Any) -> np.floating:
        """Inverse sine [rad]. Domain [-1, 1], range [-pi/2, pi/2]."""
        return self._apply(np.arcsin, x)

    def acos(self, x: Any) -> np.floating:
        """Inverse cosine [rad]. Domain [-1, 1], range [0, pi]."""
        return self._apply(np.arccos, x)

    def atan(self, x: Any) -> np.floating:
        """Inverse tangent [rad]. Range (-pi/2, pi/2)."""
        return self._apply(np.arctan, x)

    def atan2(self, y: Any, x: Any) -> np.floating:
        """
        Four-quadrant inverse tangent of the point (x, y) [rad].

        The first argument is the y coordinate, the second the x coordinate.

        Range: [-pi, pi]

        Examples:
            >>> Float64Trig().atan2(-3.0, 3.0)   # -pi/4
            >>> Float64Trig().atan2(3.0, -3.0)   # 3*pi/4
        """
        return self._apply(np.arctan2, y, x)

    def acsc(self, x: Any) -> np.floating:
        """
        Inverse cosecant [rad], asin(1/x).

        Domain: (-inf, -1] U [1, inf)
        Range: [-pi/2, 0) U (0, pi/2]
        """
        return self.asin(self._reciprocal(x))

    def asec(self, x: Any) -> np.floating:
        """
        Inverse secant [rad], acos(1/x).

        Domain: (-inf, -1] U [1, inf)
        Range: [0, pi/2) U (pi/2, pi]
        """
        return self.acos(self._reciprocal(x))

    def acot(self, x: Any) -> np.floating:
        """Inverse cotangent [rad], atan(1/x)."""
        return self.atan(self._reciprocal(x))

    # =========================================================================
    # UNIT CONVERSIONS
    # =========================================================================

    def deg2rad(self, x: Any) -> np.floating:
        """Convert degrees to radians, x * (pi/180)."""
        return self._apply(np.multiply, x, self.RAD_PER_DEG)

    def rad2deg(self, x: Any) -> np.floating:
        """Convert radians to degrees, x * (180/pi)."""
        return self._apply(np.multiply, x, self.DEG_PER_RAD)

    # =========================================================================
    # CIRCULAR (DEGREES)
    # =========================================================================

    def sind(self, x: Any) -> np.floating:
        """Sine of x [deg]."""
        return self.sin(self.deg2rad(x))

    def cosd(self, x: Any) -> np.floating:
        """Cosine of x [deg]."""
        return self.cos(self.deg2rad(x))

    def tand(self, x: Any) -> np.floating:
        """Tangent of x [deg]."""
        return self.tan(self.deg2rad(x))

    def cscd(self, x: Any) -> np.floating:
        """Cosecant of x [deg]."""
        return self.csc(self.deg2rad(x))

    def secd(self, x: Any) -> np.floating:
        """Secant of x [deg]."""
        return self.sec(self.deg2rad(x))

    def cotd(self, x: Any) -> np.floating:
        """Cotangent of x [deg]."""
        return self.cot(self.deg2rad(x))

    # =========================================================================
    # INVERSE CIRCULAR (DEGREES)
    # =========================================================================

    def asind(self, x: Any) -> np.floating:
        """Inverse sine [deg]. Range [-90, 90]."""
        return self.rad2deg(self.asin(x))

    def acosd(self, x: Any) -> np.floating:
        """Inverse cosine [deg]. Range [0, 180]."""
        return self.rad2deg(self.acos(x))

    def atand(self, x: Any) -> np.floating:
        """Inverse tangent [deg]. Range (-90, 90)."""
        return self.rad2deg(self.atan(x))

    def atan2d(self, y: Any, x: Any) -> np.floating:
        """Four-quadrant inverse tangent [deg], same argument order as atan2."""
        return self.rad2deg(self.atan2(y, x))

    def acscd(self, x: Any) -> np.floating:
        """Inverse cosecant [deg]."""
        return self.rad2deg(self.acsc(x))

    def asecd(self, x: Any) -> np.floating:
        """Inverse secant [deg]."""
        return self.rad2deg(self.asec(x))

    def acotd(self, x: Any) -> np.floating:
        """Inverse cotangent [deg]."""
        return self.rad2deg(self.acot(x))

    # =========================================================================
    # HYPERBOLIC
    # =========================================================================

    def sinh(self, x: Any) -> np.floating:
        return self._apply(np.sinh, x)

    def cosh(self, x: Any) -> np.floating:
        return self._apply(np.cosh, x)

    def tanh(self, x: Any) -> np.floating:
        return self._apply(np.tanh, x)

    def csch(self, x: Any) -> np.floating:
        """Hyperbolic cosecant, 1/sinh(x). Undefined at 0."""
        return self._reciprocal(self.sinh(x))

    def sech(self, x: Any) -> np.floating:
        """Hyperbolic secant, 1/cosh(x). Range (0, 1]."""
        return self._reciprocal(self.cosh(x))

    def coth(self, x: Any) -> np.floating:
        """Hyperbolic cotangent, 1/tanh(x). Undefined at 0."""
        return self._reciprocal(self.tanh(x))

    # =========================================================================
    # INVERSE HYPERBOLIC
    # =========================================================================

    def asinh(self, x: Any) -> np.floating:
        return self._apply(np.arcsinh, x)

    def acosh(self, x: Any) -> np.floating:
        """Inverse hyperbolic cosine. Domain [1, inf); below 1 gives NaN."""
        return self._apply(np.arccosh, x)

    def atanh(self, x: Any) -> np.floating:
        """Inverse hyperbolic tangent. Domain (-1, 1); +-1 give +-inf."""
        return self._apply(np.arctanh, x)

    def acsch(self, x: Any) -> np.floating:
        """Inverse hyperbolic cosecant, asinh(1/x). Domain: all nonzero reals."""
        return self.asinh(self._reciprocal(x))

    def asech(self, x: Any) -> np.floating:
        """Inverse hyperbolic secant, acosh(1/x). Domain (0, 1]."""
        return self.acosh(self._reciprocal(x))

    def acoth(self, x: Any) -> np.floating:
        """Inverse hyperbolic cotangent, atanh(1/x). Domain |x| > 1."""
        return self.atanh(self._reciprocal(x))
