"""Tests for the double-precision realization and its free functions."""

import math

import numpy as np
import pytest

from trig import float64
from trig.float64 import Float64Trig


PI = math.pi
E = math.e


class TestCircularRadians:
    """Test sin, cos, tan and their reciprocals."""

    def test_sin(self):
        """sin(pi/2) is exactly 1."""
        assert float64.sin(PI / 2) == 1.0

    def test_cos(self):
        """cos(2*pi) is exactly 1."""
        assert float64.cos(2 * PI) == 1.0

    def test_tan(self):
        assert float64.tan(PI / 4) == pytest.approx(1.0, abs=1e-15)

    def test_csc(self):
        assert float64.csc(PI / 2) == 1.0

    def test_sec(self):
        assert float64.sec(PI) == -1.0

    def test_cot(self):
        assert float64.cot(PI / 4) == pytest.approx(1.0, abs=1e-15)


class TestInverseCircularRadians:
    """Test asin, acos, atan, atan2 and the inverse reciprocals."""

    def test_asin(self):
        assert float64.asin(float64.sin(PI / 2)) == PI / 2

    def test_acos(self):
        assert float64.acos(float64.cos(PI / 4)) == PI / 4

    def test_atan(self):
        assert float64.atan(float64.tan(1.0)) == 1.0

    def test_acsc(self):
        assert float64.acsc(float64.csc(PI / 2)) == PI / 2

    def test_asec(self):
        assert float64.asec(float64.sec(PI / 4)) == PI / 4

    def test_acot(self):
        assert float64.acot(float64.cot(1.0)) == 1.0

    def test_atan2_fourth_quadrant(self):
        """Point (3, -3) lies 45 degrees clockwise from the +x axis."""
        assert float64.atan2(-3.0, 3.0) == pytest.approx(-PI / 4, abs=1e-15)

    def test_atan2_second_quadrant(self):
        """Point (-3, 3) lies 135 degrees counterclockwise from the +x axis."""
        assert float64.atan2(3.0, -3.0) == pytest.approx(3 * PI / 4, abs=1e-15)

    def test_atan2_argument_order(self):
        """First argument is y, second is x."""
        assert float64.atan2(1.0, 0.0) == pytest.approx(PI / 2)
        assert float64.atan2(0.0, 1.0) == 0.0

    def test_atan2_negative_x_axis(self):
        assert float64.atan2(0.0, -1.0) == pytest.approx(PI)
        assert float64.atan2(-0.0, -1.0) == pytest.approx(-PI)


class TestConversions:
    """Test deg2rad and rad2deg."""

    def test_deg2rad(self):
        assert float64.deg2rad(30.0) == PI / 6

    def test_rad2deg(self):
        assert float64.rad2deg(PI / 6) == pytest.approx(30.0, abs=1e-14)

    def test_full_turn(self):
        assert float64.deg2rad(360.0) == pytest.approx(2 * PI, abs=1e-15)
        assert float64.rad2deg(PI) == pytest.approx(180.0, abs=1e-13)

    def test_conversion_constants_computed_in_width(self):
        assert Float64Trig.RAD_PER_DEG == np.float64(np.pi) / np.float64(180.0)
        assert Float64Trig.DEG_PER_RAD == np.float64(180.0) / np.float64(np.pi)


class TestCircularDegrees:
    """Test the degree-argument circular functions."""

    def test_sind(self):
        assert float64.sind(90.0) == 1.0

    def test_cosd(self):
        assert float64.cosd(360.0) == 1.0

    def test_tand(self):
        assert float64.tand(45.0) == pytest.approx(1.0, abs=1e-15)

    def test_cscd(self):
        assert float64.cscd(90.0) == 1.0

    def test_secd(self):
        assert float64.secd(180.0) == -1.0

    def test_cotd(self):
        assert float64.cotd(45.0) == pytest.approx(1.0, abs=1e-15)


class TestInverseCircularDegrees:
    """Test the degree-result inverse circular functions."""

    def test_asind(self):
        assert float64.asind(float64.sind(90.0)) == 90.0

    def test_acosd(self):
        assert float64.acosd(float64.cosd(45.0)) == 45.0

    def test_atand(self):
        assert float64.atand(float64.tand(30.0)) == pytest.approx(30.0, abs=1e-14)

    def test_acscd(self):
        assert float64.acscd(float64.cscd(90.0)) == 90.0

    def test_asecd(self):
        assert float64.asecd(float64.secd(45.0)) == 45.0

    def test_acotd(self):
        assert float64.acotd(float64.cotd(30.0)) == pytest.approx(30.0, abs=1e-14)

    def test_atan2d(self):
        assert float64.atan2d(-3.0, 3.0) == pytest.approx(-45.0, abs=1e-12)
        assert float64.atan2d(3.0, -3.0) == pytest.approx(135.0, abs=1e-12)


class TestHyperbolic:
    """Test sinh, cosh, tanh and their reciprocals."""

    def test_sinh(self):
        assert float64.sinh(1.0) == pytest.approx((E**2 - 1) / (2 * E), rel=1e-14)

    def test_cosh(self):
        assert float64.cosh(1.0) == pytest.approx((E**2 + 1) / (2 * E), rel=1e-14)

    def test_tanh(self):
        assert float64.tanh(1.0) == pytest.approx((E**2 - 1) / (E**2 + 1), rel=1e-14)

    def test_csch(self):
        assert float64.csch(1.0) == pytest.approx(2 * E / (E**2 - 1), rel=1e-14)

    def test_sech(self):
        assert float64.sech(0.0) == 1.0
        assert float64.sech(1.0) == pytest.approx(2 * E / (E**2 + 1), rel=1e-14)

    def test_coth(self):
        assert float64.coth(1.0) == pytest.approx((E**2 + 1) / (E**2 - 1), rel=1e-14)


class TestInverseHyperbolic:
    """Test asinh, acosh, atanh and the inverse reciprocals."""

    def test_asinh(self):
        assert float64.asinh(float64.sinh(1.0)) == pytest.approx(1.0, abs=1e-15)

    def test_acosh(self):
        assert float64.acosh(1.0) == 0.0
        assert float64.acosh(float64.cosh(2.0)) == pytest.approx(2.0, abs=1e-14)

    def test_atanh(self):
        assert float64.atanh(float64.tanh(0.5)) == pytest.approx(0.5, abs=1e-15)

    def test_acsch(self):
        assert float64.acsch(float64.csch(0.5)) == pytest.approx(0.5, abs=1e-14)

    def test_asech(self):
        assert float64.asech(1.0) == 0.0
        assert float64.asech(float64.sech(0.5)) == pytest.approx(0.5, abs=1e-14)

    def test_acoth(self):
        assert float64.acoth(float64.coth(0.5)) == pytest.approx(0.5, abs=1e-14)


class TestDomainViolations:
    """Out-of-domain arguments give NaN or signed infinity, never an error."""

    def test_asin_outside_unit_interval(self):
        assert math.isnan(float64.asin(2.0))

    def test_acosh_below_one(self):
        assert math.isnan(float64.acosh(0.5))

    def test_cot_at_zero(self):
        assert float64.cot(0.0) == math.inf
        assert float64.cot(-0.0) == -math.inf

    def test_csch_and_coth_at_zero(self):
        assert float64.csch(0.0) == math.inf
        assert float64.coth(-0.0) == -math.inf

    def test_acsch_at_zero(self):
        """1/0 is +inf, and asinh(inf) is inf."""
        assert float64.acsch(0.0) == math.inf

    def test_atanh_at_one(self):
        assert float64.atanh(1.0) == math.inf
        assert float64.atanh(-1.0) == -math.inf

    def test_inverse_reciprocal_inside_unit_interval(self):
        assert math.isnan(float64.acsc(0.5))
        assert math.isnan(float64.asec(-0.5))
        assert math.isnan(float64.asecd(0.25))

    def test_acot_at_zero(self):
        assert float64.acot(0.0) == pytest.approx(PI / 2)
        assert float64.acot(-0.0) == pytest.approx(-PI / 2)

    def test_infinity_and_nan_propagate(self):
        assert math.isnan(float64.sin(math.inf))
        assert math.isnan(float64.tand(math.nan))
        assert float64.tanh(math.inf) == 1.0
        assert float64.atan(-math.inf) == pytest.approx(-PI / 2)

    @pytest.mark.filterwarnings("error")
    def test_no_runtime_warnings(self):
        float64.asin(2.0)
        float64.acosh(0.5)
        float64.cot(0.0)
        float64.acoth(0.0)
        float64.sinh(1e6)


class TestResultsAndCoercion:
    """Results are float64 scalars; arguments must be real scalars."""

    def test_result_type(self):
        result = float64.sin(1)
        assert isinstance(result, np.float64)
        assert isinstance(result, float)

    def test_accepts_numpy_scalars(self):
        assert float64.sind(np.float32(90.0)) == 1.0
        assert float64.cosd(np.int64(0)) == 1.0

    @pytest.mark.parametrize("bad", ["1.0", None, [1.0], np.array([1.0, 2.0])])
    def test_rejects_non_scalars(self, bad):
        with pytest.raises(TypeError, match="real scalars"):
            float64.sin(bad)

    def test_atan2_rejects_non_scalar_x(self):
        with pytest.raises(TypeError):
            float64.atan2(1.0, "x")

    def test_huge_integers_become_infinity(self):
        assert math.isnan(float64.sin(10**400))
        assert float64.deg2rad(10**400) == math.inf
        assert float64.rad2deg(-(10**400)) == -math.inf
        assert float64.atan(-(10**400)) == pytest.approx(-PI / 2)
