"""
Function catalog for the Trig capability.

Describes every operation: its family, arity, the units it consumes and
produces, and its mathematical domain and range. Contexts use the catalog
to validate names and argument counts and to redirect radian functions to
their degree variants.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FunctionFamily(str, Enum):
    """Operation families of the call surface."""

    CIRCULAR = "circular"
    INVERSE_CIRCULAR = "inverse_circular"
    CIRCULAR_DEGREES = "circular_degrees"
    INVERSE_CIRCULAR_DEGREES = "inverse_circular_degrees"
    HYPERBOLIC = "hyperbolic"
    INVERSE_HYPERBOLIC = "inverse_hyperbolic"
    CONVERSION = "conversion"


class AngleUnit(str, Enum):
    """What a scalar means: an angle in radians or degrees, or a plain ratio."""

    RADIANS = "radians"
    DEGREES = "degrees"
    RATIO = "ratio"


class UnknownFunctionError(ValueError):
    """Raised when an operation name is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function: {name}")


class FunctionInfo(BaseModel):
    """Description of one operation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Operation name, e.g. 'sind'")
    family: FunctionFamily
    arity: int = Field(default=1, ge=1, le=2)
    input_unit: AngleUnit
    output_unit: AngleUnit
    domain: str = Field(description="Mathematical domain in plain text")
    range: str = Field(description="Mathematical range in plain text")
    degree_variant: str | None = Field(
        default=None,
        description="Degree-unit counterpart of a radian operation",
    )


_RAD = AngleUnit.RADIANS
_DEG = AngleUnit.DEGREES
_RATIO = AngleUnit.RATIO

_ALL_REALS = "(-inf, inf)"
_UNIT_INTERVAL = "[-1, 1]"
_OUTSIDE_UNIT = "(-inf, -1] U [1, inf)"
_NONZERO = "(-inf, 0) U (0, inf)"


def _entries() -> list[FunctionInfo]:
    circular = FunctionFamily.CIRCULAR
    inverse = FunctionFamily.INVERSE_CIRCULAR
    circular_deg = FunctionFamily.CIRCULAR_DEGREES
    inverse_deg = FunctionFamily.INVERSE_CIRCULAR_DEGREES
    hyperbolic = FunctionFamily.HYPERBOLIC
    inverse_hyp = FunctionFamily.INVERSE_HYPERBOLIC
    conversion = FunctionFamily.CONVERSION

    return [
        # Circular (radians)
        FunctionInfo(name="sin", family=circular, input_unit=_RAD, output_unit=_RATIO,
                     domain=_ALL_REALS, range=_UNIT_INTERVAL, degree_variant="sind"),
        FunctionInfo(name="cos", family=circular, input_unit=_RAD, output_unit=_RATIO,
                     domain=_ALL_REALS, range=_UNIT_INTERVAL, degree_variant="cosd"),
        FunctionInfo(name="tan", family=circular, input_unit=_RAD, output_unit=_RATIO,
                     domain="R \\ {pi/2 + n*pi}", range=_ALL_REALS, degree_variant="tand"),
        FunctionInfo(name="csc", family=circular, input_unit=_RAD, output_unit=_RATIO,
                     domain="R \\ {n*pi}", range=_OUTSIDE_UNIT, degree_variant="cscd"),
        FunctionInfo(name="sec", family=circular, input_unit=_RAD, output_unit=_RATIO,
                     domain="R \\ {pi/2 + n*pi}", range=_OUTSIDE_UNIT, degree_variant="secd"),
        FunctionInfo(name="cot", family=circular, input_unit=_RAD, output_unit=_RATIO,
                     domain="R \\ {n*pi}", range=_ALL_REALS, degree_variant="cotd"),
        # Inverse circular (radians)
        FunctionInfo(name="asin", family=inverse, input_unit=_RATIO, output_unit=_RAD,
                     domain=_UNIT_INTERVAL, range="[-pi/2, pi/2]", degree_variant="asind"),
        FunctionInfo(name="acos", family=inverse, input_unit=_RATIO, output_unit=_RAD,
                     domain=_UNIT_INTERVAL, range="[0, pi]", degree_variant="acosd"),
        FunctionInfo(name="atan", family=inverse, input_unit=_RATIO, output_unit=_RAD,
                     domain=_ALL_REALS, range="(-pi/2, pi/2)", degree_variant="atand"),
        FunctionInfo(name="atan2", family=inverse, arity=2, input_unit=_RATIO, output_unit=_RAD,
                     domain="(y, x) in R^2", range="[-pi, pi]", degree_variant="atan2d"),
        FunctionInfo(name="acsc", family=inverse, input_unit=_RATIO, output_unit=_RAD,
                     domain=_OUTSIDE_UNIT, range="[-pi/2, 0) U (0, pi/2]", degree_variant="acscd"),
        FunctionInfo(name="asec", family=inverse, input_unit=_RATIO, output_unit=_RAD,
                     domain=_OUTSIDE_UNIT, range="[0, pi/2) U (pi/2, pi]", degree_variant="asecd"),
        FunctionInfo(name="acot", family=inverse, input_unit=_RATIO, output_unit=_RAD,
                     domain=_ALL_REALS, range="(-pi/2, 0) U (0, pi/2]", degree_variant="acotd"),
        # Circular (degrees)
        FunctionInfo(name="sind", family=circular_deg, input_unit=_DEG, output_unit=_RATIO,
                     domain=_ALL_REALS, range=_UNIT_INTERVAL),
        FunctionInfo(name="cosd", family=circular_deg, input_unit=_DEG, output_unit=_RATIO,
                     domain=_ALL_REALS, range=_UNIT_INTERVAL),
        FunctionInfo(name="tand", family=circular_deg, input_unit=_DEG, output_unit=_RATIO,
                     domain="R \\ {90 + 180n}", range=_ALL_REALS),
        FunctionInfo(name="cscd", family=circular_deg, input_unit=_DEG, output_unit=_RATIO,
                     domain="R \\ {180n}", range=_OUTSIDE_UNIT),
        FunctionInfo(name="secd", family=circular_deg, input_unit=_DEG, output_unit=_RATIO,
                     domain="R \\ {90 + 180n}", range=_OUTSIDE_UNIT),
        FunctionInfo(name="cotd", family=circular_deg, input_unit=_DEG, output_unit=_RATIO,
                     domain="R \\ {180n}", range=_ALL_REALS),
        # Inverse circular (degrees)
        FunctionInfo(name="asind", family=inverse_deg, input_unit=_RATIO, output_unit=_DEG,
                     domain=_UNIT_INTERVAL, range="[-90, 90]"),
        FunctionInfo(name="acosd", family=inverse_deg, input_unit=_RATIO, output_unit=_DEG,
                     domain=_UNIT_INTERVAL, range="[0, 180]"),
        FunctionInfo(name="atand", family=inverse_deg, input_unit=_RATIO, output_unit=_DEG,
                     domain=_ALL_REALS, range="(-90, 90)"),
        FunctionInfo(name="atan2d", family=inverse_deg, arity=2, input_unit=_RATIO,
                     output_unit=_DEG, domain="(y, x) in R^2", range="[-180, 180]"),
        FunctionInfo(name="acscd", family=inverse_deg, input_unit=_RATIO, output_unit=_DEG,
                     domain=_OUTSIDE_UNIT, range="[-90, 0) U (0, 90]"),
        FunctionInfo(name="asecd", family=inverse_deg, input_unit=_RATIO, output_unit=_DEG,
                     domain=_OUTSIDE_UNIT, range="[0, 90) U (90, 180]"),
        FunctionInfo(name="acotd", family=inverse_deg, input_unit=_RATIO, output_unit=_DEG,
                     domain=_ALL_REALS, range="(-90, 0) U (0, 90]"),
        # Hyperbolic
        FunctionInfo(name="sinh", family=hyperbolic, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_ALL_REALS, range=_ALL_REALS),
        FunctionInfo(name="cosh", family=hyperbolic, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_ALL_REALS, range="[1, inf)"),
        FunctionInfo(name="tanh", family=hyperbolic, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_ALL_REALS, range="(-1, 1)"),
        FunctionInfo(name="csch", family=hyperbolic, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_NONZERO, range=_NONZERO),
        FunctionInfo(name="sech", family=hyperbolic, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_ALL_REALS, range="(0, 1]"),
        FunctionInfo(name="coth", family=hyperbolic, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_NONZERO, range="(-inf, -1) U (1, inf)"),
        # Inverse hyperbolic
        FunctionInfo(name="asinh", family=inverse_hyp, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_ALL_REALS, range=_ALL_REALS),
        FunctionInfo(name="acosh", family=inverse_hyp, input_unit=_RATIO, output_unit=_RATIO,
                     domain="[1, inf)", range="[0, inf)"),
        FunctionInfo(name="atanh", family=inverse_hyp, input_unit=_RATIO, output_unit=_RATIO,
                     domain="(-1, 1)", range=_ALL_REALS),
        FunctionInfo(name="acsch", family=inverse_hyp, input_unit=_RATIO, output_unit=_RATIO,
                     domain=_NONZERO, range=_NONZERO),
        FunctionInfo(name="asech", family=inverse_hyp, input_unit=_RATIO, output_unit=_RATIO,
                     domain="(0, 1]", range="[0, inf)"),
        FunctionInfo(name="acoth", family=inverse_hyp, input_unit=_RATIO, output_unit=_RATIO,
                     domain="(-inf, -1) U (1, inf)", range=_NONZERO),
        # Conversions
        FunctionInfo(name="deg2rad", family=conversion, input_unit=_DEG, output_unit=_RAD,
                     domain=_ALL_REALS, range=_ALL_REALS),
        FunctionInfo(name="rad2deg", family=conversion, input_unit=_RAD, output_unit=_DEG,
                     domain=_ALL_REALS, range=_ALL_REALS),
    ]


CATALOG: dict[str, FunctionInfo] = {info.name: info for info in _entries()}


def get_function_info(name: str) -> FunctionInfo:
    """
    Look up an operation by name.

    Raises:
        UnknownFunctionError: If name is not a catalog operation
    """
    try:
        return CATALOG[name]
    except KeyError:
        raise UnknownFunctionError(name) from None


def functions_in(family: FunctionFamily | str) -> list[str]:
    """Names of the operations in a family, in catalog order."""
    family = FunctionFamily(family)
    return [name for name, info in CATALOG.items() if info.family is family]
