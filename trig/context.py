"""
Context system for trig evaluation.

A context fixes the environment in which operations are called by name:
- Floating-point width (32 or 64 bit)
- Angle unit (radians, or degrees as in the TrigDegrees context)
- Tolerances for fuzzy comparison
- Free-form flags

Contexts can be built from the standard factories or loaded from YAML:

    name: Survey
    width: 32
    angle_unit: degrees
    tolerances:
      relative: 1.0e-5
      absolute: 1.0e-6
    flags:
      source: theodolite
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import numpy as np
import yaml

from .capability import Trig
from .catalog import AngleUnit, FunctionInfo, get_function_info
from .value import ToleranceMode, fuzzy_compare
from .widths import FloatWidth, get_trig

logger = logging.getLogger(__name__)


@dataclass
class ToleranceConfig:
    """Tolerance settings for fuzzy comparison. Defaults match float64."""

    relative: float = 1e-15
    absolute: float = 1e-15

    @classmethod
    def for_width(cls, width: FloatWidth | int | str) -> "ToleranceConfig":
        """Relative and absolute tolerance both set to the width's round-trip tolerance."""
        tol = get_trig(width).tolerance
        return cls(relative=tol, absolute=tol)


def _parse_angle_unit(value: Any) -> AngleUnit:
    try:
        unit = AngleUnit(value)
    except ValueError:
        raise ValueError(f"Unknown angle unit: {value!r}") from None
    if unit is AngleUnit.RATIO:
        raise ValueError("Context angle unit must be 'radians' or 'degrees'")
    return unit


@dataclass
class Context:
    """
    Evaluation environment for trig operations.

    The angle unit and the ``trigInDegrees`` flag are kept in step; use
    set_flag("trigInDegrees", ...) to switch units after construction.

    Attributes:
        name: Context name (e.g., "Numeric", "Single", "TrigDegrees")
        width: Floating-point width used for evaluation
        angle_unit: RADIANS, or DEGREES to redirect sin -> sind etc.
        tolerances: Fuzzy comparison tolerances (None = the width's default)
        flags: Additional context-specific flags
    """

    name: str
    width: FloatWidth = FloatWidth.DOUBLE
    angle_unit: AngleUnit = AngleUnit.RADIANS
    tolerances: Optional[ToleranceConfig] = None
    flags: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.width = FloatWidth.parse(self.width)
        self.angle_unit = _parse_angle_unit(self.angle_unit)
        if self.tolerances is None:
            self.tolerances = ToleranceConfig.for_width(self.width)
        if self.flags.get("trigInDegrees"):
            self.angle_unit = AngleUnit.DEGREES
        self.flags["trigInDegrees"] = self.angle_unit is AngleUnit.DEGREES

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Context":
        """
        Load context from YAML file.

        Missing tolerances fall back to the width's default.

        Args:
            path: Path to YAML configuration file

        Returns:
            Context instance
        """
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        width = FloatWidth.parse(data.get("width", FloatWidth.DOUBLE))
        tol_data = data.get("tolerances") or {}
        default_tol = ToleranceConfig.for_width(width)
        tolerances = ToleranceConfig(
            relative=float(tol_data.get("relative", default_tol.relative)),
            absolute=float(tol_data.get("absolute", default_tol.absolute)),
        )

        context = cls(
            name=data["name"],
            width=width,
            angle_unit=data.get("angle_unit", AngleUnit.RADIANS),
            tolerances=tolerances,
            flags=data.get("flags") or {},
        )
        logger.debug("Loaded context %r from %s", context.name, path)
        return context

    @classmethod
    def numeric(cls) -> "Context":
        """Standard double-precision context in radians."""
        return cls(name="Numeric")

    @classmethod
    def single(cls) -> "Context":
        """Single-precision context in radians."""
        return cls(name="Single", width=FloatWidth.SINGLE)

    @classmethod
    def trig_degrees(cls) -> "Context":
        """Double-precision context where trig functions take degrees."""
        return cls(name="TrigDegrees", angle_unit=AngleUnit.DEGREES)

    @property
    def trig(self) -> Trig:
        """Realization for this context's width."""
        return get_trig(self.width)

    @property
    def in_degrees(self) -> bool:
        return bool(self.get_flag("trigInDegrees", False))

    def get_flag(self, flag_name: str, default: Any = None) -> Any:
        """Value of a flag, or default when the flag is unset."""
        return self.flags.get(flag_name, default)

    def set_flag(self, flag_name: str, value: Any) -> None:
        """
        Set a flag.

        ``trigInDegrees`` also switches the angle unit, so resolution
        follows it immediately.
        """
        self.flags[flag_name] = value
        if flag_name == "trigInDegrees":
            self.angle_unit = AngleUnit.DEGREES if value else AngleUnit.RADIANS
            logger.debug("Context %r: angle unit set to %s", self.name, self.angle_unit.value)

    def resolve(self, name: str) -> FunctionInfo:
        """
        Resolve an operation name in this context.

        In a degree context radian operations with a degree variant are
        redirected (sin -> sind, atan2 -> atan2d). Explicit degree names and
        hyperbolic functions resolve to themselves.

        Raises:
            UnknownFunctionError: If name is not a catalog operation
        """
        info = get_function_info(name)
        if self.in_degrees and info.degree_variant is not None:
            logger.debug("Context %r: %s -> %s", self.name, name, info.degree_variant)
            return get_function_info(info.degree_variant)
        return info

    def function(self, name: str) -> Callable[..., np.floating]:
        """Bound realization method for a name resolved in this context."""
        return getattr(self.trig, self.resolve(name).name)

    def evaluate(self, name: str, *args: Any) -> np.floating:
        """
        Evaluate an operation by name.

        Examples:
            >>> Context.trig_degrees().evaluate("sin", 90.0)
            np.float64(1.0)
            >>> Context.numeric().evaluate("atan2", -3.0, 3.0)   # -pi/4

        Raises:
            UnknownFunctionError: If name is not a catalog operation
            TypeError: If the number of arguments does not match
        """
        info = self.resolve(name)
        if len(args) != info.arity:
            raise TypeError(f"{name}() takes {info.arity} argument(s), got {len(args)}")
        return getattr(self.trig, info.name)(*args)

    def is_close(self, a: Any, b: Any, mode: str = ToleranceMode.RELATIVE) -> bool:
        """
        Compare two results with this context's tolerances.

        Args:
            a: First value
            b: Second value
            mode: "relative" (uses tolerances.relative) or "absolute"
        """
        if mode == ToleranceMode.ABSOLUTE:
            tolerance = self.tolerances.absolute
        else:
            tolerance = self.tolerances.relative
        return fuzzy_compare(float(a), float(b), tolerance, mode)

    def __repr__(self):
        return f"Context('{self.name}')"


_FACTORIES: Dict[str, Callable[[], Context]] = {
    "Numeric": Context.numeric,
    "Single": Context.single,
    "TrigDegrees": Context.trig_degrees,
}

# Global context registry (named contexts are created once)
_contexts: Dict[str, Context] = {}
_current_context: Optional[Context] = None


def get_context(name: Optional[str] = None) -> Context:
    """
    Get or set the current context.

    Args:
        name: Context name to switch to (None = get current)

    Returns:
        Current context

    Examples:
        >>> ctx = get_context('TrigDegrees')  # Switch to TrigDegrees
        >>> ctx = get_context()               # Get current context
    """
    global _current_context

    if name is None:
        if _current_context is None:
            _current_context = _create_context("Numeric")
        return _current_context

    if name not in _contexts:
        _create_context(name)

    _current_context = _contexts[name]
    logger.debug("Switched to context %r", name)
    return _current_context


def _create_context(name: str) -> Context:
    factory = _FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Unknown context: {name}")
    ctx = factory()
    _contexts[name] = ctx
    return ctx


def get_current_context() -> Context:
    """
    Get the current context.

    Returns:
        Current context (creates Numeric if none exists)
    """
    return get_context()


def set_current_context(context: Context) -> Context:
    """
    Make a context current, registering it under its name.

    Returns:
        The context, now current
    """
    global _current_context

    _contexts[context.name] = context
    _current_context = context
    logger.debug("Switched to context %r", context.name)
    return context
