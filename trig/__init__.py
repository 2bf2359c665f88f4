"""
trig - Additional trigonometric functions for NumPy floating-point scalars

Complete circular, reciprocal, degree-argument and hyperbolic function
families over float32 and float64:
- Per-width realizations with module-level free functions
- Width selection and dtype-driven dispatch
- Function catalog with domains and ranges
- Evaluation contexts (radians/degrees, YAML loading)
- TrigFloat values with receiver-style calls

Examples:
    >>> from trig import float64
    >>> float64.cot(0.0)
    np.float64(inf)
    >>> from trig import TrigFloat
    >>> TrigFloat(90.0).sind()
    TrigFloat(1.0, width=64)
"""

from . import float32, float64
from .capability import Trig
from .catalog import (
    CATALOG,
    AngleUnit,
    FunctionFamily,
    FunctionInfo,
    UnknownFunctionError,
    functions_in,
    get_function_info,
)
from .context import (
    Context,
    ToleranceConfig,
    get_context,
    get_current_context,
    set_current_context,
)
from .float32 import Float32Trig
from .float64 import Float64Trig
from .value import ToleranceMode, TrigFloat, fuzzy_compare
from .widths import FloatWidth, get_trig, trig_for, width_of

__all__ = [
    "float32",
    "float64",
    "Trig",
    "Float32Trig",
    "Float64Trig",
    "FloatWidth",
    "get_trig",
    "trig_for",
    "width_of",
    "CATALOG",
    "AngleUnit",
    "FunctionFamily",
    "FunctionInfo",
    "UnknownFunctionError",
    "functions_in",
    "get_function_info",
    "Context",
    "ToleranceConfig",
    "get_context",
    "get_current_context",
    "set_current_context",
    "ToleranceMode",
    "TrigFloat",
    "fuzzy_compare",
]
