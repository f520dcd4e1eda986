"""
Domain models and value objects.

Contains the decimal value representation (Finite / Infinity / NotANumber),
Sign, Context and the engine errors.
"""

from src.exactdec.domain.context import (
    DEFAULT_E_MAX,
    DEFAULT_E_MIN,
    DEFAULT_PRECISION,
    Context,
    RoundingMode,
    default_context,
)
from src.exactdec.domain.errors import DecimalError, InvalidLiteral, UndefinedComparison
from src.exactdec.domain.sign import Sign
from src.exactdec.domain.value import (
    NAN,
    NEG_INF,
    ONE,
    POS_INF,
    VALUE_TYPES,
    ZERO,
    DecimalValue,
    Finite,
    Infinity,
    NotANumber,
    absolute,
    adjusted,
    adjusted_exponent,
    from_dict,
    is_finite,
    is_infinite,
    is_nan,
    is_zero,
    negate,
    sign_of,
    to_bool,
    to_dict,
    to_tuple,
)

__all__ = [
    # Sign
    "Sign",
    # Value model
    "DecimalValue",
    "Finite",
    "Infinity",
    "NotANumber",
    "VALUE_TYPES",
    # Constants
    "ZERO",
    "ONE",
    "POS_INF",
    "NEG_INF",
    "NAN",
    # Unary helpers
    "absolute",
    "adjusted",
    "adjusted_exponent",
    "is_finite",
    "is_infinite",
    "is_nan",
    "is_zero",
    "negate",
    "sign_of",
    "to_bool",
    "to_tuple",
    # Serialization
    "to_dict",
    "from_dict",
    # Context
    "Context",
    "RoundingMode",
    "default_context",
    "DEFAULT_PRECISION",
    "DEFAULT_E_MIN",
    "DEFAULT_E_MAX",
    # Errors
    "DecimalError",
    "InvalidLiteral",
    "UndefinedComparison",
]
