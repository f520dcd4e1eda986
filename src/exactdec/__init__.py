"""
exactdec — точные десятичные значения произвольной точности.

Представление (Finite / Infinity / NotANumber), разбор литералов,
каноническое форматирование, полный порядок и округление с восемью
политиками. Все значения immutable, все операции — чистые функции.
"""

from src.exactdec.domain import (
    NAN,
    NEG_INF,
    ONE,
    POS_INF,
    ZERO,
    Context,
    DecimalError,
    DecimalValue,
    Finite,
    Infinity,
    InvalidLiteral,
    NotANumber,
    RoundingMode,
    Sign,
    UndefinedComparison,
    absolute,
    adjusted,
    default_context,
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
from src.exactdec.math import (
    Round,
    RoundingDecision,
    compare,
    eq,
    ge,
    gt,
    le,
    lt,
    quantize,
    rescale,
    sort_key,
)
from src.exactdec.text import (
    from_float,
    from_int,
    parse,
    to_decimal,
    to_eng_string,
    to_string,
)

__all__ = [
    # Model
    "DecimalValue",
    "Finite",
    "Infinity",
    "NotANumber",
    "Sign",
    "ZERO",
    "ONE",
    "POS_INF",
    "NEG_INF",
    "NAN",
    # Unary helpers
    "absolute",
    "adjusted",
    "is_finite",
    "is_infinite",
    "is_nan",
    "is_zero",
    "negate",
    "sign_of",
    "to_bool",
    "to_tuple",
    "to_dict",
    "from_dict",
    # Context
    "Context",
    "RoundingMode",
    "default_context",
    # Errors
    "DecimalError",
    "InvalidLiteral",
    "UndefinedComparison",
    # Text
    "parse",
    "from_int",
    "from_float",
    "to_decimal",
    "to_string",
    "to_eng_string",
    # Comparator
    "compare",
    "lt",
    "gt",
    "le",
    "ge",
    "eq",
    "sort_key",
    # Rounding
    "Round",
    "RoundingDecision",
    "rescale",
    "quantize",
]
