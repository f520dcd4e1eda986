"""
Core math modules для exactdec

Сравнение значений и округление (rescale/quantize) с восемью политиками.
"""

# Comparator
from src.exactdec.math.comparison import (
    compare,
    eq,
    ge,
    gt,
    le,
    lt,
    sort_key,
)

# Rounding Engine
from src.exactdec.math.rounding import (
    Round,
    RoundingDecision,
    RoundingPolicy,
    increment_digits,
    quantize,
    rescale,
)

__all__ = [
    # Comparator
    "compare",
    "eq",
    "ge",
    "gt",
    "le",
    "lt",
    "sort_key",
    # Rounding Engine — Types
    "Round",
    "RoundingDecision",
    "RoundingPolicy",
    # Rounding Engine — Functions
    "increment_digits",
    "quantize",
    "rescale",
]
