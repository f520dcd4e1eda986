"""
Text conversions для exactdec

Грамматика литералов, разбор строк/int/float и каноническое форматирование.
"""

# Literal Grammar
from src.exactdec.text.grammar import (
    LiteralMatch,
    LiteralShape,
    classify,
    normalize,
)

# Parser
from src.exactdec.text.parser import (
    from_float,
    from_int,
    parse,
    to_decimal,
)

# Formatter
from src.exactdec.text.formatter import (
    to_eng_string,
    to_string,
)

__all__ = [
    # Literal Grammar
    "LiteralMatch",
    "LiteralShape",
    "classify",
    "normalize",
    # Parser
    "from_float",
    "from_int",
    "parse",
    "to_decimal",
    # Formatter
    "to_eng_string",
    "to_string",
]
