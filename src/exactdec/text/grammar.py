"""
Literal Grammar — формы текстовых литералов

Пять взаимоисключающих форм, проверяемых в порядке приоритета против
нормализованной строки (целиком, fullmatch):

1. WHOLE:       [sign]digits[.]
2. FRACTIONAL:  [sign][digits].digits
3. EXPONENTIAL: [sign][digits][.digits][Ee][sign]digits (хотя бы одна цифра мантиссы)
4. INFINITY:    [sign]Inf | [sign]Infinity (регистр не важен)
5. NAN:         NaN (регистр не важен, без знака)

Нормализация (до сопоставления):
- trim пробельных символов
- удаление всех '_' (разделители групп цифр)
- удаление ведущих нулей в начале строки, если за ними следует цифра или точка
"""

import re
from enum import Enum
from typing import Final, NamedTuple, Optional, Tuple


# =============================================================================
# ФОРМЫ ЛИТЕРАЛОВ
# =============================================================================


class LiteralShape(str, Enum):
    """Форма литерала"""

    WHOLE = "whole"
    FRACTIONAL = "fractional"
    EXPONENTIAL = "exponential"
    INFINITY = "infinity"
    NAN = "nan"


_SIGN: Final[str] = r"(?P<sign>[-+]?)"

WHOLE_RE: Final[re.Pattern[str]] = re.compile(_SIGN + r"(?P<int>[0-9]+)\.?")

FRACTIONAL_RE: Final[re.Pattern[str]] = re.compile(_SIGN + r"(?P<int>[0-9]*)\.(?P<frac>[0-9]+)")

# Lookahead: мантисса содержит хотя бы одну цифру ("1E2", ".5e1", "1.e2"; не ".e2")
EXPONENTIAL_RE: Final[re.Pattern[str]] = re.compile(
    _SIGN + r"(?=\.?[0-9])(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?[Ee](?P<exp>[-+]?[0-9]+)"
)

INFINITY_RE: Final[re.Pattern[str]] = re.compile(_SIGN + r"inf(?:inity)?", re.IGNORECASE)

NAN_RE: Final[re.Pattern[str]] = re.compile(r"nan", re.IGNORECASE)

# Порядок приоритета
SHAPES: Final[Tuple[Tuple[LiteralShape, re.Pattern[str]], ...]] = (
    (LiteralShape.WHOLE, WHOLE_RE),
    (LiteralShape.FRACTIONAL, FRACTIONAL_RE),
    (LiteralShape.EXPONENTIAL, EXPONENTIAL_RE),
    (LiteralShape.INFINITY, INFINITY_RE),
    (LiteralShape.NAN, NAN_RE),
)

_LEADING_ZEROS_RE: Final[re.Pattern[str]] = re.compile(r"^0+(?=[0-9.])")


# =============================================================================
# РАЗБОР
# =============================================================================


class LiteralMatch(NamedTuple):
    """
    Результат сопоставления строки с формой литерала.

    Для INFINITY/NAN цифровые поля пусты, exponent = 0.
    """

    shape: LiteralShape
    sign: str
    integer_digits: str
    fraction_digits: str
    exponent: int


def normalize(text: str) -> str:
    """
    Нормализация строки перед сопоставлением.

    Examples:
        >>> normalize("  1_000.5 ")
        '1000.5'
        >>> normalize("007.5")
        '7.5'
        >>> normalize("00.5")
        '.5'
        >>> normalize("000")
        '0'
    """
    text = text.strip().replace("_", "")
    return _LEADING_ZEROS_RE.sub("", text, count=1)


def classify(text: str) -> Optional[LiteralMatch]:
    """
    Сопоставление нормализованной строки с формами литералов.

    Args:
        text: Строка после normalize()

    Returns:
        LiteralMatch первой подошедшей формы или None
    """
    for shape, pattern in SHAPES:
        match = pattern.fullmatch(text)
        if match is None:
            continue

        groups = match.groupdict()
        exponent = groups.get("exp")
        return LiteralMatch(
            shape=shape,
            sign=groups.get("sign") or "",
            integer_digits=groups.get("int") or "",
            fraction_digits=groups.get("frac") or "",
            exponent=int(exponent) if exponent else 0,
        )

    return None
