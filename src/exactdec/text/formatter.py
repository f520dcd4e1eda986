"""
Formatter — каноническая строка DecimalValue

Выбор раскладки для конечных значений:
- обычная запись без экспоненты, если exponent <= 0 и старшая цифра
  не дальше 6 позиций справа от точки
- научная запись: одна цифра слева от точки
- инженерная запись: exponent кратен 3

Специальные значения: Infinity → '[-]Infinity', NaN → 'NaN'.
"""

from typing import Optional

from src.exactdec.domain.context import Context, default_context
from src.exactdec.domain.value import DecimalValue, Finite, Infinity


def _dotplace(coefficient: str, exponent: int, engineering: bool) -> int:
    leftdigits = exponent + len(coefficient)

    if exponent <= 0 and leftdigits > -6:
        # Экспонента не нужна
        return leftdigits
    if not engineering:
        return 1
    if coefficient == "0":
        return (leftdigits + 1) % 3 - 1
    return (leftdigits - 1) % 3 + 1


def _format_finite(value: Finite, capitals: bool, engineering: bool) -> str:
    coefficient = value.coefficient
    leftdigits = value.exponent + len(coefficient)
    dotplace = _dotplace(coefficient, value.exponent, engineering)

    if dotplace <= 0:
        intpart = "0"
        fracpart = "." + "0" * -dotplace + coefficient
    elif dotplace >= len(coefficient):
        intpart = coefficient + "0" * (dotplace - len(coefficient))
        fracpart = ""
    else:
        intpart = coefficient[:dotplace]
        fracpart = "." + coefficient[dotplace:]

    exp = leftdigits - dotplace
    if exp == 0:
        suffix = ""
    else:
        suffix = ("E" if capitals else "e") + ("+" if exp > 0 else "-") + str(abs(exp))

    return value.sign.glyph + intpart + fracpart + suffix


def to_string(
    value: DecimalValue,
    capitals: Optional[bool] = None,
    engineering: bool = False,
    context: Optional[Context] = None,
) -> str:
    """
    Каноническая строка значения.

    Args:
        value: Любое значение
        capitals: 'E' или 'e'; если None — берётся из context
        engineering: Инженерная запись (exponent кратен 3)
        context: Источник capitals (default_context() если не задан)

    Returns:
        [sign]digits[.digits][E[sign]digits]

    Examples:
        >>> from src.exactdec.text.parser import parse
        >>> to_string(parse("123.456"))
        '123.456'
        >>> to_string(parse("1.5e3"))
        '1.5E+3'
        >>> to_string(parse("1.5e3"), capitals=False)
        '1.5e+3'
        >>> to_string(parse("0.000000123"))
        '1.23E-7'
    """
    if capitals is None:
        capitals = (context or default_context()).capitals

    if isinstance(value, Finite):
        return _format_finite(value, capitals, engineering)
    if isinstance(value, Infinity):
        return value.sign.glyph + "Infinity"
    return "NaN"


def to_eng_string(
    value: DecimalValue,
    capitals: Optional[bool] = None,
    context: Optional[Context] = None,
) -> str:
    """
    Инженерная запись.

    Examples:
        >>> from src.exactdec.text.parser import parse
        >>> to_eng_string(parse("1.5e4"))
        '15E+3'
    """
    return to_string(value, capitals=capitals, engineering=True, context=context)
