"""
Parser — построение DecimalValue из внешнего ввода

- parse(text): строковый литерал через Literal Grammar
- from_int(n): целое число, exponent = 0
- from_float(x): IEEE float через кратчайшее round-trip представление repr()
- to_decimal(x): диспетчер по типу входа

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая строка (после нормализации) и "0" дают канонический ZERO
2. Нераспознанный литерал → InvalidLiteral с нормализованной строкой
3. float без дробных цифр в repr() получает exponent из своей
   экспоненты (для 1e+22 это 22), а не 1
"""

import logging
import math
from typing import Final, Union

from src.exactdec.domain.errors import InvalidLiteral
from src.exactdec.domain.sign import Sign
from src.exactdec.domain.value import (
    NAN,
    NEG_INF,
    POS_INF,
    VALUE_TYPES,
    ZERO,
    DecimalValue,
    Finite,
    Infinity,
)
from src.exactdec.text.grammar import LiteralMatch, LiteralShape, classify, normalize

logger = logging.getLogger(__name__)

# Порог, ниже которого str(int) работает без ограничения на длину
_DIRECT_DIGITS: Final[int] = 1000
_LOG10_2: Final[float] = math.log10(2)


def _int_digits(value: int) -> str:
    """
    Десятичные цифры неотрицательного int без лимита str(int).

    Число делится пополам по степени 10, младшая половина дополняется
    нулями слева до полной длины.

    Examples:
        >>> _int_digits(1234)
        '1234'
        >>> len(_int_digits(10 ** 5000))
        5001
    """
    estimate = int(value.bit_length() * _LOG10_2)
    if estimate <= _DIRECT_DIGITS:
        return str(value)

    half = estimate // 2
    high, low = divmod(value, 10**half)
    return _int_digits(high) + _int_digits(low).zfill(half)


def _finite_from_match(sign: Sign, match: LiteralMatch) -> Finite:
    # WHOLE: fraction_digits пуст → exponent = 0
    return Finite(
        sign=sign,
        coefficient=(match.integer_digits or "0") + match.fraction_digits,
        exponent=match.exponent - len(match.fraction_digits),
    )


def parse(text: str) -> DecimalValue:
    """
    Разбор строкового литерала.

    Args:
        text: Литерал ('123.456', '-1.5e3', '1_000', 'Infinity', 'nan', ...)

    Returns:
        Finite, Infinity или NotANumber

    Raises:
        InvalidLiteral: Если строка не соответствует ни одной форме

    Examples:
        >>> parse("123.456")
        Finite(kind='finite', sign=<Sign.POSITIVE: '+'>, coefficient='123456', exponent=-3)
    """
    value = normalize(text)
    if value in ("", "0"):
        return ZERO

    try:
        match = classify(value)
    except ValueError as exc:
        # exponent длиннее лимита int(str)
        logger.debug("rejected literal %r: %s", text, exc)
        raise InvalidLiteral(value) from exc

    if match is None:
        logger.debug("rejected literal %r (normalized %r)", text, value)
        raise InvalidLiteral(value)

    if match.shape is LiteralShape.NAN:
        return NAN

    sign = Sign.of_string(match.sign)
    if match.shape is LiteralShape.INFINITY:
        return Infinity(sign=sign)

    return _finite_from_match(sign, match)


def from_int(value: int) -> Finite:
    """
    Точное представление целого числа.

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"from_int expects int, got {type(value).__name__}")

    return Finite(sign=Sign.of_int(value), coefficient=_int_digits(abs(value)), exponent=0)


def from_float(value: float) -> DecimalValue:
    """
    Преобразование IEEE float.

    Используется кратчайшее десятичное представление, которое
    восстанавливает тот же float (repr), а не точное двоичное значение:
    from_float(0.1) == parse("0.1").

    Args:
        value: float (в том числе nan, inf, -inf, -0.0)

    Returns:
        NaN/±Infinity для специальных, ZERO для 0.0 и -0.0,
        иначе Finite с цифрами repr(abs(value))

    Raises:
        TypeError: Если value не float

    Examples:
        >>> from_float(1.5)
        Finite(kind='finite', sign=<Sign.POSITIVE: '+'>, coefficient='15', exponent=-1)
        >>> from_float(1e22)
        Finite(kind='finite', sign=<Sign.POSITIVE: '+'>, coefficient='1', exponent=22)
    """
    if not isinstance(value, float):
        raise TypeError(f"from_float expects float, got {type(value).__name__}")

    if math.isnan(value):
        return NAN
    if math.isinf(value):
        return POS_INF if value > 0 else NEG_INF
    if value == 0.0:
        return ZERO

    sign = Sign.NEGATIVE if math.copysign(1.0, value) < 0 else Sign.POSITIVE
    match = classify(repr(abs(value)))
    if match is None:
        raise InvalidLiteral(repr(value))

    return _finite_from_match(sign, match)


def to_decimal(value: Union[DecimalValue, str, int, float]) -> DecimalValue:
    """
    Построение значения из поддерживаемого типа.

    Raises:
        TypeError: Для неподдерживаемого типа
        InvalidLiteral: Для нераспознанной строки
    """
    if isinstance(value, VALUE_TYPES):
        return value
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, float):
        return from_float(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return from_int(value)
    raise TypeError(f"cannot convert {type(value).__name__} to decimal")
