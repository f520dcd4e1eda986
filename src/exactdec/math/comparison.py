"""
Comparator — полный порядок на значениях без NaN

Правила (в порядке приоритета):
1. +Inf vs +Inf, -Inf vs -Inf → 0
2. Любой операнд NaN → UndefinedComparison
3. -Inf меньше всего остального, +Inf больше всего остального
4. Два нуля равны независимо от знака и exponent
5. Ноль vs ненулевое: положительное > ноль > отрицательное
6. Разные знаки → порядок по знаку
7. Одинаковый знак → adjusted exponent, затем цифры коэффициентов,
   дополненных нулями до общего scale

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compare(a, b) == -compare(b, a) для значений без NaN
2. Операторы lt/gt/le/ge/eq тоже отказывают на NaN
"""

import functools
import logging
from typing import Final

from src.exactdec.domain.errors import UndefinedComparison
from src.exactdec.domain.sign import Sign
from src.exactdec.domain.value import (
    DecimalValue,
    Finite,
    Infinity,
    NotANumber,
    adjusted_exponent,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ТРЁХЗНАЧНОЕ СРАВНЕНИЕ
# =============================================================================


def _cmp(left, right) -> int:
    return (left > right) - (left < right)


def _zero_pad_right(coefficient: str, count: int) -> str:
    return coefficient + "0" * count if count > 0 else coefficient


def _compare_magnitude(left: Finite, right: Finite) -> int:
    by_adjusted = _cmp(
        adjusted_exponent(left.exponent, left.coefficient),
        adjusted_exponent(right.exponent, right.coefficient),
    )
    if by_adjusted != 0:
        return by_adjusted

    # Равные adjusted exponent → после дополнения длины совпадают
    padded_left = _zero_pad_right(left.coefficient, left.exponent - right.exponent)
    padded_right = _zero_pad_right(right.coefficient, right.exponent - left.exponent)
    return _cmp(padded_left, padded_right)


def compare(left: DecimalValue, right: DecimalValue) -> int:
    """
    Трёхзначное сравнение значений.

    Args:
        left: Левый операнд
        right: Правый операнд

    Returns:
        -1, 0 или 1

    Raises:
        UndefinedComparison: Если хотя бы один операнд NaN

    Examples:
        >>> from src.exactdec.text import parse
        >>> compare(parse("1E2"), parse("100"))
        0
        >>> compare(parse("-Inf"), parse("-1E999"))
        -1
    """
    if isinstance(left, Infinity) and isinstance(right, Infinity) and left.sign is right.sign:
        return 0

    if isinstance(left, NotANumber) or isinstance(right, NotANumber):
        logger.debug("undefined comparison: %r vs %r", left, right)
        raise UndefinedComparison(left, right)

    if isinstance(left, Infinity):
        return left.sign.to_int()
    if isinstance(right, Infinity):
        return -right.sign.to_int()

    left_zero = left.coefficient == "0"
    right_zero = right.coefficient == "0"
    if left_zero and right_zero:
        return 0
    if left_zero:
        return -right.sign.to_int()
    if right_zero:
        return left.sign.to_int()

    if left.sign is not right.sign:
        return left.sign.to_int()

    magnitude = _compare_magnitude(left, right)
    return magnitude if left.sign is Sign.POSITIVE else -magnitude


# Ключ для sorted()/min()/max(); NaN в последовательности → UndefinedComparison
sort_key: Final = functools.cmp_to_key(compare)


# =============================================================================
# ОПЕРАТОРЫ СРАВНЕНИЯ
# =============================================================================


def lt(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) < 0


def gt(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) > 0


def le(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) <= 0


def ge(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) >= 0


def eq(left: DecimalValue, right: DecimalValue) -> bool:
    """Равенство значений (не представлений): eq(parse("1.0"), parse("1")) is True"""
    return compare(left, right) == 0
