"""
Rounding Engine — политики округления и rescale

Два слоя:
- Round.*: восемь политик, решающих, увеличивать ли сохранённые цифры
- rescale/quantize: перевод значения на целевой exponent с отбрасыванием
  или добавлением цифр

Политика: (precision, value) → RoundingDecision, где precision —
количество сохраняемых старших цифр, 0 <= precision < len(coefficient).

RoundingDecision:
- ROUND_UP (1): сохранённые цифры увеличиваются на единицу младшего разряда
- TRUNCATE_EXACT (0): отбрасываемые цифры — одни нули
- TRUNCATE_INEXACT (-1): есть ненулевые отбрасываемые цифры, но без увеличения
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, Final, Optional

from src.exactdec.domain.context import Context, RoundingMode, default_context
from src.exactdec.domain.sign import Sign
from src.exactdec.domain.value import DecimalValue, Finite

logger = logging.getLogger(__name__)


# =============================================================================
# ТИПЫ
# =============================================================================


class RoundingDecision(IntEnum):
    """Решение политики округления"""

    ROUND_UP = 1
    TRUNCATE_EXACT = 0
    TRUNCATE_INEXACT = -1

    def flip(self) -> "RoundingDecision":
        """ROUND_UP ↔ TRUNCATE_INEXACT; TRUNCATE_EXACT не меняется"""
        return RoundingDecision(-self.value)


RoundingPolicy = Callable[[int, Finite], RoundingDecision]

_HALF_UP_DIGITS: Final[str] = "56789"
_EVEN_DIGITS: Final[str] = "02468"
_ZERO_FIVE_DIGITS: Final[str] = "05"


def _discarded(precision: int, value: Finite) -> str:
    if not isinstance(value, Finite):
        raise TypeError(f"rounding policies apply to finite values only, got {value!r}")
    if not 0 <= precision < len(value.coefficient):
        raise ValueError(
            f"precision {precision} out of range for coefficient of "
            f"{len(value.coefficient)} digits"
        )
    return value.coefficient[precision:]


def _all_zeros(digits: str) -> bool:
    return digits.strip("0") == ""


def _exact_half(digits: str) -> bool:
    return digits[0] == "5" and _all_zeros(digits[1:])


# =============================================================================
# ПОЛИТИКИ ОКРУГЛЕНИЯ
# =============================================================================


class Round:
    """
    Восемь политик округления.

    Все методы статические и принимают только Finite.
    """

    @staticmethod
    def down(precision: int, value: Finite) -> RoundingDecision:
        """К нулю: всегда усечение"""
        if _all_zeros(_discarded(precision, value)):
            return RoundingDecision.TRUNCATE_EXACT
        return RoundingDecision.TRUNCATE_INEXACT

    @staticmethod
    def up(precision: int, value: Finite) -> RoundingDecision:
        """От нуля: увеличение при любой ненулевой отброшенной цифре"""
        return Round.down(precision, value).flip()

    @staticmethod
    def half_up(precision: int, value: Finite) -> RoundingDecision:
        """Половина и больше — от нуля"""
        if _discarded(precision, value)[0] in _HALF_UP_DIGITS:
            return RoundingDecision.ROUND_UP
        return Round.down(precision, value)

    @staticmethod
    def half_down(precision: int, value: Finite) -> RoundingDecision:
        """Больше половины — от нуля, ровно половина — к нулю"""
        if _exact_half(_discarded(precision, value)):
            return RoundingDecision.TRUNCATE_INEXACT
        return Round.half_up(precision, value)

    @staticmethod
    def half_even(precision: int, value: Finite) -> RoundingDecision:
        """
        Банковское округление: ровно половина — к чётной сохранённой цифре.

        При precision == 0 сохранённая цифра считается нулём (чётной).
        """
        discarded = _discarded(precision, value)
        kept_even = precision == 0 or value.coefficient[precision - 1] in _EVEN_DIGITS
        if _exact_half(discarded) and kept_even:
            return RoundingDecision.TRUNCATE_INEXACT
        return Round.half_up(precision, value)

    @staticmethod
    def ceiling(precision: int, value: Finite) -> RoundingDecision:
        """К +Infinity"""
        decision = Round.down(precision, value)
        return decision if value.sign is Sign.NEGATIVE else decision.flip()

    @staticmethod
    def floor(precision: int, value: Finite) -> RoundingDecision:
        """К -Infinity"""
        decision = Round.down(precision, value)
        return decision if value.sign is Sign.POSITIVE else decision.flip()

    @staticmethod
    def zero_five_up(precision: int, value: Finite) -> RoundingDecision:
        """
        От нуля, только если последняя сохранённая цифра 0 или 5
        (или ничего не сохраняется); иначе к нулю.
        """
        decision = Round.down(precision, value)
        if precision > 0 and value.coefficient[precision - 1] not in _ZERO_FIVE_DIGITS:
            return decision
        return decision.flip()

    @staticmethod
    def with_mode(mode: RoundingMode) -> RoundingPolicy:
        """
        Политика по имени режима.

        Raises:
            ValueError: Для неизвестного режима
        """
        return _POLICIES[RoundingMode(mode)]


_POLICIES: Final[Dict[RoundingMode, RoundingPolicy]] = {
    RoundingMode.DOWN: Round.down,
    RoundingMode.UP: Round.up,
    RoundingMode.HALF_UP: Round.half_up,
    RoundingMode.HALF_DOWN: Round.half_down,
    RoundingMode.HALF_EVEN: Round.half_even,
    RoundingMode.CEILING: Round.ceiling,
    RoundingMode.FLOOR: Round.floor,
    RoundingMode.ZERO_FIVE_UP: Round.zero_five_up,
}


# =============================================================================
# RESCALE
# =============================================================================


def increment_digits(digits: str) -> str:
    """
    Увеличение строки цифр на единицу без перевода в int.

    Examples:
        >>> increment_digits("129")
        '130'
        >>> increment_digits("999")
        '1000'
    """
    stripped = digits.rstrip("9")
    carry = len(digits) - len(stripped)
    if not stripped:
        return "1" + "0" * carry
    return stripped[:-1] + str(int(stripped[-1]) + 1) + "0" * carry


def rescale(
    value: DecimalValue,
    exponent: int,
    rounding: Optional[RoundingMode] = None,
    context: Optional[Context] = None,
) -> DecimalValue:
    """
    Перевод значения на целевой exponent.

    - Infinity/NaN возвращаются без изменений
    - Ноль просто получает новый exponent
    - exponent уменьшается: коэффициент дополняется нулями справа (без потерь)
    - exponent увеличивается: лишние цифры отбрасываются по политике rounding

    Если значение целиком меньше половины единицы целевого разряда,
    коэффициент заменяется на "1" одним разрядом ниже цели.

    Args:
        value: Исходное значение
        exponent: Целевой exponent
        rounding: Политика; если None — context.rounding
        context: Источник политики по умолчанию

    Returns:
        Новое значение с exponent == exponent (для конечных)

    Examples:
        >>> from src.exactdec.text import parse, to_string
        >>> to_string(rescale(parse("1.005"), -2, RoundingMode.HALF_UP))
        '1.01'
        >>> to_string(rescale(parse("2.5"), 0, RoundingMode.HALF_EVEN))
        '2'
    """
    if not isinstance(value, Finite):
        return value

    if value.coefficient == "0":
        return Finite(sign=value.sign, coefficient="0", exponent=exponent)

    if value.exponent >= exponent:
        return Finite(
            sign=value.sign,
            coefficient=value.coefficient + "0" * (value.exponent - exponent),
            exponent=exponent,
        )

    mode = rounding if rounding is not None else (context or default_context()).rounding
    policy = Round.with_mode(mode)

    digits = len(value.coefficient) + value.exponent - exponent
    probe = value
    if digits < 0:
        probe = Finite(sign=value.sign, coefficient="1", exponent=exponent - 1)
        digits = 0

    coefficient = value.coefficient[:digits] or "0"
    decision = policy(digits, probe)
    if decision is RoundingDecision.ROUND_UP:
        coefficient = increment_digits(coefficient)

    if decision is not RoundingDecision.TRUNCATE_EXACT:
        logger.debug(
            "inexact rescale of %r to exponent %d (%s): %s",
            value,
            exponent,
            RoundingMode(mode).name,
            decision.name,
        )

    return Finite(sign=value.sign, coefficient=coefficient, exponent=exponent)


def quantize(
    value: DecimalValue,
    template: DecimalValue,
    rounding: Optional[RoundingMode] = None,
    context: Optional[Context] = None,
) -> DecimalValue:
    """
    Rescale к exponent шаблона: quantize(parse("3.14159"), parse("0.01")) → 3.14.

    Raises:
        ValueError: Если template не конечное значение
    """
    if not isinstance(template, Finite):
        raise ValueError(f"quantize template must be finite, got {template!r}")
    return rescale(value, template.exponent, rounding=rounding, context=context)
