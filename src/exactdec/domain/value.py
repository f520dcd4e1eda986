"""
DecimalValue — представление десятичного значения

Закрытый sum type из трёх immutable Pydantic моделей:
- Finite(sign, coefficient, exponent) = sign × coefficient × 10^exponent
- Infinity(sign) — знаковая бесконечность
- NotANumber() — NaN, без знака и без порядка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. coefficient соответствует ^[0-9]+$ и хранится без лишних ведущих нулей
   (коэффициент из одних нулей хранится как "0")
2. exponent хранится как задан: scale сохраняется ("0.00" != "0" по
   представлению, но равны по значению)
3. Все модели frozen=True: любое преобразование создаёт новый экземпляр

Структурное == моделей — это равенство представлений.
Равенство значений — src.exactdec.math.comparison.eq.
"""

from typing import Annotated, Any, Dict, Final, Literal, Tuple, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from src.exactdec.contracts.validators import validate_decimal_value
from src.exactdec.domain.sign import Sign


# =============================================================================
# МОДЕЛИ
# =============================================================================


class _Value(BaseModel):
    model_config = {"frozen": True}

    def __str__(self) -> str:
        from src.exactdec.text.formatter import to_string

        return to_string(self)


class Finite(_Value):
    """
    Конечное значение: sign × coefficient × 10^exponent.

    Exponent может быть любым целым, в том числе сильно отрицательным
    (дополнение нулями справа при rescale).
    """

    kind: Literal["finite"] = "finite"
    sign: Sign = Field(Sign.POSITIVE, description="Знак значения")
    coefficient: str = Field(..., pattern=r"^[0-9]+$", description="Цифры модуля")
    exponent: int = Field(0, description="Степень десяти")

    @field_validator("coefficient")
    @classmethod
    def strip_leading_zeros(cls, v: str) -> str:
        """Ведущие нули не несут информации: '007' → '7', '000' → '0'"""
        return v.lstrip("0") or "0"


class Infinity(_Value):
    """Знаковая бесконечность"""

    kind: Literal["infinity"] = "infinity"
    sign: Sign = Field(Sign.POSITIVE, description="Знак бесконечности")


class NotANumber(_Value):
    """NaN: единственный беззнаковый вариант, не упорядочен"""

    kind: Literal["nan"] = "nan"


DecimalValue = Annotated[Union[Finite, Infinity, NotANumber], Field(discriminator="kind")]

VALUE_TYPES: Final = (Finite, Infinity, NotANumber)

_VALUE_ADAPTER: Final = TypeAdapter(DecimalValue)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Finite] = Finite(sign=Sign.POSITIVE, coefficient="0", exponent=0)
ONE: Final[Finite] = Finite(sign=Sign.POSITIVE, coefficient="1", exponent=0)
POS_INF: Final[Infinity] = Infinity(sign=Sign.POSITIVE)
NEG_INF: Final[Infinity] = Infinity(sign=Sign.NEGATIVE)
NAN: Final[NotANumber] = NotANumber()


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_finite(value: DecimalValue) -> bool:
    return isinstance(value, Finite)


def is_infinite(value: DecimalValue) -> bool:
    return isinstance(value, Infinity)


def is_nan(value: DecimalValue) -> bool:
    return isinstance(value, NotANumber)


def is_zero(value: DecimalValue) -> bool:
    """Конечное значение с нулевым коэффициентом (при любом знаке и exponent)"""
    return isinstance(value, Finite) and value.coefficient == "0"


def to_bool(value: DecimalValue) -> bool:
    """Ложно только нулевое значение; бесконечности и NaN истинны"""
    return not is_zero(value)


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def negate(value: DecimalValue) -> DecimalValue:
    """
    Смена знака.

    Args:
        value: Любое значение

    Returns:
        Новое значение с противоположным знаком; NaN возвращается как есть
    """
    if isinstance(value, Finite):
        return Finite(
            sign=value.sign.negate(),
            coefficient=value.coefficient,
            exponent=value.exponent,
        )
    if isinstance(value, Infinity):
        return Infinity(sign=value.sign.negate())
    return value


def absolute(value: DecimalValue) -> DecimalValue:
    """Модуль значения: отрицательные становятся положительными, NaN без изменений"""
    if isinstance(value, Finite) and value.sign is Sign.NEGATIVE:
        return Finite(coefficient=value.coefficient, exponent=value.exponent)
    if isinstance(value, Infinity) and value.sign is Sign.NEGATIVE:
        return POS_INF
    return value


def sign_of(value: DecimalValue) -> int:
    """Знак как множитель (-1 или 1). NaN считается положительным."""
    if isinstance(value, NotANumber):
        return 1
    return value.sign.to_int()


def adjusted_exponent(exponent: int, coefficient: str) -> int:
    """Позиция старшей цифры относительно десятичной точки"""
    return exponent + len(coefficient) - 1


def adjusted(value: DecimalValue) -> int:
    """
    Adjusted exponent значения: exponent + len(coefficient) - 1.

    Для специальных значений возвращает 0.

    Examples:
        >>> adjusted(Finite(coefficient="123456", exponent=-3))
        2
    """
    if isinstance(value, Finite):
        return adjusted_exponent(value.exponent, value.coefficient)
    return 0


def to_tuple(value: DecimalValue) -> Tuple[int, str, int]:
    """
    Кортеж (sign, coefficient, exponent).

    Специальные значения: Infinity → (sign, "Inf", 0), NaN → (1, "NaN", 0).
    """
    if isinstance(value, Finite):
        return value.sign.to_int(), value.coefficient, value.exponent
    if isinstance(value, Infinity):
        return value.sign.to_int(), "Inf", 0
    return 1, "NaN", 0


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def to_dict(value: DecimalValue) -> Dict[str, Any]:
    """
    JSON-совместимое представление (контракт decimal_value.json).

    Examples:
        >>> to_dict(ONE)
        {'kind': 'finite', 'sign': '+', 'coefficient': '1', 'exponent': 0}
    """
    return value.model_dump(mode="json")


def from_dict(data: Dict[str, Any]) -> DecimalValue:
    """
    Восстановление значения из JSON-представления.

    Args:
        data: dict по контракту decimal_value.json

    Returns:
        Finite, Infinity или NotANumber

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    validate_decimal_value(data)
    return _VALUE_ADAPTER.validate_python(data)
