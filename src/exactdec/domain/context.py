"""
Context — конфигурация десятичного движка

Immutable Pydantic модель с параметрами:
- precision: максимум значащих цифр для будущей арифметики
- rounding: политика округления по умолчанию (одна из восьми)
- capitals: 'E' или 'e' в экспоненциальной записи
- e_min / e_max / clamp: границы exponent для будущей детекции overflow

Ядро напрямую использует только capitals (форматирование) и rounding
(rescale). Границы exponent хранятся, но ни одной операцией не проверяются.

Глобального изменяемого контекста нет: default_context() каждый раз
возвращает новый экземпляр.
"""

from enum import Enum
from typing import Any, Dict, Final

from pydantic import BaseModel, Field

from src.exactdec.contracts.validators import validate_context


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_PRECISION: Final[int] = 28

DEFAULT_E_MAX: Final[int] = 999_999

DEFAULT_E_MIN: Final[int] = -999_999


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Политика округления (имена совпадают с константами модуля decimal)"""

    DOWN = "ROUND_DOWN"
    UP = "ROUND_UP"
    HALF_UP = "ROUND_HALF_UP"
    HALF_DOWN = "ROUND_HALF_DOWN"
    HALF_EVEN = "ROUND_HALF_EVEN"
    CEILING = "ROUND_CEILING"
    FLOOR = "ROUND_FLOOR"
    ZERO_FIVE_UP = "ROUND_05UP"


# =============================================================================
# CONTEXT MODEL
# =============================================================================


class Context(BaseModel):
    """
    Параметры точности, округления и отображения.

    Immutable модель (frozen=True). Изменённый контекст создаётся через
    model_copy(update=...).
    """

    precision: int = Field(DEFAULT_PRECISION, gt=0, description="Максимум значащих цифр")
    rounding: RoundingMode = Field(
        RoundingMode.HALF_EVEN, description="Политика округления по умолчанию"
    )
    capitals: bool = Field(True, description="'E' (True) или 'e' (False) в экспоненте")
    e_min: int = Field(DEFAULT_E_MIN, le=0, description="Минимальный adjusted exponent")
    e_max: int = Field(DEFAULT_E_MAX, ge=0, description="Максимальный adjusted exponent")
    clamp: bool = Field(False, description="Ограничивать exponent значением e_top")

    model_config = {"frozen": True}  # Immutable

    @property
    def e_tiny(self) -> int:
        """Минимальный exponent субнормального значения: e_min - precision + 1"""
        return self.e_min - self.precision + 1

    @property
    def e_top(self) -> int:
        """Максимальный exponent при clamp: e_max - precision + 1"""
        return self.e_max - self.precision + 1

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "Context":
        """
        Контекст из словаря (например, из JSON-конфигурации).

        Args:
            data: dict по контракту context.json; отсутствующие ключи
                берутся по умолчанию

        Returns:
            Новый Context

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют контракту
        """
        validate_context(data)
        return cls.model_validate(data)

    def to_mapping(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def default_context() -> Context:
    """Новый контекст с параметрами по умолчанию"""
    return Context()
