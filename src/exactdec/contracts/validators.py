"""
JSON Schema Contract Validators

Модуль для валидации JSON-представлений десятичных значений и контекста.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (package data, contracts/schema/):
- decimal_value.json — Finite / Infinity / NaN
- context.json — параметры Context
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path = Path(__file__).parent / "schema"):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'decimal_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)"""
        return self.validator.iter_errors(data)


class DecimalValueValidator(ContractValidator):
    """Валидатор для decimal_value контракта"""

    def __init__(self):
        super().__init__("decimal_value")


class ContextValidator(ContractValidator):
    """Валидатор для context контракта"""

    def __init__(self):
        super().__init__("context")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


@lru_cache(maxsize=None)
def _decimal_value_validator() -> DecimalValueValidator:
    return DecimalValueValidator()


@lru_cache(maxsize=None)
def _context_validator() -> ContextValidator:
    return ContextValidator()


def validate_decimal_value(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления десятичного значения.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _decimal_value_validator().validate(data)


def validate_context(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления контекста.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _context_validator().validate(data)
