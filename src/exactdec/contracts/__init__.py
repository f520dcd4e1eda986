"""
Contract Validation Module

Модуль для валидации JSON-представлений значений и контекста exactdec.
"""

from .validators import (
    ContextValidator,
    ContractValidator,
    DecimalValueValidator,
    SchemaLoader,
    validate_context,
    validate_decimal_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalValueValidator",
    "ContextValidator",
    # Functions
    "validate_decimal_value",
    "validate_context",
]
