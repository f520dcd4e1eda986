"""
Tests for JSON Schema Contract Validators и Context

Комплексное тестирование:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Context: значения по умолчанию, constraints Pydantic, from_mapping
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.exactdec.contracts import (
    ContextValidator,
    DecimalValueValidator,
    SchemaLoader,
    validate_context,
    validate_decimal_value,
)
from src.exactdec.contracts.validators import _context_validator, _decimal_value_validator
from src.exactdec.domain import (
    DEFAULT_E_MAX,
    DEFAULT_E_MIN,
    DEFAULT_PRECISION,
    Context,
    RoundingMode,
    default_context,
    to_dict,
)
from src.exactdec.text import parse


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_finite():
    """Валидное конечное значение."""
    return {"kind": "finite", "sign": "-", "coefficient": "123456", "exponent": -3}


@pytest.fixture
def valid_context():
    """Валидный контекст со всеми полями."""
    return {
        "precision": 9,
        "rounding": "ROUND_HALF_UP",
        "capitals": False,
        "e_min": -99,
        "e_max": 99,
        "clamp": True,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["decimal_value", "context"])
    def test_schemas_are_valid(self, schema_name: str) -> None:
        """Сами схемы проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("context") is loader.load_schema("context")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_file(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# DECIMAL VALUE CONTRACT
# =============================================================================


class TestDecimalValueContract:
    """Тесты контракта decimal_value"""

    def test_valid_finite(self, valid_finite) -> None:
        validate_decimal_value(valid_finite)

    @pytest.mark.parametrize("data", [{"kind": "infinity", "sign": "+"}, {"kind": "nan"}])
    def test_valid_specials(self, data) -> None:
        assert DecimalValueValidator().is_valid(data)

    def test_serialized_values_conform(self) -> None:
        for literal in ("0", "-1.5e3", "Infinity", "-Inf", "NaN", "0.000"):
            validate_decimal_value(to_dict(parse(literal)))

    def test_missing_required(self, valid_finite) -> None:
        del valid_finite["exponent"]
        with pytest.raises(ValidationError):
            validate_decimal_value(valid_finite)

    def test_wrong_type(self, valid_finite) -> None:
        valid_finite["exponent"] = "3"
        assert not DecimalValueValidator().is_valid(valid_finite)

    def test_pattern_violation(self, valid_finite) -> None:
        valid_finite["coefficient"] = "12a"
        errors = list(DecimalValueValidator().iter_errors(valid_finite))
        assert errors

    def test_validator_reused_across_calls(self, valid_finite) -> None:
        """validate_decimal_value не пересобирает валидатор на каждый вызов"""
        validate_decimal_value(valid_finite)
        first = _decimal_value_validator()
        validate_decimal_value(valid_finite)
        assert _decimal_value_validator() is first
        assert _context_validator() is _context_validator()

    def test_extra_field(self, valid_finite) -> None:
        valid_finite["scale"] = 3
        with pytest.raises(ValidationError):
            validate_decimal_value(valid_finite)


# =============================================================================
# CONTEXT
# =============================================================================


class TestContextContract:
    """Тесты контракта context"""

    def test_valid_context(self, valid_context) -> None:
        validate_context(valid_context)

    def test_empty_mapping_valid(self) -> None:
        """Все поля необязательны"""
        assert ContextValidator().is_valid({})

    @pytest.mark.parametrize(
        "field,value",
        [
            ("precision", 0),
            ("rounding", "ROUND_SIDEWAYS"),
            ("capitals", "yes"),
            ("e_min", 5),
            ("e_max", -5),
            ("clamp", 1),
        ],
    )
    def test_constraint_violations(self, valid_context, field: str, value) -> None:
        valid_context[field] = value
        with pytest.raises(ValidationError):
            validate_context(valid_context)


class TestContext:
    """Тесты модели Context"""

    def test_defaults(self) -> None:
        context = default_context()
        assert context.precision == DEFAULT_PRECISION
        assert context.rounding is RoundingMode.HALF_EVEN
        assert context.capitals is True
        assert context.e_min == DEFAULT_E_MIN
        assert context.e_max == DEFAULT_E_MAX
        assert context.clamp is False

    def test_default_context_is_fresh(self) -> None:
        assert default_context() is not default_context()

    def test_derived_bounds(self) -> None:
        context = Context(precision=9, e_min=-99, e_max=99)
        assert context.e_tiny == -107
        assert context.e_top == 91

    def test_frozen(self) -> None:
        context = Context()
        with pytest.raises(PydanticValidationError):
            context.precision = 5

    def test_model_copy_update(self) -> None:
        context = Context().model_copy(update={"capitals": False})
        assert context.capitals is False
        assert Context().capitals is True

    @pytest.mark.parametrize(
        "kwargs",
        [{"precision": 0}, {"e_min": 1}, {"e_max": -1}, {"rounding": "ROUND_SIDEWAYS"}],
    )
    def test_pydantic_constraints(self, kwargs) -> None:
        with pytest.raises(PydanticValidationError):
            Context(**kwargs)

    def test_from_mapping(self, valid_context) -> None:
        context = Context.from_mapping(valid_context)
        assert context.precision == 9
        assert context.rounding is RoundingMode.HALF_UP
        assert context.capitals is False
        assert context.clamp is True

    def test_from_mapping_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError):
            Context.from_mapping({"precision": 5, "traps": []})

    def test_mapping_roundtrip(self, valid_context) -> None:
        assert Context.from_mapping(valid_context).to_mapping() == valid_context
