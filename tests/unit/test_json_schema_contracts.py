"""
Tests for JSON Schema Contracts

Проверяет, что модели с floatguard полями публикуют корректную JSON Schema:
- Валидность самой схемы (Draft 2020-12)
- Guarded и Unguarded поля описываются как number
- Сериализованные payload проходят валидацию по схеме
- Нарушения типов детектируются
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from floatguard.contracts import GuardedF32Field, GuardedF64Field, UnguardedF64Field


class Measurement(BaseModel):
    """Модель-контракт для тестов схемы."""

    mean: GuardedF64Field
    ratio: UnguardedF64Field
    weight: GuardedF32Field

    model_config = {"frozen": True}


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def schema() -> dict:
    """JSON Schema модели в режиме валидации."""
    return Measurement.model_json_schema()


@pytest.fixture
def validator(schema: dict) -> Draft202012Validator:
    return Draft202012Validator(schema)


@pytest.fixture
def valid_payload() -> dict:
    """Валидный payload (сериализованная модель)."""
    measurement = Measurement(mean=1.5, ratio=0.25, weight=2.0)
    return measurement.model_dump(mode="json")


# =============================================================================
# ВАЛИДНОСТЬ СХЕМЫ
# =============================================================================


class TestSchemaValidity:
    """Тесты структуры схемы"""

    def test_schema_is_valid_draft_2020_12(self, schema: dict) -> None:
        """Схема — корректный документ JSON Schema 2020-12"""
        Draft202012Validator.check_schema(schema)

    def test_fields_are_numbers(self, schema: dict) -> None:
        """Все floatguard поля описываются как number"""
        for name in ("mean", "ratio", "weight"):
            assert schema["properties"][name]["type"] == "number"

    def test_required_fields(self, schema: dict) -> None:
        assert set(schema["required"]) == {"mean", "ratio", "weight"}

    def test_serialization_schema(self) -> None:
        """Схема сериализации тоже описывает number"""
        schema = Measurement.model_json_schema(mode="serialization")
        Draft202012Validator.check_schema(schema)
        assert schema["properties"]["mean"]["type"] == "number"


# =============================================================================
# ВАЛИДАЦИЯ PAYLOAD
# =============================================================================


class TestPayloadValidation:
    """Тесты валидации payload по схеме"""

    def test_dumped_payload_valid(
        self, validator: Draft202012Validator, valid_payload: dict
    ) -> None:
        """Сериализованная модель проходит валидацию"""
        validator.validate(valid_payload)

    def test_payload_round_trips_through_model(self, valid_payload: dict) -> None:
        restored = Measurement.model_validate(valid_payload)
        assert restored.mean == 1.5
        assert restored.weight == 2.0

    def test_string_value_rejected(
        self, validator: Draft202012Validator, valid_payload: dict
    ) -> None:
        """Строка вместо числа → ValidationError"""
        invalid = dict(valid_payload, mean="1.5")
        with pytest.raises(ValidationError):
            validator.validate(invalid)

    def test_missing_field_rejected(
        self, validator: Draft202012Validator, valid_payload: dict
    ) -> None:
        invalid = {k: v for k, v in valid_payload.items() if k != "ratio"}
        with pytest.raises(ValidationError):
            validator.validate(invalid)
