"""
Тесты для модуля Float Validation

Проверяет:
1. Классификацию NaN / ±inf / конечных значений
2. Границу валидации check_float (значение бит в бит или PoisonedValueError)
3. Signed zero и субнормальные числа
4. Таксономию FloatError и PoisonedValueError
5. Логирование отклонённых значений и его отключение (minimal runtime)
"""

import logging
import math
import struct
import sys

import pytest
from hypothesis import given

from floatguard.config import reset_settings
from floatguard.errors import FloatError, PoisonedValueError
from floatguard.math.validation import check_float, classify_float, is_valid_float
from tests.strategies import NAN_WITH_PAYLOAD, finite_floats, invalid_floats

VALIDATION_LOGGER = "floatguard.math.validation"


@pytest.fixture
def fresh_settings():
    """Настройки перечитываются из окружения в каждом тесте."""
    reset_settings()
    yield
    reset_settings()


def _bits(value: float) -> bytes:
    return struct.pack("<d", value)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


class TestClassifyFloat:
    """Тесты для classify_float / is_valid_float"""

    def test_finite_values_are_valid(self) -> None:
        """Конечные значения валидны"""
        for value in (0.0, 1.5, -1e308, sys.float_info.max, -sys.float_info.max):
            assert classify_float(value) is None
            assert is_valid_float(value) is True

    def test_signed_zero_is_valid(self) -> None:
        """-0.0 валиден"""
        assert classify_float(-0.0) is None

    def test_subnormal_is_valid(self) -> None:
        """Субнормальные числа валидны"""
        assert classify_float(5e-324) is None
        assert classify_float(sys.float_info.min / 2) is None

    def test_nan(self) -> None:
        """NaN → NOT_A_NUMBER"""
        assert classify_float(math.nan) is FloatError.NOT_A_NUMBER
        assert is_valid_float(math.nan) is False

    def test_nan_bit_patterns(self) -> None:
        """Любой NaN (знак, payload) → NOT_A_NUMBER"""
        assert classify_float(-math.nan) is FloatError.NOT_A_NUMBER
        assert classify_float(NAN_WITH_PAYLOAD) is FloatError.NOT_A_NUMBER

    def test_infinities(self) -> None:
        """Знак бесконечности определяет вид ошибки"""
        assert classify_float(math.inf) is FloatError.POSITIVE_INFINITY
        assert classify_float(-math.inf) is FloatError.NEGATIVE_INFINITY

    @given(finite_floats())
    def test_property_finite_never_classified(self, value: float) -> None:
        """Property: конечное значение никогда не классифицируется как ошибка"""
        assert classify_float(value) is None

    @given(invalid_floats())
    def test_property_invalid_always_classified(self, value: float) -> None:
        """Property: невалидное значение всегда классифицируется"""
        assert classify_float(value) is not None
        assert is_valid_float(value) is False


# =============================================================================
# ГРАНИЦА ВАЛИДАЦИИ
# =============================================================================


class TestCheckFloat:
    """Тесты для check_float"""

    def test_returns_value_unchanged(self) -> None:
        """Конечное значение возвращается без изменений"""
        assert check_float(1.5) == 1.5

    def test_preserves_negative_zero_bits(self) -> None:
        """-0.0 сохраняется бит в бит"""
        assert _bits(check_float(-0.0)) == _bits(-0.0)

    @given(finite_floats())
    def test_property_bit_identical(self, value: float) -> None:
        """Property: check_float не меняет битовое представление"""
        assert _bits(check_float(value)) == _bits(value)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (math.nan, FloatError.NOT_A_NUMBER),
            (math.inf, FloatError.POSITIVE_INFINITY),
            (-math.inf, FloatError.NEGATIVE_INFINITY),
        ],
    )
    def test_rejects_invalid(self, value: float, expected: FloatError) -> None:
        """Невалидное значение → PoisonedValueError с точной причиной"""
        with pytest.raises(PoisonedValueError) as exc_info:
            check_float(value)
        assert exc_info.value.error is expected

    def test_error_carries_rejected_value(self) -> None:
        """Ошибка хранит отклонённое значение"""
        with pytest.raises(PoisonedValueError) as exc_info:
            check_float(-math.inf)
        assert exc_info.value.value == -math.inf


# =============================================================================
# ТАКСОНОМИЯ ОШИБОК
# =============================================================================


class TestFloatError:
    """Тесты для FloatError / PoisonedValueError"""

    def test_enum_values(self) -> None:
        """Строковые значения enum"""
        assert FloatError.NOT_A_NUMBER.value == "NotANumber"
        assert FloatError.POSITIVE_INFINITY.value == "PositiveInfinity"
        assert FloatError.NEGATIVE_INFINITY.value == "NegativeInfinity"

    def test_enum_lookup_by_value(self) -> None:
        """Поиск по строковому значению"""
        assert FloatError("PositiveInfinity") is FloatError.POSITIVE_INFINITY

    def test_descriptions(self) -> None:
        """Человекочитаемые описания"""
        assert FloatError.NOT_A_NUMBER.description == "not a number"
        assert FloatError.POSITIVE_INFINITY.description == "positive infinity"
        assert FloatError.NEGATIVE_INFINITY.description == "negative infinity"

    def test_poisoned_value_error_is_value_error(self) -> None:
        """PoisonedValueError наследуется от ValueError"""
        error = PoisonedValueError(FloatError.NOT_A_NUMBER, math.nan)
        assert isinstance(error, ValueError)

    def test_message(self) -> None:
        """Сообщение содержит описание причины и значение"""
        error = PoisonedValueError(FloatError.POSITIVE_INFINITY, math.inf)
        assert str(error) == (
            "The floating-point value is poisoned: positive infinity (got inf)"
        )


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================


@pytest.mark.usefixtures("fresh_settings")
class TestValidationLogging:
    """Тесты логирования на границе валидации"""

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отклонённое значение логируется на уровне DEBUG"""
        caplog.set_level(logging.DEBUG, logger=VALIDATION_LOGGER)

        with pytest.raises(PoisonedValueError):
            check_float(math.inf)

        records = [r for r in caplog.records if r.name == VALIDATION_LOGGER]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "positive infinity" in records[0].getMessage()

    def test_valid_value_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Успешная проверка не пишет в лог"""
        caplog.set_level(logging.DEBUG, logger=VALIDATION_LOGGER)

        check_float(1.0)

        assert not [r for r in caplog.records if r.name == VALIDATION_LOGGER]

    def test_minimal_runtime_skips_logging(
        self, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Minimal runtime: ошибка та же, лог не пишется"""
        monkeypatch.setenv("FLOATGUARD_RUNTIME", "minimal")
        reset_settings()
        caplog.set_level(logging.DEBUG, logger=VALIDATION_LOGGER)

        with pytest.raises(PoisonedValueError) as exc_info:
            check_float(math.nan)

        assert exc_info.value.error is FloatError.NOT_A_NUMBER
        assert not [r for r in caplog.records if r.name == VALIDATION_LOGGER]

    def test_logging_can_be_disabled(
        self, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """FLOATGUARD_LOG_VALIDATION_FAILURES=false отключает логирование"""
        monkeypatch.setenv("FLOATGUARD_LOG_VALIDATION_FAILURES", "false")
        reset_settings()
        caplog.set_level(logging.DEBUG, logger=VALIDATION_LOGGER)

        with pytest.raises(PoisonedValueError):
            check_float(-math.inf)

        assert not [r for r in caplog.records if r.name == VALIDATION_LOGGER]
