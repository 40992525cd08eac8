"""
Float Errors — таксономия невалидных IEEE-754 значений

Единственная классификация причин, по которым сырое float значение не может
быть принято в guarded-домен:
- NOT_A_NUMBER: NaN (любой payload / signaling bit)
- POSITIVE_INFINITY: +inf
- NEGATIVE_INFINITY: -inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Классы не пересекаются: любому невалидному значению соответствует ровно один
2. Ошибка возникает только на границе валидации (конструктор Guarded / check())
3. Арифметика никогда не бросает PoisonedValueError
"""

from enum import Enum


class FloatError(str, Enum):
    """Причина невалидности float значения."""

    NOT_A_NUMBER = "NotANumber"
    POSITIVE_INFINITY = "PositiveInfinity"
    NEGATIVE_INFINITY = "NegativeInfinity"

    @property
    def description(self) -> str:
        """Человекочитаемое описание (для сообщений об ошибках и логов)."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    FloatError.NOT_A_NUMBER: "not a number",
    FloatError.POSITIVE_INFINITY: "positive infinity",
    FloatError.NEGATIVE_INFINITY: "negative infinity",
}


class PoisonedValueError(ValueError):
    """
    Значение не прошло валидацию: NaN или бесконечность.

    Наследуется от ValueError, поэтому прозрачно работает в местах, где
    ожидается стандартная ошибка валидации (в т.ч. в валидаторах pydantic).

    Attributes:
        error: Точная причина (FloatError)
        value: Отклонённое сырое значение
    """

    def __init__(self, error: FloatError, value: float):
        self.error = error
        self.value = value
        super().__init__(
            f"The floating-point value is poisoned: {error.description} (got {value!r})"
        )
