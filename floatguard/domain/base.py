"""
FloatValue — общая основа Guarded / Unguarded

Immutable value object, хранящий ровно одно float значение заданной
разрядности. Подклассы определяют, допускается ли невалидное значение
(_admit) и какой тип является "непроверенным" результатом арифметики
(_unguarded_type).
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, ClassVar

from floatguard.math.widths import FloatWidth


def _is_raw_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False, repr=False)
class FloatValue:
    """
    Базовый тип-обёртка над float.

    Attributes:
        value: Сырое значение (float, приведённый к разрядности типа)
    """

    value: float

    _width: ClassVar[FloatWidth]

    def __post_init__(self) -> None:
        raw = self._width.coerce(self._extract(self.value))
        object.__setattr__(self, "value", self._admit(raw))

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    def _extract(self, source: Any) -> float:
        if isinstance(source, FloatValue):
            if source._width is not self._width:
                raise TypeError(
                    f"cannot build {type(self).__name__} from {type(source).__name__}"
                )
            return source.value
        if not _is_raw_number(source):
            raise TypeError(
                f"{type(self).__name__} expects a real number, got {type(source).__name__}"
            )
        return source

    def _admit(self, raw: float) -> float:
        return raw

    @classmethod
    def _wrap(cls, raw: float):
        """Создание без валидации: только для значений, конечность которых известна."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", raw)
        return instance

    @classmethod
    def _unguarded_type(cls) -> type["FloatValue"]:
        raise NotImplementedError

    def _operand(self, other: Any) -> float | None:
        """
        Сырое значение операнда той же разрядности.

        Returns:
            float, либо None если операнд не поддерживается (→ NotImplemented)
        """
        if isinstance(other, FloatValue):
            if other._width is not self._width:
                return None
            return other.value
        if not _is_raw_number(other):
            return None
        return self._width.coerce(other)

    # -------------------------------------------------------------------------
    # Унарные операции (сохраняют тип: -x и |x| конечны для конечного x)
    # -------------------------------------------------------------------------

    def __neg__(self):
        return type(self)._wrap(-self.value)

    def __pos__(self):
        return self

    def __abs__(self):
        return type(self)._wrap(abs(self.value))

    # -------------------------------------------------------------------------
    # Извлечение и отображение
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)
