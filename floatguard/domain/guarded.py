"""
Guarded — значение с гарантией конечности

Guarded хранит ровно одно конечное float значение. Инвариант проверяется
один раз — при создании (конструктор или Unguarded.check()) — и дальше не
перепроверяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Живой экземпляр Guarded никогда не содержит NaN / ±inf
2. Арифметика над Guarded возвращает Unguarded (валидация откладывается)
3. Сравнение и хеширование определены только на Guarded: без NaN порядок
   полный (рефлексивность, антисимметричность, транзитивность, тотальность)
4. Сырое число сравнивается без округления до разрядности: a == x влечёт
   hash(a) == hash(x); ±inf упорядочены как обычно, NaN ничему не равен
5. Сравнение Guarded разных разрядностей — TypeError
6. In-place арифметика запрещена: результат покинул бы guarded-домен
"""

from numbers import Real
from typing import Any, ClassVar, NoReturn

from floatguard.domain.base import FloatValue, _is_raw_number
from floatguard.domain.functions import FunctionsMixin
from floatguard.domain.operators import ArithmeticMixin
from floatguard.math.validation import check_float


class Guarded(FunctionsMixin, ArithmeticMixin, FloatValue):
    """
    Конечное float значение.

    Конкретные типы — GuardedF64 и GuardedF32.

    Raises:
        PoisonedValueError: При создании из NaN / ±inf
        TypeError: При создании из не-числа или значения другой разрядности

    Examples:
        >>> from floatguard import GuardedF64
        >>> a = GuardedF64(3.0)
        >>> (a / GuardedF64(2.0)).check()
        GuardedF64(1.5)
    """

    _unguarded: ClassVar[type]

    def _admit(self, raw: float) -> float:
        return check_float(raw)

    @classmethod
    def _unguarded_type(cls) -> type:
        return cls._unguarded

    def unguarded(self):
        """Расширение контракта до Unguarded (без потерь, без проверок)."""
        return self._unguarded._wrap(self.value)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _comparable(self, other: Any) -> Real | None:
        if isinstance(other, FloatValue):
            if other._width is not self._width:
                raise TypeError(
                    f"cannot compare {type(self).__name__} with {type(other).__name__}"
                )
            if not isinstance(other, Guarded):
                return None
            return other.value
        if not _is_raw_number(other):
            return None
        return other

    def __eq__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value == rhs

    def __lt__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value < rhs

    def __le__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value <= rhs

    def __gt__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value > rhs

    def __ge__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value >= rhs

    def __hash__(self) -> int:
        return hash(self.value)

    # -------------------------------------------------------------------------
    # In-place арифметика
    # -------------------------------------------------------------------------

    def _reject_in_place(self, symbol: str) -> NoReturn:
        raise TypeError(
            f"in-place '{symbol}' is not supported on {type(self).__name__}: "
            f"the result is a {self._unguarded.__name__}, bind it explicitly"
        )

    def __iadd__(self, other: Any) -> NoReturn:
        self._reject_in_place("+=")

    def __isub__(self, other: Any) -> NoReturn:
        self._reject_in_place("-=")

    def __imul__(self, other: Any) -> NoReturn:
        self._reject_in_place("*=")

    def __itruediv__(self, other: Any) -> NoReturn:
        self._reject_in_place("/=")

    def __imod__(self, other: Any) -> NoReturn:
        self._reject_in_place("%=")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"
