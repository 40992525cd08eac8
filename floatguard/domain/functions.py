"""
Elementary Functions — математические функции Guarded / Unguarded

Все функции, кроме abs() и signum(), возвращают Unguarded: даже для конечного
аргумента результат может быть невалидным (sqrt(-1) → NaN, exp(1000) → inf,
recip(0) → inf).

Невалидный аргумент никогда не даёт валидный результат: tanh(inf),
exp(-inf), atan(inf) остаются невалидными, хотя IEEE-754 даёт для них
конечный результат. Если же IEEE-результат сам невалиден (sqrt(-inf) → NaN),
он возвращается как есть.
"""

from numbers import Integral
from typing import Any, Callable

from floatguard.math import ieee
from floatguard.math.widths import F64


class FunctionsMixin:
    """Элементарные функции, общие для всех разрядностей."""

    def _apply(self, function: Callable[..., float], *arguments: float):
        raw = self.value
        result = ieee.propagate_poison(
            self._width.coerce(function(raw, *arguments)), raw, *arguments
        )
        return self._unguarded_type()._wrap(result)

    def _apply_with(self, function: Callable[[float, float], float], other: Any):
        raw_other = self._operand(other)
        if raw_other is None:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: {type(other).__name__}"
            )
        return self._apply(function, raw_other)

    # -------------------------------------------------------------------------
    # Функции, сохраняющие тип
    # -------------------------------------------------------------------------

    def abs(self):
        """Абсолютное значение (тот же тип, что и self)."""
        return abs(self)

    def signum(self):
        """
        Знак числа: 1.0 для +0.0 и положительных, -1.0 для -0.0 и отрицательных.

        Тип результата совпадает с self. Для невалидного Unguarded результат
        остаётся невалидным.
        """
        raw = self.value
        return type(self)._wrap(ieee.propagate_poison(ieee.signum(raw), raw))

    # -------------------------------------------------------------------------
    # Степени, корни, логарифмы
    # -------------------------------------------------------------------------

    def sqrt(self):
        return self._apply(ieee.sqrt)

    def recip(self):
        """Обратное значение 1 / self (recip(0) → inf)."""
        return self._apply(ieee.recip)

    def exp(self):
        return self._apply(ieee.exp)

    def ln(self):
        return self._apply(ieee.ln)

    def log2(self):
        return self._apply(ieee.log2)

    def log10(self):
        return self._apply(ieee.log10)

    def log(self, base: Any):
        """
        Логарифм по основанию base.

        Args:
            base: Основание (Guarded / Unguarded той же разрядности или число)
        """
        return self._apply_with(ieee.log, base)

    def powi(self, power: int):
        """
        Возведение в целую степень.

        Args:
            power: Целый показатель

        Raises:
            TypeError: Если power не целое число
        """
        if isinstance(power, bool) or not isinstance(power, Integral):
            raise TypeError(f"powi() expects an int power, got {type(power).__name__}")
        raw = self.value
        # Показатель вне диапазона double становится ±inf, но это не отравление:
        # 0.5 ** 10**400 == 0.0
        result = self._width.coerce(ieee.power(raw, F64.coerce(power)))
        return self._unguarded_type()._wrap(ieee.propagate_poison(result, raw))

    def powf(self, power: Any):
        """Возведение в вещественную степень."""
        return self._apply_with(ieee.power, power)

    # -------------------------------------------------------------------------
    # Тригонометрия
    # -------------------------------------------------------------------------

    def sin(self):
        return self._apply(ieee.sin)

    def cos(self):
        return self._apply(ieee.cos)

    def tan(self):
        return self._apply(ieee.tan)

    def sin_cos(self):
        """Пара (sin(self), cos(self))."""
        return self.sin(), self.cos()

    def asin(self):
        return self._apply(ieee.asin)

    def acos(self):
        return self._apply(ieee.acos)

    def atan(self):
        return self._apply(ieee.atan)

    def atan2(self, other: Any):
        """Арктангенс self / other с учётом квадранта."""
        return self._apply_with(ieee.atan2, other)

    # -------------------------------------------------------------------------
    # Гиперболические функции
    # -------------------------------------------------------------------------

    def sinh(self):
        return self._apply(ieee.sinh)

    def cosh(self):
        return self._apply(ieee.cosh)

    def tanh(self):
        return self._apply(ieee.tanh)

    def asinh(self):
        return self._apply(ieee.asinh)

    def acosh(self):
        return self._apply(ieee.acosh)

    def atanh(self):
        return self._apply(ieee.atanh)
