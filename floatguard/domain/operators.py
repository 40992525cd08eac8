"""
Operator Matrix — арифметика без валидации

Операторы + - * / % определены один раз для всех сочетаний операндов:
Guarded ⊕ Guarded, Guarded ⊕ Unguarded, Unguarded ⊕ Unguarded и каждый из
них против сырого числа (с любой стороны).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любого бинарного оператора — Unguarded той же разрядности
2. Операторы никогда не бросают исключений из-за значений (деление на ноль
   даёт ±inf / NaN по IEEE-754); TypeError только для неподдерживаемых типов
3. Невалидный операнд всегда даёт невалидный результат (poison propagation):
   невалидный IEEE-результат возвращается как есть (знак бесконечности по
   IEEE-754), конечный результат заменяется первым невалидным операндом
4. Разные разрядности не смешиваются (TypeError)
"""

import operator
from typing import Any, Callable, Final

from floatguard.math import ieee
from floatguard.math.widths import FloatWidth

BinaryOperation = Callable[[float, float], float]

# =============================================================================
# ТАБЛИЦА ОПЕРАЦИЙ
# =============================================================================

ADD: Final[BinaryOperation] = operator.add
SUB: Final[BinaryOperation] = operator.sub
MUL: Final[BinaryOperation] = operator.mul
DIV: Final[BinaryOperation] = ieee.divide
REM: Final[BinaryOperation] = ieee.remainder


def apply_binary(
    operation: BinaryOperation,
    lhs: float,
    rhs: float,
    width: FloatWidth,
) -> float:
    """
    Применение бинарной операции к сырым значениям.

    Args:
        operation: Операция из таблицы (ADD, SUB, MUL, DIV, REM)
        lhs: Левый операнд
        rhs: Правый операнд
        width: Разрядность результата

    Returns:
        Сырой результат (может быть NaN / ±inf)
    """
    return ieee.propagate_poison(width.coerce(operation(lhs, rhs)), lhs, rhs)


# =============================================================================
# MIXIN
# =============================================================================


class ArithmeticMixin:
    """Бинарные операторы для Guarded / Unguarded (результат всегда Unguarded)."""

    def _binary(self, operation: BinaryOperation, other: Any, reflected: bool = False):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented

        lhs = self.value
        if reflected:
            lhs, rhs = rhs, lhs

        result = apply_binary(operation, lhs, rhs, self._width)
        return self._unguarded_type()._wrap(result)

    def __add__(self, other):
        return self._binary(ADD, other)

    def __radd__(self, other):
        return self._binary(ADD, other, reflected=True)

    def __sub__(self, other):
        return self._binary(SUB, other)

    def __rsub__(self, other):
        return self._binary(SUB, other, reflected=True)

    def __mul__(self, other):
        return self._binary(MUL, other)

    def __rmul__(self, other):
        return self._binary(MUL, other, reflected=True)

    def __truediv__(self, other):
        return self._binary(DIV, other)

    def __rtruediv__(self, other):
        return self._binary(DIV, other, reflected=True)

    def __mod__(self, other):
        return self._binary(REM, other)

    def __rmod__(self, other):
        return self._binary(REM, other, reflected=True)
