"""
IEEE-754 Semantics — результаты без исключений

Python float и модуль math отклоняются от IEEE-754 в нескольких местах:
деление на ноль бросает ZeroDivisionError, выход из области определения
бросает ValueError, переполнение в exp/pow/sinh/cosh бросает OverflowError.
Этот модуль возвращает вместо исключений значение, которое предписывает
IEEE-754 (NaN или бесконечность со знаком).

Дополнительно реализовано распространение "отравления" (propagate_poison):
если IEEE-754 даёт невалидный результат, он и возвращается (-inf * 0 == NaN,
0 - inf == -inf); если же из невалидного операнда получилось конечное
значение (6 / inf == 0, tanh(inf) == 1), результатом становится этот операнд.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключений для float аргументов
2. Для конечных аргументов результат совпадает с IEEE-754 (double)
3. Невалидный операнд никогда не даёт валидный результат
"""

import math
from typing import Callable

NAN = math.nan
INF = math.inf


# =============================================================================
# POISON PRESERVATION
# =============================================================================


def propagate_poison(result: float, *operands: float) -> float:
    """
    Распространение невалидного операнда на результат.

    Правила:
    - все операнды конечны → IEEE-результат как есть
    - IEEE-результат невалиден → он сам (вид ошибки и знак бесконечности
      определяет IEEE-754: -inf * 0 == NaN, inf * -2 == -inf)
    - IEEE-результат конечен, но среди операндов есть невалидный →
      первый невалидный операнд (отравление не "лечится")

    Args:
        result: IEEE-результат операции
        operands: Исходные операнды

    Returns:
        Сырой результат операции

    Examples:
        >>> propagate_poison(0.0, 6.0, math.inf)
        inf
        >>> propagate_poison(math.nan, -math.inf, 0.0)
        nan
        >>> propagate_poison(-math.inf, 0.0, math.inf)
        -inf
        >>> propagate_poison(3.0, 1.0, 2.0)
        3.0
    """
    if not math.isfinite(result):
        return result
    for operand in operands:
        if not math.isfinite(operand):
            return operand
    return result


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and value % 2 == 1


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def divide(lhs: float, rhs: float) -> float:
    """
    Деление по IEEE-754: x / ±0 → ±inf, 0 / 0 → NaN.

    Examples:
        >>> divide(1.0, 0.0)
        inf
        >>> divide(1.0, -0.0)
        -inf
        >>> divide(0.0, 0.0)
        nan
    """
    try:
        return lhs / rhs
    except ZeroDivisionError:
        if math.isnan(lhs) or lhs == 0.0:
            return NAN
        return math.copysign(INF, lhs) * math.copysign(1.0, rhs)


def remainder(lhs: float, rhs: float) -> float:
    """
    Остаток от деления как C fmod: знак результата следует за делимым.

    Отличается от оператора % Python (floored modulo): remainder(-5, 3) == -2.

    Examples:
        >>> remainder(5.0, 3.0)
        2.0
        >>> remainder(-5.0, 3.0)
        -2.0
        >>> remainder(5.0, 0.0)
        nan
    """
    if math.isnan(lhs) or math.isnan(rhs) or math.isinf(lhs) or rhs == 0.0:
        return NAN
    return math.fmod(lhs, rhs)


def power(base: float, exponent: float) -> float:
    """
    Возведение в степень по IEEE-754 (C pow).

    Examples:
        >>> power(2.0, 10.0)
        1024.0
        >>> power(0.0, -1.0)
        inf
        >>> power(-8.0, 1.0 / 3.0)
        nan
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        if base == 0.0:
            # 0 в отрицательной степени
            if _is_odd_integer(exponent):
                return math.copysign(INF, base)
            return INF
        return NAN


# =============================================================================
# ЭЛЕМЕНТАРНЫЕ ФУНКЦИИ
# =============================================================================


def _nan_on_domain_error(fn: Callable[[float], float], value: float) -> float:
    try:
        return fn(value)
    except ValueError:
        return NAN


def sqrt(value: float) -> float:
    # sqrt(-0.0) == -0.0
    if value < 0.0:
        return NAN
    return math.sqrt(value)


def recip(value: float) -> float:
    return divide(1.0, value)


def exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return INF


def _logarithm(fn: Callable[[float], float], value: float) -> float:
    if value == 0.0:
        return -INF
    if value < 0.0:
        return NAN
    return fn(value)


def ln(value: float) -> float:
    return _logarithm(math.log, value)


def log2(value: float) -> float:
    return _logarithm(math.log2, value)


def log10(value: float) -> float:
    return _logarithm(math.log10, value)


def log(value: float, base: float) -> float:
    """Логарифм по произвольному основанию: ln(value) / ln(base)."""
    return divide(ln(value), ln(base))


def sin(value: float) -> float:
    return _nan_on_domain_error(math.sin, value)


def cos(value: float) -> float:
    return _nan_on_domain_error(math.cos, value)


def tan(value: float) -> float:
    return _nan_on_domain_error(math.tan, value)


def asin(value: float) -> float:
    return _nan_on_domain_error(math.asin, value)


def acos(value: float) -> float:
    return _nan_on_domain_error(math.acos, value)


def atan(value: float) -> float:
    return math.atan(value)


def atan2(lhs: float, rhs: float) -> float:
    return math.atan2(lhs, rhs)


def sinh(value: float) -> float:
    try:
        return math.sinh(value)
    except OverflowError:
        return math.copysign(INF, value)


def cosh(value: float) -> float:
    try:
        return math.cosh(value)
    except OverflowError:
        return INF


def tanh(value: float) -> float:
    return math.tanh(value)


def asinh(value: float) -> float:
    return math.asinh(value)


def acosh(value: float) -> float:
    return _nan_on_domain_error(math.acosh, value)


def atanh(value: float) -> float:
    if abs(value) == 1.0:
        return math.copysign(INF, value)
    return _nan_on_domain_error(math.atanh, value)


def signum(value: float) -> float:
    """Знак числа: ±1.0 (в т.ч. для ±0.0), NaN для NaN."""
    if math.isnan(value):
        return NAN
    return math.copysign(1.0, value)
