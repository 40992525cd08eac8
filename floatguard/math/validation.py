"""
Float Validation — единственная граница валидации

Модуль классифицирует сырые float значения и реализует единственную точку,
в которой невалидное значение превращается в ошибку:
- is_valid_float: быстрая проверка конечности
- classify_float: точная причина невалидности (FloatError) или None
- check_float: граница валидации (возвращает значение или бросает ошибку)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Signed zero и субнормальные числа валидны
2. Знак бесконечности определяет POSITIVE_INFINITY / NEGATIVE_INFINITY
3. Любой NaN (независимо от битового паттерна) → NOT_A_NUMBER
4. Функции чистые: результат зависит только от входного значения
"""

import logging
import math

from floatguard.config import get_settings
from floatguard.errors import FloatError, PoisonedValueError

logger = logging.getLogger(__name__)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def classify_float(value: float) -> FloatError | None:
    """
    Классификация невалидного float значения.

    Args:
        value: Проверяемое значение

    Returns:
        None для конечных значений, иначе соответствующий FloatError

    Examples:
        >>> classify_float(1.5) is None
        True
        >>> classify_float(float("nan"))
        <FloatError.NOT_A_NUMBER: 'NotANumber'>
        >>> classify_float(float("-inf"))
        <FloatError.NEGATIVE_INFINITY: 'NegativeInfinity'>
    """
    if math.isfinite(value):
        return None
    if math.isnan(value):
        return FloatError.NOT_A_NUMBER
    if value > 0:
        return FloatError.POSITIVE_INFINITY
    return FloatError.NEGATIVE_INFINITY


# =============================================================================
# ГРАНИЦА ВАЛИДАЦИИ
# =============================================================================


def check_float(value: float) -> float:
    """
    Граница валидации: пропускает только конечные значения.

    Используется конструкторами Guarded-типов и Unguarded.check(); других
    мест, где обнаруживается невалидное состояние, нет.

    Args:
        value: Сырое значение

    Returns:
        value без изменений (бит в бит), если оно конечное

    Raises:
        PoisonedValueError: Если value — NaN или ±Inf
    """
    error = classify_float(value)
    if error is None:
        return value

    if get_settings().logging_enabled:
        logger.debug("Rejected non-finite value %r: %s", value, error.description)

    raise PoisonedValueError(error, value)
