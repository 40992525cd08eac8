"""
Constants — константы разрядности и математические константы

Каждая пара типов получает одинаковый набор констант: целые характеристики
разрядности (RADIX, MANTISSA_DIGITS, ...) как int и вещественные константы
(EPSILON, PI, E, ...) как экземпляры соответствующего типа.
"""

from typing import Final

from floatguard.math.widths import FloatWidth

# Математические константы (десятичная запись с запасом точности,
# литерал округляется корректно до ближайшего double)
MATH_CONSTANTS: Final[dict[str, float]] = {
    "PI": 3.14159265358979323846264338327950288,
    "TAU": 6.28318530717958647692528676655900577,
    "E": 2.71828182845904523536028747135266250,
    "FRAC_PI_2": 1.57079632679489661923132169163975144,
    "FRAC_PI_3": 1.04719755119659774615421446109316763,
    "FRAC_PI_4": 0.785398163397448309615660845819875721,
    "FRAC_PI_6": 0.52359877559829887307710723054658381,
    "FRAC_PI_8": 0.39269908169872415480783042290993786,
    "FRAC_1_PI": 0.318309886183790671537767526745028724,
    "FRAC_2_PI": 0.636619772367581343075535053490057448,
    "FRAC_2_SQRT_PI": 1.12837916709551257389615890312154517,
    "SQRT_2": 1.41421356237309504880168872420969808,
    "FRAC_1_SQRT_2": 0.707106781186547524400844362104849039,
    "LN_2": 0.693147180559945309417232121458176568,
    "LN_10": 2.30258509299404568401799145468436421,
    "LOG2_E": 1.44269504088896340735992468100189214,
    "LOG2_10": 3.32192809488736234787031942948939018,
    "LOG10_E": 0.434294481903251827651128918916605082,
    "LOG10_2": 0.301029995663981195213738894618566540,
}


def width_constants(width: FloatWidth) -> dict[str, float]:
    """Вещественные константы разрядности (все конечные)."""
    return {
        "EPSILON": width.epsilon,
        "MIN": -width.max_value,
        "MIN_POSITIVE": width.min_positive,
        "MAX": width.max_value,
        **{name: width.coerce(value) for name, value in MATH_CONSTANTS.items()},
    }


def width_limits(width: FloatWidth) -> dict[str, int]:
    """Целые характеристики разрядности."""
    return {
        "RADIX": width.radix,
        "MANTISSA_DIGITS": width.mantissa_digits,
        "DIGITS": width.digits,
        "MIN_EXP": width.min_exp,
        "MAX_EXP": width.max_exp,
        "MIN_10_EXP": width.min_10_exp,
        "MAX_10_EXP": width.max_10_exp,
    }


def install_constants(guarded_type: type, unguarded_type: type) -> None:
    """
    Установить константы как атрибуты класса для пары типов.

    Args:
        guarded_type: Guarded тип разрядности
        unguarded_type: Unguarded тип той же разрядности
    """
    width = guarded_type._width

    for name, value in width_limits(width).items():
        setattr(guarded_type, name, value)
        setattr(unguarded_type, name, value)

    for name, value in width_constants(width).items():
        setattr(guarded_type, name, guarded_type._wrap(value))
        setattr(unguarded_type, name, unguarded_type._wrap(value))
