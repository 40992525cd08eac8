"""
floatguard — защита float вычислений от NaN и бесконечностей

Два типа на каждую разрядность:
- Guarded: значение гарантированно конечное (проверено при создании)
- Unguarded: результат арифметики, проверка отложена до check()

Пример:
    >>> from floatguard import GuardedF64
    >>> (GuardedF64(3.0) / GuardedF64(2.0)).check()
    GuardedF64(1.5)
"""

# Errors
from floatguard.errors import FloatError, PoisonedValueError

# Settings
from floatguard.config import FloatGuardSettings, Runtime, get_settings, reset_settings

# Value types
from floatguard.domain import (
    Guarded,
    GuardedF32,
    GuardedF64,
    Unguarded,
    UnguardedF32,
    UnguardedF64,
)

__version__ = "0.1.2"

__all__ = [
    # Errors
    "FloatError",
    "PoisonedValueError",
    # Settings
    "FloatGuardSettings",
    "Runtime",
    "get_settings",
    "reset_settings",
    # Value types
    "Guarded",
    "Unguarded",
    "GuardedF64",
    "UnguardedF64",
    "GuardedF32",
    "UnguardedF32",
]
