"""
Wire contracts for floatguard types.

Opt-in адаптер сериализации (pydantic): типы сериализуются как голое число,
десериализация Guarded повторно валидирует значение.
"""

from .serde import (
    WIRE_MODEL_CONFIG,
    GuardedF32Field,
    GuardedF64Field,
    GuardedSchema,
    UnguardedF32Field,
    UnguardedF64Field,
    UnguardedSchema,
)

__all__ = [
    # Annotation markers
    "GuardedSchema",
    "UnguardedSchema",
    # Field aliases
    "GuardedF64Field",
    "UnguardedF64Field",
    "GuardedF32Field",
    "UnguardedF32Field",
    # Model config
    "WIRE_MODEL_CONFIG",
]
