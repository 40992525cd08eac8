"""
Domain value types.

Guarded / Unguarded обёртки и их конкретные пары по разрядностям.
"""

from floatguard.domain.f32 import GuardedF32, UnguardedF32
from floatguard.domain.f64 import GuardedF64, UnguardedF64
from floatguard.domain.guarded import Guarded
from floatguard.domain.unguarded import Unguarded

__all__ = [
    # Base types
    "Guarded",
    "Unguarded",
    # 64-bit
    "GuardedF64",
    "UnguardedF64",
    # 32-bit
    "GuardedF32",
    "UnguardedF32",
]
