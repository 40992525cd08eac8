"""
32-bit pair: GuardedF32 / UnguardedF32

Значения хранятся как Python float, округлённый до binary32 после каждой
операции, поэтому результаты совпадают с нативной f32 арифметикой для
+ - * / и sqrt.
"""

from floatguard.domain.consts import install_constants
from floatguard.domain.guarded import Guarded
from floatguard.domain.unguarded import Unguarded
from floatguard.math.widths import F32


class UnguardedF32(Unguarded):
    """32-bit float без гарантии конечности."""

    _width = F32


class GuardedF32(Guarded):
    """32-bit float с гарантией конечности."""

    _width = F32
    _unguarded = UnguardedF32


UnguardedF32._guarded = GuardedF32

install_constants(GuardedF32, UnguardedF32)
