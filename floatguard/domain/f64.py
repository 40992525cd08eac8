"""
64-bit pair: GuardedF64 / UnguardedF64
"""

from floatguard.domain.consts import install_constants
from floatguard.domain.guarded import Guarded
from floatguard.domain.unguarded import Unguarded
from floatguard.math.widths import F64


class UnguardedF64(Unguarded):
    """64-bit float без гарантии конечности."""

    _width = F64


class GuardedF64(Guarded):
    """64-bit float с гарантией конечности."""

    _width = F64
    _unguarded = UnguardedF64


UnguardedF64._guarded = GuardedF64

install_constants(GuardedF64, UnguardedF64)
