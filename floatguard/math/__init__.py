"""
Math primitives for floatguard

Операции над сырыми float значениями, без знания о типах-обёртках.
"""

# Validation boundary
from floatguard.math.validation import (
    check_float,
    classify_float,
    is_valid_float,
)

# Widths
from floatguard.math.widths import F32, F64, FloatWidth

__all__ = [
    # Validation
    "check_float",
    "classify_float",
    "is_valid_float",
    # Widths
    "F32",
    "F64",
    "FloatWidth",
]
