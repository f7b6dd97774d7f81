"""
Core math modules

Epsilon-параметры и примитивы численной устойчивости.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_PIVOT,
    EPS_SPACING,
    # Pivot guards
    is_near_zero,
    # NaN/Inf checks
    all_finite,
    is_valid_float,
    # Norms
    max_abs_difference,
    # Value semantics
    augment,
    copy_matrix,
    copy_vector,
    is_square,
    # Validation
    validate_positive,
    validate_positive_int,
)

__all__ = [
    # Epsilon constants
    "EPS_PIVOT",
    "EPS_SPACING",
    # Pivot guards
    "is_near_zero",
    # NaN/Inf checks
    "all_finite",
    "is_valid_float",
    # Norms
    "max_abs_difference",
    # Value semantics
    "augment",
    "copy_matrix",
    "copy_vector",
    "is_square",
    # Validation
    "validate_positive",
    "validate_positive_int",
]
