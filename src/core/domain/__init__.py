"""
Domain models and value objects.

Contains Point, the Matrix/Vector aliases and the NumericResult failure union.
"""

from src.core.domain.linear_system import Matrix, Vector, describe_dimension_mismatch
from src.core.domain.point import Point, as_point, as_points
from src.core.domain.result import FailureKind, NumericFailure, NumericResult

__all__ = [
    # Linear system
    "Matrix",
    "Vector",
    "describe_dimension_mismatch",
    # Point model
    "Point",
    "as_point",
    "as_points",
    # Results
    "FailureKind",
    "NumericFailure",
    "NumericResult",
]
