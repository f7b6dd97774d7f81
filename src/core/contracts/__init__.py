"""
Contract Validation Module

Модуль для валидации JSON payload-запросов к численным методам.
"""

from .validators import (
    ContractValidator,
    IterativeSystemValidator,
    LinearSystemValidator,
    PointSetValidator,
    SchemaLoader,
    ValidationError,
    validate_iterative_system,
    validate_linear_system,
    validate_point_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LinearSystemValidator",
    "IterativeSystemValidator",
    "PointSetValidator",
    # Exceptions
    "ValidationError",
    # Functions
    "validate_linear_system",
    "validate_iterative_system",
    "validate_point_set",
]
