"""Fitting — регрессия методом наименьших квадратов (прямая, парабола, экспонента)."""

from .least_squares import (
    Coefficients,
    RegressionModel,
    evaluate_model,
    exponential_regression,
    fit,
    linear_regression,
    quadratic_regression,
    sum_squared_error,
)

__all__ = [
    "Coefficients",
    "RegressionModel",
    "evaluate_model",
    "exponential_regression",
    "fit",
    "linear_regression",
    "quadratic_regression",
    "sum_squared_error",
]
