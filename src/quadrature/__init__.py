"""Quadrature — составные формулы трапеций и Симпсона 1/3."""

from .composite import (
    QuadratureConfig,
    simpson_rule,
    simpson_with_trapezoid_fallback,
    trapezoidal_rule,
)

__all__ = [
    "QuadratureConfig",
    "simpson_rule",
    "simpson_with_trapezoid_fallback",
    "trapezoidal_rule",
]
