"""Interpolation — многочлены Лагранжа и Ньютона."""

from .polynomial import divided_differences, lagrange_interpolation, newton_interpolation

__all__ = [
    "divided_differences",
    "lagrange_interpolation",
    "newton_interpolation",
]
