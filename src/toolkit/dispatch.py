"""Dispatch — выбор численного метода по тегу.

Каждое семейство алгоритмов представлено enum-тегом и таблицей функций.
Выбор метода выполняется в момент вызова, без иерархии классов:
- DirectMethod        → gauss_elimination / gauss_jordan / lu_factorization
- IterativeMethod     → gauss_seidel
- InterpolationMethod → lagrange_interpolation / newton_interpolation
- QuadratureMethod    → trapezoidal_rule / simpson_rule / simpson_with_trapezoid_fallback
- RegressionModel     → linear / quadratic / exponential regression
"""

from enum import Enum
from typing import Any, Callable, Iterable, Optional

from src.core.domain.linear_system import Matrix, Vector
from src.core.domain.result import NumericResult
from src.fitting.least_squares import Coefficients, RegressionModel, fit
from src.interpolation.polynomial import lagrange_interpolation, newton_interpolation
from src.quadrature.composite import (
    QuadratureConfig,
    simpson_rule,
    simpson_with_trapezoid_fallback,
    trapezoidal_rule,
)
from src.solvers.direct import gauss_elimination, gauss_jordan, lu_factorization
from src.solvers.iterative import GaussSeidelConfig, gauss_seidel


class DirectMethod(str, Enum):
    """Прямой метод решения Ax = b."""
    GAUSS = "gauss"
    GAUSS_JORDAN = "gauss_jordan"
    LU = "lu"


class IterativeMethod(str, Enum):
    """Итерационный метод решения Ax = b."""
    GAUSS_SEIDEL = "gauss_seidel"


class InterpolationMethod(str, Enum):
    """Метод полиномиальной интерполяции."""
    LAGRANGE = "lagrange"
    NEWTON = "newton"


class QuadratureMethod(str, Enum):
    """Составная квадратурная формула."""
    TRAPEZOIDAL = "trapezoidal"
    SIMPSON = "simpson"
    SIMPSON_FALLBACK = "simpson_fallback"


DIRECT_METHODS: dict[DirectMethod, Callable[[Matrix, Vector], NumericResult[list[float]]]] = {
    DirectMethod.GAUSS: gauss_elimination,
    DirectMethod.GAUSS_JORDAN: gauss_jordan,
    DirectMethod.LU: lu_factorization,
}

INTERPOLATION_METHODS: dict[InterpolationMethod, Callable[[Iterable[Any], float], NumericResult[float]]] = {
    InterpolationMethod.LAGRANGE: lagrange_interpolation,
    InterpolationMethod.NEWTON: newton_interpolation,
}

QUADRATURE_METHODS: dict[QuadratureMethod, Callable[..., NumericResult[float]]] = {
    QuadratureMethod.TRAPEZOIDAL: trapezoidal_rule,
    QuadratureMethod.SIMPSON: simpson_rule,
    QuadratureMethod.SIMPSON_FALLBACK: simpson_with_trapezoid_fallback,
}


def solve_linear_system(
    method: DirectMethod | str,
    matrix: Matrix,
    rhs: Vector,
) -> NumericResult[list[float]]:
    """Решение Ax = b выбранным прямым методом.

    Raises:
        ValueError: Если метод неизвестен
    """
    return DIRECT_METHODS[DirectMethod(method)](matrix, rhs)


def solve_iteratively(
    method: IterativeMethod | str,
    matrix: Matrix,
    rhs: Vector,
    initial_guess: Optional[Vector] = None,
    config: Optional[GaussSeidelConfig] = None,
) -> NumericResult[list[float]]:
    """Решение Ax = b выбранным итерационным методом."""
    IterativeMethod(method)
    return gauss_seidel(matrix, rhs, initial_guess, config=config)


def interpolate(
    method: InterpolationMethod | str,
    points: Iterable[Any],
    x_query: float,
) -> NumericResult[float]:
    """Значение интерполяционного многочлена в x_query."""
    return INTERPOLATION_METHODS[InterpolationMethod(method)](points, x_query)


def integrate(
    method: QuadratureMethod | str,
    points: Iterable[Any],
    config: Optional[QuadratureConfig] = None,
) -> NumericResult[float]:
    """Интеграл по таблице равноотстоящих узлов."""
    return QUADRATURE_METHODS[QuadratureMethod(method)](points, config)


def regress(model: RegressionModel | str, points: Iterable[Any]) -> NumericResult[Coefficients]:
    """Регрессия выбранного вида."""
    return fit(RegressionModel(model), points)
