"""
Polynomial Interpolation — Лагранж и Ньютон (разделённые разности)

Оба метода строят интерполяционный многочлен степени n-1 по n узлам и
вычисляют его значение в произвольной точке x_query. Каждый вызов
независим: базис/таблица пересчитываются полностью (O(n²)).

Совпадающие абсциссы (|x_i - x_j| < EPS_PIVOT) → DUPLICATE_ABSCISSA.
"""

import logging
from typing import Any, Iterable

from src.core.domain.point import Point, as_points
from src.core.domain.result import FailureKind, NumericResult
from src.core.math.numerical_safeguards import EPS_PIVOT, is_near_zero

logger = logging.getLogger(__name__)


def _duplicate(method: str, i: int, j: int, pts: list[Point]) -> NumericResult:
    details = (
        f"points {i} and {j} share abscissa x={pts[i].x} "
        f"(|x_i - x_j| < {EPS_PIVOT:.0e})"
    )
    logger.warning("%s: %s", method, details)
    return NumericResult.fail(FailureKind.DUPLICATE_ABSCISSA, details)


def _empty(method: str) -> NumericResult:
    details = "interpolation needs at least 1 point, got 0"
    logger.warning("%s: %s", method, details)
    return NumericResult.fail(FailureKind.INSUFFICIENT_POINTS, details)


# =============================================================================
# LAGRANGE
# =============================================================================


def lagrange_interpolation(points: Iterable[Any], x_query: float) -> NumericResult[float]:
    """
    Значение многочлена Лагранжа в точке x_query.

    P(x) = Σ y_i · L_i(x),   L_i(x) = Π_{j≠i} (x - x_j) / (x_i - x_j)

    Args:
        points: Узлы интерполяции с попарно различными x
        x_query: Точка, в которой оценивается P(x)

    Returns:
        NumericResult со значением P(x_query).
        Отказы: DUPLICATE_ABSCISSA, INSUFFICIENT_POINTS (пустой набор)

    Examples:
        >>> lagrange_interpolation([(0, 0), (1, 1), (2, 4)], 3).value
        9.0
    """
    pts = as_points(points)
    n = len(pts)
    if n == 0:
        return _empty("lagrange_interpolation")

    total = 0.0
    for i in range(n):
        basis = 1.0
        for j in range(n):
            if i == j:
                continue
            denominator = pts[i].x - pts[j].x
            if is_near_zero(denominator):
                return _duplicate("lagrange_interpolation", i, j, pts)
            basis *= (x_query - pts[j].x) / denominator

        total += pts[i].y * basis

    return NumericResult.success(total, details=f"lagrange, degree {n - 1}")


# =============================================================================
# NEWTON
# =============================================================================


def divided_differences(points: Iterable[Any]) -> NumericResult[list[float]]:
    """
    Коэффициенты Ньютона f[x0], f[x0,x1], ..., f[x0..x_{n-1}].

    Таблица F строится по возрастанию порядка j:
        F[i][0] = y_i
        F[i][j] = (F[i+1][j-1] - F[i][j-1]) / (x_{i+j} - x_i)

    Returns:
        NumericResult с верхней строкой таблицы F[0][0..n-1].
        Отказы: DUPLICATE_ABSCISSA, INSUFFICIENT_POINTS (пустой набор)
    """
    pts = as_points(points)
    n = len(pts)
    if n == 0:
        return _empty("divided_differences")

    table: list[list[float]] = [[p.y] for p in pts]

    for j in range(1, n):
        for i in range(n - j):
            denominator = pts[i + j].x - pts[i].x
            if is_near_zero(denominator):
                return _duplicate("divided_differences", i, i + j, pts)
            table[i].append((table[i + 1][j - 1] - table[i][j - 1]) / denominator)

    return NumericResult.success(table[0], details=f"divided differences, order {n - 1}")


def newton_interpolation(points: Iterable[Any], x_query: float) -> NumericResult[float]:
    """
    Значение многочлена Ньютона в точке x_query.

    P(x) = F[0][0] + Σ_{i=1}^{n-1} F[0][i] · Π_{k<i} (x - x_k)

    Произведение накапливается инкрементально.

    Returns:
        NumericResult со значением P(x_query).
        Отказы: DUPLICATE_ABSCISSA, INSUFFICIENT_POINTS (пустой набор)
    """
    pts = as_points(points)
    coefficients = divided_differences(pts)
    if not coefficients.ok:
        return NumericResult.fail(coefficients.failure, coefficients.details)

    value = coefficients.value[0]
    product = 1.0
    for i in range(1, len(pts)):
        product *= x_query - pts[i - 1].x
        value += coefficients.value[i] * product

    return NumericResult.success(value, details=f"newton, degree {len(pts) - 1}")
