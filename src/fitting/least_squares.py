"""
Least Squares — Регрессия методом наименьших квадратов

Модели:
- LINEAR:      y = a0 + a1·x
- QUADRATIC:   y = a0 + a1·x + a2·x²
- EXPONENTIAL: y = a·e^(b·x)  (линеаризация Y = ln y, затем LINEAR)

Нормальные уравнения (2×2 или 3×3) решаются методом Гаусса; отказ решателя
(например, SINGULAR_MATRIX при совпадающих x) пробрасывается без изменений.
Переполнение сумм или коэффициентов на конечных входах даёт NON_FINITE_RESULT.

ФОРМУЛЫ:
    LINEAR:
        | n    Σx  | |a0|   | Σy  |
        | Σx   Σx² | |a1| = | Σxy |

    QUADRATIC:
        | n    Σx   Σx² | |a0|   | Σy   |
        | Σx   Σx²  Σx³ | |a1| = | Σxy  |
        | Σx²  Σx³  Σx⁴ | |a2|   | Σx²y |

    Ошибка модели: Σ (y_i - G(x_i))²
"""

import logging
import math
from enum import Enum
from typing import Any, Callable, Iterable, Sequence

from src.core.domain.point import Point, as_points
from src.core.domain.result import FailureKind, NumericResult
from src.core.math.numerical_safeguards import all_finite
from src.solvers.direct import gauss_elimination

logger = logging.getLogger(__name__)


Coefficients = tuple[float, ...]


# =============================================================================
# ENUMS
# =============================================================================


class RegressionModel(str, Enum):
    """Вид регрессионной модели"""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    EXPONENTIAL = "exponential"


MIN_POINTS: dict[RegressionModel, int] = {
    RegressionModel.LINEAR: 2,
    RegressionModel.QUADRATIC: 3,
    RegressionModel.EXPONENTIAL: 2,
}

COEFFICIENT_COUNT: dict[RegressionModel, int] = {
    RegressionModel.LINEAR: 2,
    RegressionModel.QUADRATIC: 3,
    RegressionModel.EXPONENTIAL: 2,
}


def _insufficient(model: RegressionModel, count: int) -> NumericResult[Coefficients]:
    details = f"{model.value} regression needs at least {MIN_POINTS[model]} points, got {count}"
    logger.warning("%s", details)
    return NumericResult.fail(FailureKind.INSUFFICIENT_POINTS, details)


def _non_finite(model: RegressionModel, details: str) -> NumericResult[Coefficients]:
    details = f"{model.value} regression: {details}"
    logger.warning("%s", details)
    return NumericResult.fail(FailureKind.NON_FINITE_RESULT, details)


def _solve_normal_equations(
    model: RegressionModel,
    matrix: list[list[float]],
    rhs: list[float],
) -> NumericResult[Coefficients]:
    if not all(all_finite(row) for row in matrix) or not all_finite(rhs):
        return _non_finite(model, "normal equation sums overflow")

    solution = gauss_elimination(matrix, rhs)
    if not solution.ok:
        logger.warning("%s regression: normal equations failed: %s", model.value, solution.details)
        return NumericResult.fail(solution.failure, solution.details)
    if not all_finite(solution.value):
        return _non_finite(model, "coefficients are not finite")
    return NumericResult.success(tuple(solution.value), details=f"{model.value} regression")


# =============================================================================
# LINEAR
# =============================================================================


def linear_regression(points: Iterable[Any]) -> NumericResult[Coefficients]:
    """
    Прямая наименьших квадратов y = a0 + a1·x.

    Args:
        points: Узлы (Point, пары (x, y) или {"x", "y"})

    Returns:
        NumericResult с коэффициентами (a0, a1).
        Отказы: INSUFFICIENT_POINTS (n < 2), отказ решателя нормальных уравнений,
        NON_FINITE_RESULT
    """
    pts = as_points(points)
    n = len(pts)
    if n < MIN_POINTS[RegressionModel.LINEAR]:
        return _insufficient(RegressionModel.LINEAR, n)

    sum_x = sum(p.x for p in pts)
    sum_y = sum(p.y for p in pts)
    sum_x2 = sum(p.x * p.x for p in pts)
    sum_xy = sum(p.x * p.y for p in pts)

    matrix = [
        [float(n), sum_x],
        [sum_x, sum_x2],
    ]
    rhs = [sum_y, sum_xy]
    return _solve_normal_equations(RegressionModel.LINEAR, matrix, rhs)


# =============================================================================
# QUADRATIC
# =============================================================================


def quadratic_regression(points: Iterable[Any]) -> NumericResult[Coefficients]:
    """
    Парабола наименьших квадратов y = a0 + a1·x + a2·x².

    Returns:
        NumericResult с коэффициентами (a0, a1, a2).
        Отказы: INSUFFICIENT_POINTS (n < 3), отказ решателя нормальных уравнений,
        NON_FINITE_RESULT
    """
    pts = as_points(points)
    n = len(pts)
    if n < MIN_POINTS[RegressionModel.QUADRATIC]:
        return _insufficient(RegressionModel.QUADRATIC, n)

    try:
        # Степенные суммы Σx^k, k = 0..4
        power_sums = [sum(p.x ** k for p in pts) for k in range(5)]
        # Смешанные суммы Σx^k·y, k = 0..2
        cross_sums = [sum((p.x ** k) * p.y for p in pts) for k in range(3)]
    except OverflowError:
        return _non_finite(RegressionModel.QUADRATIC, "power sums overflow")

    matrix = [[power_sums[row + col] for col in range(3)] for row in range(3)]
    return _solve_normal_equations(RegressionModel.QUADRATIC, matrix, cross_sums)


# =============================================================================
# EXPONENTIAL
# =============================================================================


def exponential_regression(points: Iterable[Any]) -> NumericResult[Coefficients]:
    """
    Экспонента y = a·e^(b·x) через линеаризацию.

    Алгоритм:
        1. Проверка y > 0 для всех точек
        2. Y = ln(y), линейная регрессия по (x, Y) → (A, B)
        3. a = e^A, b = B

    Returns:
        NumericResult с коэффициентами (a, b).
        Отказы: INSUFFICIENT_POINTS (n < 2), NON_POSITIVE_VALUE, NON_FINITE_RESULT,
        отказ решателя нормальных уравнений
    """
    pts = as_points(points)
    n = len(pts)
    if n < MIN_POINTS[RegressionModel.EXPONENTIAL]:
        return _insufficient(RegressionModel.EXPONENTIAL, n)

    for i, p in enumerate(pts):
        if p.y <= 0:
            details = f"exponential regression requires y > 0, point {i} has y={p.y}"
            logger.warning("%s", details)
            return NumericResult.fail(FailureKind.NON_POSITIVE_VALUE, details)

    linearized = [Point(x=p.x, y=math.log(p.y)) for p in pts]
    line = linear_regression(linearized)
    if not line.ok:
        return NumericResult.fail(line.failure, line.details)

    intercept, slope = line.value
    try:
        scale = math.exp(intercept)
    except OverflowError:
        return _non_finite(RegressionModel.EXPONENTIAL, f"e^{intercept} overflows")

    return NumericResult.success(
        (scale, slope),
        details="exponential regression (log-linearized)",
    )


# =============================================================================
# EVALUATION & ERROR
# =============================================================================


def evaluate_model(model: RegressionModel, coefficients: Sequence[float], x: float) -> float:
    """
    Значение модели G(x) для заданных коэффициентов.

    Переполнение e^(b·x) даёт ±inf (как и переполнение x² в QUADRATIC),
    а не OverflowError.

    Raises:
        ValueError: Если число коэффициентов не соответствует модели
    """
    expected = COEFFICIENT_COUNT[model]
    if len(coefficients) != expected:
        raise ValueError(
            f"{model.value} model expects {expected} coefficients, got {len(coefficients)}"
        )

    if model == RegressionModel.LINEAR:
        a0, a1 = coefficients
        return a0 + a1 * x
    if model == RegressionModel.QUADRATIC:
        a0, a1, a2 = coefficients
        return a0 + a1 * x + a2 * x * x
    a, b = coefficients
    try:
        growth = math.exp(b * x)
    except OverflowError:
        growth = math.inf
    return a * growth


def sum_squared_error(
    points: Iterable[Any],
    coefficients: Sequence[float],
    model: RegressionModel = RegressionModel.LINEAR,
) -> float:
    """
    Квадратичная ошибка Σ (y_i - G(x_i))².

    Examples:
        >>> sum_squared_error([(0, 1), (1, 3)], (1.0, 2.0))
        0.0
    """
    residuals = (p.y - evaluate_model(model, coefficients, p.x) for p in as_points(points))
    # r * r вместо r ** 2: переполнение даёт inf, а не OverflowError
    return sum(r * r for r in residuals)


# =============================================================================
# DISPATCH
# =============================================================================

_FITTERS: dict[RegressionModel, Callable[[Iterable[Any]], NumericResult[Coefficients]]] = {
    RegressionModel.LINEAR: linear_regression,
    RegressionModel.QUADRATIC: quadratic_regression,
    RegressionModel.EXPONENTIAL: exponential_regression,
}


def fit(model: RegressionModel, points: Iterable[Any]) -> NumericResult[Coefficients]:
    """Регрессия выбранного вида."""
    return _FITTERS[RegressionModel(model)](points)
