"""
Iterative Methods — Метод Гаусса-Зейделя

Релаксационный метод для систем Ax = b с контролем сходимости:
- Один рабочий вектор x, обновляемый на месте: новые x[i] сразу видны
  следующим строкам того же прохода (Seidel, не Jacobi)
- Критерий остановки: max |x[i] - x_prev[i]| < tolerance в конце прохода
- Исчерпание max_iterations: штатный результат DID_NOT_CONVERGE
- Переполнение до inf/NaN на любом проходе также даёт DID_NOT_CONVERGE;
  неконечный вектор никогда не возвращается как решение

Сходимость гарантирована для матриц со строгим диагональным преобладанием;
для произвольных матриц сходимость обеспечивает вызывающий код.
"""

import logging
import math
from dataclasses import dataclass
from typing import Final, Optional

from src.core.domain.linear_system import Matrix, Vector, describe_dimension_mismatch
from src.core.domain.result import FailureKind, NumericResult
from src.core.math.numerical_safeguards import (
    EPS_PIVOT,
    all_finite,
    copy_vector,
    is_near_zero,
    is_square,
    validate_positive,
    validate_positive_int,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

DEFAULT_TOLERANCE: Final[float] = 1e-4
DEFAULT_MAX_ITERATIONS: Final[int] = 100


@dataclass(frozen=True)
class GaussSeidelConfig:
    """Параметры остановки метода Гаусса-Зейделя.

    - tolerance: порог max-изменения компоненты за проход
    - max_iterations: максимальное число полных проходов
    """
    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        validate_positive(self.tolerance, "tolerance")
        validate_positive_int(self.max_iterations, "max_iterations")


# =============================================================================
# ДИАГНОСТИКА
# =============================================================================


def is_diagonally_dominant(matrix: Matrix, strict: bool = True) -> bool:
    """
    Проверка диагонального преобладания по строкам.

    |A[i][i]| > Σ_{j≠i} |A[i][j]| для всех i (при strict=False: ≥).
    Достаточное (не необходимое) условие сходимости Гаусса-Зейделя.

    Examples:
        >>> is_diagonally_dominant([[4, 1], [2, 5]])
        True
        >>> is_diagonally_dominant([[1, 2], [3, 1]])
        False
    """
    if not is_square(matrix):
        return False

    for i, row in enumerate(matrix):
        diagonal = abs(row[i])
        off_diagonal = sum(abs(value) for j, value in enumerate(row) if j != i)
        if strict and diagonal <= off_diagonal:
            return False
        if not strict and diagonal < off_diagonal:
            return False
    return True


# =============================================================================
# GAUSS-SEIDEL
# =============================================================================


def gauss_seidel(
    matrix: Matrix,
    rhs: Vector,
    initial_guess: Optional[Vector] = None,
    tolerance: Optional[float] = None,
    max_iterations: Optional[int] = None,
    config: Optional[GaussSeidelConfig] = None,
) -> NumericResult[list[float]]:
    """
    Решение Ax = b методом Гаусса-Зейделя.

    Явные tolerance/max_iterations имеют приоритет над config.

    Args:
        matrix: Квадратная матрица A (n×n)
        rhs: Вектор b (длина n)
        initial_guess: Начальное приближение (default: нулевой вектор)
        tolerance: Порог сходимости (default: 1e-4)
        max_iterations: Максимум проходов (default: 100)
        config: GaussSeidelConfig с параметрами по умолчанию

    Returns:
        NumericResult с вектором x; iterations: число выполненных проходов,
        residual: max-изменение на последнем проходе.
        Отказы: DIMENSION_MISMATCH, ZERO_PIVOT, DID_NOT_CONVERGE

    Raises:
        ValueError: Если tolerance <= 0 или max_iterations < 1
    """
    base = config or GaussSeidelConfig()
    settings = GaussSeidelConfig(
        tolerance=base.tolerance if tolerance is None else tolerance,
        max_iterations=base.max_iterations if max_iterations is None else max_iterations,
    )

    if initial_guess is None:
        initial_guess = [0.0] * len(matrix)

    problem = describe_dimension_mismatch(matrix, rhs, initial_guess)
    if problem is not None:
        logger.warning("gauss_seidel: dimension mismatch: %s", problem)
        return NumericResult.fail(FailureKind.DIMENSION_MISMATCH, problem)

    n = len(matrix)
    x = copy_vector(initial_guess)
    max_error = float("inf")

    for iteration in range(1, settings.max_iterations + 1):
        x_prev = list(x)
        max_error = 0.0

        for i in range(n):
            total = sum(matrix[i][j] * x[j] for j in range(n) if j != i)

            diagonal = matrix[i][i]
            if is_near_zero(diagonal):
                details = (
                    f"diagonal element at row {i} is {diagonal:.3e} (|a_ii| < {EPS_PIVOT:.0e}); "
                    f"system may not be diagonally dominant"
                )
                logger.warning("gauss_seidel: %s", details)
                return NumericResult.fail(FailureKind.ZERO_PIVOT, details, iterations=iteration)

            x[i] = (rhs[i] - total) / diagonal
            change = abs(x[i] - x_prev[i])
            # NaN не должен занижать max_error
            if change > max_error or math.isnan(change):
                max_error = change

        if not all_finite(x):
            details = f"iterate became non-finite at sweep {iteration}, system diverges"
            logger.warning("gauss_seidel: %s", details)
            return NumericResult.fail(FailureKind.DID_NOT_CONVERGE, details, iterations=iteration)

        logger.debug("gauss_seidel: sweep %d max change %.3e", iteration, max_error)

        if max_error < settings.tolerance:
            return NumericResult.success(
                x,
                details=f"converged after {iteration} sweeps",
                iterations=iteration,
                residual=max_error,
            )

    details = (
        f"no convergence after {settings.max_iterations} sweeps "
        f"(last max change {max_error:.3e}, tolerance {settings.tolerance:.1e})"
    )
    logger.warning("gauss_seidel: %s", details)
    return NumericResult.fail(
        FailureKind.DID_NOT_CONVERGE,
        details,
        iterations=settings.max_iterations,
        residual=max_error,
    )
