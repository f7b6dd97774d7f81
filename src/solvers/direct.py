"""
Direct Methods — Прямые методы решения Ax = b

Три независимых алгоритма для плотных квадратных систем малой размерности:
- Метод Гаусса (прямой ход с нормализацией + обратная подстановка)
- Метод Гаусса-Жордана (приведение к единичной матрице)
- LU-разложение (Doolittle: L с единичной диагональю)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Размерности проверяются до любой арифметики → DIMENSION_MISMATCH
2. Пивот |p| < EPS_PIVOT → SINGULAR_MATRIX (без перестановки строк)
3. LU: пивот проверяется и при разложении, и при обратной подстановке,
   поэтому вырожденность никогда не проявляется как inf/NaN
4. Матрицы вызывающего кода не изменяются (работа на копиях)
"""

import logging
from typing import Optional

from src.core.domain.linear_system import Matrix, Vector, describe_dimension_mismatch
from src.core.domain.result import FailureKind, NumericResult
from src.core.math.numerical_safeguards import (
    EPS_PIVOT,
    augment,
    copy_matrix,
    is_near_zero,
)

logger = logging.getLogger(__name__)


def _dimension_failure(method: str, matrix: Matrix, rhs: Vector) -> Optional[NumericResult[list[float]]]:
    problem = describe_dimension_mismatch(matrix, rhs)
    if problem is None:
        return None

    logger.warning("%s: dimension mismatch: %s", method, problem)
    return NumericResult.fail(FailureKind.DIMENSION_MISMATCH, problem)


def _singular(method: str, row: int, pivot: float) -> NumericResult[list[float]]:
    details = f"pivot at row {row} is {pivot:.3e} (|pivot| < {EPS_PIVOT:.0e}); matrix is singular or needs pivoting"
    logger.warning("%s: %s", method, details)
    return NumericResult.fail(FailureKind.SINGULAR_MATRIX, details)


# =============================================================================
# МЕТОД ГАУССА
# =============================================================================


def gauss_elimination(matrix: Matrix, rhs: Vector) -> NumericResult[list[float]]:
    """
    Решение Ax = b методом исключения Гаусса.

    Алгоритм:
        1. Расширенная матрица [A|b]
        2. Для k = 0..n-1: проверка пивота, нормализация строки k
           (пивот становится 1), исключение строк i > k
        3. Обратная подстановка: x[i] = Ab[i][n] - Σ_{j>i} Ab[i][j]·x[j]
           (деление не требуется, диагональ уже единичная)

    Args:
        matrix: Квадратная матрица A (n×n)
        rhs: Вектор b (длина n)

    Returns:
        NumericResult с вектором x, либо отказ DIMENSION_MISMATCH / SINGULAR_MATRIX

    Examples:
        >>> result = gauss_elimination([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]], [8, -11, -3])
        >>> [round(v, 9) for v in result.value]
        [2.0, 3.0, -1.0]
    """
    failure = _dimension_failure("gauss_elimination", matrix, rhs)
    if failure is not None:
        return failure

    n = len(matrix)
    ab = augment(matrix, rhs)

    # Прямой ход
    for k in range(n):
        pivot = ab[k][k]
        if is_near_zero(pivot):
            return _singular("gauss_elimination", k, pivot)

        for j in range(k, n + 1):
            ab[k][j] /= pivot

        for i in range(k + 1, n):
            factor = ab[i][k]
            for j in range(k, n + 1):
                ab[i][j] -= factor * ab[k][j]

    # Обратная подстановка
    x = [0.0] * n
    for i in range(n - 1, -1, -1):
        total = sum(ab[i][j] * x[j] for j in range(i + 1, n))
        x[i] = ab[i][n] - total

    return NumericResult.success(x, details=f"gauss elimination, n={n}")


# =============================================================================
# МЕТОД ГАУССА-ЖОРДАНА
# =============================================================================


def gauss_jordan(matrix: Matrix, rhs: Vector) -> NumericResult[list[float]]:
    """
    Решение Ax = b методом Гаусса-Жордана.

    Отличие от метода Гаусса: на шаге k исключаются все строки i ≠ k
    (выше и ниже пивота), поэтому после цикла система имеет вид Ix = b'
    и решение есть последний столбец расширенной матрицы.

    Returns:
        NumericResult с вектором x, либо отказ DIMENSION_MISMATCH / SINGULAR_MATRIX
    """
    failure = _dimension_failure("gauss_jordan", matrix, rhs)
    if failure is not None:
        return failure

    n = len(matrix)
    ab = augment(matrix, rhs)

    for k in range(n):
        pivot = ab[k][k]
        if is_near_zero(pivot):
            return _singular("gauss_jordan", k, pivot)

        for j in range(k, n + 1):
            ab[k][j] /= pivot

        for i in range(n):
            if i == k:
                continue
            factor = ab[i][k]
            for j in range(k, n + 1):
                ab[i][j] -= factor * ab[k][j]

    x = [row[n] for row in ab]
    return NumericResult.success(x, details=f"gauss-jordan, n={n}")


# =============================================================================
# LU-РАЗЛОЖЕНИЕ
# =============================================================================


def lu_decompose(matrix: Matrix) -> NumericResult[tuple[list[list[float]], list[list[float]]]]:
    """
    Разложение A = L·U без перестановок (схема Doolittle).

    L: нижняя треугольная с единичной диагональю, U: верхняя треугольная.
    Для каждого пивота k и строки i > k:
        factor = U[i][k] / U[k][k];  L[i][k] = factor;  U[i][j] -= factor·U[k][j]

    Пивот U[k][k] проверяется до деления: вырожденная матрица даёт
    SINGULAR_MATRIX, а не распространение inf/NaN.

    Args:
        matrix: Квадратная матрица A (n×n)

    Returns:
        NumericResult с парой (L, U)
    """
    n = len(matrix)
    if n == 0 or any(len(row) != n for row in matrix):
        details = f"matrix must be non-empty and square, got {n} rows"
        logger.warning("lu_decompose: dimension mismatch: %s", details)
        return NumericResult.fail(FailureKind.DIMENSION_MISMATCH, details)

    upper = copy_matrix(matrix)
    lower = [[0.0] * n for _ in range(n)]

    for k in range(n):
        lower[k][k] = 1.0

        # Последний пивот не используется как делитель при разложении,
        # его проверяет обратная подстановка
        if k < n - 1 and is_near_zero(upper[k][k]):
            return _singular("lu_decompose", k, upper[k][k])

        for i in range(k + 1, n):
            factor = upper[i][k] / upper[k][k]
            lower[i][k] = factor
            for j in range(k, n):
                upper[i][j] -= factor * upper[k][j]

    return NumericResult.success((lower, upper), details=f"LU decomposition, n={n}")


def lu_factorization(matrix: Matrix, rhs: Vector) -> NumericResult[list[float]]:
    """
    Решение Ax = b через LU-разложение.

    Алгоритм:
        1. A = L·U (lu_decompose)
        2. Ly = b: прямая подстановка (L[i][i] = 1, деление не нужно)
        3. Ux = y: обратная подстановка с проверкой |U[i][i]| < EPS_PIVOT

    Returns:
        NumericResult с вектором x, либо отказ DIMENSION_MISMATCH / SINGULAR_MATRIX
    """
    failure = _dimension_failure("lu_factorization", matrix, rhs)
    if failure is not None:
        return failure

    n = len(matrix)
    factors = lu_decompose(matrix)
    if not factors.ok:
        return NumericResult.fail(factors.failure, factors.details)
    lower, upper = factors.value

    # Ly = b
    y = [0.0] * n
    for i in range(n):
        total = sum(lower[i][j] * y[j] for j in range(i))
        y[i] = float(rhs[i]) - total

    # Ux = y
    x = [0.0] * n
    for i in range(n - 1, -1, -1):
        total = sum(upper[i][j] * x[j] for j in range(i + 1, n))
        if is_near_zero(upper[i][i]):
            return _singular("lu_factorization", i, upper[i][i])
        x[i] = (y[i] - total) / upper[i][i]

    return NumericResult.success(x, details=f"LU factorization, n={n}")
