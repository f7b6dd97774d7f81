"""
Numerical Safeguards — Epsilon Guards for Dense Numerical Methods

Модуль содержит общие epsilon-параметры и примитивы, которыми пользуются все
алгоритмы тулкита:
- Проверка пивота (диагонального элемента) на близость к нулю
- Проверка валидности float (NaN/Inf)
- Норма разности векторов
- Работа с копиями матриц и векторов (value semantics)
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на пивот |p| < EPS_PIVOT никогда не выполняется
2. Входные матрицы/векторы вызывающего кода никогда не изменяются
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Минимальный модуль пивота при исключении (Gauss, Gauss-Jordan, LU, Seidel)
# Также используется для проверки совпадающих абсцисс при интерполяции
EPS_PIVOT: Final[float] = 1e-10

# Абсолютная толерантность проверки равномерного шага для квадратур
EPS_SPACING: Final[float] = 1e-6


# =============================================================================
# ПРОВЕРКИ ПИВОТА
# =============================================================================


def is_near_zero(value: float, eps: float = EPS_PIVOT) -> bool:
    """
    Проверка, что значение слишком мало, чтобы на него делить.

    Строгое сравнение: |value| < eps. Значение ровно eps считается допустимым.

    Args:
        value: Проверяемое значение (пивот, знаменатель)
        eps: Минимальный допустимый модуль (default: EPS_PIVOT)

    Returns:
        True если |value| < eps или value не является конечным числом

    Examples:
        >>> is_near_zero(0.0)
        True
        >>> is_near_zero(1e-11)
        True
        >>> is_near_zero(1e-10)
        False
        >>> is_near_zero(-3.0)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    if not is_valid_float(value):
        # NaN не проходит ни одно сравнение, поэтому отсекаем явно
        return True

    return abs(value) < eps


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def all_finite(values: Sequence[float]) -> bool:
    """True если все элементы последовательности конечны."""
    return all(is_valid_float(v) for v in values)


# =============================================================================
# НОРМЫ
# =============================================================================


def max_abs_difference(lhs: Sequence[float], rhs: Sequence[float]) -> float:
    """
    Норма разности ‖lhs - rhs‖∞.

    Используется как критерий остановки итерационных методов и в тестах
    для сравнения решений.

    Raises:
        ValueError: Если длины векторов различаются

    Examples:
        >>> max_abs_difference([1.0, 2.0], [1.5, 1.0])
        1.0
        >>> max_abs_difference([], [])
        0.0
    """
    if len(lhs) != len(rhs):
        raise ValueError(f"vector length mismatch: {len(lhs)} != {len(rhs)}")

    return max((abs(a - b) for a, b in zip(lhs, rhs)), default=0.0)


# =============================================================================
# КОПИИ (VALUE SEMANTICS)
# =============================================================================


def copy_vector(values: Sequence[float]) -> list[float]:
    """Новая рабочая копия вектора с приведением элементов к float."""
    return [float(v) for v in values]


def copy_matrix(rows: Sequence[Sequence[float]]) -> list[list[float]]:
    """
    Новая рабочая копия матрицы (глубокая, построчная).

    Каждый алгоритм работает только со своей копией, поэтому матрицы
    вызывающего кода остаются неизменными.
    """
    return [copy_vector(row) for row in rows]


def augment(matrix: Sequence[Sequence[float]], rhs: Sequence[float]) -> list[list[float]]:
    """
    Расширенная матрица [A|b] как новая копия.

    Examples:
        >>> augment([[1, 2], [3, 4]], [5, 6])
        [[1.0, 2.0, 5.0], [3.0, 4.0, 6.0]]
    """
    return [copy_vector(row) + [float(value)] for row, value in zip(matrix, rhs)]


def is_square(matrix: Sequence[Sequence[float]]) -> bool:
    """True для непустой квадратной матрицы n×n."""
    n = len(matrix)
    if n == 0:
        return False
    return all(len(row) == n for row in matrix)


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация счётчиков (например, max_iterations).

    Raises:
        ValueError: Если value не целое или value < 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
