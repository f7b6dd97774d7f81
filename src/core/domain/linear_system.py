"""
LinearSystem — Типы и проверка размерностей системы Ax = b

Matrix и Vector: обычные последовательности float. Проверка размерностей
выполняется до любой арифметики и общая для прямых и итерационных методов.
"""

from typing import Optional, Sequence


Vector = Sequence[float]
Matrix = Sequence[Sequence[float]]


def describe_dimension_mismatch(
    matrix: Matrix,
    rhs: Vector,
    initial_guess: Optional[Vector] = None,
) -> Optional[str]:
    """
    Проверка согласованности размерностей.

    Args:
        matrix: Матрица коэффициентов A (ожидается n×n)
        rhs: Вектор свободных членов b (ожидается длина n)
        initial_guess: Начальное приближение (если задано, длина n)

    Returns:
        None если размерности согласованы, иначе описание несоответствия
    """
    n = len(matrix)

    if n == 0:
        return "matrix is empty"

    for i, row in enumerate(matrix):
        if len(row) != n:
            return f"matrix must be square: row {i} has {len(row)} columns, expected {n}"

    if len(rhs) != n:
        return f"rhs length {len(rhs)} does not match matrix size {n}"

    if initial_guess is not None and len(initial_guess) != n:
        return f"initial guess length {len(initial_guess)} does not match matrix size {n}"

    return None
