"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку пивота на близость к нулю (строгая граница EPS_PIVOT)
2. NaN/Inf проверки
3. Норму разности векторов
4. Копирование матриц/векторов (value semantics)
5. Валидацию параметров конфигурации
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_PIVOT,
    EPS_SPACING,
    all_finite,
    augment,
    copy_matrix,
    copy_vector,
    is_near_zero,
    is_square,
    is_valid_float,
    max_abs_difference,
    validate_positive,
    validate_positive_int,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================


class TestEpsilonConstants:
    """Значения epsilon-параметров"""

    def test_pivot_epsilon(self) -> None:
        """Порог пивота 1e-10"""
        assert EPS_PIVOT == 1e-10

    def test_spacing_epsilon(self) -> None:
        """Порог шага сетки 1e-6"""
        assert EPS_SPACING == 1e-6


# =============================================================================
# ПРОВЕРКИ ПИВОТА
# =============================================================================


class TestIsNearZero:
    """Тесты для is_near_zero"""

    def test_zero_is_near_zero(self) -> None:
        """Ноль отклоняется"""
        assert is_near_zero(0.0)
        assert is_near_zero(-0.0)

    def test_tiny_values_rejected(self) -> None:
        """Значения меньше eps отклоняются независимо от знака"""
        assert is_near_zero(1e-11)
        assert is_near_zero(-1e-11)

    def test_boundary_is_accepted(self) -> None:
        """Ровно eps: допустимый пивот (строгое сравнение)"""
        assert not is_near_zero(EPS_PIVOT)
        assert not is_near_zero(-EPS_PIVOT)

    def test_regular_values_accepted(self) -> None:
        """Обычные значения допустимы"""
        assert not is_near_zero(1.0)
        assert not is_near_zero(-3.5)

    def test_nan_is_rejected(self) -> None:
        """NaN не может быть пивотом"""
        assert is_near_zero(float("nan"))

    def test_custom_eps(self) -> None:
        """Пользовательский порог"""
        assert is_near_zero(0.5, eps=1.0)
        assert not is_near_zero(2.0, eps=1.0)

    def test_invalid_eps_raises(self) -> None:
        """Невалидный eps вызывает ошибку"""
        with pytest.raises(ValueError, match="eps must be positive"):
            is_near_zero(1.0, eps=0.0)


# =============================================================================
# NaN/Inf
# =============================================================================


class TestFiniteChecks:
    """Тесты для is_valid_float / all_finite"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_non_finite_values(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_all_finite(self) -> None:
        assert all_finite([1.0, 2.0, 3.0])
        assert all_finite([])
        assert not all_finite([1.0, math.inf])


# =============================================================================
# НОРМЫ
# =============================================================================


class TestNorms:
    """Тесты для max_abs_difference"""

    def test_max_abs_difference(self) -> None:
        """Норма ‖a - b‖∞"""
        assert max_abs_difference([1.0, 2.0, 3.0], [1.0, 2.5, 2.0]) == 1.0

    def test_max_abs_difference_empty(self) -> None:
        """Пустые векторы → 0.0"""
        assert max_abs_difference([], []) == 0.0

    def test_max_abs_difference_length_mismatch(self) -> None:
        """Разная длина → ValueError"""
        with pytest.raises(ValueError, match="length mismatch"):
            max_abs_difference([1.0], [1.0, 2.0])


# =============================================================================
# VALUE SEMANTICS
# =============================================================================


class TestCopies:
    """Тесты для copy_vector / copy_matrix / augment / is_square"""

    def test_copy_vector_is_independent(self) -> None:
        """Изменение копии не затрагивает оригинал"""
        original = [1, 2, 3]
        copy = copy_vector(original)
        copy[0] = 100.0
        assert original == [1, 2, 3]
        assert all(isinstance(v, float) for v in copy)

    def test_copy_matrix_is_deep(self) -> None:
        """Строки копируются, а не разделяются"""
        original = [[1.0, 2.0], [3.0, 4.0]]
        copy = copy_matrix(original)
        copy[1][0] = -1.0
        assert original[1][0] == 3.0

    def test_copy_matrix_accepts_tuples(self) -> None:
        """Кортежи приводятся к спискам float"""
        assert copy_matrix(((1, 2), (3, 4))) == [[1.0, 2.0], [3.0, 4.0]]

    def test_augment(self) -> None:
        """[A|b] как новая матрица"""
        matrix = [[1.0, 2.0], [3.0, 4.0]]
        assert augment(matrix, [5.0, 6.0]) == [[1.0, 2.0, 5.0], [3.0, 4.0, 6.0]]
        assert matrix == [[1.0, 2.0], [3.0, 4.0]]

    def test_is_square(self) -> None:
        assert is_square([[1.0]])
        assert is_square([[1.0, 2.0], [3.0, 4.0]])
        assert not is_square([])
        assert not is_square([[1.0, 2.0]])
        assert not is_square([[1.0, 2.0], [3.0]])


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidation:
    """Тесты для validate_positive / validate_positive_int"""

    def test_validate_positive_accepts(self) -> None:
        validate_positive(1e-8, "tolerance")

    def test_validate_positive_rejects_zero(self) -> None:
        with pytest.raises(ValueError, match="tolerance must be positive"):
            validate_positive(0.0, "tolerance")

    def test_validate_positive_rejects_nan(self) -> None:
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_positive(float("nan"), "tolerance")

    def test_validate_positive_int_accepts(self) -> None:
        validate_positive_int(1, "max_iterations")

    def test_validate_positive_int_rejects_zero(self) -> None:
        with pytest.raises(ValueError, match="max_iterations must be >= 1"):
            validate_positive_int(0, "max_iterations")

    def test_validate_positive_int_rejects_float_and_bool(self) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            validate_positive_int(10.0, "max_iterations")
        with pytest.raises(ValueError, match="must be an integer"):
            validate_positive_int(True, "max_iterations")
