"""
Тесты для выбора метода по тегу и payload-точки входа

Проверяет:
1. Таблицы методов покрывают все значения enum
2. solve_linear_system / interpolate / integrate / regress по enum и строке
3. run_payload: валидация контракта и маршрутизацию
4. Штатные отказы проходят через payload без исключений
"""

import pytest
from jsonschema import ValidationError

from src.core.domain.result import FailureKind
from src.fitting.least_squares import RegressionModel
from src.solvers.iterative import GaussSeidelConfig
from src.toolkit import (
    DirectMethod,
    InterpolationMethod,
    IterativeMethod,
    PayloadKind,
    QuadratureMethod,
    integrate,
    interpolate,
    regress,
    run_payload,
    solve_iteratively,
    solve_linear_system,
)
from src.toolkit.dispatch import DIRECT_METHODS, INTERPOLATION_METHODS, QUADRATURE_METHODS

CLASSIC_MATRIX = [[2.0, 1.0, -1.0], [-3.0, -1.0, 2.0], [-2.0, 1.0, 2.0]]
CLASSIC_RHS = [8.0, -11.0, -3.0]


# =============================================================================
# FUNCTION TABLES
# =============================================================================


class TestFunctionTables:
    """Каждый тег имеет реализацию"""

    def test_direct_table_complete(self) -> None:
        assert set(DIRECT_METHODS) == set(DirectMethod)

    def test_interpolation_table_complete(self) -> None:
        assert set(INTERPOLATION_METHODS) == set(InterpolationMethod)

    def test_quadrature_table_complete(self) -> None:
        assert set(QUADRATURE_METHODS) == set(QuadratureMethod)


# =============================================================================
# DISPATCH
# =============================================================================


class TestDispatch:
    """Вызов методов по тегу"""

    @pytest.mark.parametrize("method", list(DirectMethod))
    def test_direct_methods(self, method) -> None:
        result = solve_linear_system(method, CLASSIC_MATRIX, CLASSIC_RHS)
        assert result.value == pytest.approx([2.0, 3.0, -1.0], abs=1e-9)

    def test_direct_method_by_string(self) -> None:
        result = solve_linear_system("lu", CLASSIC_MATRIX, CLASSIC_RHS)
        assert result.ok

    def test_unknown_direct_method(self) -> None:
        with pytest.raises(ValueError):
            solve_linear_system("cholesky", CLASSIC_MATRIX, CLASSIC_RHS)

    def test_iterative(self) -> None:
        config = GaussSeidelConfig(tolerance=1e-10)
        result = solve_iteratively(IterativeMethod.GAUSS_SEIDEL, [[4.0, 1.0], [1.0, 3.0]], [5.0, 4.0], config=config)
        assert result.value == pytest.approx([1.0, 1.0], abs=1e-9)

    def test_unknown_iterative_method(self) -> None:
        with pytest.raises(ValueError):
            solve_iteratively("jacobi", [[1.0]], [1.0])

    @pytest.mark.parametrize("method", list(InterpolationMethod))
    def test_interpolation(self, method) -> None:
        result = interpolate(method, [(0, 0), (1, 1), (2, 4)], 3.0)
        assert result.value == pytest.approx(9.0)

    @pytest.mark.parametrize("method", list(QuadratureMethod))
    def test_quadrature(self, method) -> None:
        """Все правила точны для линейной функции"""
        result = integrate(method, [(0, 0), (2, 4), (4, 8)])
        assert result.value == pytest.approx(16.0)

    def test_regression(self) -> None:
        result = regress(RegressionModel.LINEAR, [(0, 1), (1, 3), (2, 5)])
        assert result.value == pytest.approx((1.0, 2.0))


# =============================================================================
# PAYLOADS
# =============================================================================


class TestRunPayload:
    """Тесты для run_payload"""

    def test_linear_system(self) -> None:
        payload = {"method": "gauss_jordan", "matrix": CLASSIC_MATRIX, "rhs": CLASSIC_RHS}
        result = run_payload(PayloadKind.LINEAR_SYSTEM, payload)
        assert result.value == pytest.approx([2.0, 3.0, -1.0], abs=1e-9)

    def test_linear_system_dimension_mismatch_is_result(self) -> None:
        """Несогласованные размерности дают штатный отказ, не ошибку контракта"""
        payload = {"method": "gauss", "matrix": [[1, 2, 3], [4, 5, 6]], "rhs": [1, 2]}
        result = run_payload("linear_system", payload)
        assert result.failure == FailureKind.DIMENSION_MISMATCH

    def test_singular_system_is_result(self) -> None:
        payload = {"method": "lu", "matrix": [[1, 2], [2, 4]], "rhs": [3, 6]}
        result = run_payload("linear_system", payload)
        assert result.failure == FailureKind.SINGULAR_MATRIX

    def test_iterative_system(self) -> None:
        payload = {
            "method": "gauss_seidel",
            "matrix": [[4, 1, 1], [1, 5, 2], [1, 2, 6]],
            "rhs": [9, 17, 23],
            "tolerance": 1e-10,
        }
        result = run_payload(PayloadKind.ITERATIVE_SYSTEM, payload)
        assert result.value == pytest.approx([1.0, 2.0, 3.0], abs=1e-8)

    def test_iterative_system_max_iterations(self) -> None:
        payload = {
            "method": "gauss_seidel",
            "matrix": [[1, 3], [3, 1]],
            "rhs": [4, 4],
            "max_iterations": 5,
        }
        result = run_payload(PayloadKind.ITERATIVE_SYSTEM, payload)
        assert result.failure == FailureKind.DID_NOT_CONVERGE
        assert result.iterations == 5

    def test_point_set_interpolation(self) -> None:
        payload = {
            "method": "newton",
            "points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}, {"x": 2, "y": 4}],
            "x_query": 1.5,
        }
        assert run_payload(PayloadKind.POINT_SET, payload).value == pytest.approx(2.25)

    def test_point_set_regression(self) -> None:
        payload = {
            "method": "linear",
            "points": [{"x": 0, "y": 1}, {"x": 1, "y": 3}],
        }
        assert run_payload(PayloadKind.POINT_SET, payload).value == pytest.approx((1.0, 2.0))

    def test_point_set_quadrature(self) -> None:
        payload = {
            "method": "trapezoidal",
            "points": [{"x": 0, "y": 0}, {"x": 2, "y": 4}, {"x": 4, "y": 8}],
        }
        assert run_payload(PayloadKind.POINT_SET, payload).value == 16.0

    def test_point_set_simpson_even_points(self) -> None:
        payload = {
            "method": "simpson",
            "points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}],
        }
        result = run_payload(PayloadKind.POINT_SET, payload)
        assert result.failure == FailureKind.INVALID_SUBINTERVAL_COUNT

    def test_invalid_payload_raises(self) -> None:
        with pytest.raises(ValidationError):
            run_payload(PayloadKind.LINEAR_SYSTEM, {"method": "gauss", "matrix": [[1]]})

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            run_payload("spreadsheet", {})
