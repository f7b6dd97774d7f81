"""Payloads — точка входа для слоя представления.

Слой представления (формы ввода матриц и таблиц точек) передаёт JSON-подобный
dict. Payload проверяется по JSON Schema контракту и направляется в метод,
указанный в поле "method".

Ошибки формы payload поднимаются как jsonschema.ValidationError;
отказы самих численных методов возвращаются в NumericResult.
"""

from enum import Enum
from typing import Any, Dict

from src.core.contracts import (
    IterativeSystemValidator,
    LinearSystemValidator,
    PointSetValidator,
)
from src.core.domain.result import NumericResult
from src.fitting.least_squares import RegressionModel
from src.solvers.iterative import GaussSeidelConfig
from src.toolkit.dispatch import (
    InterpolationMethod,
    QuadratureMethod,
    integrate,
    interpolate,
    regress,
    solve_iteratively,
    solve_linear_system,
)


class PayloadKind(str, Enum):
    """Вид запроса (определяет контракт)."""
    LINEAR_SYSTEM = "linear_system"
    ITERATIVE_SYSTEM = "iterative_system"
    POINT_SET = "point_set"


def _run_linear_system(payload: Dict[str, Any]) -> NumericResult:
    LinearSystemValidator().validate(payload)
    return solve_linear_system(payload["method"], payload["matrix"], payload["rhs"])


def _run_iterative_system(payload: Dict[str, Any]) -> NumericResult:
    IterativeSystemValidator().validate(payload)

    defaults = GaussSeidelConfig()
    config = GaussSeidelConfig(
        tolerance=payload.get("tolerance", defaults.tolerance),
        max_iterations=payload.get("max_iterations", defaults.max_iterations),
    )
    return solve_iteratively(
        payload["method"],
        payload["matrix"],
        payload["rhs"],
        initial_guess=payload.get("initial_guess"),
        config=config,
    )


def _run_point_set(payload: Dict[str, Any]) -> NumericResult:
    PointSetValidator().validate(payload)

    method = payload["method"]
    points = payload["points"]

    if method in {m.value for m in InterpolationMethod}:
        return interpolate(method, points, payload["x_query"])
    if method in {m.value for m in RegressionModel}:
        return regress(method, points)
    return integrate(QuadratureMethod(method), points)


_RUNNERS = {
    PayloadKind.LINEAR_SYSTEM: _run_linear_system,
    PayloadKind.ITERATIVE_SYSTEM: _run_iterative_system,
    PayloadKind.POINT_SET: _run_point_set,
}


def run_payload(kind: PayloadKind | str, payload: Dict[str, Any]) -> NumericResult:
    """
    Проверка payload по контракту и запуск выбранного метода.

    Args:
        kind: Вид запроса (linear_system / iterative_system / point_set)
        payload: Данные запроса, например
            {"method": "gauss", "matrix": [[2, 1], [1, 3]], "rhs": [3, 5]}

    Returns:
        NumericResult выбранного метода

    Raises:
        ValueError: Если вид запроса неизвестен
        jsonschema.ValidationError: Если payload не соответствует контракту
    """
    return _RUNNERS[PayloadKind(kind)](payload)
