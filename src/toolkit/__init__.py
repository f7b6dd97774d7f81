"""Toolkit — выбор метода по тегу и запуск payload-запросов."""

from .dispatch import (
    DirectMethod,
    InterpolationMethod,
    IterativeMethod,
    QuadratureMethod,
    integrate,
    interpolate,
    regress,
    solve_iteratively,
    solve_linear_system,
)
from .payloads import PayloadKind, run_payload

__all__ = [
    "DirectMethod",
    "InterpolationMethod",
    "IterativeMethod",
    "QuadratureMethod",
    "integrate",
    "interpolate",
    "regress",
    "solve_iteratively",
    "solve_linear_system",
    "PayloadKind",
    "run_payload",
]
