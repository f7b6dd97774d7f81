"""
NumericResult — Результат численного метода

Единый контракт возврата для всех алгоритмов тулкита: либо значение
(вектор, скаляр, коэффициенты), либо явная причина отказа.

Отказ численного метода (вырожденная матрица, отсутствие сходимости и т.д.)
является штатным результатом, а не исключением. Исключения зарезервированы
для ошибок программиста (невалидная конфигурация, неизвестный метод).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class FailureKind(str, Enum):
    """Классификация штатных отказов численных методов"""

    DIMENSION_MISMATCH = "dimension_mismatch"
    SINGULAR_MATRIX = "singular_matrix"
    ZERO_PIVOT = "zero_pivot"
    DID_NOT_CONVERGE = "did_not_converge"
    INSUFFICIENT_POINTS = "insufficient_points"
    NON_POSITIVE_VALUE = "non_positive_value"
    DUPLICATE_ABSCISSA = "duplicate_abscissa"
    INVALID_SUBINTERVAL_COUNT = "invalid_subinterval_count"
    NON_UNIFORM_SPACING = "non_uniform_spacing"
    NON_FINITE_RESULT = "non_finite_result"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumericFailure(Exception):
    """
    Отказ численного метода, поднятый через NumericResult.unwrap().

    Атрибут `kind` сохраняет исходную классификацию отказа.
    """

    def __init__(self, kind: FailureKind, details: str):
        super().__init__(f"{kind.value}: {details}")
        self.kind = kind
        self.details = details


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class NumericResult(Generic[T]):
    """Результат вызова численного метода."""

    value: Optional[T]
    failure: Optional[FailureKind]

    # Диагностика
    details: str = ""
    iterations: Optional[int] = None
    residual: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(
        cls,
        value: T,
        details: str = "",
        iterations: Optional[int] = None,
        residual: Optional[float] = None,
    ) -> "NumericResult[T]":
        return cls(
            value=value,
            failure=None,
            details=details,
            iterations=iterations,
            residual=residual,
        )

    @classmethod
    def fail(
        cls,
        kind: FailureKind,
        details: str,
        iterations: Optional[int] = None,
        residual: Optional[float] = None,
    ) -> "NumericResult[T]":
        return cls(
            value=None,
            failure=kind,
            details=details,
            iterations=iterations,
            residual=residual,
        )

    def unwrap(self) -> T:
        """
        Значение результата или исключение NumericFailure.

        Raises:
            NumericFailure: Если метод завершился отказом
        """
        if self.failure is not None:
            raise NumericFailure(self.failure, self.details)
        return self.value  # type: ignore[return-value]
