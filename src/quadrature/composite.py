"""
Composite Quadrature — Составные формулы трапеций и Симпсона (1/3)

Интеграл по таблице равноотстоящих узлов (x_i, y_i), упорядоченных по
возрастанию x, с шагом h = x_1 - x_0.

ФОРМУЛЫ:
    Трапеции:  I ≈ (h/2) · [y_0 + 2·Σ_{i=1}^{n-2} y_i + y_{n-1}]
    Симпсон:   I ≈ (h/3) · [y_0 + 4·Σ_{нечёт} y_i + 2·Σ_{чёт, внутр} y_i + y_{n-1}]

Равномерность шага проверяется самим модулем (NON_UNIFORM_SPACING, допуск
относителен h при h < 1);
при check_spacing=False узлы принимаются как есть и неравномерный шаг
молча даёт неточный результат.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from src.core.domain.point import Point, as_points
from src.core.domain.result import FailureKind, NumericResult
from src.core.math.numerical_safeguards import EPS_SPACING, validate_positive

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class QuadratureConfig:
    """Параметры проверки сетки узлов.

    spacing_tolerance задаёт допустимое отклонение шага для h >= 1; при h < 1
    допуск масштабируется как spacing_tolerance·h, чтобы мелкие сетки не
    принимали шаги, отличающиеся в разы.
    """
    spacing_tolerance: float = EPS_SPACING
    check_spacing: bool = True

    def __post_init__(self) -> None:
        validate_positive(self.spacing_tolerance, "spacing_tolerance")


def _spacing_problem(pts: list[Point], tolerance: float) -> Optional[str]:
    """Описание нарушения равномерной возрастающей сетки или None."""
    h = pts[1].x - pts[0].x
    if h <= 0:
        return f"points must be sorted by ascending x, got step h={h}"

    allowed = tolerance * min(1.0, h)
    for i in range(1, len(pts)):
        step = pts[i].x - pts[i - 1].x
        if abs(step - h) >= allowed:
            return f"step between points {i - 1} and {i} is {step}, expected h={h}"
    return None


def _prepare(
    method: str,
    points: Iterable[Any],
    config: Optional[QuadratureConfig],
) -> tuple[list[Point], Optional[NumericResult[float]]]:
    settings = config or QuadratureConfig()
    pts = as_points(points)

    if settings.check_spacing and len(pts) >= 2:
        problem = _spacing_problem(pts, settings.spacing_tolerance)
        if problem is not None:
            logger.warning("%s: %s", method, problem)
            return pts, NumericResult.fail(FailureKind.NON_UNIFORM_SPACING, problem)

    return pts, None


# =============================================================================
# TRAPEZOIDAL
# =============================================================================


def trapezoidal_rule(
    points: Iterable[Any],
    config: Optional[QuadratureConfig] = None,
) -> NumericResult[float]:
    """
    Составная формула трапеций.

    Точна для линейных функций. Для менее чем 2 узлов (нет ни одного
    подынтервала) возвращает 0.0.

    Returns:
        NumericResult с приближением интеграла.
        Отказы: NON_UNIFORM_SPACING (если включена проверка шага)

    Examples:
        >>> trapezoidal_rule([(0, 0), (2, 4), (4, 8)]).value
        16.0
    """
    pts, failure = _prepare("trapezoidal_rule", points, config)
    if failure is not None:
        return failure

    subintervals = len(pts) - 1
    if subintervals < 1:
        return NumericResult.success(0.0, details="fewer than 2 points, empty integral")

    h = pts[1].x - pts[0].x
    inner = sum(p.y for p in pts[1:subintervals])
    integral = (h / 2) * (pts[0].y + 2 * inner + pts[subintervals].y)

    return NumericResult.success(integral, details=f"trapezoidal, {subintervals} subintervals, h={h}")


# =============================================================================
# SIMPSON 1/3
# =============================================================================


def simpson_rule(
    points: Iterable[Any],
    config: Optional[QuadratureConfig] = None,
) -> NumericResult[float]:
    """
    Составная формула Симпсона 1/3.

    Требует чётного числа подынтервалов (нечётного числа узлов, минимум 3).
    Точна для многочленов до третьей степени.

    Returns:
        NumericResult с приближением интеграла.
        Отказы: INVALID_SUBINTERVAL_COUNT, NON_UNIFORM_SPACING
    """
    pts, failure = _prepare("simpson_rule", points, config)
    if failure is not None:
        return failure

    subintervals = len(pts) - 1
    if subintervals < 2 or subintervals % 2 != 0:
        details = f"simpson 1/3 needs an even number (>= 2) of subintervals, got {max(subintervals, 0)}"
        logger.warning("simpson_rule: %s", details)
        return NumericResult.fail(FailureKind.INVALID_SUBINTERVAL_COUNT, details)

    h = pts[1].x - pts[0].x
    odd_sum = sum(pts[i].y for i in range(1, subintervals, 2))
    even_sum = sum(pts[i].y for i in range(2, subintervals, 2))
    integral = (h / 3) * (pts[0].y + 4 * odd_sum + 2 * even_sum + pts[subintervals].y)

    return NumericResult.success(integral, details=f"simpson 1/3, {subintervals} subintervals, h={h}")


def simpson_with_trapezoid_fallback(
    points: Iterable[Any],
    config: Optional[QuadratureConfig] = None,
) -> NumericResult[float]:
    """
    Симпсон с запасным вариантом для нечётного числа подынтервалов.

    Шаблон использования, а не свойство simpson_rule: при нечётном числе
    подынтервалов Симпсон применяется ко всем, кроме последнего, а последний
    интегрируется трапецией. Один подынтервал даёт чистую трапецию.
    """
    pts, failure = _prepare("simpson_with_trapezoid_fallback", points, config)
    if failure is not None:
        return failure

    subintervals = len(pts) - 1
    # Шаг уже проверен выше, повторная проверка не нужна
    unchecked = QuadratureConfig(check_spacing=False)

    if subintervals < 2:
        return trapezoidal_rule(pts, unchecked)
    if subintervals % 2 == 0:
        return simpson_rule(pts, unchecked)

    head = simpson_rule(pts[:-1], unchecked)
    if not head.ok:
        return head
    tail = trapezoidal_rule(pts[-2:], unchecked)

    return NumericResult.success(
        head.value + tail.value,
        details=f"simpson 1/3 on {subintervals - 1} subintervals + trapezoid on the last",
    )
