"""
Point — Узел таблицы (x, y)

Immutable Pydantic модель точки, используемая интерполяцией, регрессией
и квадратурами. Координаты обязаны быть конечными числами.
"""

from typing import Any, Iterable, Mapping, Sequence

from pydantic import BaseModel, Field


# =============================================================================
# POINT MODEL
# =============================================================================


class Point(BaseModel):
    """
    Точка (x, f(x)).

    Immutable модель (frozen=True): точки создаются заново при каждом вызове
    и не изменяются алгоритмами.
    """

    x: float = Field(..., allow_inf_nan=False, description="Абсцисса")
    y: float = Field(..., allow_inf_nan=False, description="Значение функции в x")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def as_point(raw: Any) -> Point:
    """
    Приведение одного узла к Point.

    Поддерживаемые формы:
    - Point (возвращается как есть)
    - пара (x, y), tuple или list
    - mapping {"x": ..., "y": ...}

    Raises:
        ValueError: Если форма не распознана
        pydantic.ValidationError: Если координаты не конечны
    """
    if isinstance(raw, Point):
        return raw

    if isinstance(raw, Mapping):
        return Point.model_validate(raw)

    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if len(raw) != 2:
            raise ValueError(f"point must have exactly 2 coordinates, got {len(raw)}")
        return Point(x=raw[0], y=raw[1])

    raise ValueError(f"cannot interpret {raw!r} as a point")


def as_points(raw_points: Iterable[Any]) -> list[Point]:
    """
    Приведение набора узлов к списку Point.

    Examples:
        >>> [p.as_tuple() for p in as_points([(0, 1), {"x": 2, "y": 3}])]
        [(0.0, 1.0), (2.0, 3.0)]
    """
    return [as_point(raw) for raw in raw_points]
