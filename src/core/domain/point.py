"""
Point2D — Точка на плоскости

Immutable Pydantic модель для движка интерполяции.
Все операции создают новый экземпляр.
"""

from collections.abc import Sequence
from numbers import Real
from typing import Union

from pydantic import BaseModel, Field


class Point2D(BaseModel):
    """
    Точка (x, y) на плоскости.

    Immutable модель (frozen=True).
    """

    x: float = Field(..., allow_inf_nan=False, description="Координата x")
    y: float = Field(..., allow_inf_nan=False, description="Координата y")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def coerce(cls, value: "PointLike") -> "Point2D":
        """
        Приведение к Point2D.

        Принимает Point2D (возвращается как есть) или пару (x, y).

        Raises:
            ValueError: Если value не содержит ровно две координаты
            pydantic.ValidationError: Если координаты невалидны
        """
        if isinstance(value, Point2D):
            return value

        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ValueError(f"expected Point2D or (x, y) pair, got {value!r}")

        if len(value) != 2:
            raise ValueError(f"point must have exactly 2 coordinates, got {len(value)}")

        return cls(x=value[0], y=value[1])

    def __add__(self, other: "Point2D") -> "Point2D":
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return Point2D(x=self.x - other.x, y=self.y - other.y)

    def scale(self, factor: Real) -> "Point2D":
        """Умножение обеих координат на factor."""
        return Point2D(x=self.x * factor, y=self.y * factor)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point2D, Sequence[Real]]
