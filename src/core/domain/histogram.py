"""
HistogramBucket — Корзина гистограммы

Immutable Pydantic модель: интервал вещественной прямой и число попаданий.

Интервал полуоткрытый [lower, upper), кроме последней корзины гистограммы,
которая закрыта [lower, upper], чтобы включать максимум выборки.
"""

from numbers import Real

from pydantic import BaseModel, Field, model_validator


class HistogramBucket(BaseModel):
    """
    Корзина гистограммы.

    Immutable модель (frozen=True).
    """

    lower: float = Field(..., allow_inf_nan=False, description="Нижняя граница (включительно)")
    upper: float = Field(..., allow_inf_nan=False, description="Верхняя граница")
    count: int = Field(..., ge=1, description="Количество элементов в корзине")
    closed: bool = Field(
        default=False, description="True если верхняя граница включена ([lower, upper])"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_bounds(self) -> "HistogramBucket":
        """Верхняя граница не может быть меньше нижней."""
        if self.upper < self.lower:
            raise ValueError(
                f"upper bound {self.upper} is below lower bound {self.lower}"
            )
        return self

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: Real) -> bool:
        """
        Попадает ли value в интервал корзины с учётом закрытости.
        """
        if self.closed:
            return self.lower <= value <= self.upper
        return self.lower <= value < self.upper

    def interval(self) -> tuple[float, float]:
        return (self.lower, self.upper)
