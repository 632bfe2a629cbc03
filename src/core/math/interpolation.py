"""
Interpolation — Linear Interpolation & Bézier Curves

Модуль вычисляет точки на отрезках и кривых Безье в 2-D:
- linear_interpolation(t, p0, p1): p0 + t * (p1 - p0)
- bezier_curve(t, points): алгоритм де Кастельжо

t не ограничивается отрезком [0, 1]: вне него выполняется экстраполяция.
Точки принимаются как Point2D или пары (x, y), результат — Point2D.
"""

from collections.abc import Sequence
from numbers import Real

from src.core.domain.point import Point2D, PointLike
from src.core.math.numerical_safeguards import MathDomainError


def linear_interpolation(t: Real, p0: PointLike, p1: PointLike) -> Point2D:
    """
    Линейная интерполяция между p0 и p1.

    Args:
        t: Параметр (0 → p0, 1 → p1, вне [0, 1] → экстраполяция)
        p0: Начальная точка
        p1: Конечная точка

    Returns:
        Point2D = p0 + t * (p1 - p0)

    Examples:
        >>> linear_interpolation(0.5, (0, 0), (2, 4))
        Point2D(x=1.0, y=2.0)
    """
    start = Point2D.coerce(p0)
    end = Point2D.coerce(p1)

    return start + (end - start).scale(t)


def bezier_curve(t: Real, points: Sequence[PointLike]) -> Point2D:
    """
    Точка кривой Безье степени len(points) - 1 при параметре t.

    Алгоритм де Кастельжо: на каждом шаге соседние пары точек заменяются
    их линейной интерполяцией, пока не останется одна точка.

    Args:
        t: Параметр кривой
        points: Контрольные точки (минимум одна)

    Returns:
        Point2D на кривой

    Raises:
        MathDomainError: Если список контрольных точек пуст

    Examples:
        >>> bezier_curve(0.5, [(0, 0), (1, 2), (2, 0)])
        Point2D(x=1.0, y=1.0)
        >>> bezier_curve(0.9, [(3, 4)])
        Point2D(x=3.0, y=4.0)
    """
    layer = [Point2D.coerce(p) for p in points]

    if not layer:
        raise MathDomainError("bezier curve requires at least one control point")

    while len(layer) > 1:
        layer = [
            linear_interpolation(t, first, second)
            for first, second in zip(layer, layer[1:])
        ]

    return layer[0]
