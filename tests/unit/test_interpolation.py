"""
Тесты для Interpolation — linear_interpolation и bezier_curve
"""

import pytest

from src.core.domain import Point2D
from src.core.math.interpolation import bezier_curve, linear_interpolation
from src.core.math.numerical_safeguards import MathDomainError


class TestLinearInterpolation:
    """Тесты linear_interpolation."""

    def test_endpoints(self):
        p0 = Point2D(x=1.0, y=2.0)
        p1 = Point2D(x=5.0, y=-6.0)
        assert linear_interpolation(0, p0, p1) == p0
        assert linear_interpolation(1, p0, p1) == p1

    def test_midpoint(self):
        assert linear_interpolation(0.5, (0, 0), (2, 4)) == Point2D(x=1.0, y=2.0)

    def test_extrapolation(self):
        """t вне [0, 1] экстраполирует по прямой."""
        assert linear_interpolation(2, (0, 0), (1, 1)) == Point2D(x=2.0, y=2.0)
        assert linear_interpolation(-1, (0, 0), (1, 3)) == Point2D(x=-1.0, y=-3.0)

    def test_accepts_tuples_and_lists(self):
        result = linear_interpolation(0.25, [0, 0], (4, 8))
        assert result.as_tuple() == (1.0, 2.0)

    def test_invalid_point(self):
        with pytest.raises(ValueError, match="exactly 2 coordinates"):
            linear_interpolation(0.5, (0, 0, 0), (1, 1))

        with pytest.raises(ValueError, match="expected Point2D"):
            linear_interpolation(0.5, "ab", (1, 1))


class TestBezierCurve:
    """Тесты bezier_curve (де Кастельжо)."""

    def test_single_point_independent_of_t(self):
        for t in [-1.0, 0.0, 0.3, 1.0, 5.0]:
            assert bezier_curve(t, [(3, 4)]) == Point2D(x=3.0, y=4.0)

    def test_two_points_is_linear(self):
        for t in [0.0, 0.25, 0.5, 1.0]:
            assert bezier_curve(t, [(0, 0), (4, 2)]) == linear_interpolation(t, (0, 0), (4, 2))

    def test_quadratic_midpoint(self):
        assert bezier_curve(0.5, [(0, 0), (1, 2), (2, 0)]) == Point2D(x=1.0, y=1.0)

    def test_endpoints(self):
        points = [(0, 0), (1, 3), (3, 3), (4, 0)]
        assert bezier_curve(0, points) == Point2D(x=0.0, y=0.0)
        assert bezier_curve(1, points) == Point2D(x=4.0, y=0.0)

    def test_cubic_matches_bernstein_form(self):
        """Де Кастельжо совпадает с формой Бернштейна."""
        points = [(0, 0), (1, 3), (3, 3), (4, 0)]
        for t in [0.1, 0.25, 0.5, 0.75, 0.9]:
            u = 1 - t
            weights = [u**3, 3 * u**2 * t, 3 * u * t**2, t**3]
            expected_x = sum(w * p[0] for w, p in zip(weights, points))
            expected_y = sum(w * p[1] for w, p in zip(weights, points))

            result = bezier_curve(t, points)
            assert result.x == pytest.approx(expected_x)
            assert result.y == pytest.approx(expected_y)

    def test_empty_points(self):
        with pytest.raises(MathDomainError, match="at least one control point"):
            bezier_curve(0.5, [])
