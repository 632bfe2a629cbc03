"""
Тесты для доменных моделей: Point2D, HistogramBucket

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Сериализацию/десериализацию JSON
4. Граничные случаи и невалидные данные
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import HistogramBucket, Point2D

# =============================================================================
# POINT2D TESTS
# =============================================================================


class TestPoint2D:
    """Тесты для модели Point2D"""

    def test_int_coordinates_become_float(self):
        point = Point2D(x=1, y=-2)
        assert point.x == 1.0
        assert isinstance(point.x, float)

    def test_immutability(self):
        """Точка должна быть immutable (frozen=True)"""
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0

    def test_rejects_nan_inf(self):
        with pytest.raises(ValidationError):
            Point2D(x=float("nan"), y=0.0)
        with pytest.raises(ValidationError):
            Point2D(x=0.0, y=float("inf"))

    def test_arithmetic(self):
        a = Point2D(x=1.0, y=2.0)
        b = Point2D(x=3.0, y=5.0)
        assert a + b == Point2D(x=4.0, y=7.0)
        assert b - a == Point2D(x=2.0, y=3.0)
        assert a.scale(2) == Point2D(x=2.0, y=4.0)

    def test_coerce(self):
        point = Point2D(x=1.0, y=2.0)
        assert Point2D.coerce(point) is point
        assert Point2D.coerce((1, 2)) == point
        assert Point2D.coerce([1.0, 2.0]) == point

    def test_json_round_trip(self):
        point = Point2D(x=1.5, y=-0.25)
        restored = Point2D.model_validate_json(point.model_dump_json())
        assert restored == point
        assert json.loads(point.model_dump_json()) == {"x": 1.5, "y": -0.25}


# =============================================================================
# HISTOGRAM BUCKET TESTS
# =============================================================================


class TestHistogramBucket:
    """Тесты для модели HistogramBucket"""

    @pytest.fixture
    def open_bucket(self) -> HistogramBucket:
        return HistogramBucket(lower=1.0, upper=2.0, count=3)

    @pytest.fixture
    def closed_bucket(self) -> HistogramBucket:
        return HistogramBucket(lower=9.0, upper=10.0, count=2, closed=True)

    def test_defaults(self, open_bucket: HistogramBucket):
        assert open_bucket.closed is False
        assert open_bucket.width == 1.0
        assert open_bucket.interval() == (1.0, 2.0)

    def test_half_open_contains(self, open_bucket: HistogramBucket):
        assert open_bucket.contains(1.0)
        assert open_bucket.contains(1.999)
        assert not open_bucket.contains(2.0)
        assert not open_bucket.contains(0.999)

    def test_closed_contains_upper(self, closed_bucket: HistogramBucket):
        assert closed_bucket.contains(10.0)
        assert closed_bucket.contains(9.0)
        assert not closed_bucket.contains(10.001)

    def test_degenerate_bucket(self):
        bucket = HistogramBucket(lower=4.0, upper=4.0, count=5, closed=True)
        assert bucket.width == 0.0
        assert bucket.contains(4.0)

    def test_immutability(self, open_bucket: HistogramBucket):
        with pytest.raises(ValidationError):
            open_bucket.count = 10

    def test_rejects_zero_count(self):
        with pytest.raises(ValidationError):
            HistogramBucket(lower=0.0, upper=1.0, count=0)

    def test_rejects_inverted_bounds(self):
        with pytest.raises(ValidationError) as exc_info:
            HistogramBucket(lower=2.0, upper=1.0, count=1)
        assert "below lower bound" in str(exc_info.value)

    def test_json_serialization(self, closed_bucket: HistogramBucket):
        data = json.loads(closed_bucket.model_dump_json())
        assert data == {"lower": 9.0, "upper": 10.0, "count": 2, "closed": True}
