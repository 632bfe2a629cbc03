"""
Domain models and value objects.

Contains immutable value objects shared by the engines: Point2D, HistogramBucket.
"""

from src.core.domain.histogram import HistogramBucket
from src.core.domain.point import Point2D, PointLike

__all__ = [
    "HistogramBucket",
    "Point2D",
    "PointLike",
]
