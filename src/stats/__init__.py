"""
Sequence statistics and histograms.

Все функции принимают любой конечный iterable и возвращают None
(mode — []) для пустой последовательности.
"""

from src.stats.histogram import histogram, histogram_by
from src.stats.sequence import extent, materialize, product
from src.stats.statistics import (
    SequenceSummary,
    describe,
    mean,
    median,
    mode,
    stdev,
    variance,
)

__all__ = [
    # Sequence
    "extent",
    "materialize",
    "product",
    # Statistics
    "SequenceSummary",
    "describe",
    "mean",
    "median",
    "mode",
    "stdev",
    "variance",
    # Histogram
    "histogram",
    "histogram_by",
]
