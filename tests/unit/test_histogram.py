"""
Тесты для Histogram — histogram и histogram_by

Проверяемые инварианты:
1. Пустая последовательность → None
2. min == max → одна закрытая корзина со всеми элементами
3. Только непустые корзины, по возрастанию
4. Сумма count == количество элементов
5. Каждый элемент попадает в свою корзину (contains)
"""

import logging
import sys

import pytest

from src.core.domain import HistogramBucket
from src.core.math.numerical_safeguards import ExactIntegerRequired, MathDomainError
from src.stats import histogram, histogram_by


class TestHistogram:
    """Тесты histogram."""

    def test_default_ten_buckets(self):
        buckets = histogram(range(1, 12))
        assert len(buckets) == 10
        assert buckets[0] == HistogramBucket(lower=1.0, upper=2.0, count=1)
        assert buckets[-1] == HistogramBucket(lower=10.0, upper=11.0, count=2, closed=True)

    def test_maximum_in_last_bucket(self):
        buckets = histogram([0, 10], bucket_count=5)
        assert len(buckets) == 2
        assert buckets[0].interval() == (0.0, 2.0)
        assert buckets[-1].interval() == (8.0, 10.0)
        assert buckets[-1].closed
        assert buckets[-1].contains(10)

    def test_only_non_empty_buckets(self):
        buckets = histogram([0, 0, 1, 9, 10], bucket_count=10)
        assert [b.count for b in buckets] == [2, 1, 2]
        assert [b.lower for b in buckets] == [0.0, 1.0, 9.0]
        assert [b.closed for b in buckets] == [False, False, True]

    def test_counts_sum_to_length(self):
        data = [0.3, 2.7, 1.1, 9.9, 4.4, 4.5, 7.0, 2.2, 0.0, 5.5]
        for bucket_count in [1, 2, 3, 7, 10, 50]:
            buckets = histogram(data, bucket_count)
            assert sum(b.count for b in buckets) == len(data)

    def test_buckets_ascending_and_cover_values(self):
        data = [0.3, 2.7, 1.1, 9.9, 4.4, 4.5, 7.0, 2.2, 0.0, 5.5]
        buckets = histogram(data, bucket_count=4)
        lowers = [b.lower for b in buckets]
        assert lowers == sorted(lowers)

        for value in data:
            assert sum(1 for b in buckets if b.contains(value)) == 1

    def test_single_bucket(self):
        buckets = histogram([3, 1, 2], bucket_count=1)
        assert buckets == [HistogramBucket(lower=1.0, upper=3.0, count=3, closed=True)]

    def test_degenerate_range(self):
        """Все элементы равны → одна закрытая корзина нулевой ширины."""
        buckets = histogram([4, 4, 4], bucket_count=5)
        assert buckets == [HistogramBucket(lower=4.0, upper=4.0, count=3, closed=True)]
        assert buckets[0].width == 0.0

    def test_empty(self):
        assert histogram([]) is None
        assert histogram(x for x in []) is None

    def test_generator_input(self):
        buckets = histogram((x for x in range(1, 12)), bucket_count=10)
        assert sum(b.count for b in buckets) == 11

    def test_negative_values(self):
        buckets = histogram([-10, -5, 0], bucket_count=2)
        assert [(b.interval(), b.count) for b in buckets] == [
            ((-10.0, -5.0), 1),
            ((-5.0, 0.0), 2),
        ]

    @pytest.mark.parametrize("bucket_count", [0, -3])
    def test_invalid_bucket_count(self, bucket_count):
        with pytest.raises(MathDomainError, match="bucket_count"):
            histogram([1, 2, 3], bucket_count)

    def test_non_integer_bucket_count(self):
        with pytest.raises(ExactIntegerRequired):
            histogram([1, 2, 3], 2.0)

    def test_bucket_count_checked_before_empty_input(self):
        with pytest.raises(MathDomainError):
            histogram([], 0)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_values(self, bad):
        with pytest.raises(MathDomainError, match="finite"):
            histogram([1.0, bad, 2.0])

    def test_debug_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="numkit.histogram"):
            histogram([1, 2, 3], bucket_count=3)
        assert "histogram built" in caplog.text

        record = [r for r in caplog.records if r.name == "numkit.histogram"][-1]
        assert record.data == {"values": 3, "non_empty": 3, "bucket_count": 3}


class TestHistogramExtremeRanges:
    """Тесты histogram на границах диапазона float."""

    def test_span_overflows(self):
        """max - min == Inf: границы считаются в половинных величинах."""
        buckets = histogram([-1e308, 1e308])
        assert [b.count for b in buckets] == [1, 1]
        assert buckets[0].lower == -1e308
        assert buckets[-1].upper == 1e308
        assert buckets[-1].closed
        assert buckets[0].contains(-1e308)
        assert buckets[-1].contains(1e308)

    def test_span_overflows_near_max_float(self):
        data = [-sys.float_info.max, 0.0, sys.float_info.max]
        buckets = histogram(data, bucket_count=4)
        assert sum(b.count for b in buckets) == 3
        for value in data:
            assert sum(1 for b in buckets if b.contains(value)) == 1

    def test_subnormal_span(self):
        """width теряется в субнормальных: без деления на ноль."""
        buckets = histogram([0.0, 5e-324])
        assert sum(b.count for b in buckets) == 2
        assert buckets[0].lower == 0.0
        assert buckets[-1].upper == 5e-324
        for value in [0.0, 5e-324]:
            assert sum(1 for b in buckets if b.contains(value)) == 1

    def test_large_ints_within_float_range(self):
        buckets = histogram([-(10**308), 10**308], bucket_count=2)
        assert [b.count for b in buckets] == [1, 1]

    def test_int_beyond_float_range(self):
        with pytest.raises(MathDomainError, match="finite"):
            histogram([0, 10**400])


class TestHistogramBy:
    """Тесты histogram_by."""

    def test_word_lengths(self):
        words = ["a", "bb", "ccc", "dddd"]
        buckets = histogram_by(words, len, bucket_count=3)
        assert [b.count for b in buckets] == [1, 1, 2]
        assert buckets[-1].interval() == (3.0, 4.0)

    def test_matches_histogram_of_keys(self):
        records = [{"v": v} for v in [5, 1, 9, 3, 3, 7]]
        assert histogram_by(records, lambda r: r["v"], 4) == histogram(
            [5, 1, 9, 3, 3, 7], 4
        )

    def test_empty(self):
        assert histogram_by([], len) is None
