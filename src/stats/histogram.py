"""
Histogram — Гистограммы с фиксированным количеством корзин

Модуль строит гистограмму над конечной последовательностью чисел:
- histogram(values, bucket_count): равные по ширине корзины на [min, max]
- histogram_by(values, key, bucket_count): то же для key(element)

АЛГОРИТМ:
    width = (max - min) / bucket_count
    границы: edge_0 = min, edge_i = min + i*width, edge_bucket_count = max
    корзина i: [edge_i, edge_{i+1}), последняя корзина закрыта [edge_i, max]
    элемент попадает в корзину i с edge_i <= e < edge_{i+1}

    Если max - min переполняется (Inf), границы считаются в половинных
    величинах: min/2 + i * (max/2 - min/2) / bucket_count, затем * 2.
    Если width теряется в субнормальных числах (width == 0.0), внутренние
    границы совпадают с min и все элементы попадают в последнюю корзину.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая последовательность → None (не ошибка)
2. min == max → одна закрытая корзина [min, min] со всеми элементами
3. В результат попадают только непустые корзины, по возрастанию индекса
4. Сумма count по корзинам == количество элементов
5. Каждый элемент лежит в интервале своей корзины (bucket.contains)
6. Любые конечные float и int в диапазоне float обрабатываются без исключений
"""

import logging
import math
from bisect import bisect_right
from collections.abc import Callable, Iterable
from numbers import Real
from typing import Any, Optional

from src.core.config import DEFAULT_CONFIG
from src.core.domain.histogram import HistogramBucket
from src.core.logging import get_logger, log_with_data
from src.core.math.numerical_safeguards import (
    MathDomainError,
    clamp,
    require_exact_integer,
)
from src.stats.sequence import extent, materialize

logger = get_logger("histogram")


def _validate_bucket_count(bucket_count: int) -> None:
    require_exact_integer(bucket_count, "bucket_count")

    if bucket_count < 1:
        raise MathDomainError(f"bucket_count must be >= 1, got {bucket_count}")


def _as_finite_float(value: Real) -> float:
    """
    Приведение элемента к конечному float.

    Raises:
        MathDomainError: NaN, Inf или int за пределами диапазона float
    """
    try:
        converted = float(value)
    except OverflowError as e:
        raise MathDomainError(f"histogram values must be finite, got {value}") from e

    if not math.isfinite(converted):
        raise MathDomainError(f"histogram values must be finite, got {value}")

    return converted


def _bucket_edges(lowest: float, highest: float, bucket_count: int) -> list[float]:
    """
    Границы корзин edge_0..edge_bucket_count (неубывающие, в [lowest, highest]).
    """
    span = highest - lowest

    if math.isinf(span):
        # Разность переполнилась: считаем в половинных величинах
        half_width = (highest / 2 - lowest / 2) / bucket_count
        interior = [(lowest / 2 + i * half_width) * 2 for i in range(1, bucket_count)]
    else:
        width = span / bucket_count
        interior = [lowest + i * width for i in range(1, bucket_count)]

    return [lowest] + [min(highest, max(lowest, edge)) for edge in interior] + [highest]


def histogram(
    values: Iterable[Real],
    bucket_count: int = DEFAULT_CONFIG.histogram_bucket_count,
) -> Optional[list[HistogramBucket]]:
    """
    Гистограмма с bucket_count корзинами равной ширины.

    Args:
        values: Конечная последовательность чисел
        bucket_count: Количество корзин (default: 10)

    Returns:
        Список непустых HistogramBucket по возрастанию
        или None для пустой последовательности

    Raises:
        ExactIntegerRequired: Если bucket_count не int
        MathDomainError: Если bucket_count < 1 или среди значений есть NaN/Inf
            (или int, не представимый как float)

    Examples:
        >>> buckets = histogram(range(1, 12))
        >>> buckets[0].interval(), buckets[0].count
        ((1.0, 2.0), 1)
        >>> buckets[-1].interval(), buckets[-1].count, buckets[-1].closed
        ((10.0, 11.0), 2, True)
    """
    _validate_bucket_count(bucket_count)

    data = [_as_finite_float(value) for value in materialize(values)]

    if not data:
        return None

    lowest, highest = extent(data)

    if lowest == highest:
        return [HistogramBucket(lower=lowest, upper=lowest, count=len(data), closed=True)]

    edges = _bucket_edges(lowest, highest, bucket_count)
    counts = [0] * bucket_count

    for value in data:
        index = clamp(bisect_right(edges, value) - 1, 0, bucket_count - 1)
        counts[index] += 1

    last_index = bucket_count - 1
    buckets = [
        HistogramBucket(
            lower=edges[i],
            upper=edges[i + 1],
            count=count,
            closed=i == last_index,
        )
        for i, count in enumerate(counts)
        if count > 0
    ]

    log_with_data(
        logger,
        logging.DEBUG,
        "histogram built",
        {"values": len(data), "non_empty": len(buckets), "bucket_count": bucket_count},
    )

    return buckets


def histogram_by(
    values: Iterable[Any],
    key: Callable[[Any], Real],
    bucket_count: int = DEFAULT_CONFIG.histogram_bucket_count,
) -> Optional[list[HistogramBucket]]:
    """
    Гистограмма значений key(element) для каждого элемента.

    Examples:
        >>> words = ["a", "bb", "ccc", "dddd"]
        >>> [b.count for b in histogram_by(words, len, bucket_count=3)]
        [1, 1, 2]
    """
    return histogram((key(element) for element in values), bucket_count)
