"""
Statistics — mean, median, mode, variance, stdev

Статистики над произвольной конечной последовательностью чисел.

ПОЛИТИКА ПУСТОГО ВХОДА:
    Пустая последовательность — НЕ ошибка. mean/median/variance/stdev/describe
    возвращают None (отличимо от настоящего нуля), mode возвращает [].

ПОЛИТИКА MODE:
    Всегда возвращается argmax-множество: все значения с максимальной
    частотой, даже если эта частота равна 1 (тогда это все различные
    элементы). Порядок — по первому появлению во входе.

ЧИСЛЕННАЯ ОГОВОРКА:
    variance = mean(x²) - mean(x)² (population variance). Для больших по
    модулю значений с малым разбросом возможна катастрофическая потеря
    точности; формула сохранена намеренно.
"""

from collections.abc import Iterable
from numbers import Real
from typing import NamedTuple, Optional

from src.core.math.elementary import sqrt
from src.core.math.powers import power
from src.stats.sequence import extent, materialize

# =============================================================================
# TYPES
# =============================================================================


class SequenceSummary(NamedTuple):
    """Сводные статистики последовательности."""

    count: int  # Количество элементов
    minimum: Real  # Минимальный элемент
    maximum: Real  # Максимальный элемент
    mean: float  # Среднее арифметическое
    median: Real  # Медиана
    variance: float  # Population variance
    stdev: float  # Стандартное отклонение


# =============================================================================
# CENTRAL TENDENCY
# =============================================================================


def _mean_of(values: list[Real]) -> float:
    return sum(values) / len(values)


def mean(values: Iterable[Real]) -> Optional[float]:
    """
    Среднее арифметическое.

    Examples:
        >>> mean([1, 2, 3])
        2.0
        >>> mean([]) is None
        True
    """
    data = materialize(values)

    if not data:
        return None

    return _mean_of(data)


def _median_of(values: list[Real]) -> Real:
    ordered = sorted(values)
    middle = len(ordered) // 2

    if len(ordered) % 2 == 1:
        return ordered[middle]

    return _mean_of(ordered[middle - 1 : middle + 1])


def median(values: Iterable[Real]) -> Optional[Real]:
    """
    Медиана: средний элемент отсортированной последовательности.

    Для чётного количества — среднее двух средних элементов.

    Examples:
        >>> median([1, 2, 3, 4, 5, -100])
        2.5
        >>> median([3, 1, 2])
        2
    """
    data = materialize(values)

    if not data:
        return None

    return _median_of(data)


def mode(values: Iterable[Real]) -> list[Real]:
    """
    Наиболее частые значения (argmax-множество частот).

    Элементы группируются по равенству (==), поэтому 1 и 1.0 попадают
    в одну группу; в результат идёт первое встреченное представление.

    Returns:
        Список значений с максимальной частотой в порядке первого появления,
        [] для пустой последовательности

    Examples:
        >>> mode([1, 2, 3, 2, 3])
        [2, 3]
        >>> mode([1, 2, 3])
        [1, 2, 3]
        >>> mode([])
        []
    """
    counts: dict[Real, int] = {}

    for value in values:
        counts[value] = counts.get(value, 0) + 1

    if not counts:
        return []

    highest = max(counts.values())
    return [value for value, count in counts.items() if count == highest]


# =============================================================================
# DISPERSION
# =============================================================================


def _variance_of(values: list[Real]) -> float:
    mean_of_squares = _mean_of([power(v, 2) for v in values])
    return mean_of_squares - power(_mean_of(values), 2)


def _stdev_from_variance(variance_value: float) -> float:
    # variance >= 0 математически, отрицательное значение есть остаток округления
    return sqrt(max(variance_value, 0.0))


def variance(values: Iterable[Real]) -> Optional[float]:
    """
    Population variance: mean(x²) - mean(x)².

    Examples:
        >>> variance([1, 2, 3, 4, 5])
        2.0
    """
    data = materialize(values)

    if not data:
        return None

    return _variance_of(data)


def stdev(values: Iterable[Real]) -> Optional[float]:
    """
    Стандартное отклонение: sqrt(variance).

    Examples:
        >>> stdev([1, 2, 3, 4, 5])
        1.4142135623730951
    """
    data = materialize(values)

    if not data:
        return None

    return _stdev_from_variance(_variance_of(data))


# =============================================================================
# SUMMARY
# =============================================================================


def describe(values: Iterable[Real]) -> Optional[SequenceSummary]:
    """
    Все сводные статистики за одну материализацию последовательности.

    Returns:
        SequenceSummary или None для пустой последовательности

    Examples:
        >>> summary = describe([1, 2, 3, 4, 5])
        >>> summary.count, summary.mean, summary.median, summary.variance
        (5, 3.0, 3, 2.0)
    """
    data = materialize(values)

    if not data:
        return None

    lowest, highest = extent(data)
    variance_value = _variance_of(data)

    return SequenceSummary(
        count=len(data),
        minimum=lowest,
        maximum=highest,
        mean=_mean_of(data),
        median=_median_of(data),
        variance=variance_value,
        stdev=_stdev_from_variance(variance_value),
    )
