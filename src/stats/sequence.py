"""
Sequence — Материализация последовательностей и базовые свёртки

Движки статистики и гистограмм принимают любой конечный iterable
(list, tuple, range, set, генератор). Он материализуется ровно один раз,
поэтому одноразовые источники тоже поддерживаются. Исходный объект
никогда не изменяется.
"""

from collections.abc import Iterable
from numbers import Real
from typing import Optional

from src.core.config import DEFAULT_CONFIG
from src.core.math.combinatorics import factorial


def materialize(values: Iterable[Real]) -> list[Real]:
    """Копия последовательности в list (один проход по источнику)."""
    return list(values)


def extent(values: Iterable[Real]) -> Optional[tuple[Real, Real]]:
    """
    Минимум и максимум последовательности за один проход.

    Returns:
        (min, max) или None для пустой последовательности

    Examples:
        >>> extent([3, 1, 2])
        (1, 3)
        >>> extent([]) is None
        True
    """
    iterator = iter(values)

    try:
        first = next(iterator)
    except StopIteration:
        return None

    lowest = highest = first
    for value in iterator:
        if value < lowest:
            lowest = value
        elif value > highest:
            highest = value

    return (lowest, highest)


def product(values: Iterable[Real]) -> Optional[Real]:
    """
    Произведение всех элементов.

    Для range с шагом 1, положительным началом и концом в пределах таблицы
    факториалов используется O(1) формула: product(range(a, b)) = (b-1)! / (a-1)!.
    Остальные range сворачиваются поэлементно.

    Returns:
        Произведение или None для пустой последовательности

    Examples:
        >>> product([2, 3, 4])
        24
        >>> product(range(1, 6))
        120
        >>> product([]) is None
        True
    """
    if (
        isinstance(values, range)
        and values.step == 1
        and values.start >= 1
        and values.stop - 1 <= DEFAULT_CONFIG.factorial_table_size
    ):
        if len(values) == 0:
            return None
        return factorial(values.stop - 1) // factorial(values.start - 1)

    iterator = iter(values)

    try:
        result = next(iterator)
    except StopIteration:
        return None

    for value in iterator:
        result = result * value

    return result
