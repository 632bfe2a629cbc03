"""
Powers — Integer Power Engine & Integer Root Engine

Модуль обеспечивает точное возведение в степень и извлечение корней:
- power(x, n): exponentiation by squaring для exact integer,
  делегирование в math.pow для float
- isqrt(x): целочисленный квадратный корень методом Ньютона
- nth_root(x, n): вещественный корень степени n через power(x, 1/n)

ПРАВИЛА ПРОДВИЖЕНИЯ ТИПОВ:
    int ** int (n >= 0)  → int (точно, без ошибок округления)
    int ** int (n < 0)   → float (через обратную величину 1/x)
    float в любом месте  → float (math.pow)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. power(x, n) == x ** n точно для целых x и n >= 0
2. isqrt(x) ** 2 <= x < (isqrt(x) + 1) ** 2 для любого x >= 0
3. O(log|n|) умножений в power
"""

import math
from numbers import Real

from src.core.math.numerical_safeguards import (
    MathDomainError,
    is_exact_integer,
    require_exact_integer,
)

# =============================================================================
# INTEGER POWER ENGINE
# =============================================================================


def power(x: Real, n: Real) -> Real:
    """
    Возведение x в степень n.

    Для exact integer x и n используется exponentiation by squaring:
        pow(x, 0) = 1
        pow(x, 1) = x
        pow(x, n) = pow(x*x, n/2)            для чётного n
        pow(x, n) = x * pow(x*x, (n-1)/2)    для нечётного n > 1
        pow(x, n) = pow(1/x, -n)             для n < 0 (результат float)

    Иначе (float операнд или дробная степень) — math.pow.

    Args:
        x: Основание
        n: Показатель степени

    Returns:
        int для целого x и целого n >= 0, иначе float

    Raises:
        MathDomainError: 0 в отрицательной степени или результат
            не определён в вещественных числах (например, (-8) ** 0.5)

    Examples:
        >>> power(2, 4)
        16
        >>> power(2.0, 4)
        16.0
        >>> power(5, 100)
        7888609052210118054117285652827862296732064351090230047702789306640625
        >>> power(2, -2)
        0.25
    """
    if is_exact_integer(x) and is_exact_integer(n):
        return _power_by_squaring(x, n)

    try:
        return math.pow(x, n)
    except ValueError as e:
        raise MathDomainError(f"power({x!r}, {n!r}) is undefined over the reals") from e


def _power_by_squaring(x: int, n: int) -> Real:
    """Exponentiation by squaring с аккумулятором (итеративно)."""
    if n < 0:
        if x == 0:
            raise MathDomainError("zero cannot be raised to a negative power")
        x = 1 / x
        n = -n

    acc = 1

    while n > 1:
        if n % 2 == 1:
            acc = acc * x
        x = x * x
        n = n // 2

    if n == 1:
        return x * acc

    # n == 0
    return acc


# =============================================================================
# INTEGER ROOT ENGINE
# =============================================================================


def isqrt(x: int) -> int:
    """
    Целочисленный квадратный корень: наибольшее n, такое что n * n <= x.

    Метод Ньютона на целых:
        n_0 = (1 + x) // 2
        n_{k+1} = (n_k + x // n_k) // 2
    до тех пор, пока соседние итерации отличаются больше чем на 1.
    Если у сошедшегося n квадрат превышает x — результат n - 1.

    Работает для сколь угодно больших int (без перехода во float).

    Args:
        x: Неотрицательное exact integer

    Returns:
        floor(sqrt(x))

    Raises:
        ExactIntegerRequired: Если x не int
        MathDomainError: Если x < 0

    Examples:
        >>> isqrt(100)
        10
        >>> isqrt(10)
        3
        >>> isqrt(65536)
        256
    """
    require_exact_integer(x, "x")

    if x < 0:
        raise MathDomainError(f"isqrt is defined for x >= 0, got {x}")

    previous = 1
    current = (1 + x) // 2

    while abs(previous - current) > 1:
        previous, current = current, (current + x // current) // 2

    if current * current <= x:
        return current
    return current - 1


def nth_root(x: Real, n: Real) -> float:
    """
    Вещественный корень степени n: power(x, 1/n).

    Raises:
        MathDomainError: Если n == 0 или корень не определён (x < 0)

    Examples:
        >>> nth_root(16, 2)
        4.0
    """
    if n == 0:
        raise MathDomainError("root of degree zero is undefined")

    return power(x, 1 / n)
