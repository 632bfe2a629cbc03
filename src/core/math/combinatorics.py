"""
Combinatorics — Factorial Table, k-Permutations, k-Combinations

Модуль обеспечивает точную комбинаторику на exact integer:
- FactorialTable: предвычисленная таблица 0!..N! (строится один раз при импорте)
- factorial(n): O(1) для n <= N, иначе итеративное домножение от N!
- k_permutations(n, k) = n! / (n-k)!
- k_combinations(n, k) = n! / (k! (n-k)!)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица immutable (tuple) после построения, блокировки не нужны
2. factorial(n) определён только для n >= 0
3. k > n → 0 для перестановок и сочетаний
4. Деление всегда точное (целочисленное)
"""

from typing import Final

from src.core.config import DEFAULT_CONFIG
from src.core.logging import get_logger
from src.core.math.numerical_safeguards import (
    MathDomainError,
    require_exact_integer,
    require_non_negative_integer,
)

logger = get_logger("combinatorics")


# =============================================================================
# FACTORIAL TABLE
# =============================================================================


class FactorialTable:
    """
    Предвычисленная таблица факториалов 0!..size!.

    Заполняется целиком в конструкторе и далее только читается.
    """

    def __init__(self, size: int):
        require_non_negative_integer(size, "size")

        values = [1]
        for n in range(1, size + 1):
            values.append(values[-1] * n)

        self._values: tuple[int, ...] = tuple(values)
        logger.debug("factorial table built: 0!..%d!", size)

    @property
    def size(self) -> int:
        """Максимальное n, для которого n! хранится в таблице."""
        return len(self._values) - 1

    def factorial(self, n: int) -> int:
        """
        n! из таблицы или домножением от size! для n > size.
        """
        if n <= self.size:
            return self._values[n]

        result = self._values[-1]
        for k in range(self.size + 1, n + 1):
            result *= k
        return result


# Глобальная таблица (строится при импорте, read-only)
_FACTORIAL_TABLE: Final[FactorialTable] = FactorialTable(DEFAULT_CONFIG.factorial_table_size)


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: int) -> int:
    """
    Факториал n.

    Args:
        n: Exact integer >= 0

    Returns:
        n! (exact integer)

    Raises:
        ExactIntegerRequired: Если n не int
        MathDomainError: Если n < 0

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
    """
    require_non_negative_integer(n, "n")
    return _FACTORIAL_TABLE.factorial(n)


# =============================================================================
# PERMUTATIONS & COMBINATIONS
# =============================================================================


def _validate_n_k(n: int, k: int) -> None:
    require_exact_integer(n, "n")
    require_exact_integer(k, "k")

    if k < 0:
        raise MathDomainError(f"k must be non-negative, got {k}")


def k_permutations(n: int, k: int) -> int:
    """
    Количество упорядоченных выборок k элементов из n: n! / (n-k)!.

    Returns:
        0 если k > n

    Raises:
        ExactIntegerRequired: Если n или k не int
        MathDomainError: Если k < 0

    Examples:
        >>> k_permutations(10, 2)
        90
        >>> k_permutations(3, 4)
        0
    """
    _validate_n_k(n, k)

    if k > n:
        return 0

    return factorial(n) // factorial(n - k)


def k_combinations(n: int, k: int) -> int:
    """
    Биномиальный коэффициент C(n, k) = n! / (k! (n-k)!).

    Returns:
        0 если k > n

    Raises:
        ExactIntegerRequired: Если n или k не int
        MathDomainError: Если k < 0

    Examples:
        >>> k_combinations(10, 2)
        45
        >>> k_combinations(5, 0)
        1
    """
    _validate_n_k(n, k)

    if k > n:
        return 0

    return factorial(n) // (factorial(k) * factorial(n - k))
