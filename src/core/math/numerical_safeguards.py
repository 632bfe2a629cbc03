"""
Numerical Safeguards — Float Comparator & Shared Validators

Модуль содержит примитивы, на которые опираются все численные движки:
- Приближённое сравнение float (nearly_equal) с защитой от переполнения
- Проверки типов: exact integer vs approximate float
- Проверки domain (неотрицательность, конечность)
- Общие типы ошибок

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. nearly_equal симметрично, но НЕ транзитивно
2. Знаменатель относительной разницы ограничен MAX_FLOAT (нет Inf)
3. bool не считается exact integer
4. Все операции детерминированы и без побочных эффектов
"""

import math
import sys
from numbers import Real
from typing import Final

from src.core.config import DEFAULT_CONFIG

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог приближённого равенства (абсолютный около нуля, относительный иначе)
EPSILON: Final[float] = DEFAULT_CONFIG.epsilon

# Наибольший конечный float (ограничение знаменателя в nearly_equal)
MAX_FLOAT: Final[float] = sys.float_info.max


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MathDomainError(ValueError):
    """
    Аргумент вне области определения функции.

    Примеры: isqrt(-1), factorial(-3), asin(2.0), atanh(1.0).
    Ошибка не ретраится: вычисление детерминировано.
    """

    pass


class ExactIntegerRequired(TypeError):
    """
    Операция определена только для exact integer, а получен float
    (или другой не-целый тип).
    """

    pass


# =============================================================================
# FLOAT COMPARATOR
# =============================================================================


def nearly_equal(x: Real, y: Real, eps: float = EPSILON) -> bool:
    """
    Приближённое равенство двух чисел.

    Алгоритм:
        - x == y точно → True
        - x == 0 или y == 0 → |x - y| < eps
        - иначе → |x - y| / min(|x| + |y|, MAX_FLOAT) < eps

    Ограничение MAX_FLOAT не даёт знаменателю стать Inf, когда |x| + |y|
    выходит за диапазон float.

    ВАЖНО: отношение симметрично, но не транзитивно: из nearly_equal(a, b)
    и nearly_equal(b, c) не следует nearly_equal(a, c).

    Args:
        x: Первое значение
        y: Второе значение
        eps: Порог (default: EPSILON = 1e-15)

    Returns:
        True если значения почти равны

    Examples:
        >>> 2.3 - 0.3 == 2.0
        False
        >>> nearly_equal(2.3 - 0.3, 2.0)
        True
        >>> nearly_equal(0.0, 1e-16)
        True
        >>> nearly_equal(1.0, 1.1)
        False
    """
    if x == y:
        return True

    diff = abs(x - y)

    if x == 0 or y == 0:
        return diff < eps

    return diff / min(abs(x) + abs(y), MAX_FLOAT) < eps


def is_valid_float(value: Real) -> bool:
    """
    Проверка, является ли число конечным (не NaN, не Inf).

    Exact integer всегда валиден.
    """
    if is_exact_integer(value):
        return True
    return math.isfinite(value)


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def is_exact_integer(value: object) -> bool:
    """
    Проверка, является ли значение exact integer.

    bool исключён, хотя в Python это подкласс int.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def require_exact_integer(value: object, name: str) -> int:
    """
    Валидация, что значение — exact integer.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ExactIntegerRequired: Если value не int (float, bool, str, ...)
    """
    if not is_exact_integer(value):
        raise ExactIntegerRequired(
            f"{name} must be an exact integer, got {type(value).__name__} {value!r}"
        )
    return value


def require_non_negative_integer(value: object, name: str) -> int:
    """
    Валидация exact integer >= 0.

    Raises:
        ExactIntegerRequired: Если value не int
        MathDomainError: Если value < 0
    """
    require_exact_integer(value, name)

    if value < 0:
        raise MathDomainError(f"{name} must be non-negative, got {value}")

    return value


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(value: int, min_value: int, max_value: int) -> int:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Examples:
        >>> clamp(10, 0, 9)
        9
        >>> clamp(-1, 0, 9)
        0
    """
    return max(min_value, min(value, max_value))
