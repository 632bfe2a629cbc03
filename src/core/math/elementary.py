"""
Elementary — Константы и скалярные функции

Тонкий слой над платформенной math-библиотекой (IEEE-754 double):
- Константы π, τ, ℯ
- Конверсия градусы ↔ радианы
- Тригонометрия, гиперболические функции и их обратные
- exp / log / log2 / log10 / log по произвольному основанию
- sqrt

Все функции возвращают float. Аргументы вне области определения
приводят к MathDomainError (а не к NaN и не к голому ValueError платформы).
"""

import math
from numbers import Real
from typing import Final, Optional

from src.core.math.numerical_safeguards import MathDomainError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Отношение длины окружности к диаметру
PI: Final[float] = math.pi

# Отношение длины окружности к радиусу (2π)
TAU: Final[float] = 2 * math.pi

# Основание натурального логарифма
E: Final[float] = 2.718281828459045

# Количество градусов в одном радиане
RAD_IN_DEG: Final[float] = 180 / math.pi


# =============================================================================
# ГРАДУСЫ / РАДИАНЫ
# =============================================================================


def deg2rad(x: Real) -> float:
    """
    Конверсия градусов в радианы.

    Examples:
        >>> deg2rad(180)
        3.141592653589793
    """
    return x / RAD_IN_DEG


def rad2deg(x: Real) -> float:
    """
    Конверсия радиан в градусы.

    Examples:
        >>> rad2deg(PI)
        180.0
    """
    return x * RAD_IN_DEG


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def _require_finite_angle(name: str, x: Real) -> None:
    if math.isinf(x):
        raise MathDomainError(f"{name} is undefined for infinite angle, got {x}")


def sin(x: Real) -> float:
    """
    Синус x (x в радианах).

    Raises:
        MathDomainError: Если x = ±Inf
    """
    _require_finite_angle("sin", x)
    return math.sin(x)


def cos(x: Real) -> float:
    """Косинус x (x в радианах), MathDomainError для ±Inf."""
    _require_finite_angle("cos", x)
    return math.cos(x)


def tan(x: Real) -> float:
    """Тангенс x (x в радианах), MathDomainError для ±Inf."""
    _require_finite_angle("tan", x)
    return math.tan(x)


def asin(x: Real) -> float:
    """
    Арксинус x в радианах.

    Raises:
        MathDomainError: Если x вне [-1, 1]
    """
    if not -1 <= x <= 1:
        raise MathDomainError(f"asin is defined on [-1, 1], got {x}")
    return math.asin(x)


def acos(x: Real) -> float:
    """
    Арккосинус x в радианах.

    Raises:
        MathDomainError: Если x вне [-1, 1]
    """
    if not -1 <= x <= 1:
        raise MathDomainError(f"acos is defined on [-1, 1], got {x}")
    return math.acos(x)


def atan(x: Real) -> float:
    """Арктангенс x в радианах."""
    return math.atan(x)


def atan2(y: Real, x: Real) -> float:
    """Арктангенс y/x с учётом квадранта (в радианах)."""
    return math.atan2(y, x)


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(x: Real) -> float:
    return math.sinh(x)


def cosh(x: Real) -> float:
    return math.cosh(x)


def tanh(x: Real) -> float:
    return math.tanh(x)


def asinh(x: Real) -> float:
    return math.asinh(x)


def acosh(x: Real) -> float:
    """
    Обратный гиперболический косинус.

    Raises:
        MathDomainError: Если x < 1
    """
    if x < 1:
        raise MathDomainError(f"acosh is defined on [1, inf), got {x}")
    return math.acosh(x)


def atanh(x: Real) -> float:
    """
    Обратный гиперболический тангенс.

    Raises:
        MathDomainError: Если x вне открытого интервала (-1, 1)
    """
    if not -1 < x < 1:
        raise MathDomainError(f"atanh is defined on (-1, 1), got {x}")
    return math.atanh(x)


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМЫ
# =============================================================================


def exp(x: Real) -> float:
    """ℯ в степени x."""
    return math.exp(x)


def log(x: Real, base: Optional[Real] = None) -> float:
    """
    Логарифм x по основанию base (натуральный, если base не задан).

    log(x, x) возвращает ровно 1.0 без вычисления отношения логарифмов.

    Raises:
        MathDomainError: Если x <= 0, base <= 0 или base == 1

    Examples:
        >>> log(E)
        1.0
        >>> log(7.5, 7.5)
        1.0
        >>> log(8, 2)
        3.0
    """
    if x <= 0:
        raise MathDomainError(f"log is defined for x > 0, got {x}")

    if base is None:
        return math.log(x)

    if base <= 0 or base == 1:
        raise MathDomainError(f"log base must be positive and != 1, got {base}")

    if x == base:
        return 1.0

    return math.log(x) / math.log(base)


def log2(x: Real) -> float:
    """Двоичный логарифм x."""
    if x <= 0:
        raise MathDomainError(f"log2 is defined for x > 0, got {x}")
    return math.log2(x)


def log10(x: Real) -> float:
    """Десятичный логарифм x."""
    if x <= 0:
        raise MathDomainError(f"log10 is defined for x > 0, got {x}")
    return math.log10(x)


def sqrt(x: Real) -> float:
    """
    Неотрицательный квадратный корень x.

    Raises:
        MathDomainError: Если x < 0
    """
    if x < 0:
        raise MathDomainError(f"sqrt is defined for x >= 0, got {x}")
    return math.sqrt(x)
