"""
Number Theory — gcd, extended Euclid, lcm, modular inverse

Модуль работает только с exact integer (float → ExactIntegerRequired):
- egcd(a, b): расширенный алгоритм Евклида → BezoutTriple(g, s, t)
- gcd(a, b): наибольший общий делитель (всегда >= 0)
- lcm(a, b): наименьшее общее кратное (lcm(0, 0) = 0)
- mod_inv(a, m): обратный элемент по модулю с typed failure
- mod_inv_or_raise(a, m): то же, но NotCoprimeError вместо failure value

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a * s + b * t == g для (g, s, t) = egcd(a, b)
2. g == gcd(|a|, |b|) >= 0
3. lcm(a, b) * gcd(a, b) == |a * b| для a, b не равных нулю одновременно
4. (a * mod_inv(a, m)) % m == 1 % m, результат в [0, m)
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from src.core.logging import get_logger, log_with_data
from src.core.math.numerical_safeguards import MathDomainError, require_exact_integer

logger = get_logger("number_theory")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotCoprimeError(ArithmeticError):
    """
    Обратный элемент по модулю не существует: gcd(a, m) != 1.

    Возвращается как значение из mod_inv и выбрасывается из
    mod_inv_or_raise / ModularInverse.unwrap().
    """

    def __init__(self, a: int, m: int, gcd_value: int):
        self.a = a
        self.m = m
        self.gcd = gcd_value
        super().__init__(
            f"{a} has no inverse modulo {m}: gcd({a}, {m}) = {gcd_value} != 1"
        )


# =============================================================================
# TYPES
# =============================================================================


class BezoutTriple(NamedTuple):
    """Результат расширенного алгоритма Евклида: a*s + b*t = g."""

    g: int  # gcd(|a|, |b|), всегда >= 0
    s: int  # коэффициент Безу при a
    t: int  # коэффициент Безу при b


@dataclass(frozen=True)
class ModularInverse:
    """
    Результат mod_inv: либо обратный элемент, либо отказ (not coprime).

    - value: обратный элемент в [0, m) или None при отказе
    - gcd: gcd(a, m) (равен 1 при успехе)
    """

    a: int
    m: int
    value: Optional[int]
    gcd: int

    @property
    def ok(self) -> bool:
        return self.value is not None

    @property
    def error(self) -> Optional[NotCoprimeError]:
        """NotCoprimeError для отказа, None для успеха."""
        if self.ok:
            return None
        return NotCoprimeError(self.a, self.m, self.gcd)

    def unwrap(self) -> int:
        """
        Извлечение обратного элемента.

        Raises:
            NotCoprimeError: Если обратного элемента не существует
        """
        if self.value is None:
            raise self.error
        return self.value


# =============================================================================
# EXTENDED EUCLID
# =============================================================================


def egcd(a: int, b: int) -> BezoutTriple:
    """
    Расширенный алгоритм Евклида (итеративный).

    Работает на |a|, |b|; знаки коэффициентов корректируются так, чтобы
    a * s + b * t == g выполнялось для исходных a, b.

    Args:
        a: Exact integer
        b: Exact integer

    Returns:
        BezoutTriple(g, s, t)

    Raises:
        ExactIntegerRequired: Если a или b не int

    Examples:
        >>> egcd(240, 46)
        BezoutTriple(g=2, s=-9, t=47)
        >>> egcd(0, 0)
        BezoutTriple(g=0, s=0, t=0)
    """
    require_exact_integer(a, "a")
    require_exact_integer(b, "b")

    r_prev, r_cur = abs(a), abs(b)
    s_prev, s_cur = 1, 0
    t_prev, t_cur = 0, 1

    while r_cur != 0:
        q = r_prev // r_cur
        r_prev, r_cur = r_cur, r_prev - q * r_cur
        s_prev, s_cur = s_cur, s_prev - q * s_cur
        t_prev, t_cur = t_cur, t_prev - q * t_cur

    if r_prev == 0:
        # a == b == 0: любые коэффициенты дают 0, выбираем нулевые
        return BezoutTriple(0, 0, 0)

    # Коэффициенты найдены для |a|, |b|: возвращаем знаки
    s = s_prev if a >= 0 else -s_prev
    t = t_prev if b >= 0 else -t_prev

    return BezoutTriple(r_prev, s, t)


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель, всегда неотрицательный.

    Examples:
        >>> gcd(12, -18)
        6
        >>> gcd(0, 0)
        0
    """
    return egcd(a, b).g


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное, всегда неотрицательное.

    lcm(0, 0) = 0; иначе |a * b| // gcd(a, b).

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-4, 6)
        12
    """
    require_exact_integer(a, "a")
    require_exact_integer(b, "b")

    if a == 0 and b == 0:
        return 0

    return abs(a * b) // gcd(a, b)


# =============================================================================
# MODULAR INVERSE
# =============================================================================


def mod_inv(a: int, m: int) -> ModularInverse:
    """
    Обратный элемент a по модулю m.

    Использует коэффициент Безу s из egcd(a, m): a*s ≡ 1 (mod m),
    результат нормализуется в [0, m).

    Отсутствие обратного элемента (gcd(a, m) != 1) НЕ является исключением:
    возвращается ModularInverse с value=None. Для исключения используйте
    mod_inv_or_raise или ModularInverse.unwrap().

    Args:
        a: Exact integer
        m: Модуль, exact integer >= 1

    Returns:
        ModularInverse

    Raises:
        ExactIntegerRequired: Если a или m не int
        MathDomainError: Если m < 1

    Examples:
        >>> mod_inv(3, 11).value
        4
        >>> mod_inv(123, 456).ok
        False
    """
    require_exact_integer(a, "a")
    require_exact_integer(m, "m")

    if m < 1:
        raise MathDomainError(f"modulus must be >= 1, got {m}")

    g, s, _ = egcd(a, m)

    if g != 1:
        log_with_data(
            logger, logging.DEBUG, "no modular inverse", {"a": a, "m": m, "gcd": g}
        )
        return ModularInverse(a=a, m=m, value=None, gcd=g)

    return ModularInverse(a=a, m=m, value=s % m, gcd=g)


def mod_inv_or_raise(a: int, m: int) -> int:
    """
    Обратный элемент a по модулю m (вариант с исключением).

    Raises:
        NotCoprimeError: Если gcd(a, m) != 1
        ExactIntegerRequired: Если a или m не int
        MathDomainError: Если m < 1

    Examples:
        >>> mod_inv_or_raise(3, 11)
        4
    """
    return mod_inv(a, m).unwrap()
