"""
Core math modules для numkit

Математические примитивы: скалярные функции, точная целочисленная арифметика,
комбинаторика и интерполяция.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    MAX_FLOAT,
    # Exceptions
    ExactIntegerRequired,
    MathDomainError,
    # Float comparator
    nearly_equal,
    # Type checks
    is_exact_integer,
    is_valid_float,
    require_exact_integer,
    require_non_negative_integer,
    # Utilities
    clamp,
)

# Elementary functions
from src.core.math.elementary import (
    E,
    PI,
    RAD_IN_DEG,
    TAU,
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cos,
    cosh,
    deg2rad,
    exp,
    log,
    log10,
    log2,
    rad2deg,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

# Powers & roots
from src.core.math.powers import isqrt, nth_root, power

# Number theory
from src.core.math.number_theory import (
    BezoutTriple,
    ModularInverse,
    NotCoprimeError,
    egcd,
    gcd,
    lcm,
    mod_inv,
    mod_inv_or_raise,
)

# Combinatorics
from src.core.math.combinatorics import (
    FactorialTable,
    factorial,
    k_combinations,
    k_permutations,
)

# Interpolation
from src.core.math.interpolation import bezier_curve, linear_interpolation

__all__ = [
    # Numerical Safeguards: Constants
    "EPSILON",
    "MAX_FLOAT",
    # Numerical Safeguards: Exceptions
    "ExactIntegerRequired",
    "MathDomainError",
    # Numerical Safeguards: Functions
    "nearly_equal",
    "is_exact_integer",
    "is_valid_float",
    "require_exact_integer",
    "require_non_negative_integer",
    "clamp",
    # Elementary: Constants
    "E",
    "PI",
    "RAD_IN_DEG",
    "TAU",
    # Elementary: Functions
    "acos",
    "acosh",
    "asin",
    "asinh",
    "atan",
    "atan2",
    "atanh",
    "cos",
    "cosh",
    "deg2rad",
    "exp",
    "log",
    "log10",
    "log2",
    "rad2deg",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
    # Powers
    "isqrt",
    "nth_root",
    "power",
    # Number theory: Types
    "BezoutTriple",
    "ModularInverse",
    # Number theory: Exceptions
    "NotCoprimeError",
    # Number theory: Functions
    "egcd",
    "gcd",
    "lcm",
    "mod_inv",
    "mod_inv_or_raise",
    # Combinatorics
    "FactorialTable",
    "factorial",
    "k_combinations",
    "k_permutations",
    # Interpolation
    "bezier_curve",
    "linear_interpolation",
]
