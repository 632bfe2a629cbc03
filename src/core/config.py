"""
Config — Параметры библиотеки numkit

Единая точка для численных параметров, которые используют движки:
- epsilon для приближённого сравнения float
- размер предвычисленной таблицы факториалов
- количество корзин гистограммы по умолчанию

Конфигурация immutable (frozen dataclass) и создаётся один раз при импорте.
"""

from dataclasses import dataclass
from typing import Final

# Значения по умолчанию
DEFAULT_EPSILON: Final[float] = 1e-15
DEFAULT_FACTORIAL_TABLE_SIZE: Final[int] = 1000
DEFAULT_HISTOGRAM_BUCKET_COUNT: Final[int] = 10


@dataclass(frozen=True)
class MathConfig:
    """Конфигурация численных движков.

    - epsilon: порог относительной/абсолютной разницы для nearly_equal
    - factorial_table_size: максимальное n, для которого n! лежит в таблице
    - histogram_bucket_count: количество корзин гистограммы по умолчанию
    """

    epsilon: float = DEFAULT_EPSILON
    factorial_table_size: int = DEFAULT_FACTORIAL_TABLE_SIZE
    histogram_bucket_count: int = DEFAULT_HISTOGRAM_BUCKET_COUNT

    def __post_init__(self) -> None:
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")

        if self.factorial_table_size < 0:
            raise ValueError(
                f"factorial_table_size must be non-negative, got {self.factorial_table_size}"
            )

        if self.histogram_bucket_count < 1:
            raise ValueError(
                f"histogram_bucket_count must be >= 1, got {self.histogram_bucket_count}"
            )


# Глобальная конфигурация (read-only)
DEFAULT_CONFIG: Final[MathConfig] = MathConfig()
