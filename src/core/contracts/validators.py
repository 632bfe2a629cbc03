"""
JSON Schema Contract Validators

Модуль для валидации экспортируемых результатов согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- histogram.json: гистограмма (список корзин)
- sequence_summary.json: сводные статистики последовательности
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Dict, Final, NamedTuple

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.histogram import HistogramBucket

# Версия контрактов, которую пишут payload-функции
SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'histogram')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class HistogramValidator(ContractValidator):
    """Валидатор для histogram контракта."""

    def __init__(self):
        super().__init__("histogram")


class SequenceSummaryValidator(ContractValidator):
    """Валидатор для sequence_summary контракта."""

    def __init__(self):
        super().__init__("sequence_summary")


# =============================================================================
# PAYLOADS
# =============================================================================


def histogram_to_payload(
    buckets: Sequence[HistogramBucket], bucket_count: int
) -> Dict[str, Any]:
    """
    JSON-документ гистограммы (dict, готовый к json.dumps).

    Args:
        buckets: Результат histogram()
        bucket_count: Количество корзин, с которым строилась гистограмма
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "bucket_count": bucket_count,
        "total_count": sum(bucket.count for bucket in buckets),
        "buckets": [bucket.model_dump() for bucket in buckets],
    }


def summary_to_payload(summary: NamedTuple) -> Dict[str, Any]:
    """JSON-документ сводных статистик (результат describe())."""
    return {"schema_version": SCHEMA_VERSION, **summary._asdict()}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_histogram(data: Dict[str, Any]) -> None:
    """
    Валидация histogram данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    HistogramValidator().validate(data)


def validate_sequence_summary(data: Dict[str, Any]) -> None:
    """
    Валидация sequence_summary данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    SequenceSummaryValidator().validate(data)
