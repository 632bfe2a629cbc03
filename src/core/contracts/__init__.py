"""
Contract Validation Module

Модуль для валидации JSON контрактов экспортируемых результатов numkit.
"""

from .validators import (
    SCHEMA_VERSION,
    ContractValidator,
    HistogramValidator,
    SchemaLoader,
    SequenceSummaryValidator,
    histogram_to_payload,
    summary_to_payload,
    validate_histogram,
    validate_sequence_summary,
)

__all__ = [
    # Constants
    "SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "HistogramValidator",
    "SequenceSummaryValidator",
    # Functions
    "histogram_to_payload",
    "summary_to_payload",
    "validate_histogram",
    "validate_sequence_summary",
]
