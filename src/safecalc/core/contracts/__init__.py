"""
Contract Validation Module

Контракт сериализованного результата вычисления.
"""

from .validators import RESULT_SCHEMA_NAME, load_schema, validate_evaluation_result

__all__ = [
    "RESULT_SCHEMA_NAME",
    "load_schema",
    "validate_evaluation_result",
]
