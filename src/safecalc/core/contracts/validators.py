"""
Result Contract — JSON Schema сериализованного EvaluationResult

Результат вычисления экспортируется вызывающей стороне как dict
(EvaluationResult.to_contract) и проверяется против evaluation_result.json:
- ровно одно из value/error заполнено
- error принимает только значения ErrorKind
- лишние поля запрещены

Схема загружается из пакета один раз и проходит meta-validation.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

RESULT_SCHEMA_NAME: Final[str] = "evaluation_result"


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    """
    Загрузка схемы из schema/ с проверкой по Draft 2020-12.

    Raises:
        FileNotFoundError: схема не найдена
        jsonschema.SchemaError: файл не является корректной схемой
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return schema


@lru_cache(maxsize=1)
def _result_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(RESULT_SCHEMA_NAME))


def validate_evaluation_result(data: dict[str, Any]) -> None:
    """
    Проверка сериализованного результата.

    Args:
        data: обычно result.model_dump(mode="json")

    Raises:
        jsonschema.ValidationError: данные не соответствуют контракту
    """
    _result_validator().validate(data)
