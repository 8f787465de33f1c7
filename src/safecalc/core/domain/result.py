"""
EvaluationResult — Модель результата вычисления

Immutable Pydantic модель: либо конечное значение, округлённое до
фиксированного числа знаков, либо вид ошибки. Совместима с JSON Schema
evaluation_result.json.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from safecalc.core.contracts import validate_evaluation_result
from safecalc.core.errors import ErrorKind


class EvaluationResult(BaseModel):
    """
    Результат одного вызова вычисления.

    Ровно одно из полей value/error заполнено.
    """

    expression: str = Field(..., description="Исходный ввод пользователя")
    display: str = Field(..., min_length=1, description="Текст для отображения")
    value: Optional[float] = Field(None, description="Округлённое значение (если успех)")
    error: Optional[ErrorKind] = Field(None, description="Вид ошибки (если неуспех)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_value_xor_error(self) -> "EvaluationResult":
        """Проверка, что заполнено ровно одно из value/error"""
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value/error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация для вызывающей стороны.

        Returns:
            dict, прошедший проверку по evaluation_result.json

        Raises:
            jsonschema.ValidationError: сериализация нарушает контракт
        """
        data = self.model_dump(mode="json")
        validate_evaluation_result(data)
        return data
