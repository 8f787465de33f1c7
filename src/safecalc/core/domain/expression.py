"""
Expression — Модели выражения на стадиях конвейера

Immutable Pydantic модели, представляющие выражение после нормализации
процентов и после структурной валидации. Живут в пределах одного вызова.
"""

import re
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# CONSTANTS
# =============================================================================

# Десятичное число, непосредственно за которым следует '%': "50%", "3.5%"
PERCENT_LITERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\d+(?:\.\d+)?)%")

# Символы, допустимые во входной строке (плюс whitespace)
ALLOWED_CHARACTERS: Final[frozenset[str]] = frozenset("0123456789+-*/%().")

# =============================================================================
# MODELS
# =============================================================================


class NormalizedExpression(BaseModel):
    """
    Выражение после переписывания процентов.

    Инвариант: не содержит процентного литерала вида "N%" или "N.M%".
    Остаточный '%' (например, в "(5/100)%") допустим и отсекается парсером.
    """

    text: str = Field(..., description="Текст после замены N% -> (N/100)")

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def validate_no_percent_literal(cls, v: str) -> str:
        """Проверка, что все процентные литералы переписаны"""
        match = PERCENT_LITERAL_PATTERN.search(v)
        if match:
            raise ValueError(f"percent literal {match.group(0)!r} was not rewritten")
        return v


class ValidatedExpression(BaseModel):
    """
    Выражение, прошедшее allowlist, проверку последовательностей
    и баланс скобок.

    Достаточно корректно для попытки разбора, но не гарантирует
    отсутствия деления на ноль или некорректных литералов.
    """

    text: str = Field(..., description="Провалидированный текст выражения")
    max_depth: int = Field(
        ..., ge=0, description="Максимальная глубина вложенности скобок"
    )

    model_config = {"frozen": True}
