"""
Domain models and value objects.

Contains the transient per-evaluation entities: normalized and validated
expressions and the evaluation result.
"""

from safecalc.core.domain.expression import (
    ALLOWED_CHARACTERS,
    PERCENT_LITERAL_PATTERN,
    NormalizedExpression,
    ValidatedExpression,
)
from safecalc.core.domain.result import EvaluationResult

__all__ = [
    # Expression module
    "ALLOWED_CHARACTERS",
    "PERCENT_LITERAL_PATTERN",
    "NormalizedExpression",
    "ValidatedExpression",
    # Result model
    "EvaluationResult",
]
