"""
safecalc — безопасный вычислитель арифметических выражений.

Принимает строку из цифр, операторов + - * / %, скобок и десятичных точек
и возвращает отображаемый результат или sentinel "Err". Не использует
механизмы исполнения кода: разбор выполняется рекурсивным спуском по
фиксированной грамматике.
"""

from safecalc.core.errors import (
    DivisionByZero,
    ErrorKind,
    EvaluationError,
    ExpressionSyntaxError,
    InvalidCharacter,
    MalformedSequence,
    NonFiniteResult,
    UnbalancedParentheses,
    ValidationError,
)
from safecalc.evaluator import (
    EvaluatorConfig,
    ExpressionEvaluator,
    compute,
    evaluate_detailed,
    export,
    normalize_percent,
)
from safecalc.gatekeeper import validate

__all__ = [
    # Errors
    "ErrorKind",
    "EvaluationError",
    "ValidationError",
    "InvalidCharacter",
    "MalformedSequence",
    "UnbalancedParentheses",
    "ExpressionSyntaxError",
    "DivisionByZero",
    "NonFiniteResult",
    # Evaluator
    "EvaluatorConfig",
    "ExpressionEvaluator",
    "compute",
    "evaluate_detailed",
    "export",
    "normalize_percent",
    "validate",
]
