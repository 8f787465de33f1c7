"""Evaluator — нормализация, разбор и вычисление выражений."""

from .evaluator import (
    DEFAULT_EVALUATOR,
    EvaluatorConfig,
    ExpressionEvaluator,
    compute,
    evaluate_detailed,
    export,
)
from .parser import DEFAULT_MAX_DEPTH, Parser, Token, parse_and_compute, tokenize
from .percent import normalize, normalize_percent

__all__ = [
    "DEFAULT_EVALUATOR",
    "EvaluatorConfig",
    "ExpressionEvaluator",
    "compute",
    "evaluate_detailed",
    "export",
    "DEFAULT_MAX_DEPTH",
    "Parser",
    "Token",
    "parse_and_compute",
    "tokenize",
    "normalize",
    "normalize_percent",
]
