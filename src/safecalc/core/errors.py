"""
Errors — Таксономия ошибок вычисления выражений

Все ошибки конвейера наследуются от EvaluationError и несут ErrorKind.
Для вызывающей стороны они схлопываются в единый sentinel "Err",
но внутри различимы для диагностики и тестов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая стадия падает сразу (fail fast), без попыток восстановления
2. Ловить ошибки разрешено только оркестратору (ExpressionEvaluator)
"""

from enum import Enum


# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки вычисления"""

    INVALID_CHARACTER = "InvalidCharacter"
    MALFORMED_SEQUENCE = "MalformedSequence"
    UNBALANCED_PARENTHESES = "UnbalancedParentheses"
    SYNTAX_ERROR = "SyntaxError"
    DIVISION_BY_ZERO = "DivisionByZero"
    NON_FINITE_RESULT = "NonFiniteResult"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EvaluationError(Exception):
    """
    Базовая ошибка конвейера вычисления.

    Attributes:
        kind: вид ошибки (ErrorKind)
        position: позиция во входной строке, если известна
    """

    kind: ErrorKind = ErrorKind.SYNTAX_ERROR

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class ValidationError(EvaluationError):
    """Ошибка структурной валидации (до разбора)."""


class InvalidCharacter(ValidationError):
    """Символ вне allowlist после нормализации процентов."""

    kind = ErrorKind.INVALID_CHARACTER


class MalformedSequence(ValidationError):
    """Два и более символа из {+, -, *, /, .} подряд."""

    kind = ErrorKind.MALFORMED_SEQUENCE


class UnbalancedParentheses(ValidationError):
    """Глубина скобок уходит в минус или не возвращается к нулю."""

    kind = ErrorKind.UNBALANCED_PARENTHESES


class ExpressionSyntaxError(EvaluationError):
    """Строка прошла структурные проверки, но не разбирается грамматикой."""

    kind = ErrorKind.SYNTAX_ERROR


class DivisionByZero(EvaluationError):
    kind = ErrorKind.DIVISION_BY_ZERO


class NonFiniteResult(EvaluationError):
    """Результат NaN или ±Inf."""

    kind = ErrorKind.NON_FINITE_RESULT
