"""ExpressionEvaluator — конвейер безопасного вычисления выражения.

Конвейер (строго линейный, без состояния между вызовами):
    raw -> normalize_percent -> validate (GATE 0-2) -> evaluate -> format

Любая ошибка на любой стадии схлопывается в sentinel "Err".
Пустой или whitespace-only ввод даёт "0" и не доходит до валидации.
"""

import logging
from dataclasses import dataclass

from safecalc.core.domain.expression import NormalizedExpression, ValidatedExpression
from safecalc.core.domain.result import EvaluationResult
from safecalc.core.errors import EvaluationError, ExpressionSyntaxError, NonFiniteResult
from safecalc.core.math.numerical_safeguards import (
    DISPLAY_DECIMAL_PLACES,
    format_fixed,
    is_valid_float,
    round_half_away_from_zero,
    validate_places,
)
from safecalc.evaluator.parser import DEFAULT_MAX_DEPTH, parse_and_compute
from safecalc.evaluator.percent import normalize
from safecalc.gatekeeper import Gatekeeper

log = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация вычислителя."""

    # Знаков после точки в результате
    decimal_places: int = DISPLAY_DECIMAL_PLACES

    # Максимальная вложенность скобок
    max_depth: int = DEFAULT_MAX_DEPTH

    error_sentinel: str = "Err"
    empty_result: str = "0"

    def __post_init__(self):
        validate_places(self.decimal_places)

        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

        if not self.error_sentinel or not self.empty_result:
            raise ValueError("error_sentinel and empty_result must be non-empty")


# =============================================================================
# EVALUATOR
# =============================================================================


class ExpressionEvaluator:
    """Безопасный вычислитель арифметических выражений.

    Не хранит состояния между вызовами: один экземпляр можно
    использовать из любого количества вызывающих.
    """

    def __init__(self, config: EvaluatorConfig | None = None):
        self.config = config or EvaluatorConfig()
        self.gatekeeper = Gatekeeper()

    def normalize(self, expression: str) -> NormalizedExpression:
        """Переписывание процентных литералов: "50%" -> "(50/100)"."""
        return normalize(expression)

    def validate(self, expression: NormalizedExpression | str) -> ValidatedExpression:
        """Структурная валидация (GATE 0-2).

        Raises:
            InvalidCharacter, MalformedSequence, UnbalancedParentheses
        """
        return self.gatekeeper.validate(expression)

    def evaluate(self, validated: ValidatedExpression) -> float:
        """Вычисление провалидированного выражения.

        Returns:
            Конечное значение, округлённое до decimal_places (half away from zero)

        Raises:
            ExpressionSyntaxError: выражение не разбирается грамматикой
            DivisionByZero: деление на ноль
            NonFiniteResult: результат NaN/Inf
        """
        if validated.max_depth > self.config.max_depth:
            raise ExpressionSyntaxError(
                f"nesting depth {validated.max_depth} exceeds {self.config.max_depth}"
            )

        try:
            value = parse_and_compute(validated.text, max_depth=self.config.max_depth)
        except RecursionError:
            raise ExpressionSyntaxError("expression nested too deeply")
        except OverflowError as e:
            raise NonFiniteResult(f"overflow: {e}")

        if not is_valid_float(value):
            raise NonFiniteResult(f"result is not finite: {value}")

        # + 0.0 превращает -0.0 в 0.0
        return round_half_away_from_zero(value, self.config.decimal_places) + 0.0

    def evaluate_detailed(self, expression: str) -> EvaluationResult:
        """Полный конвейер с диагностикой.

        Args:
            expression: сырой ввод пользователя

        Returns:
            EvaluationResult: значение и текст либо вид ошибки и sentinel
        """
        if not expression.strip():
            return EvaluationResult(
                expression=expression, display=self.config.empty_result, value=0.0
            )

        try:
            normalized = self.normalize(expression)
            validated = self.validate(normalized)
            value = self.evaluate(validated)
        except EvaluationError as e:
            log.debug("rejected %r: %s (%s)", expression, e.kind.value, e)
            return EvaluationResult(
                expression=expression, display=self.config.error_sentinel, error=e.kind
            )

        return EvaluationResult(
            expression=expression,
            display=format_fixed(value, self.config.decimal_places),
            value=value,
        )

    def compute(self, expression: str) -> str:
        """Текст для отображения: число или sentinel "Err".

        Examples:
            >>> ExpressionEvaluator().compute("2+3*4")
            '14'
            >>> ExpressionEvaluator().compute("5/0")
            'Err'
        """
        return self.evaluate_detailed(expression).display


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

DEFAULT_EVALUATOR = ExpressionEvaluator()


def compute(expression: str) -> str:
    return DEFAULT_EVALUATOR.compute(expression)


def evaluate_detailed(expression: str) -> EvaluationResult:
    return DEFAULT_EVALUATOR.evaluate_detailed(expression)


def export(expression: str) -> dict:
    """Результат вычисления в виде контракта evaluation_result.json."""
    return DEFAULT_EVALUATOR.evaluate_detailed(expression).to_contract()
