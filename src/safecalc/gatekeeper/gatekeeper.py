"""Gatekeeper — упорядоченный прогон гейтов структурной валидации.

Гейты выполняются в фиксированном порядке, первый заблокированный
гейт прерывает валидацию:
1. GATE 0: Allowlist символов -> InvalidCharacter
2. GATE 1: Последовательности операторов -> MalformedSequence
3. GATE 2: Баланс скобок -> UnbalancedParentheses
"""

from safecalc.core.domain.expression import NormalizedExpression, ValidatedExpression
from safecalc.core.errors import InvalidCharacter, MalformedSequence, UnbalancedParentheses
from safecalc.gatekeeper.gates import (
    Gate00Allowlist,
    Gate01OperatorSequence,
    Gate02ParenthesisBalance,
)


class Gatekeeper:
    """Структурная валидация нормализованного выражения."""

    def __init__(self):
        self.gate00 = Gate00Allowlist()
        self.gate01 = Gate01OperatorSequence()
        self.gate02 = Gate02ParenthesisBalance()

    def validate(self, expression: NormalizedExpression | str) -> ValidatedExpression:
        """Прогон GATE 0-2.

        Args:
            expression: нормализованное выражение (модель или строка)

        Returns:
            ValidatedExpression, если все гейты пройдены

        Raises:
            InvalidCharacter: GATE 0 заблокировал
            MalformedSequence: GATE 1 заблокировал
            UnbalancedParentheses: GATE 2 заблокировал
        """
        text = expression.text if isinstance(expression, NormalizedExpression) else expression

        gate00_result = self.gate00.evaluate(text)
        if not gate00_result.passed:
            raise InvalidCharacter(gate00_result.details, gate00_result.offending_position)

        gate01_result = self.gate01.evaluate(text)
        if not gate01_result.passed:
            raise MalformedSequence(gate01_result.details, gate01_result.sequence_position)

        gate02_result = self.gate02.evaluate(text)
        if not gate02_result.passed:
            raise UnbalancedParentheses(gate02_result.details, gate02_result.failure_position)

        return ValidatedExpression(text=text, max_depth=gate02_result.max_depth)


def validate(expression: NormalizedExpression | str) -> ValidatedExpression:
    """Валидация выражения гейтами по умолчанию."""
    return Gatekeeper().validate(expression)
