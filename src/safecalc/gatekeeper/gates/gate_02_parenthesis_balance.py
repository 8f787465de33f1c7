"""GATE 2: Баланс скобок

Отслеживает глубину вложенности слева направо:
- глубина никогда не уходит в минус (")(" блокируется на первой ')')
- в конце глубина ровно 0
"""

from dataclasses import dataclass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Gate02Result:
    """Результат GATE 2."""

    passed: bool
    block_reason: str

    # Метрики вложенности
    final_depth: int
    max_depth: int
    failure_position: int | None

    details: str


# =============================================================================
# GATE 2
# =============================================================================


class Gate02ParenthesisBalance:
    """GATE 2: баланс скобок.

    Порядок проверок:
    1. Глубина < 0 в любой позиции -> block (позиция лишней ')')
    2. Глубина != 0 в конце -> block (позиция конца строки)
    """

    def evaluate(self, expression: str) -> Gate02Result:
        depth = 0
        max_depth = 0

        for position, char in enumerate(expression):
            if char == "(":
                depth += 1
                max_depth = max(max_depth, depth)
            elif char == ")":
                depth -= 1
                if depth < 0:
                    return Gate02Result(
                        passed=False,
                        block_reason="unbalanced_parentheses",
                        final_depth=depth,
                        max_depth=max_depth,
                        failure_position=position,
                        details=f"unmatched ')' at position {position}",
                    )

        if depth != 0:
            return Gate02Result(
                passed=False,
                block_reason="unbalanced_parentheses",
                final_depth=depth,
                max_depth=max_depth,
                failure_position=len(expression),
                details=f"{depth} unclosed '(' at end of expression",
            )

        return Gate02Result(
            passed=True,
            block_reason="",
            final_depth=0,
            max_depth=max_depth,
            failure_position=None,
            details="PASS",
        )
