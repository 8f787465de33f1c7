"""GATE 0: Allowlist символов

Проверяет, что каждый символ выражения входит в allowlist:
цифры, + - * / % ( ) . и whitespace.

Символ '%' остаётся в allowlist: после нормализации процентов он может
встретиться только как остаток (например, "(5/100)%") и отсекается парсером.
"""

from dataclasses import dataclass

from safecalc.core.domain.expression import ALLOWED_CHARACTERS


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    passed: bool
    block_reason: str

    # Первый недопустимый символ и его позиция
    offending_char: str | None
    offending_position: int | None

    details: str


# =============================================================================
# GATE 0
# =============================================================================


class Gate00Allowlist:
    """GATE 0: Allowlist символов.

    Первый недопустимый символ блокирует выражение.
    """

    def evaluate(self, expression: str) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            expression: нормализованное выражение

        Returns:
            Gate00Result с решением о допуске
        """
        for position, char in enumerate(expression):
            if char in ALLOWED_CHARACTERS or char.isspace():
                continue
            return Gate00Result(
                passed=False,
                block_reason="invalid_character",
                offending_char=char,
                offending_position=position,
                details=f"character {char!r} at position {position} is not allowed",
            )

        return Gate00Result(
            passed=True,
            block_reason="",
            offending_char=None,
            offending_position=None,
            details="PASS",
        )
