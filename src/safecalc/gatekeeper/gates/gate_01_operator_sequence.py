"""GATE 1: Последовательности операторов

Блокирует серию из двух и более символов {+, -, *, /, .} подряд:
"5++3", "5..3", "2*-3", "5.+3".

Whitespace разрывает серию: "5 - -3" проходит gate и разбирается
грамматикой как 5 - (-3).
"""

import re
from dataclasses import dataclass
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

SEQUENCE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+\-*/.]{2,}")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    passed: bool
    block_reason: str

    # Найденная серия и её позиция
    sequence: str | None
    sequence_position: int | None

    details: str


# =============================================================================
# GATE 1
# =============================================================================


class Gate01OperatorSequence:
    """GATE 1: запрет серий операторов и десятичных точек."""

    def evaluate(self, expression: str) -> Gate01Result:
        match = SEQUENCE_PATTERN.search(expression)
        if match is None:
            return Gate01Result(
                passed=True,
                block_reason="",
                sequence=None,
                sequence_position=None,
                details="PASS",
            )

        return Gate01Result(
            passed=False,
            block_reason="malformed_sequence",
            sequence=match.group(0),
            sequence_position=match.start(),
            details=f"sequence {match.group(0)!r} at position {match.start()}",
        )
