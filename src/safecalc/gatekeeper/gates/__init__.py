"""Gates — индивидуальные гейты структурной валидации.

- GATE 0: Allowlist символов
- GATE 1: Последовательности операторов
- GATE 2: Баланс скобок
"""

from .gate_00_allowlist import Gate00Allowlist, Gate00Result
from .gate_01_operator_sequence import Gate01OperatorSequence, Gate01Result
from .gate_02_parenthesis_balance import Gate02ParenthesisBalance, Gate02Result

__all__ = [
    "Gate00Allowlist",
    "Gate00Result",
    "Gate01OperatorSequence",
    "Gate01Result",
    "Gate02ParenthesisBalance",
    "Gate02Result",
]
