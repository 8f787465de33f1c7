"""Keypad Buffer — буфер выражения, которым владеет вызывающая сторона.

Неизменяемый буфер, переходы которого описываются нажатиями клавиш:
- "C": очистить
- "⌫": удалить последний символ
- "=": вычислить; при успехе выражение заменяется результатом
- любой другой токен дописывается в конец

После каждого перехода display = compute(новое выражение).
Буфер передаётся в вычислитель по значению, вычислитель его не хранит.
"""

from dataclasses import dataclass
from typing import Final

from safecalc.evaluator.evaluator import DEFAULT_EVALUATOR, ExpressionEvaluator

# =============================================================================
# KEYS
# =============================================================================

KEY_CLEAR: Final[str] = "C"
KEY_BACKSPACE: Final[str] = "⌫"
KEY_EQUALS: Final[str] = "="

# Клавиатурные алиасы -> токены
KEYBOARD_ALIASES: Final[dict[str, str]] = {
    "Enter": KEY_EQUALS,
    "=": KEY_EQUALS,
    "Backspace": KEY_BACKSPACE,
    "Delete": KEY_CLEAR,
    "c": KEY_CLEAR,
}

# Символы, которые дописываются в буфер как есть
KEYBOARD_PASSTHROUGH: Final[frozenset[str]] = frozenset("0123456789+-*/().%")


def map_keyboard_key(key: str) -> str | None:
    """Клавиша клавиатуры -> токен буфера (None: игнорировать).

    Examples:
        >>> map_keyboard_key("Enter")
        '='
        >>> map_keyboard_key("7")
        '7'
        >>> map_keyboard_key("x") is None
        True
    """
    if key in KEYBOARD_ALIASES:
        return KEYBOARD_ALIASES[key]
    if key in KEYBOARD_PASSTHROUGH:
        return key
    return None


# =============================================================================
# BUFFER
# =============================================================================


@dataclass(frozen=True)
class KeypadTransition:
    """Результат нажатия клавиши."""

    buffer: "KeypadBuffer"
    display: str

    # True если "=" заменил выражение результатом
    committed: bool


@dataclass(frozen=True)
class KeypadBuffer:
    """Текущее выражение, набранное пользователем."""

    expression: str = ""

    def press(self, token: str, evaluator: ExpressionEvaluator | None = None) -> KeypadTransition:
        """Применение токена к буферу.

        Args:
            token: "C", "⌫", "=" или дописываемый фрагмент
            evaluator: вычислитель (по умолчанию DEFAULT_EVALUATOR)

        Returns:
            KeypadTransition с новым буфером и текстом для отображения
        """
        evaluator = evaluator or DEFAULT_EVALUATOR

        if token == KEY_CLEAR:
            expression = ""
        elif token == KEY_BACKSPACE:
            expression = self.expression[:-1]
        elif token == KEY_EQUALS:
            result = evaluator.evaluate_detailed(self.expression)
            if result.ok:
                expression = result.display
                return KeypadTransition(
                    buffer=KeypadBuffer(expression),
                    display=evaluator.compute(expression),
                    committed=True,
                )
            expression = self.expression
        else:
            expression = self.expression + token

        return KeypadTransition(
            buffer=KeypadBuffer(expression),
            display=evaluator.compute(expression),
            committed=False,
        )
