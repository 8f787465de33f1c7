"""Parser — рекурсивный спуск по фиксированной арифметической грамматике.

Грамматика:
    expr    := term (('+' | '-') term)*
    term    := factor (('*' | '/') factor)*
    factor  := '-'? (number | '(' expr ')')
    number  := digits ('.' digits)?

Вычисление выполняется прямо во время разбора (без AST), в float.
Никакие механизмы исполнения кода Python не используются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Левая ассоциативность внутри одного приоритета
2. Деление на ноль -> DivisionByZero (а не inf)
3. Глубина вложенности скобок ограничена max_depth -> ExpressionSyntaxError
4. Любой токен вне грамматики ('%', одиночная '.', "3.4.5") -> ExpressionSyntaxError
"""

import re
from typing import Final, NamedTuple

from safecalc.core.errors import DivisionByZero, ExpressionSyntaxError

# =============================================================================
# CONSTANTS
# =============================================================================

# Глубина вложенности скобок по умолчанию
DEFAULT_MAX_DEPTH: Final[int] = 64

TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<number>\d+(?:\.\d+)?)|(?P<op>[-+*/()])|(?P<skip>\s+)|(?P<mismatch>.)",
    re.DOTALL,
)


# =============================================================================
# TOKENIZER
# =============================================================================


class Token(NamedTuple):
    """Токен выражения."""

    kind: str  # "number" | "op"
    text: str
    position: int


def tokenize(expression: str) -> list[Token]:
    """Разбиение выражения на токены.

    Raises:
        ExpressionSyntaxError: символ или литерал вне грамматики
    """
    tokens = []
    for match in TOKEN_PATTERN.finditer(expression):
        kind = match.lastgroup
        if kind == "skip":
            continue
        if kind == "mismatch":
            raise ExpressionSyntaxError(
                f"unexpected {match.group(0)!r} at position {match.start()}", match.start()
            )
        tokens.append(Token(kind, match.group(0), match.start()))
    return tokens


# =============================================================================
# PARSER
# =============================================================================


class Parser:
    """Рекурсивный спуск с вычислением на лету.

    Экземпляр одноразовый: один Parser на одно выражение.
    """

    def __init__(self, expression: str, max_depth: int = DEFAULT_MAX_DEPTH):
        self.expression = expression
        self.tokens = tokenize(expression)
        self.index = 0
        self.depth = 0
        self.max_depth = max_depth

    def parse(self) -> float:
        """Разбор и вычисление всего выражения.

        Returns:
            Значение выражения (может быть NaN/Inf, проверяет вызывающий)

        Raises:
            ExpressionSyntaxError: выражение не соответствует грамматике
            DivisionByZero: делитель равен нулю
        """
        if not self.tokens:
            raise ExpressionSyntaxError("empty expression", 0)

        value = self._parse_expr()

        token = self._peek()
        if token is not None:
            raise ExpressionSyntaxError(
                f"unexpected {token.text!r} at position {token.position}", token.position
            )
        return value

    # -------------------------------------------------------------------------
    # Grammar rules
    # -------------------------------------------------------------------------

    def _parse_expr(self) -> float:
        left = self._parse_term()
        while self._peek_op("+", "-"):
            op = self._advance().text
            right = self._parse_term()
            if op == "+":
                left = left + right
            else:
                left = left - right
        return left

    def _parse_term(self) -> float:
        left = self._parse_factor()
        while self._peek_op("*", "/"):
            op_token = self._advance()
            right = self._parse_factor()
            if op_token.text == "*":
                left = left * right
            else:
                if right == 0:
                    raise DivisionByZero(
                        f"division by zero at position {op_token.position}", op_token.position
                    )
                left = left / right
        return left

    def _parse_factor(self) -> float:
        negate = False
        if self._peek_op("-"):
            self._advance()
            negate = True

        token = self._peek()
        if token is None:
            raise ExpressionSyntaxError("unexpected end of expression", len(self.expression))

        if token.kind == "number":
            self._advance()
            value = float(token.text)
        elif token.text == "(":
            value = self._parse_group()
        else:
            raise ExpressionSyntaxError(
                f"unexpected {token.text!r} at position {token.position}", token.position
            )

        return -value if negate else value

    def _parse_group(self) -> float:
        opening = self._advance()
        self.depth += 1
        if self.depth > self.max_depth:
            raise ExpressionSyntaxError(
                f"nesting deeper than {self.max_depth} at position {opening.position}",
                opening.position,
            )

        value = self._parse_expr()

        closing = self._peek()
        if closing is None or closing.text != ")":
            position = closing.position if closing is not None else len(self.expression)
            raise ExpressionSyntaxError(f"expected ')' at position {position}", position)
        self._advance()
        self.depth -= 1
        return value

    # -------------------------------------------------------------------------
    # Token helpers
    # -------------------------------------------------------------------------

    def _peek(self) -> Token | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _peek_op(self, *ops: str) -> bool:
        token = self._peek()
        return token is not None and token.kind == "op" and token.text in ops

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token


def parse_and_compute(expression: str, max_depth: int = DEFAULT_MAX_DEPTH) -> float:
    """Разбор и вычисление выражения (без проверки конечности результата)."""
    return Parser(expression, max_depth=max_depth).parse()
