"""Нормализация процентов: "50%" -> "(50/100)".

Чистая текстовая подстановка без анализа контекста: "5%%" превращается
в "(5/100)%", а остаточный '%' отсекается на следующих стадиях.
"""

from safecalc.core.domain.expression import PERCENT_LITERAL_PATTERN, NormalizedExpression


def normalize_percent(expression: str) -> str:
    """Переписывание всех процентных литералов.

    Examples:
        >>> normalize_percent("50%")
        '(50/100)'
        >>> normalize_percent("3.5%+200%")
        '(3.5/100)+(200/100)'
    """
    return PERCENT_LITERAL_PATTERN.sub(r"(\1/100)", expression)


def normalize(expression: str) -> NormalizedExpression:
    return NormalizedExpression(text=normalize_percent(expression))
