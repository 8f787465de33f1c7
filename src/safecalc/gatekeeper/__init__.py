"""Gatekeeper — система гейтов для допуска выражений к разбору.

- 3 gates с фиксированным порядком
- Первый заблокированный гейт определяет вид ошибки
"""

from .gatekeeper import Gatekeeper, validate

__all__ = [
    "Gatekeeper",
    "validate",
]
