"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость результата вычисления:
- NaN/Inf детекция для отсечения невалидных результатов
- Округление half-away-from-zero до фиксированного числа знаков
- Форматирование в фиксированную нотацию без хвостовых нулей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не доходят до отображения
2. Округление выполняется над кратчайшим десятичным представлением float,
   поэтому 0.1 + 0.2 отображается как 0.3
3. "-0" никогда не отображается
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ОКРУГЛЕНИЯ
# =============================================================================

# Количество знаков после точки по умолчанию
DISPLAY_DECIMAL_PLACES: Final[int] = 8

# Точность decimal-контекста для квантования.
# Максимальный float ~1.8e308 (309 цифр) плюс дробная часть.
QUANTIZE_PRECISION: Final[int] = 400

# Максимум знаков после точки, при котором квантование укладывается в контекст
MAX_DECIMAL_PLACES: Final[int] = QUANTIZE_PRECISION - 310


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_places(places: int) -> None:
    """
    Валидация количества знаков после точки.

    Raises:
        ValueError: Если places < 0 или places > MAX_DECIMAL_PLACES
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if places > MAX_DECIMAL_PLACES:
        raise ValueError(f"places must be <= {MAX_DECIMAL_PLACES}, got {places}")


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def quantize_half_away_from_zero(value: float, places: int = DISPLAY_DECIMAL_PLACES) -> Decimal:
    """
    Квантование float до `places` знаков (round half away from zero).

    Берётся кратчайшее десятичное представление float (repr), а не его
    точное двоичное значение: 1.005 округляется до 1.01, а не до 1.00.

    Args:
        value: Конечное значение
        places: Количество знаков после точки

    Returns:
        Decimal с ровно `places` знаками после точки

    Raises:
        ValueError: Если value NaN/Inf или places < 0

    Examples:
        >>> quantize_half_away_from_zero(2.5, 0)
        Decimal('3')
        >>> quantize_half_away_from_zero(-2.5, 0)
        Decimal('-3')
        >>> quantize_half_away_from_zero(10 / 3)
        Decimal('3.33333333')
    """
    validate_finite(value, "value")
    validate_places(places)

    step = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = QUANTIZE_PRECISION
        # ROUND_HALF_UP в модуле decimal округляет половину от нуля
        return Decimal(repr(value)).quantize(step, rounding=ROUND_HALF_UP)


def round_half_away_from_zero(value: float, places: int = DISPLAY_DECIMAL_PLACES) -> float:
    """
    Округление float до `places` знаков (round half away from zero).

    Examples:
        >>> round_half_away_from_zero(0.125, 2)
        0.13
        >>> round_half_away_from_zero(-0.125, 2)
        -0.13
    """
    return float(quantize_half_away_from_zero(value, places))


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_fixed(value: float, places: int = DISPLAY_DECIMAL_PLACES) -> str:
    """
    Форматирование в фиксированную нотацию без хвостовых нулей.

    Args:
        value: Конечное значение
        places: Максимум знаков после точки

    Returns:
        Строка вида "14", "-2", "0.5", "3.33333333"; никогда "-0" или "1e-07"

    Examples:
        >>> format_fixed(14.0)
        '14'
        >>> format_fixed(0.1 + 0.2)
        '0.3'
        >>> format_fixed(-1e-12)
        '0'
        >>> format_fixed(1e-7)
        '0.0000001'
    """
    quantized = quantize_half_away_from_zero(value, places)

    if quantized == 0:
        return "0"

    text = format(quantized, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
