"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию
2. Округление half-away-from-zero
3. Форматирование в фиксированную нотацию
4. Валидацию параметров
"""

import math
from decimal import Decimal

import pytest

from safecalc.core.math.numerical_safeguards import (
    DISPLAY_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES,
    format_fixed,
    is_valid_float,
    quantize_half_away_from_zero,
    round_half_away_from_zero,
    validate_finite,
    validate_places,
)


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(3.14)

    def test_nan_invalid(self) -> None:
        assert not is_valid_float(math.nan)

    def test_inf_invalid(self) -> None:
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestValidation:
    """Тесты для validate_finite / validate_places"""

    def test_validate_finite_rejects_nan(self) -> None:
        with pytest.raises(ValueError, match="value must be a valid float"):
            validate_finite(math.nan, "value")

    def test_validate_finite_accepts_finite(self) -> None:
        validate_finite(1.0, "value")

    def test_validate_places_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="places must be non-negative"):
            validate_places(-1)

    def test_validate_places_rejects_above_max(self) -> None:
        with pytest.raises(ValueError, match="places must be <= 90"):
            validate_places(MAX_DECIMAL_PLACES + 1)

    def test_max_places_quantizes_largest_float(self) -> None:
        """На MAX_DECIMAL_PLACES квантование не выходит за точность контекста"""
        validate_places(MAX_DECIMAL_PLACES)
        quantized = quantize_half_away_from_zero(1.7976931348623157e308, MAX_DECIMAL_PLACES)
        assert quantized.as_tuple().exponent == -MAX_DECIMAL_PLACES


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfAwayFromZero:
    """Тесты для round_half_away_from_zero"""

    def test_default_places_is_eight(self) -> None:
        assert DISPLAY_DECIMAL_PLACES == 8

    def test_half_rounds_away_from_zero_positive(self) -> None:
        assert round_half_away_from_zero(2.5, 0) == 3.0
        assert round_half_away_from_zero(0.125, 2) == 0.13

    def test_half_rounds_away_from_zero_negative(self) -> None:
        assert round_half_away_from_zero(-2.5, 0) == -3.0
        assert round_half_away_from_zero(-0.125, 2) == -0.13

    def test_uses_shortest_repr(self) -> None:
        """1.005 хранится как 1.00499999..., но округляется по repr"""
        assert round_half_away_from_zero(1.005, 2) == 1.01

    def test_repeating_fraction(self) -> None:
        assert round_half_away_from_zero(10 / 3) == 3.33333333
        assert round_half_away_from_zero(2 / 3) == 0.66666667

    def test_huge_value_does_not_overflow_context(self) -> None:
        assert round_half_away_from_zero(1e308) == 1e308

    def test_quantize_returns_exact_places(self) -> None:
        assert quantize_half_away_from_zero(1.5, 3) == Decimal("1.500")

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError):
            round_half_away_from_zero(math.nan)


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormatFixed:
    """Тесты для format_fixed"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (14.0, "14"),
            (-2.0, "-2"),
            (0.5, "0.5"),
            (10 / 3, "3.33333333"),
            (0.1 + 0.2, "0.3"),
            (1e-7, "0.0000001"),
            (1e20, "100000000000000000000"),
        ],
    )
    def test_formats(self, value: float, expected: str) -> None:
        assert format_fixed(value) == expected

    def test_negative_zero_is_zero(self) -> None:
        assert format_fixed(-0.0) == "0"

    def test_tiny_negative_rounds_to_zero(self) -> None:
        assert format_fixed(-1e-12) == "0"

    def test_respects_places(self) -> None:
        assert format_fixed(3.14159, 2) == "3.14"
        assert format_fixed(2.5, 0) == "3"
