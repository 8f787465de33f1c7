"""
Core math modules для safecalc

Численные примитивы с гарантией стабильности отображаемого результата.
"""

from safecalc.core.math.numerical_safeguards import (
    # Constants
    DISPLAY_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES,
    QUANTIZE_PRECISION,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    validate_places,
    # Rounding
    quantize_half_away_from_zero,
    round_half_away_from_zero,
    # Formatting
    format_fixed,
)

__all__ = [
    # Constants
    "DISPLAY_DECIMAL_PLACES",
    "MAX_DECIMAL_PLACES",
    "QUANTIZE_PRECISION",
    # NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    "validate_places",
    # Rounding
    "quantize_half_away_from_zero",
    "round_half_away_from_zero",
    # Formatting
    "format_fixed",
]
