"""
Core math modules

Числовые примитивы для CSS-значений.
"""

from responsive_font_sizes.core.math.numerical_safeguards import (
    SIGNIFICANT_DIGITS,
    format_number,
    is_numeric,
    is_valid_float,
    is_zero,
    parse_numeric,
    round_half_away_from_zero,
)

__all__ = [
    "SIGNIFICANT_DIGITS",
    "format_number",
    "is_numeric",
    "is_valid_float",
    "is_zero",
    "parse_numeric",
    "round_half_away_from_zero",
]
