"""
Utility functions for calculator.

Fixed-point conversion and display formatting.
"""

from calculator.utils.formatters import (
    MAX_FIXED_POINT,
    MAX_TOKEN_AMOUNT,
    TOKEN_DECIMALS,
    format_percentage,
    format_token_amount,
    from_fixed_point,
    to_fixed_point,
)

__all__ = [
    "TOKEN_DECIMALS",
    "MAX_FIXED_POINT",
    "MAX_TOKEN_AMOUNT",
    "to_fixed_point",
    "from_fixed_point",
    "format_token_amount",
    "format_percentage",
]
