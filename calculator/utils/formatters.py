"""
Formatting utilities for token amounts and percentages.

Token amounts leave the service as fixed-point integers with 18
decimals, the representation the token contracts consume.
"""

from decimal import ROUND_DOWN, Decimal, localcontext
from typing import Union

from eth_utils import from_wei, to_wei

TOKEN_DECIMALS = 18

# Largest amount a uint256 token balance can hold
MAX_FIXED_POINT = 2**256 - 1
with localcontext() as _ctx:
    _ctx.prec = 78
    MAX_TOKEN_AMOUNT = Decimal(MAX_FIXED_POINT).scaleb(-TOKEN_DECIMALS)

# eth_utils unit names by decimal count
_UNITS = {
    18: "ether",
    9: "gwei",
    6: "mwei",
    3: "kwei",
    0: "wei",
}


def _unit_for(decimals: int) -> str:
    try:
        return _UNITS[decimals]
    except KeyError:
        raise ValueError(f"Unsupported token decimals: {decimals}") from None


def to_fixed_point(amount: Union[Decimal, int, str], decimals: int = TOKEN_DECIMALS) -> int:
    """
    Convert a token amount to its fixed-point integer form.

    Digits beyond `decimals` places are truncated.

    Args:
        amount: Non-negative amount
        decimals: Token decimals (18 for standard tokens)

    Returns:
        Integer amount in the smallest unit

    Raises:
        ValueError: If amount is negative or does not fit in uint256

    Example:
        >>> to_fixed_point(Decimal("53.0775"))
        53077500000000000000
        >>> to_fixed_point(Decimal("0"))
        0
    """
    value = Decimal(str(amount)) if not isinstance(amount, Decimal) else amount
    if value < 0:
        raise ValueError(f"Amount must be >= 0, got {value}")

    # Default context precision (28) is too small for large 18-decimal amounts
    with localcontext() as ctx:
        ctx.prec = 78
        too_large = (
            value.adjusted() + decimals > len(str(MAX_FIXED_POINT))
            or value.scaleb(decimals) > MAX_FIXED_POINT
        )
        if too_large:
            raise ValueError(f"Amount exceeds the uint256 range: {value}")
        quantum = Decimal(1).scaleb(-decimals)
        value = value.quantize(quantum, rounding=ROUND_DOWN)
    return to_wei(value, _unit_for(decimals))


def from_fixed_point(value: int, decimals: int = TOKEN_DECIMALS) -> Decimal:
    """
    Convert a fixed-point integer back to a decimal token amount.

    Example:
        >>> from_fixed_point(53077500000000000000)
        Decimal('53.0775')
    """
    return Decimal(from_wei(value, _unit_for(decimals)))


def format_token_amount(
    amount: Union[Decimal, int, str],
    symbol: str = "EHBGC",
    decimals: int = 4,
) -> str:
    """
    Format a token amount for display.

    Example:
        >>> format_token_amount(Decimal("53.0775"))
        '53.0775 EHBGC'
        >>> format_token_amount(Decimal("1234.5"), decimals=2)
        '1,234.50 EHBGC'
    """
    return f"{Decimal(str(amount)):,.{decimals}f} {symbol}"


def format_percentage(
    fraction: Union[Decimal, float],
    decimals: int = 2,
    show_sign: bool = False
) -> str:
    """
    Format a fraction (0.011) as a percentage string.

    Example:
        >>> format_percentage(Decimal("0.011"))
        '1.10%'
        >>> format_percentage(Decimal("0.05"), decimals=0, show_sign=True)
        '+5%'
    """
    value = Decimal(str(fraction)) * 100
    sign = "+" if show_sign and value > 0 else ""
    return f"{sign}{value:.{decimals}f}%"
