"""Unit tests for fixed-point conversion and display formatting."""

from decimal import Decimal

import pytest

from calculator.utils import (
    MAX_FIXED_POINT,
    MAX_TOKEN_AMOUNT,
    TOKEN_DECIMALS,
    format_percentage,
    format_token_amount,
    from_fixed_point,
    to_fixed_point,
)


class TestFixedPoint:
    """Tests for 18-decimal fixed-point conversion."""

    def test_token_decimals(self) -> None:
        assert TOKEN_DECIMALS == 18

    def test_to_fixed_point(self) -> None:
        assert to_fixed_point(Decimal("53.0775")) == 53077500000000000000

    def test_whole_token(self) -> None:
        assert to_fixed_point(1) == 10**18

    def test_zero(self) -> None:
        assert to_fixed_point(Decimal("0")) == 0

    def test_truncates_beyond_18_decimals(self) -> None:
        assert to_fixed_point(Decimal("0.0000000000000000019")) == 1

    def test_large_amount_keeps_precision(self) -> None:
        """Amounts above the default decimal precision convert exactly."""
        amount = Decimal("123456789012345.123456789012345678")
        assert to_fixed_point(amount) == 123456789012345123456789012345678

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_fixed_point(Decimal("-1"))

    def test_uint256_maximum_converts(self) -> None:
        assert to_fixed_point(MAX_TOKEN_AMOUNT) == MAX_FIXED_POINT

    @pytest.mark.parametrize("amount", ["1e70", "1e999990", "115792089237316195423570985008687907853269984665640564039458"])
    def test_beyond_uint256_rejected(self, amount: str) -> None:
        with pytest.raises(ValueError):
            to_fixed_point(Decimal(amount))

    def test_unsupported_decimals_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_fixed_point(Decimal("1"), decimals=7)

    def test_six_decimals(self) -> None:
        assert to_fixed_point(Decimal("1.5"), decimals=6) == 1_500_000

    def test_from_fixed_point(self) -> None:
        assert from_fixed_point(53077500000000000000) == Decimal("53.0775")


class TestDisplayFormatting:
    """Tests for display helpers."""

    def test_format_token_amount(self) -> None:
        assert format_token_amount(Decimal("53.0775")) == "53.0775 EHBGC"

    def test_format_token_amount_thousands(self) -> None:
        assert format_token_amount(Decimal("1234.5"), decimals=2) == "1,234.50 EHBGC"

    def test_format_percentage(self) -> None:
        assert format_percentage(Decimal("0.011")) == "1.10%"

    def test_format_percentage_with_sign(self) -> None:
        assert format_percentage(Decimal("0.05"), decimals=0, show_sign=True) == "+5%"
