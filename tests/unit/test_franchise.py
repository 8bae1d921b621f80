"""
Unit tests for franchise rules.

Tests cover:
- 70/30 earning rule and validator eligibility
- Loyalty bonus bands
- Loyalty discount
- Coin lock bonus quotes
- Level requirement checks
"""

from decimal import Decimal

import pytest

from calculator.core.franchise import (
    calculate_franchise_earnings,
    calculate_loyalty_discount,
    check_level_requirements,
    get_coin_lock_bonus_rate,
    get_loyalty_bonus,
    quote_coin_lock,
)
from calculator.core.models import FranchiseInput, FranchisePerformance


class TestFranchiseEarnings:
    """Tests for calculate_franchise_earnings."""

    def test_full_earning_with_validator_and_top_band(self) -> None:
        result = calculate_franchise_earnings(FranchiseInput(
            wallet_balance=Decimal("12000"),
            locked_amount=Decimal("10000"),
            lock_duration=36,
        ))
        assert result.earning_ratio == Decimal("1.0")
        assert result.validator_eligible is True
        assert result.loyalty_bonus_percent == Decimal("0.011")

    def test_reduced_earning_below_threshold(self) -> None:
        result = calculate_franchise_earnings(FranchiseInput(wallet_balance=Decimal("999.99")))
        assert result.earning_ratio == Decimal("0.3")
        assert result.validator_eligible is False
        assert result.loyalty_bonus_percent == Decimal("0")

    @pytest.mark.parametrize(
        "wallet,ratio,eligible",
        [
            (Decimal("1000"), Decimal("1.0"), False),
            (Decimal("9999.99"), Decimal("1.0"), False),
            (Decimal("10000"), Decimal("1.0"), True),
            (Decimal("0"), Decimal("0.3"), False),
        ],
    )
    def test_wallet_boundaries(self, wallet: Decimal, ratio: Decimal, eligible: bool) -> None:
        """Thresholds are inclusive."""
        result = calculate_franchise_earnings(FranchiseInput(wallet_balance=wallet))
        assert result.earning_ratio == ratio
        assert result.validator_eligible is eligible


class TestLoyaltyBonus:
    """Tests for loyalty bands."""

    @pytest.mark.parametrize(
        "amount,duration,expected",
        [
            (Decimal("10000"), 36, Decimal("0.011")),
            (Decimal("10000"), 35, Decimal("0.01")),
            (Decimal("5000"), 12, Decimal("0.01")),
            (Decimal("4999"), 12, Decimal("0.005")),
            (Decimal("1000"), 6, Decimal("0.005")),
            (Decimal("1000"), 5, Decimal("0")),
            (Decimal("999"), 36, Decimal("0")),
        ],
    )
    def test_bands(self, amount: Decimal, duration: int, expected: Decimal) -> None:
        """Amount AND duration must both reach a band."""
        assert get_loyalty_bonus(amount, duration) == expected

    def test_large_amount_short_lock_gets_nothing(self) -> None:
        assert get_loyalty_bonus(Decimal("1000000"), 1) == Decimal("0")


class TestLoyaltyDiscount:
    """Tests for calculate_loyalty_discount."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("10000"), Decimal("0.15")),
            (Decimal("9999"), Decimal("0.1")),
            (Decimal("5000"), Decimal("0.1")),
            (Decimal("1000"), Decimal("0.05")),
            (Decimal("999.99"), Decimal("0")),
            (Decimal("0"), Decimal("0")),
        ],
    )
    def test_discount(self, amount: Decimal, expected: Decimal) -> None:
        assert calculate_loyalty_discount(amount) == expected


class TestCoinLockQuote:
    """Tests for quote_coin_lock."""

    @pytest.mark.parametrize(
        "duration,rate",
        [(6, Decimal("0.03")), (12, Decimal("0.05")), (24, Decimal("0.08")), (48, Decimal("0.12"))],
    )
    def test_bonus_rate(self, duration: int, rate: Decimal) -> None:
        assert get_coin_lock_bonus_rate(duration) == rate

    def test_quote_with_upgrades(self) -> None:
        quote = quote_coin_lock(Decimal("1000"), 12)

        assert quote.status == "active"
        assert quote.bonus_rate == Decimal("0.05")
        assert quote.monthly_reward == Decimal("50")
        assert quote.total_reward == Decimal("600")
        assert quote.can_upgrade is True
        assert [(o.duration, o.additional_reward) for o in quote.upgrade_options] == [
            (24, Decimal("720")),   # 1000 * (0.08 - 0.05) * 24
            (36, Decimal("2520")),  # 1000 * (0.12 - 0.05) * 36
        ]

    def test_short_lock_can_upgrade_to_every_tier(self) -> None:
        quote = quote_coin_lock(Decimal("100"), 3)
        assert [o.duration for o in quote.upgrade_options] == [12, 24, 36]

    def test_longest_lock_cannot_upgrade(self) -> None:
        quote = quote_coin_lock(Decimal("1000"), 36)
        assert quote.can_upgrade is False
        assert quote.upgrade_options == ()

    def test_no_lock_quote(self) -> None:
        quote = quote_coin_lock(Decimal("0"), 0)

        assert quote.status == "none"
        assert quote.can_upgrade is False
        assert quote.total_reward == Decimal("0")
        assert [(o.duration, o.bonus_rate, o.additional_reward) for o in quote.upgrade_options] == [
            (12, Decimal("0.05"), Decimal("0")),
            (24, Decimal("0.08"), Decimal("0")),
            (36, Decimal("0.12"), Decimal("0")),
        ]


class TestLevelRequirements:
    """Tests for check_level_requirements."""

    def test_level_one_met(self) -> None:
        performance = FranchisePerformance(
            daily_orders=10,
            delivery_volume=50,
            complaint_resolution_rate=Decimal("0.95"),
            sql=1,
            complaints=2,
        )
        assert check_level_requirements(1, performance) == []

    def test_level_two_unmet(self) -> None:
        performance = FranchisePerformance(
            daily_orders=10,
            delivery_volume=50,
            complaint_resolution_rate=Decimal("0.95"),
            sql=1,
            complaints=4,
        )
        unmet = check_level_requirements(2, performance)
        assert unmet == [
            "Daily orders below 25",
            "Delivery volume below 100",
            "Complaint resolution rate below 0.96",
            "SQL level below 2",
            "More than 3 complaints",
        ]

    def test_unknown_level_uses_level_one(self) -> None:
        performance = FranchisePerformance(
            daily_orders=10,
            delivery_volume=50,
            complaint_resolution_rate=Decimal("1"),
            sql=1,
        )
        assert check_level_requirements(42, performance) == []
