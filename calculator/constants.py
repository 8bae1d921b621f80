"""
Default constants for the tier rules calculator.

Single source of truth for SQL level weights, franchise modifiers,
loyalty tables and franchise level requirement/benefit tables.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from calculator.core.models import LevelBenefit, LevelRequirement, LoyaltyBand, TierTables
from calculator.types import FranchiseRole, SqlLevel


# Base reward: 5% of the staked amount
BASE_REWARD_RATE = Decimal("0.05")

SQL_WEIGHTS: Mapping[SqlLevel, Decimal] = MappingProxyType({
    SqlLevel.FREE: Decimal("0"),
    SqlLevel.BASIC: Decimal("0.3"),
    SqlLevel.NORMAL: Decimal("0.6"),
    SqlLevel.HIGH: Decimal("0.9"),
    SqlLevel.VIP: Decimal("1.0"),
})

FRANCHISE_MODIFIERS: Mapping[FranchiseRole, Decimal] = MappingProxyType({
    FranchiseRole.SUB: Decimal("0.02"),
    FranchiseRole.MASTER: Decimal("0.03"),
    FranchiseRole.CORPORATE: Decimal("0.05"),
})

# Loyalty years -> additive multiplier
LOYALTY_MULTIPLIERS: Mapping[int, Decimal] = MappingProxyType({
    1: Decimal("0.005"),  # 0.5%
    2: Decimal("0.01"),   # 1.0%
    3: Decimal("0.011"),  # 1.1%
})

# Highest threshold first, first match wins
LOYALTY_BANDS: tuple[LoyaltyBand, ...] = (
    LoyaltyBand(min_amount=Decimal("10000"), min_duration_months=36, bonus_percent=Decimal("0.011")),
    LoyaltyBand(min_amount=Decimal("5000"), min_duration_months=12, bonus_percent=Decimal("0.01")),
    LoyaltyBand(min_amount=Decimal("1000"), min_duration_months=6, bonus_percent=Decimal("0.005")),
)

# 70/30 rule: under-funded wallets earn 30%
FULL_EARNING_MIN_BALANCE = Decimal("1000")
REDUCED_EARNING_RATIO = Decimal("0.3")
FULL_EARNING_RATIO = Decimal("1.0")

VALIDATOR_MIN_BALANCE = Decimal("10000")

# Coin lock amount -> discount, highest first
LOYALTY_DISCOUNTS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("10000"), Decimal("0.15")),
    (Decimal("5000"), Decimal("0.1")),
    (Decimal("1000"), Decimal("0.05")),
)

# Coin lock duration (months) -> monthly bonus rate, longest first
COIN_LOCK_BONUS_RATES: tuple[tuple[int, Decimal], ...] = (
    (36, Decimal("0.12")),
    (24, Decimal("0.08")),
    (12, Decimal("0.05")),
)
COIN_LOCK_BASE_RATE = Decimal("0.03")

LEVEL_REQUIREMENTS: Mapping[int, LevelRequirement] = MappingProxyType({
    1: LevelRequirement(
        min_daily_orders=10,
        min_delivery_volume=50,
        min_complaint_resolution_rate=Decimal("0.95"),
        min_sql=1,
        territory_size="Small Area",
        max_complaints=2,
    ),
    2: LevelRequirement(
        min_daily_orders=25,
        min_delivery_volume=100,
        min_complaint_resolution_rate=Decimal("0.96"),
        min_sql=2,
        territory_size="Medium Area",
        max_complaints=3,
    ),
})

LEVEL_BENEFITS: Mapping[int, LevelBenefit] = MappingProxyType({
    1: LevelBenefit(
        commission_rate=Decimal("0.15"),
        service_access=("Basic Services",),
        support_level="Standard",
        marketing_budget=Decimal("1000"),
        training_access=("Basic Training",),
    ),
    2: LevelBenefit(
        commission_rate=Decimal("0.18"),
        service_access=("Basic Services", "Premium Services"),
        support_level="Enhanced",
        marketing_budget=Decimal("2500"),
        training_access=("Basic Training", "Advanced Training"),
    ),
})

DEFAULT_LEVEL = 1


DEFAULT_TIER_TABLES = TierTables(
    base_reward_rate=BASE_REWARD_RATE,
    sql_weights=SQL_WEIGHTS,
    franchise_modifiers=FRANCHISE_MODIFIERS,
    loyalty_multipliers=LOYALTY_MULTIPLIERS,
    loyalty_bands=LOYALTY_BANDS,
    full_earning_min_balance=FULL_EARNING_MIN_BALANCE,
    reduced_earning_ratio=REDUCED_EARNING_RATIO,
    validator_min_balance=VALIDATOR_MIN_BALANCE,
    level_requirements=LEVEL_REQUIREMENTS,
    level_benefits=LEVEL_BENEFITS,
)


def get_level_requirements(level: int, tables: TierTables = DEFAULT_TIER_TABLES) -> LevelRequirement:
    """
    Get requirements for a franchise level.

    Args:
        level: Franchise level (1..N)
        tables: Tier tables to read from

    Returns:
        LevelRequirement, level 1 requirements when level is out of range

    Example:
        >>> get_level_requirements(2).min_daily_orders
        25
        >>> get_level_requirements(99).min_daily_orders
        10
    """
    return tables.level_requirements.get(level, tables.level_requirements[DEFAULT_LEVEL])


def get_level_benefits(level: int, tables: TierTables = DEFAULT_TIER_TABLES) -> LevelBenefit:
    """
    Get benefits for a franchise level.

    Args:
        level: Franchise level (1..N)
        tables: Tier tables to read from

    Returns:
        LevelBenefit, level 1 benefits when level is out of range
    """
    return tables.level_benefits.get(level, tables.level_benefits[DEFAULT_LEVEL])
