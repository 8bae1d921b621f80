"""Pydantic models for calculator."""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calculator.types import FranchiseRole, SqlLevel


class LoyaltyBand(BaseModel):
    """One loyalty lock band.

    A lock qualifies when both the locked amount and the lock duration
    reach the band minimums.
    """

    model_config = ConfigDict(frozen=True)

    min_amount: Decimal = Field(..., ge=0, description="Minimum locked amount")
    min_duration_months: int = Field(..., ge=0, description="Minimum lock duration in months")
    bonus_percent: Decimal = Field(..., ge=0, description="Bonus as a fraction (0.011 = 1.1%)")


class LevelRequirement(BaseModel):
    """Gate a franchise must pass to hold a level."""

    model_config = ConfigDict(frozen=True)

    min_daily_orders: int = Field(..., ge=0)
    min_delivery_volume: int = Field(..., ge=0)
    min_complaint_resolution_rate: Decimal = Field(..., ge=0, le=1)
    min_sql: int = Field(..., ge=0, description="Minimum franchise SQL score")
    territory_size: str
    max_complaints: int = Field(..., ge=0)


class LevelBenefit(BaseModel):
    """Rewards granted at a franchise level."""

    model_config = ConfigDict(frozen=True)

    commission_rate: Decimal = Field(..., ge=0, le=1)
    service_access: tuple[str, ...]
    support_level: str
    marketing_budget: Decimal = Field(..., ge=0)
    training_access: tuple[str, ...]


class TierTables(BaseModel):
    """
    Immutable set of lookup tables used by the evaluators.

    Built once (see calculator.constants.DEFAULT_TIER_TABLES) and passed
    to calculators explicitly.
    """

    model_config = ConfigDict(frozen=True)

    base_reward_rate: Decimal = Field(..., ge=0)
    sql_weights: Mapping[SqlLevel, Decimal]
    franchise_modifiers: Mapping[FranchiseRole, Decimal]
    loyalty_multipliers: Mapping[int, Decimal]
    loyalty_bands: tuple[LoyaltyBand, ...]
    full_earning_min_balance: Decimal = Field(..., ge=0)
    reduced_earning_ratio: Decimal = Field(..., ge=0, le=1)
    validator_min_balance: Decimal = Field(..., ge=0)
    level_requirements: Mapping[int, LevelRequirement]
    level_benefits: Mapping[int, LevelBenefit]

    @field_validator(
        "sql_weights",
        "franchise_modifiers",
        "loyalty_multipliers",
        "level_requirements",
        "level_benefits",
    )
    @classmethod
    def freeze_table(cls, v: Mapping) -> Mapping:
        """Store lookup tables as read-only views over a private copy."""
        return MappingProxyType(dict(v))


class RewardComputationInput(BaseModel):
    """Validated reward request.

    sql_level and franchise_role keep the raw string when it is not a
    known tier so that the calculator can resolve it to a zero factor.
    """

    model_config = ConfigDict(frozen=True)

    validator_address: str = Field(..., min_length=1)
    sql_level: SqlLevel | str
    franchise_role: FranchiseRole | str
    loyalty_years: int | None = Field(default=None)
    staked_amount: Decimal = Field(..., ge=0)


class RewardBreakdown(BaseModel):
    """Result of a reward computation."""

    model_config = ConfigDict(frozen=True)

    validator_address: str
    base_reward: Decimal = Field(..., ge=0)
    sql_weight: Decimal = Field(..., ge=0)
    franchise_modifier: Decimal = Field(..., ge=0)
    loyalty_multiplier: Decimal = Field(..., ge=0)
    final_reward: Decimal = Field(..., ge=0)
    final_reward_wei: int = Field(..., ge=0, description="final_reward with 18 decimals")


class FranchiseInput(BaseModel):
    """Wallet and lock state of a franchise account."""

    model_config = ConfigDict(frozen=True)

    wallet_balance: Decimal
    locked_amount: Decimal = Decimal("0")
    lock_duration: int = Field(default=0, description="Lock duration in months")


class FranchiseEarnings(BaseModel):
    """Earning ratio, validator eligibility and loyalty bonus."""

    model_config = ConfigDict(frozen=True)

    earning_ratio: Decimal
    validator_eligible: bool
    loyalty_bonus_percent: Decimal


class FranchisePerformance(BaseModel):
    """Operational metrics of a sub franchise."""

    model_config = ConfigDict(frozen=True)

    daily_orders: int = Field(default=0, ge=0)
    delivery_volume: int = Field(default=0, ge=0)
    complaint_resolution_rate: Decimal = Field(default=Decimal("0"), ge=0, le=1)
    sql: int = Field(default=0, ge=0)
    complaints: int = Field(default=0, ge=0)


class CoinLockUpgradeOption(BaseModel):
    """A longer lock the holder can move to."""

    model_config = ConfigDict(frozen=True)

    duration: int
    bonus_rate: Decimal
    additional_reward: Decimal


class CoinLockQuote(BaseModel):
    """Bonus projection for a coin lock."""

    model_config = ConfigDict(frozen=True)

    locked_amount: Decimal
    lock_duration: int
    bonus_rate: Decimal
    monthly_reward: Decimal
    total_reward: Decimal
    status: str = Field(..., description="'active' or 'none'")
    can_upgrade: bool
    upgrade_options: tuple[CoinLockUpgradeOption, ...]


class UserAccessState(BaseModel):
    """Caller state checked by access gates."""

    model_config = ConfigDict(frozen=True)

    sql_level: SqlLevel
    is_active: bool = False
    has_loyalty_lock: bool = False
    wallet_balance: Decimal = Decimal("0")


class AccessGate(BaseModel):
    """Named feature gate."""

    model_config = ConfigDict(frozen=True)

    name: str
    min_level: SqlLevel
    require_active: bool = False
    require_loyalty_lock: bool = False
    min_wallet_balance: Decimal | None = None


class GateDecision(BaseModel):
    """Outcome of an access gate evaluation."""

    model_config = ConfigDict(frozen=True)

    gate: str
    passed: bool
    reasons: tuple[str, ...] = ()
