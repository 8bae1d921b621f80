"""
Type definitions for calculator module.

Closed enumerations for SQL levels and franchise roles, plus the
TypedDict shapes returned to API callers.
"""

from enum import Enum
from typing import TypedDict


class SqlLevel(str, Enum):
    """
    SQL (Service Quality Level) tiers in ascending order.

    The declaration order is the access order: free < basic < normal
    < high < vip.
    """

    FREE = "free"
    BASIC = "basic"
    NORMAL = "normal"
    HIGH = "high"
    VIP = "vip"

    @property
    def rank(self) -> int:
        """Ordinal position of the tier (free = 0, vip = 4)."""
        return _SQL_RANKS[self]

    @classmethod
    def parse(cls, value: object) -> "SqlLevel | None":
        """
        Resolve a level name case-insensitively.

        Args:
            value: Raw value from a request ("VIP", "vip", SqlLevel.VIP)

        Returns:
            Matching SqlLevel or None for anything unknown

        Example:
            >>> SqlLevel.parse("VIP")
            <SqlLevel.VIP: 'vip'>
            >>> SqlLevel.parse("platinum") is None
            True
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_SQL_RANKS: dict[SqlLevel, int] = {level: position for position, level in enumerate(SqlLevel)}


class FranchiseRole(str, Enum):
    """Organizational franchise tiers."""

    SUB = "sub"
    MASTER = "master"
    CORPORATE = "corporate"

    @classmethod
    def parse(cls, value: object) -> "FranchiseRole | None":
        """Resolve a role name case-insensitively, None when unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class RewardDataDict(TypedDict):
    """
    Reward breakdown as returned by the rewards endpoint.

    Attributes:
        validatorAddress: Validator the reward is computed for
        baseReward: 5% of the staked amount
        sqlWeight: Weight of the SQL level (0 for unknown levels)
        franchiseModifier: Additive franchise modifier
        loyaltyMultiplier: Additive loyalty-year multiplier
        finalReward: Fixed-point amount with 18 decimals
    """
    validatorAddress: str
    baseReward: str
    sqlWeight: str
    franchiseModifier: str
    loyaltyMultiplier: str
    finalReward: str


class FranchiseEarningsDict(TypedDict):
    """Franchise earnings as returned by the franchise endpoint."""
    earningRatio: str
    validatorEligible: bool
    loyaltyBonusPercent: str
