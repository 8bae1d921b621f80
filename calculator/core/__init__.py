"""
Core calculator functionality.

Models shared by the reward, access and franchise evaluators. The
evaluators themselves are imported from their own modules.
"""

from calculator.core.models import (
    AccessGate,
    CoinLockQuote,
    CoinLockUpgradeOption,
    FranchiseEarnings,
    FranchiseInput,
    FranchisePerformance,
    GateDecision,
    LevelBenefit,
    LevelRequirement,
    LoyaltyBand,
    RewardBreakdown,
    RewardComputationInput,
    TierTables,
    UserAccessState,
)

__all__ = [
    "AccessGate",
    "CoinLockQuote",
    "CoinLockUpgradeOption",
    "FranchiseEarnings",
    "FranchiseInput",
    "FranchisePerformance",
    "GateDecision",
    "LevelBenefit",
    "LevelRequirement",
    "LoyaltyBand",
    "RewardBreakdown",
    "RewardComputationInput",
    "TierTables",
    "UserAccessState",
]
