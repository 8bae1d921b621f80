"""
EHB tier rules calculator.

Pure evaluators for validator rewards, SQL level access and franchise
earnings. Nothing in this package touches storage or the network.

Example:
    >>> from calculator import RewardCalculator, RewardComputationInput, SqlLevel
    >>> from decimal import Decimal
    >>>
    >>> calc = RewardCalculator()
    >>> result = calc.calculate_reward(RewardComputationInput(
    ...     validator_address="0x742d35cc6634c0532925a3b844bc454e4438f44e",
    ...     sql_level=SqlLevel.HIGH,
    ...     franchise_role="master",
    ...     loyalty_years=None,
    ...     staked_amount=Decimal("2000"),
    ... ))
    >>> print(f"Final reward: {result.final_reward:.4f}")
    Final reward: 92.7000
"""

from calculator.constants import (
    DEFAULT_TIER_TABLES,
    get_level_benefits,
    get_level_requirements,
)
from calculator.core.access import (
    ACCESS_GATES,
    can_access,
    evaluate_gate,
    get_gate,
    next_level,
)
from calculator.core.calculator import RewardCalculator
from calculator.core.franchise import (
    calculate_franchise_earnings,
    calculate_loyalty_discount,
    check_level_requirements,
    quote_coin_lock,
)
from calculator.core.models import (
    CoinLockQuote,
    FranchiseEarnings,
    FranchiseInput,
    FranchisePerformance,
    GateDecision,
    RewardBreakdown,
    RewardComputationInput,
    TierTables,
    UserAccessState,
)
from calculator.types import FranchiseRole, SqlLevel
from calculator.utils import (
    format_percentage,
    format_token_amount,
    from_fixed_point,
    to_fixed_point,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "RewardCalculator",
    "can_access",
    "next_level",
    "evaluate_gate",
    "get_gate",
    "ACCESS_GATES",
    "calculate_franchise_earnings",
    "calculate_loyalty_discount",
    "quote_coin_lock",
    "check_level_requirements",
    # Types
    "SqlLevel",
    "FranchiseRole",
    # Models
    "RewardComputationInput",
    "RewardBreakdown",
    "FranchiseInput",
    "FranchiseEarnings",
    "FranchisePerformance",
    "CoinLockQuote",
    "UserAccessState",
    "GateDecision",
    "TierTables",
    # Constants
    "DEFAULT_TIER_TABLES",
    "get_level_requirements",
    "get_level_benefits",
    # Formatters
    "to_fixed_point",
    "from_fixed_point",
    "format_token_amount",
    "format_percentage",
]
