"""
Pure business logic calculator for validator rewards.

This module contains calculation logic without any dependencies on
storage, sessions or HTTP code.
"""

from decimal import Decimal

from eth_utils import is_hex_address
from web3 import Web3

from app.utils.exceptions import InvalidInputError
from calculator.constants import DEFAULT_TIER_TABLES
from calculator.core.models import RewardBreakdown, RewardComputationInput, TierTables
from calculator.types import FranchiseRole, SqlLevel
from calculator.utils.formatters import MAX_TOKEN_AMOUNT, to_fixed_point


NEUTRAL = Decimal("0")


def is_valid_address(address: str) -> bool:
    """
    Check an EVM address.

    All-lowercase and all-uppercase addresses carry no checksum,
    mixed-case addresses must match their EIP-55 checksum.

    Example:
        >>> is_valid_address("0x742d35cc6634c0532925a3b844bc454e4438f44e")
        True
        >>> is_valid_address("0x742D35cc6634c0532925a3b844bc454e4438f44e")
        False
    """
    if not is_hex_address(address):
        return False
    body = address[2:]
    if body == body.lower() or body == body.upper():
        return True
    return Web3.is_checksum_address(address)


class RewardCalculator:
    """
    Reward calculator combining stake with SQL level, franchise role and
    loyalty years.

    Formula:
        reward = staked * base_rate * sql_weight
                 * (1 + franchise_modifier) * (1 + loyalty_multiplier)

    Unknown tiers resolve to a zero factor, so an unrecognised SQL level
    yields a zero reward rather than an error.
    """

    def __init__(self, tables: TierTables | None = None) -> None:
        """
        Initialize calculator.

        Args:
            tables: Tier tables, defaults to DEFAULT_TIER_TABLES
        """
        self.tables = tables or DEFAULT_TIER_TABLES

    def get_sql_weight(self, sql_level: SqlLevel | str | None) -> Decimal:
        """
        Weight of an SQL level.

        Example:
            >>> RewardCalculator().get_sql_weight("High")
            Decimal('0.9')
            >>> RewardCalculator().get_sql_weight("unknown")
            Decimal('0')
        """
        level = SqlLevel.parse(sql_level)
        if level is None:
            return NEUTRAL
        return self.tables.sql_weights.get(level, NEUTRAL)

    def get_franchise_modifier(self, role: FranchiseRole | str | None) -> Decimal:
        """Additive modifier of a franchise role, 0 when unknown."""
        parsed = FranchiseRole.parse(role)
        if parsed is None:
            return NEUTRAL
        return self.tables.franchise_modifiers.get(parsed, NEUTRAL)

    def get_loyalty_multiplier(self, loyalty_years: int | None) -> Decimal:
        """Additive multiplier for loyalty years, 0 when not in the table."""
        if loyalty_years is None:
            return NEUTRAL
        return self.tables.loyalty_multipliers.get(loyalty_years, NEUTRAL)

    def calculate_base_reward(self, staked_amount: Decimal) -> Decimal:
        """
        Calculate base reward for a stake.

        Example:
            >>> RewardCalculator().calculate_base_reward(Decimal("1000"))
            Decimal('50.00')
        """
        if staked_amount <= 0:
            return Decimal("0")

        return staked_amount * self.tables.base_reward_rate

    def calculate_reward(self, request: RewardComputationInput) -> RewardBreakdown:
        """
        Calculate the full reward breakdown for a validator.

        Args:
            request: Validated reward request

        Returns:
            RewardBreakdown with every factor and the 18-decimal amount

        Raises:
            InvalidInputError: If the validator address is malformed or
                the stake is negative or too large for a uint256 reward

        Example:
            >>> calc = RewardCalculator()
            >>> result = calc.calculate_reward(RewardComputationInput(
            ...     validator_address="0x742d35cc6634c0532925a3b844bc454e4438f44e",
            ...     sql_level=SqlLevel.VIP,
            ...     franchise_role=FranchiseRole.CORPORATE,
            ...     loyalty_years=3,
            ...     staked_amount=Decimal("1000"),
            ... ))
            >>> result.final_reward == Decimal("53.0775")
            True
            >>> result.final_reward_wei
            53077500000000000000
        """
        if not is_valid_address(request.validator_address):
            raise InvalidInputError("validatorAddress", "validatorAddress is not a valid address")

        if request.staked_amount < 0:
            raise InvalidInputError("stakedAmount", "stakedAmount must be >= 0")
        if request.staked_amount > MAX_TOKEN_AMOUNT:
            raise InvalidInputError("stakedAmount", "stakedAmount is too large")

        base = self.calculate_base_reward(request.staked_amount)
        weight = self.get_sql_weight(request.sql_level)
        modifier = self.get_franchise_modifier(request.franchise_role)
        multiplier = self.get_loyalty_multiplier(request.loyalty_years)

        final = base * weight * (1 + modifier) * (1 + multiplier)
        if final > MAX_TOKEN_AMOUNT:
            raise InvalidInputError("stakedAmount", "stakedAmount is too large")

        return RewardBreakdown(
            validator_address=request.validator_address,
            base_reward=base,
            sql_weight=weight,
            franchise_modifier=modifier,
            loyalty_multiplier=multiplier,
            final_reward=final,
            final_reward_wei=to_fixed_point(final),
        )
