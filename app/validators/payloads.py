"""
Request body parsers.

Turn camelCase JSON bodies into calculator models. Every parser raises
InvalidInputError for missing or malformed fields and never returns a
partially valid model.
"""

from decimal import Decimal
from typing import Any, NamedTuple

from app.utils.exceptions import InvalidInputError
from app.validators.common import (
    optional_bool,
    optional_integer,
    require_address,
    require_amount,
    require_field,
    require_integer,
    require_sql_level,
    require_text,
)
from calculator.core.models import (
    FranchiseInput,
    RewardComputationInput,
    UserAccessState,
)
from calculator.types import FranchiseRole, SqlLevel


class AccessCheckRequest(NamedTuple):
    """Tier comparison request."""

    user_level: SqlLevel
    required_level: SqlLevel


class CoinLockQuoteRequest(NamedTuple):
    """Coin lock projection request."""

    locked_amount: Decimal
    lock_duration: int


class ReportRequest(NamedTuple):
    """Content report request."""

    target_id: str
    reason: str
    report_type: str
    franchise_id: str | None


def ensure_object(payload: Any) -> dict[str, Any]:
    """
    Check the request body is a JSON object.

    Raises:
        InvalidInputError: If the body is not an object
    """
    if not isinstance(payload, dict):
        raise InvalidInputError("body", "Request body must be a JSON object")
    return payload


def _tier_name(payload: dict[str, Any], field: str, enum_type: type) -> SqlLevel | FranchiseRole | str:
    value = require_field(payload, field)
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(field, f"{field}: Value must be a non-empty string")
    # Unknown names stay raw and resolve to a zero factor
    return enum_type.parse(value) or value.strip()


def parse_reward_request(payload: Any) -> RewardComputationInput:
    """
    Parse a reward calculation body.

    Example:
        >>> parse_reward_request({
        ...     "validatorAddress": "0x742d35cc6634c0532925a3b844bc454e4438f44e",
        ...     "sqlLevel": "VIP",
        ...     "franchiseRole": "Corporate",
        ...     "loyaltyYears": 3,
        ...     "stakedAmount": 1000,
        ... }).sql_level
        <SqlLevel.VIP: 'vip'>
    """
    payload = ensure_object(payload)
    return RewardComputationInput(
        validator_address=require_address(payload, "validatorAddress"),
        sql_level=_tier_name(payload, "sqlLevel", SqlLevel),
        franchise_role=_tier_name(payload, "franchiseRole", FranchiseRole),
        loyalty_years=optional_integer(payload, "loyaltyYears"),
        staked_amount=require_amount(payload, "stakedAmount"),
    )


def parse_access_check(payload: Any) -> AccessCheckRequest:
    """Parse an access check body, unknown level names are rejected."""
    payload = ensure_object(payload)
    return AccessCheckRequest(
        user_level=require_sql_level(require_field(payload, "userLevel"), "userLevel"),
        required_level=require_sql_level(require_field(payload, "requiredLevel"), "requiredLevel"),
    )


def parse_access_state(payload: Any) -> UserAccessState:
    """Parse the caller state checked by an access gate."""
    payload = ensure_object(payload)
    return UserAccessState(
        sql_level=require_sql_level(require_field(payload, "userLevel"), "userLevel"),
        is_active=optional_bool(payload, "isActive"),
        has_loyalty_lock=optional_bool(payload, "hasLoyaltyLock"),
        wallet_balance=require_amount(payload, "walletBalance", default=Decimal("0")),
    )


def parse_franchise_input(payload: Any) -> FranchiseInput:
    """Parse a franchise earnings body."""
    payload = ensure_object(payload)
    return FranchiseInput(
        wallet_balance=require_amount(payload, "walletBalance"),
        locked_amount=require_amount(payload, "lockedAmount", default=Decimal("0")),
        lock_duration=require_integer(payload, "lockDuration", default=0),
    )


def parse_coin_lock_request(payload: Any) -> CoinLockQuoteRequest:
    """Parse a coin lock quote body."""
    payload = ensure_object(payload)
    return CoinLockQuoteRequest(
        locked_amount=require_amount(payload, "lockedAmount"),
        lock_duration=require_integer(payload, "lockDuration"),
    )


def parse_report_request(payload: Any) -> ReportRequest:
    """Parse a content report body."""
    payload = ensure_object(payload)

    franchise_id = payload.get("franchiseId")
    if franchise_id is not None:
        franchise_id = require_text(payload, "franchiseId", max_length=128)

    return ReportRequest(
        target_id=require_text(payload, "targetId", max_length=128),
        reason=require_text(payload, "reason"),
        report_type=require_text(payload, "reportType", max_length=64),
        franchise_id=franchise_id,
    )


def parse_level_number(raw: str) -> int:
    """
    Parse a franchise level from a path segment.

    Examples:
        >>> parse_level_number("2")
        2
    """
    try:
        level = int(raw)
    except (TypeError, ValueError):
        raise InvalidInputError("level", "level: Value must be an integer") from None
    if level < 1:
        raise InvalidInputError("level", "level: Value must be >= 1")
    return level
