"""
Common field validators for JSON request bodies.

Wraps the unified tuple validators and raises InvalidInputError naming
the offending field.
"""

from decimal import Decimal
from typing import Any

from app.utils.exceptions import InvalidInputError
from app.validators.unified import (
    validate_amount,
    validate_integer,
    validate_text,
    validate_wallet_address,
)
from calculator.types import SqlLevel


def require_field(payload: dict[str, Any], field: str) -> Any:
    """
    Get a required field from a request body.

    Raises:
        InvalidInputError: If the field is absent or null
    """
    value = payload.get(field)
    if value is None:
        raise InvalidInputError(field)
    return value


def require_address(payload: dict[str, Any], field: str) -> str:
    """Get a required EVM address."""
    is_valid, error = validate_wallet_address(require_field(payload, field))
    if not is_valid:
        raise InvalidInputError(field, f"{field}: {error}")
    return payload[field].strip()


def require_amount(
    payload: dict[str, Any],
    field: str,
    default: Decimal | None = None,
) -> Decimal:
    """
    Get a non-negative amount.

    Args:
        payload: Request body
        field: Field name
        default: Value used when the field is absent, None makes it required

    Examples:
        >>> require_amount({"stakedAmount": "1000"}, "stakedAmount")
        Decimal('1000')
    """
    if payload.get(field) is None and default is not None:
        return default

    is_valid, value, error = validate_amount(require_field(payload, field))
    if not is_valid:
        raise InvalidInputError(field, f"{field}: {error}")
    return value


def require_integer(
    payload: dict[str, Any],
    field: str,
    default: int | None = None,
) -> int:
    """Get a non-negative integer, or default when absent."""
    if payload.get(field) is None and default is not None:
        return default

    is_valid, value, error = validate_integer(require_field(payload, field))
    if not is_valid:
        raise InvalidInputError(field, f"{field}: {error}")
    return value


def optional_integer(payload: dict[str, Any], field: str) -> int | None:
    """Get an optional non-negative integer."""
    if payload.get(field) is None:
        return None
    return require_integer(payload, field)


def require_text(payload: dict[str, Any], field: str, max_length: int = 1000) -> str:
    """Get a required non-blank string."""
    is_valid, value, error = validate_text(payload.get(field), max_length)
    if not is_valid:
        raise InvalidInputError(field, f"{field}: {error}")
    return value


def optional_bool(payload: dict[str, Any], field: str, default: bool = False) -> bool:
    """Get an optional JSON boolean."""
    value = payload.get(field)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidInputError(field, f"{field}: Value must be a boolean")
    return value


def require_sql_level(value: object, field: str) -> SqlLevel:
    """
    Resolve an SQL level name, rejecting unknown names.

    Examples:
        >>> require_sql_level("VIP", "userLevel")
        <SqlLevel.VIP: 'vip'>
    """
    level = SqlLevel.parse(value)
    if level is None:
        raise InvalidInputError(field, f"{field}: Unknown SQL level")
    return level
