"""
Validators package.

Provides validation and parsing of API request bodies.
"""

from app.validators.payloads import (
    AccessCheckRequest,
    CoinLockQuoteRequest,
    ReportRequest,
    parse_access_check,
    parse_access_state,
    parse_coin_lock_request,
    parse_franchise_input,
    parse_level_number,
    parse_report_request,
    parse_reward_request,
)
from app.validators.unified import (
    validate_amount,
    validate_integer,
    validate_text,
    validate_wallet_address,
)


__all__ = [
    "AccessCheckRequest",
    "CoinLockQuoteRequest",
    "ReportRequest",
    "parse_reward_request",
    "parse_access_check",
    "parse_access_state",
    "parse_franchise_input",
    "parse_coin_lock_request",
    "parse_report_request",
    "parse_level_number",
    "validate_wallet_address",
    "validate_amount",
    "validate_integer",
    "validate_text",
]
