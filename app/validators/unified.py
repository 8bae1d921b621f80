"""Unified validators for request values."""
from decimal import Decimal, InvalidOperation

from eth_utils import is_hex_address
from loguru import logger
from web3 import Web3

from calculator.utils.formatters import MAX_TOKEN_AMOUNT, TOKEN_DECIMALS


def validate_wallet_address(address: object) -> tuple[bool, str | None]:
    """
    Validate an EVM wallet address.

    Args:
        address: Wallet address to validate

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if valid
        - (False, error_message) if invalid

    Examples:
        >>> validate_wallet_address("0x1234567890123456789012345678901234567890")
        (True, None)
        >>> validate_wallet_address("invalid")
        (False, 'Address must start with 0x')
    """
    if not address or not isinstance(address, str):
        return False, "Address is empty"

    address = address.strip()

    if not address:
        return False, "Address is empty"

    if not address.startswith("0x"):
        return False, "Address must start with 0x"

    if len(address) != 42:
        return False, "Address must be 42 characters"

    # Validate hex format
    if not is_hex_address(address):
        return False, "Invalid address format"

    # Mixed-case addresses must carry a valid checksum
    body = address[2:]
    if body != body.lower() and body != body.upper() and not Web3.is_checksum_address(address):
        logger.debug(f"Address checksum validation failed for {address}")
        return False, "Invalid address checksum"

    return True, None


def validate_amount(
    amount: object,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal | None = MAX_TOKEN_AMOUNT,
) -> tuple[bool, Decimal | None, str | None]:
    """
    Validate a token amount from a JSON body.

    Accepts JSON numbers and numeric strings.

    Args:
        amount: Amount to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value, the uint256 token range by default

    Returns:
        Tuple of (is_valid, parsed_value, error_message)
        - (True, value, None) if valid
        - (False, None, error_message) if invalid

    Examples:
        >>> validate_amount("100.50")
        (True, Decimal('100.50'), None)
        >>> validate_amount(-10)
        (False, None, 'Amount must be >= 0')
    """
    if amount is None or isinstance(amount, bool):
        return False, None, "Amount is empty"

    if isinstance(amount, (int, float)):
        amount = str(amount)

    if not isinstance(amount, str):
        return False, None, "Amount must be a number"

    amount = amount.strip()

    if not amount:
        return False, None, "Amount is empty"

    try:
        value = Decimal(amount)
    except InvalidOperation:
        return False, None, "Invalid amount format"

    # Check if amount is finite
    if not value.is_finite():
        return False, None, "Amount must be a finite number"

    # Check minimum value
    if value < min_val:
        return False, None, f"Amount must be >= {min_val}"

    # Check maximum value
    if max_val is not None and value > max_val:
        return False, None, "Amount is too large"

    # Check precision against token decimals
    if value.as_tuple().exponent < -TOKEN_DECIMALS:
        return False, None, f"Amount has too many decimal places (maximum {TOKEN_DECIMALS})"

    return True, value, None


def validate_integer(
    value: object,
    min_val: int = 0,
) -> tuple[bool, int | None, str | None]:
    """
    Validate a non-boolean integer from a JSON body.

    Examples:
        >>> validate_integer(3)
        (True, 3, None)
        >>> validate_integer("3")
        (False, None, 'Value must be an integer')
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False, None, "Value must be an integer"

    if value < min_val:
        return False, None, f"Value must be >= {min_val}"

    return True, value, None


def validate_text(
    value: object,
    max_length: int = 1000,
) -> tuple[bool, str | None, str | None]:
    """
    Validate a required free-text field.

    Examples:
        >>> validate_text("spam")
        (True, 'spam', None)
        >>> validate_text("   ")
        (False, None, 'Text is empty')
    """
    if not isinstance(value, str):
        return False, None, "Text is empty"

    value = value.strip()

    if not value:
        return False, None, "Text is empty"

    if len(value) > max_length:
        return False, None, f"Text is too long (maximum {max_length} characters)"

    return True, value, None
