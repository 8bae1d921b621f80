"""Shared helpers for API handlers."""

import json
from decimal import Decimal
from typing import Any

from aiohttp import web

from app.utils.exceptions import InvalidInputError


async def read_json(request: web.Request) -> Any:
    """
    Read a JSON request body.

    Raises:
        InvalidInputError: If the body is empty, not UTF-8 or not valid JSON
    """
    if not request.can_read_body:
        raise InvalidInputError("body", "Request body is required")
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidInputError("body", "Request body must be valid JSON") from None


def decimal_str(value: Decimal) -> str:
    """
    Serialize a Decimal without exponent notation.

    Examples:
        >>> decimal_str(Decimal("53.07750000"))
        '53.0775'
        >>> decimal_str(Decimal("1E+3"))
        '1000'
    """
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


def ok(data: Any, status: int = 200, key: str = "data") -> web.Response:
    """Build a success response."""
    return web.json_response({"success": True, key: data}, status=status)
