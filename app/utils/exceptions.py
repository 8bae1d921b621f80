"""
Exception handling utilities.

Defines the error taxonomy shared by the evaluators and the HTTP
boundary. Every error carries a client-safe message and the HTTP status
the boundary answers with.
"""

from redis.exceptions import RedisError


class EHBError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(EHBError, ValueError):
    """A required field is missing or malformed."""

    status_code = 400
    default_message = "Invalid input"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Missing or invalid field: {field}")


class UnauthorizedError(EHBError):
    """No valid caller identity."""

    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(EHBError):
    """Referenced entity does not exist."""

    status_code = 404
    default_message = "Not found"


class DependencyUnavailableError(EHBError):
    """Counter store or data store is unreachable."""

    status_code = 503
    default_message = "Service temporarily unavailable"


# Exception categories based on handling strategy

# Backing store failures: converted to DependencyUnavailableError
STORE_ERRORS = (
    RedisError,
    ConnectionError,
    TimeoutError,
)
