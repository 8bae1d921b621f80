"""
Middlewares.

API middlewares for request processing.
"""

from api.middlewares.error_handler import error_middleware, error_response
from api.middlewares.rate_limit import rate_limit_middleware


__all__ = [
    "error_middleware",
    "error_response",
    "rate_limit_middleware",
]
