"""
Rate limit profiles.

Single source of truth for the fixed-window profiles and the profile
each route uses. Profiles are read-only after import.
"""

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class RateLimitProfileName(str, Enum):
    """Named rate limit profiles."""

    STRICT = "strict"
    MODERATE = "moderate"
    LENIENT = "lenient"
    API = "api"


class RateLimitProfile(NamedTuple):
    """Fixed-window rate limit configuration."""

    name: RateLimitProfileName
    max_requests: int  # Requests allowed per window
    window_ms: int  # Window length in milliseconds
    key_prefix: str  # Counter key namespace
    message: str  # Body of the 429 answer


RATE_LIMIT_PROFILES: MappingProxyType[RateLimitProfileName, RateLimitProfile] = MappingProxyType({
    RateLimitProfileName.STRICT: RateLimitProfile(
        name=RateLimitProfileName.STRICT,
        max_requests=30,
        window_ms=60 * 1000,
        key_prefix="rate-limit-strict:",
        message="Too many requests, please try again in a minute.",
    ),
    RateLimitProfileName.MODERATE: RateLimitProfile(
        name=RateLimitProfileName.MODERATE,
        max_requests=100,
        window_ms=15 * 60 * 1000,
        key_prefix="rate-limit-moderate:",
        message="Rate limit exceeded, please try again later.",
    ),
    RateLimitProfileName.LENIENT: RateLimitProfile(
        name=RateLimitProfileName.LENIENT,
        max_requests=1000,
        window_ms=60 * 60 * 1000,
        key_prefix="rate-limit-lenient:",
        message="Hourly rate limit exceeded.",
    ),
    RateLimitProfileName.API: RateLimitProfile(
        name=RateLimitProfileName.API,
        max_requests=60,
        window_ms=60 * 1000,
        key_prefix="rate-limit-api:",
        message="API rate limit exceeded.",
    ),
})

# Route name -> profile. Routes missing here use DEFAULT_ROUTE_PROFILE.
ROUTE_PROFILES: MappingProxyType[str, RateLimitProfileName] = MappingProxyType({
    "rewards.calculate": RateLimitProfileName.API,
    "access.check": RateLimitProfileName.LENIENT,
    "access.next_level": RateLimitProfileName.LENIENT,
    "access.gate": RateLimitProfileName.MODERATE,
    "franchise.earnings": RateLimitProfileName.API,
    "franchise.level": RateLimitProfileName.LENIENT,
    "loyalty.coin_lock_quote": RateLimitProfileName.API,
    "reports.create": RateLimitProfileName.STRICT,
})

DEFAULT_ROUTE_PROFILE = RateLimitProfileName.MODERATE

# Routes never rate limited
EXEMPT_ROUTES = frozenset({"health", "readiness", "liveness"})


def get_profile(name: RateLimitProfileName | str) -> RateLimitProfile:
    """
    Get a rate limit profile by name.

    Raises:
        ValueError: If the name is not a known profile

    Example:
        >>> get_profile("strict").max_requests
        30
    """
    return RATE_LIMIT_PROFILES[RateLimitProfileName(name)]


def get_route_profile(route_name: str | None) -> RateLimitProfile | None:
    """
    Profile applied to a named route.

    Returns:
        RateLimitProfile, None for exempt routes
    """
    if route_name in EXEMPT_ROUTES:
        return None
    return RATE_LIMIT_PROFILES[ROUTE_PROFILES.get(route_name or "", DEFAULT_ROUTE_PROFILE)]
