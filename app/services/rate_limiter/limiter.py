"""
Fixed-window rate limiter.

One counter per (profile, client key). The limiter fails open: when the
counter store is unreachable requests are allowed and the decision is
marked degraded.
"""

import math
import time
from collections.abc import Callable, Mapping
from typing import NamedTuple

from loguru import logger

from app.config.rate_limits import (
    RATE_LIMIT_PROFILES,
    RateLimitProfile,
    RateLimitProfileName,
)
from app.services.rate_limiter.counter_store import CounterStore
from app.utils.exceptions import DependencyUnavailableError


class RateLimitDecision(NamedTuple):
    """Outcome of a rate limit check."""

    allowed: bool
    limit: int
    remaining: int
    reset_at: int  # Window end, epoch seconds
    retry_after: int  # Seconds, 0 when allowed
    degraded: bool = False  # Counter store was unreachable


class RateLimiter:
    """Rate limiter over a shared counter store."""

    def __init__(
        self,
        store: CounterStore,
        profiles: Mapping[RateLimitProfileName, RateLimitProfile] = RATE_LIMIT_PROFILES,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize rate limiter.

        Args:
            store: Counter store
            profiles: Profiles by name
            wall_clock: Epoch clock used for reset timestamps
        """
        self.store = store
        self.profiles = profiles
        self._wall_clock = wall_clock

    def resolve_profile(
        self, profile: RateLimitProfile | RateLimitProfileName | str
    ) -> RateLimitProfile:
        """Resolve a profile or profile name."""
        if isinstance(profile, RateLimitProfile):
            return profile
        return self.profiles[RateLimitProfileName(profile)]

    async def check(
        self,
        client_key: str,
        profile: RateLimitProfile | RateLimitProfileName | str,
    ) -> RateLimitDecision:
        """
        Count a request and decide whether it is allowed.

        Args:
            client_key: Caller identity (user id or remote address)
            profile: Profile or profile name

        Returns:
            RateLimitDecision

        Example:
            >>> limiter = RateLimiter(InMemoryCounterStore())
            >>> decision = await limiter.check("10.0.0.1", "strict")
            >>> decision.allowed, decision.remaining
            (True, 29)
        """
        profile = self.resolve_profile(profile)
        key = f"{profile.key_prefix}{client_key}"
        now = self._wall_clock()

        try:
            snapshot = await self.store.increment(key, profile.window_ms)
        except DependencyUnavailableError as e:
            logger.warning(
                f"Rate limit store error for {key}: {e.message}. "
                "Allowing request (degraded mode)."
            )
            return RateLimitDecision(
                allowed=True,
                limit=profile.max_requests,
                remaining=profile.max_requests,
                reset_at=math.ceil(now + profile.window_ms / 1000),
                retry_after=0,
                degraded=True,
            )

        allowed = snapshot.count <= profile.max_requests
        ttl_seconds = snapshot.ttl_ms / 1000
        decision = RateLimitDecision(
            allowed=allowed,
            limit=profile.max_requests,
            remaining=max(0, profile.max_requests - snapshot.count),
            reset_at=math.ceil(now + ttl_seconds),
            retry_after=0 if allowed else max(1, math.ceil(ttl_seconds)),
        )

        if not allowed:
            logger.info(
                f"RATE LIMIT: {client_key} exceeded {profile.name.value} "
                f"limit ({snapshot.count}/{profile.max_requests})"
            )

        return decision
