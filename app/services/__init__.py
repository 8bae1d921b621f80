"""
Services.

Stateful layer around the pure calculator: rate limiting and report
moderation over a shared counter store.
"""

from app.services.moderation_service import ModerationService, ReportOutcome
from app.services.rate_limiter import (
    CounterSnapshot,
    CounterStore,
    InMemoryCounterStore,
    RateLimitDecision,
    RateLimiter,
    RedisCounterStore,
)


__all__ = [
    "ModerationService",
    "ReportOutcome",
    "CounterSnapshot",
    "CounterStore",
    "InMemoryCounterStore",
    "RedisCounterStore",
    "RateLimitDecision",
    "RateLimiter",
]
