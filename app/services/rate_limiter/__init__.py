"""
Rate limiter service.

Fixed-window counters backed by Redis or process memory.
"""

from app.services.rate_limiter.counter_store import (
    CounterSnapshot,
    CounterStore,
    InMemoryCounterStore,
    RedisCounterStore,
)
from app.services.rate_limiter.limiter import RateLimitDecision, RateLimiter


__all__ = [
    "CounterSnapshot",
    "CounterStore",
    "InMemoryCounterStore",
    "RedisCounterStore",
    "RateLimitDecision",
    "RateLimiter",
]
