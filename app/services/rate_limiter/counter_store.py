"""
Counter stores for fixed-window counters.

A counter store atomically creates, increments and expires a counter in
one call. The Redis store is shared across processes; the in-memory
store serves single-process deployments and tests.
"""

import asyncio
import time
from collections.abc import Callable
from typing import NamedTuple, Protocol

import redis.asyncio as redis
from loguru import logger

from app.utils.exceptions import STORE_ERRORS, DependencyUnavailableError


class CounterSnapshot(NamedTuple):
    """Counter value right after an increment."""

    count: int
    ttl_ms: int  # Time left in the current window


class CounterStore(Protocol):
    """Storage for expiring counters."""

    async def increment(self, key: str, window_ms: int) -> CounterSnapshot:
        """
        Increment a counter, creating it with a window_ms expiry if absent.

        Raises:
            DependencyUnavailableError: If the store cannot be reached
        """
        ...

    async def ping(self) -> bool:
        """Check the store is reachable."""
        ...

    async def close(self) -> None:
        """Release store connections."""
        ...


class RedisCounterStore:
    """
    Redis-backed counter store.

    Uses one MULTI/EXEC round trip: SET NX with the window expiry, INCR,
    then PTTL. The counter therefore never exists without an expiry.
    """

    def __init__(self, redis_client: redis.Redis) -> None:
        """
        Initialize store.

        Args:
            redis_client: Async Redis client
        """
        self.redis_client = redis_client

    async def increment(self, key: str, window_ms: int) -> CounterSnapshot:
        try:
            async with self.redis_client.pipeline(transaction=True) as pipe:
                pipe.set(key, 0, px=window_ms, nx=True)
                pipe.incr(key)
                pipe.pttl(key)
                _, count, ttl_ms = await pipe.execute()

            if ttl_ms < 0:
                # Key lost its expiry outside this store
                await self.redis_client.pexpire(key, window_ms)
                ttl_ms = window_ms

            return CounterSnapshot(count=int(count), ttl_ms=int(ttl_ms))

        except STORE_ERRORS as e:
            raise DependencyUnavailableError(
                f"Counter store unavailable: {type(e).__name__}"
            ) from e

    async def ping(self) -> bool:
        try:
            return bool(await self.redis_client.ping())
        except STORE_ERRORS as e:
            raise DependencyUnavailableError(
                f"Counter store unavailable: {type(e).__name__}"
            ) from e

    async def close(self) -> None:
        try:
            await self.redis_client.aclose()
        except STORE_ERRORS as e:
            logger.warning(f"Error closing Redis client: {type(e).__name__}: {e}")


class InMemoryCounterStore:
    """
    Process-local counter store.

    Expired counters are swept once the number of keys reaches
    sweep_threshold. The threshold then follows the number of live keys.

    Args:
        clock: Monotonic clock in seconds, injectable for tests
        sweep_threshold: Key count that triggers a sweep of expired counters
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sweep_threshold: int = 10_000,
    ) -> None:
        self._clock = clock
        self._lock = asyncio.Lock()
        self._sweep_threshold = sweep_threshold
        self._next_sweep = sweep_threshold
        # key -> (count, expires_at_ms)
        self._counters: dict[str, tuple[int, float]] = {}

    @property
    def key_count(self) -> int:
        """Number of counters currently held, expired ones included."""
        return len(self._counters)

    def _now_ms(self) -> float:
        return self._clock() * 1000

    async def increment(self, key: str, window_ms: int) -> CounterSnapshot:
        async with self._lock:
            now = self._now_ms()
            count, expires_at = self._counters.get(key, (0, 0.0))

            if expires_at <= now:
                count, expires_at = 0, now + window_ms

            count += 1
            self._counters[key] = (count, expires_at)

            if len(self._counters) >= self._next_sweep:
                removed = self.purge_expired()
                self._next_sweep = max(self._sweep_threshold, 2 * len(self._counters))
                logger.debug(f"Swept {removed} expired counters, {len(self._counters)} live")

            return CounterSnapshot(count=count, ttl_ms=int(expires_at - now))

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        async with self._lock:
            self._counters.clear()

    def purge_expired(self) -> int:
        """
        Drop expired counters.

        Returns:
            Number of counters removed
        """
        now = self._now_ms()
        expired = [key for key, (_, expires_at) in self._counters.items() if expires_at <= now]
        for key in expired:
            del self._counters[key]
        return len(expired)
