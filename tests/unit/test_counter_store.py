"""
Unit tests for counter stores.

Tests cover:
- In-memory fixed windows and expiry
- Redis pipeline commands and error translation
"""

import asyncio

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from app.services.rate_limiter import (
    CounterSnapshot,
    InMemoryCounterStore,
    RedisCounterStore,
)
from app.utils.exceptions import DependencyUnavailableError


class TestInMemoryCounterStore:
    """Tests for InMemoryCounterStore."""

    @pytest.mark.asyncio
    async def test_first_increment_opens_window(self, memory_store: InMemoryCounterStore) -> None:
        snapshot = await memory_store.increment("k", 60_000)
        assert snapshot == CounterSnapshot(count=1, ttl_ms=60_000)

    @pytest.mark.asyncio
    async def test_increments_within_window(self, memory_store: InMemoryCounterStore, clock) -> None:
        await memory_store.increment("k", 60_000)
        clock.advance(10)
        snapshot = await memory_store.increment("k", 60_000)

        assert snapshot.count == 2
        assert snapshot.ttl_ms == 50_000

    @pytest.mark.asyncio
    async def test_window_expiry_restarts_count(self, memory_store: InMemoryCounterStore, clock) -> None:
        await memory_store.increment("k", 60_000)
        await memory_store.increment("k", 60_000)
        clock.advance(60)

        snapshot = await memory_store.increment("k", 60_000)
        assert snapshot.count == 1

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, memory_store: InMemoryCounterStore) -> None:
        await memory_store.increment("a", 60_000)
        snapshot = await memory_store.increment("b", 60_000)
        assert snapshot.count == 1

    @pytest.mark.asyncio
    async def test_concurrent_increments_are_counted_once_each(
        self, memory_store: InMemoryCounterStore
    ) -> None:
        """Each concurrent increment sees a distinct count."""
        snapshots = await asyncio.gather(
            *(memory_store.increment("k", 60_000) for _ in range(50))
        )
        assert sorted(s.count for s in snapshots) == list(range(1, 51))

    @pytest.mark.asyncio
    async def test_purge_expired(self, memory_store: InMemoryCounterStore, clock) -> None:
        await memory_store.increment("short", 1_000)
        await memory_store.increment("long", 60_000)
        clock.advance(2)

        assert memory_store.purge_expired() == 1

    @pytest.mark.asyncio
    async def test_expired_counters_swept_on_increment(self, clock) -> None:
        """Stale keys are dropped once the key count reaches the threshold."""
        store = InMemoryCounterStore(clock=clock, sweep_threshold=3)
        await store.increment("a", 1_000)
        await store.increment("b", 1_000)
        clock.advance(2)

        await store.increment("c", 60_000)

        assert store.key_count == 1
        assert (await store.increment("a", 1_000)).count == 1

    @pytest.mark.asyncio
    async def test_sweep_threshold_follows_live_keys(self, clock) -> None:
        """Live keys are never dropped and do not trigger a sweep per call."""
        store = InMemoryCounterStore(clock=clock, sweep_threshold=2)
        for key in ("a", "b", "c", "d"):
            await store.increment(key, 60_000)

        assert store.key_count == 4
        assert (await store.increment("a", 60_000)).count == 2

    @pytest.mark.asyncio
    async def test_ping(self, memory_store: InMemoryCounterStore) -> None:
        assert await memory_store.ping() is True


class TestRedisCounterStore:
    """Tests for RedisCounterStore with a mocked client."""

    @pytest.mark.asyncio
    async def test_increment_uses_one_transaction(self, mock_redis_client) -> None:
        mock_redis_client.pipe.execute.return_value = [True, 1, 60_000]
        store = RedisCounterStore(mock_redis_client)

        snapshot = await store.increment("rate-limit-api:ip:1.2.3.4", 60_000)

        assert snapshot == CounterSnapshot(count=1, ttl_ms=60_000)
        mock_redis_client.pipeline.assert_called_once_with(transaction=True)
        mock_redis_client.pipe.set.assert_called_once_with(
            "rate-limit-api:ip:1.2.3.4", 0, px=60_000, nx=True
        )
        mock_redis_client.pipe.incr.assert_called_once_with("rate-limit-api:ip:1.2.3.4")
        mock_redis_client.pipe.pttl.assert_called_once_with("rate-limit-api:ip:1.2.3.4")

    @pytest.mark.asyncio
    async def test_existing_counter(self, mock_redis_client) -> None:
        mock_redis_client.pipe.execute.return_value = [None, 7, 12_345]
        store = RedisCounterStore(mock_redis_client)

        snapshot = await store.increment("k", 60_000)
        assert snapshot == CounterSnapshot(count=7, ttl_ms=12_345)
        mock_redis_client.pexpire.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_expiry_is_restored(self, mock_redis_client) -> None:
        mock_redis_client.pipe.execute.return_value = [None, 3, -1]
        store = RedisCounterStore(mock_redis_client)

        snapshot = await store.increment("k", 60_000)

        assert snapshot.ttl_ms == 60_000
        mock_redis_client.pexpire.assert_awaited_once_with("k", 60_000)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [RedisConnectionError("down"), RedisTimeoutError("slow"), ConnectionRefusedError()],
    )
    async def test_store_errors_become_dependency_unavailable(self, mock_redis_client, error) -> None:
        mock_redis_client.pipe.execute.side_effect = error
        store = RedisCounterStore(mock_redis_client)

        with pytest.raises(DependencyUnavailableError) as exc_info:
            await store.increment("k", 60_000)
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_ping_failure(self, mock_redis_client) -> None:
        mock_redis_client.ping.side_effect = RedisConnectionError("down")
        store = RedisCounterStore(mock_redis_client)

        with pytest.raises(DependencyUnavailableError):
            await store.ping()

    @pytest.mark.asyncio
    async def test_close(self, mock_redis_client) -> None:
        store = RedisCounterStore(mock_redis_client)
        await store.close()
        mock_redis_client.aclose.assert_awaited_once()
