"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for tests: no Redis, no production checks
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.config.settings import Settings
from app.services.rate_limiter import InMemoryCounterStore


class FakeClock:
    """Controllable clock returning seconds."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Controllable clock shared by stores and limiters."""
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """In-memory counter store driven by the fake clock."""
    return InMemoryCounterStore(clock=clock)


@pytest.fixture
def test_settings():
    """Settings for tests, independent of the environment."""
    return Settings(
        _env_file=None,
        environment="test",
        redis_enabled=False,
        rate_limit_enabled=True,
        log_file="logs/test.log",
    )


@pytest.fixture
def sample_wallet_address():
    """Sample valid EVM wallet address for testing."""
    return "0x742d35cc6634c0532925a3b844bc454e4438f44e"


@pytest.fixture
def mock_redis_client():
    """
    Mock Redis client for counter store tests.

    pipeline() works as an async context manager; configure
    client.pipe.execute.return_value with [set_result, count, pttl].
    """
    client = AsyncMock()

    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[True, 1, 60_000])

    pipeline_cm = MagicMock()
    pipeline_cm.__aenter__ = AsyncMock(return_value=pipe)
    pipeline_cm.__aexit__ = AsyncMock(return_value=False)

    client.pipeline = MagicMock(return_value=pipeline_cm)
    client.pipe = pipe
    client.pexpire = AsyncMock(return_value=True)
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client
