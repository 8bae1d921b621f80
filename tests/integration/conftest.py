"""Shared fixtures for API integration tests."""

import pytest_asyncio
from aiohttp.test_utils import TestClient, TestServer

from api.main import create_app


@pytest_asyncio.fixture
async def api_client(test_settings, memory_store):
    """
    Test client for the API with the in-memory counter store.

    Yields:
        TestClient: aiohttp test client
    """
    app = create_app(test_settings, counter_store=memory_store)
    async with TestClient(TestServer(app)) as client:
        yield client


@pytest_asyncio.fixture
async def unlimited_client(test_settings, memory_store):
    """Test client with rate limiting disabled."""
    settings = test_settings.model_copy(update={"rate_limit_enabled": False})
    app = create_app(settings, counter_store=memory_store)
    async with TestClient(TestServer(app)) as client:
        yield client
