"""
API Initialization - Services Module.

Module: services.py
Builds the counter store and the services that share it.
"""

from aiohttp import web
from loguru import logger

from app.config.settings import Settings
from app.services.moderation_service import ModerationService
from app.services.rate_limiter import (
    CounterStore,
    InMemoryCounterStore,
    RateLimiter,
    RedisCounterStore,
)
from app.utils.exceptions import DependencyUnavailableError
from app.utils.redis_utils import get_redis_client, get_redis_url_masked
from calculator.core.calculator import RewardCalculator


SETTINGS_KEY = web.AppKey("settings", Settings)
COUNTER_STORE_KEY = web.AppKey("counter_store", CounterStore)
RATE_LIMITER_KEY = web.AppKey("rate_limiter", RateLimiter)
MODERATION_KEY = web.AppKey("moderation_service", ModerationService)
CALCULATOR_KEY = web.AppKey("reward_calculator", RewardCalculator)


def create_counter_store(settings: Settings) -> CounterStore:
    """
    Create the counter store selected by settings.

    Returns:
        RedisCounterStore when Redis is enabled, InMemoryCounterStore otherwise
    """
    if not settings.redis_enabled:
        logger.warning(
            "Redis disabled: using in-memory counters "
            "(limits are per process)"
        )
        return InMemoryCounterStore()

    logger.info(f"Using Redis counter store at {get_redis_url_masked(settings)}")
    return RedisCounterStore(get_redis_client(settings))


def initialize_services(
    app: web.Application,
    settings: Settings,
    counter_store: CounterStore,
) -> None:
    """Register services on the application."""
    app[SETTINGS_KEY] = settings
    app[COUNTER_STORE_KEY] = counter_store
    app[RATE_LIMITER_KEY] = RateLimiter(counter_store)
    app[MODERATION_KEY] = ModerationService(
        counter_store,
        retention_seconds=settings.report_counter_ttl_seconds,
    )
    app[CALCULATOR_KEY] = RewardCalculator()


async def check_counter_store(app: web.Application) -> None:
    """Startup hook: log whether the counter store is reachable."""
    try:
        await app[COUNTER_STORE_KEY].ping()
        logger.info("Counter store connection established")
    except DependencyUnavailableError as e:
        logger.warning(
            f"Counter store unreachable at startup: {e.message}. "
            "Rate limiting runs in degraded mode until it recovers."
        )


async def close_counter_store(app: web.Application) -> None:
    """Cleanup hook: release counter store connections."""
    await app[COUNTER_STORE_KEY].close()
    logger.info("Counter store closed")
