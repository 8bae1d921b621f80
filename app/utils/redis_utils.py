"""Redis connection utilities.

Provides helper functions for creating Redis connections with configuration
from settings to avoid code duplication.
"""

import redis.asyncio as redis

from app.config.settings import Settings, settings as default_settings


def get_redis_client(config: Settings | None = None) -> redis.Redis:
    """
    Create and return a Redis client with settings from config.

    The client connects lazily on the first command.

    Args:
        config: Settings to use, defaults to the global settings

    Returns:
        redis.Redis: Configured Redis client with decode_responses=True

    Example:
        >>> redis_client = get_redis_client()
        >>> await redis_client.incr("key")
        >>> await redis_client.aclose()
    """
    config = config or default_settings
    return redis.Redis(
        host=config.redis_host,
        port=config.redis_port,
        password=config.redis_password,
        db=config.redis_db,
        socket_timeout=config.redis_socket_timeout,
        socket_connect_timeout=config.redis_socket_timeout,
        decode_responses=True,
    )


def get_redis_url_masked(config: Settings | None = None) -> str:
    """
    Build Redis URL with masked password for safe logging.

    Example:
        >>> url = get_redis_url_masked()
        >>> # Returns: "redis://:****@localhost:6379/0"
    """
    config = config or default_settings
    if config.redis_password:
        return f"redis://:****@{config.redis_host}:{config.redis_port}/{config.redis_db}"
    return f"redis://{config.redis_host}:{config.redis_port}/{config.redis_db}"
