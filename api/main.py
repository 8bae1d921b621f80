"""
API main entry point.

Builds and runs the aiohttp application serving the tier rules.
"""

from aiohttp import web
from loguru import logger

from api.handlers import register_all_handlers
from api.initialization.logging import setup_logging
from api.initialization.services import (
    check_counter_store,
    close_counter_store,
    create_counter_store,
    initialize_services,
)
from api.middlewares import error_middleware, rate_limit_middleware
from app.config.settings import Settings, settings as default_settings
from app.services.rate_limiter import CounterStore


def create_app(
    settings: Settings | None = None,
    counter_store: CounterStore | None = None,
) -> web.Application:
    """
    Create the API application.

    Args:
        settings: Settings, defaults to the global settings
        counter_store: Counter store, built from settings when omitted

    Returns:
        Configured aiohttp application
    """
    settings = settings or default_settings
    if counter_store is None:
        counter_store = create_counter_store(settings)

    app = web.Application(middlewares=[error_middleware, rate_limit_middleware])
    initialize_services(app, settings, counter_store)
    register_all_handlers(app)

    app.on_startup.append(check_counter_store)
    app.on_cleanup.append(close_counter_store)

    return app


def main() -> None:
    """Set up logging and run the API server."""
    settings = default_settings
    setup_logging(settings)

    app = create_app(settings)

    logger.info(f"API server starting on {settings.http_host}:{settings.http_port}")
    web.run_app(
        app,
        host=settings.http_host,
        port=settings.http_port,
        print=None,
    )


if __name__ == "__main__":
    main()
