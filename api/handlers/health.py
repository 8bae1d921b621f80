"""
Health check handlers.

Provides HTTP endpoints for health checks and monitoring.
"""

from aiohttp import web
from loguru import logger

from api.initialization.services import COUNTER_STORE_KEY, SETTINGS_KEY
from app.utils.exceptions import DependencyUnavailableError
from calculator import __version__


async def health_handler(request: web.Request) -> web.Response:
    """
    Health check endpoint.

    Returns:
        JSON response with service and counter store status
    """
    settings = request.app[SETTINGS_KEY]
    try:
        store_ok = await request.app[COUNTER_STORE_KEY].ping()
    except DependencyUnavailableError as e:
        logger.warning(f"Health check: {e.message}")
        store_ok = False

    return web.json_response(
        {
            # Counter store outage degrades rate limiting only
            "status": "healthy" if store_ok else "degraded",
            "version": __version__,
            "environment": settings.environment,
            "counter_store": "ok" if store_ok else "unavailable",
            "rate_limit_enabled": settings.rate_limit_enabled,
        }
    )


async def readiness_handler(request: web.Request) -> web.Response:
    """
    Readiness check endpoint.

    Returns:
        JSON response indicating if the counter store can serve traffic
    """
    try:
        await request.app[COUNTER_STORE_KEY].ping()
    except DependencyUnavailableError:
        return web.json_response(
            {
                "status": "not_ready",
                "ready": False,
            },
            status=503,
        )

    return web.json_response(
        {
            "status": "ready",
            "ready": True,
        }
    )


async def liveness_handler(request: web.Request) -> web.Response:
    """
    Liveness check endpoint.

    Returns:
        JSON response indicating if the process is alive
    """
    return web.json_response(
        {
            "status": "alive",
            "alive": True,
        }
    )


def setup_routes(app: web.Application) -> None:
    app.router.add_get("/health", health_handler, name="health")
    app.router.add_get("/readiness", readiness_handler, name="readiness")
    app.router.add_get("/liveness", liveness_handler, name="liveness")
