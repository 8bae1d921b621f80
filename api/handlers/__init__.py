"""
Handlers.

API route handlers.
"""

from aiohttp import web

from api.handlers import access, franchise, health, reports, rewards


def register_all_handlers(app: web.Application) -> None:
    """Register every route on the application."""
    for module in (health, rewards, access, franchise, reports):
        module.setup_routes(app)


__all__ = ["register_all_handlers"]
