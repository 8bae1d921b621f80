"""
Global Error Handler Middleware.

Translates exceptions into JSON error responses.
Clients get a safe message - never technical details.
"""

from collections.abc import Awaitable, Callable

from aiohttp import web
from loguru import logger

from app.utils.exceptions import EHBError


Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def error_response(status: int, message: str, **extra: object) -> web.Response:
    """Build the JSON error body shared by every endpoint."""
    return web.json_response(
        {"success": False, "error": message, **extra},
        status=status,
    )


def exception_response(request: web.Request, error: Exception) -> web.Response:
    """
    Translate an exception raised by a handler into a JSON error response.

    - aiohttp HTTP errors (unknown route, wrong method) keep their status
    - EHBError subclasses answer with their own status and message
    - anything else is logged with traceback and answered with 500

    Must be called while the exception is being handled.
    """
    if isinstance(error, web.HTTPException):
        return error_response(error.status, error.reason)

    if isinstance(error, EHBError):
        if error.status_code >= 500:
            logger.error(f"{request.method} {request.path} failed: {error.message}")
        else:
            logger.info(f"{request.method} {request.path} rejected ({error.status_code}): {error.message}")
        return error_response(error.status_code, error.message)

    logger.exception(f"Unhandled exception on {request.method} {request.path}: {error}")
    return error_response(500, EHBError.default_message)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Global error handler middleware."""
    try:
        return await handler(request)
    except web.HTTPException as e:
        if e.status < 400:
            raise
        return exception_response(request, e)
    except Exception as e:
        return exception_response(request, e)
