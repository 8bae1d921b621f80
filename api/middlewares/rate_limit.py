"""
Rate Limit Middleware.

Counts every request against the profile of its route and answers 429
once the window is exhausted.
"""

from aiohttp import web

from api.initialization.services import RATE_LIMITER_KEY, SETTINGS_KEY
from api.middlewares.error_handler import Handler, error_response, exception_response
from app.config.business_constants import USER_ID_HEADER
from app.config.rate_limits import get_route_profile
from app.services.rate_limiter import RateLimitDecision


def get_client_key(request: web.Request, trust_user_id_header: bool = False) -> str:
    """
    Identify the caller.

    X-User-Id is client controlled unless an upstream gateway sets it, so
    it only selects the bucket when trust_user_id_header is enabled.
    Otherwise callers are keyed by remote address.
    """
    user_id = request.headers.get(USER_ID_HEADER, "").strip() if trust_user_id_header else ""
    if user_id:
        return f"user:{user_id}"
    return f"ip:{request.remote or 'unknown'}"


def rate_limit_headers(decision: RateLimitDecision) -> dict[str, str]:
    """X-RateLimit-* headers for a decision."""
    return {
        "X-RateLimit-Limit": str(decision.limit),
        "X-RateLimit-Remaining": str(decision.remaining),
        "X-RateLimit-Reset": str(decision.reset_at),
    }


@web.middleware
async def rate_limit_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Apply the route's rate limit profile."""
    settings = request.app[SETTINGS_KEY]
    if not settings.rate_limit_enabled:
        return await handler(request)

    profile = get_route_profile(request.match_info.route.name)
    if profile is None:
        return await handler(request)

    client_key = get_client_key(request, settings.trust_user_id_header)
    decision = await request.app[RATE_LIMITER_KEY].check(client_key, profile)
    headers = rate_limit_headers(decision)

    if not decision.allowed:
        response = error_response(429, profile.message, retryAfter=decision.retry_after)
        response.headers.update(headers)
        response.headers["Retry-After"] = str(decision.retry_after)
        return response

    # Error responses carry the headers too
    try:
        response = await handler(request)
    except web.HTTPException as e:
        if e.status < 400:
            e.headers.update(headers)
            raise
        response = exception_response(request, e)
    except Exception as e:
        response = exception_response(request, e)

    response.headers.update(headers)
    return response
