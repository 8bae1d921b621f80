"""
Access handlers.

POST /api/access/check
GET  /api/access/next-level/{level}
POST /api/access/gates/{gate}
"""

from aiohttp import web

from api.handlers.common import ok, read_json
from app.validators import parse_access_check, parse_access_state
from app.validators.common import require_sql_level
from calculator.core.access import can_access, evaluate_gate, get_gate, next_level


async def check_access_handler(request: web.Request) -> web.Response:
    """Compare a user tier with a required tier."""
    check = parse_access_check(await read_json(request))
    return ok({"allowed": can_access(check.user_level, check.required_level)})


async def next_level_handler(request: web.Request) -> web.Response:
    """Return the tier above the given one, null at the top."""
    current = require_sql_level(request.match_info["level"], "level")
    upcoming = next_level(current)
    return ok({
        "currentLevel": current.value,
        "nextLevel": upcoming.value if upcoming else None,
    })


async def evaluate_gate_handler(request: web.Request) -> web.Response:
    """Evaluate a named access gate against the caller state."""
    gate = get_gate(request.match_info["gate"])
    state = parse_access_state(await read_json(request))
    decision = evaluate_gate(gate, state)
    return ok({
        "gate": decision.gate,
        "passed": decision.passed,
        "reasons": list(decision.reasons),
    })


def setup_routes(app: web.Application) -> None:
    app.router.add_post("/api/access/check", check_access_handler, name="access.check")
    app.router.add_get(
        "/api/access/next-level/{level}", next_level_handler, name="access.next_level"
    )
    app.router.add_post(
        "/api/access/gates/{gate}", evaluate_gate_handler, name="access.gate"
    )
