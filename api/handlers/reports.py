"""
Report handlers.

POST /api/reports/{kind}
"""

from aiohttp import web
from loguru import logger

from api.handlers.common import ok, read_json
from api.initialization.services import MODERATION_KEY
from app.config.business_constants import USER_ID_HEADER
from app.services.moderation_service import parse_report_kind
from app.utils.exceptions import UnauthorizedError
from app.validators import parse_report_request


async def create_report_handler(request: web.Request) -> web.Response:
    """Record a report against an ad or a video."""
    user_id = request.headers.get(USER_ID_HEADER, "").strip()
    if not user_id:
        raise UnauthorizedError()

    kind = parse_report_kind(request.match_info["kind"])
    report = parse_report_request(await read_json(request))

    outcome = await request.app[MODERATION_KEY].record_report(
        kind,
        report.target_id,
        franchise_id=report.franchise_id,
    )
    logger.info(
        f"User {user_id} reported {kind.value}/{report.target_id} "
        f"({report.report_type}): {report.reason[:100]}"
    )

    return ok(
        {
            "targetId": outcome.target_id,
            "pendingReports": outcome.pending_reports,
            "status": outcome.status,
        },
        key="report",
    )


def setup_routes(app: web.Application) -> None:
    app.router.add_post("/api/reports/{kind}", create_report_handler, name="reports.create")
