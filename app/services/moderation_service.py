"""
Moderation service.

Counts pending reports against ads and videos and flags an item for
review when its report count reaches the kind's threshold.
"""

from typing import NamedTuple

from loguru import logger

from app.config.business_constants import (
    REPORT_KEY_PREFIXES,
    REPORT_REVIEW_THRESHOLDS,
    REPORT_STATUS_PENDING,
    REPORT_STATUS_UNDER_REVIEW,
    ReportKind,
)
from app.services.rate_limiter.counter_store import CounterStore
from app.utils.exceptions import InvalidInputError, NotFoundError


class ReportOutcome(NamedTuple):
    """State of a reported item after a report is recorded."""

    target_id: str
    pending_reports: int
    under_review: bool
    newly_flagged: bool  # This report crossed the threshold

    @property
    def status(self) -> str:
        return REPORT_STATUS_UNDER_REVIEW if self.under_review else REPORT_STATUS_PENDING


def parse_report_kind(kind: ReportKind | str) -> ReportKind:
    """
    Resolve a report kind from a path segment.

    Raises:
        NotFoundError: If the kind is not reportable
    """
    try:
        return ReportKind(kind)
    except ValueError:
        raise NotFoundError(f"Unknown report target: {kind}") from None


class ModerationService:
    """Report counting and review flagging."""

    def __init__(self, store: CounterStore, retention_seconds: int) -> None:
        """
        Initialize moderation service.

        Args:
            store: Counter store holding pending report counts
            retention_seconds: How long a pending count is kept
        """
        self.store = store
        self.retention_ms = retention_seconds * 1000

    async def record_report(
        self,
        kind: ReportKind | str,
        target_id: str,
        franchise_id: str | None = None,
    ) -> ReportOutcome:
        """
        Record a report against an item.

        The count is incremented atomically in the counter store, so
        exactly one report observes the threshold being reached.

        Args:
            kind: ads or videos
            target_id: Reported item id
            franchise_id: Franchise owning the item, notified when given

        Returns:
            ReportOutcome

        Raises:
            NotFoundError: Unknown kind
            InvalidInputError: Empty target id
            DependencyUnavailableError: Counter store unreachable
        """
        report_kind = parse_report_kind(kind)
        if not target_id:
            raise InvalidInputError("targetId")

        threshold = REPORT_REVIEW_THRESHOLDS[report_kind]
        key = f"{REPORT_KEY_PREFIXES[report_kind]}{target_id}"

        snapshot = await self.store.increment(key, self.retention_ms)

        outcome = ReportOutcome(
            target_id=target_id,
            pending_reports=snapshot.count,
            under_review=snapshot.count >= threshold,
            newly_flagged=snapshot.count == threshold,
        )

        logger.info(
            f"Report recorded: {report_kind.value}/{target_id} "
            f"pending={outcome.pending_reports} status={outcome.status}"
        )

        if outcome.newly_flagged:
            logger.warning(
                f"{report_kind.value}/{target_id} flagged for review "
                f"after {threshold} reports"
            )

        if franchise_id:
            self.notify_franchise(franchise_id, report_kind, outcome)

        return outcome

    def notify_franchise(
        self,
        franchise_id: str,
        kind: ReportKind,
        outcome: ReportOutcome,
    ) -> None:
        """Notify the owning franchise about a report."""
        logger.info(
            f"Franchise {franchise_id} notified: {kind.value}/{outcome.target_id} "
            f"reported ({outcome.pending_reports} pending, {outcome.status})"
        )
