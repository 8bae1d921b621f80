"""
Business logic constants for the rules service.

Central location for business rules used by the moderation service and
the HTTP handlers without circular dependencies.
"""

from enum import Enum
from types import MappingProxyType


class ReportKind(str, Enum):
    """Content kinds that can be reported."""

    ADS = "ads"
    VIDEOS = "videos"


# Pending reports that put an item under review
REPORT_REVIEW_THRESHOLDS: MappingProxyType[ReportKind, int] = MappingProxyType({
    ReportKind.ADS: 3,
    ReportKind.VIDEOS: 5,
})

# Counter key namespace per kind
REPORT_KEY_PREFIXES: MappingProxyType[ReportKind, str] = MappingProxyType({
    ReportKind.ADS: "reports:ads:",
    ReportKind.VIDEOS: "reports:videos:",
})

REPORT_STATUS_PENDING = "PENDING"
REPORT_STATUS_UNDER_REVIEW = "UNDER_REVIEW"

# Header carrying the caller identity set by the upstream gateway
USER_ID_HEADER = "X-User-Id"
