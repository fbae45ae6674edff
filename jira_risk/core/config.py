"""Central configuration, scoring constants, and shared risk category definitions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

# =============================================================================
# Jira Connection Settings
# =============================================================================
JIRA_DEFAULT_SERVER = "https://example.atlassian.net"
JIRA_REST_API_VERSION = "3"
COMMENT_PAGE_SIZE = 100

# Fields requested when fetching a single issue for risk assessment
JIRA_FETCH_BASE_FIELDS: Sequence[str] = (
    "summary",
    "description",
    "assignee",
    "reporter",
    "priority",
    "status",
    "issuetype",
    "labels",
    "issuelinks",
)

# =============================================================================
# Risk Categories
# =============================================================================
# Canonical merge order for category results. Risk items in the final
# assessment are concatenated in exactly this order.
RISK_CATEGORY_ORDER: Sequence[str] = (
    "technical",
    "dependency",
    "timeline",
    "knowledge",
    "information",
)

DEFAULT_RISK_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "technical": 0.25,
        "dependency": 0.20,
        "timeline": 0.20,
        "knowledge": 0.15,
        "information": 0.20,
    }
)

# Weights summing to 1 within this tolerance are used without normalization
WEIGHT_SUM_TOLERANCE: float = 0.001

# =============================================================================
# Score Bounds
# =============================================================================
MIN_RISK_SCORE: int = 1
MAX_RISK_SCORE: int = 10
BASE_CATEGORY_SCORE: int = 1

# =============================================================================
# Severity Tiers
# =============================================================================
# Severity is derived from the number of indicators found by one detection:
#   0-2 -> low, 3-5 -> medium, 6+ -> high
SEVERITY_MEDIUM_MIN: int = 3
SEVERITY_HIGH_MIN: int = 6

# Per-detection contribution to the technical score
TECHNICAL_SEVERITY_POINTS: Mapping[str, float] = MappingProxyType(
    {
        "high": 2.25,
        "medium": 1.5,
        "low": 0.75,
    }
)

# Shared ladder used by the dependency, timeline, knowledge and information
# text checks
LADDER_SEVERITY_POINTS: Mapping[str, int] = MappingProxyType(
    {
        "high": 3,
        "medium": 2,
        "low": 1,
    }
)

# =============================================================================
# Prior-result thresholds
# =============================================================================
VERY_COMPLEX_LEVEL = "very complex"

MAX_BLOCKER_SCORE: int = 4
MAX_EXTERNAL_DEPENDENCY_SCORE: int = 3
MAX_SPRINT_REASSIGNMENT_SCORE: int = 4
MAX_BLOCKED_TIME_SCORE: int = 3
BLOCKED_DAYS_THRESHOLD: float = 3
LOW_COMPLETENESS_THRESHOLD: float = 5
MODERATE_COMPLETENESS_THRESHOLD: float = 7
MAX_MISSING_INFORMATION_ITEMS: int = 3
MAX_COMPLETENESS_SUGGESTIONS: int = 2

# =============================================================================
# Presentation
# =============================================================================
# Overall score bands used for tabular summaries
RISK_LEVEL_BANDS: Sequence[tuple[str, int, int]] = (
    ("low", 1, 3),
    ("medium", 4, 6),
    ("high", 7, 10),
)


@dataclass(slots=True)
class AppSettings:
    # Values above 1 run the five category analyzers on a thread pool
    analyzer_max_workers: int = 1
    include_keyword_suggestions: bool = False
    max_table_rows: int = 1000


SETTINGS = AppSettings()
