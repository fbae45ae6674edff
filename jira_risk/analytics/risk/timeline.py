"""Timeline risk: deadline / estimation language and prior duration assessment signals."""

from __future__ import annotations

import math
from collections.abc import Sequence

from jira_risk.core.config import (
    BLOCKED_DAYS_THRESHOLD,
    MAX_BLOCKED_TIME_SCORE,
    MAX_SPRINT_REASSIGNMENT_SCORE,
)
from jira_risk.core.models import (
    CommentModel,
    DurationAssessment,
    IssueModel,
    PreviousAnalysisResults,
    RiskCategoryResult,
)
from jira_risk.core.text import build_analysis_text, extract_comments_text

from .indicators import detect_risk_indicators
from .mitigation import MITIGATION_SUGGESTIONS
from .patterns import ESTIMATION_PATTERNS, TIMELINE_PATTERNS, RiskCategory
from .scoring import Contribution, LadderPolicy, apply_severity_ladder, combine

TIMELINE_POLICY = LadderPolicy(
    prefix="Timeline constraint: ",
    high_suggestions=(
        MITIGATION_SUGGESTIONS["timeline_risk"],
        "Identify critical path tasks and prioritize accordingly",
    ),
    medium_suggestion="Create detailed timeline with key milestones and dependencies",
)

ESTIMATION_POLICY = LadderPolicy(
    prefix="Estimation concern: ",
    high_suggestions=(
        MITIGATION_SUGGESTIONS["estimation_risk"],
        "Add buffer time to absorb estimation uncertainty",
    ),
    medium_suggestion="Consider re-estimation with team input",
)


# ------------------ Duration checks ------------------
def check_sprint_boundary(duration: DurationAssessment) -> Contribution:
    if not duration.exceeds_sprint:
        return Contribution()
    return Contribution(
        score=2,
        risk_items=["Issue likely to exceed sprint boundary"],
        mitigation_suggestions=[MITIGATION_SUGGESTIONS["sprint_boundary"]],
    )


def check_sprint_reassignments(duration: DurationAssessment) -> Contribution:
    count = duration.sprint_reassignments or 0
    if count <= 1:
        return Contribution()
    return Contribution(
        score=min(count, MAX_SPRINT_REASSIGNMENT_SCORE),
        risk_items=[f"Issue has been reassigned across sprints {count} times"],
        mitigation_suggestions=["Review scope and possibly break down into smaller tasks"],
    )


def check_status_cycling(duration: DurationAssessment) -> Contribution:
    cycling = duration.status_cycling
    if cycling is None or cycling.total_revisits <= 1:
        return Contribution()
    return Contribution(
        score=2,
        risk_items=[f"Issue has cycled through statuses {cycling.total_revisits} times"],
        mitigation_suggestions=["Ensure clear definition of done for each stage to avoid rework"],
    )


def check_blocked_time(duration: DurationAssessment) -> Contribution:
    blocked = duration.blocked_time
    if blocked is None or blocked.total_days <= BLOCKED_DAYS_THRESHOLD:
        return Contribution()
    days = blocked.total_days
    return Contribution(
        score=min(math.floor(days / 2), MAX_BLOCKED_TIME_SCORE),
        risk_items=[f"Issue has been blocked for {int(math.floor(days + 0.5))} days"],
    )


def check_duration_anomalies(duration: DurationAssessment) -> Contribution:
    if not duration.anomalies:
        return Contribution()
    return Contribution(score=1, risk_items=[f"Duration anomalies detected: {duration.anomalies[0]}"])


DURATION_CHECKS = (
    check_sprint_boundary,
    check_sprint_reassignments,
    check_status_cycling,
    check_blocked_time,
    check_duration_anomalies,
)


def process_duration_data(duration: DurationAssessment) -> list[Contribution]:
    return [check(duration) for check in DURATION_CHECKS]


def analyze_timeline_risk(
    issue: IssueModel,
    comments: Sequence[CommentModel | dict] | None,
    previous: PreviousAnalysisResults | None = None,
) -> RiskCategoryResult:
    text = build_analysis_text(issue.description, extract_comments_text(comments))
    parts = [
        apply_severity_ladder(
            detect_risk_indicators(text, TIMELINE_PATTERNS, RiskCategory.TIMELINE), TIMELINE_POLICY
        ),
        apply_severity_ladder(
            detect_risk_indicators(text, ESTIMATION_PATTERNS, RiskCategory.ESTIMATION), ESTIMATION_POLICY
        ),
    ]
    if previous is not None and previous.duration is not None:
        parts.extend(process_duration_data(previous.duration))
    return combine(parts)
