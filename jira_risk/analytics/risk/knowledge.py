"""Knowledge risk: concentrated expertise, specialized technology, and ownership gaps."""

from __future__ import annotations

from collections.abc import Sequence

from jira_risk.core.config import VERY_COMPLEX_LEVEL
from jira_risk.core.models import (
    CommentModel,
    IssueModel,
    PreviousAnalysisResults,
    RiskCategoryResult,
)
from jira_risk.core.text import build_analysis_text, extract_comments_text

from .indicators import detect_risk_indicators
from .mitigation import MITIGATION_SUGGESTIONS
from .patterns import KNOWLEDGE_PATTERNS, SPECIALIZED_TECH_PATTERNS, RiskCategory
from .scoring import Contribution, LadderPolicy, apply_severity_ladder, combine

KNOWLEDGE_POLICY = LadderPolicy(
    prefix="Knowledge concentration risk: ",
    high_suggestions=(
        MITIGATION_SUGGESTIONS["knowledge_concentration"],
        "Consider pair programming for knowledge distribution",
    ),
    medium_suggestion="Document specialized knowledge required for this task",
)

SPECIALIZED_TECH_POLICY = LadderPolicy(
    prefix="Specialized technology risk: ",
    high_suggestions=(
        MITIGATION_SUGGESTIONS["specialized_skills"],
        "Allocate time for learning/training if specialized technology is involved",
    ),
    medium_suggestion="Create documentation for specialized technologies used",
)

UNASSIGNED_RISK = "Issue not assigned to anyone, possibly due to knowledge requirements"
VERY_COMPLEX_RISK = "Issue is rated very complex, concentrating knowledge in whoever implements it"
VERY_COMPLEX_SUGGESTION = "Ensure the implementation approach is well-documented and reviewed by a second engineer"


def detect_assignee_risk(issue: IssueModel) -> str | None:
    if issue.assignee:
        return None
    return UNASSIGNED_RISK


def process_complexity_level(level: str | None) -> Contribution:
    if level != VERY_COMPLEX_LEVEL:
        return Contribution()
    return Contribution(
        score=2,
        risk_items=[VERY_COMPLEX_RISK],
        mitigation_suggestions=[VERY_COMPLEX_SUGGESTION],
    )


def analyze_knowledge_risk(
    issue: IssueModel,
    comments: Sequence[CommentModel | dict] | None,
    previous: PreviousAnalysisResults | None = None,
) -> RiskCategoryResult:
    text = build_analysis_text(issue.description, extract_comments_text(comments))
    parts = [
        apply_severity_ladder(
            detect_risk_indicators(text, KNOWLEDGE_PATTERNS, RiskCategory.KNOWLEDGE), KNOWLEDGE_POLICY
        ),
        apply_severity_ladder(
            detect_risk_indicators(text, SPECIALIZED_TECH_PATTERNS, RiskCategory.SPECIALIZED_TECH),
            SPECIALIZED_TECH_POLICY,
        ),
    ]
    assignee_risk = detect_assignee_risk(issue)
    if assignee_risk:
        parts.append(Contribution(score=2, risk_items=[assignee_risk]))
    if previous is not None and previous.complexity is not None:
        parts.append(process_complexity_level(previous.complexity.level))
    return combine(parts)
