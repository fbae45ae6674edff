"""Dependency risk: dependency mentions in text plus prior dependency-graph results."""

from __future__ import annotations

from collections.abc import Sequence

from jira_risk.core.config import MAX_BLOCKER_SCORE, MAX_EXTERNAL_DEPENDENCY_SCORE
from jira_risk.core.models import (
    CommentModel,
    DependenciesAnalysis,
    IssueModel,
    PreviousAnalysisResults,
    RiskCategoryResult,
)
from jira_risk.core.text import build_analysis_text, extract_comments_text

from .indicators import detect_risk_indicators
from .mitigation import MITIGATION_SUGGESTIONS
from .patterns import DEPENDENCY_PATTERNS, EXTERNAL_DEPENDENCY_PATTERNS, RiskCategory
from .scoring import Contribution, LadderPolicy, apply_severity_ladder, combine

DEPENDENCY_POLICY = LadderPolicy(
    prefix="Dependency risk: ",
    high_suggestions=(MITIGATION_SUGGESTIONS["blocking_dependencies"],),
    medium_suggestion="Document dependencies clearly and track them closely throughout development",
)

EXTERNAL_DEPENDENCY_POLICY = LadderPolicy(
    prefix="External dependency risk: ",
    high_suggestions=(
        MITIGATION_SUGGESTIONS["external_dependencies"],
        MITIGATION_SUGGESTIONS["cross_team_coordination"],
    ),
    medium_suggestion="Document external dependencies and create escalation paths",
)

ADDRESS_BLOCKERS_SUGGESTION = "Address blocking issues before starting implementation"


def analyze_text_dependencies(text: str) -> Contribution:
    dependency = apply_severity_ladder(
        detect_risk_indicators(text or "", DEPENDENCY_PATTERNS, RiskCategory.DEPENDENCY),
        DEPENDENCY_POLICY,
    )
    external = apply_severity_ladder(
        detect_risk_indicators(text or "", EXTERNAL_DEPENDENCY_PATTERNS, RiskCategory.EXTERNAL_DEPENDENCY),
        EXTERNAL_DEPENDENCY_POLICY,
    )
    return Contribution(
        score=dependency.score + external.score,
        risk_items=dependency.risk_items + external.risk_items,
        mitigation_suggestions=dependency.mitigation_suggestions + external.mitigation_suggestions,
    )


def analyze_previous_dependencies(dependencies: DependenciesAnalysis | None) -> Contribution:
    out = Contribution()
    if dependencies is None:
        return out
    blocker_count = len(dependencies.blockers or [])
    if blocker_count > 0:
        noun = "issue" if blocker_count == 1 else "issues"
        out.risk_items.append(f"Issue has {blocker_count} linked blocker {noun}")
        out.mitigation_suggestions.append(ADDRESS_BLOCKERS_SUGGESTION)
        out.score += min(2 * blocker_count, MAX_BLOCKER_SCORE)
    external_count = len(dependencies.external_dependencies or [])
    if external_count > 0:
        out.risk_items.append(f"Issue has {external_count} external dependencies identified")
        out.score += min(external_count, MAX_EXTERNAL_DEPENDENCY_SCORE)
    return out


def analyze_dependency_risk(
    issue: IssueModel,
    comments: Sequence[CommentModel | dict] | None,
    previous: PreviousAnalysisResults | None = None,
) -> RiskCategoryResult:
    text = build_analysis_text(issue.description, extract_comments_text(comments))
    return combine(
        [
            analyze_text_dependencies(text),
            analyze_previous_dependencies(previous.dependencies if previous else None),
        ]
    )
