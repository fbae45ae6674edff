"""Information risk: requirement gaps, ambiguity, completeness, and missing descriptions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from jira_risk.core.config import (
    LOW_COMPLETENESS_THRESHOLD,
    MAX_COMPLETENESS_SUGGESTIONS,
    MAX_MISSING_INFORMATION_ITEMS,
    MODERATE_COMPLETENESS_THRESHOLD,
)
from jira_risk.core.models import (
    CommentModel,
    CompletenessEvaluation,
    IssueModel,
    PreviousAnalysisResults,
    RiskCategoryResult,
)
from jira_risk.core.text import build_analysis_text, coerce_description, extract_comments_text

from .indicators import detect_risk_indicators
from .mitigation import MITIGATION_SUGGESTIONS
from .patterns import AMBIGUITY_PATTERNS, REQUIREMENTS_PATTERNS, RiskCategory
from .scoring import Contribution, LadderPolicy, apply_severity_ladder, combine

REQUIREMENTS_POLICY = LadderPolicy(
    prefix="Requirements gap: ",
    high_suggestions=(MITIGATION_SUGGESTIONS["requirements_gap"],),
    medium_suggestion="Document open questions and get answers before implementation",
)

AMBIGUITY_POLICY = LadderPolicy(
    prefix="Ambiguity issue: ",
    high_suggestions=(MITIGATION_SUGGESTIONS["ambiguity_risk"],),
    medium_suggestion="Identify and document all assumptions being made",
)

NO_DESCRIPTION_RISK = "Issue has no description"
NO_DESCRIPTION_SUGGESTION = "Request complete description and requirements before proceeding"


def _format_score(score: float) -> str:
    """Render whole-number scores without a trailing ``.0``."""
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def evaluate_completeness_score(score: float) -> Contribution:
    if score < LOW_COMPLETENESS_THRESHOLD:
        return Contribution(
            score=3,
            risk_items=[f"Issue has low completeness score: {_format_score(score)}/10"],
            mitigation_suggestions=[MITIGATION_SUGGESTIONS["requirements_gap"]],
        )
    if score < MODERATE_COMPLETENESS_THRESHOLD:
        return Contribution(score=2, mitigation_suggestions=[MITIGATION_SUGGESTIONS["ambiguity_risk"]])
    return Contribution()


def process_missing_information(completeness: CompletenessEvaluation) -> Contribution:
    missing = list(completeness.missing_information or [])
    if not missing:
        return Contribution()
    shown = missing[:MAX_MISSING_INFORMATION_ITEMS]
    return Contribution(
        score=3 if len(shown) > 2 else len(shown),
        risk_items=[f"Missing information: {item}" for item in shown],
        mitigation_suggestions=list((completeness.suggestions or [])[:MAX_COMPLETENESS_SUGGESTIONS]),
    )


def process_completeness_evaluation(completeness: CompletenessEvaluation) -> list[Contribution]:
    return [
        evaluate_completeness_score(completeness.score),
        process_missing_information(completeness),
    ]


def check_missing_description(description: Any) -> Contribution:
    if coerce_description(description).strip():
        return Contribution()
    return Contribution(
        score=3,
        risk_items=[NO_DESCRIPTION_RISK],
        mitigation_suggestions=[NO_DESCRIPTION_SUGGESTION],
    )


def analyze_information_risk(
    issue: IssueModel,
    comments: Sequence[CommentModel | dict] | None,
    previous: PreviousAnalysisResults | None = None,
) -> RiskCategoryResult:
    text = build_analysis_text(issue.description, extract_comments_text(comments))
    parts = [
        apply_severity_ladder(
            detect_risk_indicators(text, REQUIREMENTS_PATTERNS, RiskCategory.REQUIREMENTS_GAP),
            REQUIREMENTS_POLICY,
        ),
        apply_severity_ladder(
            detect_risk_indicators(text, AMBIGUITY_PATTERNS, RiskCategory.AMBIGUITY), AMBIGUITY_POLICY
        ),
    ]
    if previous is not None and previous.completeness is not None:
        parts.extend(process_completeness_evaluation(previous.completeness))
    parts.append(check_missing_description(issue.description))
    return combine(parts)
