"""Technical risk: technical debt, architecture impact, performance, and security."""

from __future__ import annotations

from collections.abc import Sequence

from jira_risk.core.config import BASE_CATEGORY_SCORE, TECHNICAL_SEVERITY_POINTS
from jira_risk.core.models import CommentModel, IssueModel, RiskCategoryResult, RiskIndicatorResult
from jira_risk.core.text import build_analysis_text, extract_comments_text

from .indicators import detect_risk_indicators, indicator_detail
from .mitigation import MITIGATION_SUGGESTIONS
from .patterns import (
    ARCHITECTURE_PATTERNS,
    PERFORMANCE_PATTERNS,
    SECURITY_PATTERNS,
    TECHNICAL_DEBT_PATTERNS,
    RiskCategory,
)
from .scoring import finalize_score

# (category, needle table, risk item prefix, suggestion)
TECHNICAL_CHECKS: Sequence[tuple[RiskCategory, tuple, str, str]] = (
    (
        RiskCategory.TECHNICAL_DEBT,
        TECHNICAL_DEBT_PATTERNS,
        "High technical debt risk: ",
        MITIGATION_SUGGESTIONS["technical_debt"],
    ),
    (
        RiskCategory.ARCHITECTURE,
        ARCHITECTURE_PATTERNS,
        "Architecture impact risk: ",
        MITIGATION_SUGGESTIONS["architecture_impact"],
    ),
    (
        RiskCategory.PERFORMANCE,
        PERFORMANCE_PATTERNS,
        "Performance concern: ",
        MITIGATION_SUGGESTIONS["performance_concern"],
    ),
    (
        RiskCategory.SECURITY,
        SECURITY_PATTERNS,
        "Security risk: ",
        MITIGATION_SUGGESTIONS["security_issue"],
    ),
)

_PREFIX_BY_CATEGORY = {category.value: prefix for category, _, prefix, _ in TECHNICAL_CHECKS}
_SUGGESTION_BY_CATEGORY = {category.value: suggestion for category, _, _, suggestion in TECHNICAL_CHECKS}


def detect_technical_indicators(text: str) -> list[RiskIndicatorResult]:
    """Run the four technical needle tables, in fixed order."""
    return [detect_risk_indicators(text, table, category) for category, table, _, _ in TECHNICAL_CHECKS]


def calculate_technical_risk_score(results: Sequence[RiskIndicatorResult]) -> int:
    score = float(BASE_CATEGORY_SCORE)
    for result in results:
        if result.present:
            score += TECHNICAL_SEVERITY_POINTS.get(result.severity, TECHNICAL_SEVERITY_POINTS["low"])
    return finalize_score(score)


def enhance_risk_items(results: Sequence[RiskIndicatorResult]) -> list[str]:
    """Rewrite raw indicators with a human-readable prefix for their category."""
    items: list[str] = []
    for result in results:
        prefix = _PREFIX_BY_CATEGORY.get(result.category, "Technical risk: ")
        items.extend(f"{prefix}{indicator_detail(raw, result.category)}" for raw in result.indicators)
    return items


def technical_mitigation_suggestions(results: Sequence[RiskIndicatorResult]) -> list[str]:
    return [
        _SUGGESTION_BY_CATEGORY[result.category]
        for result in results
        if result.present and result.category in _SUGGESTION_BY_CATEGORY
    ]


def analyze_technical_risk(
    issue: IssueModel,
    comments: Sequence[CommentModel | dict] | None,
) -> RiskCategoryResult:
    text = build_analysis_text(issue.description, extract_comments_text(comments))
    results = detect_technical_indicators(text)
    return RiskCategoryResult(
        score=calculate_technical_risk_score(results),
        risk_items=enhance_risk_items(results),
        mitigation_suggestions=technical_mitigation_suggestions(results),
    )
