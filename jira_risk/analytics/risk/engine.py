"""Risk identification orchestrator: run the five category analyzers and merge their results."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from jira_risk.core.config import DEFAULT_RISK_WEIGHTS
from jira_risk.core.models import (
    CommentModel,
    IssueModel,
    PreviousAnalysisResults,
    RiskCategoryResult,
    RiskIdentification,
)

from .dependency import analyze_dependency_risk
from .information import analyze_information_risk
from .knowledge import analyze_knowledge_risk
from .mitigation import generate_mitigation_suggestions
from .scoring import calculate_risk_score, unique
from .technical import analyze_technical_risk
from .timeline import analyze_timeline_risk

logger = logging.getLogger(__name__)

Comments = Sequence[CommentModel | dict] | None
CategoryAnalyzer = Callable[[IssueModel, Comments, PreviousAnalysisResults | None], RiskCategoryResult]


def _technical(issue: IssueModel, comments: Comments, previous: PreviousAnalysisResults | None) -> RiskCategoryResult:
    # Technical risk is text-only; prior results do not feed it
    return analyze_technical_risk(issue, comments)


# Merge order of the final assessment. Items are concatenated in this order.
CATEGORY_ANALYZERS: Sequence[tuple[str, CategoryAnalyzer]] = (
    ("technical", _technical),
    ("dependency", analyze_dependency_risk),
    ("timeline", analyze_timeline_risk),
    ("knowledge", analyze_knowledge_risk),
    ("information", analyze_information_risk),
)


def coerce_previous(previous: PreviousAnalysisResults | Mapping[str, Any] | None) -> PreviousAnalysisResults | None:
    if previous is None or isinstance(previous, PreviousAnalysisResults):
        return previous
    return PreviousAnalysisResults.from_dict(dict(previous))


def run_category_analyzers(
    issue: IssueModel,
    comments: Comments,
    previous: PreviousAnalysisResults | None = None,
    *,
    max_workers: int = 1,
) -> dict[str, RiskCategoryResult]:
    """Run every category analyzer and return results keyed in merge order.

    With ``max_workers > 1`` the analyzers run on a thread pool. Results are
    always collected in ``CATEGORY_ANALYZERS`` order, never completion order.
    """
    if max_workers <= 1:
        return {name: analyzer(issue, comments, previous) for name, analyzer in CATEGORY_ANALYZERS}

    with ThreadPoolExecutor(max_workers=min(max_workers, len(CATEGORY_ANALYZERS))) as pool:
        futures = [
            (name, pool.submit(analyzer, issue, comments, previous)) for name, analyzer in CATEGORY_ANALYZERS
        ]
        return {name: future.result() for name, future in futures}


def merge_category_results(
    results: Mapping[str, RiskCategoryResult],
    weights: Mapping[str, float] | Sequence[float] | None = None,
    *,
    include_keyword_suggestions: bool = False,
) -> RiskIdentification:
    """Combine per-category results into the final assessment.

    Risk items keep duplicates; mitigation suggestions are deduplicated by
    first occurrence.
    """
    items: list[str] = []
    suggestions: list[str] = []
    scores: dict[str, int] = {}
    for name, _ in CATEGORY_ANALYZERS:
        result = results[name]
        scores[name] = result.score
        items.extend(result.risk_items)
        suggestions.extend(result.mitigation_suggestions)
    if include_keyword_suggestions:
        suggestions.extend(generate_mitigation_suggestions(items))

    score = calculate_risk_score(scores, DEFAULT_RISK_WEIGHTS if weights is None else weights)
    return RiskIdentification(score=score, items=items, mitigation_suggestions=unique(suggestions))


def assess_with_categories(
    issue: IssueModel,
    comments: Comments,
    previous: PreviousAnalysisResults | Mapping[str, Any] | None = None,
    *,
    weights: Mapping[str, float] | Sequence[float] | None = None,
    max_workers: int = 1,
    include_keyword_suggestions: bool = False,
) -> tuple[RiskIdentification, dict[str, RiskCategoryResult]]:
    """Assessment plus the per-category results it was merged from."""
    prior = coerce_previous(previous)
    results = run_category_analyzers(issue, comments, prior, max_workers=max_workers)
    for name, result in results.items():
        logger.debug(
            "Risk category %s for %s: score=%s items=%s", name, issue.key, result.score, len(result.risk_items)
        )
    assessment = merge_category_results(
        results,
        weights,
        include_keyword_suggestions=include_keyword_suggestions,
    )
    logger.debug("Risk score for %s: %s", issue.key, assessment.score)
    return assessment, results


def get_risk_identification(
    issue: IssueModel,
    comments: Comments,
    previous: PreviousAnalysisResults | Mapping[str, Any] | None = None,
    *,
    weights: Mapping[str, float] | Sequence[float] | None = None,
    max_workers: int = 1,
    include_keyword_suggestions: bool = False,
) -> RiskIdentification:
    """Assess the delivery risk of one issue.

    Parameters
    ----------
    issue : IssueModel
        Issue to assess. A non-string description is treated as empty text.
    comments : sequence of CommentModel or dict, optional
        Discussion thread in original order.
    previous : PreviousAnalysisResults or dict, optional
        Results of earlier passes (complexity, dependencies, duration,
        completeness). Dicts are accepted in camelCase or snake_case.
    weights : mapping or sequence, optional
        Category weights; defaults to ``DEFAULT_RISK_WEIGHTS``.
    max_workers : int
        Thread pool size for the category analyzers (1 = sequential).
    include_keyword_suggestions : bool
        Append catalogue suggestions triggered by keywords in the risk items.

    Returns
    -------
    RiskIdentification
        Score in [1, 10], ordered risk items, deduplicated suggestions.
    """
    assessment, _ = assess_with_categories(
        issue,
        comments,
        previous,
        weights=weights,
        max_workers=max_workers,
        include_keyword_suggestions=include_keyword_suggestions,
    )
    return assessment
