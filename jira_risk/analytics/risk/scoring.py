"""Score helpers: clamping, the shared severity ladder, and weighted aggregation."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from jira_risk.core.config import (
    BASE_CATEGORY_SCORE,
    DEFAULT_RISK_WEIGHTS,
    LADDER_SEVERITY_POINTS,
    MAX_RISK_SCORE,
    MIN_RISK_SCORE,
    RISK_CATEGORY_ORDER,
    WEIGHT_SUM_TOLERANCE,
)
from jira_risk.core.models import RiskCategoryResult, RiskIndicatorResult

from .indicators import indicator_segment


def round_half_up(value: float) -> int:
    """Round .5 upwards (``round()`` would round 2.5 to 2)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> float:
    return max(MIN_RISK_SCORE, min(MAX_RISK_SCORE, value))


def finalize_score(value: float) -> int:
    """Clamp a raw category score to [1, 10] and round it to an int."""
    return round_half_up(clamp_score(value))


def unique(values: Sequence[str]) -> list[str]:
    """Deduplicate preserving first-occurrence order."""
    return list(dict.fromkeys(values))


@dataclass(slots=True)
class Contribution:
    """Score increment plus the findings of one check inside an analyzer."""

    score: float = 0
    risk_items: list[str] = field(default_factory=list)
    mitigation_suggestions: list[str] = field(default_factory=list)


def combine(contributions: Sequence[Contribution], base: float = BASE_CATEGORY_SCORE) -> RiskCategoryResult:
    """Sum contributions onto ``base`` into a bounded category result."""
    total = base
    items: list[str] = []
    suggestions: list[str] = []
    for part in contributions:
        total += part.score
        items.extend(part.risk_items)
        suggestions.extend(part.mitigation_suggestions)
    return RiskCategoryResult(
        score=finalize_score(total),
        risk_items=items,
        mitigation_suggestions=unique(suggestions),
    )


# =============================================================================
# Severity ladder
# =============================================================================
@dataclass(frozen=True, slots=True)
class LadderPolicy:
    """How one needle table's detection turns into findings.

    ``prefix`` is prepended to the part of each raw indicator after its
    category label. That part keeps its leading space, so a prefix ending in
    a space renders two spaces before the quoted needle. High severity appends ``high_suggestions``, medium appends
    ``medium_suggestion``, low appends nothing.
    """

    prefix: str
    high_suggestions: tuple[str, ...]
    medium_suggestion: str


def apply_severity_ladder(result: RiskIndicatorResult, policy: LadderPolicy) -> Contribution:
    """Score a detection with the shared 3/2/1 ladder."""
    if not result.present:
        return Contribution()
    items = [f"{policy.prefix}{indicator_segment(item)}" for item in result.indicators]
    if result.severity == "high":
        suggestions = list(policy.high_suggestions)
    elif result.severity == "medium":
        suggestions = [policy.medium_suggestion]
    else:
        suggestions = []
    return Contribution(
        score=LADDER_SEVERITY_POINTS.get(result.severity, LADDER_SEVERITY_POINTS["low"]),
        risk_items=items,
        mitigation_suggestions=suggestions,
    )


# =============================================================================
# Aggregation
# =============================================================================
def _as_mapping(values: Mapping[str, float] | Sequence[float], what: str) -> dict[str, float]:
    if isinstance(values, Mapping):
        return {name: values[name] for name in RISK_CATEGORY_ORDER}
    values = list(values)
    if len(values) != len(RISK_CATEGORY_ORDER):
        raise ValueError(f"Expected {len(RISK_CATEGORY_ORDER)} {what}, got {len(values)}")
    return dict(zip(RISK_CATEGORY_ORDER, values))


def normalize_weights(weights: Mapping[str, float]) -> dict[str, float]:
    """Scale weights to sum to 1 unless they already do (within tolerance)."""
    total = sum(weights.values())
    if abs(total - 1) < WEIGHT_SUM_TOLERANCE:
        return dict(weights)
    if total == 0:
        raise ValueError("Risk category weights must not sum to zero")
    return {name: weight / total for name, weight in weights.items()}


def calculate_risk_score(
    scores: Mapping[str, float] | Sequence[float],
    weights: Mapping[str, float] | Sequence[float] = DEFAULT_RISK_WEIGHTS,
) -> int:
    """Weighted overall risk score on the 1-10 scale.

    Parameters
    ----------
    scores : mapping or sequence
        Category scores keyed by category name, or five values in the order
        technical, dependency, timeline, knowledge, information. Each score
        is clamped to [1, 10] before weighting.
    weights : mapping or sequence
        Category weights in the same shape. Normalized when they do not sum
        to 1. Pass a zero weight (and a neutral score of 1) to ignore a
        category; every category must be present.

    Returns
    -------
    int
        Rounded weighted score.

    Examples
    --------
    >>> calculate_risk_score([5, 5, 5, 5, 5])
    5
    """
    clamped = {name: clamp_score(score) for name, score in _as_mapping(scores, "scores").items()}
    normalized = normalize_weights(_as_mapping(weights, "weights"))
    weighted = sum(clamped[name] * normalized[name] for name in RISK_CATEGORY_ORDER)
    return finalize_score(weighted)
