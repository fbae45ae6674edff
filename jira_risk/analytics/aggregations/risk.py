"""Tabular summaries of risk assessments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd

from jira_risk.analytics.risk.scoring import normalize_weights
from jira_risk.core.config import DEFAULT_RISK_WEIGHTS, RISK_CATEGORY_ORDER, RISK_LEVEL_BANDS
from jira_risk.core.models import RiskCategoryResult, RiskIdentification

ASSESSMENT_COLUMNS = [
    "key",
    "score",
    "risk_count",
    "suggestion_count",
    "risk_level",
    "items",
    "mitigation_suggestions",
]


def risk_level(score: int) -> str:
    """Band an overall score into ``low`` / ``medium`` / ``high``."""
    for name, low, high in RISK_LEVEL_BANDS:
        if low <= score <= high:
            return name
    return "high" if score > RISK_LEVEL_BANDS[-1][2] else "low"


def assessments_to_dataframe(
    assessments: Mapping[str, RiskIdentification] | Iterable[tuple[str, RiskIdentification]],
) -> pd.DataFrame:
    """One row per assessed issue, highest score first."""
    pairs = assessments.items() if isinstance(assessments, Mapping) else assessments
    rows = [
        {
            "key": key,
            "score": assessment.score,
            "risk_count": len(assessment.items),
            "suggestion_count": len(assessment.mitigation_suggestions),
            "risk_level": risk_level(assessment.score),
            "items": list(assessment.items),
            "mitigation_suggestions": list(assessment.mitigation_suggestions),
        }
        for key, assessment in pairs
    ]
    if not rows:
        return pd.DataFrame(columns=ASSESSMENT_COLUMNS)
    df = pd.DataFrame(rows, columns=ASSESSMENT_COLUMNS)
    return df.sort_values(by=["score", "key"], ascending=[False, True], kind="stable").reset_index(drop=True)


def aggregate_by_risk_level(df: pd.DataFrame) -> pd.DataFrame:
    """Issue count and mean score per risk level, in low/medium/high order."""
    if df.empty:
        return pd.DataFrame(columns=["risk_level", "issues", "mean_score"])
    levels = [name for name, _, _ in RISK_LEVEL_BANDS]
    agg = (
        df.groupby("risk_level")
        .agg(
            issues=("key", "count"),
            mean_score=("score", "mean"),
        )
        .reindex(pd.Index(levels, name="risk_level"))
        .dropna(subset=["issues"])
        .reset_index()
    )
    agg["issues"] = agg["issues"].astype(int)
    return agg


def category_breakdown(
    category_results: Mapping[str, RiskCategoryResult],
    weights: Mapping[str, float] | None = None,
) -> pd.DataFrame:
    """Per-category score, normalized weight and weighted contribution."""
    normalized = normalize_weights(dict(weights or DEFAULT_RISK_WEIGHTS))
    rows = []
    for name in RISK_CATEGORY_ORDER:
        result = category_results.get(name)
        if result is None:
            continue
        weight = normalized.get(name, 0.0)
        rows.append(
            {
                "category": name,
                "score": result.score,
                "weight": weight,
                "contribution": result.score * weight,
                "risk_items": len(result.risk_items),
            }
        )
    return pd.DataFrame(rows, columns=["category", "score", "weight", "contribution", "risk_items"])
