"""Chart builders (Altair) for risk scores."""

from __future__ import annotations

import altair as alt
import pandas as pd

LEVEL_COLORS = {"low": "#2ca02c", "medium": "#ff7f0e", "high": "#d62728"}


def category_score_chart(breakdown: pd.DataFrame):
    """Horizontal bars of category scores with weighted contribution in the tooltip."""
    if breakdown.empty:
        return None
    return (
        alt.Chart(breakdown)
        .mark_bar(color="#1f77b4")
        .encode(
            x=alt.X("score:Q", title="Score", scale=alt.Scale(domain=[0, 10])),
            y=alt.Y("category:N", title=None, sort=list(breakdown["category"])),
            tooltip=[
                alt.Tooltip("category:N", title="Category"),
                alt.Tooltip("score:Q", title="Score"),
                alt.Tooltip("weight:Q", title="Weight", format=".2f"),
                alt.Tooltip("contribution:Q", title="Contribution", format=".2f"),
            ],
        )
        .properties(height=30 * len(breakdown))
    )


def risk_level_chart(levels: pd.DataFrame):
    if levels.empty:
        return None
    order = list(LEVEL_COLORS)
    return (
        alt.Chart(levels)
        .mark_bar()
        .encode(
            x=alt.X("risk_level:N", title="Risk level", sort=order),
            y=alt.Y("issues:Q", title="Issues"),
            color=alt.Color(
                "risk_level:N",
                scale=alt.Scale(domain=order, range=[LEVEL_COLORS[k] for k in order]),
                legend=None,
            ),
            tooltip=[
                alt.Tooltip("risk_level:N", title="Level"),
                alt.Tooltip("issues:Q", title="Issues"),
                alt.Tooltip("mean_score:Q", title="Mean score", format=".1f"),
            ],
        )
    )
