"""Table helpers for rendering risk assessments in Streamlit."""

from __future__ import annotations

import pandas as pd
import streamlit as st

SUMMARY_COLUMNS = ["Ticket", "score", "risk_level", "risk_count", "suggestion_count"]


def add_ticket_link(df: pd.DataFrame, server: str, key_col: str = "key", label: str = "Ticket"):
    if df.empty or key_col not in df.columns:
        return df, {}
    out = df.copy()
    base = server.rstrip("/")
    out[label] = out[key_col].astype(str).apply(lambda k: f"{base}/browse/{k}" if k and k != "nan" else "")
    cfg = {
        label: st.column_config.LinkColumn(
            label,
            display_text=r"browse/(.*)$",
            help="Open in Jira",
            width="medium",
        )
    }
    return out, cfg


def render_assessment_table(df: pd.DataFrame, server: str, limit: int = 1000):
    if df.empty:
        st.info("No assessments to show.")
        return
    linked, cfg = add_ticket_link(df, server)
    cols = [c for c in SUMMARY_COLUMNS if c in linked.columns]
    cfg["score"] = st.column_config.ProgressColumn("Risk score", min_value=1, max_value=10, format="%d")
    st.dataframe(linked[cols].head(limit), hide_index=True, column_config=cfg)


def render_category_breakdown(df: pd.DataFrame):
    if df.empty:
        return
    st.dataframe(
        df,
        hide_index=True,
        column_config={
            "weight": st.column_config.NumberColumn("Weight", format="%.2f"),
            "contribution": st.column_config.NumberColumn("Weighted contribution", format="%.2f"),
        },
    )
