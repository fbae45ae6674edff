"""Risk assessment pages: single-issue detail and a batch review table."""

from __future__ import annotations

import json

import streamlit as st

from jira_risk.analytics.aggregations.risk import aggregate_by_risk_level, category_breakdown, risk_level
from jira_risk.app import register_page
from jira_risk.core.config import SETTINGS
from jira_risk.visual.charts import category_score_chart, risk_level_chart
from jira_risk.visual.progress import AssessmentProgress
from jira_risk.visual.tables import render_assessment_table, render_category_breakdown


def _service():
    svc = st.session_state.get("risk_service")
    if svc is None:
        st.warning("Configure the Jira connection on the Setup page first.")
    return svc


def _previous_results_input():
    raw = st.text_area(
        "Prior analysis results (JSON, optional)",
        help="complexity / dependencies / duration / completeness sections",
    )
    if not raw.strip():
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        st.error(f"Invalid JSON: {exc}")
        return None
    return data if isinstance(data, dict) else None


@register_page("Risk Assessment")
def risk_assessment_page():
    st.title("Risk Assessment")
    svc = _service()
    if svc is None:
        return
    issue_key = st.text_input("Issue key", placeholder="PROJ-123").strip()
    previous = _previous_results_input()
    if not (st.button("Assess", type="primary") and issue_key):
        return
    try:
        with st.spinner(f"Assessing {issue_key}"):
            assessment, results = svc.assess_issue_detail(issue_key, previous)
    except RuntimeError as exc:
        st.error(str(exc))
        return

    col_score, col_level = st.columns(2)
    col_score.metric("Risk score", f"{assessment.score}/10")
    col_level.metric("Risk level", risk_level(assessment.score).title())

    st.subheader("Category breakdown")
    breakdown = category_breakdown(results, svc.weights)
    chart = category_score_chart(breakdown)
    if chart is not None:
        st.altair_chart(chart, use_container_width=True)
    render_category_breakdown(breakdown)

    st.subheader("Risk items")
    if assessment.items:
        st.markdown("\n".join(f"- {item}" for item in assessment.items))
    else:
        st.caption("No risk items found.")

    st.subheader("Mitigation suggestions")
    if assessment.mitigation_suggestions:
        st.markdown("\n".join(f"- {s}" for s in assessment.mitigation_suggestions))
    else:
        st.caption("No suggestions.")

    with st.expander("JSON"):
        st.json(assessment.to_dict())


@register_page("Batch Risk Review")
def batch_risk_page():
    st.title("Batch Risk Review")
    svc = _service()
    if svc is None:
        return
    raw_keys = st.text_area("Issue keys (comma or newline separated)")
    keys = [k.strip() for k in raw_keys.replace(",", "\n").splitlines() if k.strip()]
    if not (st.button("Assess all", type="primary") and keys):
        return
    progress = AssessmentProgress(f"Assessing {len(keys)} issues")
    df = svc.assess_many(keys, progress=progress.callback)
    if df.empty:
        progress.error("No issues could be assessed.")
        return
    progress.complete(f"Assessed {len(df)} issues.")

    st.subheader("By risk level")
    levels = aggregate_by_risk_level(df)
    chart = risk_level_chart(levels)
    if chart is not None:
        st.altair_chart(chart, use_container_width=True)
    st.dataframe(levels, hide_index=True)
    st.subheader("Issues")
    render_assessment_table(df, st.session_state.get("jira_server", ""), limit=SETTINGS.max_table_rows)
