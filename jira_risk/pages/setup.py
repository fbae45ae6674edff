"""Connection setup page: collect Jira credentials and initialize RiskService."""

from __future__ import annotations

import streamlit as st

from jira_risk.app import register_page
from jira_risk.core.config import JIRA_DEFAULT_SERVER, SETTINGS
from jira_risk.core.jira_client import JiraAPI
from jira_risk.core.service import RiskService


def read_jira_secrets() -> tuple[str | None, str | None, str | None]:
    """Server, email and token from a ``[jira]`` secrets section or top-level keys."""
    jira_secrets = st.secrets.get("jira", {})
    server = jira_secrets.get("JIRA_SERVER") or st.secrets.get("JIRA_SERVER")
    email = jira_secrets.get("JIRA_EMAIL") or st.secrets.get("JIRA_EMAIL")
    token = (
        jira_secrets.get("JIRA_API_TOKEN")
        or st.secrets.get("JIRA_API_TOKEN")
        or jira_secrets.get("JIRA_TOKEN")
        or st.secrets.get("JIRA_TOKEN")
    )
    return server, email, token


@register_page("Setup / Connection")
def setup_page():
    st.title("Jira Connection Setup")
    st.caption("Enter credentials (use secrets manager in production).")

    secret_server, secret_email, secret_token = read_jira_secrets()
    server = st.text_input(
        "Jira Server URL",
        value=st.session_state.get("jira_server") or secret_server or JIRA_DEFAULT_SERVER,
    )
    email = st.text_input(
        "Email / Username",
        value=st.session_state.get("jira_email") or secret_email or "",
    )
    token = st.text_input("API Token", type="password", value=secret_token or "")
    ttl = st.number_input("Issue cache TTL (seconds)", min_value=60, max_value=3600, value=300)
    SETTINGS.analyzer_max_workers = int(
        st.number_input("Analyzer threads", min_value=1, max_value=5, value=SETTINGS.analyzer_max_workers)
    )
    SETTINGS.include_keyword_suggestions = st.checkbox(
        "Add keyword-derived mitigation suggestions",
        value=SETTINGS.include_keyword_suggestions,
    )
    init_btn = st.button("Initialize Connection", type="primary")

    if init_btn:
        if not (server and email and token):
            st.error("All fields required.")
            return
        try:
            api = JiraAPI(server, email, token)
            api._cache_ttl = float(ttl)
            st.session_state["jira_server"] = server
            st.session_state["jira_email"] = email
            st.session_state["risk_service"] = RiskService(api)
            st.success("Connection initialized.")
        except Exception as e:  # pragma: no cover
            st.error(f"Failed to initialize Jira client: {e}")

    if "risk_service" in st.session_state:
        st.info("RiskService ready.")
