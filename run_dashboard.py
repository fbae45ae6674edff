"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``jira_risk/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

from importlib import import_module
from pathlib import Path

import streamlit as st

from jira_risk.app import main

st.set_page_config(layout="wide")


def _auto_init_risk_service():
    """Initialize the risk service from Streamlit secrets if available."""
    if "risk_service" in st.session_state:
        return

    from jira_risk.pages.setup import read_jira_secrets

    server, email, token = read_jira_secrets()
    if server and email and token:
        try:
            from jira_risk.core.jira_client import JiraAPI
            from jira_risk.core.service import RiskService

            st.session_state["jira_server"] = server
            st.session_state["risk_service"] = RiskService(JiraAPI(server, email, token))
            st.sidebar.success("Jira connection successful!")
        except Exception as e:
            st.sidebar.error(f"Jira connection failed: {e}")
            st.session_state.pop("risk_service", None)
    else:
        st.sidebar.warning("Jira secrets not found. Please use the Setup page.")


PAGES_DIR = Path(__file__).parent / "jira_risk" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"jira_risk.pages.{py.stem}"
    try:
        import_module(mod_name)
    except Exception as e:  # pragma: no cover - defensive
        print(f"Failed importing page {mod_name}: {e}")

_auto_init_risk_service()

if __name__ == "__main__":
    main()
