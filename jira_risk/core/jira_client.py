"""Jira API client wrapper (REST v3 issue + paginated comment fetches)."""

from __future__ import annotations

import time
from typing import Any

from jira import JIRA, JIRAError

from .config import COMMENT_PAGE_SIZE, JIRA_FETCH_BASE_FIELDS, JIRA_REST_API_VERSION


class JiraAPI:
    def __init__(self, server: str, email: str, token: str):
        self.server = server.rstrip("/")
        self.client = JIRA(
            basic_auth=(email, token),
            options={"server": self.server, "rest_api_version": JIRA_REST_API_VERSION},
        )
        # Simple in-memory cache: {issue_key: (timestamp, data)}
        self._cache: dict[str, tuple[float, dict]] = {}
        self._cache_ttl = 300.0  # seconds

    def clear_cache(self) -> None:
        """Reset the in-memory issue cache."""
        cache = getattr(self, "_cache", None)
        if isinstance(cache, dict):
            cache.clear()

    def fetch_issue_raw(self, issue_key: str) -> dict[str, Any]:
        now = time.time()
        cached = self._cache.get(issue_key)
        if cached and (now - cached[0]) < self._cache_ttl:
            return cached[1]
        try:
            issue = self.client.issue(issue_key, fields=",".join(JIRA_FETCH_BASE_FIELDS))
        except JIRAError as exc:  # pragma: no cover - network error path
            raise RuntimeError(f"Failed to fetch issue {issue_key}: {exc}") from exc
        if hasattr(issue, "raw"):
            raw = issue.raw
        elif isinstance(issue, dict):
            raw = issue
        else:
            raise RuntimeError(f"Unexpected issue payload type for {issue_key}: {type(issue)!r}")
        self._cache[issue_key] = (now, raw)
        return raw

    def fetch_comments_raw(self, issue_key: str, page_size: int = COMMENT_PAGE_SIZE) -> list[dict[str, Any]]:
        """Fetch every comment of an issue, following startAt pagination."""
        session = getattr(self.client, "_session", None)
        if session is None:
            raise RuntimeError("JIRA session unavailable")
        url = f"{self.server}/rest/api/{JIRA_REST_API_VERSION}/issue/{issue_key}/comment"
        out: list[dict[str, Any]] = []
        start_at = 0
        while True:
            resp = session.get(url, params={"startAt": start_at, "maxResults": page_size})
            if resp.status_code >= 400:
                raise RuntimeError(f"Comment fetch failed {resp.status_code}: {resp.text[:200]}")
            data = resp.json()
            page = data.get("comments", []) or []
            out.extend(page)
            start_at += len(page)
            total = data.get("total")
            if not page or (isinstance(total, int) and start_at >= total):
                break
        return out
