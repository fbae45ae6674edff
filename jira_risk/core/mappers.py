"""Mapping raw Jira issue / comment JSON into IssueModel and CommentModel instances."""

from __future__ import annotations

from typing import Any

import pandas as pd

from .models import CommentModel, IssueModel


def _parse_dt(val):
    if not val:
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def _display_name(value: Any) -> str | None:
    if not value:
        return None
    if isinstance(value, dict):
        return value.get("displayName") or value.get("name")
    return str(value)


def _named(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get("name")
    return None


def map_comment(raw: dict[str, Any]) -> CommentModel:
    return CommentModel(
        author=_display_name(raw.get("author")),
        created=_parse_dt(raw.get("created")),
        body=raw.get("body"),
    )


def map_comments(raw: dict[str, Any] | list | None) -> list[CommentModel]:
    """Accept a comment page (``{"comments": [...]}``) or a bare list."""
    if raw is None:
        return []
    if isinstance(raw, dict):
        items = raw.get("comments") or []
    else:
        items = raw
    return [map_comment(c) for c in items if isinstance(c, dict)]


def map_issue(raw: dict[str, Any]) -> IssueModel:
    fields = raw.get("fields") or {}
    return IssueModel(
        key=raw.get("key"),
        summary=fields.get("summary"),
        description=fields.get("description"),
        assignee=_display_name(fields.get("assignee")),
        reporter=_display_name(fields.get("reporter")),
        priority=_named(fields.get("priority")),
        status=_named(fields.get("status")),
        issuetype=_named(fields.get("issuetype")),
        labels=list(fields.get("labels", []) or []),
        issuelinks=list(fields.get("issuelinks", []) or []),
    )

