"""Plain-text extraction from Jira descriptions and comment bodies.

Jira REST v3 returns rich text as Atlassian Document Format (ADF) dicts. The
risk engine only works on plain strings, so these helpers flatten documents
and coerce anything else to an empty string.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .models import CommentModel


def extract_text_from_adf(node: Any) -> str:
    """Flatten an ADF node into plain text.

    Text leaves are returned as-is; container nodes join the text of their
    children with a single space. Missing or malformed content yields "".

    Examples
    --------
    >>> extract_text_from_adf({"type": "doc", "content": [
    ...     {"type": "paragraph", "content": [{"type": "text", "text": "Hi"}]}]})
    'Hi'
    """
    if not isinstance(node, dict):
        return ""
    text = node.get("text")
    if isinstance(text, str):
        return text
    children = node.get("content")
    if not isinstance(children, list):
        return ""
    return " ".join(extract_text_from_adf(child) for child in children)


def coerce_description(value: Any) -> str:
    """Return the description when it is a string, otherwise ""."""
    return value if isinstance(value, str) else ""


def extract_comment_body(body: Any) -> str:
    if isinstance(body, str):
        return body
    if isinstance(body, dict):
        return extract_text_from_adf(body)
    return ""


def extract_comments_text(comments: Iterable[CommentModel | dict] | None) -> str:
    """Join comment bodies with a single space, preserving thread order.

    Accepts ``CommentModel`` instances or raw comment dicts.
    """
    if not comments:
        return ""
    parts: list[str] = []
    for comment in comments:
        if isinstance(comment, CommentModel):
            body = comment.body
        elif isinstance(comment, dict):
            body = comment.get("body")
        else:
            body = None
        parts.append(extract_comment_body(body))
    return " ".join(parts)


def build_analysis_text(description: Any, comments_text: str) -> str:
    """Combine description and comment text the way every analyzer reads it."""
    return f"{coerce_description(description)} {comments_text}"
