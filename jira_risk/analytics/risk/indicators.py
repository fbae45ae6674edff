"""Pattern detection primitive shared by every risk category analyzer (pure functions)."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from jira_risk.core.config import SEVERITY_HIGH_MIN, SEVERITY_MEDIUM_MIN
from jira_risk.core.models import RiskIndicatorResult

# Flag letters in the order a regex literal lists them
_FLAG_LETTERS: Sequence[tuple[int, str]] = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def determine_severity(count: int) -> str:
    """Map an indicator count to a severity tier.

    >>> [determine_severity(n) for n in (0, 2, 3, 5, 6)]
    ['low', 'low', 'medium', 'medium', 'high']
    """
    if count >= SEVERITY_HIGH_MIN:
        return "high"
    if count >= SEVERITY_MEDIUM_MIN:
        return "medium"
    return "low"


def pattern_literal(pattern: re.Pattern) -> str:
    """Render a compiled pattern as a regex literal, e.g. ``/abc/i``."""
    flags = "".join(letter for flag, letter in _FLAG_LETTERS if pattern.flags & flag)
    return f"/{pattern.pattern}/{flags}"


def render_pattern_body(pattern: re.Pattern) -> str:
    """Body shown in a pattern indicator: the literal minus its first and last character.

    For a flagless pattern this is exactly the source. With flags the trailing
    delimiter survives and the last flag letter is dropped
    (``/uppercase/i`` -> ``uppercase/``); existing reports rely on this form.
    """
    return pattern_literal(pattern)[1:-1]


def check_string_pattern(normalized_text: str, needle: str, category: str) -> str | None:
    if needle.lower() in normalized_text:
        return f"{category}: '{needle}' found in text"
    return None


def check_regex_pattern(normalized_text: str, pattern: re.Pattern, category: str) -> str | None:
    if re.search(pattern.pattern, normalized_text, pattern.flags | re.IGNORECASE):
        return f"{category}: Pattern match '{render_pattern_body(pattern)}' found in text"
    return None


def _has_valid_inputs(text: Any, patterns: Any) -> bool:
    return isinstance(text, str) and bool(text) and isinstance(patterns, (list, tuple)) and len(patterns) > 0


def detect_risk_indicators(text: Any, patterns: Any, category: Any) -> RiskIndicatorResult:
    """Detect needles from ``patterns`` in ``text``.

    Parameters
    ----------
    text : str
        Text to scan (description, comments, ...). Any non-string or empty
        value yields an empty low-severity result.
    patterns : list or tuple of str | re.Pattern
        Literal needles (substring match) and compiled regexes (search).
    category : str or RiskCategory
        Label embedded in each indicator string.

    Returns
    -------
    RiskIndicatorResult
        One indicator per matching needle, regardless of occurrence count.
    """
    label = getattr(category, "value", category)
    if not _has_valid_inputs(text, patterns):
        return RiskIndicatorResult(present=False, indicators=[], severity="low", category=label)

    normalized = text.lower()
    found: list[str] = []
    for needle in patterns:
        if isinstance(needle, str):
            indicator = check_string_pattern(normalized, needle, label)
        elif isinstance(needle, re.Pattern):
            indicator = check_regex_pattern(normalized, needle, label)
        else:
            indicator = None
        if indicator:
            found.append(indicator)

    return RiskIndicatorResult(
        present=len(found) > 0,
        indicators=found,
        severity=determine_severity(len(found)),
        category=label,
    )


def indicator_detail(indicator: str, category: str | None) -> str:
    """Text of an indicator after its ``"<category>: "`` label."""
    prefix = f"{category}: " if category else ""
    if prefix and indicator.startswith(prefix):
        return indicator[len(prefix) :]
    return indicator


def indicator_segment(indicator: str) -> str:
    """Segment between the first and second colon of an indicator.

    Keeps the leading space, so ``"Dependency Risk: 'x' found in text"`` gives
    ``" 'x' found in text"``. Indicators without a colon yield "".
    """
    parts = indicator.split(":")
    return parts[1] if len(parts) > 1 else ""
