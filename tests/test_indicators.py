import re

import pytest

from jira_risk.analytics.risk.indicators import (
    detect_risk_indicators,
    determine_severity,
    indicator_detail,
    indicator_segment,
    pattern_literal,
)
from jira_risk.analytics.risk.patterns import RiskCategory

EMPTY = (False, [], "low")


def _shape(result):
    return result.present, result.indicators, result.severity


@pytest.mark.parametrize(
    "text, patterns",
    [
        ("", ["debt"]),
        (None, ["debt"]),
        ("some text", []),
        ("some text", None),
        ({"type": "doc", "content": []}, ["debt"]),
        (42, ["debt"]),
    ],
)
def test_invalid_inputs_yield_empty_result(text, patterns):
    assert _shape(detect_risk_indicators(text, patterns, "C")) == EMPTY


def test_literal_match_is_case_insensitive_and_counted_once():
    result = detect_risk_indicators("Hack here, HACK there, hack everywhere", ["hack"], "C")
    assert result.present
    assert result.indicators == ["C: 'hack' found in text"]
    assert result.severity == "low"


def test_literal_needle_rendered_as_given():
    result = detect_risk_indicators("uses a Workaround", ["WorkAround"], "C")
    assert result.indicators == ["C: 'WorkAround' found in text"]


@pytest.mark.parametrize(
    "count, severity",
    [(0, "low"), (1, "low"), (2, "low"), (3, "medium"), (5, "medium"), (6, "high"), (9, "high")],
)
def test_severity_boundaries(count, severity):
    needles = [f"n{i}x" for i in range(count)]
    text = " ".join(needles) or "nothing"
    result = detect_risk_indicators(text, needles + ["absent"], "C")
    assert len(result.indicators) == count
    assert result.severity == severity
    assert determine_severity(count) == severity


def test_regex_indicator_without_flags_renders_source():
    result = detect_risk_indicators("see PROJ-12 first", [re.compile(r"[A-Z]+-\d+")], "C")
    assert result.indicators == [r"C: Pattern match '[A-Z]+-\d+' found in text"]


def test_regex_indicator_with_flag_keeps_trailing_delimiter():
    result = detect_risk_indicators("UPPERCASE words", [re.compile("uppercase", re.I)], "C")
    assert result.indicators == ["C: Pattern match 'uppercase/' found in text"]


def test_regex_search_ignores_case_even_without_flag():
    result = detect_risk_indicators("Latency of 250 MS", [re.compile(r"\b\d+\s?ms\b")], "C")
    assert result.present


def test_pattern_literal_flag_order():
    assert pattern_literal(re.compile("x", re.I | re.M)) == "/x/im"
    assert pattern_literal(re.compile("x")) == "/x/"


def test_category_enum_used_as_label():
    result = detect_risk_indicators("we owe technical debt", ["technical debt"], RiskCategory.TECHNICAL_DEBT)
    assert result.category == "Technical Debt Risk"
    assert result.indicators == ["Technical Debt Risk: 'technical debt' found in text"]


def test_unknown_needle_types_are_ignored():
    result = detect_risk_indicators("abc", [123, None, "abc"], "C")
    assert result.indicators == ["C: 'abc' found in text"]


def test_indicator_helpers():
    raw = "Dependency Risk: 'blocked by' found in text"
    assert indicator_segment(raw) == " 'blocked by' found in text"
    assert indicator_detail(raw, "Dependency Risk") == "'blocked by' found in text"
    assert indicator_segment("no colon here") == ""
