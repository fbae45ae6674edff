import pytest

from jira_risk.analytics.risk.scoring import (
    Contribution,
    LadderPolicy,
    apply_severity_ladder,
    calculate_risk_score,
    combine,
    finalize_score,
    normalize_weights,
    round_half_up,
)
from jira_risk.core.config import DEFAULT_RISK_WEIGHTS
from jira_risk.core.models import RiskIndicatorResult

POLICY = LadderPolicy(prefix="Thing risk: ", high_suggestions=("h1", "h2"), medium_suggestion="m1")


def test_aggregate_uniform_scores():
    assert calculate_risk_score([5, 5, 5, 5, 5]) == 5
    assert calculate_risk_score([5, 5, 5, 5, 5], DEFAULT_RISK_WEIGHTS) == 5


def test_aggregate_clamps_out_of_range_scores():
    # -5 and 0 count as 1: 0.25 + 0.20 + 1.0 + 0.75 + 1.0 = 3.2
    assert calculate_risk_score([-5, 0, 5, 5, 5]) == calculate_risk_score([1, 1, 5, 5, 5]) == 3
    assert calculate_risk_score([50, 50, 50, 50, 50]) == 10


def test_weights_are_normalized_when_not_summing_to_one():
    weights = [2.5, 2.0, 2.0, 1.5, 2.0]
    # 0.25 * 10 + 0.75 * 1 = 3.25
    assert calculate_risk_score([10, 1, 1, 1, 1], weights) == 3
    # 0.45 * 10 + 0.55 * 1 = 5.05
    assert calculate_risk_score([10, 10, 1, 1, 1], weights) == 5


def test_normalize_weights_keeps_unit_sum():
    weights = {"a": 0.5, "b": 0.4995}
    assert normalize_weights(weights) == weights
    assert normalize_weights({"a": 3, "b": 1}) == {"a": 0.75, "b": 0.25}


def test_zero_weight_excludes_category():
    weights = {"technical": 0, "dependency": 1, "timeline": 0, "knowledge": 0, "information": 0}
    scores = {"technical": 10, "dependency": 2, "timeline": 10, "knowledge": 10, "information": 10}
    assert calculate_risk_score(scores, weights) == 2


def test_contract_violations_raise():
    with pytest.raises(ValueError):
        calculate_risk_score([1, 2, 3])
    with pytest.raises(ValueError):
        calculate_risk_score([1, 1, 1, 1, 1], [0, 0, 0, 0, 0])
    with pytest.raises(KeyError):
        calculate_risk_score({"technical": 1})


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(1.75) == 2
    assert round_half_up(1.49) == 1
    assert finalize_score(-3) == 1
    assert finalize_score(12.6) == 10


def _result(n, severity):
    return RiskIndicatorResult(
        present=n > 0,
        indicators=[f"Thing Risk: 'n{i}' found in text" for i in range(n)],
        severity=severity,
        category="Thing Risk",
    )


def test_ladder_high_medium_low():
    high = apply_severity_ladder(_result(6, "high"), POLICY)
    assert high.score == 3
    assert high.mitigation_suggestions == ["h1", "h2"]
    assert high.risk_items[0] == "Thing risk:  'n0' found in text"

    medium = apply_severity_ladder(_result(3, "medium"), POLICY)
    assert (medium.score, medium.mitigation_suggestions) == (2, ["m1"])

    low = apply_severity_ladder(_result(1, "low"), POLICY)
    assert (low.score, low.mitigation_suggestions) == (1, [])

    absent = apply_severity_ladder(_result(0, "low"), POLICY)
    assert (absent.score, absent.risk_items) == (0, [])


def test_combine_clamps_and_dedupes():
    result = combine(
        [
            Contribution(score=7, risk_items=["a"], mitigation_suggestions=["s", "t"]),
            Contribution(score=8, risk_items=["a"], mitigation_suggestions=["s"]),
        ]
    )
    assert result.score == 10
    assert result.risk_items == ["a", "a"]
    assert result.mitigation_suggestions == ["s", "t"]
