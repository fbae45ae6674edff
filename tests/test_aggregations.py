import pandas as pd

from jira_risk.analytics.aggregations.risk import (
    aggregate_by_risk_level,
    assessments_to_dataframe,
    category_breakdown,
    risk_level,
)
from jira_risk.core.models import RiskCategoryResult, RiskIdentification
from jira_risk.visual.tables import add_ticket_link


def _assessments():
    return {
        "RISK-1": RiskIdentification(score=2, items=["a"], mitigation_suggestions=[]),
        "RISK-2": RiskIdentification(score=8, items=["a", "b", "c"], mitigation_suggestions=["s"]),
        "RISK-3": RiskIdentification(score=5, items=[], mitigation_suggestions=["s", "t"]),
        "RISK-4": RiskIdentification(score=8, items=["x"], mitigation_suggestions=[]),
    }


def test_risk_level_bands():
    assert [risk_level(s) for s in (1, 3, 4, 6, 7, 10)] == ["low", "low", "medium", "medium", "high", "high"]


def test_assessments_to_dataframe_sorted():
    df = assessments_to_dataframe(_assessments())
    assert list(df["key"]) == ["RISK-2", "RISK-4", "RISK-3", "RISK-1"]
    row = df.iloc[0]
    assert row["risk_count"] == 3
    assert row["suggestion_count"] == 1
    assert row["risk_level"] == "high"


def test_empty_assessments():
    df = assessments_to_dataframe({})
    assert df.empty
    assert "score" in df.columns
    assert aggregate_by_risk_level(df).empty


def test_aggregate_by_risk_level():
    out = aggregate_by_risk_level(assessments_to_dataframe(_assessments()))
    assert list(out["risk_level"]) == ["low", "medium", "high"]
    assert list(out["issues"]) == [1, 1, 2]
    assert out.loc[out["risk_level"] == "high", "mean_score"].iloc[0] == 8


def test_category_breakdown():
    results = {
        name: RiskCategoryResult(score=score)
        for name, score in zip(["technical", "dependency", "timeline", "knowledge", "information"], [2, 1, 1, 3, 4])
    }
    df = category_breakdown(results)
    assert list(df["category"]) == ["technical", "dependency", "timeline", "knowledge", "information"]
    assert abs(df["contribution"].sum() - 2.15) < 1e-9
    assert isinstance(df, pd.DataFrame)


def test_ticket_link_injection():
    df = assessments_to_dataframe(_assessments()).head(1)
    server = "https://example.atlassian.net"
    linked, cfg = add_ticket_link(df, server)
    assert linked.loc[linked.index[0], "Ticket"] == server + "/browse/RISK-2"
    assert "Ticket" in cfg
