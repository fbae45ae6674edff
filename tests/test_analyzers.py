from jira_risk.analytics.risk.dependency import analyze_dependency_risk
from jira_risk.analytics.risk.information import analyze_information_risk
from jira_risk.analytics.risk.knowledge import analyze_knowledge_risk
from jira_risk.analytics.risk.mitigation import MITIGATION_SUGGESTIONS
from jira_risk.analytics.risk.technical import analyze_technical_risk
from jira_risk.analytics.risk.timeline import analyze_timeline_risk
from jira_risk.core.models import IssueModel, PreviousAnalysisResults


def _issue(description="", assignee="Alice"):
    return IssueModel(key="RISK-1", summary="Test", description=description, assignee=assignee)


def _prior(**sections):
    return PreviousAnalysisResults.from_dict(sections)


# ------------------ Technical ------------------
def test_technical_single_debt_mention():
    result = analyze_technical_risk(_issue("technical debt"), [])
    assert result.score == 2
    assert result.risk_items == ["High technical debt risk: 'technical debt' found in text"]
    assert result.mitigation_suggestions == [MITIGATION_SUGGESTIONS["technical_debt"]]


def test_technical_scores_each_present_category():
    text = "Security review needed: password storage and encryption; performance is slow, latency spikes"
    result = analyze_technical_risk(_issue(text), [])
    # security (3 matches, medium +1.5) + performance (3 matches, medium +1.5)
    assert result.score == 4
    assert result.risk_items[0].startswith("Performance concern: ")
    assert result.risk_items[-1].startswith("Security risk: ")
    assert result.mitigation_suggestions == [
        MITIGATION_SUGGESTIONS["performance_concern"],
        MITIGATION_SUGGESTIONS["security_issue"],
    ]


def test_technical_reads_comment_text_and_ignores_structured_description():
    comments = [{"body": "This refactor touches the architecture"}, {"body": None}]
    result = analyze_technical_risk(_issue({"type": "doc", "content": []}), comments)
    assert "High technical debt risk: 'refactor' found in text" in result.risk_items
    assert "Architecture impact risk: 'architecture' found in text" in result.risk_items
    assert result.score == 3  # 1 + 0.75 + 0.75 = 2.5 -> 3


# ------------------ Dependency ------------------
def test_dependency_blockers_from_prior_results():
    prior = _prior(dependencies={"blockers": ["b1", "b2"], "externalDependencies": []})
    result = analyze_dependency_risk(_issue(""), [], prior)
    assert result.score == 5
    assert result.risk_items == ["Issue has 2 linked blocker issues"]
    assert result.mitigation_suggestions == ["Address blocking issues before starting implementation"]


def test_dependency_single_blocker_and_external_caps():
    prior = _prior(dependencies={"blockers": ["b1"], "externalDependencies": ["x"] * 5})
    result = analyze_dependency_risk(_issue(""), [], prior)
    assert result.risk_items == [
        "Issue has 1 linked blocker issue",
        "Issue has 5 external dependencies identified",
    ]
    assert result.score == 1 + 2 + 3


def test_dependency_text_ladder():
    text = "This depends on the auth work, is blocked by OPS, and we are waiting for the vendor"
    result = analyze_dependency_risk(_issue(text), [])
    assert result.risk_items[:3] == [
        "Dependency risk:  'depends on' found in text",
        "Dependency risk:  'blocked by' found in text",
        "Dependency risk:  'waiting for' found in text",
    ]
    assert result.risk_items[3] == "External dependency risk:  'vendor' found in text"
    # medium dependency (+2) plus low external (+1)
    assert result.score == 4
    assert result.mitigation_suggestions == [
        "Document dependencies clearly and track them closely throughout development"
    ]


def test_dependency_without_prior_results():
    result = analyze_dependency_risk(_issue("nothing to see"), None, None)
    assert result.score == 1
    assert result.risk_items == []


# ------------------ Timeline ------------------
def test_timeline_duration_checks():
    prior = _prior(
        duration={
            "exceedsSprint": True,
            "sprintReassignments": 3,
            "statusCycling": {"totalRevisits": 2},
            "blockedTime": {"totalDays": 4.5},
            "anomalies": ["Long in review", "Reopened"],
        }
    )
    result = analyze_timeline_risk(_issue(""), [], prior)
    assert result.risk_items == [
        "Issue likely to exceed sprint boundary",
        "Issue has been reassigned across sprints 3 times",
        "Issue has cycled through statuses 2 times",
        "Issue has been blocked for 5 days",
        "Duration anomalies detected: Long in review",
    ]
    assert result.mitigation_suggestions == [
        "Plan for possibility of work extending beyond sprint boundaries",
        "Review scope and possibly break down into smaller tasks",
        "Ensure clear definition of done for each stage to avoid rework",
    ]
    # 1 + 2 + 3 + 2 + 2 + 1 = 11, clamped
    assert result.score == 10


def test_timeline_duration_thresholds_not_met():
    prior = _prior(
        duration={
            "exceedsSprint": False,
            "sprintReassignments": 1,
            "statusCycling": {"totalRevisits": 1},
            "blockedTime": {"totalDays": 3},
            "anomalies": [],
        }
    )
    result = analyze_timeline_risk(_issue(""), [], prior)
    assert result.score == 1
    assert result.risk_items == []


def test_timeline_text_ladder():
    text = "Urgent: the deadline is by Friday, release date fixed, story points were underestimated"
    result = analyze_timeline_risk(_issue(text), [])
    assert result.risk_items[0] == "Timeline constraint:  'deadline' found in text"
    assert "Estimation concern:  'underestimated' found in text" in result.risk_items
    # timeline: deadline, urgent, release date, by friday -> medium (+2)
    # estimation: underestimated, story points -> low (+1)
    assert result.score == 4
    assert result.mitigation_suggestions == ["Create detailed timeline with key milestones and dependencies"]


def test_ladder_items_keep_space_after_category_label():
    result = analyze_timeline_risk(_issue("deadline", assignee="a"), [])
    assert result.risk_items == ["Timeline constraint:  'deadline' found in text"]
    assert result.score == 1


# ------------------ Knowledge ------------------
def test_knowledge_unassigned_and_very_complex():
    result = analyze_knowledge_risk(_issue("", assignee=None), [], _prior(complexity={"level": "very complex"}))
    assert result.score == 5
    assert result.risk_items[0] == "Issue not assigned to anyone, possibly due to knowledge requirements"
    assert "very complex" in result.risk_items[1]
    assert len(result.mitigation_suggestions) == 1
    assert "well-documented" in result.mitigation_suggestions[0]


def test_knowledge_complex_is_not_very_complex():
    result = analyze_knowledge_risk(_issue("routine change"), [], _prior(complexity={"level": "complex"}))
    assert result.score == 1
    assert result.risk_items == []


def test_knowledge_text_ladder():
    text = "Only the specialist knows this legacy mainframe job; it is undocumented tribal knowledge"
    result = analyze_knowledge_risk(_issue(text), [])
    assert "Knowledge concentration risk:  'specialist' found in text" in result.risk_items
    assert "Specialized technology risk:  'legacy' found in text" in result.risk_items
    # knowledge: tribal knowledge, undocumented, specialist -> medium (+2)
    # specialized: legacy, mainframe -> low (+1)
    assert result.score == 4


# ------------------ Information ------------------
def test_information_low_completeness():
    prior = _prior(
        completeness={
            "score": 4.0,
            "missingInformation": ["acceptance criteria", "owner", "scope", "design"],
            "suggestions": ["Add acceptance criteria", "Name an owner", "Describe scope"],
        }
    )
    result = analyze_information_risk(_issue("Clear description"), [], prior)
    assert result.risk_items == [
        "Issue has low completeness score: 4/10",
        "Missing information: acceptance criteria",
        "Missing information: owner",
        "Missing information: scope",
    ]
    assert result.mitigation_suggestions == [
        "Request clarification on missing requirements before implementation begins",
        "Add acceptance criteria",
        "Name an owner",
    ]
    assert result.score == 7


def test_information_moderate_completeness():
    prior = _prior(completeness={"score": 6, "missingInformation": ["x", "y"], "suggestions": []})
    result = analyze_information_risk(_issue("Clear description"), [], prior)
    assert result.risk_items == ["Missing information: x", "Missing information: y"]
    assert result.mitigation_suggestions == ["Document assumptions and seek confirmation from stakeholders"]
    assert result.score == 5


def test_information_high_completeness_contributes_nothing():
    prior = _prior(completeness={"score": 9})
    result = analyze_information_risk(_issue("Clear description"), [], prior)
    assert result.score == 1


def test_information_missing_description_runs_without_prior():
    for description in ("", "   ", None, {"type": "doc"}):
        result = analyze_information_risk(_issue(description), [])
        assert result.score == 4
        assert result.risk_items == ["Issue has no description"]
        assert result.mitigation_suggestions == [
            "Request complete description and requirements before proceeding"
        ]


def test_information_text_ladder():
    text = "Behaviour is TBD and unclear, maybe we could be smarter"
    result = analyze_information_risk(_issue(text), [])
    assert result.risk_items == [
        "Requirements gap:  'tbd' found in text",
        "Requirements gap:  'unclear' found in text",
        "Ambiguity issue:  'maybe' found in text",
        "Ambiguity issue:  'could be' found in text",
    ]
    assert result.score == 3
