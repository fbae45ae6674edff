"""Mitigation suggestion catalogue and keyword-derived suggestions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

MITIGATION_SUGGESTIONS: Mapping[str, str] = MappingProxyType(
    {
        # Technical
        "technical_debt": (
            "Incorporate refactoring into development work rather than scheduling it separately; "
            "ensure estimates include time for proper craftsmanship"
        ),
        "security_issue": "Request security review from security team during implementation",
        "performance_concern": "Add specific performance acceptance criteria with measurable thresholds",
        "architecture_impact": "Schedule architecture review meeting before implementation",
        # Testing
        "test_coverage": "Develop comprehensive test plan before implementation begins",
        "testing_challenges": "Allocate additional time for test development and execution",
        # Knowledge
        "knowledge_concentration": "Schedule knowledge sharing sessions; document specialized components",
        "specialized_skills": "Identify team members with required specialized skills early in the process",
        # Dependency
        "external_dependencies": "Establish clear communication channels with dependent teams",
        "cross_team_coordination": "Set up regular coordination meetings with teams owning dependencies",
        "blocking_dependencies": "Consider reordering implementation to mitigate blocking dependencies",
        # Timeline
        "timeline_risk": "Consider breaking issue into smaller, more manageable sub-tasks",
        "sprint_boundary": "Plan for possibility of work extending beyond sprint boundaries",
        "estimation_risk": "Review and possibly adjust story point estimation before committing",
        # Information
        "requirements_gap": "Request clarification on missing requirements before implementation begins",
        "ambiguity_risk": "Document assumptions and seek confirmation from stakeholders",
    }
)

# Keyword families scanned in lowercased risk items, in output order
KEYWORD_SUGGESTION_RULES: Sequence[tuple[tuple[str, ...], str]] = (
    (("technical debt", "workaround", "hack", "temporary", "refactor"), "technical_debt"),
    (("security", "auth", "sensitive", "data", "compliance", "encryption"), "security_issue"),
    (("architecture", "design", "structure", "components", "system-wide"), "architecture_impact"),
    (("performance", "slow", "speed", "optimization", "latency", "throughput"), "performance_concern"),
    (("test", "coverage", "quality", "validation"), "test_coverage"),
    (("flaky", "hard to test", "manual testing"), "testing_challenges"),
    (("knowledge", "expertise", "specialized", "single developer"), "knowledge_concentration"),
    (("timeline", "schedule", "deadline", "estimation", "time"), "timeline_risk"),
    (("sprint", "boundary", "cycle"), "sprint_boundary"),
    (("dependency", "dependent", "blocker", "blocking", "waiting"), "blocking_dependencies"),
    (("external", "team", "coordination", "third-party"), "external_dependencies"),
    (("requirement", "specification", "unclear", "ambiguous", "missing"), "requirements_gap"),
)


def generate_mitigation_suggestions(risk_items: Iterable[str]) -> list[str]:
    """Derive catalogue suggestions from keywords found in risk items.

    Each catalogue entry is returned at most once, in first-trigger order.
    """
    suggestions: dict[str, None] = {}
    for item in risk_items:
        lowered = item.lower()
        for keywords, name in KEYWORD_SUGGESTION_RULES:
            if any(keyword in lowered for keyword in keywords):
                suggestions.setdefault(MITIGATION_SUGGESTIONS[name], None)
    return list(suggestions)
