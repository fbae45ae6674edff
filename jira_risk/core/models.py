"""Domain data models for Jira issues, prior analysis results, and risk assessments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in ``data`` (camelCase or snake_case)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(slots=True)
class CommentModel:
    author: str | None = None
    created: datetime | None = None
    # Plain text, a structured (ADF) document, or None
    body: Any = None


@dataclass(slots=True)
class IssueModel:
    key: str
    summary: str | None = None
    # Plain text or an opaque structured document; non-strings count as absent text
    description: Any = None
    assignee: str | None = None
    reporter: str | None = None
    priority: str | None = None
    status: str | None = None
    issuetype: str | None = None
    labels: list[str] = field(default_factory=list)
    issuelinks: list[dict] = field(default_factory=list)


# =============================================================================
# Prior analysis results
# =============================================================================
@dataclass(slots=True)
class ComplexityAnalysis:
    level: str
    score: float | None = None
    factors: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComplexityAnalysis:
        return cls(
            level=data.get("level", ""),
            score=data.get("score"),
            factors=list(data.get("factors") or []),
        )


@dataclass(slots=True)
class DependenciesAnalysis:
    blockers: list[Any] = field(default_factory=list)
    related_issues: list[Any] = field(default_factory=list)
    implicit_dependencies: list[Any] = field(default_factory=list)
    external_dependencies: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DependenciesAnalysis:
        return cls(
            blockers=list(_pick(data, "blockers", default=[])),
            related_issues=list(_pick(data, "relatedIssues", "related_issues", default=[])),
            implicit_dependencies=list(
                _pick(data, "implicitDependencies", "implicit_dependencies", default=[])
            ),
            external_dependencies=list(
                _pick(data, "externalDependencies", "external_dependencies", default=[])
            ),
        )


@dataclass(slots=True)
class StatusCycling:
    total_revisits: int = 0
    count: dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class BlockedTime:
    total_days: float = 0.0
    reasons: list[str] = field(default_factory=list)


@dataclass(slots=True)
class DurationAssessment:
    exceeds_sprint: bool = False
    sprint_reassignments: int = 0
    status_cycling: StatusCycling | None = None
    blocked_time: BlockedTime | None = None
    anomalies: list[str] = field(default_factory=list)
    in_progress_days: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DurationAssessment:
        cycling_raw = _pick(data, "statusCycling", "status_cycling")
        blocked_raw = _pick(data, "blockedTime", "blocked_time")
        cycling = None
        if isinstance(cycling_raw, dict):
            cycling = StatusCycling(
                total_revisits=_pick(cycling_raw, "totalRevisits", "total_revisits", default=0),
                count=dict(cycling_raw.get("count") or {}),
            )
        blocked = None
        if isinstance(blocked_raw, dict):
            blocked = BlockedTime(
                total_days=_pick(blocked_raw, "totalDays", "total_days", default=0.0),
                reasons=list(blocked_raw.get("reasons") or []),
            )
        return cls(
            exceeds_sprint=bool(_pick(data, "exceedsSprint", "exceeds_sprint", default=False)),
            sprint_reassignments=_pick(data, "sprintReassignments", "sprint_reassignments", default=0),
            status_cycling=cycling,
            blocked_time=blocked,
            anomalies=list(data.get("anomalies") or []),
            in_progress_days=_pick(data, "inProgressDays", "in_progress_days"),
        )


@dataclass(slots=True)
class CompletenessEvaluation:
    score: float
    missing_information: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompletenessEvaluation:
        return cls(
            score=data.get("score", 0),
            missing_information=list(
                _pick(data, "missingInformation", "missing_information", default=[])
            ),
            suggestions=list(data.get("suggestions") or []),
        )


@dataclass(slots=True)
class PreviousAnalysisResults:
    """Optional enrichment bag produced by earlier analysis passes.

    Every section is independently optional; an absent section contributes
    nothing to the risk score.
    """

    complexity: ComplexityAnalysis | None = None
    dependencies: DependenciesAnalysis | None = None
    duration: DurationAssessment | None = None
    completeness: CompletenessEvaluation | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> PreviousAnalysisResults:
        data = data or {}
        complexity = data.get("complexity")
        dependencies = data.get("dependencies")
        duration = data.get("duration")
        completeness = data.get("completeness")
        return cls(
            complexity=ComplexityAnalysis.from_dict(complexity) if complexity else None,
            dependencies=DependenciesAnalysis.from_dict(dependencies) if dependencies else None,
            duration=DurationAssessment.from_dict(duration) if duration else None,
            completeness=CompletenessEvaluation.from_dict(completeness) if completeness else None,
        )


# =============================================================================
# Risk results
# =============================================================================
@dataclass(slots=True)
class RiskIndicatorResult:
    present: bool = False
    indicators: list[str] = field(default_factory=list)
    severity: str = "low"
    # Label of the needle table that produced these indicators
    category: str | None = None


@dataclass(slots=True)
class RiskCategoryResult:
    score: int
    risk_items: list[str] = field(default_factory=list)
    mitigation_suggestions: list[str] = field(default_factory=list)


@dataclass(slots=True)
class RiskIdentification:
    score: int
    items: list[str] = field(default_factory=list)
    mitigation_suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "items": list(self.items),
            "mitigationSuggestions": list(self.mitigation_suggestions),
        }
