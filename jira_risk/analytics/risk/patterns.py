"""Needle tables for risk detection.

Each table is an immutable tuple of literal substrings and compiled regular
expressions associated with one ``RiskCategory``. Literals are matched
case-insensitively; regexes are searched with ``re.IGNORECASE`` added.
"""

from __future__ import annotations

import re
from enum import Enum


class RiskCategory(str, Enum):
    """Category labels embedded in indicator strings."""

    TECHNICAL_DEBT = "Technical Debt Risk"
    ARCHITECTURE = "Architecture Impact Risk"
    PERFORMANCE = "Performance Risk"
    SECURITY = "Security Risk"
    DEPENDENCY = "Dependency Risk"
    EXTERNAL_DEPENDENCY = "External Dependency Risk"
    TIMELINE = "Timeline Risk"
    ESTIMATION = "Estimation Risk"
    KNOWLEDGE = "Knowledge Risk"
    SPECIALIZED_TECH = "Specialized Technology Risk"
    REQUIREMENTS_GAP = "Requirements Gap Risk"
    AMBIGUITY = "Ambiguity Risk"


# =============================================================================
# Technical
# =============================================================================
TECHNICAL_DEBT_PATTERNS = (
    "technical debt",
    "tech debt",
    "workaround",
    "hack",
    "quick fix",
    "temporary solution",
    "legacy code",
    "refactor",
    "todo",
    "fixme",
    "band-aid",
    "code smell",
    "duplicated code",
    "deprecated",
)

ARCHITECTURE_PATTERNS = (
    "architecture",
    "system-wide",
    "cross-cutting",
    "core component",
    "schema change",
    "database schema",
    "breaking change",
    "api contract",
    "data migration",
    "redesign",
    "infrastructure",
    "microservice",
    "data model",
)

PERFORMANCE_PATTERNS = (
    "performance",
    "latency",
    "slow",
    "bottleneck",
    "timeout",
    "memory leak",
    "throughput",
    "scalability",
    "high load",
    "response time",
    "cpu usage",
    re.compile(r"\b\d+\s?ms\b"),
)

SECURITY_PATTERNS = (
    "security",
    "vulnerability",
    "authentication",
    "authorization",
    "encryption",
    "password",
    "credential",
    "xss",
    "sql injection",
    "csrf",
    "pii",
    "gdpr",
    "sensitive data",
    "access control",
    re.compile(r"\bcve-\d{4}-\d+"),
)

# =============================================================================
# Dependency
# =============================================================================
DEPENDENCY_PATTERNS = (
    "depends on",
    "dependent on",
    "blocked by",
    "waiting for",
    "waiting on",
    "prerequisite",
    "requires completion",
    "dependency",
    "dependencies",
    "blocker",
    re.compile(r"\bafter [a-z][a-z0-9]*-\d+ (is )?(done|merged|released)"),
)

EXTERNAL_DEPENDENCY_PATTERNS = (
    "external team",
    "third-party",
    "third party",
    "vendor",
    "external api",
    "external service",
    "another team",
    "other team",
    "partner",
    "upstream",
    "outside our control",
    "cross-team",
    "coordination with",
)

# =============================================================================
# Timeline
# =============================================================================
TIMELINE_PATTERNS = (
    "deadline",
    "urgent",
    "asap",
    "due date",
    "release date",
    "time constraint",
    "tight timeline",
    "end of sprint",
    "critical path",
    "hard date",
    "time-sensitive",
    "go-live",
    re.compile(r"\bby (monday|tuesday|wednesday|thursday|friday|end of (day|week|month))\b"),
)

ESTIMATION_PATTERNS = (
    "underestimated",
    "more complex than expected",
    "took longer",
    "taking longer",
    "scope creep",
    "re-estimate",
    "story points",
    "unknown effort",
    "rough estimate",
    "hard to estimate",
    "not sure how long",
    "additional work",
    "bigger than expected",
)

# =============================================================================
# Knowledge
# =============================================================================
KNOWLEDGE_PATTERNS = (
    "only person",
    "only one who",
    "single point of failure",
    "tribal knowledge",
    "undocumented",
    "no documentation",
    "subject matter expert",
    "specialist",
    "domain knowledge",
    "knowledge transfer",
    "bus factor",
    "nobody else knows",
    "siloed",
)

SPECIALIZED_TECH_PATTERNS = (
    "legacy",
    "proprietary",
    "machine learning",
    "cryptography",
    "kernel",
    "embedded",
    "firmware",
    "mainframe",
    "cobol",
    "blockchain",
    "fpga",
    "custom framework",
    "niche",
)

# =============================================================================
# Information
# =============================================================================
REQUIREMENTS_PATTERNS = (
    "tbd",
    "to be determined",
    "unclear",
    "not specified",
    "missing requirement",
    "requirements needed",
    "need clarification",
    "needs clarification",
    "open question",
    "undefined",
    "not defined",
    "no acceptance criteria",
)

AMBIGUITY_PATTERNS = (
    "maybe",
    "possibly",
    "might",
    "could be",
    "not sure",
    "unsure",
    "somehow",
    "etc.",
    "and so on",
    "probably",
    "ambiguous",
    "some kind of",
    "approximately",
)
