"""Risk identification scoring engine."""

from .engine import (
    CATEGORY_ANALYZERS,
    assess_with_categories,
    get_risk_identification,
    merge_category_results,
    run_category_analyzers,
)
from .indicators import detect_risk_indicators, determine_severity
from .patterns import RiskCategory
from .scoring import calculate_risk_score, normalize_weights

__all__ = [
    "CATEGORY_ANALYZERS",
    "RiskCategory",
    "assess_with_categories",
    "calculate_risk_score",
    "detect_risk_indicators",
    "determine_severity",
    "get_risk_identification",
    "merge_category_results",
    "normalize_weights",
    "run_category_analyzers",
]
