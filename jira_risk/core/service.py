"""RiskService: fetch an issue and its comments from Jira and assess its delivery risk."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import pandas as pd

from jira_risk.analytics.aggregations.risk import assessments_to_dataframe
from jira_risk.analytics.risk.engine import assess_with_categories, get_risk_identification

from .config import SETTINGS, AppSettings
from .jira_client import JiraAPI
from .mappers import map_comments, map_issue
from .models import CommentModel, IssueModel, PreviousAnalysisResults, RiskCategoryResult, RiskIdentification
from .risk_config import load_risk_weights

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int | None, int | None], None]


class RiskService:
    def __init__(
        self,
        api: JiraAPI,
        *,
        settings: AppSettings | None = None,
        weights: Mapping[str, float] | None = None,
    ):
        self.api = api
        self.settings = settings or SETTINGS
        self.weights = dict(weights) if weights is not None else load_risk_weights()

    # ------------------ Fetch Methods ------------------
    def fetch_issue(self, issue_key: str) -> tuple[IssueModel, list[CommentModel]]:
        """Fetch and map one issue plus its full comment thread.

        A failed comment fetch is logged and assessed as an empty thread.
        """
        raw = self.api.fetch_issue_raw(issue_key)
        issue = map_issue(raw)
        try:
            comments = map_comments(self.api.fetch_comments_raw(issue_key))
        except RuntimeError as exc:
            logger.warning("Failed to fetch comments for %s: %s", issue_key, exc)
            comments = []
        return issue, comments

    # ------------------ Assessment ------------------
    def assess(
        self,
        issue: IssueModel,
        comments: Iterable[CommentModel] | None,
        previous: PreviousAnalysisResults | Mapping[str, Any] | None = None,
    ) -> RiskIdentification:
        return get_risk_identification(
            issue,
            list(comments or []),
            previous,
            weights=self.weights,
            max_workers=self.settings.analyzer_max_workers,
            include_keyword_suggestions=self.settings.include_keyword_suggestions,
        )

    def assess_issue(
        self,
        issue_key: str,
        previous: PreviousAnalysisResults | Mapping[str, Any] | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> RiskIdentification:
        if progress:
            progress(f"Fetching details for {issue_key}", None, None)
        issue, comments = self.fetch_issue(issue_key)
        if progress:
            progress(f"Assessing risk for {issue_key}", None, None)
        return self.assess(issue, comments, previous)

    def assess_issue_detail(
        self,
        issue_key: str,
        previous: PreviousAnalysisResults | Mapping[str, Any] | None = None,
    ) -> tuple[RiskIdentification, dict[str, RiskCategoryResult]]:
        """Assessment plus the per-category results it was merged from."""
        issue, comments = self.fetch_issue(issue_key)
        return assess_with_categories(
            issue,
            comments,
            previous,
            weights=self.weights,
            max_workers=self.settings.analyzer_max_workers,
            include_keyword_suggestions=self.settings.include_keyword_suggestions,
        )

    def assess_many(
        self,
        issue_keys: Iterable[str],
        previous: Mapping[str, PreviousAnalysisResults | Mapping[str, Any]] | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> pd.DataFrame:
        """Assess several issues and summarize them in one DataFrame.

        Issues that cannot be fetched are skipped with a warning.
        """
        keys = [k for k in dict.fromkeys(issue_keys) if k]
        previous = previous or {}
        assessments: dict[str, RiskIdentification] = {}
        for idx, key in enumerate(keys, start=1):
            if progress:
                progress("Assessing issues", idx, len(keys))
            try:
                assessments[key] = self.assess_issue(key, previous.get(key))
            except RuntimeError as exc:
                logger.warning("Skipping %s: %s", key, exc)
        df = assessments_to_dataframe(assessments)
        return df.head(self.settings.max_table_rows)
