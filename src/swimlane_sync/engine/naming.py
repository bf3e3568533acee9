"""Swimlane name and query derivation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from swimlane_sync.engine.models import SUMMARY_FIELD_ID

if TYPE_CHECKING:
    from swimlane_sync.engine.models import Issue

NO_SUMMARY = "No summary"


def swimlane_name(issue: Issue) -> str:
    """Build the swimlane name for an issue: "<KEY> summary"."""
    summary = issue.get_field(SUMMARY_FIELD_ID)
    if summary is not None:
        return f"<{issue.key}> {summary.text}"

    return f"<{issue.key}> {NO_SUMMARY}"


def swimlane_query(issue_key: str) -> str:
    """Build the swimlane filter selecting all issues linked to issue_key."""
    return f"issue in linkedIssues({issue_key})"
