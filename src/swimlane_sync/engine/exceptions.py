"""Custom exceptions for the decision engine."""

from __future__ import annotations


class SwimlaneSyncError(Exception):
    """Base exception for swimlane synchronization errors."""


class DashboardFetchError(SwimlaneSyncError):
    """Current swimlanes of a dashboard could not be fetched."""

    def __init__(self, dashboard_id: int, issue_key: str, reason: str = "") -> None:
        self.dashboard_id = dashboard_id
        self.issue_key = issue_key
        message = f"Can not get current swimlanes of dashboard {dashboard_id} for {issue_key}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
