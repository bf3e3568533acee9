"""Tracker Client - Interfaces with the Jira Agile REST API."""

from swimlane_sync.tracker.client import TrackerClient
from swimlane_sync.tracker.exceptions import (
    AuthenticationError,
    DashboardNotFoundError,
    IssueNotFoundError,
    SwimlaneConflictError,
    TrackerError,
)
from swimlane_sync.tracker.models import Session

__all__ = [
    "AuthenticationError",
    "DashboardNotFoundError",
    "IssueNotFoundError",
    "Session",
    "SwimlaneConflictError",
    "TrackerClient",
    "TrackerError",
]
