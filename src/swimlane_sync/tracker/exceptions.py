"""Custom exceptions for the Tracker Client."""


class TrackerError(Exception):
    """Base exception for Tracker Client errors."""


class AuthenticationError(TrackerError):
    """Login to the tracker failed."""


class IssueNotFoundError(TrackerError):
    """Issue with given key does not exist."""


class DashboardNotFoundError(TrackerError):
    """Dashboard does not exist or is not visible to the user."""


class SwimlaneConflictError(TrackerError):
    """Swimlane could not be created because it conflicts with an existing one."""
