"""Integration tests for TrackerClient.

These tests require:
- SWIMLANE_SYNC_BASE_URL environment variable
- SWIMLANE_SYNC_USERNAME and SWIMLANE_SYNC_PASSWORD environment variables
- SWIMLANE_SYNC_TEST_DASHBOARD environment variable (dashboard id)
- SWIMLANE_SYNC_TEST_ISSUE environment variable (an existing issue key)

Only read operations are performed.

Run with: pytest tests/integration/tracker/ -m real
"""

import os

import pytest

from swimlane_sync.tracker import IssueNotFoundError, TrackerClient

REQUIRED = (
    "SWIMLANE_SYNC_BASE_URL",
    "SWIMLANE_SYNC_USERNAME",
    "SWIMLANE_SYNC_PASSWORD",
    "SWIMLANE_SYNC_TEST_DASHBOARD",
    "SWIMLANE_SYNC_TEST_ISSUE",
)

pytestmark = [
    pytest.mark.integration,
    pytest.mark.real,
    pytest.mark.skipif(
        not all(os.environ.get(name) for name in REQUIRED),
        reason=f"{', '.join(REQUIRED)} required",
    ),
]


@pytest.fixture
def tracker() -> TrackerClient:
    client = TrackerClient(
        base_url=os.environ["SWIMLANE_SYNC_BASE_URL"],
        username=os.environ["SWIMLANE_SYNC_USERNAME"],
        password=os.environ["SWIMLANE_SYNC_PASSWORD"],
    )
    yield client
    client.close()


class TestTrackerClientReal:
    """Read-only checks against a live tracker."""

    def test_authenticate(self, tracker: TrackerClient) -> None:
        session = tracker.authenticate()

        assert session.name
        assert session.value

    def test_fetch_issue(self, tracker: TrackerClient) -> None:
        key = os.environ["SWIMLANE_SYNC_TEST_ISSUE"]

        issue = tracker.fetch_issue(key)

        assert issue.key == key

    def test_fetch_missing_issue(self, tracker: TrackerClient) -> None:
        with pytest.raises(IssueNotFoundError):
            tracker.fetch_issue("NOPE-999999")

    def test_fetch_dashboard_swimlanes(self, tracker: TrackerClient) -> None:
        dashboard_id = int(os.environ["SWIMLANE_SYNC_TEST_DASHBOARD"])

        swimlanes = tracker.fetch_dashboard_swimlanes(dashboard_id)

        assert all(swimlane.name for swimlane in swimlanes)
