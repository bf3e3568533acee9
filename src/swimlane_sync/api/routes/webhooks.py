"""Webhook endpoint for tracker issue events."""

import logging

from fastapi import APIRouter, Query

from swimlane_sync.api.dependencies import SyncLockDep, SynchronizerDep, TrackerDep
from swimlane_sync.api.models import (
    APIResponse,
    IssueWebhookPayload,
    SyncResultResponse,
    sync_result_to_response,
)
from swimlane_sync.engine import Issue, diff

logger = logging.getLogger("swimlane_sync.api")

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/issue-updated", response_model=APIResponse[SyncResultResponse])
def issue_updated(
    payload: IssueWebhookPayload,
    synchronizer: SynchronizerDep,
    tracker: TrackerDep,
    lock: SyncLockDep,
    dry_run: bool = Query(default=False, description="Decide without changing the dashboard"),
) -> APIResponse[SyncResultResponse]:
    """Create or remove the issue's swimlane after a label change."""
    key = payload.issue.key
    changelog = payload.changelog_entries()
    logger.info("Received %s for %s", payload.webhook_event or "issue event", key)

    old_labels, new_labels = diff(changelog)
    # No label change: skip the issue lookup
    issue = tracker.fetch_issue(key) if old_labels or new_labels else Issue(key=key)

    with lock:
        result = synchronizer.sync(issue, changelog, dry_run=dry_run)

    return APIResponse(data=sync_result_to_response(result))
