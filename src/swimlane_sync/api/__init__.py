"""Webhook API for swimlane-sync."""

from swimlane_sync.api.app import create_app
from swimlane_sync.api.models import (
    APIResponse,
    DecisionRequest,
    IssueWebhookPayload,
    SwimlaneUpdateResponse,
    SyncResultResponse,
)

__all__ = [
    "APIResponse",
    "DecisionRequest",
    "IssueWebhookPayload",
    "SwimlaneUpdateResponse",
    "SyncResultResponse",
    "create_app",
]
