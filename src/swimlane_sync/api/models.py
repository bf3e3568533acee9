"""Pydantic models for the webhook API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from swimlane_sync.engine.models import ChangelogEntry, Issue, Swimlane, SwimlaneUpdate, SyncResult
from swimlane_sync.engine.models import Field as IssueField

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Issue models


class FieldModel(BaseModel):
    """An issue field."""

    id: str
    text: str = ""


class IssueModel(BaseModel):
    """Issue snapshot in request bodies."""

    key: str = Field(..., min_length=1, max_length=255)
    fields: list[FieldModel] = Field(default_factory=list)

    def to_issue(self) -> Issue:
        return Issue(
            key=self.key,
            fields=tuple(IssueField(id=f.id, text=f.text) for f in self.fields),
        )


class SwimlaneModel(BaseModel):
    """A swimlane as currently configured on a dashboard."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    name: str
    query: str = ""
    description: str = ""

    def to_swimlane(self) -> Swimlane:
        return Swimlane(id=self.id, name=self.name, query=self.query, description=self.description)


# Webhook models


class ChangelogItemModel(BaseModel):
    """One changelog item as sent by the tracker webhook."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    field: str
    from_string: str | None = Field(default=None, alias="fromString")
    to_string: str | None = Field(default=None, alias="toString")


class ChangelogModel(BaseModel):
    """Changelog section of a webhook payload."""

    model_config = ConfigDict(extra="ignore")

    items: list[ChangelogItemModel] = Field(default_factory=list)


class WebhookIssueRef(BaseModel):
    """Issue reference in a webhook payload; only the key is used."""

    model_config = ConfigDict(extra="ignore")

    key: str = Field(..., min_length=1, max_length=255)


class IssueWebhookPayload(BaseModel):
    """Request model for the issue-updated webhook."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    webhook_event: str | None = Field(default=None, alias="webhookEvent")
    issue: WebhookIssueRef
    changelog: ChangelogModel | None = None

    def changelog_entries(self) -> list[ChangelogEntry]:
        if self.changelog is None:
            return []
        return [
            ChangelogEntry(
                field=item.field,
                from_string=item.from_string or "",
                to_string=item.to_string or "",
            )
            for item in self.changelog.items
        ]


# Decision models


class DecisionRequest(BaseModel):
    """Request model for a stateless decision preview."""

    issue: IssueModel
    old_labels: list[str] = Field(default_factory=list)
    new_labels: list[str] = Field(default_factory=list)
    current_swimlanes: list[SwimlaneModel] = Field(default_factory=list)
    dashboard_id: int | None = None
    trigger_label: str | None = Field(default=None, min_length=1)


class SwimlaneUpdateResponse(BaseModel):
    """Response model for a swimlane decision."""

    action: str
    name: str | None
    query: str | None
    swimlane_id: int | None


def update_to_response(update: SwimlaneUpdate) -> SwimlaneUpdateResponse:
    """Convert a SwimlaneUpdate to SwimlaneUpdateResponse."""
    return SwimlaneUpdateResponse(
        action=update.action.value,
        name=update.name,
        query=update.query,
        swimlane_id=update.swimlane_id,
    )


class SyncResultResponse(BaseModel):
    """Response model for a handled webhook event."""

    issue_key: str
    dashboard_id: int | None
    update: SwimlaneUpdateResponse
    applied: bool


def sync_result_to_response(result: SyncResult) -> SyncResultResponse:
    """Convert a SyncResult to SyncResultResponse."""
    return SyncResultResponse(
        issue_key=result.issue_key,
        dashboard_id=result.dashboard_id,
        update=update_to_response(result.update),
        applied=result.applied,
    )


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
    details: dict[str, Any] = Field(default_factory=dict)
