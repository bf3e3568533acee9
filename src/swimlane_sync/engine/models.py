"""Data models for the decision engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

LABELS_FIELD_ID = "labels"
SUMMARY_FIELD_ID = "summary"

# Labels split from a field or changelog value
LabelSet = frozenset[str]


@dataclass(frozen=True)
class Field:
    """A single issue field as reported by the tracker."""

    id: str
    text: str


@dataclass(frozen=True)
class Issue:
    """Snapshot of an issue at decision time.

    Attributes:
        key: Tracker issue key (e.g. "PROJ-42").
        fields: Ordered fields; the first field with a given id wins.
    """

    key: str
    fields: tuple[Field, ...] = ()

    def get_field(self, field_id: str) -> Field | None:
        """Return the first field with the given id, if any."""
        for item in self.fields:
            if item.id == field_id:
                return item
        return None


@dataclass(frozen=True)
class ChangelogEntry:
    """One historical field transition on an issue."""

    field: str
    from_string: str = ""
    to_string: str = ""


@dataclass(frozen=True)
class Swimlane:
    """A swimlane on a dashboard.

    Attributes:
        name: Display name, unique within a dashboard.
        query: Filter expression selecting the swimlane's issues.
        id: Dashboard-assigned id, None until created.
        description: Free text, not interpreted.
    """

    name: str
    query: str = ""
    id: int | None = None
    description: str = ""


@dataclass(frozen=True)
class Dashboard:
    """A board configuration and its current swimlanes."""

    id: int
    swimlanes: tuple[Swimlane, ...] = field(default_factory=tuple)


class UpdateAction(str, Enum):
    """Kind of swimlane change."""

    NOOP = "noop"
    CREATE = "create"
    REMOVE = "remove"


@dataclass(frozen=True)
class SwimlaneUpdate:
    """A single swimlane decision.

    Create carries name and query; Remove carries name and the resolved
    swimlane id (None when no swimlane with that name was found).
    """

    action: UpdateAction = UpdateAction.NOOP
    name: str | None = None
    query: str | None = None
    swimlane_id: int | None = None

    @classmethod
    def noop(cls) -> SwimlaneUpdate:
        return cls()

    @classmethod
    def create(cls, name: str, query: str) -> SwimlaneUpdate:
        return cls(action=UpdateAction.CREATE, name=name, query=query)

    @classmethod
    def remove(cls, swimlane_id: int | None, name: str) -> SwimlaneUpdate:
        return cls(action=UpdateAction.REMOVE, name=name, swimlane_id=swimlane_id)

    @property
    def is_noop(self) -> bool:
        return self.action is UpdateAction.NOOP


@dataclass
class SyncResult:
    """Outcome of handling one issue change event.

    Attributes:
        issue_key: The issue that triggered the event.
        dashboard_id: Dashboard responsible for the issue, None if none.
        update: The decision taken.
        applied: Whether the decision was sent to the tracker.
    """

    issue_key: str
    dashboard_id: int | None
    update: SwimlaneUpdate
    applied: bool = False
