"""Decision engine - Keeps dashboard swimlanes in line with issue labels."""

from swimlane_sync.engine.exceptions import DashboardFetchError, SwimlaneSyncError
from swimlane_sync.engine.labels import diff, extract_from_fields
from swimlane_sync.engine.lookup import exists_by_name, find_by_name, find_sprint_label
from swimlane_sync.engine.models import (
    ChangelogEntry,
    Dashboard,
    Field,
    Issue,
    LabelSet,
    Swimlane,
    SwimlaneUpdate,
    SyncResult,
    UpdateAction,
)
from swimlane_sync.engine.naming import swimlane_name, swimlane_query
from swimlane_sync.engine.routing import DEFAULT_ROUTES, DashboardResolver
from swimlane_sync.engine.synchronizer import (
    DEFAULT_TRIGGER_LABEL,
    SwimlaneSynchronizer,
    SwimlaneTracker,
    decide,
)

__all__ = [
    "DEFAULT_ROUTES",
    "DEFAULT_TRIGGER_LABEL",
    "ChangelogEntry",
    "Dashboard",
    "DashboardFetchError",
    "DashboardResolver",
    "Field",
    "Issue",
    "LabelSet",
    "Swimlane",
    "SwimlaneSyncError",
    "SwimlaneSynchronizer",
    "SwimlaneTracker",
    "SwimlaneUpdate",
    "SyncResult",
    "UpdateAction",
    "decide",
    "diff",
    "exists_by_name",
    "extract_from_fields",
    "find_by_name",
    "find_sprint_label",
    "swimlane_name",
    "swimlane_query",
]
