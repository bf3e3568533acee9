"""Swimlane Synchronizer - Decides and applies swimlane changes for an issue."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from swimlane_sync.engine import labels as label_diff
from swimlane_sync.engine.exceptions import DashboardFetchError, SwimlaneSyncError
from swimlane_sync.engine.lookup import exists_by_name, find_by_name
from swimlane_sync.engine.models import SwimlaneUpdate, SyncResult, UpdateAction
from swimlane_sync.engine.naming import swimlane_name, swimlane_query
from swimlane_sync.engine.routing import DashboardResolver
from swimlane_sync.tracker.exceptions import TrackerError

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Sequence

    from swimlane_sync.engine.models import ChangelogEntry, Issue, Swimlane

logger = logging.getLogger("swimlane_sync.engine")

DEFAULT_TRIGGER_LABEL = "swimline-story"


class SwimlaneTracker(Protocol):
    """Tracker operations the synchronizer depends on."""

    def fetch_dashboard_swimlanes(self, dashboard_id: int) -> list[Swimlane]:
        """Get the dashboard's current swimlanes."""
        ...

    def create_swimlane(self, dashboard_id: int, name: str, query: str) -> None:
        """Create a swimlane on the dashboard."""
        ...

    def delete_swimlane(self, dashboard_id: int, swimlane_id: int) -> None:
        """Delete a swimlane from the dashboard."""
        ...


def need_to_create(
    old_labels: Collection[str], new_labels: Collection[str], trigger_label: str
) -> bool:
    return trigger_label in new_labels and trigger_label not in old_labels


def need_to_remove(
    old_labels: Collection[str], new_labels: Collection[str], trigger_label: str
) -> bool:
    return trigger_label not in new_labels and trigger_label in old_labels


def decide(
    dashboard_id: int | None,
    issue: Issue,
    old_labels: Collection[str],
    new_labels: Collection[str],
    current_swimlanes: Sequence[Swimlane],
    trigger_label: str = DEFAULT_TRIGGER_LABEL,
) -> SwimlaneUpdate:
    """Decide which swimlane change a label transition requires.

    Create and remove conditions are evaluated independently; when both hold,
    remove wins. A create is suppressed if a swimlane with the derived name is
    already on the dashboard.

    Args:
        dashboard_id: Target dashboard, used for diagnostics only.
        issue: Issue snapshot the swimlane is named after.
        old_labels: Labels before the change.
        new_labels: Labels after the change.
        current_swimlanes: Swimlanes currently on the dashboard.
        trigger_label: Label driving swimlane creation and removal.

    Returns:
        The SwimlaneUpdate to perform.
    """
    create = need_to_create(old_labels, new_labels, trigger_label)
    remove = need_to_remove(old_labels, new_labels, trigger_label)
    name = swimlane_name(issue)

    if create and exists_by_name(current_swimlanes, name):
        logger.debug("Swimlane %r already on dashboard %s", name, dashboard_id)
        return SwimlaneUpdate.noop()

    result = SwimlaneUpdate.noop()

    if create:
        result = SwimlaneUpdate.create(name=name, query=swimlane_query(issue.key))

    if remove:
        result = SwimlaneUpdate.remove(find_by_name(current_swimlanes, name), name=name)

    return result


class SwimlaneSynchronizer:
    """Keeps dashboard swimlanes in line with issue labels.

    Stateless between calls: every event is decided from the snapshots
    fetched for it. Concurrent events for the same dashboard must be
    serialized by the caller.
    """

    def __init__(
        self,
        tracker: SwimlaneTracker,
        resolver: DashboardResolver | None = None,
        trigger_label: str = DEFAULT_TRIGGER_LABEL,
    ) -> None:
        """Initialize the Synchronizer.

        Args:
            tracker: Tracker client used to read and change dashboards.
            resolver: Label -> dashboard routing. Defaults to the built-in routes.
            trigger_label: Label driving swimlane creation and removal.
        """
        self.tracker = tracker
        self.resolver = resolver if resolver is not None else DashboardResolver()
        self.trigger_label = trigger_label

    def plan(
        self,
        dashboard_id: int,
        issue: Issue,
        old_labels: Collection[str],
        new_labels: Collection[str],
    ) -> SwimlaneUpdate:
        """Fetch the dashboard's swimlanes and decide the update.

        Raises:
            DashboardFetchError: If the dashboard's swimlanes can't be fetched.
        """
        try:
            current_swimlanes = self.tracker.fetch_dashboard_swimlanes(dashboard_id)
        except TrackerError as e:
            logger.error("Failed to fetch swimlanes of dashboard %s: %s", dashboard_id, e)
            raise DashboardFetchError(dashboard_id, issue.key, str(e)) from e

        update = decide(
            dashboard_id,
            issue,
            old_labels,
            new_labels,
            current_swimlanes,
            trigger_label=self.trigger_label,
        )
        logger.info(
            "Decision for %s on dashboard %s: %s %r",
            issue.key,
            dashboard_id,
            update.action.value,
            update.name,
        )
        return update

    def apply(self, dashboard_id: int, update: SwimlaneUpdate) -> bool:
        """Send a decision to the tracker.

        Returns:
            True if a tracker call was made.
        """
        if update.action is UpdateAction.CREATE:
            if update.name is None or update.query is None:
                raise SwimlaneSyncError("Create decision without name or query")
            self.tracker.create_swimlane(dashboard_id, update.name, update.query)
            logger.info("Created swimlane %r on dashboard %s", update.name, dashboard_id)
            return True

        if update.action is UpdateAction.REMOVE:
            if update.swimlane_id is None:
                logger.warning(
                    "Swimlane %r not found on dashboard %s, nothing to remove",
                    update.name,
                    dashboard_id,
                )
                return False
            self.tracker.delete_swimlane(dashboard_id, update.swimlane_id)
            logger.info(
                "Removed swimlane %r (#%s) from dashboard %s",
                update.name,
                update.swimlane_id,
                dashboard_id,
            )
            return True

        return False

    def sync(
        self,
        issue: Issue,
        changelog: Iterable[ChangelogEntry],
        dry_run: bool = False,
    ) -> SyncResult:
        """Handle one issue change event.

        Args:
            issue: Current issue snapshot.
            changelog: Changelog entries of the event.
            dry_run: Decide without sending the decision to the tracker.

        Returns:
            SyncResult describing the decision and whether it was applied.

        Raises:
            DashboardFetchError: If the dashboard's swimlanes can't be fetched.
            TrackerError: If creating or deleting the swimlane fails.
        """
        old_labels, new_labels = label_diff.diff(changelog)
        if not old_labels and not new_labels:
            logger.debug("No label change for %s", issue.key)
            return SyncResult(issue_key=issue.key, dashboard_id=None, update=SwimlaneUpdate.noop())

        dashboard_id = self.resolver.resolve(new_labels)
        if dashboard_id is None:
            logger.info("No dashboard responsible for %s, skipping", issue.key)
            return SyncResult(issue_key=issue.key, dashboard_id=None, update=SwimlaneUpdate.noop())

        update = self.plan(dashboard_id, issue, old_labels, new_labels)
        if dry_run or update.is_noop:
            return SyncResult(issue_key=issue.key, dashboard_id=dashboard_id, update=update)

        applied = self.apply(dashboard_id, update)
        return SyncResult(
            issue_key=issue.key, dashboard_id=dashboard_id, update=update, applied=applied
        )
