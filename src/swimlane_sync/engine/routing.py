"""Dashboard routing by team label."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

logger = logging.getLogger("swimlane_sync.engine")

# Team label -> dashboard (rapid view) id
DEFAULT_ROUTES: dict[str, int] = {
    "recycling-nsk": 351,
}


class DashboardResolver:
    """Maps team labels to the dashboard owning that team's swimlanes.

    Only the issue's current labels are consulted: adding or removing the
    team label itself does not move swimlanes between dashboards.
    """

    def __init__(self, routes: Mapping[str, int] | None = None) -> None:
        """Initialize the resolver.

        Args:
            routes: Label -> dashboard id mapping. Defaults to DEFAULT_ROUTES.
        """
        self.routes: dict[str, int] = dict(DEFAULT_ROUTES if routes is None else routes)

    def resolve(self, labels: Collection[str]) -> int | None:
        """Get the dashboard id for a label set.

        Args:
            labels: The issue's new labels.

        Returns:
            Dashboard id of the first route (in configured order) whose label
            is present, None if no label is routed.
        """
        for label, dashboard_id in self.routes.items():
            if label in labels:
                return dashboard_id

        logger.debug("No dashboard routed for labels %s", sorted(labels))
        return None
