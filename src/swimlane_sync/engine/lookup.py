"""Swimlane lookup within a dashboard's current view."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from swimlane_sync.engine.models import Swimlane

SPRINT_LABEL_PATTERN = re.compile(r"labels\s*=\s*(.+-sprint-[0-9]+)")


def find_by_name(swimlanes: Iterable[Swimlane], name: str) -> int | None:
    """Get the id of the first swimlane named exactly `name`.

    Returns:
        The swimlane id, or None when no swimlane matches.
    """
    for swimlane in swimlanes:
        if swimlane.name == name:
            return swimlane.id
    return None


def exists_by_name(swimlanes: Iterable[Swimlane], name: str) -> bool:
    """Check whether a swimlane named exactly `name` exists."""
    return any(swimlane.name == name for swimlane in swimlanes)


def find_sprint_label(swimlanes: Iterable[Swimlane]) -> str | None:
    """Get the sprint label filtered by the first sprint swimlane.

    A sprint swimlane has a query like "labels = team-sprint-12".
    """
    for swimlane in swimlanes:
        match = SPRINT_LABEL_PATTERN.search(swimlane.query)
        if match:
            return match.group(1)
    return None
