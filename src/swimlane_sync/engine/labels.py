"""Label extraction from changelogs and field snapshots.

Changelog values are separated by "," while field text uses ", ".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from swimlane_sync.engine.models import LABELS_FIELD_ID, LabelSet

if TYPE_CHECKING:
    from collections.abc import Iterable

    from swimlane_sync.engine.models import ChangelogEntry, Field

CHANGELOG_SEPARATOR = ","
FIELD_SEPARATOR = ", "


def diff(entries: Iterable[ChangelogEntry]) -> tuple[LabelSet, LabelSet]:
    """Get old and new labels from a changelog.

    Args:
        entries: Changelog entries of a single event.

    Returns:
        (old_labels, new_labels). Both empty when no entry touches labels.
    """
    for entry in entries:
        if entry.field == LABELS_FIELD_ID:
            return (
                frozenset(entry.from_string.split(CHANGELOG_SEPARATOR)),
                frozenset(entry.to_string.split(CHANGELOG_SEPARATOR)),
            )

    return frozenset(), frozenset()


def extract_from_fields(fields: Iterable[Field]) -> LabelSet:
    """Get labels from an issue field snapshot.

    A missing labels field yields {""}, the same as an empty labels text.
    """
    labels_text = ""
    for item in fields:
        if item.id == LABELS_FIELD_ID:
            labels_text = item.text
            break

    return frozenset(labels_text.split(FIELD_SEPARATOR))
