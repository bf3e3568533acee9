"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

import threading
from collections.abc import Generator  # noqa: TC003
from typing import TYPE_CHECKING, Annotated, Protocol

from fastapi import Depends

from swimlane_sync.engine import SwimlaneSynchronizer

if TYPE_CHECKING:
    from swimlane_sync.config import AppConfig
    from swimlane_sync.engine import Issue


class IssueTracker(Protocol):
    """Interface for fetching issues from the tracker."""

    def fetch_issue(self, key: str) -> Issue:
        """Get the current state of an issue."""
        ...

    def close(self) -> None:
        """Release the tracker's connections."""
        ...


# Global tracker client and synchronizer (initialized on app startup)
_tracker: IssueTracker | None = None
_synchronizer: SwimlaneSynchronizer | None = None

# Decisions for one dashboard must not interleave
_sync_lock = threading.Lock()


def init_synchronizer(config: AppConfig) -> SwimlaneSynchronizer:
    """Initialize the global tracker client and SwimlaneSynchronizer."""
    global _tracker, _synchronizer  # noqa: PLW0603
    tracker = config.create_tracker()
    _tracker = tracker
    _synchronizer = config.create_synchronizer(tracker)
    return _synchronizer


def close_synchronizer() -> None:
    """Close the global tracker client and drop the synchronizer."""
    global _tracker, _synchronizer  # noqa: PLW0603
    if _tracker is not None:
        _tracker.close()
        _tracker = None
    _synchronizer = None


def get_synchronizer() -> Generator[SwimlaneSynchronizer, None, None]:
    """Dependency that provides the SwimlaneSynchronizer instance."""
    if _synchronizer is None:
        raise RuntimeError("Synchronizer not initialized. Call init_synchronizer() first.")
    yield _synchronizer


def get_tracker() -> Generator[IssueTracker, None, None]:
    """Dependency that provides the tracker client."""
    if _tracker is None:
        raise RuntimeError("Tracker not initialized. Call init_synchronizer() first.")
    yield _tracker


def get_sync_lock() -> threading.Lock:
    """Dependency that provides the lock serializing swimlane updates."""
    return _sync_lock


# Type aliases for dependency injection
SynchronizerDep = Annotated[SwimlaneSynchronizer, Depends(get_synchronizer)]
TrackerDep = Annotated[IssueTracker, Depends(get_tracker)]
SyncLockDep = Annotated[threading.Lock, Depends(get_sync_lock)]
