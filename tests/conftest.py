"""Shared pytest fixtures and configuration."""

import pytest

from swimlane_sync.engine import Field, Issue, Swimlane


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: talks to an actual tracker (local only)")


# Shared fixtures


@pytest.fixture
def issue() -> Issue:
    """Issue PROJ-1 with a summary and labels."""
    return Issue(
        key="PROJ-1",
        fields=(
            Field(id="labels", text="bug, swimline-story"),
            Field(id="summary", text="Fix crash"),
        ),
    )


@pytest.fixture
def existing_swimlane() -> Swimlane:
    """The swimlane created earlier for PROJ-1."""
    return Swimlane(id=7, name="<PROJ-1> Fix crash", query="issue in linkedIssues(PROJ-1)")
