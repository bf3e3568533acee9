"""Unit tests for swimlane lookup."""

import pytest

from swimlane_sync.engine import Swimlane, exists_by_name, find_by_name, find_sprint_label


@pytest.fixture
def swimlanes() -> list[Swimlane]:
    return [
        Swimlane(id=1, name="Expedite", query="priority = Blocker"),
        Swimlane(id=7, name="<PROJ-1> Fix crash", query="issue in linkedIssues(PROJ-1)"),
        Swimlane(id=9, name="<PROJ-1> Fix crash", query="duplicate"),
    ]


@pytest.mark.unit
class TestFindByName:
    """Tests for find_by_name."""

    def test_returns_first_match_id(self, swimlanes: list[Swimlane]) -> None:
        assert find_by_name(swimlanes, "<PROJ-1> Fix crash") == 7

    def test_not_found(self, swimlanes: list[Swimlane]) -> None:
        assert find_by_name(swimlanes, "<PROJ-2> Other") is None

    def test_exact_match_only(self, swimlanes: list[Swimlane]) -> None:
        assert find_by_name(swimlanes, "<PROJ-1> fix crash") is None
        assert find_by_name(swimlanes, "<PROJ-1> Fix crash ") is None

    def test_empty_list(self) -> None:
        assert find_by_name([], "anything") is None

    def test_zero_id_is_a_real_id(self) -> None:
        """A swimlane with id 0 is found, not confused with "not found"."""
        assert find_by_name([Swimlane(id=0, name="Zero")], "Zero") == 0


@pytest.mark.unit
class TestExistsByName:
    """Tests for exists_by_name."""

    def test_exists(self, swimlanes: list[Swimlane]) -> None:
        assert exists_by_name(swimlanes, "Expedite") is True

    def test_missing(self, swimlanes: list[Swimlane]) -> None:
        assert exists_by_name(swimlanes, "Nope") is False

    def test_uncreated_swimlane_counts(self) -> None:
        """Existence is by name; a swimlane without id still exists."""
        assert exists_by_name([Swimlane(name="Draft")], "Draft") is True


@pytest.mark.unit
class TestFindSprintLabel:
    """Tests for find_sprint_label."""

    def test_finds_sprint_label(self) -> None:
        swimlanes = [
            Swimlane(id=1, name="Expedite", query="priority = Blocker"),
            Swimlane(id=2, name="Sprint", query="labels = recycling-sprint-12"),
        ]

        assert find_sprint_label(swimlanes) == "recycling-sprint-12"

    def test_tolerates_missing_spaces(self) -> None:
        assert find_sprint_label([Swimlane(name="S", query="labels=team-sprint-3")]) == (
            "team-sprint-3"
        )

    def test_first_sprint_swimlane_wins(self) -> None:
        swimlanes = [
            Swimlane(name="A", query="labels = a-sprint-1"),
            Swimlane(name="B", query="labels = b-sprint-2"),
        ]

        assert find_sprint_label(swimlanes) == "a-sprint-1"

    def test_no_sprint_swimlane(self) -> None:
        assert find_sprint_label([Swimlane(name="A", query="labels = backlog")]) is None
