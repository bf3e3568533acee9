"""Unit tests for configuration loading."""

import os
from pathlib import Path
from textwrap import dedent
from unittest.mock import patch

import pytest

from swimlane_sync.config import (
    AppConfig,
    ConfigError,
    find_config,
    load_config,
    resolve_config,
)
from swimlane_sync.tracker import TrackerClient


@pytest.fixture
def temp_config(tmp_path: Path) -> Path:
    """Create a temporary config file."""
    config_content = dedent("""
        tracker:
          base_url: https://jira.example.com
          issue_board_id: 400
          timeout: 5

        sync:
          trigger_label: epic-lane

        routing:
          recycling-nsk: 351
          media: 12

        logging:
          level: DEBUG
          dir: /tmp/swimlane-logs
    """).strip()

    config_path = tmp_path / "swimlane-sync.yaml"
    config_path.write_text(config_content)
    return config_path


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_config(self, temp_config: Path) -> None:
        config = load_config(temp_config, environ={})

        assert config.tracker.base_url == "https://jira.example.com"
        assert config.tracker.issue_board_id == 400
        assert config.tracker.timeout == 5.0
        assert config.sync.trigger_label == "epic-lane"
        assert config.routing == {"recycling-nsk": 351, "media": 12}
        assert config.logging.level == "DEBUG"
        assert config.logging.dir == "/tmp/swimlane-logs"

    def test_credentials_from_environment(self, temp_config: Path) -> None:
        config = load_config(
            temp_config,
            environ={"SWIMLANE_SYNC_USERNAME": "bot", "SWIMLANE_SYNC_PASSWORD": "secret"},
        )

        assert config.tracker.username == "bot"
        assert config.tracker.password == "secret"
        assert "secret" not in repr(config)

    def test_base_url_override(self, temp_config: Path) -> None:
        config = load_config(
            temp_config, environ={"SWIMLANE_SYNC_BASE_URL": "https://staging.example.com"}
        )

        assert config.tracker.base_url == "https://staging.example.com"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.yaml")

    def test_load_missing_base_url(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text("sync:\n  trigger_label: x\n")

        with pytest.raises(ConfigError, match="tracker.base_url"):
            load_config(config_path, environ={})

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text("invalid: yaml: content:")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_path)

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(config_path)

    def test_non_integer_dashboard_id(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text(
            "tracker:\n  base_url: https://jira.example.com\nrouting:\n  media: twelve\n"
        )

        with pytest.raises(ConfigError, match="media"):
            load_config(config_path, environ={})

    def test_invalid_board_id(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text(
            "tracker:\n  base_url: https://jira.example.com\n  issue_board_id: abc\n"
        )

        with pytest.raises(ConfigError, match="Invalid tracker settings"):
            load_config(config_path, environ={})

    def test_load_defaults_for_optional_fields(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text("tracker:\n  base_url: https://jira.example.com\n")

        config = load_config(config_path, environ={})

        assert config.tracker.issue_board_id == 368
        assert config.tracker.login_url is None
        assert config.sync.trigger_label == "swimline-story"
        assert config.routing == {"recycling-nsk": 351}
        assert config.logging.level is None

    def test_empty_routing_disables_all_dashboards(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text("tracker:\n  base_url: https://jira.example.com\nrouting: {}\n")

        assert load_config(config_path, environ={}).routing == {}


@pytest.mark.unit
class TestAppConfig:
    """Tests for AppConfig factories."""

    def test_create_tracker(self) -> None:
        config = AppConfig.from_dict(
            {"tracker": {"base_url": "https://jira.example.com", "issue_board_id": 9}},
            environ={"SWIMLANE_SYNC_USERNAME": "bot", "SWIMLANE_SYNC_PASSWORD": "pw"},
        )

        tracker = config.create_tracker()

        assert isinstance(tracker, TrackerClient)
        assert tracker.username == "bot"
        assert tracker.issue_board_id == 9
        assert tracker.login_url == "https://jira.example.com/rest/auth/1/session"

    def test_create_synchronizer(self) -> None:
        config = AppConfig.from_dict(
            {
                "tracker": {"base_url": "https://jira.example.com"},
                "sync": {"trigger_label": "epic-lane"},
                "routing": {"media": 12},
            },
            environ={},
        )

        synchronizer = config.create_synchronizer(config.create_tracker())

        assert synchronizer.trigger_label == "epic-lane"
        assert synchronizer.resolver.routes == {"media": 12}


@pytest.mark.unit
class TestFindConfig:
    """Tests for find_config function."""

    def test_find_in_current_directory(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text("tracker: {}")

        assert find_config(tmp_path) == config_path

    def test_find_in_parent_directory(self, tmp_path: Path) -> None:
        config_path = tmp_path / "swimlane-sync.yaml"
        config_path.write_text("tracker: {}")

        subdir = tmp_path / "sub" / "dir"
        subdir.mkdir(parents=True)

        assert find_config(subdir) == config_path

    def test_find_not_found(self, tmp_path: Path) -> None:
        subdir = tmp_path / "empty"
        subdir.mkdir()

        with (
            patch("pathlib.Path.exists", return_value=False),
            pytest.raises(ConfigError, match="No swimlane-sync.yaml found"),
        ):
            find_config(subdir)


@pytest.mark.unit
class TestResolveConfig:
    """Tests for resolve_config."""

    def test_path_from_environment(self, temp_config: Path) -> None:
        with patch.dict(os.environ, {"SWIMLANE_SYNC_CONFIG": str(temp_config)}):
            config = resolve_config()

        assert config.sync.trigger_label == "epic-lane"

    def test_explicit_path(self, temp_config: Path) -> None:
        assert resolve_config(temp_config).routing["media"] == 12
