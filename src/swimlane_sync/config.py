"""Configuration loading for swimlane-sync.

Settings come from a ``swimlane-sync.yaml`` file. Credentials are only read
from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from swimlane_sync.engine.routing import DEFAULT_ROUTES, DashboardResolver
from swimlane_sync.engine.synchronizer import DEFAULT_TRIGGER_LABEL, SwimlaneSynchronizer
from swimlane_sync.tracker.client import DEFAULT_ISSUE_BOARD_ID, TrackerClient

CONFIG_FILENAME = "swimlane-sync.yaml"

ENV_CONFIG = "SWIMLANE_SYNC_CONFIG"
ENV_BASE_URL = "SWIMLANE_SYNC_BASE_URL"
ENV_USERNAME = "SWIMLANE_SYNC_USERNAME"
ENV_PASSWORD = "SWIMLANE_SYNC_PASSWORD"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class TrackerConfig:
    """Tracker connection settings."""

    base_url: str
    login_url: str | None = None
    issue_board_id: int = DEFAULT_ISSUE_BOARD_ID
    timeout: float = 30.0
    username: str = ""
    password: str = field(default="", repr=False)


@dataclass
class SyncConfig:
    """Swimlane synchronization settings."""

    trigger_label: str = DEFAULT_TRIGGER_LABEL


@dataclass
class LoggingConfig:
    """Logging settings. None means "use the environment or default"."""

    level: str | None = None
    dir: str | None = None


@dataclass
class AppConfig:
    """swimlane-sync configuration."""

    tracker: TrackerConfig
    sync: SyncConfig = field(default_factory=SyncConfig)
    routing: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_ROUTES))
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], environ: dict[str, str] | None = None) -> AppConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            environ: Environment to read credentials and overrides from.
                     Defaults to os.environ.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If required fields are missing or invalid.
        """
        env = dict(os.environ) if environ is None else environ

        tracker_data = _section(data, "tracker")
        base_url = env.get(ENV_BASE_URL) or tracker_data.get("base_url")
        if not base_url:
            raise ConfigError("Missing required field: tracker.base_url")

        try:
            tracker = TrackerConfig(
                base_url=str(base_url),
                login_url=tracker_data.get("login_url"),
                issue_board_id=int(tracker_data.get("issue_board_id", DEFAULT_ISSUE_BOARD_ID)),
                timeout=float(tracker_data.get("timeout", 30.0)),
                username=env.get(ENV_USERNAME, ""),
                password=env.get(ENV_PASSWORD, ""),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid tracker settings: {e}") from e

        sync_data = _section(data, "sync")
        sync = SyncConfig(trigger_label=str(sync_data.get("trigger_label", DEFAULT_TRIGGER_LABEL)))

        routing_data = data.get("routing")
        if routing_data is None:
            routing = dict(DEFAULT_ROUTES)
        elif isinstance(routing_data, dict):
            routing = {}
            for label, dashboard_id in routing_data.items():
                if isinstance(dashboard_id, bool) or not isinstance(dashboard_id, int):
                    raise ConfigError(
                        f"Dashboard id for label {label!r} must be an integer, got {dashboard_id!r}"
                    )
                routing[str(label)] = dashboard_id
        else:
            raise ConfigError("routing must be a mapping of label -> dashboard id")

        logging_data = _section(data, "logging")
        logging_config = LoggingConfig(
            level=logging_data.get("level"),
            dir=logging_data.get("dir"),
        )

        return cls(tracker=tracker, sync=sync, routing=routing, logging=logging_config)

    def create_tracker(self) -> TrackerClient:
        """Create a TrackerClient from the tracker settings."""
        return TrackerClient(
            base_url=self.tracker.base_url,
            username=self.tracker.username,
            password=self.tracker.password,
            login_url=self.tracker.login_url,
            issue_board_id=self.tracker.issue_board_id,
            timeout=self.tracker.timeout,
        )

    def create_synchronizer(self, tracker: TrackerClient) -> SwimlaneSynchronizer:
        """Create a SwimlaneSynchronizer using this config's routing and trigger label."""
        return SwimlaneSynchronizer(
            tracker=tracker,
            resolver=DashboardResolver(self.routing),
            trigger_label=self.sync.trigger_label,
        )


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(section).__name__}")
    return section


def load_config(config_path: Path | str, environ: dict[str, str] | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to swimlane-sync.yaml file.
        environ: Environment to read credentials from. Defaults to os.environ.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return AppConfig.from_dict(data, environ)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find swimlane-sync.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to swimlane-sync.yaml file.

    Raises:
        ConfigError: If no config file is found.
    """
    start_path = Path.cwd() if start_path is None else Path(start_path)

    current = start_path.resolve()
    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    raise ConfigError(f"No {CONFIG_FILENAME} found in {start_path} or any parent directory")


def resolve_config(config_path: Path | str | None = None) -> AppConfig:
    """Load config from an explicit path, $SWIMLANE_SYNC_CONFIG, or by searching.

    Raises:
        ConfigError: If no valid config file is found.
    """
    if config_path is None:
        config_path = os.environ.get(ENV_CONFIG) or find_config()
    return load_config(config_path)
