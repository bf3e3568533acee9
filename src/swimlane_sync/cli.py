"""CLI entry point for swimlane-sync.

- serve: run the webhook API
- replay: handle a stored webhook payload
- decide: print the swimlane decision for hand-written snapshots
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from swimlane_sync import __version__
from swimlane_sync.api.models import IssueWebhookPayload
from swimlane_sync.config import AppConfig, ConfigError, resolve_config
from swimlane_sync.engine import (
    DEFAULT_TRIGGER_LABEL,
    Field,
    Issue,
    Swimlane,
    SwimlaneSyncError,
    SwimlaneUpdate,
    UpdateAction,
    decide,
)
from swimlane_sync.logging import setup_logging
from swimlane_sync.tracker import TrackerError


def _setup_logging(config: AppConfig, verbose: bool) -> None:
    level = "DEBUG" if verbose else config.logging.level
    setup_logging(log_dir=config.logging.dir, level=level)


def _load(config_path: Path | None) -> AppConfig:
    try:
        return resolve_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


def _parse_labels(text: str) -> frozenset[str]:
    return frozenset(label.strip() for label in text.split(",") if label.strip())


def _parse_swimlane(text: str) -> Swimlane:
    """Parse NAME or NAME=ID."""
    name, sep, swimlane_id = text.rpartition("=")
    if sep and swimlane_id.isdigit():
        return Swimlane(name=name, id=int(swimlane_id))
    return Swimlane(name=text)


def _echo_update(update: SwimlaneUpdate) -> None:
    click.echo(f"Action: {update.action.value}")
    if update.name is not None:
        click.echo(f"  Name: {update.name}")
    if update.query is not None:
        click.echo(f"  Query: {update.query}")
    if update.action is UpdateAction.REMOVE:
        click.echo(
            f"  Swimlane id: {update.swimlane_id if update.swimlane_id is not None else 'not found'}"
        )


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """swimlane-sync - keep dashboard swimlanes in line with issue labels."""
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to swimlane-sync.yaml (auto-detected if not specified)",
)
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def serve(config_path: Path | None, host: str, port: int, verbose: bool) -> None:
    """Run the webhook API."""
    import uvicorn  # noqa: PLC0415

    from swimlane_sync.api import create_app  # noqa: PLC0415

    config = _load(config_path)
    _setup_logging(config, verbose)
    uvicorn.run(create_app(config), host=host, port=port, log_level="debug" if verbose else "info")


@main.command()
@click.argument("event_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to swimlane-sync.yaml (auto-detected if not specified)",
)
@click.option("--dry-run", is_flag=True, help="Decide without changing the dashboard")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def replay(event_file: Path, config_path: Path | None, dry_run: bool, verbose: bool) -> None:
    """Handle a stored issue-updated webhook payload.

    The issue is fetched from the tracker as the webhook endpoint does.
    """
    try:
        payload = IssueWebhookPayload.model_validate(json.loads(event_file.read_text()))
    except (ValueError, ValidationError) as e:
        click.echo(f"Invalid event file {event_file}: {e}", err=True)
        sys.exit(1)

    config = _load(config_path)
    _setup_logging(config, verbose)

    with config.create_tracker() as tracker:
        synchronizer = config.create_synchronizer(tracker)
        try:
            issue = tracker.fetch_issue(payload.issue.key)
            result = synchronizer.sync(issue, payload.changelog_entries(), dry_run=dry_run)
        except (TrackerError, SwimlaneSyncError) as e:
            click.echo(f"Sync failed: {e}", err=True)
            sys.exit(1)

    click.echo(f"Issue: {result.issue_key}")
    click.echo(f"Dashboard: {result.dashboard_id if result.dashboard_id is not None else 'none'}")
    _echo_update(result.update)
    click.echo(f"Applied: {'yes' if result.applied else 'no'}")


@main.command(name="decide")
@click.option("--key", required=True, help="Issue key, e.g. PROJ-42")
@click.option("--summary", default=None, help="Issue summary")
@click.option("--old", "old_labels", default="", help="Comma-separated labels before the change")
@click.option("--new", "new_labels", default="", help="Comma-separated labels after the change")
@click.option(
    "--swimlane",
    "swimlanes",
    multiple=True,
    help="Existing swimlane as NAME or NAME=ID (repeatable)",
)
@click.option(
    "--trigger-label",
    default=DEFAULT_TRIGGER_LABEL,
    show_default=True,
    help="Label driving swimlane creation",
)
def decide_command(
    key: str,
    summary: str | None,
    old_labels: str,
    new_labels: str,
    swimlanes: tuple[str, ...],
    trigger_label: str,
) -> None:
    """Print the swimlane decision for the given snapshots (no tracker calls)."""
    fields = (Field(id="summary", text=summary),) if summary is not None else ()
    update = decide(
        None,
        Issue(key=key, fields=fields),
        _parse_labels(old_labels),
        _parse_labels(new_labels),
        [_parse_swimlane(s) for s in swimlanes],
        trigger_label=trigger_label,
    )
    _echo_update(update)


if __name__ == "__main__":
    main()
