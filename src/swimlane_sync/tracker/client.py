"""TrackerClient - Talks to the Jira Agile (greenhopper) REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from swimlane_sync.engine.models import Dashboard, Field, Issue, Swimlane
from swimlane_sync.logging import sanitize_for_log, truncate_output
from swimlane_sync.tracker.exceptions import (
    AuthenticationError,
    DashboardNotFoundError,
    IssueNotFoundError,
    SwimlaneConflictError,
    TrackerError,
)
from swimlane_sync.tracker.models import Session

logger = logging.getLogger("swimlane_sync.tracker")

DEFAULT_LOGIN_PATH = "/rest/auth/1/session"
DEFAULT_ISSUE_BOARD_ID = 368

ISSUE_DETAILS_PATH = "/rest/greenhopper/1.0/xboard/issue/details.json"
BOARD_CONFIG_PATH = "/rest/greenhopper/1.0/xboard/config.json"
SWIMLANES_PATH = "/rest/greenhopper/1.0/swimlanes"


class TrackerClient:
    """Client for the tracker endpoints swimlane synchronization needs.

    Logs in with username/password, keeps the session cookie and sends it
    with every request. Requests are never retried.
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        login_url: str | None = None,
        issue_board_id: int = DEFAULT_ISSUE_BOARD_ID,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Tracker Client.

        Args:
            base_url: Tracker base URL (e.g. "https://jira.example.com")
            username: Tracker user name
            password: Tracker password
            login_url: Session login URL. Defaults to the base URL's auth endpoint.
            issue_board_id: Board used to look up issue details
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        self.login_url = login_url or f"{self.base_url}{DEFAULT_LOGIN_PATH}"
        self.issue_board_id = issue_board_id
        self.timeout = timeout
        self._client: httpx.Client | None = None
        self._session: Session | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the tracker API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Content-Type": "application/json",
                    "X-Atlassian-Token": "no-check",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None
        self._session = None

    def __enter__(self) -> TrackerClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def authenticate(self) -> Session:
        """Log in and return the session, reusing a previous login.

        Raises:
            AuthenticationError: If login fails
        """
        if self._session is not None:
            return self._session

        logger.debug("Logging in to %s as %s", self.login_url, self.username)
        try:
            response = self.client.post(
                self.login_url,
                json={"username": self.username, "password": self.password},
            )
        except httpx.HTTPError as e:
            raise AuthenticationError(f"Auth failed: {e}") from e

        if response.status_code != 200:
            raise AuthenticationError(
                f"Auth failed: {response.status_code} - "
                f"{sanitize_for_log(truncate_output(response.text, 500))}"
            )

        try:
            data = response.json()
            session = data["session"]
            self._session = Session(name=session["name"], value=session["value"])
        except (ValueError, KeyError, TypeError) as e:
            raise AuthenticationError(f"Auth failed: unexpected response {e}") from e

        logger.info("Logged in to tracker as %s", self.username)
        return self._session

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send an authenticated request.

        Raises:
            AuthenticationError: If login fails or the session is rejected
            TrackerError: If the request can't be sent
        """
        session = self.authenticate()
        logger.debug("%s %s", method, path)
        try:
            response = self.client.request(
                method,
                path,
                params=params,
                json=json,
                headers={"Cookie": session.cookie},
            )
        except httpx.HTTPError as e:
            raise TrackerError(f"Jira api request failed {method} {path}: {e}") from e

        if response.status_code == 401:
            self._session = None
            raise AuthenticationError(f"Session rejected for {method} {path}")

        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
        if response.status_code >= 400:
            raise TrackerError(
                f"Jira api request failed {method} {path}: {response.status_code} - "
                f"{truncate_output(response.text, 500)}"
            )

    @staticmethod
    def _json(response: httpx.Response, path: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise TrackerError(f"Invalid JSON from {path}: {e}") from e
        if not isinstance(data, dict):
            raise TrackerError(f"Unexpected response from {path}: {type(data).__name__}")
        return data

    def fetch_issue(self, key: str) -> Issue:
        """Get the current state of an issue.

        Args:
            key: Issue key (e.g. "PROJ-42")

        Returns:
            Issue with its field snapshot

        Raises:
            IssueNotFoundError: If the issue doesn't exist
        """
        params = {"rapidViewId": self.issue_board_id, "issueIdOrKey": key}
        response = self._request("GET", ISSUE_DETAILS_PATH, params=params)
        if response.status_code == 404:
            raise IssueNotFoundError(f"Can not get current issue {key}")
        self._raise_for_status(response, "GET", ISSUE_DETAILS_PATH)

        data = self._json(response, ISSUE_DETAILS_PATH)
        fields = tuple(
            Field(id=str(item.get("id", "")), text=item.get("text") or "")
            for item in data.get("fields") or []
        )
        return Issue(key=data.get("key") or key, fields=fields)

    def fetch_dashboard(self, dashboard_id: int) -> Dashboard:
        """Get a dashboard with its current swimlanes.

        Raises:
            DashboardNotFoundError: If the dashboard doesn't exist or is forbidden
        """
        params = {"returnDefaultBoard": "false", "rapidViewId": dashboard_id}
        response = self._request("GET", BOARD_CONFIG_PATH, params=params)
        if response.status_code in (403, 404):
            raise DashboardNotFoundError(f"Can not get current dashboard {dashboard_id}")
        self._raise_for_status(response, "GET", BOARD_CONFIG_PATH)

        data = self._json(response, BOARD_CONFIG_PATH)
        view_config = data.get("currentViewConfig") or {}
        swimlanes = tuple(
            Swimlane(
                id=item.get("id"),
                name=item.get("name", ""),
                query=item.get("query") or "",
                description=item.get("description") or "",
            )
            for item in view_config.get("swimlanes") or []
        )
        return Dashboard(id=dashboard_id, swimlanes=swimlanes)

    def fetch_dashboard_swimlanes(self, dashboard_id: int) -> list[Swimlane]:
        """Get the current swimlanes of a dashboard."""
        swimlanes = list(self.fetch_dashboard(dashboard_id).swimlanes)
        logger.debug("Dashboard %s has %d swimlane(s)", dashboard_id, len(swimlanes))
        return swimlanes

    def create_swimlane(self, dashboard_id: int, name: str, query: str) -> None:
        """Create a swimlane on a dashboard.

        Raises:
            SwimlaneConflictError: If the tracker rejects the swimlane as a duplicate
        """
        path = f"{SWIMLANES_PATH}/{dashboard_id}/"
        logger.info("Creating swimlane %r on dashboard %s", name, dashboard_id)
        response = self._request("POST", path, json={"name": name, "query": query})
        if response.status_code == 409:
            raise SwimlaneConflictError(
                f"Can not create swimlane {name!r} on dashboard {dashboard_id}"
            )
        self._raise_for_status(response, "POST", path)

    def delete_swimlane(self, dashboard_id: int, swimlane_id: int) -> None:
        """Delete a swimlane from a dashboard.

        A swimlane that is already gone counts as deleted.
        """
        path = f"{SWIMLANES_PATH}/{dashboard_id}/{swimlane_id}"
        logger.info("Deleting swimlane #%s from dashboard %s", swimlane_id, dashboard_id)
        response = self._request("DELETE", path)
        if response.status_code == 404:
            logger.warning(
                "Swimlane #%s already absent from dashboard %s", swimlane_id, dashboard_id
            )
            return
        self._raise_for_status(response, "DELETE", path)
