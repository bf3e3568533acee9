"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from swimlane_sync.api.dependencies import close_synchronizer, init_synchronizer
from swimlane_sync.api.models import APIResponse
from swimlane_sync.api.routes import decisions, health, webhooks
from swimlane_sync.config import resolve_config
from swimlane_sync.engine import DashboardFetchError
from swimlane_sync.tracker import (
    AuthenticationError,
    DashboardNotFoundError,
    IssueNotFoundError,
    SwimlaneConflictError,
    TrackerError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from swimlane_sync.config import AppConfig

logger = logging.getLogger("swimlane_sync.api")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    config: AppConfig | None = getattr(app.state, "config", None)
    if config is None:
        config = resolve_config()
    synchronizer = init_synchronizer(config)
    logger.info(
        "Swimlane sync started (trigger=%s, routes=%s)",
        synchronizer.trigger_label,
        synchronizer.resolver.routes,
    )

    yield
    # Shutdown
    close_synchronizer()


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Loaded configuration. Resolved from the environment on startup if omitted.
    """
    app = FastAPI(
        title="swimlane-sync",
        description="Keeps dashboard swimlanes in line with issue labels",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.config = config

    # Exception handlers
    @app.exception_handler(IssueNotFoundError)
    async def issue_not_found_handler(_request: Request, exc: IssueNotFoundError) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(DashboardNotFoundError)
    async def dashboard_not_found_handler(
        _request: Request, exc: DashboardNotFoundError
    ) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(DashboardFetchError)
    async def dashboard_fetch_handler(_request: Request, exc: DashboardFetchError) -> JSONResponse:
        if isinstance(exc.__cause__, DashboardNotFoundError):
            return _error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return _error_response(status.HTTP_502_BAD_GATEWAY, str(exc))

    @app.exception_handler(SwimlaneConflictError)
    async def swimlane_conflict_handler(
        _request: Request, exc: SwimlaneConflictError
    ) -> JSONResponse:
        return _error_response(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(_request: Request, _exc: AuthenticationError) -> JSONResponse:
        return _error_response(status.HTTP_502_BAD_GATEWAY, "Tracker authentication failed")

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(_request: Request, exc: TrackerError) -> JSONResponse:
        logger.error("Tracker request failed: %s", exc)
        return _error_response(status.HTTP_502_BAD_GATEWAY, "Tracker request failed")

    # Include routers
    app.include_router(webhooks.router, prefix="/api/v1")
    app.include_router(decisions.router, prefix="/api/v1")
    app.include_router(health.router, prefix="/api/v1")

    return app
