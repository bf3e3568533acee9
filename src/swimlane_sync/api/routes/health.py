"""Health check endpoint."""

from fastapi import APIRouter

from swimlane_sync.api.dependencies import SynchronizerDep
from swimlane_sync.api.models import APIResponse, HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=APIResponse[HealthResponse])
def health(synchronizer: SynchronizerDep) -> APIResponse[HealthResponse]:
    """Report service status and the active routing."""
    return APIResponse(
        data=HealthResponse(
            status="ok",
            details={
                "trigger_label": synchronizer.trigger_label,
                "routes": synchronizer.resolver.routes,
            },
        )
    )
