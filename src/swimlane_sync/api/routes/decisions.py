"""Decision preview endpoint."""

from fastapi import APIRouter

from swimlane_sync.api.dependencies import SynchronizerDep
from swimlane_sync.api.models import (
    APIResponse,
    DecisionRequest,
    SwimlaneUpdateResponse,
    update_to_response,
)
from swimlane_sync.engine import decide

router = APIRouter(tags=["decisions"])


@router.post("/decisions", response_model=APIResponse[SwimlaneUpdateResponse])
def preview_decision(
    request: DecisionRequest, synchronizer: SynchronizerDep
) -> APIResponse[SwimlaneUpdateResponse]:
    """Decide the swimlane update for the given snapshots without calling the tracker."""
    update = decide(
        request.dashboard_id,
        request.issue.to_issue(),
        frozenset(request.old_labels),
        frozenset(request.new_labels),
        [swimlane.to_swimlane() for swimlane in request.current_swimlanes],
        trigger_label=request.trigger_label or synchronizer.trigger_label,
    )
    return APIResponse(data=update_to_response(update))
