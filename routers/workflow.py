# routers/workflow.py
from fastapi import APIRouter, HTTPException

from core.config import MAX_STEPS, MIN_STEPS
from core.logging import log_event, logger
from flow.steps import STEPS
from flow.workflow_engine import can_run
from schemas import (
    CanRunRequest,
    CanRunResponse,
    RunModel,
    RunRequest,
    RunResponse,
    StepInfo,
    StepListResponse,
    StepOutputsResponse,
    StepResultModel,
)
from services.workflow_session_service import find_state, get_state, start_session

router = APIRouter(tags=["workflow"])


@router.get(
    "/api/steps",
    response_model=StepListResponse,
    summary="Fixed step list",
)
def list_steps():
    return StepListResponse(
        steps=[StepInfo(id=s.id, kind=s.kind, label=s.label) for s in STEPS],
        min_steps=MIN_STEPS,
        max_steps=MAX_STEPS,
    )


@router.post(
    "/api/session/start",
    summary="Create a workflow session",
    tags=["session"],
)
def start_workflow_session():
    return {"session_id": start_session()}


@router.post(
    "/api/workflow/can-run",
    response_model=CanRunResponse,
    summary="Whether a run would be accepted right now",
)
def check_can_run(body: CanRunRequest):
    state = find_state(body.session_id) if body.session_id else None
    if state is not None:
        return CanRunResponse(can_run=state.can_run(body.text))
    return CanRunResponse(can_run=can_run(body.text))


@router.post(
    "/api/workflow/run",
    response_model=RunResponse,
    summary="Run the four-step workflow once",
)
def run_workflow_once(body: RunRequest):
    """
    Runs clean → summarize → key points → category over `text` and records
    the run in the session history.

    Blank input, or a run already in flight for the session, is refused
    silently: accepted=false, run=null, nothing recorded.
    """
    try:
        session_id, state = get_state(body.session_id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    run = state.request_run(body.text, body.workflow_name)
    if run is None:
        logger.info(f"[{session_id}] run request refused")
        return RunResponse(session_id=session_id, accepted=False, run=None)

    log_event(
        session_id,
        {
            "type": "workflow_run",
            "run": run.to_dict(),
        },
    )

    return RunResponse(session_id=session_id, accepted=True, run=RunModel.from_run(run))


@router.get(
    "/api/workflow/{session_id}/outputs",
    response_model=StepOutputsResponse,
    summary="Step outputs of the latest run",
)
def get_step_outputs(session_id: str):
    state = find_state(session_id)
    if state is None:
        raise HTTPException(status_code=404, detail="Unknown session_id.")

    return StepOutputsResponse(
        session_id=session_id,
        outputs=[StepResultModel.from_result(r) for r in state.step_outputs],
    )
