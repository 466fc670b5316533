# routers/history.py
from fastapi import APIRouter, HTTPException

from schemas import HistoryEntry, HistoryResponse, RunModel
from services.workflow_session_service import find_state

router = APIRouter(tags=["history"])


@router.get(
    "/api/history/{session_id}",
    response_model=HistoryResponse,
    summary="Recent runs of a session (newest first)",
)
def get_history(session_id: str):
    state = find_state(session_id)
    if state is None:
        raise HTTPException(status_code=404, detail="Unknown session_id.")

    entries = [
        HistoryEntry(
            ordinal=ordinal,
            input_preview=run.input_preview,
            **RunModel.from_run(run).model_dump(),
        )
        for ordinal, run in state.history.numbered()
    ]

    return HistoryResponse(
        session_id=session_id,
        capacity=state.history.capacity,
        runs=entries,
    )
