# -*- coding: utf-8 -*-
"""
Request / response models for the HTTP API.

Field names match the engine dataclasses (step_id, workflow_name, duration_ms ...).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from flow.workflow_engine import Run, StepResult


# ============================================================
# Steps
# ============================================================

class StepInfo(BaseModel):
    id: str
    kind: str
    label: str


class StepListResponse(BaseModel):
    steps: List[StepInfo]
    min_steps: int
    max_steps: int


# ============================================================
# Runs
# ============================================================

class RunRequest(BaseModel):
    """
    Body for one workflow run.
    - session_id: session from /api/session/start (a new one is made when empty)
    - workflow_name: free-form label; blank runs are stored as "Untitled workflow"
    - text: the raw input text
    """
    session_id: Optional[str] = Field(
        default=None,
        description="Session ID from an earlier response. Leave empty on the first request.",
        examples=[None],
    )
    workflow_name: Optional[str] = Field(
        default=None,
        description="Label stored with the run. Omit to keep the session's current name.",
        examples=["Support triage"],
    )
    text: str = Field(
        ...,
        description="Input text for the workflow",
        examples=["hello world. this is a test!"],
    )


class CanRunRequest(BaseModel):
    session_id: Optional[str] = None
    text: str = ""


class CanRunResponse(BaseModel):
    can_run: bool


class StepResultModel(BaseModel):
    step_id: str
    step_label: str
    output: str

    @classmethod
    def from_result(cls, result: StepResult) -> "StepResultModel":
        return cls(step_id=result.step_id, step_label=result.step_label, output=result.output)


class RunModel(BaseModel):
    id: str
    workflow_name: str
    input: str
    results: List[StepResultModel]
    started_at: str
    duration_ms: int

    @classmethod
    def from_run(cls, run: Run) -> "RunModel":
        return cls(
            id=run.id,
            workflow_name=run.workflow_name,
            input=run.input,
            results=[StepResultModel.from_result(r) for r in run.results],
            started_at=run.started_at,
            duration_ms=run.duration_ms,
        )


class RunResponse(BaseModel):
    """
    - accepted: False when the run was refused (blank input / run in flight)
    - run: the recorded run, null when refused
    """
    session_id: str
    accepted: bool
    run: Optional[RunModel] = None


class StepOutputsResponse(BaseModel):
    session_id: str
    outputs: List[StepResultModel]


# ============================================================
# History
# ============================================================

class HistoryEntry(RunModel):
    ordinal: int
    input_preview: str


class HistoryResponse(BaseModel):
    session_id: str
    capacity: int
    runs: List[HistoryEntry]
