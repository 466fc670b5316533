# -*- coding: utf-8 -*-
"""
Workflow execution engine.

run_workflow(text, workflow_name) pushes one input through the fixed step
list and returns a finished Run, or None when the request is refused.

Flow
----
1) normalize the raw input once
2) for each step: transform -> normalize -> record StepResult
3) time the whole loop
4) build the Run (raw input, name, timestamp, rounded duration)

A Run is only built after every step has finished, so callers never see
a partial run.
"""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from core.config import INPUT_PREVIEW_CHARS, MIN_STEPS, UNTITLED_WORKFLOW_NAME
from core.logging import logger

from .steps import STEPS, Step, run_step
from .utils_text import normalize


# -------------------------------------------------------------
# Data structures
# -------------------------------------------------------------

@dataclass(frozen=True)
class StepResult:
    step_id: str
    step_label: str
    output: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "step_id": self.step_id,
            "step_label": self.step_label,
            "output": self.output,
        }


@dataclass(frozen=True)
class Run:
    """
    One complete pass of all steps over one input.

    - input: the text exactly as the caller sent it (not normalized)
    - results: one StepResult per step, in step order
    - started_at: local wall-clock time, "HH:MM:SS"
    """
    id: str
    workflow_name: str
    input: str
    results: Tuple[StepResult, ...]
    started_at: str
    duration_ms: int

    @property
    def input_preview(self) -> str:
        if len(self.input) > INPUT_PREVIEW_CHARS:
            return self.input[:INPUT_PREVIEW_CHARS] + "…"
        return self.input

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "workflow_name": self.workflow_name,
            "input": self.input,
            "results": [r.to_dict() for r in self.results],
            "started_at": self.started_at,
            "duration_ms": self.duration_ms,
        }


# Disambiguates runs created within the same millisecond
_run_seq = itertools.count(1)


def _new_run_id() -> str:
    return f"{time.time_ns() // 1_000_000}-{next(_run_seq)}"


def resolve_workflow_name(workflow_name: Optional[str]) -> str:
    name = (workflow_name or "").strip()
    return name or UNTITLED_WORKFLOW_NAME


# -------------------------------------------------------------
# 1) Run guard
# -------------------------------------------------------------

def can_run(text: Optional[str], steps: Tuple[Step, ...] = STEPS) -> bool:
    """Non-blank input and a step list that meets the fixed minimum."""
    return bool(text and text.strip()) and len(steps) >= MIN_STEPS


# -------------------------------------------------------------
# 2) Execution
# -------------------------------------------------------------

def execute_steps(text: str, steps: Tuple[Step, ...] = STEPS) -> List[StepResult]:
    current = normalize(text)
    results: List[StepResult] = []

    for step in steps:
        current = run_step(step.kind, current)
        current = normalize(current)
        results.append(
            StepResult(step_id=step.id, step_label=step.label, output=current)
        )

    return results


def run_workflow(
    text: str,
    workflow_name: Optional[str] = None,
    steps: Tuple[Step, ...] = STEPS,
) -> Optional[Run]:
    """
    Run every step over `text`.

    Returns None (nothing executed) when the input is blank or the step
    list is shorter than MIN_STEPS. The refusal is silent: no exception.
    """
    if not can_run(text, steps):
        logger.debug("Run refused: blank input or incomplete step list")
        return None

    started_at = datetime.now().strftime("%H:%M:%S")
    start = time.perf_counter()
    results = execute_steps(text, steps)
    duration_ms = round((time.perf_counter() - start) * 1000)

    run = Run(
        id=_new_run_id(),
        workflow_name=resolve_workflow_name(workflow_name),
        input=text,
        results=tuple(results),
        started_at=started_at,
        duration_ms=max(0, duration_ms),
    )

    logger.info(
        f"Run {run.id} finished: workflow={run.workflow_name!r} "
        f"steps={len(run.results)} duration={run.duration_ms}ms"
    )
    return run
