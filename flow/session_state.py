# -*- coding: utf-8 -*-
"""
session_state.py

Per-consumer workflow state: what a UI (HTTP client or console) needs
between two runs.

🎯 Main roles
--------------------------------------
1) request_run(text, workflow_name)
   - refuses (returns None) when a run is already in flight or the input
     is blank; a refused request is dropped, never queued
   - otherwise runs the workflow, records it in the history and publishes
     the step outputs of that run

2) can_run(text)
   - what the "Run" trigger should show: enabled only for non-blank input,
     a complete step list, and no run in flight

3) debug_view()
   - JSON-serializable dict of the current state for logs / console
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Tuple

from core.config import DEFAULT_WORKFLOW_NAME, MAX_HISTORY, MAX_STEPS, MIN_STEPS
from core.logging import logger

from .history import RunHistory
from .steps import STEPS
from .workflow_engine import Run, StepResult, can_run, run_workflow


class WorkflowSession:
    """
    Workflow state for one consumer.

    - step_outputs: results of the latest run (empty before the first run)
    - history: the last MAX_HISTORY runs, newest first
    - is_running: single in-flight flag; a second request is rejected
    """

    def __init__(self, workflow_name: str = DEFAULT_WORKFLOW_NAME, history_capacity: int = MAX_HISTORY):
        self.workflow_name = workflow_name
        self.steps = STEPS
        self.history = RunHistory(capacity=history_capacity)

        self._step_outputs: Tuple[StepResult, ...] = ()
        self._running = False
        self._lock = threading.Lock()

    # -----------------------------------------------------
    # Read-only state
    # -----------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def step_outputs(self) -> Tuple[StepResult, ...]:
        return self._step_outputs

    def can_run(self, text: Optional[str]) -> bool:
        return not self._running and can_run(text, self.steps)

    # -----------------------------------------------------
    # In-flight guard
    # -----------------------------------------------------

    def _try_begin(self) -> bool:
        with self._lock:
            if self._running:
                return False
            self._running = True
            return True

    def _finish(self) -> None:
        with self._lock:
            self._running = False

    # -----------------------------------------------------
    # Run
    # -----------------------------------------------------

    def request_run(self, text: Optional[str], workflow_name: Optional[str] = None) -> Optional[Run]:
        """
        Run the workflow once for this session.

        workflow_name, when given, replaces the session's current name once
        the run succeeds (a blank name is stored as is and the run gets the
        default label). A refused request leaves the name untouched.
        Returns the recorded Run, or None when the request was refused.
        """
        if not self._try_begin():
            logger.warning("Run refused: another run is still in flight")
            return None

        try:
            name = self.workflow_name if workflow_name is None else workflow_name

            run = run_workflow(text or "", name, self.steps)
            if run is None:
                return None

            # state only changes once the run is complete
            self.workflow_name = name
            self.history.record(run)
            self._step_outputs = run.results
            return run
        finally:
            self._finish()

    # -----------------------------------------------------
    # Debug view
    # -----------------------------------------------------

    def debug_view(self) -> Dict[str, Any]:
        return {
            "workflow_name": self.workflow_name,
            "steps": [{"id": s.id, "kind": s.kind, "label": s.label} for s in self.steps],
            "step_limits": {"min": MIN_STEPS, "max": MAX_STEPS},
            "is_running": self._running,
            "history_size": len(self.history),
            "history": self.history.summary_view(),
        }
