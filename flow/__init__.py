# -*- coding: utf-8 -*-
"""
flow package

Core logic of Workflow Builder Lite: a fixed four-step text workflow
(clean → summarize → key points → category) with a short run history.

Callers (app_fastapi.py, main.py) normally use only:

- run_workflow(text, workflow_name):
    run all four steps once and return the finished Run (or None when the
    input is blank).
- WorkflowSession:
    one consumer's state: in-flight guard, latest step outputs and the
    bounded run history.

Modules:

- utils_text       : normalization, whitespace cleanup, sentence splitting
- summarizer       : summarize / extract_key_points
- classifier       : keyword-based category tagging
- steps            : the fixed step list and kind → function mapping
- workflow_engine  : StepResult / Run and the executor
- history          : RunHistory (capacity 5, newest first)
- session_state    : WorkflowSession
"""

from .history import RunHistory
from .session_state import WorkflowSession
from .steps import STEPS, Step, run_step
from .workflow_engine import Run, StepResult, can_run, run_workflow

__all__ = [
    "RunHistory",
    "WorkflowSession",
    "STEPS",
    "Step",
    "run_step",
    "Run",
    "StepResult",
    "can_run",
    "run_workflow",
]
