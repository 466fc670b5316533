"""
Unit tests for flow.steps / flow.workflow_engine
"""

import dataclasses
import re

import pytest

from core.config import MIN_STEPS, STEP_COUNT
from flow.steps import STEP_FUNCTIONS, STEPS, run_step
from flow.workflow_engine import Run, can_run, run_workflow


class TestSteps:
    """Fixed step list"""

    def test_four_fixed_steps_in_order(self):
        assert len(STEPS) == STEP_COUNT == 4
        assert [s.id for s in STEPS] == ["step-1", "step-2", "step-3", "step-4"]
        assert [s.kind for s in STEPS] == [
            "CLEAN_TEXT",
            "SUMMARIZE",
            "EXTRACT_KEY_POINTS",
            "TAG_CATEGORY",
        ]
        assert [s.label for s in STEPS] == [
            "Clean text",
            "Summarize",
            "Extract key points",
            "Tag category",
        ]

    def test_every_kind_has_a_function(self):
        assert set(STEP_FUNCTIONS) == {s.kind for s in STEPS}

    def test_steps_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            STEPS[0].label = "changed"

    def test_run_step_dispatch(self):
        assert run_step("CLEAN_TEXT", "  a   b ") == "A b"
        assert run_step("TAG_CATEGORY", "a bug") == "Bug Report"

    def test_run_step_unknown_kind(self):
        with pytest.raises(ValueError):
            run_step("UPPERCASE", "text")


class TestRunWorkflow:
    """Executor"""

    def test_scenario_hello_world(self):
        run = run_workflow("hello world. this is a test!", "Demo")
        assert run is not None
        assert [r.output for r in run.results] == [
            "Hello world. This is a test!",
            "Hello world. This is a test!",
            "• Hello world.\n• This is a test!",
            "General",
        ]

    def test_results_follow_step_order(self):
        run = run_workflow("Some text. More text.", "Demo")
        assert len(run.results) == 4
        assert [r.step_id for r in run.results] == [s.id for s in STEPS]
        assert [r.step_label for r in run.results] == [s.label for s in STEPS]

    def test_bug_customer_category(self):
        run = run_workflow("We found a critical bug that caused an error for the customer.")
        assert run.results[-1].output == "Bug Report, User Feedback"

    def test_keeps_raw_input(self):
        raw = "  messy   input.\n\nsecond line  "
        run = run_workflow(raw, "Demo")
        assert run.input == raw

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input_refused(self, text):
        assert run_workflow(text, "Demo") is None
        assert not can_run(text)

    def test_too_few_steps_refused(self):
        short = STEPS[: MIN_STEPS - 1]
        assert not can_run("valid text", short)
        assert run_workflow("valid text", "Demo", steps=short) is None

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_default_workflow_name(self, name):
        run = run_workflow("text.", name)
        assert run.workflow_name == "Untitled workflow"

    def test_workflow_name_kept(self):
        assert run_workflow("text.", "Support triage").workflow_name == "Support triage"

    def test_metadata(self):
        run = run_workflow("text.", "Demo")
        assert isinstance(run.duration_ms, int)
        assert run.duration_ms >= 0
        assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", run.started_at)

    def test_run_ids_unique(self):
        ids = {run_workflow(f"text {i}.", "Demo").id for i in range(20)}
        assert len(ids) == 20

    def test_run_is_immutable(self):
        run = run_workflow("text.", "Demo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            run.input = "other"
        assert isinstance(run.results, tuple)

    def test_input_preview(self):
        short = run_workflow("x" * 80, "Demo")
        long = run_workflow("y" * 81, "Demo")
        assert short.input_preview == "x" * 80
        assert long.input_preview == "y" * 80 + "…"

    def test_to_dict(self):
        run = run_workflow("a bug.", "Demo")
        data = run.to_dict()
        assert isinstance(run, Run)
        assert data["workflow_name"] == "Demo"
        assert data["results"][3] == {
            "step_id": "step-4",
            "step_label": "Tag category",
            "output": "Bug Report",
        }
