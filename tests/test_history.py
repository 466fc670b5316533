"""
Unit tests for flow.history.RunHistory
"""

import pytest

from flow.history import RunHistory
from flow.workflow_engine import run_workflow


def _make_runs(n):
    return [run_workflow(f"run number {i}.", f"wf-{i}") for i in range(1, n + 1)]


class TestRunHistory:

    def test_starts_empty(self):
        history = RunHistory()
        assert len(history) == 0
        assert history.snapshot() == ()
        assert history.latest() is None
        assert history.capacity == 5

    def test_newest_first(self):
        history = RunHistory()
        r1, r2 = _make_runs(2)
        history.record(r1)
        snap = history.record(r2)
        assert snap == (r2, r1)
        assert history.latest() is r2

    def test_six_runs_evict_first(self):
        history = RunHistory()
        runs = _make_runs(6)
        for run in runs:
            history.record(run)

        snap = history.snapshot()
        assert len(snap) == 5
        assert snap[0] is runs[5]
        assert snap[-1] is runs[1]
        assert runs[0] not in snap

    def test_seven_runs(self):
        history = RunHistory()
        runs = _make_runs(7)
        for run in runs:
            history.record(run)
            assert len(history) <= 5

        snap = history.snapshot()
        assert len(snap) == 5
        assert snap[0] is runs[6]
        assert runs[1] not in snap
        assert [r.workflow_name for r in snap] == ["wf-7", "wf-6", "wf-5", "wf-4", "wf-3"]

    def test_snapshot_is_read_only_copy(self):
        history = RunHistory()
        (run,) = _make_runs(1)
        snap = history.record(run)
        assert isinstance(snap, tuple)
        assert list(history) == [run]

    def test_summary_view_ordinals(self):
        history = RunHistory()
        for run in _make_runs(3):
            history.record(run)
        rows = history.summary_view()
        assert [row["ordinal"] for row in rows] == [3, 2, 1]
        assert rows[0]["workflow_name"] == "wf-3"
        assert rows[0]["input_preview"] == "run number 3."

    def test_numbered_matches_summary_view(self):
        history = RunHistory()
        runs = _make_runs(2)
        for run in runs:
            history.record(run)
        assert history.numbered() == [(2, runs[1]), (1, runs[0])]
        assert [row["ordinal"] for row in history.summary_view()] == [2, 1]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            RunHistory(capacity=0)
