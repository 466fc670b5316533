# -*- coding: utf-8 -*-
"""
flow.history

Bounded run history.

- newest run first
- at most MAX_HISTORY (5) runs; recording one more drops the oldest
- runs are never edited or removed one by one, only pushed out by capacity
- consumers only ever get tuple snapshots
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from core.config import MAX_HISTORY

from .workflow_engine import Run


class RunHistory:
    """Most-recent-first list of finished runs with a fixed capacity."""

    def __init__(self, capacity: int = MAX_HISTORY):
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._runs: List[Run] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    # -----------------------------------------------------
    # Append + evict
    # -----------------------------------------------------

    def record(self, run: Run) -> Tuple[Run, ...]:
        """Prepend `run`, drop the tail beyond capacity, return the new snapshot."""
        self._runs = [run, *self._runs][: self._capacity]
        return self.snapshot()

    # -----------------------------------------------------
    # Read-only views
    # -----------------------------------------------------

    def snapshot(self) -> Tuple[Run, ...]:
        return tuple(self._runs)

    def latest(self) -> Optional[Run]:
        return self._runs[0] if self._runs else None

    def __len__(self) -> int:
        return len(self._runs)

    def __iter__(self) -> Iterator[Run]:
        return iter(self.snapshot())

    def numbered(self) -> List[Tuple[int, Run]]:
        """(ordinal, run) pairs, newest first; the newest run is #N for N runs."""
        total = len(self._runs)
        return [(total - idx, run) for idx, run in enumerate(self._runs)]

    def summary_view(self) -> List[Dict[str, Any]]:
        """Display rows for a history list."""
        return [
            {
                "ordinal": ordinal,
                "id": run.id,
                "workflow_name": run.workflow_name,
                "started_at": run.started_at,
                "duration_ms": run.duration_ms,
                "input_preview": run.input_preview,
            }
            for ordinal, run in self.numbered()
        ]
