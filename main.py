# -*- coding: utf-8 -*-
"""
main.py

Console entry point for the Workflow Builder Lite demo.

🎯 Role
--------------------------------------
- read a workflow name once, then texts in a loop
- run each text through the fixed four-step workflow (flow.WorkflowSession)
- print every step output and the run history (last 5 runs)

👉 The HTTP version of the same flow is app_fastapi.py:
   python app_fastapi.py  (or: uvicorn app_fastapi:app --reload)
"""

import json
from typing import Optional

from core.config import DEFAULT_WORKFLOW_NAME
from flow import Run, WorkflowSession


def print_run(run: Run) -> None:
    print(f"\n[Run] {run.workflow_name} · {run.started_at} · {run.duration_ms} ms")
    for idx, res in enumerate(run.results, start=1):
        print(f"\n--- Step {idx}: {res.step_label} ---")
        print(res.output)


def print_history(session: WorkflowSession) -> None:
    rows = session.history.summary_view()
    print(f"\n[History] {len(rows)}/{session.history.capacity}")
    for row in rows:
        print(
            f" #{row['ordinal']} · {row['workflow_name']}"
            f" · {row['started_at']} · {row['duration_ms']} ms"
        )
        print(f"    Input: {row['input_preview']}")


def run_text_mode(as_json: bool = False) -> None:
    """
    Interactive console loop. Type exit or quit (or Ctrl-D) to stop.
    """
    print("\n[Workflow Builder Lite] 4 fixed steps · last 5 runs (exit to quit)")

    try:
        name: Optional[str] = input(f"\nWorkflow name [{DEFAULT_WORKFLOW_NAME}] > ")
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")
        return

    session = WorkflowSession(workflow_name=name.strip() if name and name.strip() else DEFAULT_WORKFLOW_NAME)

    while True:
        try:
            text = input("\ntext > ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye.")
            break

        if text.strip().lower() in ("exit", "quit"):
            print("Bye.")
            break

        if not session.can_run(text):
            print("(nothing to run: enter some text)")
            continue

        run = session.request_run(text)
        if run is None:
            continue

        print_run(run)
        print_history(session)

        if as_json:
            print("FE:" + json.dumps(run.to_dict(), ensure_ascii=False))


if __name__ == "__main__":
    run_text_mode()
