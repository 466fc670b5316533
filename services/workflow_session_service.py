# -*- coding: utf-8 -*-
"""
In-memory registry of workflow sessions.

Everything lives for the lifetime of the process only; a restart starts
from an empty registry (no database).
"""

import re
import threading
import uuid
from typing import Dict, Optional, Tuple

from core.logging import log_event
from flow.session_state import WorkflowSession

# session_id -> WorkflowSession
WORKFLOW_SESSIONS: Dict[str, WorkflowSession] = {}
_SESSIONS_LOCK = threading.Lock()

# session ids double as event-log file names
_SESSION_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def is_valid_session_id(session_id: str) -> bool:
    return bool(_SESSION_ID_RE.match(session_id))


def start_session() -> str:
    session_id = str(uuid.uuid4())
    with _SESSIONS_LOCK:
        WORKFLOW_SESSIONS[session_id] = WorkflowSession()
    log_event(session_id, {"type": "session_start", "source": "api"})
    return session_id


def get_state(session_id: Optional[str]) -> Tuple[str, WorkflowSession]:
    """
    Return (session_id, state), creating the session on first use.
    A missing session_id gets a fresh uuid.

    Raises ValueError for ids that are not plain [A-Za-z0-9_-] tokens.
    """
    session_id = session_id or str(uuid.uuid4())
    if not is_valid_session_id(session_id):
        raise ValueError(f"Invalid session_id: {session_id!r}")

    with _SESSIONS_LOCK:
        state = WORKFLOW_SESSIONS.get(session_id)
        created = state is None
        if created:
            state = WorkflowSession()
            WORKFLOW_SESSIONS[session_id] = state

    if created:
        log_event(session_id, {"type": "session_start", "source": "implicit_by_run"})
    return session_id, state


def find_state(session_id: str) -> Optional[WorkflowSession]:
    """Lookup without creating; read endpoints use this."""
    return WORKFLOW_SESSIONS.get(session_id)
