# -*- coding: utf-8 -*-

import sys
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from .config import LOG_DIR, LOG_LEVEL, EVENT_LOG_ENABLED

# ------------------------------------------------
# Terminal logger
# ------------------------------------------------
logger = logging.getLogger("workflow_builder")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_event(session_id: str, payload: Dict[str, Any]) -> None:
    """
    Append one JSON line per event for post-hoc analysis.
    One file per session: LOG_DIR/<session_id>.jsonl

    A failed write is reported as a warning and never interrupts the caller.
    """
    if not EVENT_LOG_ENABLED:
        return

    ts = datetime.now(timezone.utc).isoformat()
    log_path = LOG_DIR / f"{session_id}.jsonl"

    record = {
        "timestamp": ts,
        "session_id": session_id,
        **payload,
    }

    try:
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError as e:
        logger.warning(f"Event log write failed: {log_path} ({e})")
