# -*- coding: utf-8 -*-

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env first, before anything reads os.environ
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# --------------------------------
# Paths / log directory
# --------------------------------

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

# JSONL event log directory (one file per workflow session)
LOG_DIR = Path(os.getenv("WORKFLOW_LOG_DIR", str(BASE_DIR / "data" / "logs")))
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Set EVENT_LOG_ENABLED=false to skip the per-session JSONL files
EVENT_LOG_ENABLED = _env_bool("EVENT_LOG_ENABLED", True)

# --------------------------------
# HTTP
# --------------------------------

CORS_ALLOW_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if o.strip()
]

# --------------------------------
# Pipeline constants (fixed, not read from the environment)
# --------------------------------

# The step set is fixed: exactly four steps, always in the same order.
STEP_COUNT = 4
MIN_STEPS = 4
MAX_STEPS = 4

# Number of past runs kept in memory per session
MAX_HISTORY = 5

DEFAULT_SUMMARY_SENTENCES = 2
DEFAULT_KEY_POINTS = 5

# Initial workflow name, and the name used when the caller leaves it blank
DEFAULT_WORKFLOW_NAME = "My Workflow"
UNTITLED_WORKFLOW_NAME = "Untitled workflow"

# History list shows this many characters of the input
INPUT_PREVIEW_CHARS = 80
