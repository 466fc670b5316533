"""
Shared pytest setup.

The event log directory is pointed at a temp dir before any project
module (and therefore core.config) is imported.
"""

import os
import tempfile
from pathlib import Path

import pytest

os.environ.setdefault("WORKFLOW_LOG_DIR", tempfile.mkdtemp(prefix="workflow_logs_"))


@pytest.fixture
def log_dir() -> Path:
    return Path(os.environ["WORKFLOW_LOG_DIR"])
