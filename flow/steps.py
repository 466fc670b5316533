# -*- coding: utf-8 -*-
"""
flow.steps

The fixed step list of the workflow and the mapping from step kind to
transformation function.

Every workflow runs exactly these four steps, in this order:

    1. Clean text          (utils_text.clean_text)
    2. Summarize           (summarizer.summarize)
    3. Extract key points  (summarizer.extract_key_points)
    4. Tag category        (classifier.tag_category)

The list is built once at import time and is never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Literal, Tuple

from .classifier import tag_category
from .summarizer import extract_key_points, summarize
from .utils_text import clean_text

StepKind = Literal["CLEAN_TEXT", "SUMMARIZE", "EXTRACT_KEY_POINTS", "TAG_CATEGORY"]


@dataclass(frozen=True)
class Step:
    id: str
    kind: StepKind
    label: str


# (kind, label) in execution order
STEP_TYPES: Tuple[Tuple[StepKind, str], ...] = (
    ("CLEAN_TEXT", "Clean text"),
    ("SUMMARIZE", "Summarize"),
    ("EXTRACT_KEY_POINTS", "Extract key points"),
    ("TAG_CATEGORY", "Tag category"),
)

STEPS: Tuple[Step, ...] = tuple(
    Step(id=f"step-{idx + 1}", kind=kind, label=label)
    for idx, (kind, label) in enumerate(STEP_TYPES)
)

# One entry per StepKind; summarize / key points run with their default counts
STEP_FUNCTIONS: Dict[StepKind, Callable[[str], str]] = {
    "CLEAN_TEXT": clean_text,
    "SUMMARIZE": summarize,
    "EXTRACT_KEY_POINTS": extract_key_points,
    "TAG_CATEGORY": tag_category,
}


def run_step(kind: StepKind, text: str) -> str:
    """Apply the transformation for one step kind."""
    try:
        func = STEP_FUNCTIONS[kind]
    except KeyError:
        raise ValueError(f"Unknown step kind: {kind!r}") from None
    return func(text)
