# -*- coding: utf-8 -*-
"""
flow.utils_text

Shared text utilities for the workflow steps.

Role
----
- normalize(text): line-aware sentence-case pass applied after every step
- collapse_whitespace(text): squeeze every whitespace run into one space and trim
- clean_text(text): the "Clean text" step (collapse + normalize)
- split_sentences(text): sentence splitter shared by summarize / key points
- contains_any(text, keywords): substring check used by the category rules

Everything here is pure; any str input is valid.
"""

from __future__ import annotations

import re
from typing import Iterable, List


# ------------------------------------------------------------
# 1. Sentence-case normalization
# ------------------------------------------------------------

# First lowercase letter of a line, after optional indent and bullet marker
_LINE_START_RE = re.compile(r"^(\s*[•\-]?\s*)([a-z])")

# Lowercase letter starting a new sentence inside the line
_SENTENCE_START_RE = re.compile(r"([.!?]\s+)([a-z])")

_WHITESPACE_RE = re.compile(r"\s+")

# Split point: whitespace preceded by terminal punctuation.
# The punctuation stays with the sentence before it.
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")


def _upper_group2(m: re.Match) -> str:
    return m.group(1) + m.group(2).upper()


def _normalize_line(line: str) -> str:
    if not line.strip():
        return line

    updated = _LINE_START_RE.sub(_upper_group2, line, count=1)
    updated = _SENTENCE_START_RE.sub(_upper_group2, updated)
    return updated


def normalize(text: str) -> str:
    """
    Capitalize sentence starts line by line.

    - each line is handled on its own, so bullet lists keep their shape
    - the first letter of a line is uppercased even behind "•" or "-"
    - a letter after ". ", "! " or "? " is uppercased
    - blank lines (and empty input) come back untouched
    """
    if not text:
        return text

    return "\n".join(_normalize_line(line) for line in text.split("\n"))


# ------------------------------------------------------------
# 2. Whitespace cleanup ("Clean text" step)
# ------------------------------------------------------------

def collapse_whitespace(text: str) -> str:
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_text(text: str) -> str:
    """Flatten to a single line with single spaces, then sentence-case it."""
    return normalize(collapse_whitespace(text))


# ------------------------------------------------------------
# 3. Sentences / keywords
# ------------------------------------------------------------

def split_sentences(text: str) -> List[str]:
    """
    Split on ".", "!" or "?" followed by whitespace.

    Pieces are trimmed and empty pieces dropped. Text without any
    terminal punctuation is a single sentence. Abbreviations such as
    "Mr. Smith" are split like any other sentence end.
    """
    if not text:
        return []

    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """
    True if any keyword appears in text as a substring.
    Callers lowercase both sides beforehand.
    """
    if not text:
        return False

    return any(kw in text for kw in keywords)
