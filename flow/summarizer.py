# -*- coding: utf-8 -*-
"""
flow.summarizer

Rule-based "shortening" steps. No model calls: both functions just keep
the leading sentences of the text.

Main functions:
- summarize(text, max_sentences=2):
    first N sentences joined into one paragraph.

- extract_key_points(text, max_points=5):
    first N sentences as a "• " bullet list, one per line.

When the splitter finds no sentence at all (blank input) the input is
returned unchanged, so neither step can fail mid-pipeline.
"""

from __future__ import annotations

from core.config import DEFAULT_KEY_POINTS, DEFAULT_SUMMARY_SENTENCES

from .utils_text import normalize, split_sentences

BULLET = "• "


# ---------------------------------------------------------
# 1) Summary paragraph
# ---------------------------------------------------------

def summarize(text: str, max_sentences: int = DEFAULT_SUMMARY_SENTENCES) -> str:
    """
    Keep the first `max_sentences` sentences, joined with a single space.
    Each kept sentence keeps its own terminal punctuation.
    """
    sentences = split_sentences(text)
    if not sentences:
        return text

    return normalize(" ".join(sentences[:max_sentences]))


# ---------------------------------------------------------
# 2) Key points
# ---------------------------------------------------------

def extract_key_points(text: str, max_points: int = DEFAULT_KEY_POINTS) -> str:
    sentences = split_sentences(text)
    if not sentences:
        return text

    points = [f"{BULLET}{s}" for s in sentences[:max_points]]
    # normalize is line-aware, so each bullet gets its own capital letter
    return normalize("\n".join(points))
