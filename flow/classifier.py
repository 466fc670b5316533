# -*- coding: utf-8 -*-
"""
Keyword-based category tagging.

Role
----
- tag_category(text):
    decide which category labels apply to the text and return them as one
    comma-separated string ("Bug Report, User Feedback"), or "General".
- matched_categories(text):
    the same decision as a list, without the "General" fallback.

Notes
-----
- Rules are NOT mutually exclusive. Every rule whose keywords appear
  contributes its label.
- Output order is the order of CATEGORY_RULES, never the order in which
  keywords appear in the text.
- Matching is a plain case-insensitive substring check, so "issues",
  "users" or "wholesale" count as hits too.
"""

from __future__ import annotations

from typing import List, Tuple

from .utils_text import contains_any

GENERAL_LABEL = "General"
LABEL_SEPARATOR = ", "

# ------------------------------------------------------------
# 1. Category rules (label, trigger keywords), evaluated in order
# ------------------------------------------------------------

BUG_KEYWORDS = (
    "error",
    "fail",
    "bug",
    "issue",
)

FEATURE_KEYWORDS = (
    "feature",
    "request",
    "idea",
    "improve",
)

FEEDBACK_KEYWORDS = (
    "user",
    "customer",
    "client",
)

SALES_KEYWORDS = (
    "sale",
    "revenue",
    "price",
    "cost",
)

CATEGORY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Bug Report", BUG_KEYWORDS),
    ("Feature Request", FEATURE_KEYWORDS),
    ("User Feedback", FEEDBACK_KEYWORDS),
    ("Business / Sales", SALES_KEYWORDS),
)


# ------------------------------------------------------------
# 2. Main classification functions
# ------------------------------------------------------------

def matched_categories(text: str) -> List[str]:
    lower = (text or "").lower()
    return [label for label, keywords in CATEGORY_RULES if contains_any(lower, keywords)]


def tag_category(text: str) -> str:
    """
    Priority
    --------
    1) Bug Report        error / fail / bug / issue
    2) Feature Request   feature / request / idea / improve
    3) User Feedback     user / customer / client
    4) Business / Sales  sale / revenue / price / cost
    5) nothing matched => "General"
    """
    labels = matched_categories(text)
    if not labels:
        return GENERAL_LABEL
    return LABEL_SEPARATOR.join(labels)
