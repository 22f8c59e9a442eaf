"""Whitespace normalization for raw text runs."""

from __future__ import annotations

import re

_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


def normalize_whitespace(text: str) -> str:
    """Turn newlines into spaces and collapse whitespace runs to one space.

    Leading and trailing space is kept; callers trim at block boundaries.
    """
    text = text.replace("\n", " ")
    return _WHITESPACE_RUN_RE.sub(" ", text)
