"""Tests for whitespace normalization.

Covers:
- newline and whitespace-run collapsing
- outer whitespace left for callers to trim
- idempotence
"""

from __future__ import annotations

from wordtex.parser.text import normalize_whitespace


def test_newlines_become_single_spaces() -> None:
    assert normalize_whitespace("first\nsecond") == "first second"
    assert normalize_whitespace("first \n  second") == "first second"


def test_outer_whitespace_is_kept() -> None:
    assert normalize_whitespace("  padded\n") == " padded "


def test_non_breaking_space_runs_collapse() -> None:
    assert normalize_whitespace("·\xa0\xa0\xa0\xa0Item") == "· Item"


def test_normalization_is_idempotent() -> None:
    samples = ["a\n\nb", " x  y\t\tz ", "\r\nline", "plain", ""]
    for sample in samples:
        once = normalize_whitespace(sample)
        assert normalize_whitespace(once) == once
