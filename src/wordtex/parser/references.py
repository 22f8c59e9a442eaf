"""Rewrite natural-language references in paragraph text into LaTeX tokens.

The rewrites form an ordered pipeline. Each stage states what its output must
not contain so that no later stage rewrites it again:

``em-dash``
    Spaced en dashes become ``\\textemdash{}``. Leaves no spaced dash behind.
``citation``
    ``[a, b-c]`` becomes ``\\cite{a, b-c}``. Leaves no square brackets around
    word lists.
``figure-refs`` / ``listing-refs`` / ``section-refs``
    ``figures a.png and b.png`` becomes ``figures \\ref{fig:a.png} and
    \\ref{fig:b.png}``. A keyword is always followed by ``\\ref``, which no
    value pattern matches, so a rewritten reference is never matched twice.
``underscore-escape``
    ``_`` becomes ``\\_`` outside of ``\\ref``/``\\cite``/``\\label``/``\\url``.
    Must run last: earlier stages put raw underscores inside those tokens.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from .base import HEADING_KEYWORD_RE, REFERENCE_PATTERNS, ReferencePattern

logger = logging.getLogger(__name__)

_CITATION_RE = re.compile(r"\[\w+(?:-\w+)*(?:, \w+(?:-\w+)*)*\]")
_PROTECTED_TOKEN_RE = re.compile(r"(\\(?:ref|cite|label|url)\{[^{}]*\})")
_BARE_UNDERSCORE_RE = re.compile(r"(?<!\\)_")


@dataclass(frozen=True, slots=True)
class RewriteStage:
    name: str
    apply: Callable[[str], str]


def replace_em_dashes(text: str) -> str:
    return text.replace(" – ", "\\textemdash{}")


def replace_citations(text: str) -> str:
    return _CITATION_RE.sub(lambda match: f"\\cite{{{match.group(0)[1:-1]}}}", text)


def escape_underscores(text: str) -> str:
    parts = _PROTECTED_TOKEN_RE.split(text)
    # Odd indices are the captured protected tokens.
    return "".join(
        part if idx % 2 else _BARE_UNDERSCORE_RE.sub(r"\\_", part)
        for idx, part in enumerate(parts)
    )


def handle_ref_match(match: str, prefix: str | None = None) -> str:
    """Turn ``a``, ``a and b`` or ``a, b, and c`` into ``\\ref`` tokens.

    More than two values are expected to use an Oxford comma.
    """
    label_prefix = f"{prefix}:" if prefix else ""

    if " and " in match:
        join_word = "and"
    elif " or " in match:
        join_word = "or"
    else:
        return f"\\ref{{{label_prefix}{match}}}"

    if "," in match:
        values = match.split(",")
        refs = [f"\\ref{{{label_prefix}{value.strip()}}}, " for value in values[:-1]]
        last = values[-1].replace(f"{join_word} ", "", 1).strip()
        return "".join(refs) + f"{join_word} \\ref{{{label_prefix}{last}}}"

    first, _, second = match.partition(f" {join_word} ")
    if HEADING_KEYWORD_RE.fullmatch(second.strip()):
        # "figure 3 and section 2": the second word starts a new reference.
        logger.debug("Treating %r as a single reference followed by %r", first, second)
        return f"\\ref{{{label_prefix}{first.strip()}}} {join_word} {second.strip()}"
    return f"\\ref{{{label_prefix}{first.strip()}}} {join_word} \\ref{{{label_prefix}{second.strip()}}}"


def _reference_stage(pattern: ReferencePattern) -> RewriteStage:
    regex = pattern.compile()

    def apply(text: str) -> str:
        return regex.sub(
            lambda m: f"{m.group('keyword')} {handle_ref_match(m.group('values'), pattern.prefix)}",
            text,
        )

    return RewriteStage(pattern.name, apply)


REWRITE_STAGES: tuple[RewriteStage, ...] = (
    RewriteStage("em-dash", replace_em_dashes),
    RewriteStage("citation", replace_citations),
    *(_reference_stage(pattern) for pattern in REFERENCE_PATTERNS),
    RewriteStage("underscore-escape", escape_underscores),
)


def resolve_references(text: str, stages: tuple[RewriteStage, ...] = REWRITE_STAGES) -> str:
    for stage in stages:
        text = stage.apply(text)
    return text
