"""Collect Word footnote bodies before the main walk."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .base import FOOTNOTE_REFERENCE_CLASS, StyleDeclarations
from .text import normalize_whitespace

logger = logging.getLogger(__name__)

FootnoteTable = dict[str, str]


def footnote_label(text: str) -> str:
    """``" [1] "`` -> ``"1"``."""
    return text.strip().strip("[]").strip()


def is_footnote_marker(node: PageElement) -> bool:
    if not isinstance(node, Tag):
        return False
    if node.name == "a" and str(node.get("href", "")).startswith("#_ftnref"):
        return True
    return FOOTNOTE_REFERENCE_CLASS in node.get("class", []) or node.find(
        class_=FOOTNOTE_REFERENCE_CLASS
    ) is not None


def build_footnote_table(soup: BeautifulSoup | Tag) -> FootnoteTable:
    """Map footnote index labels to rendered ``\\footnote{...}`` markup."""
    container = soup.find(_has_mso_element("footnote-list"))
    scope = container if container is not None else soup

    table: FootnoteTable = {}
    for entry in scope.find_all(_has_mso_element("footnote")):
        index = None
        body_parts: list[str] = []
        for node in _entry_inline_nodes(entry):
            if index is None:
                if is_footnote_marker(node):
                    index = footnote_label(render_inline(node)) or None
                continue
            body_parts.append(render_inline(node))

        body = normalize_whitespace("".join(body_parts)).strip()
        if index is None or not body:
            logger.debug("Skipping footnote entry %s (index=%r)", entry.get("id"), index)
            continue
        table[index] = f"\\footnote{{{body}}}"
        logger.debug("Collected footnote %s", index)

    return table


def render_inline(node: PageElement) -> str:
    """Plain text of a footnote node; hyperlinks become ``\\url{...}``."""
    if isinstance(node, PreformattedString):
        return ""
    if isinstance(node, NavigableString):
        return str(node)
    if not isinstance(node, Tag):
        return ""
    if node.name == "br":
        return " "

    text = "".join(render_inline(child) for child in node.children)
    href = str(node.get("href", ""))
    if node.name == "a" and href and not href.startswith("#"):
        return f"\\url{{{normalize_whitespace(text).strip() or href}}}"
    return text


def _entry_inline_nodes(entry: Tag) -> Iterator[PageElement]:
    for child in entry.children:
        if isinstance(child, Tag) and child.name == "p":
            yield from child.children
            yield NavigableString(" ")
        else:
            yield child


def _has_mso_element(kind: str):
    def matcher(tag: Tag) -> bool:
        return StyleDeclarations.parse(tag.get("style")).mso_element == kind

    return matcher
