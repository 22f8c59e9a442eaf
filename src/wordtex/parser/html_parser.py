"""Word clipboard HTML parser that emits a LaTeX fragment."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .base import (
    BOLD_FONT_SIZE_THRESHOLD,
    FOOTNOTE_REFERENCE_CLASS,
    HEADING_RULES,
    MONOSPACE_FONT_FAMILY,
    EmptyDocumentError,
    FootnoteMarkerState,
    FormattingResult,
    StyleDeclarations,
)
from .footnotes import FootnoteTable, build_footnote_table, footnote_label
from .lists import ListAssembler, ListPolicy
from .references import resolve_references
from .text import normalize_whitespace

logger = logging.getLogger(__name__)

_LINE_BREAK = "\\\\\n"
_ITALIC_TAGS = {"i", "em"}
_BOLD_TAGS = {"b", "strong"}


class WordHTMLParser:
    """Convert Word HTML (as put on the clipboard) into LaTeX."""

    def __init__(self, list_policy: ListPolicy | str = ListPolicy.IGNORE) -> None:
        self.list_policy = ListPolicy(list_policy)

    def parse(self, input_path: Path) -> str:
        raw = Path(input_path).read_text(encoding="utf-8", errors="ignore")
        return self.convert(raw)

    def convert(self, html: str | None) -> str:
        if not html or not html.strip():
            raise EmptyDocumentError("No HTML input given")

        soup = BeautifulSoup(html, "html.parser")
        body = soup.body
        if body is None:
            raise EmptyDocumentError("HTML input has no <body>")

        blocks = _root_blocks(body)
        if not blocks:
            raise EmptyDocumentError("HTML body contains no paragraphs")

        walker = _TreeWalker(build_footnote_table(soup), ListAssembler(self.list_policy))
        latex = "".join(walker.walk_root_block(block) for block in blocks)
        walker.lists.finish()

        return latex.removesuffix("\n\n")


class _TreeWalker:
    """Recursive walk over one document, scoped to a single conversion."""

    def __init__(self, footnotes: FootnoteTable, lists: ListAssembler) -> None:
        self.footnotes = footnotes
        self.lists = lists

    def walk_root_block(self, element: Tag) -> str:
        result = self._walk_children(element, FootnoteMarkerState.AWAITING_MARKER)
        return self._classify_root_block(element, result)

    def _walk_node(self, node: PageElement, state: FootnoteMarkerState) -> FormattingResult:
        if isinstance(node, PreformattedString):
            return FormattingResult(footnote_state=state)
        if isinstance(node, NavigableString):
            return FormattingResult(normalize_whitespace(str(node)), footnote_state=state)
        if isinstance(node, Tag):
            return self._walk_element(node, state)
        return FormattingResult(footnote_state=state)

    def _walk_children(self, element: Tag, state: FootnoteMarkerState) -> FormattingResult:
        result = FormattingResult(footnote_state=state)
        trim_next = False

        for child in element.children:
            part = self._walk_node(child, result.footnote_state)
            text = part.text.lstrip() if trim_next else part.text
            if text:
                trim_next = part.trim_next_leading_space

            result.text += text
            result.font_size = max(result.font_size, part.font_size)
            result.footnote_state = part.footnote_state

        result.trim_next_leading_space = trim_next
        result.font_size = max(result.font_size, StyleDeclarations.parse(element.get("style")).font_size)
        return result

    def _walk_element(self, element: Tag, state: FootnoteMarkerState) -> FormattingResult:
        if element.name == "br":
            return FormattingResult(_LINE_BREAK, trim_next_leading_space=True, footnote_state=state)

        if FOOTNOTE_REFERENCE_CLASS in element.get("class", []):
            return self._walk_footnote_marker(element, state)

        result = self._walk_children(element, state)

        if not result.text:
            return FormattingResult(footnote_state=result.footnote_state)
        if not result.text.strip():
            return FormattingResult(" ", footnote_state=result.footnote_state)

        if element.name in _ITALIC_TAGS:
            result.text = f"\\textit{{{result.text}}}"
        elif element.name in _BOLD_TAGS:
            if result.font_size < BOLD_FONT_SIZE_THRESHOLD:
                result.text = f"\\textbf{{{result.text}}}"
        elif element.name == "span" and _is_monospace(element):
            result.text = f"\\texttt{{{result.text}}}"

        return result

    def _walk_footnote_marker(self, element: Tag, state: FootnoteMarkerState) -> FormattingResult:
        if state is FootnoteMarkerState.AWAITING_MARKER:
            # Opening marker: its own text is dropped, but a label nested
            # inside it resolves in place.
            inner = self._walk_children(element, FootnoteMarkerState.AWAITING_INDEX_LABEL)
            if inner.footnote_state is FootnoteMarkerState.AWAITING_MARKER:
                return FormattingResult(inner.text, footnote_state=FootnoteMarkerState.AWAITING_MARKER)
            return FormattingResult(footnote_state=FootnoteMarkerState.AWAITING_INDEX_LABEL)

        label_text = self._walk_children(element, FootnoteMarkerState.AWAITING_INDEX_LABEL).text
        index = footnote_label(label_text)
        footnote = self.footnotes.get(index)
        if footnote is None:
            logger.warning("No footnote text found for marker %r", index)
            footnote = ""
        return FormattingResult(footnote, footnote_state=FootnoteMarkerState.AWAITING_MARKER)

    def _classify_root_block(self, element: Tag, result: FormattingResult) -> str:
        text = result.text.strip()
        if not text:
            return ""

        heading = HEADING_RULES.get(result.font_size)
        if heading is not None:
            logger.debug("Heading (%s pt) %r", result.font_size, text)
            return heading.render(text)

        text = resolve_references(text)

        position = ListAssembler.list_position(element.get("class", []))
        if position is not None:
            return self.lists.add_item(position, text)

        return text + "\n\n"


def _root_blocks(body: Tag) -> list[Tag]:
    blocks: list[Tag] = []
    for child in body.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "p":
            blocks.append(child)
        elif child.name == "div" and any(cls.startswith("WordSection") for cls in child.get("class", [])):
            blocks.extend(_root_blocks(child))
    return blocks


def _is_monospace(element: Tag) -> bool:
    family = StyleDeclarations.parse(element.get("style")).font_family
    return MONOSPACE_FONT_FAMILY.lower() in family.lower()
