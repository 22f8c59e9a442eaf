"""Core types and constants shared by the Word HTML to LaTeX conversion."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field


class ConversionError(ValueError):
    """Base error for conversions that cannot produce any output."""


class EmptyDocumentError(ConversionError):
    """The input has no usable body or no root blocks."""


class ListStructureError(ConversionError):
    """A list run arrived out of first/middle/last order."""


class FootnoteMarkerState(enum.Enum):
    AWAITING_MARKER = "awaiting-marker"
    AWAITING_INDEX_LABEL = "awaiting-index-label"


@dataclass(slots=True)
class FormattingResult:
    text: str = ""
    font_size: float = 0
    trim_next_leading_space: bool = False
    footnote_state: FootnoteMarkerState = FootnoteMarkerState.AWAITING_MARKER


@dataclass(frozen=True, slots=True)
class ReferencePattern:
    """Keyword family that introduces one or more referenced labels."""

    name: str
    keyword: str
    value: str
    prefix: str | None = None

    def compile(self) -> re.Pattern[str]:
        # 1 value, 2 joined by and/or, or 3+ with an Oxford comma.
        values = rf"{self.value}(?:(?:, {self.value})*(?:,? (?:and|or) {self.value}))?"
        return re.compile(rf"\b(?P<keyword>{self.keyword}) (?P<values>{values})")


@dataclass(frozen=True, slots=True)
class HeadingRule:
    command: str
    prefix_pattern: re.Pattern[str]
    label_pattern: re.Pattern[str] | None = None

    def render(self, text: str) -> str:
        label = None
        if self.label_pattern is not None:
            match = self.label_pattern.match(text)
            label = match.group(1) if match else None
        heading = self.prefix_pattern.sub("", text, count=1).strip()

        result = f"\\{self.command}{{{heading}}}"
        if label:
            result += f" \\label{{{label.strip()}}}"
        return result + "\n\n"


_DOTTED_NUMERAL_PREFIX = re.compile(r"^\d+(?:\.\d+)* ")
_DOTTED_NUMERAL_LABEL = re.compile(r"^(\d+(?:\.\d+)*) (?=\w)")

HEADING_RULES: dict[float, HeadingRule] = {
    18: HeadingRule(
        command="chapter",
        prefix_pattern=re.compile(r"^Chapter \d+:? "),
        label_pattern=re.compile(r"^Chapter (\d+):? (?=\w)"),
    ),
    16: HeadingRule("section", _DOTTED_NUMERAL_PREFIX, _DOTTED_NUMERAL_LABEL),
    14: HeadingRule("subsection", _DOTTED_NUMERAL_PREFIX, _DOTTED_NUMERAL_LABEL),
    12: HeadingRule("subsubsection", _DOTTED_NUMERAL_PREFIX),
}

# Heading words, in any case and number, that a two-item reference must not swallow.
HEADING_KEYWORD_RE = re.compile(r"(?:sub){0,2}sections?|chapters?", re.IGNORECASE)

BOLD_FONT_SIZE_THRESHOLD = 12
MONOSPACE_FONT_FAMILY = "Courier New"
BULLET_GLYPH = "·"

LIST_CLASS_FIRST = "MsoListParagraphCxSpFirst"
LIST_CLASS_MIDDLE = "MsoListParagraphCxSpMiddle"
LIST_CLASS_LAST = "MsoListParagraphCxSpLast"
FOOTNOTE_REFERENCE_CLASS = "MsoFootnoteReference"

_IDENTIFIER = r"\w+(?:-\w+)*(?:\.\w+)?"

REFERENCE_PATTERNS: tuple[ReferencePattern, ...] = (
    ReferencePattern("figure-refs", keyword=r"[Ff]igures?", value=_IDENTIFIER, prefix="fig"),
    ReferencePattern("listing-refs", keyword=r"[Ll]istings?", value=_IDENTIFIER, prefix="lst"),
    ReferencePattern("section-refs", keyword=r"[Ss]ections?|[Cc]hapters?", value=r"\d+(?:\.\d+)*"),
)


@dataclass(slots=True)
class StyleDeclarations:
    """Parsed inline ``style`` attribute of a Word element."""

    values: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, style: str | None) -> "StyleDeclarations":
        values: dict[str, str] = {}
        for declaration in (style or "").split(";"):
            name, sep, value = declaration.partition(":")
            if sep:
                values[name.strip().lower()] = value.strip()
        return cls(values)

    @property
    def font_size(self) -> float:
        match = re.match(r"([\d.]+)\s*pt$", self.values.get("font-size", ""))
        if not match:
            return 0
        try:
            return float(match.group(1))
        except ValueError:
            return 0

    @property
    def font_family(self) -> str:
        return self.values.get("font-family", "").replace('"', "").replace("'", "")

    @property
    def mso_element(self) -> str:
        return self.values.get("mso-element", "")
