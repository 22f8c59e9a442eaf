"""Parser package."""

from .base import ConversionError, EmptyDocumentError, FormattingResult, ListStructureError
from .footnotes import build_footnote_table
from .html_parser import WordHTMLParser
from .lists import ListAssembler, ListPolicy
from .references import resolve_references
from .text import normalize_whitespace

__all__ = [
    "ConversionError",
    "EmptyDocumentError",
    "FormattingResult",
    "ListStructureError",
    "build_footnote_table",
    "WordHTMLParser",
    "ListAssembler",
    "ListPolicy",
    "resolve_references",
    "normalize_whitespace",
]
