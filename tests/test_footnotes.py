"""Tests for the footnote table pre-pass.

Covers:
- index to rendered footnote mapping
- hyperlinks wrapped in \\url
- skipped entries and missing footnote regions
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from conftest import FOOTNOTE_ENTRY, word_document
from wordtex.parser.footnotes import build_footnote_table, footnote_label


def _table(html: str) -> dict[str, str]:
    return build_footnote_table(BeautifulSoup(html, "html.parser"))


def test_footnote_table_maps_index_to_rendered_body() -> None:
    html = word_document('<p class="MsoNormal">x</p>', FOOTNOTE_ENTRY.format(n=1, body="See appendix"))
    assert _table(html) == {"1": "\\footnote{See appendix}"}


def test_footnote_body_wraps_hyperlinks_in_url() -> None:
    entry = FOOTNOTE_ENTRY.format(
        n=3,
        body='Source: <a href="https://example.org/a_b">https://example.org/a_b</a>, retrieved\n  2024.',
    )
    table = _table(word_document("<p>x</p>", entry))
    assert table["3"] == "\\footnote{Source: \\url{https://example.org/a_b}, retrieved 2024.}"


def test_entries_without_index_or_body_are_skipped() -> None:
    no_index = '<div style="mso-element:footnote" id="ftn5"><p class="MsoFootnoteText">Orphan text</p></div>'
    no_body = FOOTNOTE_ENTRY.format(n=6, body="  ")
    assert _table(word_document("<p>x</p>", no_index + no_body)) == {}


def test_missing_footnote_region_gives_empty_table() -> None:
    assert _table(word_document('<p class="MsoNormal">Just text</p>')) == {}


def test_footnote_label_strips_brackets() -> None:
    assert footnote_label(" [12] ") == "12"
    assert footnote_label("3") == "3"
