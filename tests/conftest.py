"""Shared Word clipboard HTML snippets."""

from __future__ import annotations

import pytest

FOOTNOTE_REF = (
    '<a style="mso-footnote-id:ftn{n}" href="#_ftn{n}" name="_ftnref{n}" title="">'
    '<span class="MsoFootnoteReference"><span style="mso-special-character:footnote">'
    '<![if !supportFootnotes]><span class="MsoFootnoteReference">'
    '<span style="font-size:11.0pt">[{n}]</span></span><![endif]></span></span></a>'
)

FOOTNOTE_ENTRY = (
    '<div style="mso-element:footnote" id="ftn{n}">'
    '<p class="MsoFootnoteText"><a style="mso-footnote-id:ftn{n}" href="#_ftnref{n}" name="_ftn{n}" title="">'
    '<span class="MsoFootnoteReference"><span style="mso-special-character:footnote">'
    '<![if !supportFootnotes]><span class="MsoFootnoteReference">'
    '<span style="font-size:10.0pt">[{n}]</span></span><![endif]></span></span></a>'
    ' {body}</p></div>'
)


def word_document(body: str, footnotes: str = "") -> str:
    footnote_list = f'<div style="mso-element:footnote-list">{footnotes}</div>' if footnotes else ""
    return (
        "<html><head><meta charset=utf-8></head>"
        f'<body lang="EN-US"><!--StartFragment-->{body}<!--EndFragment-->{footnote_list}</body></html>'
    )


@pytest.fixture
def footnoted_document() -> str:
    body = (
        f'<p class="MsoNormal">Details are elsewhere.{FOOTNOTE_REF.format(n=1)} '
        f'Unknown marker{FOOTNOTE_REF.format(n=2)} here.</p>'
    )
    footnotes = FOOTNOTE_ENTRY.format(n=1, body="See appendix")
    return word_document(body, footnotes)
