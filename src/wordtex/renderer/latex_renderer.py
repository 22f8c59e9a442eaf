"""Wrap a LaTeX fragment into a standalone, compilable document."""

from __future__ import annotations

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader


class LaTeXRenderer:
    """Render a converted fragment through the standalone document template."""

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "standalone.tex"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name

    def render(
        self,
        fragment: str,
        *,
        title: str | None = None,
        document_class: str = "report",
    ) -> str:
        template = self._env.get_template(self._template_name)
        return template.render(
            body=fragment.strip(),
            title=_escape_title(title) if title else None,
            document_class=document_class,
        )


_TITLE_SPECIAL_CHARS = {
    "\\": "\\textbackslash{}",
    "&": "\\&",
    "%": "\\%",
    "$": "\\$",
    "#": "\\#",
    "_": "\\_",
    "{": "\\{",
    "}": "\\}",
}


def _escape_title(title: str) -> str:
    return re.sub(r"[\\&%$#_{}]", lambda match: _TITLE_SPECIAL_CHARS[match.group(0)], title)
