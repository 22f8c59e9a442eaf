"""Bullet list runs built from Word's first/middle/last list paragraphs."""

from __future__ import annotations

import enum
import logging

from .base import BULLET_GLYPH, LIST_CLASS_FIRST, LIST_CLASS_LAST, LIST_CLASS_MIDDLE, ListStructureError
from .text import normalize_whitespace

logger = logging.getLogger(__name__)


class ListPolicy(str, enum.Enum):
    """What to do when list paragraphs arrive out of order."""

    IGNORE = "ignore"
    WARN = "warn"
    FAIL = "fail"


class ListAssembler:
    """Emit ``itemize`` markup for one document, tracking whether a list is open.

    Output never depends on the policy; only the reporting of
    inconsistencies does.
    """

    def __init__(self, policy: ListPolicy | str = ListPolicy.IGNORE) -> None:
        self.policy = ListPolicy(policy)
        self.is_open = False

    @staticmethod
    def list_position(classes: list[str]) -> str | None:
        for cls, position in (
            (LIST_CLASS_FIRST, "first"),
            (LIST_CLASS_MIDDLE, "middle"),
            (LIST_CLASS_LAST, "last"),
        ):
            if cls in classes:
                return position
        return None

    def add_item(self, position: str, text: str) -> str:
        item = normalize_whitespace(text.replace(BULLET_GLYPH, "", 1)).strip()

        if position == "first":
            if self.is_open:
                self._report("list opened while the previous list is still open")
            self.is_open = True
            return f"\\begin{{itemize}}\n\\item {item}\n"

        if not self.is_open:
            self._report(f"list item ({position}) without an opening item")

        if position == "middle":
            return f"\\item {item}\n"

        self.is_open = False
        return f"\\item {item}\n\\end{{itemize}}\n\n"

    def finish(self) -> None:
        if self.is_open:
            self._report("document ends inside an open list")
        self.is_open = False

    def _report(self, message: str) -> None:
        if self.policy is ListPolicy.FAIL:
            raise ListStructureError(message)
        if self.policy is ListPolicy.WARN:
            logger.warning("Inconsistent list structure: %s", message)
