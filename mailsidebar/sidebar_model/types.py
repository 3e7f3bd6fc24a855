"""Sidebar entry datatypes shared by the model and pane modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SortMethod(Enum):
    """Ordering applied to sidebar entries before each draw."""

    ORDER = "order"
    COUNT = "count"
    UNREAD = "unread"
    NAME = "alpha"
    FLAGGED = "flagged"
    PATH = "path"


SORT_METHOD_ALIASES: dict[str, SortMethod] = {
    "order": SortMethod.ORDER,
    "unsorted": SortMethod.ORDER,
    "mailbox-order": SortMethod.ORDER,
    "count": SortMethod.COUNT,
    "unread": SortMethod.UNREAD,
    "alpha": SortMethod.NAME,
    "name": SortMethod.NAME,
    "flagged": SortMethod.FLAGGED,
    "path": SortMethod.PATH,
}


@dataclass(frozen=True)
class SortOrder:
    """Sort method plus independent reverse flag."""

    method: SortMethod = SortMethod.ORDER
    reverse: bool = False

    @classmethod
    def parse(cls, value: object) -> SortOrder:
        """Parse names like ``unread`` or ``reverse-count``; unknown names sort by order."""
        if not isinstance(value, str):
            return cls()
        text = value.strip().lower()
        reverse = text.startswith("reverse-")
        if reverse:
            text = text[len("reverse-"):]
        method = SORT_METHOD_ALIASES.get(text)
        if method is None:
            return cls()
        return cls(method, reverse)

    @property
    def name(self) -> str:
        prefix = "reverse-" if self.reverse else ""
        return prefix + self.method.value


class ColorTag(Enum):
    """Semantic colour chosen for a row during render preparation."""

    INDICATOR = "indicator"
    HIGHLIGHT = "highlight"
    NEW = "new"
    UNREAD = "unread"
    FLAGGED = "flagged"
    SPOOLFILE = "spoolfile"
    ORDINARY = "ordinary"


@dataclass(eq=False)
class Entry:
    """One row candidate: a mailbox id plus derived display state.

    Entries compare by identity so cursors can be re-found after sorting.
    """

    mailbox_id: str
    display_text: str = ""
    hidden: bool = False
    color: ColorTag = ColorTag.ORDINARY
