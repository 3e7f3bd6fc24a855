"""Highlight-cursor movement over sidebar entries.

Each ``select_*`` helper moves ``state.highlighted_index`` and returns whether
it moved; a ``False`` result leaves the cursor where it was.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum

from ..mailbox import Mailbox
from .store import ViewState


class NavigationCommand(Enum):
    """Keyboard-level sidebar commands."""

    NEXT = "next"
    PREV = "prev"
    NEXT_NEW = "next-new"
    PREV_NEW = "prev-new"
    PAGE_DOWN = "page-down"
    PAGE_UP = "page-up"
    FIRST = "first"
    LAST = "last"

    @classmethod
    def from_name(cls, name: str) -> NavigationCommand | None:
        """Parse ``next-new``/``next_new``/``sidebar-next-new`` style names."""
        text = name.strip().lower().replace("_", "-")
        if text.startswith("sidebar-"):
            text = text[len("sidebar-"):]
        try:
            return cls(text)
        except ValueError:
            return None


def _has_cursor(state: ViewState) -> bool:
    return state.count > 0 and 0 <= state.highlighted_index < state.count


def select_next(state: ViewState) -> bool:
    """Move to the next unhidden entry."""
    if not _has_cursor(state):
        return False
    idx = state.highlighted_index + 1
    while idx < state.count:
        if not state.entries[idx].hidden:
            state.highlighted_index = idx
            return True
        idx += 1
    return False


def select_prev(state: ViewState) -> bool:
    """Move to the previous unhidden entry."""
    if not _has_cursor(state):
        return False
    idx = state.highlighted_index - 1
    while idx >= 0:
        if not state.entries[idx].hidden:
            state.highlighted_index = idx
            return True
        idx -= 1
    return False


def _has_new_mail(mailboxes: Mapping[str, Mailbox]) -> Callable[[int, ViewState], bool]:
    def check(idx: int, state: ViewState) -> bool:
        mailbox = mailboxes.get(state.entries[idx].mailbox_id)
        if mailbox is None:
            return False
        return mailbox.has_new or mailbox.msg_unread > 0

    return check


def _select_new(state: ViewState, mailboxes: Mapping[str, Mailbox], step: int, wrap: bool) -> bool:
    if not _has_cursor(state):
        return False
    qualifies = _has_new_mail(mailboxes)
    start = state.highlighted_index
    idx = start
    while True:
        idx += step
        if idx >= state.count or idx < 0:
            if not wrap:
                return False
            idx = 0 if step > 0 else state.count - 1
        if idx == start:
            return False
        if qualifies(idx, state):
            state.highlighted_index = idx
            return True


def select_next_new(state: ViewState, mailboxes: Mapping[str, Mailbox], wrap: bool = False) -> bool:
    """Move down to the next mailbox with new or unread mail."""
    return _select_new(state, mailboxes, 1, wrap)


def select_prev_new(state: ViewState, mailboxes: Mapping[str, Mailbox], wrap: bool = False) -> bool:
    """Move up to the previous mailbox with new or unread mail."""
    return _select_new(state, mailboxes, -1, wrap)


def select_page_down(state: ViewState) -> bool:
    """Move to the first entry of the next page."""
    if state.count == 0 or state.bottom_index < 0:
        return False
    orig = state.highlighted_index
    state.highlighted_index = min(state.bottom_index, state.count - 1)
    select_next(state)
    # Everything after this page is hidden: settle on the last visible entry.
    if state.entries[state.highlighted_index].hidden:
        select_prev(state)
    return orig != state.highlighted_index


def select_page_up(state: ViewState) -> bool:
    """Move to the last entry of the previous page."""
    if state.count == 0 or state.top_index < 0:
        return False
    orig = state.highlighted_index
    state.highlighted_index = min(state.top_index, state.count - 1)
    select_prev(state)
    if state.entries[state.highlighted_index].hidden:
        select_next(state)
    return orig != state.highlighted_index


def select_first(state: ViewState) -> bool:
    """Move to the first unhidden entry."""
    if not _has_cursor(state):
        return False
    orig = state.highlighted_index
    state.highlighted_index = 0
    if state.entries[0].hidden and not select_next(state):
        state.highlighted_index = orig
    return orig != state.highlighted_index


def select_last(state: ViewState) -> bool:
    """Move to the last unhidden entry."""
    if not _has_cursor(state):
        return False
    orig = state.highlighted_index
    state.highlighted_index = state.count - 1
    if state.entries[state.highlighted_index].hidden and not select_prev(state):
        state.highlighted_index = orig
    return orig != state.highlighted_index


def apply_navigation_command(
    state: ViewState,
    command: NavigationCommand,
    mailboxes: Mapping[str, Mailbox],
    *,
    wrap: bool = False,
) -> bool:
    """Run one navigation command; ``True`` means the highlight moved."""
    if command is NavigationCommand.NEXT:
        return select_next(state)
    if command is NavigationCommand.PREV:
        return select_prev(state)
    if command is NavigationCommand.NEXT_NEW:
        return select_next_new(state, mailboxes, wrap)
    if command is NavigationCommand.PREV_NEW:
        return select_prev_new(state, mailboxes, wrap)
    if command is NavigationCommand.PAGE_DOWN:
        return select_page_down(state)
    if command is NavigationCommand.PAGE_UP:
        return select_page_up(state)
    if command is NavigationCommand.FIRST:
        return select_first(state)
    if command is NavigationCommand.LAST:
        return select_last(state)
    return False
