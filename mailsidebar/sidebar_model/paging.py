"""Per-draw recalculation: visibility, sorting, cursor repair, page framing.

Mailbox counters change outside the sidebar, so nothing here is cached
between passes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from ..mailbox import Mailbox
from .navigation import select_next
from .sorting import sort_entries, unsort_entries
from .store import ViewState
from .types import SortMethod, SortOrder
from .visibility import update_entries_visibility

logger = logging.getLogger(__name__)


def frame_page(state: ViewState, page_size: int, filtered: bool) -> None:
    """Set ``top_index``/``bottom_index`` to the page holding the highlight.

    Without filters pages are fixed blocks of ``page_size`` rows. With filters
    hidden entries take no room, so page boundaries are found by scanning until
    a page of ``page_size`` unhidden entries covers the highlighted index.
    """
    count = state.count
    hil = max(0, state.highlighted_index)
    if filtered:
        top = -1
        bottom = -1
        while bottom < hil:
            top = bottom + 1
            page_entries = 0
            while page_entries < page_size:
                bottom += 1
                if bottom >= count:
                    break
                if not state.entries[bottom].hidden:
                    page_entries += 1
            if bottom >= count:
                break
    else:
        top = (hil // page_size) * page_size
        bottom = top + page_size - 1

    state.top_index = top
    state.bottom_index = min(bottom, count - 1)


def calc_page(
    state: ViewState,
    page_size: int,
    mailboxes: Mapping[str, Mailbox],
    external_order: Sequence[str],
    *,
    sort: SortOrder,
    new_mail_only: bool = False,
    non_empty_only: bool = False,
    whitelist: Iterable[str] = (),
    active_id: str | None = None,
) -> None:
    """Prepare ``state`` for drawing ``page_size`` rows; safe to call repeatedly."""
    if page_size <= 0:
        return

    entries = state.entries
    opened = state.entry_at(state.opened_index)
    highlighted = state.entry_at(state.highlighted_index)

    update_entries_visibility(
        entries,
        mailboxes,
        new_mail_only=new_mail_only,
        non_empty_only=non_empty_only,
        active_id=active_id,
        whitelist=whitelist,
        opened=opened,
    )

    sort_changed = sort != state.last_sort
    if sort.method is SortMethod.ORDER:
        if sort_changed:
            unsort_entries(entries, external_order)
    else:
        sort_entries(entries, sort, mailboxes)

    state.opened_index = -1
    state.highlighted_index = -1
    for idx, entry in enumerate(entries):
        if entry is opened:
            state.opened_index = idx
        if entry is highlighted:
            state.highlighted_index = idx

    # The opened cursor follows the active mailbox, not a stale entry.
    opened_entry = state.entry_at(state.opened_index)
    if opened_entry is None or opened_entry.mailbox_id != active_id:
        state.opened_index = state.index_of(active_id) if active_id is not None else -1

    if not entries:
        state.top_index = -1
        state.bottom_index = -1
        state.last_sort = sort
        return

    hil_entry = state.entry_at(state.highlighted_index)
    if hil_entry is None or hil_entry.hidden or sort_changed:
        if state.opened_index >= 0:
            state.highlighted_index = state.opened_index
        else:
            state.highlighted_index = 0
            if entries[0].hidden:
                select_next(state)

    frame_page(state, page_size, filtered=new_mail_only or non_empty_only)
    state.last_sort = sort
    logger.debug(
        "sidebar page: top=%d bottom=%d opened=%d highlighted=%d",
        state.top_index,
        state.bottom_index,
        state.opened_index,
        state.highlighted_index,
    )
