"""Entry collection and the four sidebar cursors.

``EntryStore`` keeps entries in external enumeration order until a sort pass
permutes them. Appends never move existing entries; removals compact the list
and shift every cursor that pointed past the removed slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .types import Entry, SortOrder

logger = logging.getLogger(__name__)

ENTRY_CAPACITY_STEP = 10


@dataclass
class ViewState:
    """Entries plus page/opened/highlighted cursors; ``-1`` means unset."""

    entries: list[Entry] = field(default_factory=list)
    top_index: int = -1
    bottom_index: int = -1
    opened_index: int = -1
    highlighted_index: int = -1
    last_sort: SortOrder | None = None
    # Nominal slot count, grown in ENTRY_CAPACITY_STEP steps; entries never preallocate.
    capacity: int = 0
    dirty: bool = True

    @property
    def count(self) -> int:
        return len(self.entries)

    def entry_at(self, idx: int) -> Entry | None:
        if 0 <= idx < len(self.entries):
            return self.entries[idx]
        return None

    def index_of(self, mailbox_id: str) -> int:
        for idx, entry in enumerate(self.entries):
            if entry.mailbox_id == mailbox_id:
                return idx
        return -1


class EntryStore:
    """Owns the ``ViewState`` and applies mailbox add/remove to it."""

    def __init__(self, state: ViewState | None = None) -> None:
        self.state = state if state is not None else ViewState()

    @property
    def entries(self) -> list[Entry]:
        return self.state.entries

    @property
    def count(self) -> int:
        return self.state.count

    def add(self, mailbox_id: str, active_id: str | None = None) -> int:
        """Append an entry for ``mailbox_id`` and return its index.

        Unset page cursors adopt the new entry; the opened cursor does too when
        the mailbox is the active one and nothing is opened yet.
        """
        state = self.state
        if state.count >= state.capacity:
            state.capacity += ENTRY_CAPACITY_STEP
        idx = state.count
        state.entries.append(Entry(mailbox_id))

        if state.top_index < 0:
            state.top_index = idx
        if state.bottom_index < 0:
            state.bottom_index = idx
        if state.opened_index < 0 and active_id is not None and mailbox_id == active_id:
            state.opened_index = idx

        state.dirty = True
        logger.debug("sidebar entry added at %d: %s", idx, mailbox_id)
        return idx

    def remove(self, mailbox_id: str) -> int:
        """Delete the entry for ``mailbox_id`` and repair cursors.

        Returns the removed index, or ``-1`` when the mailbox was not present.
        A cursor on the removed slot keeps its index (now the entry that slid
        into it) unless that was the last slot; the opened cursor is cleared.
        """
        state = self.state
        del_index = state.index_of(mailbox_id)
        if del_index < 0:
            return -1

        del state.entries[del_index]
        new_count = state.count

        def shifted(cursor: int) -> int:
            if cursor > del_index or cursor == new_count:
                return cursor - 1
            return cursor

        state.top_index = shifted(state.top_index)
        state.bottom_index = shifted(state.bottom_index)
        state.highlighted_index = shifted(state.highlighted_index)
        if state.opened_index == del_index:
            state.opened_index = -1
        elif state.opened_index > del_index:
            state.opened_index -= 1

        state.dirty = True
        logger.debug("sidebar entry removed at %d: %s", del_index, mailbox_id)
        return del_index

    def set_opened(self, mailbox_id: str | None) -> None:
        """Point the opened cursor at ``mailbox_id`` (or clear it)."""
        idx = self.state.index_of(mailbox_id) if mailbox_id is not None else -1
        if idx != self.state.opened_index:
            self.state.opened_index = idx
            self.state.dirty = True
