"""Sidebar list model: entries, cursors, filtering, sorting, paging, navigation.

Defines ``Entry`` and ``EntryStore`` plus the per-draw ``calc_page`` pass.
Nothing here draws; it only keeps indices consistent for the pane.
"""

from __future__ import annotations

from .navigation import (
    NavigationCommand,
    apply_navigation_command,
    select_first,
    select_last,
    select_next,
    select_next_new,
    select_page_down,
    select_page_up,
    select_prev,
    select_prev_new,
)
from .paging import calc_page, frame_page
from .sorting import entry_sort_key, sort_entries, unsort_entries
from .store import ENTRY_CAPACITY_STEP, EntryStore, ViewState
from .types import ColorTag, Entry, SortMethod, SortOrder
from .visibility import is_whitelisted, should_hide, update_entries_visibility

__all__ = [
    "ColorTag",
    "Entry",
    "EntryStore",
    "ENTRY_CAPACITY_STEP",
    "NavigationCommand",
    "SortMethod",
    "SortOrder",
    "ViewState",
    "apply_navigation_command",
    "calc_page",
    "entry_sort_key",
    "frame_page",
    "is_whitelisted",
    "select_first",
    "select_last",
    "select_next",
    "select_next_new",
    "select_page_down",
    "select_page_up",
    "select_prev",
    "select_prev_new",
    "should_hide",
    "sort_entries",
    "unsort_entries",
    "update_entries_visibility",
]
