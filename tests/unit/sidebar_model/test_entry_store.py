"""Tests for entry-store mutation and cursor repair.

Covers appends growing capacity in fixed steps, removals compacting entries,
and the opened/page/highlight cursor adjustments each mutation makes.
"""

from __future__ import annotations

import unittest

from mailsidebar.sidebar_model import ENTRY_CAPACITY_STEP, EntryStore


def _store(count: int, active_id: str | None = None) -> EntryStore:
    store = EntryStore()
    for idx in range(count):
        store.add(f"/mail/box{idx}", active_id)
    return store


def _cursors(store: EntryStore) -> tuple[int, int, int, int]:
    state = store.state
    return (state.top_index, state.bottom_index, state.opened_index, state.highlighted_index)


class EntryStoreAddTests(unittest.TestCase):
    def test_first_add_sets_page_cursors(self) -> None:
        store = EntryStore()
        self.assertEqual(_cursors(store), (-1, -1, -1, -1))

        idx = store.add("/mail/inbox")

        self.assertEqual(idx, 0)
        self.assertEqual(store.state.top_index, 0)
        self.assertEqual(store.state.bottom_index, 0)
        self.assertEqual(store.state.highlighted_index, -1)
        self.assertTrue(store.state.dirty)

    def test_add_sets_opened_only_for_active_mailbox(self) -> None:
        store = EntryStore()
        store.add("/mail/a", active_id="/mail/b")
        self.assertEqual(store.state.opened_index, -1)

        store.add("/mail/b", active_id="/mail/b")
        self.assertEqual(store.state.opened_index, 1)

        store.add("/mail/c", active_id="/mail/c")
        self.assertEqual(store.state.opened_index, 1)

    def test_add_at_capacity_grows_by_fixed_step_without_moving_entries(self) -> None:
        store = _store(ENTRY_CAPACITY_STEP)
        self.assertEqual(store.state.capacity, ENTRY_CAPACITY_STEP)
        self.assertEqual(store.count, store.state.capacity)
        store.state.highlighted_index = 7
        before = [entry.mailbox_id for entry in store.entries]

        idx = store.add("/mail/extra")

        self.assertEqual(idx, ENTRY_CAPACITY_STEP)
        self.assertEqual(store.state.capacity, 2 * ENTRY_CAPACITY_STEP)
        self.assertEqual([entry.mailbox_id for entry in store.entries[:-1]], before)
        self.assertEqual(store.state.highlighted_index, 7)
        self.assertEqual(store.state.top_index, 0)


class EntryStoreRemoveTests(unittest.TestCase):
    def test_remove_unknown_mailbox_is_noop(self) -> None:
        store = _store(3)
        store.state.dirty = False

        self.assertEqual(store.remove("/mail/missing"), -1)
        self.assertEqual(store.count, 3)
        self.assertFalse(store.state.dirty)

    def test_removing_opened_entry_clears_opened_and_shifts_later_entries(self) -> None:
        store = _store(7)
        store.state.opened_index = 2

        removed = store.remove("/mail/box2")

        self.assertEqual(removed, 2)
        self.assertEqual(store.state.opened_index, -1)
        self.assertEqual(store.entries[4].mailbox_id, "/mail/box5")
        self.assertEqual(store.count, 6)

    def test_cursors_after_removed_slot_decrement(self) -> None:
        store = _store(8)
        state = store.state
        state.top_index, state.bottom_index = 0, 7
        state.opened_index, state.highlighted_index = 5, 6

        store.remove("/mail/box1")

        self.assertEqual(_cursors(store), (0, 6, 4, 5))

    def test_cursor_on_removed_slot_keeps_index_of_entry_that_slid_in(self) -> None:
        store = _store(6)
        store.state.highlighted_index = 3

        store.remove("/mail/box3")

        self.assertEqual(store.state.highlighted_index, 3)
        self.assertEqual(store.entries[3].mailbox_id, "/mail/box4")

    def test_cursor_on_removed_last_slot_moves_to_new_last(self) -> None:
        store = _store(6)
        state = store.state
        state.top_index, state.bottom_index, state.highlighted_index = 5, 5, 5

        store.remove("/mail/box5")

        self.assertEqual((state.top_index, state.bottom_index, state.highlighted_index), (4, 4, 4))

    def test_removing_only_entry_unsets_cursors(self) -> None:
        store = _store(1)
        store.state.highlighted_index = 0

        store.remove("/mail/box0")

        self.assertEqual(_cursors(store), (-1, -1, -1, -1))

    def test_cursors_stay_in_range_through_repeated_removals(self) -> None:
        store = _store(9)
        state = store.state
        state.top_index, state.bottom_index = 3, 8
        state.opened_index, state.highlighted_index = 8, 4

        for idx in (8, 0, 4, 7, 2, 1, 6, 3, 5):
            store.remove(f"/mail/box{idx}")
            for cursor in _cursors(store):
                self.assertTrue(cursor == -1 or 0 <= cursor < store.count)

        self.assertEqual(store.count, 0)


class EntryStoreRoundTripTests(unittest.TestCase):
    def test_add_then_remove_restores_count_and_cursors(self) -> None:
        store = _store(4, active_id="/mail/box2")
        state = store.state
        state.top_index, state.bottom_index, state.highlighted_index = 0, 3, 1
        before = _cursors(store)

        store.add("/mail/new", active_id="/mail/box2")
        store.remove("/mail/new")

        self.assertEqual(store.count, 4)
        self.assertEqual(_cursors(store), before)

    def test_add_then_remove_on_empty_store_restores_unset_cursors(self) -> None:
        store = EntryStore()

        store.add("/mail/new")
        store.remove("/mail/new")

        self.assertEqual(store.count, 0)
        self.assertEqual(_cursors(store), (-1, -1, -1, -1))


if __name__ == "__main__":
    unittest.main()
