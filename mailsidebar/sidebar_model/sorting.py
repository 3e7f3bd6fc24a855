"""Entry ordering: comparator strategies and insertion-order reconciliation."""

from __future__ import annotations

import locale
from collections.abc import Callable, Mapping, Sequence
from functools import cmp_to_key

from ..mailbox import Mailbox
from ..path_display import inbox_compare
from .types import Entry, SortMethod, SortOrder

Comparator = Callable[[Mailbox, Mailbox], int]


def _collate(a: str, b: str) -> int:
    """Three-way string comparison in the current locale's collation order."""
    rc = locale.strcoll(a, b)
    if rc:
        return -1 if rc < 0 else 1
    return (a > b) - (a < b)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _numeric_descending(field: str) -> Comparator:
    def compare(m1: Mailbox, m2: Mailbox) -> int:
        v1 = getattr(m1, field)
        v2 = getattr(m2, field)
        if v1 == v2:
            return _collate(m1.path, m2.path)
        return _sign(v2 - v1)

    return compare


def compare_by_name(m1: Mailbox, m2: Mailbox) -> int:
    n1 = m1.name or ""
    n2 = m2.name or ""
    return (n1 > n2) - (n1 < n2)


def compare_by_path(m1: Mailbox, m2: Mailbox) -> int:
    return _collate(m1.path, m2.path)


COMPARATORS: dict[SortMethod, Comparator] = {
    SortMethod.COUNT: _numeric_descending("msg_count"),
    SortMethod.UNREAD: _numeric_descending("msg_unread"),
    SortMethod.FLAGGED: _numeric_descending("msg_flagged"),
    SortMethod.NAME: compare_by_name,
    SortMethod.PATH: compare_by_path,
}


def entry_sort_key(order: SortOrder, mailboxes: Mapping[str, Mailbox]) -> Callable[[Entry], object]:
    """Return a ``sort`` key function for ``order`` over resolved entries.

    Path ordering puts an inbox ahead of its siblings whatever the reverse
    flag says; every other comparison is negated when ``order.reverse``.
    """
    compare = COMPARATORS[order.method]
    sign = -1 if order.reverse else 1

    def compare_entries(e1: Entry, e2: Entry) -> int:
        m1 = mailboxes.get(e1.mailbox_id)
        m2 = mailboxes.get(e2.mailbox_id)
        if m1 is None or m2 is None:
            # Unresolvable entries sink to the end.
            return (m1 is None) - (m2 is None)
        if order.method is SortMethod.PATH:
            rc = inbox_compare(m1.path, m2.path)
            if rc:
                return rc
        return sign * compare(m1, m2)

    return cmp_to_key(compare_entries)


def sort_entries(entries: list[Entry], order: SortOrder, mailboxes: Mapping[str, Mailbox]) -> None:
    """Sort ``entries`` in place; insertion order leaves them untouched."""
    if order.method is SortMethod.ORDER:
        return
    entries.sort(key=entry_sort_key(order, mailboxes))


def unsort_entries(entries: list[Entry], external_order: Sequence[str]) -> None:
    """Permute ``entries`` in place to follow the mail layer's enumeration order.

    Walks the external ids with a cursor into ``entries``: each id found at or
    after the cursor is swapped into place and the cursor advances. Entries
    the external list no longer knows stay at the end.
    """
    i = 0
    count = len(entries)
    for mailbox_id in external_order:
        if i >= count:
            break
        j = i
        while j < count and entries[j].mailbox_id != mailbox_id:
            j += 1
        if j < count:
            if j != i:
                entries[i], entries[j] = entries[j], entries[i]
            i += 1
