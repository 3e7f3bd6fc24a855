"""Per-entry hidden/shown decisions for the sidebar filters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from fnmatch import fnmatchcase

from ..mailbox import Mailbox
from .types import Entry


def is_whitelisted(mailbox: Mailbox, whitelist: Iterable[str]) -> bool:
    """Return whether the mailbox path or name matches any whitelist pattern."""
    candidates = [mailbox.path]
    if mailbox.name:
        candidates.append(mailbox.name)
    for pattern in whitelist:
        if not pattern:
            continue
        for candidate in candidates:
            if candidate == pattern or fnmatchcase(candidate, pattern):
                return True
    return False


def should_hide(
    mailbox: Mailbox,
    *,
    new_mail_only: bool,
    non_empty_only: bool,
    active_id: str | None,
    whitelist: Iterable[str] = (),
) -> bool:
    """Decide whether one mailbox is filtered out of the sidebar."""
    if not new_mail_only and not non_empty_only:
        return False
    if active_id is not None and mailbox.mailbox_id == active_id:
        return False
    if is_whitelisted(mailbox, whitelist):
        return False
    if non_empty_only and mailbox.msg_count == 0:
        return True
    if new_mail_only and mailbox.msg_unread == 0 and mailbox.msg_flagged == 0 and not mailbox.has_new:
        return True
    return False


def update_entries_visibility(
    entries: list[Entry],
    mailboxes: Mapping[str, Mailbox],
    *,
    new_mail_only: bool,
    non_empty_only: bool,
    active_id: str | None,
    whitelist: Iterable[str] = (),
    opened: Entry | None = None,
) -> None:
    """Recompute ``hidden`` for every entry; nothing carries over between passes."""
    if not new_mail_only and not non_empty_only:
        for entry in entries:
            entry.hidden = False
        return

    patterns = tuple(whitelist)
    for entry in entries:
        mailbox = mailboxes.get(entry.mailbox_id)
        if mailbox is None:
            entry.hidden = True
            continue
        if entry is opened:
            entry.hidden = False
            continue
        entry.hidden = should_hide(
            mailbox,
            new_mail_only=new_mail_only,
            non_empty_only=non_empty_only,
            active_id=active_id,
            whitelist=patterns,
        )
