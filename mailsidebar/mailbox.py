"""Mailbox records and the registry that owns them.

The sidebar never owns mailbox state: entries hold a mailbox id (its path)
and resolve it through a ``MailboxRegistry`` on every pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class MailboxKind(Enum):
    """Storage backend of a mailbox, used when abbreviating its path."""

    MBOX = "mbox"
    MAILDIR = "maildir"
    MH = "mh"
    IMAP = "imap"
    POP = "pop"
    NNTP = "nntp"
    NOTMUCH = "notmuch"

    @classmethod
    def from_name(cls, name: object) -> MailboxKind:
        """Parse a backend name, falling back to ``MAILDIR`` when unknown."""
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        return cls.MAILDIR

    @classmethod
    def guess(cls, path: str) -> MailboxKind:
        """Infer the backend from a URL scheme such as ``imaps://``."""
        scheme, sep, _rest = path.partition("://")
        if not sep:
            return cls.MAILDIR
        scheme = scheme.lower()
        if scheme in {"news", "snews"}:
            return cls.NNTP
        scheme = scheme.removesuffix("s")
        if scheme in {"imap", "pop", "nntp", "notmuch"}:
            return cls(scheme)
        return cls.MAILDIR


@dataclass
class Mailbox:
    """Live counters for one mailbox, owned by the mail layer."""

    path: str
    name: str | None = None
    kind: MailboxKind = MailboxKind.MAILDIR
    msg_count: int = 0
    msg_unread: int = 0
    msg_flagged: int = 0
    msg_new: int = 0
    msg_deleted: int = 0
    msg_tagged: int = 0
    vcount: int | None = None
    has_new: bool = False

    @property
    def mailbox_id(self) -> str:
        return self.path

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Mailbox:
        """Build a mailbox from a JSON object; unknown or bad fields are ignored."""
        path = data.get("path")
        if not isinstance(path, str) or not path:
            raise ValueError("mailbox entry needs a non-empty 'path'")

        def count(key: str) -> int:
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int):
                return 0
            return max(0, value)

        name = data.get("name")
        vcount = data.get("vcount")
        kind = data.get("kind")
        return cls(
            path=path,
            name=name if isinstance(name, str) and name else None,
            kind=MailboxKind.from_name(kind) if kind is not None else MailboxKind.guess(path),
            msg_count=count("msg_count"),
            msg_unread=count("msg_unread"),
            msg_flagged=count("msg_flagged"),
            msg_new=count("msg_new"),
            msg_deleted=count("msg_deleted"),
            msg_tagged=count("msg_tagged"),
            vcount=vcount if isinstance(vcount, int) and not isinstance(vcount, bool) else None,
            has_new=bool(data.get("has_new", False)),
        )


MailboxListener = Callable[[Mailbox, bool], None]
ActiveListener = Callable[["Mailbox | None"], None]


class MailboxRegistry:
    """Ordered collection of known mailboxes plus the active one.

    Listeners registered with :meth:`subscribe` hear about a mailbox *after*
    it is added and *before* it is removed, so they can still look it up.
    """

    def __init__(self, mailboxes: list[Mailbox] | None = None) -> None:
        self._mailboxes: dict[str, Mailbox] = {}
        self._active_id: str | None = None
        self._listeners: list[MailboxListener] = []
        self._active_listeners: list[ActiveListener] = []
        for mailbox in mailboxes or []:
            self._mailboxes[mailbox.mailbox_id] = mailbox

    def __len__(self) -> int:
        return len(self._mailboxes)

    def __iter__(self) -> Iterator[Mailbox]:
        return iter(list(self._mailboxes.values()))

    def __contains__(self, mailbox_id: object) -> bool:
        return mailbox_id in self._mailboxes

    def all(self) -> list[Mailbox]:
        """Return mailboxes in their authoritative enumeration order."""
        return list(self._mailboxes.values())

    def ids(self) -> list[str]:
        return list(self._mailboxes.keys())

    def get(self, mailbox_id: str | None) -> Mailbox | None:
        if mailbox_id is None:
            return None
        return self._mailboxes.get(mailbox_id)

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def active(self) -> Mailbox | None:
        return self.get(self._active_id)

    def subscribe(
        self,
        on_change: MailboxListener,
        on_active: ActiveListener | None = None,
    ) -> None:
        """Register callbacks for add/remove and active-mailbox changes."""
        self._listeners.append(on_change)
        if on_active is not None:
            self._active_listeners.append(on_active)

    def unsubscribe(
        self,
        on_change: MailboxListener,
        on_active: ActiveListener | None = None,
    ) -> None:
        if on_change in self._listeners:
            self._listeners.remove(on_change)
        if on_active is not None and on_active in self._active_listeners:
            self._active_listeners.remove(on_active)

    def add(self, mailbox: Mailbox) -> bool:
        """Register a new mailbox; re-adding a known id is ignored."""
        if mailbox.mailbox_id in self._mailboxes:
            return False
        self._mailboxes[mailbox.mailbox_id] = mailbox
        logger.debug("mailbox added: %s", mailbox.mailbox_id)
        for listener in list(self._listeners):
            listener(mailbox, True)
        return True

    def remove(self, mailbox_id: str) -> Mailbox | None:
        mailbox = self._mailboxes.get(mailbox_id)
        if mailbox is None:
            return None
        for listener in list(self._listeners):
            listener(mailbox, False)
        del self._mailboxes[mailbox_id]
        if self._active_id == mailbox_id:
            self.set_active(None)
        logger.debug("mailbox removed: %s", mailbox_id)
        return mailbox

    def set_active(self, mailbox_id: str | None) -> None:
        """Mark ``mailbox_id`` as the one shown in the content view."""
        if mailbox_id is not None and mailbox_id not in self._mailboxes:
            mailbox_id = None
        if mailbox_id == self._active_id:
            return
        self._active_id = mailbox_id
        active = self.active
        for listener in list(self._active_listeners):
            listener(active)
