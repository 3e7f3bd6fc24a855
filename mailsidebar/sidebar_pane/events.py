"""Typed notifications delivered to the sidebar.

One payload class per event kind; only the mailbox events change the entry
store, the others are accepted and ignored by the sync adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SidebarEventKind(Enum):
    ACCOUNT = "account"
    COLOR = "color"
    COMMAND = "command"
    CONFIG = "config"
    MAILBOX_ADDED = "mailbox-added"
    MAILBOX_REMOVED = "mailbox-removed"
    MAILBOX_ACTIVATED = "mailbox-activated"


@dataclass(frozen=True)
class AccountEvent:
    account: str
    added: bool
    kind: SidebarEventKind = SidebarEventKind.ACCOUNT


@dataclass(frozen=True)
class ColorEvent:
    color: str
    kind: SidebarEventKind = SidebarEventKind.COLOR


@dataclass(frozen=True)
class CommandEvent:
    command: str
    args: tuple[str, ...] = ()
    kind: SidebarEventKind = SidebarEventKind.COMMAND


@dataclass(frozen=True)
class ConfigEvent:
    name: str
    kind: SidebarEventKind = SidebarEventKind.CONFIG


@dataclass(frozen=True)
class MailboxEvent:
    """A mailbox became known (``created``) or is about to be removed."""

    mailbox_id: str
    created: bool

    @property
    def kind(self) -> SidebarEventKind:
        return SidebarEventKind.MAILBOX_ADDED if self.created else SidebarEventKind.MAILBOX_REMOVED


@dataclass(frozen=True)
class ActiveMailboxEvent:
    """The content view switched to ``mailbox_id`` (``None`` when closed)."""

    mailbox_id: str | None
    kind: SidebarEventKind = SidebarEventKind.MAILBOX_ACTIVATED


SidebarEvent = AccountEvent | ColorEvent | CommandEvent | ConfigEvent | MailboxEvent | ActiveMailboxEvent
