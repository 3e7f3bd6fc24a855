"""Keep the entry store in step with the mail layer's mailbox notifications.

Mailbox additions append entries, removals compact them before the mailbox
disappears, and active-mailbox changes move the opened cursor. The store's
``dirty`` flag tells the pane a redraw is due; cursors are tidied up by the
next ``calc_page`` pass.
"""

from __future__ import annotations

import logging

from ..mailbox import Mailbox, MailboxRegistry
from ..sidebar_model import EntryStore
from .events import ActiveMailboxEvent, MailboxEvent, SidebarEvent

logger = logging.getLogger(__name__)


class SidebarSync:
    """Apply mailbox events from a ``MailboxRegistry`` to an ``EntryStore``."""

    def __init__(self, registry: MailboxRegistry, store: EntryStore) -> None:
        self.registry = registry
        self.store = store
        self._attached = False

    def attach(self) -> None:
        """Reconcile the store with the registry's mailboxes and start listening.

        Entries for mailboxes that vanished while detached are dropped; ones
        the store already lists are kept in place.
        """
        if self._attached:
            return
        self._attached = True
        known = set(self.registry.ids())
        for entry in list(self.store.entries):
            if entry.mailbox_id not in known:
                self.store.remove(entry.mailbox_id)
        for mailbox in self.registry.all():
            self.notify_mailbox_changed(mailbox.mailbox_id, created=True)
        self.store.set_opened(self.registry.active_id)
        self.registry.subscribe(self._on_mailbox_changed, self._on_active_changed)

    def detach(self) -> None:
        if self._attached:
            self.registry.unsubscribe(self._on_mailbox_changed, self._on_active_changed)
            self._attached = False

    def _on_mailbox_changed(self, mailbox: Mailbox, created: bool) -> None:
        self.handle(MailboxEvent(mailbox.mailbox_id, created))

    def _on_active_changed(self, mailbox: Mailbox | None) -> None:
        self.handle(ActiveMailboxEvent(mailbox.mailbox_id if mailbox is not None else None))

    def handle(self, event: SidebarEvent) -> bool:
        """Apply one event; returns whether the sidebar needs a redraw."""
        if isinstance(event, MailboxEvent):
            return self.notify_mailbox_changed(event.mailbox_id, event.created)
        if isinstance(event, ActiveMailboxEvent):
            self.store.set_opened(event.mailbox_id)
            self.store.state.dirty = True
            return True
        logger.debug("sidebar ignoring %s event", event.kind.value)
        return False

    def notify_mailbox_changed(self, mailbox_id: str, created: bool) -> bool:
        """Add or remove the entry for ``mailbox_id``.

        Removing an unknown mailbox is not an error: the notification may race
        with an earlier removal.
        """
        if created:
            if self.store.state.index_of(mailbox_id) >= 0:
                logger.debug("sidebar already lists %s", mailbox_id)
                return False
            self.store.add(mailbox_id, self.registry.active_id)
            return True
        return self.store.remove(mailbox_id) >= 0
