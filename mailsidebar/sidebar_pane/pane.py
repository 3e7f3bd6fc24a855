"""Sidebar widget surface used by the surrounding window layer."""

from __future__ import annotations

import logging

from ..config import SidebarConfig
from ..mailbox import Mailbox, MailboxRegistry
from ..sidebar_model import (
    EntryStore,
    NavigationCommand,
    ViewState,
    apply_navigation_command,
    calc_page,
)
from ..ui_theme import UITheme
from .events import SidebarEvent
from .rendering import SidebarRenderer, prepare_entries
from .sync import SidebarSync

logger = logging.getLogger(__name__)


class SidebarPane:
    """Mailbox list beside the content view.

    Owns one ``EntryStore`` for its lifetime. Mail-layer notifications mutate
    the store between draws; ``recalc_and_frame`` repairs and frames the
    cursors before anything reads them.
    """

    def __init__(
        self,
        registry: MailboxRegistry,
        config: SidebarConfig | None = None,
        theme: UITheme | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or SidebarConfig()
        self.theme = theme
        self.store = EntryStore()
        self.sync = SidebarSync(registry, self.store)
        self.sync.attach()

    @property
    def state(self) -> ViewState:
        return self.store.state

    @property
    def dirty(self) -> bool:
        return self.store.state.dirty

    def _mailboxes(self) -> dict[str, Mailbox]:
        return {mailbox.mailbox_id: mailbox for mailbox in self.registry.all()}

    def recalc_and_frame(self, page_size: int, config: SidebarConfig | None = None) -> None:
        """Recompute visibility, order and cursors for a page of ``page_size`` rows."""
        if config is not None:
            self.config = config
        cfg = self.config
        calc_page(
            self.store.state,
            page_size,
            self._mailboxes(),
            self.registry.ids(),
            sort=cfg.sort,
            new_mail_only=cfg.new_mail_only,
            non_empty_only=cfg.non_empty_only,
            whitelist=cfg.whitelist,
            active_id=self.registry.active_id,
        )

    def handle_navigation_command(self, command: NavigationCommand | str) -> bool:
        """Move the highlight; returns whether a redraw is warranted."""
        if not self.config.visible:
            return False
        if isinstance(command, str):
            parsed = NavigationCommand.from_name(command)
            if parsed is None:
                logger.debug("unknown sidebar command: %s", command)
                return False
            command = parsed
        # An unset cursor is reset by the next draw.
        if self.store.state.highlighted_index < 0:
            return False
        moved = apply_navigation_command(
            self.store.state,
            command,
            self._mailboxes(),
            wrap=self.config.next_new_wrap,
        )
        if moved:
            self.store.state.dirty = True
        return moved

    def notify_mailbox_changed(self, mailbox_id: str, created: bool) -> bool:
        """Apply an out-of-band mailbox add/remove notification."""
        return self.sync.notify_mailbox_changed(mailbox_id, created)

    def handle_event(self, event: SidebarEvent) -> bool:
        return self.sync.handle(event)

    def current_highlighted_mailbox(self) -> Mailbox | None:
        """Return the highlighted mailbox, or ``None`` when empty or unset."""
        if not self.config.visible:
            return None
        entry = self.store.state.entry_at(self.store.state.highlighted_index)
        if entry is None:
            return None
        return self.registry.get(entry.mailbox_id)

    def draw(self, rows: int, cols: int, config: SidebarConfig | None = None) -> list[str]:
        """Recalculate and render the sidebar as ``rows`` ANSI lines."""
        if config is not None:
            self.config = config
        if not self.config.visible or rows < 1 or cols < 1:
            return []
        renderer = SidebarRenderer(self.config, self.theme)
        self.recalc_and_frame(rows)
        shown = prepare_entries(
            self.store.state,
            self._mailboxes(),
            self.config,
            rows,
            renderer.content_width(cols),
            active_id=self.registry.active_id,
        )
        lines = renderer.render_rows(self.store.state, shown, rows, cols)
        self.store.state.dirty = False
        return lines
