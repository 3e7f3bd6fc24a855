"""Public package surface for mailsidebar.

Exports the sidebar pane and its collaborators; ``main`` runs the CLI.
Most implementation lives in ``sidebar_model`` and ``sidebar_pane``.
"""

from __future__ import annotations

from .config import SidebarConfig
from .mailbox import Mailbox, MailboxKind, MailboxRegistry
from .sidebar_model import NavigationCommand, SortMethod, SortOrder
from .sidebar_pane import SidebarPane


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Mailbox",
    "MailboxKind",
    "MailboxRegistry",
    "NavigationCommand",
    "SidebarConfig",
    "SidebarPane",
    "SortMethod",
    "SortOrder",
    "main",
]
