"""Sidebar pane: event sync, row rendering, and the widget surface."""

from .events import (
    AccountEvent,
    ActiveMailboxEvent,
    ColorEvent,
    CommandEvent,
    ConfigEvent,
    MailboxEvent,
    SidebarEvent,
    SidebarEventKind,
)
from .pane import SidebarPane
from .rendering import Divider, DividerStyle, SidebarRenderer, calc_divider, prepare_entries
from .sync import SidebarSync

__all__ = [
    "AccountEvent",
    "ActiveMailboxEvent",
    "ColorEvent",
    "CommandEvent",
    "ConfigEvent",
    "Divider",
    "DividerStyle",
    "MailboxEvent",
    "SidebarEvent",
    "SidebarEventKind",
    "SidebarPane",
    "SidebarRenderer",
    "SidebarSync",
    "calc_divider",
    "prepare_entries",
]
