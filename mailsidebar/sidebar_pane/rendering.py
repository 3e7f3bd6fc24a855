"""Sidebar row preparation and painting.

``prepare_entries`` picks each framed row's colour and rebuilds its text;
``SidebarRenderer`` turns that into exactly ``rows`` ANSI strings, each
``cols`` cells wide, with the divider on the inner edge.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from ..ansi import display_width
from ..config import SidebarConfig
from ..entry_format import FormatContext, format_entry
from ..mailbox import Mailbox
from ..path_display import sidebar_label
from ..sidebar_model import ColorTag, ViewState
from ..ui_theme import DEFAULT_THEME, UITheme

UTF8_DIVIDER = "│"
ASCII_DIVIDER = "|"


class DividerStyle(Enum):
    USER = "user"
    ASCII = "ascii"
    UTF8 = "utf8"


@dataclass(frozen=True)
class Divider:
    style: DividerStyle
    width: int
    text: str


def calc_divider(divider_char: str | None, ascii_chars: bool = False) -> Divider:
    """Work out the divider glyph and its width in cells.

    Unset, empty or unprintable settings fall back to a single line character;
    ``ascii_chars`` turns that, or a non-ASCII user string, into ``|``.
    """
    width = display_width(divider_char)
    if width <= 0:
        if ascii_chars:
            return Divider(DividerStyle.ASCII, 1, ASCII_DIVIDER)
        return Divider(DividerStyle.UTF8, 1, UTF8_DIVIDER)
    if ascii_chars and not divider_char.isascii():
        return Divider(DividerStyle.ASCII, 1, ASCII_DIVIDER)
    return Divider(DividerStyle.USER, width, divider_char)


def color_for_entry(
    idx: int,
    state: ViewState,
    mailbox: Mailbox,
    spoolfile: str | None,
) -> ColorTag:
    if idx == state.opened_index:
        return ColorTag.INDICATOR
    if idx == state.highlighted_index:
        return ColorTag.HIGHLIGHT
    if mailbox.has_new:
        return ColorTag.NEW
    if mailbox.msg_unread > 0:
        return ColorTag.UNREAD
    if mailbox.msg_flagged > 0:
        return ColorTag.FLAGGED
    if spoolfile and mailbox.path == spoolfile:
        return ColorTag.SPOOLFILE
    return ColorTag.ORDINARY


def prepare_entries(
    state: ViewState,
    mailboxes: Mapping[str, Mailbox],
    config: SidebarConfig,
    rows: int,
    width: int,
    active_id: str | None = None,
) -> list[int]:
    """Refresh colour and text of the visible rows; returns their entry indices."""
    shown: list[int] = []
    if state.top_index < 0:
        return shown

    idx = state.top_index
    while idx < state.count and len(shown) < rows:
        entry = state.entries[idx]
        mailbox = mailboxes.get(entry.mailbox_id)
        if entry.hidden or mailbox is None:
            idx += 1
            continue

        entry.color = color_for_entry(idx, state, mailbox, config.spoolfile)
        label = sidebar_label(
            mailbox.path,
            mailbox.name,
            mailbox.kind,
            folder=config.folder,
            delim_chars=config.delim_chars,
            short_path=config.short_path,
            folder_indent=config.folder_indent,
            indent_string=config.indent_string,
            component_depth=config.component_depth,
        )
        ctx = FormatContext(box=label, mailbox=mailbox, is_active=mailbox.mailbox_id == active_id)
        entry.display_text = format_entry(config.format, ctx, width)
        shown.append(idx)
        idx += 1
    return shown


class SidebarRenderer:
    """Paint prepared rows, blank filler, and the divider."""

    def __init__(self, config: SidebarConfig, theme: UITheme | None = None) -> None:
        self.config = config
        self.theme = theme or DEFAULT_THEME
        self.divider = calc_divider(config.divider_char, config.ascii_chars)

    def content_width(self, cols: int) -> int:
        return max(0, min(cols, self.config.width) - self.divider.width)

    def _paint(self, style: str, text: str) -> str:
        if not style:
            return text
        return f"{style}{text}{self.theme.reset}"

    def render_rows(self, state: ViewState, shown: list[int], rows: int, cols: int) -> list[str]:
        """Return ``rows`` lines for the sidebar region ``cols`` cells wide."""
        theme = self.theme
        width = self.content_width(cols)
        show_divider = self.divider.width <= min(cols, self.config.width)
        divider = self._paint(theme.divider, self.divider.text) if show_divider else ""
        blank = self._paint(theme.normal, " " * width)

        lines: list[str] = []
        for row in range(rows):
            if row < len(shown):
                entry = state.entries[shown[row]]
                body = self._paint(theme.color_for(entry.color), entry.display_text)
            else:
                body = blank
            if self.config.on_right:
                lines.append(divider + body)
            else:
                lines.append(body + divider)
        return lines
