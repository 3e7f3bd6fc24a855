"""Sidebar colour palettes and selection helpers.

A theme maps each ``ColorTag`` chosen during render preparation to an ANSI
sequence, plus the divider and blank-fill styles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .sidebar_model.types import ColorTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the sidebar renderer."""

    name: str
    reset: str
    normal: str
    divider: str
    indicator: str
    highlight: str
    new: str
    unread: str
    flagged: str
    spoolfile: str
    ordinary: str

    def color_for(self, tag: ColorTag) -> str:
        return {
            ColorTag.INDICATOR: self.indicator,
            ColorTag.HIGHLIGHT: self.highlight,
            ColorTag.NEW: self.new,
            ColorTag.UNREAD: self.unread,
            ColorTag.FLAGGED: self.flagged,
            ColorTag.SPOOLFILE: self.spoolfile,
            ColorTag.ORDINARY: self.ordinary,
        }[tag]


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    normal="",
    divider="\033[2m",
    indicator="\033[7m",
    highlight="\033[1;38;5;81m",
    new="\033[1;38;5;214m",
    unread="\033[1;38;5;252m",
    flagged="\033[38;5;203m",
    spoolfile="\033[38;5;110m",
    ordinary="\033[38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    normal="",
    divider="\033[2;38;5;31m",
    indicator="\033[7;38;5;45m",
    highlight="\033[1;38;5;45m",
    new="\033[1;38;5;215m",
    unread="\033[1;38;5;153m",
    flagged="\033[38;5;210m",
    spoolfile="\033[38;5;117m",
    ordinary="\033[38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    normal="",
    divider="",
    indicator="",
    highlight="",
    new="",
    unread="",
    flagged="",
    spoolfile="",
    ordinary="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for ``name``; unknown names get the default palette."""
    if no_color:
        return PLAIN_THEME
    theme = _THEMES.get((name or "").strip().lower())
    if theme is None:
        if name:
            logger.debug("unknown sidebar theme %r, using %s", name, DEFAULT_THEME.name)
        return DEFAULT_THEME
    return theme
