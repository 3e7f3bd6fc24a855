"""Display-width measurement and fitting for sidebar rows.

Rows may carry ANSI escape sequences and wide characters; every helper here
counts terminal cells, not code points.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal cell width of one character.

    Combining marks take no cells, East Asian wide/fullwidth characters take
    two, control characters are reported as ``-1``.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in {"Cc", "Cf", "Cs", "Co", "Cn"}:
        return -1
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str | None) -> int:
    """Return cell width of ``text`` ignoring escapes, or ``-1`` if unprintable."""
    if not text:
        return 0
    total = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        w = char_display_width(ch)
        if w < 0:
            return -1
        total += w
    return total


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` cells, keeping escapes.

    A wide character that would straddle the limit is dropped entirely.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = max(0, char_display_width(ch))
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def fit_to_width(text: str, width: int) -> str:
    """Pad with spaces or truncate so ``text`` fills exactly ``width`` cells."""
    if width <= 0:
        return ""
    clipped = clip_ansi_line(text, width)
    used = sum(max(0, char_display_width(ch)) for ch in strip_ansi(clipped))
    if used < width:
        clipped += " " * (width - used)
    return clipped
