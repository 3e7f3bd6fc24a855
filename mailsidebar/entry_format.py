"""Expand sidebar format strings such as ``"%D%*  %n"`` into one row.

Supported syntax:

- ``%X`` / ``%-8X`` / ``%5.3X``: an expando with optional printf-style
  alignment, width and precision.
- ``%?X?then&else?``: ``then`` when expando ``X`` is non-zero, else ``else``.
- ``%*C`` / ``%>C``: right-justify the rest of the row, filling with ``C``.
- ``%%``: a literal percent sign.

| Expando | Value
|:--------|:------------------------------------------------
| ``%!``  | ``!``/``!!``/``N!`` flagged marker
| ``%B``  | mailbox label
| ``%D``  | mailbox description (name), else the label
| ``%d``  | deleted messages (active mailbox only)
| ``%F``  | flagged messages
| ``%L``  | messages after limiting (active mailbox only)
| ``%n``  | ``N`` when the mailbox has new mail
| ``%N``  | unread messages
| ``%o``  | old unread messages
| ``%r``  | read messages
| ``%S``  | total messages
| ``%t``  | tagged messages (active mailbox only)
| ``%Z``  | new unseen messages
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, fit_to_width
from .mailbox import Mailbox

FIELD_SPEC_CHARS = "-0123456789."


@dataclass(frozen=True)
class FormatContext:
    """Inputs for one row: the computed label, its mailbox, and whether it is active."""

    box: str
    mailbox: Mailbox
    is_active: bool = False


def flagged_marker(flagged: int) -> str:
    if flagged <= 0:
        return ""
    if flagged == 1:
        return "!"
    if flagged == 2:
        return "!!"
    return f"{flagged}!"


def expando_value(op: str, ctx: FormatContext) -> tuple[str | int, bool]:
    """Return ``(value, is_set)`` for expando ``op``.

    ``is_set`` selects the ``then`` branch of a conditional.
    """
    m = ctx.mailbox
    active = ctx.is_active
    if op == "B":
        return ctx.box, True
    if op == "D":
        return (m.name or ctx.box), True
    if op == "d":
        value = m.msg_deleted if active else 0
        return value, value != 0
    if op == "F":
        return m.msg_flagged, m.msg_flagged != 0
    if op == "L":
        limited = m.vcount if (active and m.vcount is not None) else m.msg_count
        return limited, active and limited != m.msg_count
    if op == "N":
        return m.msg_unread, m.msg_unread != 0
    if op == "n":
        return ("N" if m.has_new else " "), m.has_new
    if op == "o":
        value = m.msg_unread - m.msg_new
        return value, active and value != 0
    if op == "r":
        value = m.msg_count - m.msg_unread
        return value, active and value != 0
    if op == "S":
        return m.msg_count, m.msg_count != 0
    if op == "t":
        value = m.msg_tagged if active else 0
        return value, value != 0
    if op == "Z":
        return m.msg_new, active and m.msg_new != 0
    if op == "!":
        return flagged_marker(m.msg_flagged), True
    return "", False


def _apply_spec(value: str | int, spec: str) -> str:
    """Format ``value`` with a printf-style ``[-][width][.precision]`` spec."""
    if not spec:
        return str(value)
    try:
        if isinstance(value, int):
            return ("%" + spec + "d") % value
        return ("%" + spec + "s") % value
    except (TypeError, ValueError):
        return str(value)


def _find_conditional_end(fmt: str, start: int) -> tuple[str, str, int]:
    """Split ``then&else?`` starting at ``start``; nested ``%?`` blocks are skipped."""
    depth = 0
    then_part: str | None = None
    seg_start = start
    i = start
    n = len(fmt)
    while i < n:
        ch = fmt[i]
        if ch == "%" and i + 1 < n:
            if fmt[i + 1] == "?":
                # Skip the whole ``%?X?`` opener of a nested conditional.
                depth += 1
                i += 4
                continue
            i += 2
            continue
        if depth == 0 and ch == "&" and then_part is None:
            then_part = fmt[seg_start:i]
            seg_start = i + 1
        elif ch == "?":
            if depth == 0:
                if then_part is None:
                    return fmt[seg_start:i], "", i + 1
                return then_part, fmt[seg_start:i], i + 1
            depth -= 1
        i += 1
    if then_part is None:
        return fmt[seg_start:], "", n
    return then_part, fmt[seg_start:], n


def _expand(fmt: str, ctx: FormatContext) -> tuple[str, str | None, str]:
    """Expand ``fmt`` into ``(left, fill_char, right)`` around a ``%*`` marker."""
    left: list[str] = []
    right: list[str] = []
    fill: str | None = None
    out = left
    i = 0
    n = len(fmt)
    while i < n:
        ch = fmt[i]
        if ch != "%" or i + 1 >= n:
            out.append(ch)
            i += 1
            continue

        i += 1
        if fmt[i] == "%":
            out.append("%")
            i += 1
            continue

        if fmt[i] == "?":
            op = fmt[i + 1] if i + 1 < n else ""
            body_start = i + 3 if i + 2 < n and fmt[i + 2] == "?" else i + 2
            then_part, else_part, i = _find_conditional_end(fmt, body_start)
            _value, is_set = expando_value(op, ctx)
            branch_left, branch_fill, branch_right = _expand(then_part if is_set else else_part, ctx)
            out.append(branch_left)
            if branch_fill is not None and fill is None:
                fill = branch_fill
                out = right
            out.append(branch_right)
            continue

        if fmt[i] in "*>":
            fill_char = fmt[i + 1] if i + 1 < n else " "
            i += 2
            if fill is None:
                fill = fill_char
                out = right
            continue

        spec_start = i
        while i < n and fmt[i] in FIELD_SPEC_CHARS:
            i += 1
        spec = fmt[spec_start:i]
        if i >= n:
            break
        op = fmt[i]
        i += 1
        value, _is_set = expando_value(op, ctx)
        out.append(_apply_spec(value, spec))

    return "".join(left), fill, "".join(right)


def format_entry(fmt: str, ctx: FormatContext, width: int) -> str:
    """Render one sidebar row exactly ``width`` cells wide."""
    left, fill, right = _expand(fmt or "", ctx)
    if fill is None:
        return fit_to_width(left, width)

    right_width = max(0, display_width(right))
    if right_width >= width:
        return fit_to_width(right, width)
    left = clip_ansi_line(left, width - right_width)
    gap = width - right_width - max(0, display_width(left))
    fill_char = fill if display_width(fill) == 1 else " "
    return fit_to_width(left + fill_char * gap + right, width)
