"""Mailbox path helpers: abbreviation, depth, and inbox detection.

These turn a full mailbox path such as ``imaps://user@host/INBOX/lists``
into the short, indented label shown in the sidebar.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from .mailbox import MailboxKind

# Long enough to skip ``notmuch://`` but short of any host part.
URL_SCHEME_SKIP = 10
URL_KINDS = {MailboxKind.IMAP, MailboxKind.POP, MailboxKind.NNTP, MailboxKind.NOTMUCH}


def inbox_compare(a: str, b: str) -> int:
    """Order an ``inbox`` ahead of its siblings.

    Returns -1 when ``a`` is the inbox of a folder shared with ``b``, 1 for
    the reverse, and 0 when neither applies.
    """
    if a.startswith("+") and b.startswith("+"):
        if a[1:].lower() == "inbox":
            return -1
        if b[1:].lower() == "inbox":
            return 1
        return 0

    a_end = a.rfind("/")
    b_end = b.rfind("/")
    if (a_end < 0) != (b_end < 0):
        return 0
    if a_end < 0:
        return 0

    shortest = min(a_end, b_end)
    same = (
        a[shortest:shortest + 1] == "/"
        and b[shortest:shortest + 1] == "/"
        and a[shortest + 1:] != ""
        and b[shortest + 1:] != ""
        and a[:shortest].lower() == b[:shortest].lower()
    )
    if not same:
        return 0
    if a[shortest + 1:].lower() == "inbox":
        return -1
    if b[shortest + 1:].lower() == "inbox":
        return 1
    return 0


def imap_prefix_length(folder: str, mbox: str) -> int:
    """Return how many leading chars of ``mbox`` the IMAP ``folder`` covers."""
    try:
        url_m = urlsplit(mbox)
        url_f = urlsplit(folder)
        host_m = (url_m.hostname or "").lower()
        host_f = (url_f.hostname or "").lower()
        user_m = url_m.username
        user_f = url_f.username
    except ValueError:
        return 0
    if not url_m.scheme or not url_f.scheme:
        return 0
    if host_m != host_f:
        return 0
    if user_m and user_f and user_m.lower() != user_f.lower():
        return 0

    path_m = url_m.path.lstrip("/")
    path_f = url_f.path.lstrip("/")
    if len(path_f) > len(path_m):
        return 0
    if not path_m.startswith(path_f):
        return 0
    return len(mbox) - len(path_m) + len(path_f)


def abbreviate_folder(mbox: str, folder: str | None, kind: MailboxKind, delim_chars: str) -> str | None:
    """Strip the configured ``folder`` prefix from ``mbox``, if it has one."""
    if not mbox or not folder:
        return None

    if kind is MailboxKind.IMAP:
        prefix = imap_prefix_length(folder, mbox)
        if prefix == 0:
            return None
        return mbox[prefix:].lstrip("/") or None

    if not delim_chars:
        return None
    flen = len(folder)
    if folder[-1] in delim_chars:
        flen -= 1
    if len(mbox) <= flen:
        return None
    if not mbox.startswith(folder[:flen]):
        return None
    # The prefix must end on a path boundary.
    if mbox[flen] not in delim_chars:
        return None
    return mbox[flen + 1:]


def abbreviate_url(mbox: str, kind: MailboxKind) -> str:
    """Drop the scheme and host of a remote mailbox path."""
    if len(mbox) < URL_SCHEME_SKIP or kind not in URL_KINDS:
        return mbox
    split = "?" if kind is MailboxKind.NOTMUCH else "/"
    idx = mbox.find(split, URL_SCHEME_SKIP)
    if idx < 0:
        return mbox
    return mbox[idx + 1:]


def path_depth(mbox: str, delim_chars: str) -> tuple[int, str]:
    """Count delimiter characters and return ``(depth, last_component)``."""
    if not mbox or not delim_chars:
        return 0, mbox
    depth = 0
    start = 0
    for idx, ch in enumerate(mbox):
        if ch in delim_chars:
            depth += 1
            start = idx + 1
    return depth, mbox[start:]


def sidebar_label(
    path: str,
    name: str | None,
    kind: MailboxKind,
    *,
    folder: str | None,
    delim_chars: str,
    short_path: bool,
    folder_indent: bool,
    indent_string: str,
    component_depth: int,
) -> str:
    """Build the (possibly abbreviated and indented) label for one mailbox."""
    display = name or path
    abbr = name
    if not abbr:
        abbr = abbreviate_folder(display, folder, kind, delim_chars)
    if not abbr:
        abbr = abbreviate_url(display, kind)
    if abbr:
        display = abbr

    depth, last_part = path_depth(abbr or "", delim_chars)

    # An unabbreviated full path is never indented; it looks odd.
    abbreviated = not path.startswith(display)
    if short_path:
        display = last_part

    indent = ""
    if folder_indent and abbreviated:
        if component_depth > 0:
            depth -= component_depth
        indent = indent_string * max(0, depth)
    return indent + display
