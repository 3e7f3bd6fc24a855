"""Command-line front door for mailsidebar.

Loads a JSON mailbox listing, applies optional navigation commands, and
prints the sidebar exactly as the pane would draw it.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import load_sidebar_config, load_theme_name
from .mailbox import Mailbox, MailboxRegistry
from .sidebar_model import NavigationCommand, SortOrder
from .sidebar_pane import SidebarPane
from .ui_theme import available_theme_names, resolve_theme


def _cell_count(value: str) -> int:
    """argparse type for a sidebar height or width in terminal cells."""
    if not value.strip().isdigit() or int(value) < 1:
        raise argparse.ArgumentTypeError(f"expected a cell count of at least 1, got {value!r}")
    return int(value)


def _command_list(value: str) -> list[NavigationCommand]:
    """argparse type for comma-separated navigation command names."""
    commands: list[NavigationCommand] = []
    for name in value.split(","):
        if not name.strip():
            continue
        command = NavigationCommand.from_name(name)
        if command is None:
            raise argparse.ArgumentTypeError(f"unknown sidebar command: {name.strip()!r}")
        commands.append(command)
    return commands


def load_registry(text: str) -> MailboxRegistry:
    """Build a registry from a JSON list, or an object with ``mailboxes``/``active``."""
    data = json.loads(text)
    active = None
    if isinstance(data, dict):
        active = data.get("active")
        data = data.get("mailboxes", [])
    if not isinstance(data, list):
        raise ValueError("expected a list of mailbox objects")

    registry = MailboxRegistry()
    for item in data:
        if isinstance(item, str):
            registry.add(Mailbox(item))
        elif isinstance(item, dict):
            registry.add(Mailbox.from_dict(item))
        else:
            raise ValueError(f"unsupported mailbox entry: {item!r}")
    if isinstance(active, str):
        registry.set_active(active)
    return registry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a mail-folder sidebar from a JSON mailbox listing."
    )
    parser.add_argument("mailboxes", help="JSON file with mailboxes ('-' reads stdin).")
    parser.add_argument("--rows", type=_cell_count, default=20, help="Sidebar height in rows.")
    parser.add_argument("--width", type=_cell_count, default=None, help="Sidebar width in columns.")
    parser.add_argument("--sort", default=None, help="Sort method, e.g. unread, path, reverse-count.")
    parser.add_argument("--new-only", action="store_true", default=None, help="Only show mailboxes with new mail.")
    parser.add_argument(
        "--non-empty-only",
        action="store_true",
        default=None,
        help="Only show mailboxes with messages.",
    )
    parser.add_argument("--wrap", action="store_true", default=None, help="Wrap next-new/prev-new searches.")
    parser.add_argument("--whitelist", action="append", default=None, help="Mailbox always shown (repeatable).")
    parser.add_argument("--active", default=None, help="Path of the mailbox open in the content view.")
    parser.add_argument(
        "--commands",
        type=_command_list,
        default=[],
        help="Comma-separated navigation commands to run before drawing (next, page-down, ...).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--debug", action="store_true", help="Log debug output to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, draw the sidebar, and print it to stdout."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.mailboxes == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.mailboxes).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot read mailboxes: {exc}") from exc
    try:
        registry = load_registry(text)
    except ValueError as exc:
        raise SystemExit(f"Invalid mailbox listing: {exc}") from exc
    if args.active is not None:
        registry.set_active(args.active)

    config = load_sidebar_config().with_overrides(
        sort=SortOrder.parse(args.sort) if args.sort is not None else None,
        width=args.width,
        new_mail_only=args.new_only,
        non_empty_only=args.non_empty_only,
        next_new_wrap=args.wrap,
        whitelist=tuple(args.whitelist) if args.whitelist else None,
    )
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    pane = SidebarPane(registry, config, theme)

    pane.recalc_and_frame(args.rows)
    for command in args.commands:
        if pane.handle_navigation_command(command):
            pane.recalc_and_frame(args.rows)

    lines = pane.draw(args.rows, config.width)
    sys.stdout.write("".join(line + "\n" for line in lines))
