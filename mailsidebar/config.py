"""Sidebar configuration: immutable snapshot plus persisted JSON settings.

Every draw receives a ``SidebarConfig``; nothing in the model reads ambient
settings. A missing or malformed file, or a field of the wrong type, loads as
the default.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

from platformdirs import user_config_dir

from .sidebar_model.types import SortOrder

logger = logging.getLogger(__name__)

APP_NAME = "mailsidebar"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_FORMAT = "%D%*  %n"
DEFAULT_WIDTH = 30


@dataclass(frozen=True)
class SidebarConfig:
    """Everything the sidebar reads while recalculating and drawing."""

    sort: SortOrder = SortOrder()
    new_mail_only: bool = False
    non_empty_only: bool = False
    next_new_wrap: bool = False
    whitelist: tuple[str, ...] = ()
    divider_char: str | None = None
    ascii_chars: bool = False
    on_right: bool = False
    visible: bool = True
    width: int = DEFAULT_WIDTH
    format: str = DEFAULT_FORMAT
    short_path: bool = False
    folder_indent: bool = False
    indent_string: str = "  "
    delim_chars: str = "/."
    component_depth: int = 0
    folder: str | None = None
    spoolfile: str | None = None

    @property
    def filtering(self) -> bool:
        return self.new_mail_only or self.non_empty_only

    def with_overrides(self, **changes: object) -> SidebarConfig:
        """Return a copy with the non-``None`` values in ``changes`` applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


def split_list(text: str | None, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``; ``None`` or empty text yields no items.

    A leading or trailing separator yields an empty item, like the classic
    list splitter, so callers decide whether empties matter.
    """
    if not text:
        return []
    return text.split(sep)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, ignoring filesystem errors."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not save config to %s: %s", CONFIG_PATH, exc)


def _coerce_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _coerce_int(value: object, default: int, minimum: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return max(minimum, value)


def _coerce_optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _coerce_whitelist(value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        items = split_list(value)
    elif isinstance(value, list):
        items = [item for item in value if isinstance(item, str)]
    else:
        return ()
    return tuple(item for item in items if item)


def config_from_dict(data: dict[str, object]) -> SidebarConfig:
    """Build a ``SidebarConfig`` from loosely-typed JSON data."""
    default = SidebarConfig()
    known = {f.name for f in fields(SidebarConfig)}
    unknown = sorted(key for key in data if key not in known)
    if unknown:
        logger.debug("ignoring unknown sidebar config keys: %s", ", ".join(unknown))

    fmt = data.get("format")
    indent_string = data.get("indent_string")
    delim_chars = data.get("delim_chars")
    return SidebarConfig(
        sort=SortOrder.parse(data.get("sort", default.sort.name)),
        new_mail_only=_coerce_bool(data.get("new_mail_only"), default.new_mail_only),
        non_empty_only=_coerce_bool(data.get("non_empty_only"), default.non_empty_only),
        next_new_wrap=_coerce_bool(data.get("next_new_wrap"), default.next_new_wrap),
        whitelist=_coerce_whitelist(data.get("whitelist")),
        divider_char=_coerce_optional_str(data.get("divider_char")),
        ascii_chars=_coerce_bool(data.get("ascii_chars"), default.ascii_chars),
        on_right=_coerce_bool(data.get("on_right"), default.on_right),
        visible=_coerce_bool(data.get("visible"), default.visible),
        width=_coerce_int(data.get("width"), default.width),
        format=fmt if isinstance(fmt, str) else default.format,
        short_path=_coerce_bool(data.get("short_path"), default.short_path),
        folder_indent=_coerce_bool(data.get("folder_indent"), default.folder_indent),
        indent_string=indent_string if isinstance(indent_string, str) else default.indent_string,
        delim_chars=delim_chars if isinstance(delim_chars, str) else default.delim_chars,
        component_depth=_coerce_int(data.get("component_depth"), default.component_depth),
        folder=_coerce_optional_str(data.get("folder")),
        spoolfile=_coerce_optional_str(data.get("spoolfile")),
    )


def load_sidebar_config() -> SidebarConfig:
    """Load the persisted sidebar settings as a snapshot."""
    value = load_config().get("sidebar")
    if not isinstance(value, dict):
        return SidebarConfig()
    return config_from_dict(value)


def save_sidebar_config(config: SidebarConfig) -> None:
    """Persist ``config`` under the ``sidebar`` key, keeping other keys."""
    data = load_config()
    data["sidebar"] = {
        "sort": config.sort.name,
        "new_mail_only": config.new_mail_only,
        "non_empty_only": config.non_empty_only,
        "next_new_wrap": config.next_new_wrap,
        "whitelist": list(config.whitelist),
        "divider_char": config.divider_char,
        "ascii_chars": config.ascii_chars,
        "on_right": config.on_right,
        "visible": config.visible,
        "width": config.width,
        "format": config.format,
        "short_path": config.short_path,
        "folder_indent": config.folder_indent,
        "indent_string": config.indent_string,
        "delim_chars": config.delim_chars,
        "component_depth": config.component_depth,
        "folder": config.folder,
        "spoolfile": config.spoolfile,
    }
    save_config(data)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
