"""Tests for sidebar config persistence and input sanitization.

Validates snapshot round-tripping through the JSON config file.
Ensures malformed or wrongly-typed values fall back to defaults on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mailsidebar import config
from mailsidebar.sidebar_model import SortMethod, SortOrder


class SidebarConfigPersistenceTests(unittest.TestCase):
    def test_sidebar_settings_round_trip(self) -> None:
        expected = config.SidebarConfig(
            sort=SortOrder(SortMethod.UNREAD, reverse=True),
            non_empty_only=True,
            whitelist=("/mail/inbox", "lists.*"),
            divider_char="┃",
            width=25,
            format="%B%* %N",
            folder_indent=True,
            folder="/mail",
            spoolfile="/mail/inbox",
        )
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("mailsidebar.config.CONFIG_PATH", config_path):
                config.save_sidebar_config(expected)
                self.assertEqual(config.load_sidebar_config(), expected)

    def test_saving_sidebar_keeps_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mailsidebar.config.CONFIG_PATH", config_path):
                config.save_config({"theme": "ocean"})
                config.save_sidebar_config(config.SidebarConfig(width=40))

                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_sidebar_config().width, 40)

    def test_missing_or_malformed_file_loads_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mailsidebar.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_sidebar_config(), config.SidebarConfig())

                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())

    def test_wrongly_typed_values_fall_back_to_defaults(self) -> None:
        raw = {
            "sidebar": {
                "width": "wide",
                "new_mail_only": "yes",
                "sort": "bogus",
                "whitelist": "inbox  work",
                "component_depth": -3,
                "divider_char": 5,
                "visible": False,
            },
            "theme": "   ",
        }
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps(raw), encoding="utf-8")
            with mock.patch("mailsidebar.config.CONFIG_PATH", config_path):
                loaded = config.load_sidebar_config()
                theme_name = config.load_theme_name()

        self.assertEqual(loaded.width, config.DEFAULT_WIDTH)
        self.assertFalse(loaded.new_mail_only)
        self.assertEqual(loaded.sort, SortOrder())
        self.assertEqual(loaded.whitelist, ("inbox", "work"))
        self.assertEqual(loaded.component_depth, 0)
        self.assertIsNone(loaded.divider_char)
        self.assertFalse(loaded.visible)
        self.assertIsNone(theme_name)

    def test_unknown_keys_are_logged(self) -> None:
        with self.assertLogs("mailsidebar.config", level="DEBUG") as logs:
            loaded = config.config_from_dict({"width": 12, "colour": "red"})

        self.assertEqual(loaded.width, 12)
        self.assertIn("colour", "\n".join(logs.output))


class SidebarConfigSnapshotTests(unittest.TestCase):
    def test_overrides_skip_none_values(self) -> None:
        base = config.SidebarConfig(width=50, new_mail_only=True)

        updated = base.with_overrides(width=None, new_mail_only=False, folder="/mail")

        self.assertEqual(updated.width, 50)
        self.assertFalse(updated.new_mail_only)
        self.assertEqual(updated.folder, "/mail")
        self.assertTrue(base.new_mail_only)

    def test_filtering_reflects_either_filter(self) -> None:
        self.assertFalse(config.SidebarConfig().filtering)
        self.assertTrue(config.SidebarConfig(new_mail_only=True).filtering)
        self.assertTrue(config.SidebarConfig(non_empty_only=True).filtering)


class SplitListTests(unittest.TestCase):
    def test_empty_input_yields_no_items(self) -> None:
        self.assertEqual(config.split_list(None), [])
        self.assertEqual(config.split_list(""), [])

    def test_splits_on_separator(self) -> None:
        self.assertEqual(config.split_list("inbox work"), ["inbox", "work"])
        self.assertEqual(config.split_list("a,b,c", ","), ["a", "b", "c"])
        self.assertEqual(config.split_list("one"), ["one"])

    def test_edge_separators_yield_empty_items(self) -> None:
        self.assertEqual(config.split_list(" a"), ["", "a"])
        self.assertEqual(config.split_list("a,,b", ","), ["a", "", "b"])


if __name__ == "__main__":
    unittest.main()
