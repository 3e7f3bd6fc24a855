"""Tests for sidebar format-string expansion.

Covers expandos, printf-style field specs, conditionals (including nested
ones), right-justified fill, and exact-width padding with wide characters.
"""

from __future__ import annotations

import unittest

from mailsidebar.entry_format import FormatContext, expando_value, flagged_marker, format_entry
from mailsidebar.mailbox import Mailbox


def _ctx(box: str = "inbox", active: bool = False, **counts: object) -> FormatContext:
    return FormatContext(box=box, mailbox=Mailbox(f"/m/{box}", **counts), is_active=active)


class ExpandoTests(unittest.TestCase):
    def test_counts_and_separators(self) -> None:
        ctx = _ctx(msg_count=10, msg_unread=3)
        self.assertEqual(format_entry("%S/%N", ctx, 4), "10/3")
        self.assertEqual(format_entry("%-4N|", ctx, 5), "3   |")
        self.assertEqual(format_entry("%4N|", ctx, 5), "   3|")

    def test_description_falls_back_to_label(self) -> None:
        self.assertEqual(format_entry("%D", _ctx("work"), 4), "work")
        named = FormatContext(box="work", mailbox=Mailbox("/m/work", name="Office"))
        self.assertEqual(format_entry("%D %B", named, 11), "Office work")

    def test_new_mail_marker_and_flag_marker(self) -> None:
        self.assertEqual(format_entry("%n", _ctx(has_new=True), 1), "N")
        self.assertEqual(format_entry("[%n]", _ctx(), 3), "[ ]")
        self.assertEqual([flagged_marker(n) for n in (0, 1, 2, 7)], ["", "!", "!!", "7!"])
        self.assertEqual(format_entry("%!", _ctx(msg_flagged=3), 2), "3!")

    def test_active_only_expandos(self) -> None:
        counts = {"msg_count": 10, "msg_deleted": 2, "msg_tagged": 1, "vcount": 4}
        self.assertEqual(expando_value("d", _ctx(**counts)), (0, False))
        self.assertEqual(expando_value("d", _ctx(active=True, **counts)), (2, True))
        self.assertEqual(expando_value("t", _ctx(active=True, **counts)), (1, True))
        self.assertEqual(expando_value("L", _ctx(**counts)), (10, False))
        self.assertEqual(expando_value("L", _ctx(active=True, **counts)), (4, True))

    def test_read_and_old_counts(self) -> None:
        ctx = _ctx(active=True, msg_count=10, msg_unread=4, msg_new=1)
        self.assertEqual(format_entry("%r %o %Z", ctx, 5), "6 3 1")

    def test_literal_percent_and_unknown_expando(self) -> None:
        self.assertEqual(format_entry("100%%", _ctx(), 4), "100%")
        self.assertEqual(format_entry("a%Qb", _ctx(), 2), "ab")

    def test_precision_truncates_text(self) -> None:
        named = FormatContext(box="x", mailbox=Mailbox("/m/x", name="abcdef"))
        self.assertEqual(format_entry("%.2D", named, 2), "ab")


class ConditionalTests(unittest.TestCase):
    def test_branches_follow_expando_value(self) -> None:
        fmt = "%?N?(%N)&-?"
        self.assertEqual(format_entry(fmt, _ctx(msg_unread=5), 3), "(5)")
        self.assertEqual(format_entry(fmt, _ctx(), 3), "-  ")

    def test_missing_else_branch_renders_nothing(self) -> None:
        self.assertEqual(format_entry("a%?F?!?b", _ctx(), 2), "ab")
        self.assertEqual(format_entry("a%?F?!?b", _ctx(msg_flagged=1), 3), "a!b")

    def test_nested_conditionals(self) -> None:
        fmt = "%?N?u%?F?f?&x?"
        self.assertEqual(format_entry(fmt, _ctx(msg_unread=1, msg_flagged=1), 2), "uf")
        self.assertEqual(format_entry(fmt, _ctx(msg_unread=1), 2), "u ")
        self.assertEqual(format_entry(fmt, _ctx(msg_flagged=1), 2), "x ")


class FillAndWidthTests(unittest.TestCase):
    def test_fill_right_justifies_rest_of_row(self) -> None:
        ctx = FormatContext(box="a", mailbox=Mailbox("/m/a", msg_count=10))
        self.assertEqual(format_entry("%D%*.%S", ctx, 8), "a.....10")

    def test_default_format_pads_between_name_and_marker(self) -> None:
        ctx = _ctx("inbox", has_new=True)
        self.assertEqual(format_entry("%D%*  %n", ctx, 10), "inbox    N")

    def test_left_side_is_clipped_to_keep_right_side(self) -> None:
        ctx = _ctx("verylongname", msg_count=42)
        self.assertEqual(format_entry("%D%* %S", ctx, 6), "very42")

    def test_right_side_wider_than_row_is_clipped(self) -> None:
        ctx = _ctx("a", msg_count=12345)
        self.assertEqual(format_entry("%D%* %S", ctx, 2), "12")

    def test_wide_characters_are_padded_to_exact_width(self) -> None:
        self.assertEqual(format_entry("%B", _ctx("日本語"), 5), "日本 ")

    def test_zero_width_and_empty_format(self) -> None:
        self.assertEqual(format_entry("%B", _ctx(), 0), "")
        self.assertEqual(format_entry("", _ctx(), 3), "   ")


if __name__ == "__main__":
    unittest.main()
