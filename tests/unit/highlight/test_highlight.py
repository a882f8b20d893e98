"""Tests for document colorizing and match-span marking."""

from __future__ import annotations

import unittest

from notefind.highlight import (
    MATCH_OFF,
    MATCH_ON,
    byte_spans_to_char_mask,
    highlight_document,
    mark_match_spans,
    sanitize_terminal_text,
)


class HighlightTests(unittest.TestCase):
    def test_markdown_gets_ansi_colors(self) -> None:
        rendered = highlight_document("# Title\n\n*emphasis*\n", "note.md")
        self.assertIn("\x1b[", rendered)
        self.assertIn("Title", rendered)

    def test_no_color_returns_sanitized_source(self) -> None:
        self.assertEqual(highlight_document("a\x07b\n", "note.md", no_color=True), "a\\x07b\n")

    def test_unknown_style_and_extension_fall_back(self) -> None:
        rendered = highlight_document("plain\n", "file.unknownext", style="no-such-style")
        self.assertIn("plain", rendered)

    def test_sanitize_keeps_tabs_and_newlines(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb\n\x1b[2J"), "a\tb\n\\x1b[2J")


class MatchSpanTests(unittest.TestCase):
    def test_marks_byte_spans(self) -> None:
        self.assertEqual(mark_match_spans("say foo", [(4, 7)]), f"say {MATCH_ON}foo{MATCH_OFF}")

    def test_overlapping_spans_merge(self) -> None:
        self.assertEqual(mark_match_spans("aaab", [(0, 2), (1, 3)]), f"{MATCH_ON}aaa{MATCH_OFF}b")

    def test_multibyte_characters_map_to_whole_chars(self) -> None:
        self.assertEqual(byte_spans_to_char_mask("äb", [(0, 2)]), [True, False])
        self.assertEqual(mark_match_spans("äb", [(2, 3)]), f"ä{MATCH_ON}b{MATCH_OFF}")

    def test_no_color_leaves_line_plain(self) -> None:
        self.assertEqual(mark_match_spans("foo", [(0, 3)], no_color=True), "foo")


if __name__ == "__main__":
    unittest.main()
