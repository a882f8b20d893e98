"""Tests for filename search."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from notefind.search import search_by_name


class SearchByNameTests(unittest.TestCase):
    def _make_tree(self, root: Path) -> None:
        for relative in ("Meeting Notes.md", "projects/meeting-2024.md", "projects/todo.md", "meeting.txt"):
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("x\n", encoding="utf-8")
        hidden = root / ".trash" / "meeting-old.md"
        hidden.parent.mkdir()
        hidden.write_text("x\n", encoding="utf-8")

    def test_matches_basename_case_insensitively(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            found = search_by_name(root, "md", "MEETING")
            self.assertEqual(
                sorted(Path(path).relative_to(root).as_posix() for path in found),
                ["Meeting Notes.md", "projects/meeting-2024.md"],
            )

    def test_query_does_not_match_directory_components(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            self.assertEqual(search_by_name(root, "md", "projects"), [])

    def test_empty_query_returns_every_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            self.assertEqual(len(search_by_name(root, "md", "")), 3)

    def test_missing_root_returns_empty_list(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(search_by_name(Path(tmp) / "missing", "md", "x"), [])


if __name__ == "__main__":
    unittest.main()
