"""Line-oriented content search over workspace documents.

Every call walks the tree and reads each document from disk again. Match
spans are UTF-8 byte offsets into the searched line.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path

from ..file_tree_model import enumerate_documents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchMatch:
    line_number: int  # 1-based
    line_content: str
    match_start: int  # byte offset, inclusive
    match_end: int  # byte offset, exclusive

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class SearchResult:
    """All matches found in one document; never built with zero matches."""

    path: str
    name: str
    matches: tuple[SearchMatch, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "name": self.name,
            "matches": [match.to_dict() for match in self.matches],
        }


def load_document_text(path: str | Path) -> str | None:
    """Return the UTF-8 text of ``path`` or ``None`` when it cannot be loaded."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        logger.debug("Skipping unreadable document %s: %s", path, exc)
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Skipping non UTF-8 document %s", path)
        return None


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and drop one ``\\r`` right before each ``\\n``.

    A terminator at the very end does not produce an extra empty line, and a
    bare ``\\r`` on an unterminated last line is kept.
    """
    if not text:
        return []
    lines = text.split("\n")
    tail = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        lines.append(tail)
    return lines


class _ByteCursor:
    """Map non-decreasing character indexes of one line to UTF-8 byte offsets.

    Each lookup encodes only the text since the previous one.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._ascii = text.isascii()
        self._index = 0
        self._offset = 0

    def offset(self, index: int) -> int:
        if self._ascii:
            return index
        if index < self._index:
            self._index = 0
            self._offset = 0
        self._offset += len(self._text[self._index : index].encode("utf-8"))
        self._index = index
        return self._offset


def compile_query_pattern(query: str, case_sensitive: bool) -> re.Pattern[str] | None:
    """Compile ``query`` once per search; ``None`` when it is not a valid pattern."""
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(query, flags)
    except re.error as exc:
        logger.debug("Invalid search pattern %r: %s", query, exc)
        return None


def find_regex_spans(line: str, pattern: re.Pattern[str] | None) -> list[tuple[int, int]]:
    if pattern is None:
        return []
    cursor = _ByteCursor(line)
    spans: list[tuple[int, int]] = []
    for match in pattern.finditer(line):
        match_start = cursor.offset(match.start())
        spans.append((match_start, cursor.offset(match.end())))
    return spans


def find_plain_spans(line: str, query: str, case_sensitive: bool) -> list[tuple[int, int]]:
    """Find every occurrence of ``query`` in ``line``.

    Scanning resumes one character after each hit's start, so overlapping
    occurrences are reported individually (``"aa"`` occurs twice in ``"aaa"``).
    """
    if not query:
        return []
    haystack = line if case_sensitive else line.lower()
    needle = query if case_sensitive else query.lower()
    needle_bytes = len(needle.encode("utf-8"))

    cursor = _ByteCursor(haystack)
    spans: list[tuple[int, int]] = []
    start = 0
    while True:
        position = haystack.find(needle, start)
        if position < 0:
            break
        byte_start = cursor.offset(position)
        spans.append((byte_start, byte_start + needle_bytes))
        start = position + 1
    return spans


def match_document(
    text: str,
    query: str,
    case_sensitive: bool = False,
    pattern: re.Pattern[str] | None = None,
    use_regex: bool = False,
) -> list[SearchMatch]:
    """Return one ``SearchMatch`` per occurrence across all lines of ``text``."""
    matches: list[SearchMatch] = []
    for line_index, line in enumerate(split_lines(text)):
        if use_regex:
            spans = find_regex_spans(line, pattern)
        else:
            spans = find_plain_spans(line, query, case_sensitive)
        for match_start, match_end in spans:
            matches.append(
                SearchMatch(
                    line_number=line_index + 1,
                    line_content=line,
                    match_start=match_start,
                    match_end=match_end,
                )
            )
    return matches


def search_content(
    root: str | Path,
    extension: str,
    query: str,
    case_sensitive: bool = False,
    use_regex: bool = False,
    *,
    load_text: Callable[[str], str | None] = load_document_text,
) -> list[SearchResult]:
    """Search document contents under ``root`` and rank files by match count.

    Documents ``load_text`` cannot load are skipped. A malformed pattern in
    regex mode produces no results instead of an error. Files with equal
    counts keep walk order.
    """
    pattern = compile_query_pattern(query, case_sensitive) if use_regex else None

    results: list[SearchResult] = []
    for path in enumerate_documents(root, extension):
        text = load_text(path)
        if text is None:
            continue
        matches = match_document(text, query, case_sensitive, pattern=pattern, use_regex=use_regex)
        if not matches:
            continue
        results.append(SearchResult(path=path, name=os.path.basename(path), matches=tuple(matches)))

    results.sort(key=lambda result: len(result.matches), reverse=True)
    return results


__all__ = [
    "SearchMatch",
    "SearchResult",
    "compile_query_pattern",
    "find_plain_spans",
    "find_regex_spans",
    "load_document_text",
    "match_document",
    "search_content",
    "split_lines",
]
