"""Search package exports.

Combines filename and content search in one import surface.
"""

from __future__ import annotations

from .content import (
    SearchMatch,
    SearchResult,
    compile_query_pattern,
    find_plain_spans,
    find_regex_spans,
    load_document_text,
    match_document,
    search_content,
    split_lines,
)
from .names import search_by_name

__all__ = [
    "SearchMatch",
    "SearchResult",
    "compile_query_pattern",
    "find_plain_spans",
    "find_regex_spans",
    "load_document_text",
    "match_document",
    "search_by_name",
    "search_content",
    "split_lines",
]
