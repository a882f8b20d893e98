"""Terminal rendering for documents and search hits.

Documents are colorized with Pygments. Search hits are marked in reverse
video. Terminal control bytes are escaped before anything is printed.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

MATCH_ON = "\033[7m"
MATCH_OFF = "\033[27m"


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def highlight_document(source: str, path: str | Path, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``source`` colorized for a 256-color terminal.

    The lexer is picked from the file name, falling back to plain text.
    Unknown style names fall back to the default style.
    """
    source = sanitize_terminal_text(source)
    if no_color:
        return source
    try:
        lexer = get_lexer_for_filename(Path(path).name, source)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = Terminal256Formatter(style=_normalize_style(style))
    return pygments_highlight(source, lexer, formatter)


def byte_spans_to_char_mask(line: str, spans: list[tuple[int, int]]) -> list[bool]:
    """Mark each character of ``line`` that overlaps any byte span."""
    marked_bytes = bytearray(len(line.encode("utf-8")))
    for start, end in spans:
        start = max(0, start)
        end = min(len(marked_bytes), end)
        for idx in range(start, end):
            marked_bytes[idx] = 1

    mask: list[bool] = []
    offset = 0
    for ch in line:
        width = len(ch.encode("utf-8"))
        mask.append(any(marked_bytes[offset : offset + width]))
        offset += width
    return mask


def mark_match_spans(line: str, spans: list[tuple[int, int]], no_color: bool = False) -> str:
    """Render ``line`` with every matched character in reverse video."""
    if no_color or not spans:
        return sanitize_terminal_text(line)

    mask = byte_spans_to_char_mask(line, spans)
    out: list[str] = []
    run_start = 0
    for idx in range(1, len(line) + 1):
        if idx < len(line) and mask[idx] == mask[run_start]:
            continue
        chunk = sanitize_terminal_text(line[run_start:idx])
        out.append(f"{MATCH_ON}{chunk}{MATCH_OFF}" if mask[run_start] else chunk)
        run_start = idx
    return "".join(out)


__all__ = [
    "MATCH_OFF",
    "MATCH_ON",
    "byte_spans_to_char_mask",
    "highlight_document",
    "mark_match_spans",
    "sanitize_terminal_text",
]
