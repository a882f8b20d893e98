"""Closed error taxonomy for single-path filesystem operations.

Callers branch on ``FileOpError.kind`` instead of matching message text.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Failure categories surfaced by file operations and directory listing."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    NOT_A_DIRECTORY = "not_a_directory"
    IO_ERROR = "io_error"


class FileOpError(Exception):
    """Descriptive failure of one filesystem operation on one path."""

    def __init__(self, kind: ErrorKind, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = None if path is None else str(path)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"FileOpError({self.kind.name}, {self.message!r})"


def io_error(action: str, path: str | Path, exc: OSError) -> FileOpError:
    """Wrap ``exc`` as an ``IO_ERROR`` with a ``"Failed to <action>: ..."`` message."""
    detail = exc.strerror or str(exc)
    return FileOpError(ErrorKind.IO_ERROR, f"Failed to {action}: {path}: {detail}", path)


__all__ = ["ErrorKind", "FileOpError", "io_error"]
