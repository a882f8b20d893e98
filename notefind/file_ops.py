"""Single-path file operations for the workspace host.

Every failure is raised as ``FileOpError`` with a closed ``ErrorKind``.
Text is UTF-8 with no newline translation in either direction.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .errors import ErrorKind, FileOpError, io_error

logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> None:
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise io_error("create directories", parent, exc) from exc


def path_exists(path: str | Path) -> bool:
    return Path(path).exists()


def read_file_text(path: str | Path) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise FileOpError(ErrorKind.IO_ERROR, f"Failed to read file: {path}: not valid UTF-8", path) from exc
    except OSError as exc:
        raise io_error("read file", path, exc) from exc


def write_file_text(path: str | Path, content: str) -> None:
    """Write ``content`` to ``path``, creating missing parent directories."""
    target = Path(path)
    _ensure_parent(target)
    try:
        with open(target, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise io_error("write file", path, exc) from exc


def create_file_text(path: str | Path, content: str = "") -> None:
    """Create a new file; raises ``ALREADY_EXISTS`` if ``path`` is present."""
    target = Path(path)
    if target.exists():
        raise FileOpError(ErrorKind.ALREADY_EXISTS, f"File already exists: {path}", path)
    _ensure_parent(target)
    try:
        with open(target, "x", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except FileExistsError as exc:
        raise FileOpError(ErrorKind.ALREADY_EXISTS, f"File already exists: {path}", path) from exc
    except OSError as exc:
        raise io_error("create file", path, exc) from exc


def create_directory(path: str | Path) -> None:
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise FileOpError(ErrorKind.NOT_A_DIRECTORY, f"Path is not a directory: {path}", path) from exc
    except OSError as exc:
        raise io_error("create directory", path, exc) from exc


def delete_path(path: str | Path, recursive: bool = False) -> None:
    """Delete a file or directory.

    A non-empty directory is only removed with ``recursive=True``; otherwise
    the underlying error surfaces as ``IO_ERROR``. Symbolic links are removed
    themselves, never their targets.
    """
    target = Path(path)
    if not target.exists() and not target.is_symlink():
        raise FileOpError(ErrorKind.NOT_FOUND, f"File does not exist: {path}", path)

    if target.is_dir() and not target.is_symlink():
        try:
            if recursive:
                shutil.rmtree(target)
            else:
                target.rmdir()
        except OSError as exc:
            raise io_error("delete directory", path, exc) from exc
        logger.debug("Deleted directory %s (recursive=%s)", path, recursive)
        return

    try:
        target.unlink()
    except OSError as exc:
        raise io_error("delete file", path, exc) from exc
    logger.debug("Deleted file %s", path)


def rename_or_move(source: str | Path, destination: str | Path) -> None:
    """Move ``source`` to ``destination``, creating the destination's parents."""
    source_path = Path(source)
    if not source_path.exists() and not source_path.is_symlink():
        raise FileOpError(ErrorKind.NOT_FOUND, f"Source does not exist: {source}", source)
    destination_path = Path(destination)
    _ensure_parent(destination_path)
    try:
        os.rename(source_path, destination_path)
    except OSError as exc:
        raise io_error("rename", source, exc) from exc
    logger.debug("Moved %s -> %s", source, destination)


__all__ = [
    "create_directory",
    "create_file_text",
    "delete_path",
    "path_exists",
    "read_file_text",
    "rename_or_move",
    "write_file_text",
]
