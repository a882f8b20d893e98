"""Filesystem listing for tree-view rendering."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import ErrorKind, FileOpError, io_error
from .filtering import is_hidden_name
from .types import DirectoryEntry, FileMetadata

logger = logging.getLogger(__name__)


def _ns_to_ms(value: int | None) -> int | None:
    if value is None or value < 0:
        return None
    return value // 1_000_000


def _birthtime_ms(stat: os.stat_result) -> int | None:
    """Return creation time when the platform records one.

    ``st_ctime`` is inode change time on POSIX, so it is never used here.
    """
    birthtime_ns = getattr(stat, "st_birthtime_ns", None)
    if birthtime_ns is not None:
        return _ns_to_ms(int(birthtime_ns))
    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is None or birthtime < 0:
        return None
    return int(birthtime * 1000)


def metadata_from_stat(stat: os.stat_result) -> FileMetadata:
    return FileMetadata(
        size_bytes=int(stat.st_size),
        modified_ms=_ns_to_ms(int(stat.st_mtime_ns)),
        created_ms=_birthtime_ms(stat),
        accessed_ms=_ns_to_ms(int(stat.st_atime_ns)),
    )


def safe_file_metadata(path: str | Path) -> FileMetadata | None:
    """Return metadata for ``path`` (following links) or ``None`` on stat failure."""
    try:
        stat = os.stat(path)
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return None
    return metadata_from_stat(stat)


def list_directory(path: str | Path) -> list[DirectoryEntry]:
    """List visible immediate children of ``path`` with metadata.

    Directories sort before files, then names compare case-insensitively;
    ties keep enumeration order. Raises ``FileOpError`` when ``path`` is
    missing, is not a directory, or cannot be read.
    """
    directory = Path(path)
    if not directory.exists():
        raise FileOpError(ErrorKind.NOT_FOUND, f"Directory does not exist: {path}", path)
    if not directory.is_dir():
        raise FileOpError(ErrorKind.NOT_A_DIRECTORY, f"Path is not a directory: {path}", path)

    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if is_hidden_name(name):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False

                metadata: FileMetadata | None = None
                try:
                    metadata = metadata_from_stat(child.stat())
                except OSError as exc:
                    logger.debug("Cannot stat %s: %s", child.path, exc)

                entries.append(
                    DirectoryEntry(
                        name=name,
                        absolute_path=os.path.abspath(child.path),
                        is_directory=is_dir,
                        children=() if is_dir else None,
                        metadata=metadata,
                    )
                )
    except OSError as exc:
        raise io_error("read directory", path, exc) from exc

    entries.sort(key=lambda item: (not item.is_directory, item.name.lower()))
    return entries


__all__ = [
    "list_directory",
    "metadata_from_stat",
    "safe_file_metadata",
]
