"""Workspace-local trash folder.

Deleted notes are moved into ``<project>/_trash`` instead of being removed,
and can be restored or purged later.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import FileOpError
from .file_ops import create_directory, delete_path, rename_or_move
from .file_tree_model import DirectoryEntry, list_directory

logger = logging.getLogger(__name__)

TRASH_FOLDER_NAME = "_trash"


def trash_path(project: str | Path) -> str:
    return os.path.join(os.fspath(project), TRASH_FOLDER_NAME)


def ensure_trash_folder(project: str | Path) -> str:
    path = trash_path(project)
    if not os.path.isdir(path):
        create_directory(path)
    return path


def _unique_target(folder: str, name: str, label: str) -> str:
    """Return ``folder/name`` or the first free ``name (<label>N).ext`` variant."""
    target = os.path.join(folder, name)
    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem:
        stem, suffix = name, ""
    else:
        suffix = "." + suffix
    counter = 1
    while os.path.lexists(target):
        target = os.path.join(folder, f"{stem} ({label}{counter}){suffix}")
        counter += 1
    return target


def move_to_trash(path: str | Path, project: str | Path) -> str:
    """Move ``path`` into the trash and return its new location."""
    folder = ensure_trash_folder(project)
    name = os.path.basename(os.path.normpath(os.fspath(path))) or "unknown"
    target = _unique_target(folder, name, "")
    rename_or_move(path, target)
    return target


def restore_from_trash(trashed: str | Path, project: str | Path, destination: str | Path | None = None) -> str:
    """Move a trashed entry back into ``destination`` (project root by default)."""
    folder = os.fspath(destination if destination is not None else project)
    name = os.path.basename(os.path.normpath(os.fspath(trashed))) or "unknown"
    target = _unique_target(folder, name, "restored ")
    rename_or_move(trashed, target)
    return target


def list_trash(project: str | Path) -> list[DirectoryEntry]:
    path = trash_path(project)
    if not os.path.exists(path):
        return []
    try:
        return list_directory(path)
    except FileOpError as exc:
        logger.warning("Cannot read trash folder %s: %s", path, exc)
        return []


def empty_trash(project: str | Path) -> list[str]:
    """Permanently delete trash contents; returns paths that could not be removed."""
    failed: list[str] = []
    for entry in list_trash(project):
        try:
            delete_path(entry.absolute_path, recursive=entry.is_directory)
        except FileOpError as exc:
            logger.warning("Cannot delete trash entry %s: %s", entry.absolute_path, exc)
            failed.append(entry.absolute_path)
    return failed


def is_in_trash(path: str | Path, project: str | Path) -> bool:
    folder = Path(trash_path(project))
    candidate = Path(path)
    return candidate == folder or folder in candidate.parents


def is_trash_folder(path: str | Path, project: str | Path) -> bool:
    return Path(path) == Path(trash_path(project))


__all__ = [
    "TRASH_FOLDER_NAME",
    "empty_trash",
    "ensure_trash_folder",
    "is_in_trash",
    "is_trash_folder",
    "list_trash",
    "move_to_trash",
    "restore_from_trash",
    "trash_path",
]
