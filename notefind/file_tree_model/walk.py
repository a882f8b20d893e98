"""Recursive document enumeration under a workspace root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .filtering import is_eligible

logger = logging.getLogger(__name__)


def _log_walk_error(exc: OSError) -> None:
    logger.debug("Skipping unreadable path during walk: %s", exc)


def _directory_identity(path: str) -> tuple[int, int] | None:
    try:
        stat = os.stat(path)
    except OSError:
        return None
    return stat.st_dev, stat.st_ino

def enumerate_documents(root: str | Path, extension: str) -> list[str]:
    """Return every visible ``*.<extension>`` file under ``root``.

    Symbolic links are followed, so a directory reachable under two names is
    reported under both. A link back to one of its own ancestors is not
    descended into. Hidden directories are pruned and hidden files skipped.
    Output follows filesystem iteration order and is not sorted. Unreadable
    subtrees are skipped, and an unreadable ``root`` yields an empty list.
    """
    documents: list[str] = []
    ancestors_by_dir: dict[str, tuple[tuple[int, int], ...]] = {}
    for dirpath, dirnames, filenames in os.walk(os.fspath(root), onerror=_log_walk_error, followlinks=True):
        ancestors = ancestors_by_dir.pop(dirpath, ())
        identity = _directory_identity(dirpath)
        if identity is not None:
            if identity in ancestors:
                logger.debug("Skipping symlink loop back to an ancestor: %s", dirpath)
                dirnames[:] = []
                continue
            ancestors = ancestors + (identity,)

        dirnames[:] = [name for name in dirnames if is_eligible(name, is_dir=True)]
        for name in dirnames:
            ancestors_by_dir[os.path.join(dirpath, name)] = ancestors
        for filename in filenames:
            if not is_eligible(filename, is_dir=False, extension=extension):
                continue
            path = os.path.join(dirpath, filename)
            if os.path.isfile(path):
                documents.append(path)
    return documents


__all__ = ["enumerate_documents"]
