"""Filename search over workspace documents."""

from __future__ import annotations

import os
from pathlib import Path

from ..file_tree_model import enumerate_documents


def search_by_name(root: str | Path, extension: str, query: str) -> list[str]:
    """Return documents whose basename contains ``query``, ignoring case.

    An empty query returns every document. Order follows the tree walk.
    """
    needle = query.lower()
    return [path for path in enumerate_documents(root, extension) if needle in os.path.basename(path).lower()]


__all__ = ["search_by_name"]
