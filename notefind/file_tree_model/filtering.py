"""Eligibility predicate for workspace entries.

Hidden entries (basename starting with ``.``) never take part in listing or
search. Files can additionally be restricted to one document extension.
"""

from __future__ import annotations

import os


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dot-prefixed hidden entry."""
    return name.startswith(".")


def file_extension(name: str) -> str | None:
    """Return the text after the last dot of ``name`` or ``None``.

    A leading dot does not start an extension, so ``".md"`` has none while
    ``"notes."`` has the empty extension.
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def is_eligible(name: str, is_dir: bool, extension: str | None = None) -> bool:
    """Return whether an entry named ``name`` may be listed or searched.

    Directories only need to be visible. Files must also carry ``extension``
    (compared case-sensitively) when one is given.
    """
    name = os.path.basename(name) or name
    if is_hidden_name(name):
        return False
    if is_dir or extension is None:
        return True
    return file_extension(name) == extension


__all__ = ["file_extension", "is_eligible", "is_hidden_name"]
