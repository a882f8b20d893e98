"""Public package surface for notefind.

Exports ``main`` for programmatic CLI invocation.
Listing, search, and file operations live in submodules under ``notefind``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
