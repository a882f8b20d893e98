"""Domain model for workspace document trees.

This package contains non-UI tree primitives:
- the hidden/extension eligibility predicate
- one-level directory listing with stat metadata
- recursive document enumeration used by search
"""

from __future__ import annotations

from .filtering import file_extension, is_eligible, is_hidden_name
from .fs import list_directory, metadata_from_stat, safe_file_metadata
from .types import DirectoryEntry, FileMetadata
from .walk import enumerate_documents

__all__ = [
    "DirectoryEntry",
    "FileMetadata",
    "file_extension",
    "is_eligible",
    "is_hidden_name",
    "list_directory",
    "metadata_from_stat",
    "safe_file_metadata",
    "enumerate_documents",
]
