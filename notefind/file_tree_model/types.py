"""Domain datatypes for one-level directory listings."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class FileMetadata:
    """Stat snapshot taken at listing time; timestamps are epoch milliseconds."""

    size_bytes: int
    modified_ms: int | None = None
    created_ms: int | None = None
    accessed_ms: int | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class DirectoryEntry:
    """One visible child of a listed directory.

    ``children`` is an empty tuple for directories (filled by a later listing
    on demand) and ``None`` for files.
    """

    name: str
    absolute_path: str
    is_directory: bool
    children: tuple["DirectoryEntry", ...] | None = None
    metadata: FileMetadata | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "absolute_path": self.absolute_path,
            "is_directory": self.is_directory,
            "children": None if self.children is None else [child.to_dict() for child in self.children],
            "metadata": None if self.metadata is None else self.metadata.to_dict(),
        }


__all__ = [
    "DirectoryEntry",
    "FileMetadata",
]
