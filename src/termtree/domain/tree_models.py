from __future__ import annotations

"""
Filesystem Tree Data Models.

Provides the recursive node types reconstructed from a terminal session
transcript. Nodes are frozen once built; directory sizes are never stored
and are always derived by traversal.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    Represents a leaf entry (file) in the reconstructed tree.

    Attributes:
        name: File name as printed by `ls`.
        size: Declared size in bytes.
    """
    name: str
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"File size must be non-negative, got {self.size} for '{self.name}'.")


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Represents an internal entry (directory) in the reconstructed tree.

    Attributes:
        name: Directory name as targeted by `cd`.
        children: Immediate child entries in discovery order.
    """
    name: str
    children: Tuple["Entry", ...] = field(default_factory=tuple)

    def iter_files(self) -> Iterator[FileEntry]:
        """Yield the immediate child files."""
        for child in self.children:
            if isinstance(child, FileEntry):
                yield child

    def iter_subdirectories(self) -> Iterator["DirectoryEntry"]:
        """Yield the immediate child directories."""
        for child in self.children:
            if isinstance(child, DirectoryEntry):
                yield child


Entry = Union[FileEntry, DirectoryEntry]
