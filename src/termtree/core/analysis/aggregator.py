from __future__ import annotations

"""
Size Aggregator.

Derives directory sizes from an immutable tree and answers the aggregate
queries over them. Traversal uses an explicit stack, so arbitrarily deep
trees never touch the interpreter recursion limit. Nothing is cached:
every call walks the tree again, so repeated calls on the same tree always
agree.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from termtree.domain.tree_models import DirectoryEntry, Entry, FileEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TREE METRICS
# -----------------------------------------------------------------------------

def size(entry: Entry) -> int:
    """
    Compute the total bytes occupied by an entry.

    Args:
        entry: A file or directory node.

    Returns:
        int: Declared size for files; sum of all descendants for directories.
    """
    if isinstance(entry, FileEntry):
        return entry.size
    total = 0
    for _, _, dir_size in walk_directories(entry):
        total = dir_size
    # Post-order: the root is yielded last
    return total


def directory_sizes(root: DirectoryEntry) -> List[int]:
    """
    Collect the size of every directory in post-order (root last).

    Args:
        root: Tree root.

    Returns:
        List[int]: One value per directory node, files excluded.
    """
    return [dir_size for _, dir_size in iter_directories(root)]


def iter_directories(root: DirectoryEntry) -> Iterator[Tuple[str, int]]:
    """
    Walk the tree in post-order, yielding `(path, size)` for each directory.

    Paths are slash-joined from the root name.
    """
    for path, _, dir_size in walk_directories(root):
        yield path, dir_size


def walk_directories(root: DirectoryEntry) -> Iterator[Tuple[str, DirectoryEntry, int]]:
    """
    Post-order walk yielding `(path, directory, size)` for every directory.

    Each directory is yielded after all of its subdirectories, siblings in
    discovery order. A directory's size is its own files plus the totals of
    its subdirectories, which have all been yielded by then.

    Args:
        root: Tree root.

    Yields:
        Tuple[str, DirectoryEntry, int]: Slash-joined path, node and total size.
    """
    # Frames are (directory, path, children_pushed)
    stack: List[Tuple[DirectoryEntry, str, bool]] = [(root, root.name, False)]
    totals: Dict[int, int] = {}

    while stack:
        directory, path, expanded = stack.pop()

        if not expanded:
            stack.append((directory, path, True))
            for sub in reversed(list(directory.iter_subdirectories())):
                stack.append((sub, _join(path, sub.name), False))
            continue

        dir_size = sum(f.size for f in directory.iter_files())
        for sub in directory.iter_subdirectories():
            dir_size += totals[id(sub)]
        totals[id(directory)] = dir_size
        yield path, directory, dir_size


def count_entries(root: DirectoryEntry) -> Tuple[int, int]:
    """Return `(directories, files)` counts for the whole tree, root included."""
    dirs, files = 0, 0
    pending = [root]
    while pending:
        directory = pending.pop()
        dirs += 1
        files += sum(1 for _ in directory.iter_files())
        pending.extend(directory.iter_subdirectories())
    return dirs, files


# -----------------------------------------------------------------------------
# AGGREGATE QUERIES
# -----------------------------------------------------------------------------

def sum_of_sizes_at_most(root: DirectoryEntry, limit: int) -> int:
    """
    Sum every directory size that does not exceed `limit`.

    Nested directories are counted independently, so the same bytes may
    contribute more than once.

    Raises:
        ValueError: If `limit` is negative.
    """
    if limit < 0:
        raise ValueError(f"Size limit must be non-negative, got {limit}.")
    return sum(dir_size for dir_size in directory_sizes(root) if dir_size <= limit)


def smallest_size_to_delete(root: DirectoryEntry, capacity: int, required_free: int) -> Optional[int]:
    """
    Find the smallest directory whose removal frees enough space.

    The deficit is `size(root) - (capacity - required_free)`. When it is
    zero or negative every directory qualifies.

    Args:
        root: Tree root.
        capacity: Total disk capacity in bytes.
        required_free: Free space that must be available afterwards.

    Returns:
        Optional[int]: Size of the chosen directory, or None if no directory
                       is large enough.
    """
    sizes = directory_sizes(root)
    used = sizes[-1]
    deficit = used - (capacity - required_free)
    logger.debug(f"Disk usage: used={used}, capacity={capacity}, required_free={required_free}, deficit={deficit}")

    candidates = [dir_size for dir_size in sizes if dir_size >= deficit]
    if not candidates:
        logger.debug(f"No directory frees at least {deficit} bytes.")
        return None
    return min(candidates)


def _join(parent: str, name: str) -> str:
    if not parent:
        return name
    if parent.endswith("/"):
        return f"{parent}{name}"
    return f"{parent}/{name}"
