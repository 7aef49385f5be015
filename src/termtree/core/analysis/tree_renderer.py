from __future__ import annotations

"""
Tree Renderer.

Converts a reconstructed DirectoryEntry into a visual ASCII representation,
annotating every node with its kind and size.
"""

from typing import Dict, List, Optional, Tuple

from termtree.core.analysis.aggregator import walk_directories
from termtree.domain.tree_models import DirectoryEntry, Entry, FileEntry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: DirectoryEntry, show_sizes: bool = True) -> List[str]:
    """
    Render the full tree, root line included.

    Args:
        root: Tree root.
        show_sizes: Append `(kind, size=N)` labels to each node.

    Returns:
        List[str]: Tree lines.
    """
    sizes = _directory_size_map(root) if show_sizes else None
    lines = [_label(root, sizes)]
    _render_children(root, lines, "", sizes)
    return lines


def render_tree_structure(
        directory: DirectoryEntry,
        lines: List[str],
        prefix: str = "",
        show_sizes: bool = True,
) -> None:
    """
    Append the children of a directory, and all their descendants, to `lines`.

    Uses standard ASCII connectors (├──, └──) and keeps the discovery order
    of children.

    Args:
        directory: Directory whose contents are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the first level of children.
        show_sizes: Append size labels.
    """
    sizes = _directory_size_map(directory) if show_sizes else None
    _render_children(directory, lines, prefix, sizes)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(
        directory: DirectoryEntry,
        lines: List[str],
        prefix: str,
        sizes: Optional[Dict[int, int]],
) -> None:
    # Frames are (node, prefix, is_last); pushed in reverse to pop in order
    stack: List[Tuple[Entry, str, bool]] = _frames(directory, prefix)

    while stack:
        node, node_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{node_prefix}{connector}{_label(node, sizes)}")

        if isinstance(node, DirectoryEntry):
            child_prefix = node_prefix + ("    " if is_last else "│   ")
            stack.extend(_frames(node, child_prefix))


def _frames(directory: DirectoryEntry, prefix: str) -> List[Tuple[Entry, str, bool]]:
    last = len(directory.children) - 1
    return [(node, prefix, i == last) for i, node in reversed(list(enumerate(directory.children)))]


def _directory_size_map(root: DirectoryEntry) -> Dict[int, int]:
    """Total size of every directory below `root`, keyed by node identity."""
    return {id(directory): dir_size for _, directory, dir_size in walk_directories(root)}


def _label(node: Entry, sizes: Optional[Dict[int, int]]) -> str:
    if sizes is None:
        return node.name
    if isinstance(node, FileEntry):
        return f"{node.name} (file, size={node.size})"
    return f"{node.name} (dir, size={sizes[id(node)]})"
