from __future__ import annotations

"""
Transcript Parser.

Rebuilds the directory tree from command blocks by recursive descent: a
directory consumes its own `ls` output, then every following block as a
child directory until a `cd ..` (explicit ascend) or the end of input
(implicit ascend).
"""

import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional, Union

from termtree.core.parsing.tokenizer import (
    CommandBlock,
    DirListing,
    FileListing,
    LsCommand,
    split_blocks,
    tokenize,
)
from termtree.domain.constants import DEFAULT_MAX_DEPTH, MAX_DEPTH_CEILING, PARENT_DIR, ROOT_DIR
from termtree.domain.errors import MalformedLine, TraversalTooDeep, UnbalancedTraversal
from termtree.domain.tree_models import DirectoryEntry, Entry, FileEntry

logger = logging.getLogger(__name__)

# A listing slot is either a finished file or the announcement of a subdirectory
_Slot = Union[FileEntry, DirListing]


@dataclass(frozen=True)
class ParseOptions:
    """
    Parser behavior switches.

    Attributes:
        max_depth: Maximum directory nesting below the root.
        strict: Reject announced-but-never-entered directories and
                non-root directories left open at end of input.
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_transcript(
        text: str,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        strict: bool = False,
) -> DirectoryEntry:
    """
    Parse a full terminal session transcript into its root directory.

    Args:
        text: Raw transcript contents.
        max_depth: Recursion guard on directory nesting, at most
                   MAX_DEPTH_CEILING.
        strict: Enable strict structural validation.

    Returns:
        DirectoryEntry: The root of the reconstructed tree.

    Raises:
        MalformedLine: A line is not part of the grammar or is misplaced.
        UnbalancedTraversal: Missing root, ascend past root, or (strict)
                             unclosed or orphaned directories.
        ValueError: If `max_depth` is outside 1..MAX_DEPTH_CEILING.
    """
    if not 1 <= max_depth <= MAX_DEPTH_CEILING:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_CEILING}, got {max_depth}.")

    options = ParseOptions(max_depth=max_depth, strict=strict)
    blocks = split_blocks(tokenize(text))

    first = blocks[0]
    if first.target == PARENT_DIR:
        raise UnbalancedTraversal("cannot ascend above the root directory", first.cd.line_no)

    cursor = _BlockCursor(blocks)
    root = _parse_directory(cursor, depth=0, options=options)

    logger.debug(f"Parsed transcript: root '{root.name}' with {len(root.children)} entries.")
    return root


# -----------------------------------------------------------------------------
# RECURSIVE DESCENT
# -----------------------------------------------------------------------------

class _BlockCursor:
    """Forward-only position over the command blocks."""

    def __init__(self, blocks: List[CommandBlock]) -> None:
        self._blocks = blocks
        self._pos = 0

    def peek(self) -> Optional[CommandBlock]:
        if self._pos >= len(self._blocks):
            return None
        return self._blocks[self._pos]

    def advance(self) -> CommandBlock:
        block = self._blocks[self._pos]
        self._pos += 1
        return block


def _parse_directory(cursor: _BlockCursor, depth: int, options: ParseOptions) -> DirectoryEntry:
    """Consume one directory block and all of its descendants."""
    block = cursor.advance()
    name = block.target
    slots = _read_listing(block)
    visited: List[DirectoryEntry] = []

    while True:
        nxt = cursor.peek()

        if nxt is None:
            if options.strict and depth > 0:
                raise UnbalancedTraversal(
                    f"transcript ends while directory '{name}' is still open",
                    block.cd.line_no,
                )
            break

        if nxt.target == PARENT_DIR:
            if depth == 0:
                raise UnbalancedTraversal("cannot ascend above the root directory", nxt.cd.line_no)
            _expect_bare(nxt)
            cursor.advance()
            break

        if nxt.target == ROOT_DIR:
            _expect_bare(nxt)
            if depth > 0:
                # Unwind every open frame back to the root
                break
            cursor.advance()
            continue

        if depth + 1 > options.max_depth:
            raise TraversalTooDeep(
                f"directory nesting exceeds the limit of {options.max_depth}",
                nxt.cd.line_no,
            )
        visited.append(_parse_directory(cursor, depth + 1, options))

    children = _assemble_children(name, slots, visited, options)
    return DirectoryEntry(name=name, children=tuple(children))


def _read_listing(block: CommandBlock) -> List[_Slot]:
    """Turn a block's `ls` output into ordered listing slots."""
    slots: List[_Slot] = []
    listed = False

    for token in block.body:
        if isinstance(token, LsCommand):
            listed = True
            continue
        if not listed:
            raise MalformedLine("listing output before any '$ ls'", token.line_no)
        if isinstance(token, FileListing):
            slots.append(FileEntry(name=token.name, size=token.size))
        elif isinstance(token, DirListing):
            slots.append(token)

    return slots


def _expect_bare(block: CommandBlock) -> None:
    """Ascend blocks must not list anything."""
    if block.body:
        raise MalformedLine(
            f"listing after 'cd {block.target}' is not supported",
            block.body[0].line_no,
        )


def _assemble_children(
        name: str,
        slots: List[_Slot],
        visited: List[DirectoryEntry],
        options: ParseOptions,
) -> List[Entry]:
    """
    Merge listed files and visited subdirectories in discovery order.

    Announced directories take the position of their `dir` line; entered
    directories that were never announced follow the announced ones.
    """
    pending: Dict[str, Deque[DirectoryEntry]] = defaultdict(deque)
    for sub in visited:
        pending[sub.name].append(sub)

    children: List[Entry] = []
    for slot in slots:
        if isinstance(slot, FileEntry):
            children.append(slot)
            continue

        queue = pending.get(slot.name)
        if queue:
            children.append(queue.popleft())
            continue

        if options.strict:
            raise UnbalancedTraversal(
                f"directory '{slot.name}' announced in '{name}' but never entered",
                slot.line_no,
            )
        logger.debug(f"Directory '{slot.name}' in '{name}' was announced but never entered.")

    for sub in visited:
        queue = pending.get(sub.name)
        if queue and queue[0] is sub:
            children.append(queue.popleft())

    return children
