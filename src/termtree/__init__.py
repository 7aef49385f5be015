from __future__ import annotations

"""
TermTree.

Rebuilds a directory tree from a `cd`/`ls` terminal transcript and answers
aggregate size queries over it.
"""

from termtree.core.analysis.aggregator import (
    directory_sizes,
    iter_directories,
    size,
    smallest_size_to_delete,
    sum_of_sizes_at_most,
)
from termtree.core.parsing.parser import parse_transcript
from termtree.core.parsing.tokenizer import tokenize
from termtree.domain.errors import (
    MalformedLine,
    TranscriptError,
    TranscriptSourceError,
    TraversalTooDeep,
    UnbalancedTraversal,
)
from termtree.domain.tree_models import DirectoryEntry, Entry, FileEntry

__version__ = "1.0.0"

__all__ = [
    "DirectoryEntry",
    "Entry",
    "FileEntry",
    "MalformedLine",
    "TranscriptError",
    "TranscriptSourceError",
    "TraversalTooDeep",
    "UnbalancedTraversal",
    "directory_sizes",
    "iter_directories",
    "parse_transcript",
    "size",
    "smallest_size_to_delete",
    "sum_of_sizes_at_most",
    "tokenize",
]
