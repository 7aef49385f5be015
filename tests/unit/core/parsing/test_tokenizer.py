from __future__ import annotations

"""
Unit tests for the Transcript Tokenizer.

Verifies:
1. Classification of the four grammar forms.
2. Rejection of malformed lines with line numbers.
3. Grouping of tokens into cd blocks.
"""

import pytest

from termtree.core.parsing.tokenizer import (
    CdCommand,
    DirListing,
    FileListing,
    LsCommand,
    split_blocks,
    tokenize,
    tokenize_line,
)
from termtree.domain.errors import MalformedLine, UnbalancedTraversal

# -----------------------------------------------------------------------------
# LINE CLASSIFICATION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("$ cd /", CdCommand(line_no=1, target="/")),
    ("$ cd ..", CdCommand(line_no=1, target="..")),
    ("$ cd my dir", CdCommand(line_no=1, target="my dir")),
    ("$ ls", LsCommand(line_no=1)),
    ("dir a", DirListing(line_no=1, name="a")),
    ("14848514 b.txt", FileListing(line_no=1, size=14848514, name="b.txt")),
    ("0 empty", FileListing(line_no=1, size=0, name="empty")),
])
def test_tokenize_line_grammar_forms(raw, expected):
    """Each grammar form maps to its token type."""
    assert tokenize_line(raw, 1) == expected


@pytest.mark.parametrize("raw", [
    "$ go up",
    "$ cd",
    "$ lsx",
    "dir",
    "-5 negative.txt",
    "12abc weird",
    "size file",
    "123",
])
def test_tokenize_line_rejects_malformed(raw):
    """Lines outside the grammar raise MalformedLine."""
    with pytest.raises(MalformedLine):
        tokenize_line(raw, 7)


@pytest.mark.parametrize("raw", [
    "٣ f",
    "1٣ f",
    "１２ wide.txt",
])
def test_tokenize_line_rejects_non_ascii_digit_sizes(raw):
    """Sizes are ASCII decimal only; other Unicode digits are malformed."""
    with pytest.raises(MalformedLine) as excinfo:
        tokenize_line(raw, 3)

    assert excinfo.value.line == raw


def test_tokenize_reports_original_line_number():
    """Blank lines are skipped but still counted for error reporting."""
    text = "$ cd /\n\n$ ls\n$ go up\n"

    with pytest.raises(MalformedLine) as excinfo:
        tokenize(text)

    assert excinfo.value.line_no == 4
    assert excinfo.value.line == "$ go up"
    assert "line 4" in str(excinfo.value)


def test_tokenize_strips_crlf_and_blank_lines():
    """Windows line endings and blank lines do not produce tokens."""
    tokens = tokenize("$ cd /\r\n$ ls\r\n\r\n10 a.txt\r\n")

    assert [type(t) for t in tokens] == [CdCommand, LsCommand, FileListing]
    assert tokens[2].name == "a.txt"
    assert tokens[2].line_no == 4

# -----------------------------------------------------------------------------
# BLOCK SPLITTING
# -----------------------------------------------------------------------------

def test_split_blocks_groups_by_cd(example_transcript):
    """Every cd opens a new block containing the following tokens."""
    blocks = split_blocks(tokenize(example_transcript))

    assert [b.target for b in blocks] == ["/", "a", "e", "..", "..", "d"]
    assert isinstance(blocks[0].body[0], LsCommand)
    assert len(blocks[0].body) == 5
    assert blocks[3].body == []


def test_split_blocks_empty_transcript():
    """An empty token stream has no root."""
    with pytest.raises(UnbalancedTraversal):
        split_blocks([])


def test_split_blocks_requires_leading_cd():
    """Tokens before the first cd mean the root marker is missing."""
    with pytest.raises(UnbalancedTraversal) as excinfo:
        split_blocks(tokenize("$ ls\n10 a.txt\n"))

    assert excinfo.value.line_no == 1
