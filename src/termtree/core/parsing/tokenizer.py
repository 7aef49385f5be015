from __future__ import annotations

"""
Transcript Tokenizer.

Classifies each line of a terminal session transcript into one of the four
grammar forms and groups the resulting tokens into command blocks, one per
`cd` invocation.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Union

from termtree.domain.constants import CD_PREFIX, DIR_PREFIX, LS_COMMAND
from termtree.domain.errors import MalformedLine, UnbalancedTraversal

logger = logging.getLogger(__name__)

_SIZE_RX = re.compile(r"^([0-9]+) (\S.*)$")

# -----------------------------------------------------------------------------
# TOKEN MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CdCommand:
    """`$ cd <target>`"""
    line_no: int
    target: str


@dataclass(frozen=True)
class LsCommand:
    """`$ ls`"""
    line_no: int


@dataclass(frozen=True)
class DirListing:
    """`dir <name>` ls output line."""
    line_no: int
    name: str


@dataclass(frozen=True)
class FileListing:
    """`<size> <name>` ls output line."""
    line_no: int
    size: int
    name: str


Token = Union[CdCommand, LsCommand, DirListing, FileListing]


@dataclass
class CommandBlock:
    """
    A single `cd` invocation and every token up to the next `cd`.

    Attributes:
        cd: The opening change-directory command.
        body: Following `ls` commands and their output, in order.
    """
    cd: CdCommand
    body: List[Token] = field(default_factory=list)

    @property
    def target(self) -> str:
        return self.cd.target


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tokenize_line(raw: str, line_no: int) -> Token:
    """
    Classify a single stripped, non-blank transcript line.

    Raises:
        MalformedLine: If the line matches none of the grammar forms.
    """
    if raw.startswith(CD_PREFIX):
        target = raw[len(CD_PREFIX):].strip()
        if not target:
            raise MalformedLine("cd without a target directory", line_no, raw)
        return CdCommand(line_no=line_no, target=target)

    if raw == LS_COMMAND:
        return LsCommand(line_no=line_no)

    if raw.startswith("$"):
        raise MalformedLine("unknown command", line_no, raw)

    if raw.startswith(DIR_PREFIX):
        name = raw[len(DIR_PREFIX):].strip()
        if not name:
            raise MalformedLine("dir listing without a name", line_no, raw)
        return DirListing(line_no=line_no, name=name)

    match = _SIZE_RX.match(raw)
    if match is None:
        raise MalformedLine("expected '<size> <name>' listing", line_no, raw)

    return FileListing(line_no=line_no, size=int(match.group(1)), name=match.group(2))


def tokenize(text: str) -> List[Token]:
    """
    Convert a raw transcript into a flat token stream.

    Blank lines are skipped; line numbers refer to the original text.

    Args:
        text: Full transcript contents.

    Returns:
        List[Token]: Tokens in transcript order.

    Raises:
        MalformedLine: On the first line that fails classification.
    """
    tokens: List[Token] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        raw = line.strip()
        if not raw:
            continue
        tokens.append(tokenize_line(raw, line_no))

    logger.debug(f"Tokenized transcript into {len(tokens)} tokens.")
    return tokens


def split_blocks(tokens: List[Token]) -> List[CommandBlock]:
    """
    Group tokens into command blocks, one per `cd` invocation.

    Raises:
        UnbalancedTraversal: If the stream is empty or does not open with `cd`.
    """
    if not tokens:
        raise UnbalancedTraversal("transcript is empty, no root directory")

    first = tokens[0]
    if not isinstance(first, CdCommand):
        raise UnbalancedTraversal("transcript must start with a root 'cd' command", first.line_no)

    blocks: List[CommandBlock] = []
    for token in tokens:
        if isinstance(token, CdCommand):
            blocks.append(CommandBlock(cd=token))
        else:
            blocks[-1].body.append(token)

    return blocks
