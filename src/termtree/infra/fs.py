from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform data directory resolution, path normalization and
transcript/report file I/O. The transcript itself is only ever read; its
contents are never checked against the real disk.
"""

import logging
import os
import sys
from typing import List, Optional, Tuple

from termtree.domain.constants import STDIN_MARKER
from termtree.domain.errors import TranscriptSourceError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TermTree"
UNIX_APP_DIR_NAME = ".termtree"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TermTree
    - Linux/Mac: ~/.termtree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create data directory '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# TRANSCRIPT I/O
# -----------------------------------------------------------------------------

def is_stdin_source(source: str) -> bool:
    return source.strip() == STDIN_MARKER


def read_transcript_file(source: str) -> str:
    """
    Read a transcript from a local file, or from stdin when `source` is '-'.

    Args:
        source: File path or the stdin marker.

    Returns:
        str: Raw transcript contents.

    Raises:
        TranscriptSourceError: If the file cannot be read or decoded.
    """
    if is_stdin_source(source):
        logger.debug("Reading transcript from standard input.")
        return sys.stdin.read()

    path = normalize_path(source, fallback=source)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TranscriptSourceError(f"Cannot read transcript '{path}': {e}") from e

    logger.debug(f"Loaded transcript from {path} ({len(text)} chars).")
    return text


def write_lines(path: str, lines: List[str]) -> str:
    """
    Persist text lines to `path`, creating parent directories as needed.

    Returns:
        str: Absolute path written.

    Raises:
        OSError: If the destination cannot be created or written.
    """
    target = normalize_path(path, fallback=path)
    parent = os.path.dirname(target)
    if parent:
        ok, err = safe_mkdir(parent)
        if not ok:
            raise OSError(f"Cannot create directory '{parent}': {err}")

    with open(target, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    logger.info(f"Tree saved to file: {target}")
    return target
