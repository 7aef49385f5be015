from __future__ import annotations

"""
Domain Constants.

Centralizes versioning, query defaults and transcript grammar markers.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# QUERY DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_SIZE_LIMIT = 100_000
DEFAULT_DISK_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE = 30_000_000

# The parser recurses once per nesting level; the ceiling keeps that below
# the interpreter recursion limit. Every other traversal is iterative.
DEFAULT_MAX_DEPTH = 256
MAX_DEPTH_CEILING = 512

# -----------------------------------------------------------------------------
# TRANSCRIPT GRAMMAR
# -----------------------------------------------------------------------------
CD_PREFIX = "$ cd "
LS_COMMAND = "$ ls"
DIR_PREFIX = "dir "
PARENT_DIR = ".."
ROOT_DIR = "/"
STDIN_MARKER = "-"
