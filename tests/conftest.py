from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared transcript and configuration fixtures.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
EXAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


@pytest.fixture
def example_transcript() -> str:
    """
    Return the canonical session transcript.

    Structure:
    /            48381165
      a          94853
        e        584
      d          24933642
    """
    return EXAMPLE_TRANSCRIPT


@pytest.fixture
def example_file(tmp_path) -> str:
    """Write the canonical transcript to disk and return its path."""
    path = tmp_path / "session.txt"
    path.write_text(EXAMPLE_TRANSCRIPT, encoding="utf-8")
    return str(path)


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys defined in 'termtree.domain.config'.
    """
    return {
        "input_path": "/tmp/session.txt",
        "size_limit": 100000,
        "disk_capacity": 70000000,
        "required_free": 30000000,
        "max_depth": 64,
        "strict": False,
        "generate_tree": False,
        "show_sizes": True,
    }
