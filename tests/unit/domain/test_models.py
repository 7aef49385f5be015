from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Immutability of tree entries.
2. Result factories (success/error).
3. Error message formatting.
"""

import dataclasses

import pytest

from termtree.domain.errors import MalformedLine, TraversalTooDeep, UnbalancedTraversal
from termtree.domain.report_models import create_error_result, create_success_result
from termtree.domain.tree_models import DirectoryEntry, FileEntry


def test_file_entry_is_frozen():
    entry = FileEntry(name="a.txt", size=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.size = 20


def test_file_entry_rejects_negative_size():
    with pytest.raises(ValueError):
        FileEntry(name="a.txt", size=-1)


def test_directory_entry_iterators():
    sub = DirectoryEntry(name="sub")
    f = FileEntry(name="f", size=1)
    root = DirectoryEntry(name="/", children=(sub, f))

    assert list(root.iter_files()) == [f]
    assert list(root.iter_subdirectories()) == [sub]
    with pytest.raises(dataclasses.FrozenInstanceError):
        root.children = ()


def test_create_success_result_populates_fields(mock_config_dict):
    metrics = {
        "root_name": "/",
        "total_size": 100,
        "directory_count": 2,
        "file_count": 3,
        "sum_at_most": 40,
        "deficit": -5,
        "smallest_to_delete": 40,
    }

    result = create_success_result(mock_config_dict, metrics, tree_lines=["/"])

    assert result.ok is True
    assert result.source == mock_config_dict["input_path"]
    assert result.size_limit == 100000
    assert result.smallest_to_delete == 40
    assert result.tree_lines == ["/"]


def test_create_error_result_handles_defaults(mock_config_dict):
    result = create_error_result("boom", mock_config_dict, error_kind="MalformedLine")

    assert result.ok is False
    assert result.error == "boom"
    assert result.error_kind == "MalformedLine"
    assert result.smallest_to_delete is None
    assert result.tree_lines == []


def test_error_formatting():
    assert str(MalformedLine("unknown command", 3, "$ go up")) == "line 3: unknown command ('$ go up')"
    assert str(UnbalancedTraversal("no root")) == "no root"
    assert str(TraversalTooDeep("too deep", 9)) == "line 9: too deep"
    assert issubclass(TraversalTooDeep, UnbalancedTraversal)
