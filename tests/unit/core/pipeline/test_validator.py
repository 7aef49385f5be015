from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies type coercion, range checks, default injection and strict mode.
"""

import pytest

from termtree.core.pipeline.validator import validate_config
from termtree.domain.config import get_default_config
from termtree.domain.constants import MAX_DEPTH_CEILING


def test_validate_config_accepts_clean_input(mock_config_dict):
    clean, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert clean == mock_config_dict


def test_validate_config_injects_defaults():
    """Missing keys are filled from the domain defaults."""
    clean, warnings = validate_config({"input_path": "x.txt"})

    assert warnings == []
    assert clean["size_limit"] == get_default_config()["size_limit"]
    assert clean["input_path"] == "x.txt"


def test_validate_config_non_dict_falls_back():
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean == get_default_config()
    assert len(warnings) == 1


def test_validate_config_coerces_strings(mock_config_dict):
    """Numeric and boolean strings are converted with a warning."""
    mock_config_dict["size_limit"] = "5000"
    mock_config_dict["strict"] = "yes"

    clean, warnings = validate_config(mock_config_dict)

    assert clean["size_limit"] == 5000
    assert clean["strict"] is True
    assert len(warnings) == 2


@pytest.mark.parametrize("field, value", [
    ("size_limit", -1),
    ("disk_capacity", "lots"),
    ("required_free", 1.5),
    ("max_depth", True),
])
def test_validate_config_rejects_bad_ints(mock_config_dict, field, value):
    """Invalid integers fall back to defaults."""
    mock_config_dict[field] = value

    clean, warnings = validate_config(mock_config_dict)

    assert clean[field] == get_default_config()[field]
    assert any(field in w for w in warnings)


def test_validate_config_max_depth_range(mock_config_dict):
    mock_config_dict["max_depth"] = MAX_DEPTH_CEILING + 1

    clean, warnings = validate_config(mock_config_dict)

    assert clean["max_depth"] == get_default_config()["max_depth"]
    assert any("max_depth" in w for w in warnings)

    mock_config_dict["max_depth"] = MAX_DEPTH_CEILING
    clean, warnings = validate_config(mock_config_dict)

    assert clean["max_depth"] == MAX_DEPTH_CEILING
    assert warnings == []


def test_validate_config_required_free_above_capacity(mock_config_dict):
    """The value is kept but the inconsistency is reported."""
    mock_config_dict["required_free"] = mock_config_dict["disk_capacity"] + 1

    clean, warnings = validate_config(mock_config_dict)

    assert clean["required_free"] == mock_config_dict["disk_capacity"] + 1
    assert any("required_free" in w for w in warnings)


def test_validate_config_strict_mode_raises(mock_config_dict):
    mock_config_dict["size_limit"] = "5000"
    with pytest.raises(TypeError):
        validate_config(mock_config_dict, strict=True)

    mock_config_dict["size_limit"] = -5
    with pytest.raises(ValueError):
        validate_config(mock_config_dict, strict=True)
