from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (CLI overrides, persisted JSON) into
strictly typed parameters, injecting defaults for missing or invalid keys.
"""

import logging
from typing import Any, Dict, List, Tuple

from termtree.domain.config import get_default_config
from termtree.domain.constants import MAX_DEPTH_CEILING

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path"]
_BOOL_FIELDS = ["strict", "generate_tree", "show_sizes"]
_INT_FIELDS = ["size_limit", "disk_capacity", "required_free", "max_depth"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a type mismatch.
        ValueError: In strict mode, on an out-of-range value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in _INT_FIELDS:
        merged[field] = _as_non_negative_int(merged.get(field), defaults[field], field, warnings, strict)

    # Domain-specific ranges
    if merged["max_depth"] < 1 or merged["max_depth"] > MAX_DEPTH_CEILING:
        msg = f"Field 'max_depth' must be between 1 and {MAX_DEPTH_CEILING}, received {merged['max_depth']}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["max_depth"] = defaults["max_depth"]

    if merged["required_free"] > merged["disk_capacity"]:
        msg = "Field 'required_free' exceeds 'disk_capacity'."
        if strict:
            raise ValueError(msg)
        warnings.append(msg)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and strip string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce numeric input into a non-negative int."""
    if value is None:
        return fallback

    result: Any = None
    if isinstance(value, int) and not isinstance(value, bool):
        result = value
    elif not strict and isinstance(value, str) and value.strip().isdigit():
        result = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {result}.")

    if result is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if result < 0:
        msg = f"Invalid field '{field}': must be non-negative, received {result}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return result
