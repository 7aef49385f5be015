from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of analysis settings as JSON in the user data
directory, with default fallback when the file is missing or corrupt.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from termtree.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_DISK_CAPACITY,
    DEFAULT_MAX_DEPTH,
    DEFAULT_REQUIRED_FREE,
    DEFAULT_SIZE_LIMIT,
)
from termtree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    """Resolve the absolute location of the persisted configuration."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": "",

        # Queries
        "size_limit": DEFAULT_SIZE_LIMIT,
        "disk_capacity": DEFAULT_DISK_CAPACITY,
        "required_free": DEFAULT_REQUIRED_FREE,

        # Parsing
        "max_depth": DEFAULT_MAX_DEPTH,
        "strict": False,

        # Rendering
        "generate_tree": False,
        "show_sizes": True,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Args:
        path: Optional override of the configuration file location.

    Returns:
        Dict[str, Any]: The loaded configuration, or defaults on failure.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration to disk with the current version stamp.

    Args:
        config: Configuration dictionary.
        path: Optional override of the configuration file location.
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION

    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
