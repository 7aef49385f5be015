from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the TermTree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="termtree",
        description="Rebuild a directory tree from a cd/ls terminal transcript and report sizes.",
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file, '-' for stdin, or an http(s) URL.",
    )

    # --- Queries ---
    p.add_argument(
        "--limit",
        dest="size_limit",
        type=int,
        default=None,
        help="Sum sizes of directories at most this large.",
    )
    p.add_argument(
        "--capacity",
        dest="disk_capacity",
        type=int,
        default=None,
        help="Total disk capacity in bytes.",
    )
    p.add_argument(
        "--required-free",
        dest="required_free",
        type=int,
        default=None,
        help="Free space required after deletion, in bytes.",
    )

    # --- Parsing ---
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum directory nesting accepted.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Reject never-entered directories and unclosed traversals.",
    )

    # --- Tree Output ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Print the reconstructed tree.",
    )
    p.add_argument(
        "--tree-file",
        dest="tree_file",
        default=None,
        help="Save the reconstructed tree to this file.",
    )
    p.add_argument(
        "--no-sizes",
        action="store_true",
        help="Omit size labels from the tree.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for future runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Convert parsed arguments into configuration overrides.

    Options that were not given map to None so they do not mask saved values.
    Boolean flags only override when set.

    Args:
        args: Parsed argparse namespace.

    Returns:
        Dict[str, Any]: Configuration keys to override.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "size_limit": args.size_limit,
        "disk_capacity": args.disk_capacity,
        "required_free": args.required_free,
        "max_depth": args.max_depth,
        "strict": True if args.strict else None,
        "generate_tree": True if args.tree else None,
        "show_sizes": False if args.no_sizes else None,
    }
    return overrides
