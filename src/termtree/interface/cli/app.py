from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted settings, CLI overrides), analysis execution and
result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from termtree.core.pipeline.engine import run_analysis
from termtree.core.pipeline.validator import validate_config
from termtree.domain.config import get_default_config, load_config, save_config
from termtree.domain.constants import STDIN_MARKER
from termtree.domain.report_models import AnalysisResult
from termtree.infra.fs import normalize_path
from termtree.infra.logging import LoggingConfig, configure_logging, get_logger
from termtree.infra.network import is_remote_source
from termtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INPUT_MISSING = 2
EXIT_NO_CANDIDATE = 3
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        save_config(clean_conf)

    source = clean_conf["input_path"]
    if not source:
        print("ERROR: No transcript given. Use -i/--input.", file=sys.stderr)
        return EXIT_INPUT_MISSING
    if not _source_exists(source):
        msg = f"Transcript not found: {source}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INPUT_MISSING

    try:
        result = run_analysis(clean_conf, tree_output_path=args.tree_file)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    if not result.ok:
        return EXIT_FAILURE
    if not result.has_candidate:
        return EXIT_NO_CANDIDATE
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.
    """
    out = dict(base)
    for k in get_default_config():
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out


def _source_exists(source: str) -> bool:
    if source == STDIN_MARKER or is_remote_source(source):
        return True
    return os.path.isfile(normalize_path(source, fallback=source))

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: AnalysisResult) -> None:
    """Print the analysis result as a terminal report."""
    if not result.ok:
        print(f"ERROR: [{result.error_kind}] {result.error}", file=sys.stderr)
        return

    if result.tree_lines:
        print("\n".join(result.tree_lines))
        print()

    print(f"Root directory: {result.root_name}")
    print(f"Directories: {result.directory_count}")
    print(f"Files: {result.file_count}")
    print(f"Total size: {result.total_size:,}")
    print(f"Sum of directories <= {result.size_limit:,}: {result.sum_at_most:,}")

    if result.has_candidate:
        print(f"Smallest directory to delete: {result.smallest_to_delete:,}")
    else:
        print(
            f"Smallest directory to delete: none frees {result.deficit:,} bytes",
            file=sys.stderr,
        )

    if result.tree_path:
        print(f"Tree saved to: {result.tree_path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
