from __future__ import annotations

"""
Core analysis pipeline.

Coordinates the whole workflow:
1. Validates configuration.
2. Loads the transcript (local file, stdin or HTTP).
3. Parses it into an immutable tree.
4. Computes sizes and answers the aggregate queries.
5. Optionally renders and saves the tree.
"""

import logging
from typing import Any, Dict, List, Optional

from termtree.core.analysis.aggregator import (
    count_entries,
    size,
    smallest_size_to_delete,
    sum_of_sizes_at_most,
)
from termtree.core.analysis.tree_renderer import render_tree
from termtree.core.parsing.parser import parse_transcript
from termtree.core.pipeline.validator import validate_config
from termtree.domain.errors import TranscriptError, TranscriptSourceError
from termtree.domain.report_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from termtree.infra.fs import read_transcript_file, write_lines
from termtree.infra.network import fetch_transcript, is_remote_source

logger = logging.getLogger(__name__)


def load_transcript(source: str) -> str:
    """
    Resolve a transcript source to its text.

    Raises:
        TranscriptSourceError: If the source cannot be read.
    """
    if is_remote_source(source):
        return fetch_transcript(source)
    return read_transcript_file(source)


def run_analysis(
        config: Optional[Dict[str, Any]],
        *,
        text: Optional[str] = None,
        tree_output_path: Optional[str] = None,
) -> AnalysisResult:
    """
    Execute the full analysis for one transcript.

    Transcript and source errors never escape: they are logged and returned
    as a failed result, and no partial tree is reported.

    Args:
        config: The configuration dictionary (raw or partial).
        text: Transcript contents; when omitted it is loaded from
              `config['input_path']`.
        tree_output_path: Optional path where the rendered tree is saved.

    Returns:
        AnalysisResult: Status plus computed metrics.
    """
    logger.info("Analysis started.")

    # -------------------------------------------------------------------------
    # 1) Config
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 2) Load & Parse
    # -------------------------------------------------------------------------
    try:
        if text is None:
            text = load_transcript(cfg["input_path"])
        root = parse_transcript(text, max_depth=cfg["max_depth"], strict=cfg["strict"])
    except (TranscriptError, TranscriptSourceError) as e:
        logger.error(f"Analysis aborted: {e}")
        return create_error_result(str(e), cfg, error_kind=type(e).__name__)

    # -------------------------------------------------------------------------
    # 3) Aggregate
    # -------------------------------------------------------------------------
    total_size = size(root)
    directory_count, file_count = count_entries(root)
    deficit = total_size - (cfg["disk_capacity"] - cfg["required_free"])

    metrics: Dict[str, Any] = {
        "root_name": root.name,
        "total_size": total_size,
        "directory_count": directory_count,
        "file_count": file_count,
        "sum_at_most": sum_of_sizes_at_most(root, cfg["size_limit"]),
        "deficit": deficit,
        "smallest_to_delete": smallest_size_to_delete(
            root, cfg["disk_capacity"], cfg["required_free"]
        ),
    }

    if metrics["smallest_to_delete"] is None:
        logger.warning(f"No directory is large enough to free {deficit} bytes.")

    # -------------------------------------------------------------------------
    # 4) Render
    # -------------------------------------------------------------------------
    tree_lines: List[str] = []
    tree_path = ""
    if cfg["generate_tree"] or tree_output_path:
        tree_lines = render_tree(root, show_sizes=cfg["show_sizes"])

    if tree_output_path:
        try:
            tree_path = write_lines(tree_output_path, tree_lines)
        except OSError as e:
            msg = f"Failed to save tree to '{tree_output_path}': {e}"
            logger.error(msg)
            return create_error_result(msg, cfg, error_kind=type(e).__name__)

    logger.info(
        f"Analysis finished: {directory_count} directories, {file_count} files, "
        f"{total_size} bytes."
    )
    return create_success_result(cfg, metrics, tree_lines=tree_lines, tree_path=tree_path)
