from __future__ import annotations

"""
Analysis Result Data Models.

Defines the immutable result handed from the analysis engine to the
interface layer, plus the factories that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of a complete transcript analysis.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Exception class name in case of failure.
        source: Transcript source (path, URL or '-').
        root_name: Name of the reconstructed root directory.
        total_size: Size of the root directory.
        directory_count: Number of directories, root included.
        file_count: Number of files.
        size_limit: Threshold used for the small-directory sum.
        sum_at_most: Sum of directory sizes not exceeding `size_limit`.
        disk_capacity: Capacity used for the deletion query.
        required_free: Free space required by the deletion query.
        deficit: Bytes that must be freed (may be zero or negative).
        smallest_to_delete: Chosen directory size, or None if no candidate.
        tree_lines: Rendered tree, if requested.
        tree_path: Path the tree was saved to, if requested.
    """
    ok: bool
    error: str
    source: str

    error_kind: str = ""

    root_name: str = ""
    total_size: int = 0
    directory_count: int = 0
    file_count: int = 0

    size_limit: int = 0
    sum_at_most: int = 0

    disk_capacity: int = 0
    required_free: int = 0
    deficit: int = 0
    smallest_to_delete: Optional[int] = None

    tree_lines: List[str] = field(default_factory=list)
    tree_path: str = ""

    @property
    def has_candidate(self) -> bool:
        return self.smallest_to_delete is not None

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, cfg: Dict[str, Any], error_kind: str = "") -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        error_kind: Exception class name.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        source=cfg.get("input_path", ""),
        size_limit=cfg.get("size_limit", 0),
        disk_capacity=cfg.get("disk_capacity", 0),
        required_free=cfg.get("required_free", 0),
    )


def create_success_result(
        cfg: Dict[str, Any],
        metrics: Dict[str, Any],
        tree_lines: Optional[List[str]] = None,
        tree_path: str = "",
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        cfg: Final configuration used during execution.
        metrics: Values computed by the aggregator.
        tree_lines: Rendered tree content.
        tree_path: Path to the saved tree file.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        source=cfg.get("input_path", ""),
        root_name=metrics.get("root_name", ""),
        total_size=metrics.get("total_size", 0),
        directory_count=metrics.get("directory_count", 0),
        file_count=metrics.get("file_count", 0),
        size_limit=cfg.get("size_limit", 0),
        sum_at_most=metrics.get("sum_at_most", 0),
        disk_capacity=cfg.get("disk_capacity", 0),
        required_free=cfg.get("required_free", 0),
        deficit=metrics.get("deficit", 0),
        smallest_to_delete=metrics.get("smallest_to_delete"),
        tree_lines=tree_lines or [],
        tree_path=tree_path,
    )
