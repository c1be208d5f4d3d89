from __future__ import annotations

"""
Generation Result Data Models.

Defines the result object and factory functions used to communicate the
outcome of a generation run between the engine and interface layers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from include_folder.domain.tree_models import NestedNamespace

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Unified result object of a generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Stable error category (see ScanError.kind).
        error_path: Filesystem path the failure refers to.
        root_path: Absolute directory that was scanned.
        language: Target language profile name.
        mode: Ignore-list policy applied.
        tree: Wrapped declaration tree (None on failure).
        rendered: Declaration text produced by the renderer.
        output_file: Path the rendered text was written to, if any.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    root_path: str
    language: str
    mode: str

    error_kind: str = ""
    error_path: str = ""
    tree: Optional[NestedNamespace] = None
    rendered: str = ""
    output_file: str = ""
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        root_path: str,
        error_kind: str = "",
        error_path: str = "",
) -> GenerationResult:
    """Create a failed generation result instance."""
    return GenerationResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        error_path=error_path,
        root_path=root_path,
        language=cfg.get("language", ""),
        mode=cfg.get("mode", ""),
    )


def create_success_result(
        cfg: Dict[str, Any],
        root_path: str,
        tree: NestedNamespace,
        rendered: str,
        output_file: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a successful generation result instance.

    Args:
        cfg: Final configuration used during execution.
        root_path: Absolute scanned directory.
        tree: The wrapped declaration tree.
        rendered: Renderer output.
        output_file: Destination the output was persisted to.
        summary_extra: Execution metrics.

    Returns:
        GenerationResult: An immutable success result object.
    """
    return GenerationResult(
        ok=True,
        error="",
        root_path=root_path,
        language=cfg.get("language", ""),
        mode=cfg.get("mode", ""),
        tree=tree,
        rendered=rendered,
        output_file=output_file,
        summary=summary_extra or {},
    )
