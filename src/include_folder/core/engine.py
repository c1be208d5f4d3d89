from __future__ import annotations

"""
Generation Orchestrator.

Coordinates one generation run:
1. Validates the configuration.
2. Resolves the target directory against the project base directory.
3. Scans and wraps the directory into a declaration tree.
4. Renders the tree with the configured strategy.
5. Optionally persists the rendered declarations.
"""

import logging
import os
from typing import Any, Dict, Optional

from include_folder.core.renderers import get_renderer
from include_folder.core.validator import validate_config
from include_folder.core.wrapper import include_folder
from include_folder.domain.errors import ScanError
from include_folder.domain.languages import get_profile
from include_folder.domain.result_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)
from include_folder.domain.tree_models import count_entries

logger = logging.getLogger(__name__)


def run_generation(config: Optional[Dict[str, Any]]) -> GenerationResult:
    """
    Execute a full generation run.

    Scan failures are converted into error results; they are never raised
    to the caller.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        GenerationResult: Object containing status, tree, rendered text and summary.
    """
    logger.info("Generation started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Resolution
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root_path = resolve_root(cfg.get("path", ""), cfg.get("base_dir", ""))
    profile = get_profile(cfg["language"])
    output_format = cfg["format"] or profile.default_format

    # -------------------------------------------------------------------------
    # 2) Scan & Wrap
    # -------------------------------------------------------------------------
    try:
        tree = include_folder(
            root_path,
            profile,
            mode=cfg["mode"],
            ignore=cfg["ignore"],
            extension=cfg["extension"] or None,
            sort_entries=cfg["sort_entries"],
            max_depth=cfg["max_depth"],
        )
    except ScanError as e:
        logger.error(f"Generation failed ({e.kind}): {e}")
        return create_error_result(str(e), cfg, root_path, error_kind=e.kind, error_path=e.path or "")

    # -------------------------------------------------------------------------
    # 3) Render & Persist
    # -------------------------------------------------------------------------
    rendered = get_renderer(output_format).render([tree])

    output_file = cfg.get("output_file", "")
    if output_file:
        try:
            _save_output(output_file, rendered)
        except OSError as e:
            msg = f"Failed to write output to '{output_file}': {e}"
            logger.error(msg)
            return create_error_result(msg, cfg, root_path, error_kind="output_error", error_path=output_file)

    namespaces, leaves = count_entries(tree.children)
    summary = {
        "identifier": tree.identifier,
        "namespaces": namespaces,
        "modules": leaves,
        "extension": cfg["extension"] or profile.extension,
        "sorted": cfg["sort_entries"],
        "format": output_format,
        "warnings": warnings,
    }

    logger.info(f"Generated '{tree.identifier}': {namespaces} namespaces, {leaves} modules.")
    return create_success_result(cfg, root_path, tree, rendered, output_file, summary)


def resolve_root(path: str, base_dir: str = "") -> str:
    """
    Resolve the target directory against the project base directory.

    Absolute paths are kept; relative ones are joined onto base_dir, or the
    current working directory when base_dir is empty.
    """
    expanded = os.path.expanduser(os.path.expandvars(path or "."))
    if os.path.isabs(expanded):
        return os.path.normpath(expanded)
    base = os.path.expanduser(base_dir) if base_dir else os.getcwd()
    return os.path.normpath(os.path.abspath(os.path.join(base, expanded)))


def _save_output(save_path: str, text: str) -> None:
    """Persist the rendered declarations, creating parent directories."""
    out_dir = os.path.dirname(os.path.abspath(save_path))
    os.makedirs(out_dir, exist_ok=True)
    with open(save_path, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    logger.info(f"Declarations saved to file: {save_path}")
