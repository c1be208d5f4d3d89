from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from include_folder.core.renderers import available_formats
from include_folder.domain.config import IGNORE_MODES
from include_folder.domain.languages import available_languages

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the include-folder CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="include-folder",
        description="Generate nested module declarations mirroring a source directory.",
    )

    # --- Path Management ---
    p.add_argument(
        "path",
        help="Directory to include, relative to --base-dir unless absolute.",
    )
    p.add_argument(
        "--base-dir",
        dest="base_dir",
        default=None,
        help="Project root used to resolve a relative path (default: current directory).",
    )

    # --- Discovery ---
    p.add_argument(
        "-l", "--language",
        choices=available_languages(),
        default=None,
        help="Target declaration language (default: rust).",
    )
    p.add_argument(
        "-m", "--mode",
        choices=IGNORE_MODES,
        default=None,
        help="Ignore policy: the aggregator file only, or a selective list of entry-point files.",
    )
    p.add_argument(
        "--ignore",
        default=None,
        help="Comma-separated file names excluded at every depth.",
    )
    p.add_argument(
        "--ext",
        dest="extension",
        default=None,
        help="Accepted source extension (default: the language's own).",
    )
    p.add_argument(
        "--sorted",
        dest="sort_entries",
        action="store_true",
        help="Sort entries by name instead of keeping filesystem listing order.",
    )
    p.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Deepest subdirectory level to scan (0 = the folder itself only; default 64, at most 256).",
    )

    # --- Output ---
    p.add_argument(
        "-f", "--format",
        choices=available_formats(),
        default=None,
        help="Declaration syntax to emit (default: block for rust, flat for python).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Write declarations to this file instead of stdout.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full result object as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress at INFO level.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["path"] = args.path
    overrides["base_dir"] = args.base_dir
    overrides["language"] = args.language
    overrides["mode"] = args.mode
    overrides["extension"] = args.extension
    overrides["max_depth"] = args.max_depth
    overrides["format"] = args.format
    overrides["output_file"] = args.output_file

    if args.ignore:
        overrides["ignore"] = _split_csv(args.ignore)
    if args.sort_entries:
        overrides["sort_entries"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
