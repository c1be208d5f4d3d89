from __future__ import annotations

"""
Configuration Domain Defaults.

Holds the canonical configuration schema for a generation run. Interface
layers merge their overrides onto these defaults before validation.
"""

from typing import Any, Dict, List

from include_folder.domain.languages import DEFAULT_LANGUAGE

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
MODE_AGGREGATOR = "aggregator"
MODE_SELECTIVE = "selective"
IGNORE_MODES: List[str] = [MODE_AGGREGATOR, MODE_SELECTIVE]

DEFAULT_MAX_DEPTH = 64
# Renderers and result serialization recurse per nesting level
MAX_DEPTH_CEILING = 256


def get_default_config() -> Dict[str, Any]:
    """
    Return a fresh copy of the default generation configuration.

    Keys:
        path: Directory to scan, relative to base_dir unless absolute.
        base_dir: Project root used to resolve relative paths ("" = cwd).
        language: Target language profile name.
        mode: Ignore-list policy (aggregator or selective).
        ignore: Extra file names excluded at every depth.
        extension: Accepted source extension ("" = profile default).
        sort_entries: Sort entries by name instead of raw listing order.
        max_depth: Deepest subdirectory level below path (0 = path itself only),
                   at most MAX_DEPTH_CEILING.
        format: Renderer name ("" = the language profile default).
        output_file: Optional destination for the rendered text.
    """
    return {
        "path": "",
        "base_dir": "",
        "language": DEFAULT_LANGUAGE,
        "mode": MODE_AGGREGATOR,
        "ignore": [],
        "extension": "",
        "sort_entries": False,
        "max_depth": DEFAULT_MAX_DEPTH,
        "format": "",
        "output_file": "",
    }
