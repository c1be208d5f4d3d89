from __future__ import annotations

"""
Configuration Validation Service.

Normalizes a generation configuration before the engine touches the
filesystem: paths become plain strings, names are checked against the
language, mode and format registries, the ignore list is cleaned and the
depth limit is kept within what the renderers can nest.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from include_folder.core.renderers import available_formats
from include_folder.domain.config import IGNORE_MODES, MAX_DEPTH_CEILING, get_default_config
from include_folder.domain.languages import available_languages

logger = logging.getLogger(__name__)

_PATH_FIELDS = ("path", "base_dir", "output_file")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a generation configuration.

    In lenient mode every rejected value is replaced by its default and
    reported in the warning list; in strict mode it raises instead.

    Args:
        config: Raw configuration mapping (defaults are filled in).
        strict: Raise on the first invalid value.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and the
                                          warnings collected on the way.

    Raises:
        TypeError: (strict) A value has the wrong type.
        ValueError: (strict) A value is outside its allowed range or choices.
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
    report = _Reporter(warnings, strict)

    for name in _PATH_FIELDS:
        merged[name] = _path_field(merged[name], name, report)

    merged["language"] = _choice(merged["language"], available_languages(), defaults["language"], "language", report)
    merged["mode"] = _choice(merged["mode"], IGNORE_MODES, defaults["mode"], "mode", report)
    # "" defers to the language profile's own format
    merged["format"] = _choice(merged["format"], [""] + available_formats(), "", "format", report)

    merged["extension"] = _extension(merged["extension"], report)
    merged["ignore"] = _ignore_names(merged["ignore"], report)
    merged["sort_entries"] = _sort_flag(merged["sort_entries"], report)
    merged["max_depth"] = _depth_limit(merged["max_depth"], defaults["max_depth"], report)

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

class _Reporter:
    """Collects warnings, or raises them as exceptions in strict mode."""

    def __init__(self, warnings: List[str], strict: bool) -> None:
        self.warnings = warnings
        self.strict = strict

    def reject(self, msg: str, fallback: Any, exc_type: type = ValueError) -> Any:
        if self.strict:
            raise exc_type(msg)
        self.warnings.append(f"{msg} Using {fallback!r}.")
        return fallback


def _path_field(value: Any, name: str, report: _Reporter) -> str:
    """Accept str or os.PathLike; None and blanks become ""."""
    if value is None:
        return ""
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    if isinstance(value, str):
        return value.strip()
    return report.reject(f"'{name}' must be a path, got {type(value).__name__}.", "", TypeError)


def _choice(value: Any, choices: List[str], fallback: str, name: str, report: _Reporter) -> str:
    key = value.strip().lower() if isinstance(value, str) else value
    if key in choices:
        return key
    shown = ", ".join(c for c in choices if c)
    return report.reject(f"'{name}' must be one of {shown}, got {value!r}.", fallback)


def _extension(value: Any, report: _Reporter) -> str:
    """Store the extension without its leading dot ("" keeps the profile default)."""
    if value is None:
        return ""
    if not isinstance(value, str):
        return report.reject(f"'extension' must be a string, got {type(value).__name__}.", "", TypeError)
    return value.strip().lstrip(".")


def _ignore_names(value: Any, report: _Reporter) -> List[str]:
    """File names to ignore: a list of names, or one comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple, set, frozenset)):
        return report.reject(f"'ignore' must be a list of file names, got {type(value).__name__}.", [], TypeError)

    names: List[str] = []
    for item in value:
        if not isinstance(item, str):
            report.reject(f"'ignore' entry {item!r} is not a file name.", "nothing", TypeError)
            continue
        name = item.strip()
        if name and name not in names:
            names.append(name)
    return names


def _sort_flag(value: Any, report: _Reporter) -> bool:
    if isinstance(value, bool):
        return value
    return report.reject(f"'sort_entries' must be true or false, got {value!r}.", False, TypeError)


def _depth_limit(value: Any, fallback: int, report: _Reporter) -> int:
    """A subdirectory depth between 0 and MAX_DEPTH_CEILING."""
    if isinstance(value, bool) or not isinstance(value, int):
        return report.reject(f"'max_depth' must be an integer, got {value!r}.", fallback, TypeError)
    if value < 0:
        return report.reject(f"'max_depth' must be non-negative, got {value}.", fallback)
    if value > MAX_DEPTH_CEILING:
        return report.reject(f"'max_depth' {value} is above the ceiling of {MAX_DEPTH_CEILING}.", MAX_DEPTH_CEILING)
    return value
