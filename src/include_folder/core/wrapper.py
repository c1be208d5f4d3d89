from __future__ import annotations

"""
Top-Level Folder Wrapping.

Non-recursive entry point that validates the requested directory, derives
one identifier from its final path segment and wraps the scanner output in a
single outer namespace. Also owns the ignore-list policies.
"""

import logging
import os
from typing import Iterable, Optional

from include_folder.core.identifiers import module_identifier
from include_folder.core.scanner import scan
from include_folder.domain.config import DEFAULT_MAX_DEPTH, MODE_AGGREGATOR, MODE_SELECTIVE
from include_folder.domain.errors import NotADirectory
from include_folder.domain.languages import LanguageProfile
from include_folder.domain.tree_models import IgnoreSet, NestedNamespace

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_ignore_set(
        profile: LanguageProfile,
        mode: str = MODE_AGGREGATOR,
        extra: Optional[Iterable[str]] = None,
) -> IgnoreSet:
    """
    Resolve the ignore set for a scan.

    Aggregator mode excludes only the profile's aggregator file. Selective
    mode excludes the caller-supplied names, falling back to the profile's
    entry-point files when none are given.

    Args:
        profile: Target language profile.
        mode: 'aggregator' or 'selective'.
        extra: Caller-supplied file names.

    Raises:
        ValueError: If the mode is unknown.
    """
    names = [n for n in (extra or []) if n]

    if mode == MODE_AGGREGATOR:
        return frozenset([profile.aggregator_file, *names])
    if mode == MODE_SELECTIVE:
        return frozenset(names) if names else profile.entry_point_files

    raise ValueError(f"Unknown ignore mode '{mode}'. Expected '{MODE_AGGREGATOR}' or '{MODE_SELECTIVE}'.")


def include_folder(
        path: str,
        profile: LanguageProfile,
        *,
        mode: str = MODE_AGGREGATOR,
        ignore: Optional[Iterable[str]] = None,
        extension: Optional[str] = None,
        sort_entries: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> NestedNamespace:
    """
    Scan a directory and wrap its declarations in one outer namespace.

    Args:
        path: Directory to include, already resolved against the project root.
        profile: Target language profile.
        mode: Ignore-list policy.
        ignore: Extra file names to exclude (see build_ignore_set).
        extension: Override of the profile's source extension.
        sort_entries: Sort entries by name instead of raw listing order.
        max_depth: Deepest subdirectory level allowed (0 = the directory only).

    Returns:
        NestedNamespace: Outer namespace named after the final path segment.

    Raises:
        NotADirectory: If the path is missing or not a directory.
        ScanError: Any failure raised by the scanner.
    """
    if not os.path.isdir(path):
        raise NotADirectory(path)

    top_identifier = module_identifier(path, profile.reserved_words)
    ignore_set = build_ignore_set(profile, mode, ignore)

    children = scan(
        path,
        ignore_set,
        extension or profile.extension,
        reserved=profile.reserved_words,
        sort_entries=sort_entries,
        max_depth=max_depth,
    )

    logger.debug(f"Wrapped {len(children)} top-level declarations into '{top_identifier}'")
    return NestedNamespace(top_identifier, tuple(children))
