from __future__ import annotations

"""
Declaration Tree Scanner.

Walks a directory depth-first and builds the ordered, nested declaration
tree that mirrors it. Entries named in the ignore set are invisible at every
depth, directories that end up without declarations are pruned, and any
unreadable directory aborts the whole scan.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from include_folder.core.identifiers import sanitize
from include_folder.domain.config import DEFAULT_MAX_DEPTH
from include_folder.domain.errors import DepthLimitExceeded, InvalidIdentifier, Unreadable
from include_folder.domain.tree_models import DeclarationEntry, LeafModule, NestedNamespace

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan(
        root: str,
        ignore: Iterable[str],
        extension: str,
        *,
        reserved: Iterable[str] = (),
        sort_entries: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[DeclarationEntry]:
    """
    Build the declaration tree for the contents of a directory.

    The root itself is never wrapped; the returned list holds the
    declarations of its immediate entries. Traversal uses an explicit
    work-stack, so the interpreter stack does not grow with directory depth.

    Args:
        root: Directory to scan.
        ignore: Exact entry names excluded at every depth.
        extension: Accepted source extension, matched case-sensitively.
        reserved: Reserved words of the target language.
        sort_entries: Process entries sorted by name instead of listing order.
        max_depth: Deepest subdirectory level allowed below root. 0 scans the
                   root only; any subdirectory then exceeds the limit.

    Returns:
        List[DeclarationEntry]: Declarations in traversal order (may be empty).

    Raises:
        ValueError: If max_depth is negative.
        Unreadable: A directory listing or entry stat failed.
        InvalidIdentifier: A name could not become a unique identifier.
        DepthLimitExceeded: The tree is nested deeper than max_depth.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    ignore_set = frozenset(ignore)
    reserved_set = frozenset(reserved)
    suffix = "." + extension.lstrip(".")

    logger.debug(f"Scanning '{root}' for '*{suffix}' (ignoring: {sorted(ignore_set)})")

    stack = [_open_frame(os.fspath(root), "", 0, sort_entries)]

    while True:
        frame = stack[-1]

        # Directory exhausted: fold it into its parent, or finish at the root
        if frame.cursor == len(frame.entries):
            stack.pop()
            if not stack:
                return frame.declarations
            parent = stack[-1]
            if not frame.declarations:
                logger.debug(f"Pruned empty subtree: {frame.path}")
                continue
            identifier = sanitize(frame.name, reserved_set, path=frame.path)
            _claim(parent.seen, identifier, frame.name, frame.path)
            parent.declarations.append(NestedNamespace(identifier, tuple(frame.declarations)))
            continue

        entry = frame.entries[frame.cursor]
        frame.cursor += 1

        if entry.name in ignore_set:
            continue

        if _is_dir(entry):
            depth = frame.depth + 1
            if depth > max_depth:
                raise DepthLimitExceeded(entry.path, max_depth)
            stack.append(_open_frame(entry.path, entry.name, depth, sort_entries))

        elif _is_file(entry):
            stem = _source_stem(entry.name, suffix)
            if not stem:
                continue
            identifier = sanitize(stem, reserved_set, path=entry.path)
            _claim(frame.seen, identifier, entry.name, entry.path)
            frame.declarations.append(LeafModule(identifier))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (TRAVERSAL)
# -----------------------------------------------------------------------------

@dataclass
class _Frame:
    """One directory on the work-stack, with its pending entries and output."""
    path: str
    name: str
    depth: int
    entries: List[os.DirEntry]
    cursor: int = 0
    declarations: List[DeclarationEntry] = field(default_factory=list)
    seen: Dict[str, str] = field(default_factory=dict)


def _open_frame(path: str, name: str, depth: int, sort_entries: bool) -> _Frame:
    entries = _list_entries(path)
    if sort_entries:
        entries.sort(key=lambda e: e.name)
    return _Frame(path, name, depth, entries)


def _list_entries(directory: str) -> List[os.DirEntry]:
    """List the immediate entries of a directory in raw filesystem order."""
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        logger.debug(f"Unable to list directory '{directory}': {e}")
        raise Unreadable(directory, e) from e


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError as e:
        raise Unreadable(entry.path, e) from e


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError as e:
        raise Unreadable(entry.path, e) from e


def _source_stem(file_name: str, suffix: str) -> str:
    """
    Return the module stem of an accepted source file, or "" to skip it.

    Dotfiles such as '.rs' have no extension and therefore no stem.
    """
    stem, ext = os.path.splitext(file_name)
    if ext != suffix:
        return ""
    return stem


def _claim(seen: Dict[str, str], identifier: str, name: str, path: str) -> None:
    """Register an identifier for the current directory, rejecting duplicates."""
    previous = seen.get(identifier)
    if previous is not None:
        raise InvalidIdentifier(
            name, path, f"'{identifier}' collides with the declaration derived from '{previous}'"
        )
    seen[identifier] = name
