from __future__ import annotations

"""
Scan Error Hierarchy.

Every failure of the scanner is fatal to the enclosing scan and is raised as
one of the exceptions below. Each carries the offending path so interface
layers can build a precise diagnostic.
"""

from typing import Optional


class ScanError(Exception):
    """Base class for all declaration-tree generation failures."""

    kind: str = "scan_error"

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class NotADirectory(ScanError):
    """The provided root does not resolve to a directory."""

    kind = "not_a_directory"

    def __init__(self, path: str) -> None:
        super().__init__(f"Path '{path}' is not a valid dir", path)


class Unreadable(ScanError):
    """A directory listing failed at some depth."""

    kind = "unreadable"

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"Failed to read directory '{path}': {cause}", path)
        self.cause = cause


class InvalidIdentifier(ScanError):
    """A filesystem name could not be turned into a usable identifier."""

    kind = "invalid_identifier"

    def __init__(self, original: str, path: Optional[str] = None, reason: str = "") -> None:
        location = f" at '{path}'" if path else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid identifier derived from '{original}'{location}{detail}", path)
        self.original = original
        self.reason = reason


class DepthLimitExceeded(ScanError):
    """The directory tree is nested deeper than the configured limit."""

    kind = "depth_limit_exceeded"

    def __init__(self, path: str, limit: int) -> None:
        super().__init__(f"Directory '{path}' exceeds the maximum scan depth of {limit}", path)
        self.limit = limit
