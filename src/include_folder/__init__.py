from __future__ import annotations

"""
include-folder: build-time generator of module declarations that mirror a
source directory tree.
"""

from .core.engine import run_generation
from .core.identifiers import module_identifier, sanitize
from .core.renderers import DeclarationRenderer, get_renderer
from .core.scanner import scan
from .core.wrapper import build_ignore_set, include_folder
from .domain.errors import (
    DepthLimitExceeded,
    InvalidIdentifier,
    NotADirectory,
    ScanError,
    Unreadable,
)
from .domain.languages import LanguageProfile, get_profile
from .domain.tree_models import DeclarationEntry, LeafModule, NestedNamespace

__version__ = "0.1.0"

__all__ = [
    "scan",
    "include_folder",
    "build_ignore_set",
    "sanitize",
    "module_identifier",
    "get_renderer",
    "DeclarationRenderer",
    "run_generation",
    "LanguageProfile",
    "get_profile",
    "LeafModule",
    "NestedNamespace",
    "DeclarationEntry",
    "ScanError",
    "NotADirectory",
    "Unreadable",
    "InvalidIdentifier",
    "DepthLimitExceeded",
]
