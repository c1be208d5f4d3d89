from __future__ import annotations

"""
Target Language Profiles.

A profile bundles everything the scanner and wrapper need to know about the
declaration language being generated: which files count as sources, which
names are reserved, and which file names play the aggregator or entry-point
role and must never become modules themselves.
"""

import keyword
from dataclasses import dataclass
from typing import Dict, FrozenSet, List

# -----------------------------------------------------------------------------
# PROFILE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LanguageProfile:
    """
    Immutable description of a target declaration language.

    Attributes:
        name: Registry key of the profile.
        extension: Source file extension without the leading dot.
        reserved_words: Identifiers that may not name a module.
        aggregator_file: File that aggregates a directory's modules.
        entry_point_files: File names with a special role in the language.
        default_format: Renderer used when the caller does not choose one.
    """
    name: str
    extension: str
    reserved_words: FrozenSet[str]
    aggregator_file: str
    entry_point_files: FrozenSet[str]
    default_format: str


# -----------------------------------------------------------------------------
# BUILT-IN PROFILES
# -----------------------------------------------------------------------------

_RUST_KEYWORDS: FrozenSet[str] = frozenset({
    # Strict
    "as", "async", "await", "break", "const", "continue", "crate", "dyn",
    "else", "enum", "extern", "false", "fn", "for", "if", "impl", "in",
    "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
    "self", "Self", "static", "struct", "super", "trait", "true", "type",
    "unsafe", "use", "where", "while",
    # Reserved for future use
    "abstract", "become", "box", "do", "final", "gen", "macro", "override",
    "priv", "try", "typeof", "unsized", "virtual", "yield",
    # Not a valid standalone identifier
    "_",
})

RUST = LanguageProfile(
    name="rust",
    extension="rs",
    reserved_words=_RUST_KEYWORDS,
    aggregator_file="mod.rs",
    entry_point_files=frozenset({"lib.rs", "main.rs", "mod.rs"}),
    default_format="block",
)

PYTHON = LanguageProfile(
    name="python",
    extension="py",
    reserved_words=frozenset(keyword.kwlist),
    aggregator_file="__init__.py",
    entry_point_files=frozenset({"__init__.py", "__main__.py"}),
    default_format="flat",
)

_PROFILES: Dict[str, LanguageProfile] = {
    RUST.name: RUST,
    PYTHON.name: PYTHON,
}

DEFAULT_LANGUAGE = RUST.name

# -----------------------------------------------------------------------------
# REGISTRY API
# -----------------------------------------------------------------------------

def get_profile(name: str) -> LanguageProfile:
    """
    Look up a language profile by name (case-insensitive).

    Raises:
        ValueError: If no profile is registered under that name.
    """
    key = (name or "").strip().lower()
    try:
        return _PROFILES[key]
    except KeyError:
        raise ValueError(
            f"Unknown language '{name}'. Available: {', '.join(available_languages())}"
        ) from None


def available_languages() -> List[str]:
    return sorted(_PROFILES)
