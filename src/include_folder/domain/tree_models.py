from __future__ import annotations

"""
Declaration Tree Data Models.

Provides the recursive type definitions produced by the directory scanner.
The tree is language-agnostic: it carries identifiers and nesting only, and
is turned into concrete declaration syntax by the renderers.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LeafModule:
    """
    Represents one discovered source file.

    Attributes:
        identifier: Sanitized module identifier derived from the file stem.
    """
    identifier: str


@dataclass(frozen=True)
class NestedNamespace:
    """
    Represents one discovered subdirectory that survived pruning.

    Attributes:
        identifier: Sanitized namespace identifier derived from the directory name.
        children: Ordered declarations found inside the directory.
    """
    identifier: str
    children: Tuple["DeclarationEntry", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


DeclarationEntry = Union[LeafModule, NestedNamespace]

IgnoreSet = FrozenSet[str]

# -----------------------------------------------------------------------------
# TREE HELPERS
# -----------------------------------------------------------------------------

def iter_leaf_paths(
        entries: Iterable[DeclarationEntry],
        prefix: Tuple[str, ...] = (),
) -> Iterator[Tuple[str, ...]]:
    """
    Yield the identifier path of every leaf module, depth-first, in tree order.

    Args:
        entries: Declarations to walk.
        prefix: Identifiers of the enclosing namespaces.

    Yields:
        Tuple[str, ...]: Identifier chain ending with the leaf identifier.
    """
    for entry in entries:
        if isinstance(entry, NestedNamespace):
            yield from iter_leaf_paths(entry.children, prefix + (entry.identifier,))
        else:
            yield prefix + (entry.identifier,)


def count_entries(entries: Iterable[DeclarationEntry]) -> Tuple[int, int]:
    """Return (namespaces, leaves) found in the given declarations."""
    namespaces = 0
    leaves = 0
    for entry in entries:
        if isinstance(entry, NestedNamespace):
            inner_ns, inner_leaves = count_entries(entry.children)
            namespaces += 1 + inner_ns
            leaves += inner_leaves
        else:
            leaves += 1
    return namespaces, leaves
