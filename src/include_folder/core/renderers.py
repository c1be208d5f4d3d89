from __future__ import annotations

"""
Declaration Renderers.

Strategy-based conversion of the language-agnostic declaration tree into
text a host compiler or build step can consume. Renderers never touch the
filesystem; they only see the tree.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Type

from include_folder.domain.tree_models import DeclarationEntry, NestedNamespace, iter_leaf_paths

# -----------------------------------------------------------------------------
# STRATEGY INTERFACE
# -----------------------------------------------------------------------------

class DeclarationRenderer(ABC):
    """
    Abstract base class for declaration syntax strategies.
    """

    name: str = ""

    @abstractmethod
    def render(self, entries: Sequence[DeclarationEntry]) -> str:
        """
        Render a sequence of declarations.

        Args:
            entries: Ordered declarations to render.

        Returns:
            str: The rendered text ("" for an empty sequence).
        """
        pass

# -----------------------------------------------------------------------------
# CONCRETE STRATEGIES
# -----------------------------------------------------------------------------

class BlockRenderer(DeclarationRenderer):
    """
    Nested Rust module blocks, the default for the rust profile:

        pub mod outer {
            pub mod leaf;
        }
    """

    name = "block"

    def __init__(self, indent: str = "    ", visibility: str = "pub") -> None:
        self._indent = indent
        self._prefix = f"{visibility} mod " if visibility else "mod "

    def render(self, entries: Sequence[DeclarationEntry]) -> str:
        lines: List[str] = []
        self._render_into(entries, lines, depth=0)
        return "\n".join(lines)

    def _render_into(self, entries: Sequence[DeclarationEntry], lines: List[str], depth: int) -> None:
        pad = self._indent * depth
        for entry in entries:
            if isinstance(entry, NestedNamespace):
                if not entry.children:
                    lines.append(f"{pad}{self._prefix}{entry.identifier} {{}}")
                    continue
                lines.append(f"{pad}{self._prefix}{entry.identifier} {{")
                self._render_into(entry.children, lines, depth + 1)
                lines.append(f"{pad}}}")
            else:
                lines.append(f"{pad}{self._prefix}{entry.identifier};")


class FlatRenderer(DeclarationRenderer):
    """One fully qualified module path per leaf, in tree order."""

    name = "flat"

    def __init__(self, separator: str = ".") -> None:
        self._separator = separator

    def render(self, entries: Sequence[DeclarationEntry]) -> str:
        return "\n".join(self._separator.join(p) for p in iter_leaf_paths(entries))


class JsonRenderer(DeclarationRenderer):
    """Machine-readable JSON document of the tree."""

    name = "json"

    def render(self, entries: Sequence[DeclarationEntry]) -> str:
        return json.dumps([_to_dict(e) for e in entries], ensure_ascii=False, indent=2)


def _to_dict(entry: DeclarationEntry) -> Dict[str, Any]:
    if isinstance(entry, NestedNamespace):
        return {
            "kind": "namespace",
            "identifier": entry.identifier,
            "children": [_to_dict(c) for c in entry.children],
        }
    return {"kind": "module", "identifier": entry.identifier}

# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------

_RENDERERS: Dict[str, Type[DeclarationRenderer]] = {
    BlockRenderer.name: BlockRenderer,
    FlatRenderer.name: FlatRenderer,
    JsonRenderer.name: JsonRenderer,
}


def get_renderer(name: str) -> DeclarationRenderer:
    """
    Instantiate a renderer by registry name.

    Raises:
        ValueError: If no renderer is registered under that name.
    """
    key = (name or "").strip().lower()
    renderer_cls = _RENDERERS.get(key)
    if renderer_cls is None:
        raise ValueError(f"Unknown output format '{name}'. Available: {', '.join(available_formats())}")
    return renderer_cls()


def available_formats() -> List[str]:
    return sorted(_RENDERERS)
