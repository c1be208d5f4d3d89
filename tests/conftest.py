from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A helper fixture that materializes directory trees from nested dicts.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Union

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

Layout = Dict[str, Union[str, "Layout"]]


def build_tree(root: Path, layout: Layout) -> Path:
    """
    Create files and directories under root.

    String values become file contents, dict values become subdirectories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        target = root / name
        if isinstance(value, dict):
            build_tree(target, value)
        else:
            target.write_text(value, encoding="utf-8")
    return root


def listing_order(path: Path) -> List[str]:
    """Return entry names in the raw order the filesystem lists them."""
    with os.scandir(path) as it:
        return [e.name for e in it]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """
    Return a factory building a directory tree inside tmp_path.

    Usage: make_tree({"code.rs": "", "nested": {"deep.rs": ""}}, name="root")
    """
    def _factory(layout: Layout, name: str = "root") -> Path:
        return build_tree(tmp_path / name, layout)

    return _factory


@pytest.fixture
def listing() -> Callable[[Path], List[str]]:
    """Expose listing_order to tests that assert raw filesystem ordering."""
    return listing_order


@pytest.fixture
def deep_tree(tmp_path: Path):
    """
    Build root/a/a/.../a/leaf.rs nested deeper than the interpreter recursion limit.

    Yields (root, depth). Created and removed with loops, since recursive
    helpers such as os.makedirs would themselves hit the limit.
    """
    depth = min(sys.getrecursionlimit() + 100, 1800)
    root = tmp_path / "deep"
    current = str(root)
    os.mkdir(current)
    for _ in range(depth):
        current = os.path.join(current, "a")
        os.mkdir(current)
    leaf = os.path.join(current, "leaf.rs")
    open(leaf, "w", encoding="utf-8").close()

    yield root, depth

    os.remove(leaf)
    while current != str(root):
        os.rmdir(current)
        current = os.path.dirname(current)
    os.rmdir(current)
