from __future__ import annotations

"""
Unit tests for the Declaration Tree Scanner.

Verifies ignore-set filtering at every depth, extension matching, transitive
pruning of empty subtrees, listing-order preservation, identifier collisions
and fail-fast error propagation.
"""

import os
from pathlib import Path

import pytest

from include_folder.core import scanner
from include_folder.core.scanner import scan
from include_folder.domain.errors import DepthLimitExceeded, InvalidIdentifier, Unreadable
from include_folder.domain.languages import RUST
from include_folder.domain.tree_models import LeafModule, NestedNamespace

MOD_RS = frozenset({"mod.rs"})


def test_scan_skips_ignored_file(make_tree) -> None:
    """A source file and an ignored aggregator yield exactly one leaf."""
    root = make_tree({"code.rs": "pub fn a() {}", "mod.rs": "// mod.rs"})

    assert scan(str(root), MOD_RS, "rs") == [LeafModule("code")]


def test_scan_nested_directory_follows_listing_order(make_tree, listing) -> None:
    """Subdirectories become namespaces, in raw filesystem listing order."""
    root = make_tree({"code.rs": "", "nested": {"deep.rs": ""}})

    by_name = {
        "code.rs": LeafModule("code"),
        "nested": NestedNamespace("nested", (LeafModule("deep"),)),
    }
    expected = [by_name[name] for name in listing(root)]

    assert scan(str(root), MOD_RS, "rs") == expected


def test_scan_only_ignored_file_returns_empty(make_tree) -> None:
    root = make_tree({"mod.rs": ""})

    assert scan(str(root), MOD_RS, "rs") == []


def test_scan_tree_of_only_ignored_names_is_empty(make_tree) -> None:
    """Ignored names at every depth make the whole result empty, not an error."""
    root = make_tree({
        "mod.rs": "",
        "a": {"mod.rs": "", "b": {"mod.rs": ""}},
    })

    assert scan(str(root), MOD_RS, "rs") == []


def test_scan_ignores_names_at_every_depth(make_tree) -> None:
    root = make_tree({"sub": {"mod.rs": "", "inner.rs": ""}})

    assert scan(str(root), MOD_RS, "rs") == [NestedNamespace("sub", (LeafModule("inner"),))]


def test_scan_ignored_directory_is_not_traversed(make_tree) -> None:
    root = make_tree({"target": {"build.rs": ""}, "lib.rs": ""})

    assert scan(str(root), frozenset({"target"}), "rs") == [LeafModule("lib")]


def test_scan_prunes_empty_subtrees_transitively(make_tree) -> None:
    """An ancestor whose descendants contribute nothing produces no namespace."""
    root = make_tree({
        "docs": {"readme.md": "", "deeper": {"notes.txt": "", "deepest": {}}},
        "main.rs": "",
    })

    assert scan(str(root), MOD_RS, "rs") == [LeafModule("main")]


def test_scan_extension_matching_is_exact(make_tree) -> None:
    """Other extensions, upper-case variants and dotfiles are skipped silently."""
    root = make_tree({
        "keep.rs": "",
        "Upper.RS": "",
        "notes.txt": "",
        ".rs": "",
        "archive.rs.bak": "",
        "noext": "",
    })

    assert scan(str(root), MOD_RS, "rs") == [LeafModule("keep")]


def test_scan_accepts_extension_with_leading_dot(make_tree) -> None:
    root = make_tree({"keep.rs": ""})

    assert scan(str(root), MOD_RS, ".rs") == [LeafModule("keep")]


def test_scan_sanitizes_identifiers(make_tree) -> None:
    root = make_tree({"my.thing.rs": "", "2d-math": {"vec.rs": ""}}, name="root")

    result = scan(str(root), MOD_RS, "rs", sort_entries=True)

    assert result == [
        NestedNamespace("_2d_math", (LeafModule("vec"),)),
        LeafModule("my_thing"),
    ]


def test_scan_is_idempotent(make_tree) -> None:
    root = make_tree({
        "a.rs": "",
        "b": {"c.rs": "", "d": {"e.rs": ""}},
        "f": {"mod.rs": ""},
    })

    first = scan(str(root), MOD_RS, "rs")
    second = scan(str(root), MOD_RS, "rs")

    assert first == second


def test_scan_preserves_listing_order_without_sorting(make_tree, monkeypatch) -> None:
    """The scanner must not reorder entries on its own."""
    root = make_tree({"a.rs": "", "b.rs": "", "c": {"x.rs": ""}})
    real_list = scanner._list_entries

    def reversed_listing(directory: str):
        return sorted(real_list(directory), key=lambda e: e.name, reverse=True)

    monkeypatch.setattr(scanner, "_list_entries", reversed_listing)

    assert scan(str(root), MOD_RS, "rs") == [
        NestedNamespace("c", (LeafModule("x"),)),
        LeafModule("b"),
        LeafModule("a"),
    ]
    assert scan(str(root), MOD_RS, "rs", sort_entries=True) == [
        LeafModule("a"),
        LeafModule("b"),
        NestedNamespace("c", (LeafModule("x"),)),
    ]


def test_scan_missing_root_is_unreadable(tmp_path: Path) -> None:
    missing = tmp_path / "non_existent_directory_for_test"

    with pytest.raises(Unreadable) as exc_info:
        scan(str(missing), MOD_RS, "rs")

    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_scan_unreadable_subdirectory_aborts_whole_scan(make_tree, monkeypatch) -> None:
    """A failure deep in the tree is fatal and reports the failing path."""
    root = make_tree({"ok.rs": "", "locked": {"inner": {"deep.rs": ""}}})
    locked_inner = os.path.join(str(root), "locked", "inner")
    real_scandir = os.scandir

    def failing_scandir(path):
        if os.fspath(path) == locked_inner:
            raise PermissionError(13, "Permission denied", locked_inner)
        return real_scandir(path)

    monkeypatch.setattr(scanner.os, "scandir", failing_scandir)

    with pytest.raises(Unreadable) as exc_info:
        scan(str(root), MOD_RS, "rs")

    assert exc_info.value.path == locked_inner
    assert locked_inner in str(exc_info.value)


class _BrokenEntry:
    """Directory entry whose type lookup fails, like a stat() on a vanished file."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.name = os.path.basename(path)

    def is_dir(self) -> bool:
        raise PermissionError(13, "Permission denied", self.path)

    def is_file(self) -> bool:
        raise PermissionError(13, "Permission denied", self.path)


def test_scan_entry_type_failure_is_unreadable(make_tree, monkeypatch) -> None:
    root = make_tree({"ok.rs": ""})
    broken_path = os.path.join(str(root), "broken")
    real_list = scanner._list_entries

    def listing_with_broken_entry(directory: str):
        return list(real_list(directory)) + [_BrokenEntry(broken_path)]

    monkeypatch.setattr(scanner, "_list_entries", listing_with_broken_entry)

    with pytest.raises(Unreadable) as exc_info:
        scan(str(root), MOD_RS, "rs")

    assert exc_info.value.path == broken_path
    assert isinstance(exc_info.value.cause, PermissionError)


def test_scan_reserved_word_is_rejected_with_path(make_tree) -> None:
    root = make_tree({"type.rs": ""})

    with pytest.raises(InvalidIdentifier) as exc_info:
        scan(str(root), MOD_RS, "rs", reserved=RUST.reserved_words)

    assert exc_info.value.original == "type"
    assert exc_info.value.path == os.path.join(str(root), "type.rs")


def test_scan_reserved_name_on_pruned_directory_is_ignored(make_tree) -> None:
    """Names are only validated for entries that produce a declaration."""
    root = make_tree({"fn": {"readme.md": ""}, "ok.rs": ""})

    assert scan(str(root), MOD_RS, "rs", reserved=RUST.reserved_words) == [LeafModule("ok")]


def test_scan_colliding_identifiers_are_rejected(make_tree) -> None:
    root = make_tree({"a-b.rs": "", "a_b.rs": ""})

    with pytest.raises(InvalidIdentifier) as exc_info:
        scan(str(root), MOD_RS, "rs")

    assert "collides" in exc_info.value.reason


def test_scan_file_and_directory_with_same_identifier_collide(make_tree) -> None:
    root = make_tree({"util.rs": "", "util": {"helpers.rs": ""}})

    with pytest.raises(InvalidIdentifier):
        scan(str(root), MOD_RS, "rs")


def test_scan_pruned_directory_does_not_collide(make_tree) -> None:
    root = make_tree({"util.rs": "", "util": {"data.json": ""}})

    assert scan(str(root), MOD_RS, "rs") == [LeafModule("util")]


def test_scan_depth_limit(make_tree) -> None:
    root = make_tree({"a": {"b": {"c": {"leaf.rs": ""}}}})

    with pytest.raises(DepthLimitExceeded) as exc_info:
        scan(str(root), MOD_RS, "rs", max_depth=2)

    assert exc_info.value.limit == 2
    assert exc_info.value.path == os.path.join(str(root), "a", "b", "c")

    result = scan(str(root), MOD_RS, "rs", max_depth=3)
    assert result == [
        NestedNamespace("a", (NestedNamespace("b", (NestedNamespace("c", (LeafModule("leaf"),)),)),)),
    ]


def test_scan_zero_depth_scans_root_only(make_tree) -> None:
    """max_depth=0 accepts the directory's own files and rejects any subdirectory."""
    flat = make_tree({"a.rs": "", "b.rs": "", "mod.rs": ""}, name="flat")
    nested = make_tree({"a.rs": "", "sub": {"b.rs": ""}}, name="nested")

    assert scan(str(flat), MOD_RS, "rs", max_depth=0, sort_entries=True) == [LeafModule("a"), LeafModule("b")]

    with pytest.raises(DepthLimitExceeded) as exc_info:
        scan(str(nested), MOD_RS, "rs", max_depth=0)

    assert exc_info.value.limit == 0
    assert exc_info.value.path == os.path.join(str(nested), "sub")


def test_scan_zero_depth_allows_ignored_subdirectory(make_tree) -> None:
    root = make_tree({"lib.rs": "", "target": {"out.rs": ""}})

    assert scan(str(root), frozenset({"target"}), "rs", max_depth=0) == [LeafModule("lib")]


def test_scan_negative_depth_is_rejected(make_tree) -> None:
    root = make_tree({"lib.rs": ""})

    with pytest.raises(ValueError):
        scan(str(root), MOD_RS, "rs", max_depth=-1)


def test_scan_tree_deeper_than_recursion_limit(deep_tree) -> None:
    """Nesting depth is bounded by max_depth, not by the interpreter stack."""
    root, depth = deep_tree

    result = scan(str(root), MOD_RS, "rs", max_depth=depth)

    levels = 0
    entries = result
    while entries and isinstance(entries[0], NestedNamespace):
        assert len(entries) == 1
        assert entries[0].identifier == "a"
        levels += 1
        entries = entries[0].children
    assert levels == depth
    assert entries == (LeafModule("leaf"),)


def test_scan_deep_tree_over_limit_raises_depth_error(deep_tree) -> None:
    root, depth = deep_tree

    with pytest.raises(DepthLimitExceeded) as exc_info:
        scan(str(root), MOD_RS, "rs", max_depth=depth - 1)

    assert exc_info.value.limit == depth - 1
    assert exc_info.value.path.endswith(os.sep + "a")



@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_scan_symlink_cycle_hits_depth_limit(make_tree) -> None:
    root = make_tree({"main.rs": ""})
    try:
        os.symlink(str(root), str(root / "loop"), target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    with pytest.raises(DepthLimitExceeded):
        scan(str(root), MOD_RS, "rs", max_depth=5)
