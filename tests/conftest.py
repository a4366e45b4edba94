"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from tree_size.core.filesystem import DirectoryWalker

# Nested mapping: str values are file contents, mapping values are subdirectories
TreeLayout = Mapping[str, "str | bytes | TreeLayout"]


def build_tree(root: Path, layout: TreeLayout) -> int:
    """Materialize ``layout`` under ``root`` and return the total file bytes written."""
    total = 0
    for name, node in layout.items():
        target = root / name
        if isinstance(node, bytes):
            _ = target.write_bytes(node)
            total += len(node)
        elif isinstance(node, str):
            _ = target.write_text(node)
            total += len(node.encode())
        else:
            target.mkdir()
            total += build_tree(target, node)
    return total


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], tuple[Path, int]]:
    """Factory building a directory tree inside a fresh temporary directory."""

    def _make(layout: TreeLayout) -> tuple[Path, int]:
        root = tmp_path / "tree"
        root.mkdir()
        return root, build_tree(root, layout)

    return _make


@pytest.fixture
def walker() -> DirectoryWalker:
    """Default walker: apparent sizes, directory nodes contribute zero."""
    return DirectoryWalker()
