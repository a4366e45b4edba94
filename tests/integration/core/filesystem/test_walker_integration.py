"""Integration tests running both walk strategies over realistic trees."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from tree_size.core.filesystem import DirectoryWalker, SizeMode, WalkCounters, WalkStrategy

MakeTree = Callable[..., tuple[Path, int]]

DEPTH_THREE_LAYOUT = {
    "top.txt": "t" * 100,
    "top.bin": b"\x00" * 2048,
    "a": {
        "a.txt": "a" * 300,
        "b": {
            "b.txt": "b" * 70,
            "c": {"c.txt": "c" * 9, "empty": {}},
        },
    },
    "x": {"x.log": "x" * 4096},
}


def directory_sizes(root: Path) -> int:
    """Sum of st_size over every directory below root."""
    return sum((dirpath / name).lstat().st_size for dirpath, dirnames, _ in root.walk() for name in dirnames)


@pytest.mark.integration
class TestStrategyAgreement:
    """Both strategies measure the same tree."""

    def test_depth_three_tree_totals_match(self, make_tree: MakeTree) -> None:
        """With directory sizes excluded, both strategies return the file total."""
        root, expected = make_tree(DEPTH_THREE_LAYOUT)
        walker = DirectoryWalker()

        shallow = walker.walk(root, WalkStrategy.SHALLOW)
        deep = walker.walk(root, WalkStrategy.DEEP)

        assert shallow.total_bytes == deep.total_bytes == expected

    def test_counting_directory_sizes_adds_directory_nodes(self, make_tree: MakeTree) -> None:
        """Opting in to directory sizes adds exactly their st_size to the deep total."""
        root, expected = make_tree(DEPTH_THREE_LAYOUT)
        walker = DirectoryWalker(count_directory_sizes=True)

        shallow_total = walker.total_size_of_directory(root)
        deep_total = walker.total_size_of_directory_with_deep_recursion(root)

        assert shallow_total == expected
        assert deep_total == expected + directory_sizes(root)

    def test_disk_usage_mode_matches_across_strategies(self, make_tree: MakeTree) -> None:
        """Allocated-block totals agree between strategies."""
        root, _ = make_tree(DEPTH_THREE_LAYOUT)
        walker = DirectoryWalker(size_mode=SizeMode.DISK_USAGE)

        expected = sum(
            (dirpath / name).lstat().st_blocks * 512 for dirpath, _, filenames in root.walk() for name in filenames
        )

        assert walker.total_size_of_directory(root) == expected
        assert walker.total_size_of_directory_with_deep_recursion(root) == expected

    def test_visit_counts_match(self, make_tree: MakeTree) -> None:
        """Both strategies visit every descendant exactly once."""
        root, _ = make_tree(DEPTH_THREE_LAYOUT)
        walker = DirectoryWalker()
        shallow_counters = WalkCounters()
        deep_counters = WalkCounters()

        _ = walker.total_size_of_directory(root, shallow_counters)
        _ = walker.total_size_of_directory_with_deep_recursion(root, deep_counters)

        assert shallow_counters.entries_visited == deep_counters.entries_visited == 11
        assert shallow_counters.directories_listed == deep_counters.directories_listed == 6


@pytest.mark.integration
class TestSpecialEntries:
    """Trees containing links and special files."""

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
    def test_named_pipe_is_counted_without_blocking(self, make_tree: MakeTree) -> None:
        """A FIFO's metadata is read without opening it."""
        root, expected = make_tree({"data": "d" * 12})
        os.mkfifo(root / "pipe")
        walker = DirectoryWalker()

        assert walker.total_size_of_directory(root) == expected
        assert walker.total_size_of_directory_with_deep_recursion(root) == expected

    def test_link_loop_terminates(self, make_tree: MakeTree) -> None:
        """A symlink pointing at its own ancestor is never followed."""
        root, expected = make_tree({"sub": {"f": "f" * 8}})
        loop = root / "sub" / "back"
        loop.symlink_to(root)
        walker = DirectoryWalker()

        link_size = loop.lstat().st_size

        assert walker.total_size_of_directory(root) == expected + link_size
        assert walker.total_size_of_directory_with_deep_recursion(root) == expected + link_size
