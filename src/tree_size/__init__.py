"""tree-size - compute aggregate disk usage of a directory tree.

This package classifies filesystem entries and sums their sizes using
either a shallow-recursive or a deep single-pass traversal.
"""

from tree_size.core.filesystem import (
    DirectoryWalker,
    Entry,
    EntryKind,
    SizeMode,
    WalkCounters,
    WalkReport,
    WalkStrategy,
)

__all__ = [
    "DirectoryWalker",
    "Entry",
    "EntryKind",
    "SizeMode",
    "WalkCounters",
    "WalkReport",
    "WalkStrategy",
]
