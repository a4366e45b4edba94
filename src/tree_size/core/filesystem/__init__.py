"""Filesystem operations module for entry classification and directory walking."""

from __future__ import annotations

from .classifier import EntryKind, classify_mode, classify_type_code
from .entry import Entry, SizeMode, WalkCounters
from .exceptions import DirectoryListingError, MetadataError, WalkError
from .walker import DirectoryWalker, WalkReport, WalkStrategy

__all__ = [
    "DirectoryListingError",
    "DirectoryWalker",
    "Entry",
    "EntryKind",
    "MetadataError",
    "SizeMode",
    "WalkCounters",
    "WalkError",
    "WalkReport",
    "WalkStrategy",
    "classify_mode",
    "classify_type_code",
]
