"""Transient filesystem entries and per-walk instrumentation counters."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .classifier import EntryKind, classify_mode
from .exceptions import MetadataError

logger = logging.getLogger(__name__)


class SizeMode(str, Enum):
    """Enumeration for size calculation modes."""

    APPARENT = "apparent"  # Apparent size (file content size)
    DISK_USAGE = "disk_usage"  # Actual disk usage (considering filesystem blocks)


@dataclass(slots=True)
class WalkCounters:
    """Instrumentation counters owned by a single walk.

    Created per walk and passed explicitly to every entry the walk builds,
    so concurrent walks never share state.
    """

    size_queries: int = 0
    kind_queries: int = 0
    entries_visited: int = 0
    directories_listed: int = 0
    unreadable_directories: int = 0


class Entry:
    """One filesystem node discovered during a walk.

    ``kind`` and ``size`` are recomputed from ``lstat`` on every access and
    never cached, so two reads may disagree if the filesystem changes in
    between. Symbolic links are never followed.
    """

    __slots__ = ("path", "size_mode", "counters")

    def __init__(
        self,
        path: Path,
        *,
        size_mode: SizeMode = SizeMode.APPARENT,
        counters: WalkCounters | None = None,
    ) -> None:
        self.path: Path = path
        self.size_mode: SizeMode = size_mode
        self.counters: WalkCounters | None = counters

    def stat(self) -> os.stat_result:
        """Fetch raw metadata for this entry without following symlinks.

        Raises:
            MetadataError: If the metadata lookup fails
        """
        try:
            return self.path.lstat()
        except OSError as exc:
            msg = f"Cannot read metadata for {self.path}: {exc}"
            raise MetadataError(msg, self.path, {"errno": exc.errno}) from exc

    @property
    def kind(self) -> EntryKind:
        """Logical kind of this entry, ``UNKNOWN`` if metadata is unavailable."""
        if self.counters is not None:
            self.counters.kind_queries += 1
        try:
            return classify_mode(self.stat().st_mode)
        except MetadataError:
            return EntryKind.UNKNOWN

    @property
    def size(self) -> int | None:
        """Byte size, or None for directories and failed lookups."""
        try:
            return self._size_from_stat(self._query_size_stat(), include_directories=False)
        except MetadataError as exc:
            logger.debug("Size lookup failed", extra={"path": str(self.path), "error": str(exc)})
            return None

    def fetch_size(self, *, include_directories: bool = False) -> int:
        """Fetch the byte size, propagating lookup failures to the caller.

        Args:
            include_directories: Report the raw ``st_size`` of directory nodes
                instead of 0

        Returns:
            Size in bytes according to the entry's size mode

        Raises:
            MetadataError: If the metadata lookup fails
        """
        size = self._size_from_stat(self._query_size_stat(), include_directories=include_directories)
        return size or 0

    def _query_size_stat(self) -> os.stat_result:
        if self.counters is not None:
            self.counters.size_queries += 1
        return self.stat()

    def _size_from_stat(self, stat_result: os.stat_result, *, include_directories: bool) -> int | None:
        if classify_mode(stat_result.st_mode) is EntryKind.DIRECTORY and not include_directories:
            return None
        if self.size_mode == SizeMode.APPARENT:
            return stat_result.st_size
        # st_blocks is in 512-byte blocks on most systems
        return stat_result.st_blocks * 512

    def __repr__(self) -> str:
        return f"Entry(path={self.path!r}, size_mode={self.size_mode.value!r})"

    def __str__(self) -> str:
        return f"Entry: {self.path} size = {self.size} kind = {self.kind.value}"
