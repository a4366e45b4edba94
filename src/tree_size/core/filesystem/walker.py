"""Directory walker computing aggregate disk usage of a directory tree.

Two traversal strategies are provided. They differ in how they handle
failures:

- Shallow-recursive (``total_size_of_directory``): lists one level at a time
  and recurses into subdirectories. A directory that cannot be listed is
  logged and contributes zero; the walk always returns a total.
- Deep single-pass (``total_size_of_directory_with_deep_recursion``): consumes
  one lazy enumeration of every descendant. Any metadata failure aborts the
  whole walk with ``MetadataError``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .classifier import EntryKind, classify_mode
from .entry import Entry, SizeMode, WalkCounters
from .exceptions import DirectoryListingError, MetadataError

logger = logging.getLogger(__name__)


class WalkStrategy(str, Enum):
    """Enumeration for directory walking strategies."""

    SHALLOW = "shallow"
    DEEP = "deep"


@dataclass(slots=True, frozen=True)
class WalkReport:
    """Outcome of a single timed walk."""

    root: Path
    strategy: WalkStrategy
    total_bytes: int
    counters: WalkCounters
    elapsed_seconds: float


class DirectoryWalker:
    """Walker summing entry sizes below a root directory.

    Stateless between calls: every method takes an optional ``WalkCounters``
    to record instrumentation into, so one walker can serve any number of
    independent walks.
    """

    def __init__(
        self,
        *,
        size_mode: SizeMode = SizeMode.APPARENT,
        count_directory_sizes: bool = False,
    ) -> None:
        """Initialize the directory walker.

        Args:
            size_mode: Size calculation mode (apparent size vs disk usage)
            count_directory_sizes: In the deep strategy, add the raw size the
                OS reports for directory nodes instead of treating it as zero
        """
        self.size_mode: SizeMode = size_mode
        self.count_directory_sizes: bool = count_directory_sizes

    def list_directory(self, path: Path, counters: WalkCounters | None = None) -> list[Entry]:
        """Fetch the immediate children of a directory, non-recursively.

        Args:
            path: Directory to list
            counters: Counters to attach to the returned entries

        Returns:
            One entry per child, in OS order

        Raises:
            DirectoryListingError: If the directory cannot be listed
        """
        try:
            children = list(path.iterdir())
        except OSError as exc:
            msg = f"Could not read files at {path}: {exc}"
            raise DirectoryListingError(msg, path, {"errno": exc.errno}) from exc

        if counters is not None:
            counters.directories_listed += 1
        return [self._make_entry(child, counters) for child in children]

    def total_size_of_directory(self, path: Path, counters: WalkCounters | None = None) -> int:
        """Total size of a directory tree using the shallow-recursive strategy.

        Args:
            path: Root directory
            counters: Optional counters to record instrumentation into

        Returns:
            Sum of the sizes of all non-directory entries below ``path``;
            unreadable directories contribute zero
        """
        try:
            entries = self.list_directory(path, counters)
        except DirectoryListingError as exc:
            logger.warning(
                "Cannot list directory, counting it as empty",
                extra={"path": str(path), "error": str(exc.__cause__ or exc)},
            )
            if counters is not None:
                counters.unreadable_directories += 1
            return 0

        size = 0
        for entry in entries:
            if counters is not None:
                counters.entries_visited += 1
            if entry.kind is EntryKind.DIRECTORY:
                size += self.total_size_of_directory(entry.path, counters)
            else:
                size += entry.size or 0
        return size

    def iter_entries(self, path: Path, counters: WalkCounters | None = None) -> Iterator[Entry]:
        """Lazily enumerate every descendant of ``path`` at all depths.

        Order is whatever the OS returns and is not stable. Symlinks are not
        followed. Subdirectories that cannot be listed are skipped.

        Args:
            path: Root directory (not itself yielded)
            counters: Counters to attach to the yielded entries

        Yields:
            One entry per descendant

        Raises:
            MetadataError: If the root cannot be stat'ed
            DirectoryListingError: If the root is not a directory
        """
        try:
            root_mode = path.stat().st_mode
        except OSError as exc:
            msg = f"Cannot read metadata for {path}: {exc}"
            raise MetadataError(msg, path, {"errno": exc.errno}) from exc
        if classify_mode(root_mode) is not EntryKind.DIRECTORY:
            msg = f"Cannot enumerate {path}: not a directory"
            raise DirectoryListingError(msg, path)

        def on_error(exc: OSError) -> None:
            logger.debug(
                "Skipping unreadable directory during enumeration",
                extra={"path": str(exc.filename), "error": str(exc)},
            )

        for dirpath, dirnames, filenames in path.walk(on_error=on_error):
            if counters is not None:
                counters.directories_listed += 1
            for name in (*dirnames, *filenames):
                yield self._make_entry(dirpath / name, counters)

    def total_size_of_directory_with_deep_recursion(
        self,
        path: Path,
        counters: WalkCounters | None = None,
    ) -> int:
        """Total size of a directory tree using the deep single-pass strategy.

        Every enumerated entry's size is added without filtering. Directory
        nodes report zero unless ``count_directory_sizes`` is set.

        Args:
            path: Root directory
            counters: Optional counters to record instrumentation into

        Returns:
            Sum of the sizes of all entries below ``path``

        Raises:
            MetadataError: If any entry's size cannot be fetched
            DirectoryListingError: If the root is not a directory
        """
        total_size = 0
        for entry in self.iter_entries(path, counters):
            if counters is not None:
                counters.entries_visited += 1
            total_size += entry.fetch_size(include_directories=self.count_directory_sizes)
        return total_size

    def walk(
        self,
        path: Path,
        strategy: WalkStrategy = WalkStrategy.SHALLOW,
        counters: WalkCounters | None = None,
    ) -> WalkReport:
        """Run one strategy over ``path`` and report the timed result.

        Args:
            path: Root directory
            strategy: Strategy to run
            counters: Counters to record into (fresh counters if None)

        Returns:
            WalkReport with the total, counters and elapsed time

        Raises:
            MetadataError: If the deep strategy hits a metadata failure
            DirectoryListingError: If the deep strategy's root is not a directory
        """
        counters = counters if counters is not None else WalkCounters()

        logger.debug(
            "Starting walk",
            extra={"path": str(path), "strategy": strategy.value, "size_mode": self.size_mode.value},
        )
        started = time.perf_counter()
        try:
            if strategy == WalkStrategy.DEEP:
                total_bytes = self.total_size_of_directory_with_deep_recursion(path, counters)
            else:
                total_bytes = self.total_size_of_directory(path, counters)
        except (MetadataError, DirectoryListingError) as exc:
            logger.error(
                "Walk aborted",
                extra={"path": str(path), "strategy": strategy.value, "error": str(exc)},
            )
            raise
        elapsed = time.perf_counter() - started

        logger.info(
            "Walk complete",
            extra={
                "path": str(path),
                "strategy": strategy.value,
                "total_bytes": total_bytes,
                "entries_visited": counters.entries_visited,
                "unreadable_directories": counters.unreadable_directories,
                "elapsed_seconds": round(elapsed, 6),
            },
        )

        return WalkReport(
            root=path,
            strategy=strategy,
            total_bytes=total_bytes,
            counters=counters,
            elapsed_seconds=elapsed,
        )

    def _make_entry(self, path: Path, counters: WalkCounters | None) -> Entry:
        return Entry(path, size_mode=self.size_mode, counters=counters)
