"""Application runner for tree-size."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from tree_size.core.config import MainConfig
from tree_size.core.filesystem import DirectoryWalker, WalkReport, WalkStrategy
from tree_size.utils.logging import clear_walk_id, set_walk_id

logger = logging.getLogger(__name__)


class ApplicationRunner:
    """Runs the configured walk strategies over one root directory."""

    def __init__(self, config: MainConfig) -> None:
        """Initialize the application runner.

        Args:
            config: Validated configuration, with any CLI overrides applied
        """
        self.config: MainConfig = config
        self.walker: DirectoryWalker = DirectoryWalker(
            size_mode=config.walker.size_mode,
            count_directory_sizes=config.walker.count_directory_sizes,
        )

    @property
    def strategies(self) -> tuple[WalkStrategy, ...]:
        """Strategies to run, in order."""
        if self.config.walker.strategy == "both":
            return (WalkStrategy.SHALLOW, WalkStrategy.DEEP)
        return (WalkStrategy(self.config.walker.strategy),)

    def run(self, path: Path) -> list[WalkReport]:
        """Walk ``path`` with every configured strategy.

        Each strategy gets its own counters. All log records emitted during
        the run carry the same walk ID.

        Args:
            path: Root directory to measure

        Returns:
            One report per strategy, in execution order

        Raises:
            WalkError: If the deep strategy fails fatally
        """
        set_walk_id(uuid.uuid4().hex[:12])
        try:
            logger.info(
                "Measuring directory",
                extra={"path": str(path), "strategies": [s.value for s in self.strategies]},
            )
            return [self.walker.walk(path, strategy) for strategy in self.strategies]
        finally:
            clear_walk_id()
