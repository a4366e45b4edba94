"""Logging infrastructure with syslog integration and walk ID tracking.

Every record passing through the configured handlers is stamped with the
current walk ID, so all log lines produced by one invocation, however deep
the recursion, can be grouped together.
"""

import contextvars
import logging
import logging.handlers
import sys
from typing import Final, override

walk_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "walk_id",
    default=None,
)

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(walk_id)s] - %(message)s"

SYSLOG_LOG_FORMAT: Final[str] = "tree-size[%(process)d]: %(levelname)s - [%(walk_id)s] - %(name)s - %(message)s"

DEFAULT_SYSLOG_ADDRESS: Final[str] = "/dev/log"


class WalkIdFilter(logging.Filter):
    """Logging filter that adds the current walk ID to log records."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add walk ID to log record from ContextVar.

        Args:
            record: Log record to enhance with walk ID

        Returns:
            True to allow the record to be logged
        """
        walk_id = walk_id_var.get()
        record.walk_id = walk_id if walk_id is not None else "N/A"
        return True


def configure_logging(
    *,
    log_level: str = "WARNING",
    enable_syslog: bool = False,
    syslog_address: str = DEFAULT_SYSLOG_ADDRESS,
    enable_console: bool = True,
) -> None:
    """Configure application logging with optional syslog integration.

    Console output goes to stderr so that walk results on stdout stay
    machine-readable.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_syslog: Enable syslog handler
        syslog_address: Syslog socket address
        enable_console: Enable console output handler

    Example:
        >>> configure_logging(log_level="INFO")
        >>> set_walk_id("abc-123")
        >>> logging.getLogger(__name__).info("Walk started")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    walk_id_filter = WalkIdFilter()

    if enable_syslog:
        try:
            syslog_handler = logging.handlers.SysLogHandler(
                address=syslog_address,
                facility=logging.handlers.SysLogHandler.LOG_USER,
            )
            syslog_handler.setFormatter(logging.Formatter(SYSLOG_LOG_FORMAT))
            syslog_handler.addFilter(walk_id_filter)
            root_logger.addHandler(syslog_handler)

        except OSError as exc:
            # Syslog not available (e.g., containers, macOS without /dev/log)
            print(
                f"Warning: Could not connect to syslog at {syslog_address}: {exc}",
                file=sys.stderr,
            )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        console_handler.addFilter(walk_id_filter)
        root_logger.addHandler(console_handler)


def set_walk_id(walk_id: str) -> None:
    """Set the walk ID for the current context.

    Args:
        walk_id: Unique identifier for the walk (e.g., UUID)
    """
    _ = walk_id_var.set(walk_id)


def get_walk_id() -> str | None:
    """Get the current walk ID from context.

    Returns:
        Current walk ID or None if not set
    """
    return walk_id_var.get()


def clear_walk_id() -> None:
    """Clear the walk ID from the current context."""
    _ = walk_id_var.set(None)
