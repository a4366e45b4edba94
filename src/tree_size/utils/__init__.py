"""Shared utility modules for formatting and logging setup."""

from tree_size.utils.formatting import format_elapsed, format_size

__all__ = [
    "format_elapsed",
    "format_size",
]
