"""Error hierarchy for directory walks."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class WalkError(Exception):
    """Base exception for all walk-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportExplicitAny] # Flexible walk error context
        """Initialize WalkError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportExplicitAny] # Flexible walk error context


class DirectoryListingError(WalkError):
    """Exception raised when a directory's children cannot be listed."""

    def __init__(
        self,
        message: str,
        path: Path,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny] # Flexible walk error context
    ) -> None:
        """Initialize DirectoryListingError.

        Args:
            message: Error message
            path: Directory that could not be listed
            context: Additional context information
        """
        full_context = context or {}
        full_context["path"] = str(path)

        super().__init__(message, full_context)
        self.path: Path = path


class MetadataError(WalkError):
    """Exception raised when size or type metadata cannot be fetched for an entry."""

    def __init__(
        self,
        message: str,
        path: Path,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny] # Flexible walk error context
    ) -> None:
        """Initialize MetadataError.

        Args:
            message: Error message
            path: Entry whose metadata lookup failed
            context: Additional context information
        """
        full_context = context or {}
        full_context["path"] = str(path)

        super().__init__(message, full_context)
        self.path: Path = path
