"""Pure formatting utilities for human-readable walk reports."""

from typing import Final

# Binary unit names in ascending order (1024-based)
_UNITS: Final[tuple[str, ...]] = ("KB", "MB", "GB", "TB", "PB")
_STEP: Final[int] = 1024


def format_size(bytes: int, *, precision: int = 1) -> str:
    """Convert bytes to human-readable size format.

    Uses binary units (1024-based) for consistency with ``du -h``.
    Values below 1 KB are shown as whole bytes.

    Args:
        bytes: Number of bytes to format (must be non-negative)
        precision: Number of decimal places for KB and above

    Returns:
        Human-readable string representation of the size

    Examples:
        >>> format_size(512)
        '512 Bytes'
        >>> format_size(1536)
        '1.5 KB'
        >>> format_size(10737418240, precision=0)
        '10 GB'
    """
    if bytes < 0:
        msg = "bytes must be non-negative"
        raise ValueError(msg)

    if bytes < _STEP:
        return f"{bytes} Bytes"

    value = float(bytes)
    unit = _UNITS[0]
    for unit in _UNITS:
        value /= _STEP
        if value < _STEP:
            break

    return f"{value:.{precision}f} {unit}"


def format_elapsed(seconds: float) -> str:
    """Convert an elapsed wall-clock time to a compact string.

    Sub-second durations are shown in milliseconds.

    Args:
        seconds: Duration in seconds (must be non-negative)

    Returns:
        Duration such as ``"12.3 ms"`` or ``"4.56 s"``
    """
    if seconds < 0:
        msg = "seconds must be non-negative"
        raise ValueError(msg)

    if seconds < 1:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"
