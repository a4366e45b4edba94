"""Classification of raw filesystem type indicators into logical entry kinds."""

from __future__ import annotations

import logging
import stat
from enum import Enum
from typing import Final

logger = logging.getLogger(__name__)


class EntryKind(str, Enum):
    """Enumeration for logical filesystem entry kinds."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symbolic_link"
    DEVICE = "device"
    UNKNOWN = "unknown"


# File-type characters as rendered by stat.filemode and ls -l, plus long names
_TYPE_CODES: Final[dict[str, EntryKind]] = {
    "-": EntryKind.FILE,
    "d": EntryKind.DIRECTORY,
    "l": EntryKind.SYMBOLIC_LINK,
    "b": EntryKind.DEVICE,
    "c": EntryKind.DEVICE,
    "p": EntryKind.UNKNOWN,
    "s": EntryKind.UNKNOWN,
    "regular": EntryKind.FILE,
    "file": EntryKind.FILE,
    "directory": EntryKind.DIRECTORY,
    "symlink": EntryKind.SYMBOLIC_LINK,
    "symbolic_link": EntryKind.SYMBOLIC_LINK,
    "block": EntryKind.DEVICE,
    "character": EntryKind.DEVICE,
    "fifo": EntryKind.UNKNOWN,
    "socket": EntryKind.UNKNOWN,
}


def classify_mode(mode: int) -> EntryKind:
    """Classify an entry from its stat mode bits.

    Args:
        mode: ``st_mode`` value from ``os.stat``/``os.lstat``

    Returns:
        Logical entry kind; anything other than a regular file, directory,
        symlink or block/character device is ``EntryKind.UNKNOWN``

    Examples:
        >>> classify_mode(0o100644)
        <EntryKind.FILE: 'file'>
        >>> classify_mode(0o010644)  # named pipe
        <EntryKind.UNKNOWN: 'unknown'>
    """
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryKind.SYMBOLIC_LINK
    if stat.S_ISBLK(mode) or stat.S_ISCHR(mode):
        return EntryKind.DEVICE
    if not (stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode)):
        logger.debug("Unrecognized file mode", extra={"mode": oct(mode)})
    return EntryKind.UNKNOWN


def classify_type_code(code: str) -> EntryKind:
    """Classify an entry from a textual file-type indicator.

    Accepts the single type character from ``stat.filemode`` (``-``, ``d``,
    ``l``, ``b``, ``c``, ``p``, ``s``) or a long name such as ``"regular"``
    or ``"socket"``. Matching of long names is case-insensitive.

    Args:
        code: File-type indicator

    Returns:
        Logical entry kind, ``EntryKind.UNKNOWN`` for unrecognized input
    """
    normalized = code if len(code) == 1 else code.strip().lower()
    kind = _TYPE_CODES.get(normalized)
    if kind is None:
        logger.debug("Unrecognized file type indicator", extra={"type_code": code})
        return EntryKind.UNKNOWN
    return kind
