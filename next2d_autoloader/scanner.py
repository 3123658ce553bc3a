"""
Recursive enumeration of the project source tree.
"""

from __future__ import annotations

import os
import stat
from enum import Enum

from .logging import get_logger

logger = get_logger("scanner")


class FileType(str, Enum):
    """Classification of a directory entry."""

    FILE = "file"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"  # probe failed, or neither a regular file nor a directory


def get_file_type(path: str) -> FileType:
    """Classify a path by stat-ing it, following symlinks.

    Args:
        path: Path to probe

    Returns:
        FileType.UNKNOWN when the probe fails (dangling symlink, entry removed
        while scanning, ...) or when the entry is a socket, fifo or device.
    """
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return FileType.UNKNOWN

    if stat.S_ISREG(mode):
        return FileType.FILE
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    return FileType.UNKNOWN


def list_files(root_dir: str) -> list[str]:
    """List every regular file below root_dir, depth-first.

    Entries are visited in the order os.listdir returns them, which is not
    sorted. Unknown entries are skipped. Errors listing a directory are not
    caught.

    Args:
        root_dir: Directory to walk

    Returns:
        Paths of the form "<root_dir>/<relative path>"
    """
    files: list[str] = []
    for name in os.listdir(root_dir):
        path = f"{root_dir}/{name}"
        file_type = get_file_type(path)
        if file_type is FileType.FILE:
            files.append(path)
        elif file_type is FileType.DIRECTORY:
            files.extend(list_files(path))
        else:
            logger.debug("Skipping unknown entry %s", path)
    return files
