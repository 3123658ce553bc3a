"""
Atomic file writer for generated modules.

Ensures that an interrupted build never leaves a half-written
Config.ts or Packages.ts behind for the compiler to pick up.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _target_mode(path: Path) -> int:
    """Mode the written file should end up with.

    An existing file keeps its mode; a new one gets 0o666 minus the umask,
    like a plain open(). mkstemp alone would leave it at 0o600.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


class AtomicWriter:
    """Writes files through a temporary sibling and an atomic rename.

    1. Write to a temporary file in the same directory
    2. Give it the target's mode
    3. Atomically replace the target file
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(self, path: Path, content: str) -> None:
        """Write content to path atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures the rename stays on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            # newline="" keeps "\n" line endings on every platform
            with open(temp_fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
            os.chmod(temp_path, _target_mode(path))
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise
