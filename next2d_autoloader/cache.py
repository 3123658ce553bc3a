"""
Change detection for generated modules.

The last text written for each module is kept in memory for the lifetime
of the owning plugin. A module is only rewritten when its freshly rendered
text differs from that slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .logging import get_logger
from .writer import AtomicWriter

logger = get_logger("cache")


class CacheSlot(str, Enum):
    CONFIG = "config"
    PACKAGES = "packages"


@dataclass
class CacheState:
    """Last emitted text per generated module.

    Both slots start empty when the plugin is constructed and are only
    updated after a successful write. Nothing is persisted.
    """

    config: str = ""
    packages: str = ""

    def get(self, slot: CacheSlot) -> str:
        return getattr(self, slot.value)

    def set(self, slot: CacheSlot, text: str) -> None:
        setattr(self, slot.value, text)


class CacheGate:
    """Suppresses writes of unchanged module text."""

    def __init__(self, state: CacheState, writer: AtomicWriter | None = None):
        self.state = state
        self.writer = writer or AtomicWriter()

    def write_if_changed(self, slot: CacheSlot, path: Path, text: str) -> bool:
        """Write text to path unless it equals the cached text for slot.

        Args:
            slot: Which cache slot guards this module
            path: Module file to write
            text: Freshly rendered module text

        Returns:
            True if the file was written, False if the write was skipped
        """
        if self.state.get(slot) == text:
            logger.debug("%s unchanged, skipping write", path)
            return False

        self.writer.write(path, text)
        self.state.set(slot, text)
        logger.info("Wrote %s", path)
        return True
