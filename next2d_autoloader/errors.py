"""
Exceptions raised by the auto loader build step.
"""

from __future__ import annotations

import json
from pathlib import Path


class AutoLoaderError(Exception):
    """Base class for errors raised by the auto loader."""

    pass


class ConfigParseError(AutoLoaderError, json.JSONDecodeError):
    """Raised when one of the JSON configuration files is malformed.

    Keeps the decoder's message, line and column so the root cause is shown
    as-is, prefixed by the offending file path.
    """

    def __init__(self, path: Path | str, msg: str, doc: str, pos: int):
        self.path = Path(path)
        super().__init__(f"{self.path}: {msg}", doc, pos)

    @classmethod
    def from_decode_error(cls, path: Path | str, error: json.JSONDecodeError) -> ConfigParseError:
        return cls(path, error.msg, error.doc, error.pos)
