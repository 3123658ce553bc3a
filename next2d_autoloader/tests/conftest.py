from __future__ import annotations

import json
from pathlib import Path

import pytest

from next2d_autoloader.writer import AtomicWriter


class ProjectBuilder:
    """Writes a small Next2D project tree under a temporary root."""

    def __init__(self, root: Path):
        self.root = root
        (root / "src").mkdir(parents=True, exist_ok=True)

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def write_json(self, relative: str, data: dict) -> Path:
        return self.write(relative, json.dumps(data))

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")


class RecordingWriter(AtomicWriter):
    """AtomicWriter that remembers which files it wrote."""

    def __init__(self):
        super().__init__()
        self.paths = []

    def write(self, path, content):
        super().write(path, content)
        self.paths.append(Path(path).name)


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    return ProjectBuilder(tmp_path / "app")
