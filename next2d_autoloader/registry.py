"""
Registry of exported view and model classes.

Classes declared under src/view/ are registered by their own name. Classes
declared under src/model/ are registered under a dotted key derived from
their path (src/model/user/Profile.ts -> "user.Profile") and imported under
an underscore alias (user_Profile) so two models may share a class name.
Files anywhere else are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .extractor import extract_exported_class
from .logging import get_logger

logger = get_logger("registry")

SOURCE_EXTENSION = ".ts"
SOURCE_ROOT = "src/"
VIEW_DIR = "src/view/"
MODEL_DIR = "src/model/"
IMPORT_ALIAS = "@/"


class Role(str, Enum):
    """Which registry an exported class belongs to."""

    VIEW = "view"
    MODEL = "model"


@dataclass(frozen=True)
class ExportedClass:
    """An exported class and the file declaring it.

    Attributes:
        name: Class identifier
        path: Declaring file, posix style, relative to the scan root
        role: View or model
    """

    name: str
    path: str
    role: Role


@dataclass(frozen=True)
class RegistryEntry:
    """One [key, class] pair of the generated packages array."""

    key: str
    alias: str
    name: str
    module: str

    @property
    def import_line(self) -> str:
        if self.alias == self.name:
            return f'import {{ {self.name} }} from "{self.module}";'
        return f'import {{ {self.name} as {self.alias} }} from "{self.module}";'

    @property
    def tuple_line(self) -> str:
        return f'["{self.key}", {self.alias}]'


@dataclass
class Registry:
    """Ordered registry entries, in scan order."""

    entries: list[RegistryEntry] = field(default_factory=list)

    @property
    def imports(self) -> list[str]:
        return [entry.import_line for entry in self.entries]

    @property
    def tuples(self) -> list[str]:
        return [entry.tuple_line for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


def classify(name: str, path: str) -> ExportedClass | None:
    """Assign a role to an exported class from its declaring path.

    Args:
        name: Class identifier
        path: Declaring file relative to the scan root

    Returns:
        The classified class, or None outside src/view/ and src/model/
    """
    if VIEW_DIR in path:
        return ExportedClass(name=name, path=path, role=Role.VIEW)
    if MODEL_DIR in path:
        return ExportedClass(name=name, path=path, role=Role.MODEL)
    return None


def module_specifier(path: str) -> str:
    """Return the "@/"-rooted import specifier of a source path.

    "src/view/home/Home.ts" -> "@/view/home/Home"
    """
    return IMPORT_ALIAS + _strip_extension(path.removeprefix(SOURCE_ROOT))


def _strip_extension(path: str) -> str:
    return path.removesuffix(SOURCE_EXTENSION)


def _model_relative(path: str) -> str:
    start = path.index(MODEL_DIR) + len(MODEL_DIR)
    return _strip_extension(path[start:])


def model_key(path: str) -> str:
    """Dotted registry key of a model file: "src/model/user/Profile.ts" -> "user.Profile"."""
    return ".".join(_model_relative(path).split("/"))


def model_alias(path: str) -> str:
    """Local import alias of a model file: "src/model/user/Profile.ts" -> "user_Profile"."""
    return "_".join(_model_relative(path).split("/"))


def to_entry(exported: ExportedClass) -> RegistryEntry:
    module = module_specifier(exported.path)
    if exported.role is Role.VIEW:
        return RegistryEntry(key=exported.name, alias=exported.name, name=exported.name, module=module)
    return RegistryEntry(
        key=model_key(exported.path),
        alias=model_alias(exported.path),
        name=exported.name,
        module=module,
    )


def _relative_path(file: str, root_dir: str) -> str:
    return file.replace(f"{root_dir}/", "", 1)


def build_registry(files: Iterable[str], root_dir: Path | str) -> Registry:
    """Extract and classify the exported classes of the scanned files.

    Entries keep the order of files. Duplicate keys are kept as-is; the
    consumer's lookup lets the last one win.

    Args:
        files: Paths as returned by list_files
        root_dir: Prefix stripped from each path to make it relative

    Returns:
        The registry, possibly empty
    """
    root = Path(root_dir).as_posix()
    registry = Registry()
    for file in files:
        if not file.endswith(SOURCE_EXTENSION):
            continue

        path = _relative_path(file, root)
        name = extract_exported_class(Path(file).read_text(encoding="utf-8", errors="replace"))
        if name is None:
            continue

        exported = classify(name, path)
        if exported is None:
            logger.debug("Not registering %s from %s", name, path)
            continue

        registry.entries.append(to_entry(exported))

    return registry
