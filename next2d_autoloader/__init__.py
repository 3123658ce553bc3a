"""Next2D TypeScript auto loader

A build step that scans a Next2D project's source tree and generates
src/config/Config.ts (the merged JSON configuration) and src/Packages.ts
(the registry of view and model classes), rewriting them only when their
content changes.
"""

__version__ = "1.0.0"

from .cache import CacheGate, CacheSlot, CacheState
from .config import merge_config
from .emitter import CodeEmitter
from .errors import AutoLoaderError, ConfigParseError
from .extractor import extract_exported_class
from .plugin import AutoLoaderPlugin, BuildResult
from .registry import ExportedClass, Registry, RegistryEntry, Role, build_registry
from .scanner import FileType, list_files
from .settings import BuildSettings, PluginOptions
from .writer import AtomicWriter

__all__ = [
    "AutoLoaderPlugin",
    "BuildResult",
    "BuildSettings",
    "PluginOptions",
    "merge_config",
    "list_files",
    "FileType",
    "extract_exported_class",
    "build_registry",
    "Registry",
    "RegistryEntry",
    "ExportedClass",
    "Role",
    "CodeEmitter",
    "CacheGate",
    "CacheSlot",
    "CacheState",
    "AtomicWriter",
    "AutoLoaderError",
    "ConfigParseError",
]
