"""
Build step binding the generator to a host build pipeline.

The host calls before_compile() before every compilation pass and
after_emit() after every successful emit. Calls are serialized by the host;
the plugin holds no lock.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .cache import CacheGate, CacheSlot, CacheState
from .cleanup import remove_license_files
from .config import CONFIG_DIR, merge_config
from .emitter import CodeEmitter
from .logging import get_logger
from .registry import build_registry
from .scaffold import ensure_index_html
from .scanner import list_files
from .settings import BuildSettings
from .writer import AtomicWriter

logger = get_logger("plugin")

SOURCE_DIR = "src"
CONFIG_MODULE = CONFIG_DIR / "Config.ts"
PACKAGES_MODULE = Path(SOURCE_DIR) / "Packages.ts"


@dataclass
class BuildResult:
    """What one before_compile() call produced."""

    config_written: bool
    packages_written: bool
    entries: int


class AutoLoaderPlugin:
    """Generates Config.ts and Packages.ts for a project on every build.

    Args:
        settings: Environment, platform, output and options of the build
        writer: File writer used for the generated modules
    """

    def __init__(self, settings: BuildSettings | None = None, writer: AtomicWriter | None = None):
        self.settings = settings or BuildSettings()
        self.emitter = CodeEmitter()
        self.cache = CacheState()
        self.gate = CacheGate(self.cache, writer or AtomicWriter())

    def setup(self) -> bool:
        """One-time setup when the plugin is attached to the pipeline.

        Writes the index.html scaffold for local builds when it is missing.

        Returns:
            True if index.html was created
        """
        output_path = self.settings.output_path
        if self.settings.environment != "local" or output_path is None:
            return False
        return ensure_index_html(output_path, self.settings.environment, self.settings.output_filename)

    def before_compile(self, context_dir: Path | str) -> BuildResult:
        """Regenerate both modules for the project rooted at context_dir.

        Raises:
            ConfigParseError: If a configuration file is malformed
            OSError: If src/ cannot be listed or a source file cannot be read
        """
        root = Path(context_dir).as_posix()
        files = list_files(f"{root}/{SOURCE_DIR}")

        config = merge_config(root, self.settings.environment, self.settings.platform)
        config_written = self.gate.write_if_changed(
            CacheSlot.CONFIG,
            Path(root) / CONFIG_MODULE,
            self.emitter.render_config(config),
        )

        registry = build_registry(files, root)
        packages_written = self.gate.write_if_changed(
            CacheSlot.PACKAGES,
            Path(root) / PACKAGES_MODULE,
            self.emitter.render_packages(registry),
        )

        logger.debug("Registered %d classes from %d files", len(registry), len(files))
        return BuildResult(config_written=config_written, packages_written=packages_written, entries=len(registry))

    def after_emit(self) -> list[Path]:
        """Post-emit cleanup: drop license files from production bundles.

        Returns:
            The removed files
        """
        output_path = self.settings.output_path
        if not self.settings.is_production or output_path is None:
            return []
        return remove_license_files(output_path, self.settings.output_filename, self.settings.options.license)
