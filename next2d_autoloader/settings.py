"""
Settings for the auto loader build step.

Mirrors the parameters the host build pipeline hands to the plugin:
the target environment and platform, the output location and an
options bag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_ENVIRONMENT = "local"
DEFAULT_PLATFORM = "web"
DEFAULT_OUTPUT_FILENAME = "app.js"
PRODUCTION_MODE = "production"


@dataclass
class PluginOptions:
    """Options bag passed alongside the environment and platform."""

    # Keep <filename>.LICENSE.txt files produced by the bundler
    license: bool = False

    @staticmethod
    def from_dict(d: dict | None) -> PluginOptions:
        """Create options from a host options bag.

        The host spells the license flag ``LICENSE``; the lower-case
        spelling is accepted as well.
        """
        options = PluginOptions()
        if not d:
            return options
        for key in ("LICENSE", "license"):
            if key in d:
                options.license = bool(d[key])
        return options

    def to_dict(self) -> dict:
        return {"LICENSE": self.license}


@dataclass
class BuildSettings:
    """Configuration for one auto loader instance."""

    # Selects the overlay bucket in src/config/config.json
    environment: str = DEFAULT_ENVIRONMENT

    # Seeds the "platform" field of the generated config
    platform: str = DEFAULT_PLATFORM

    # Bundler output directory (index.html scaffold, license cleanup)
    output_path: Path | None = None

    # Bundler output filename
    output_filename: str = DEFAULT_OUTPUT_FILENAME

    # Build mode of the host pipeline ("development" or "production")
    mode: str = "development"

    options: PluginOptions = field(default_factory=PluginOptions)

    @property
    def is_production(self) -> bool:
        return self.mode == PRODUCTION_MODE

    @staticmethod
    def from_dict(d: dict[str, Any]) -> BuildSettings:
        """Create settings from a dictionary, ignoring unknown keys."""
        settings = BuildSettings()
        for k, v in d.items():
            if k == "options":
                settings.options = PluginOptions.from_dict(v)
            elif k == "output_path":
                settings.output_path = Path(v) if v is not None else None
            elif hasattr(settings, k) and not isinstance(getattr(type(settings), k, None), property):
                setattr(settings, k, v)
        return settings

    def to_dict(self) -> dict:
        """Convert settings to a dictionary."""
        return {
            "environment": self.environment,
            "platform": self.platform,
            "output_path": str(self.output_path) if self.output_path is not None else None,
            "output_filename": self.output_filename,
            "mode": self.mode,
            "options": self.options.to_dict(),
        }
