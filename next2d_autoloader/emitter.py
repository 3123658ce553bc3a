"""
Rendering of the generated TypeScript modules.

Two modules are produced:

- src/config/Config.ts: the merged configuration typed against the
  framework's ConfigImpl contract
- src/Packages.ts: one import per registered class and the packages array
  of [key, class] tuples
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jinja2

from .registry import Registry

CURRENT_DIR = Path(__file__).parent

CONFIG_CONTRACT = "ConfigImpl"
CONFIG_CONTRACT_MODULE = "@next2d/framework/dist/interface/ConfigImpl"

JSON_INDENT = 4
ENTRY_INDENT = " " * 4


class CodeEmitter:
    """Renders module texts from the merged config and the registry."""

    TEMPLATE_LANG = "typescript"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = CURRENT_DIR / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.config_template = self.jinja_env.get_template("config.ts.jinja2")
        self.packages_template = self.jinja_env.get_template("packages.ts.jinja2")

    @staticmethod
    def serialize_config(config: dict[str, Any]) -> str:
        """Pretty-print the config as JSON with a 4-space indent."""
        return json.dumps(config, indent=JSON_INDENT, ensure_ascii=False)

    @staticmethod
    def packages_literal(tuples: list[str]) -> str:
        """Render the packages array literal, one tuple per line.

        An empty registry renders as "[]".
        """
        if not tuples:
            return "[]"
        body = ",\n".join(f"{ENTRY_INDENT}{line}" for line in tuples)
        return f"[\n{body}\n]"

    def render_config(self, config: dict[str, Any]) -> str:
        return self.config_template.render(
            contract=CONFIG_CONTRACT,
            contract_module=CONFIG_CONTRACT_MODULE,
            config_json=self.serialize_config(config),
        )

    def render_packages(self, registry: Registry) -> str:
        return self.packages_template.render(
            imports=registry.imports,
            packages_literal=self.packages_literal(registry.tuples),
        )
