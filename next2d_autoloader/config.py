"""
Layered merge of the project's JSON configuration files.

The merged document is built from, in order:

1. Seed defaults: the platform plus empty "stage" and "routing" buckets
2. src/config/config.json: the overlay named after the environment, then "all"
3. src/config/stage.json, merged key by key into the "stage" bucket
4. src/config/routing.json, merged key by key into the "routing" bucket

Missing files count as empty objects. Malformed JSON is fatal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import ConfigParseError

CONFIG_DIR = Path("src") / "config"
ENV_CONFIG_FILE = "config.json"
STAGE_CONFIG_FILE = "stage.json"
ROUTING_CONFIG_FILE = "routing.json"

ALL_OVERLAY = "all"


def load_json(path: Path) -> dict[str, Any] | None:
    """Load a JSON document if the file exists.

    Args:
        path: File to read

    Returns:
        The parsed document, or None when the file does not exist

    Raises:
        ConfigParseError: If the file is not valid JSON
    """
    if not path.exists():
        return None

    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError.from_decode_error(path, e) from e


def seed_config(platform: str) -> dict[str, Any]:
    return {"platform": platform, "stage": {}, "routing": {}}


def merge_document(config: dict[str, Any], document: dict[str, Any], environment: str) -> dict[str, Any]:
    """Apply the environment overlay, then the "all" overlay, onto config.

    Both are shallow top-level assignments: a "stage" or "routing" object in
    an overlay replaces the whole bucket. Overlays that are not objects
    (null, numbers, ...) are ignored.
    """
    overlay = document.get(environment)
    if isinstance(overlay, dict):
        config.update(overlay)

    overlay = document.get(ALL_OVERLAY)
    if isinstance(overlay, dict):
        config.update(overlay)

    return config


def merge_stage(config: dict[str, Any], document: dict[str, Any]) -> dict[str, Any]:
    """Merge stage.json keys into the "stage" bucket."""
    config["stage"].update(document)
    return config


def merge_routing(config: dict[str, Any], document: dict[str, Any]) -> dict[str, Any]:
    """Merge routing.json keys into the "routing" bucket."""
    config["routing"].update(document)
    return config


def merge_config(root_dir: Path | str, environment: str, platform: str) -> dict[str, Any]:
    """Build the merged configuration document for a project.

    Args:
        root_dir: Project root (the directory holding src/)
        environment: Name of the overlay to apply from config.json
        platform: Initial value of the "platform" field

    Returns:
        The merged document, always holding "platform", "stage" and "routing"

    Raises:
        ConfigParseError: If any of the configuration files is malformed
    """
    config_dir = Path(root_dir) / CONFIG_DIR
    config = seed_config(platform)

    document = load_json(config_dir / ENV_CONFIG_FILE)
    if document is not None:
        merge_document(config, document, environment)

    stage = load_json(config_dir / STAGE_CONFIG_FILE)
    if stage is not None:
        merge_stage(config, stage)

    routing = load_json(config_dir / ROUTING_CONFIG_FILE)
    if routing is not None:
        merge_routing(config, routing)

    return config
