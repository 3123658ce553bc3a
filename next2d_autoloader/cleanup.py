"""
Removal of bundler license files after a production emit.
"""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger

logger = get_logger("cleanup")

LICENSE_SUFFIX = ".LICENSE.txt"


def license_files(output_dir: Path, filename: str) -> list[Path]:
    """List the <filename>.LICENSE.txt files directly under output_dir."""
    marker = f"{filename}{LICENSE_SUFFIX}"
    return [path for path in sorted(Path(output_dir).glob("*")) if path.is_file() and filename in path.name and marker in path.name]


def remove_license_files(output_dir: Path, filename: str, keep_license: bool = False) -> list[Path]:
    """Delete the license files emitted next to the bundle.

    Args:
        output_dir: Bundler output directory
        filename: Bundle filename, e.g. "app.js"
        keep_license: The LICENSE option; when true nothing is removed

    Returns:
        The removed paths

    Raises:
        OSError: If a file cannot be removed
    """
    if keep_license:
        return []

    removed = []
    for path in license_files(output_dir, filename):
        path.unlink()
        logger.info("Removed %s", path)
        removed.append(path)
    return removed
