"""
index.html scaffold for local development builds.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .logging import get_logger
from .settings import DEFAULT_OUTPUT_FILENAME

logger = get_logger("scaffold")

CURRENT_DIR = Path(__file__).parent
INDEX_HTML = "index.html"

_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(CURRENT_DIR / "templates" / "html")),
    lstrip_blocks=True,
    trim_blocks=True,
    autoescape=True,
)


def render_index_html(environment: str, script: str = DEFAULT_OUTPUT_FILENAME) -> str:
    """Render the HTML page that loads the bundle, titled after the environment."""
    return _jinja_env.get_template(f"{INDEX_HTML}.jinja2").render(title=environment, script=script)


def ensure_index_html(output_dir: Path, environment: str, script: str = DEFAULT_OUTPUT_FILENAME) -> bool:
    """Write <output_dir>/index.html unless it already exists.

    Args:
        output_dir: Bundler output directory, created if missing
        environment: Used as the page title
        script: Bundle loaded by the page

    Returns:
        True if the file was created
    """
    index_path = Path(output_dir) / INDEX_HTML
    if index_path.exists():
        return False

    index_path.parent.mkdir(parents=True, exist_ok=True)
    index_path.write_text(render_index_html(environment, script), encoding="utf-8")
    logger.info("Created %s", index_path)
    return True
