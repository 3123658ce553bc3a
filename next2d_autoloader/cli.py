"""Command line entry point for the auto loader."""

import json
from pathlib import Path

import click

from .errors import AutoLoaderError
from .logging import configure_logging
from .plugin import AutoLoaderPlugin
from .settings import BuildSettings


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="JSON settings file")
@click.option("--environment", "-e", default=None, type=str, help="Overlay selected from src/config/config.json")
@click.option("--platform", "-p", default=None, type=str)
@click.option("--output", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True), help="Bundler output directory")
@click.option("--filename", default=None, type=str, help="Bundler output filename")
@click.option("--mode", default=None, type=click.Choice(["development", "production"]))
@click.option("--license/--no-license", "keep_license", default=None, help="Keep <filename>.LICENSE.txt files")
@click.option("--after-emit", is_flag=True, default=False, help="Also run the post-emit cleanup")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.option("--log-file", default=None, type=click.Path(dir_okay=False, path_type=Path))
@click.argument("root", default=".", type=click.Path(exists=True, file_okay=False, resolve_path=True))
def next2d_autoloader(config, environment, platform, output, filename, mode, keep_license, after_emit, verbose, log_file, root):
    """Generate src/config/Config.ts and src/Packages.ts for the project at ROOT."""
    logger = configure_logging(verbose=verbose, log_file=log_file)

    if config is not None:
        with open(config) as f:
            settings = BuildSettings.from_dict(json.load(f))
    else:
        settings = BuildSettings()

    # Explicit CLI options override the settings file
    if environment is not None:
        settings.environment = environment
    if platform is not None:
        settings.platform = platform
    if output is not None:
        settings.output_path = Path(output)
    if filename is not None:
        settings.output_filename = filename
    if mode is not None:
        settings.mode = mode
    if keep_license is not None:
        settings.options.license = keep_license

    plugin = AutoLoaderPlugin(settings)
    try:
        plugin.setup()
        result = plugin.before_compile(root)
        if after_emit:
            plugin.after_emit()
    except (AutoLoaderError, OSError) as e:
        raise click.ClickException(str(e)) from e

    logger.info(
        "Registered %d classes (Config.ts %s, Packages.ts %s)",
        result.entries,
        "written" if result.config_written else "unchanged",
        "written" if result.packages_written else "unchanged",
    )
