"""Command-line entry point for svg-markup2tspan."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_markup2tspan import __version__
from svg_markup2tspan.cli.commands import convert, extents, fonts
from svg_markup2tspan.config import LOG_LEVELS, Config
from svg_markup2tspan.exceptions import ConfigError
from svg_markup2tspan.log import setup_logging

console = Console(stderr=True)


@click.group()
@click.version_option(__version__, prog_name="markup2tspan")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_path: Path | None) -> None:
    """Convert Pango markup to SVG tspans and measure text."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise SystemExit(2) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level, console=console)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(convert)
cli.add_command(extents)
cli.add_command(fonts)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
