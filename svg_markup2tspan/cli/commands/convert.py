"""Convert command - Pango markup to SVG tspans."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import click
from rich.console import Console

from svg_markup2tspan.api import MarkupConverter
from svg_markup2tspan.config import Config
from svg_markup2tspan.exceptions import Markup2TspanError

console = Console(stderr=True)


@click.command()
@click.argument("markup", required=False)
@click.option(
    "--file",
    "-f",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    help="Read markup from a file ('-' for stdin)",
)
@click.option("--unit", type=click.Choice(["pt", "px", "mm", "cm", "in", "pc"]), help="Unit for dy offsets")
@click.option("--escape/--no-escape", default=None, help="XML-escape the text content")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write result to file")
@click.pass_context
def convert(
    ctx: click.Context,
    markup: str | None,
    input_file: TextIO | None,
    unit: str | None,
    escape: bool | None,
    output: Path | None,
) -> None:
    """Convert MARKUP to SVG text with tspan elements."""
    config: Config = ctx.obj.get("config") or Config.load()
    log_level = ctx.obj.get("log_level", "WARNING")

    if input_file is not None:
        markup = input_file.read()
    if markup is None:
        console.print("[red]Error:[/red] Give MARKUP or --file")
        raise SystemExit(1)

    if unit is not None:
        config.length_unit = unit
    if escape is not None:
        config.escape_text = escape

    try:
        converter = MarkupConverter(config=config, log_level=log_level)
        result = converter.convert(markup)
    except Markup2TspanError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if output:
        output.write_text(result, encoding="utf-8")
        console.print(f"[green]Written:[/green] {output}")
    else:
        click.echo(result)
