"""Extents command - measure text in a resolved font."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from svg_markup2tspan.config import Config
from svg_markup2tspan.exceptions import Markup2TspanError
from svg_markup2tspan.extents import TextExtents
from svg_markup2tspan.fonts import FontResolver, init_font_catalog

console = Console()


@click.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--family", help="Font family preference list (default from config)")
@click.option("--size", help="Font size, e.g. 10, 10pt, 3.5mm (default from config)")
@click.option("--unit", type=click.Choice(["pt", "px", "mm", "cm", "in", "pc"]), help="Unit for results")
@click.option("--max", "only_max", is_flag=True, help="Only print the maximum extents")
@click.pass_context
def extents(
    ctx: click.Context,
    texts: tuple[str, ...],
    family: str | None,
    size: str | None,
    unit: str | None,
    only_max: bool,
) -> None:
    """Measure TEXTS (Pango markup allowed)."""
    config: Config = ctx.obj.get("config") or Config.load()
    family = family or config.font_family
    unit = unit or config.length_unit
    font_size: float | str = size if size is not None else config.font_size

    try:
        catalog = init_font_catalog()
        measure = TextExtents(resolver=FontResolver(catalog), unit=unit)
        if only_max:
            width, height = measure.max_text_extents(family, font_size, *texts)
            console.print(f"{width:.3f} x {height:.3f} {unit}")
            return
        results = measure.text_extents(family, font_size, *texts)
    except Markup2TspanError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    table = Table(title=f"Extents ({family}, {font_size})")
    table.add_column("Text", style="cyan")
    table.add_column(f"Width ({unit})", style="green", justify="right")
    table.add_column(f"Height ({unit})", style="yellow", justify="right")
    for text, (width, height) in zip(texts, results):
        table.add_row(text, f"{width:.3f}", f"{height:.3f}")
    console.print(table)
