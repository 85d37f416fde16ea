"""Fonts command - font catalog and resolution utilities."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from svg_markup2tspan.config import Config
from svg_markup2tspan.exceptions import Markup2TspanError
from svg_markup2tspan.fonts import FontResolver, init_font_catalog, select_family

console = Console()


@click.group()
def fonts() -> None:
    """Font management commands."""
    pass


@fonts.command("list")
@click.option("--filter", "name_filter", help="Only families containing this text")
def list_fonts(name_filter: str | None) -> None:
    """List installed font families."""
    try:
        with console.status("[bold green]Loading fonts..."):
            catalog = init_font_catalog()
    except Markup2TspanError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    table = Table(title="Installed Font Families")
    table.add_column("Family", style="cyan")

    count = 0
    for family in catalog:
        if name_filter and name_filter.lower() not in family:
            continue
        table.add_row(family)
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} families")


@fonts.command("resolve")
@click.argument("preferences", required=False)
@click.option("--size", type=float, help="Size in pixels (default from config)")
@click.pass_context
def resolve_font(ctx: click.Context, preferences: str | None, size: float | None) -> None:
    """Resolve a comma-separated PREFERENCES list to a font description."""
    config: Config = ctx.obj.get("config") or Config.load()
    preferences = preferences if preferences is not None else config.font_family
    size = size if size is not None else config.font_size

    try:
        catalog = init_font_catalog()
        descriptor = FontResolver(catalog).resolve(preferences, size)
    except Markup2TspanError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    console.print(f"[dim]Selected:[/dim] {select_family(preferences, catalog)}")
    console.print(f"[green]Resolved:[/green] {descriptor}")
