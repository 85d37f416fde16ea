"""CLI commands for svg-markup2tspan."""

from svg_markup2tspan.cli.commands.convert import convert
from svg_markup2tspan.cli.commands.extents import extents
from svg_markup2tspan.cli.commands.fonts import fonts

__all__ = ["convert", "extents", "fonts"]
