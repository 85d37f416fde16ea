"""svg-markup2tspan: Pango markup to SVG tspans, plus text extent estimation.

This library provides:
- Pango markup conversion to SVG ``<tspan>`` runs (rise, scale, style, weight)
- Text extent estimation through Pango layouts
- Font family resolution against the installed fontconfig catalog

Example:
    >>> from svg_markup2tspan import MarkupConverter
    >>> converter = MarkupConverter()
    >>> svg = converter.convert("plain <b>bold</b> plain")
"""

from svg_markup2tspan.api import ConversionResult, MarkupConverter, markup_to_svg
from svg_markup2tspan.config import Config
from svg_markup2tspan.exceptions import (
    ConfigError,
    FontCatalogError,
    FontMatchError,
    Markup2TspanError,
    MarkupParseError,
    PangoLibraryError,
    UnitError,
)
from svg_markup2tspan.extents import TextExtents, max_text_extents, text_extents
from svg_markup2tspan.fonts import FontCatalog, FontResolver, font_catalog, init_font_catalog

__version__ = "0.1.0"

__all__ = [
    # Main API
    "MarkupConverter",
    "ConversionResult",
    "markup_to_svg",
    "Config",
    # Extents
    "TextExtents",
    "text_extents",
    "max_text_extents",
    # Font handling
    "FontCatalog",
    "FontResolver",
    "font_catalog",
    "init_font_catalog",
    # Exceptions
    "Markup2TspanError",
    "MarkupParseError",
    "FontCatalogError",
    "FontMatchError",
    "PangoLibraryError",
    "UnitError",
    "ConfigError",
    # Metadata
    "__version__",
]
