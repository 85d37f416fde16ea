"""Font handling for svg-markup2tspan.

This subpackage provides:
- The process-wide installed font catalog
- Preference-list resolution to a font description
- Fontconfig (fc-list / fc-match) backend
"""

from svg_markup2tspan.fonts.catalog import FontCatalog, font_catalog, init_font_catalog
from svg_markup2tspan.fonts.fontconfig import FontconfigCatalogService, FontconfigMatcher
from svg_markup2tspan.fonts.resolver import (
    DEFAULT_FAMILY,
    GENERIC_FAMILIES,
    FontResolver,
    font_description,
    select_family,
    split_families,
)

__all__ = [
    "FontCatalog",
    "font_catalog",
    "init_font_catalog",
    "FontconfigCatalogService",
    "FontconfigMatcher",
    "DEFAULT_FAMILY",
    "GENERIC_FAMILIES",
    "FontResolver",
    "font_description",
    "select_family",
    "split_families",
]
