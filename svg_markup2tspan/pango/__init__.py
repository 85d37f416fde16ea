"""Native Pango backend for svg-markup2tspan.

This subpackage provides:
- Markup parsing via pango_parse_markup (ctypes)
- Ink-extent measurement via a PangoCairo layout (PyGObject)
"""

from svg_markup2tspan.pango._lib import load_pango
from svg_markup2tspan.pango.layout import PangoMeasurer
from svg_markup2tspan.pango.parser import PangoMarkupParser

__all__ = ["load_pango", "PangoMarkupParser", "PangoMeasurer"]
