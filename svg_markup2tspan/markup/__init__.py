"""Markup attribute handling for svg-markup2tspan.

This subpackage provides:
- Native Pango attribute record decoding
- Style-run compaction
- SVG tspan serialization
"""

from svg_markup2tspan.markup.attributes import (
    PANGO_SCALE,
    AttributeRecord,
    AttrType,
    Style,
    StyleAttribute,
    Weight,
    decode_attribute,
    record_size,
)
from svg_markup2tspan.markup.runs import StyleRun, StyleState, compact
from svg_markup2tspan.markup.tspan import fmt_float, open_tag, serialize

__all__ = [
    "PANGO_SCALE",
    "AttributeRecord",
    "AttrType",
    "Style",
    "StyleAttribute",
    "Weight",
    "decode_attribute",
    "record_size",
    "StyleRun",
    "StyleState",
    "compact",
    "fmt_float",
    "open_tag",
    "serialize",
]
