"""Text extent estimation.

Example:
    >>> from svg_markup2tspan import init_font_catalog, max_text_extents
    >>> _ = init_font_catalog()
    >>> width, height = max_text_extents("Helvetica, Arial, sans", "10pt", "x<sup>2</sup>", "label")
"""

from __future__ import annotations

import threading

from svg_markup2tspan.fonts.resolver import FontResolver
from svg_markup2tspan.interfaces import TextMeasurer
from svg_markup2tspan.units import from_points, parse_length


class TextExtents:
    """Measure strings set in a font chosen from a preference list.

    Args:
        measurer: Measurement oracle. Defaults to a Pango layout.
        resolver: Font resolver. Defaults to fontconfig and the process catalog.
        unit: Unit of the returned extents.
    """

    def __init__(
        self,
        measurer: TextMeasurer | None = None,
        resolver: FontResolver | None = None,
        unit: str = "mm",
    ) -> None:
        if measurer is None:
            from svg_markup2tspan.pango import PangoMeasurer

            measurer = PangoMeasurer()
        self.measurer = measurer
        self.resolver = resolver or FontResolver()
        self.unit = unit

    def text_extents(self, font_family: str, size: float | str, *texts: str) -> list[tuple[float, float]]:
        """Extents of each text.

        Args:
            font_family: Comma-separated family preference list.
            size: Font size in points, or a length string in an absolute unit.
            texts: Strings, possibly with markup.

        Raises:
            UnitError: If ``size`` is in a relative unit.
            MarkupParseError: If a text has invalid markup.
        """
        descriptor = self.resolver.resolve(font_family, parse_length(size))
        extents = []
        for text in texts:
            width, height = self.measurer.measure(descriptor, text)
            extents.append((from_points(width, self.unit), from_points(height, self.unit)))
        return extents

    def max_text_extents(self, font_family: str, size: float | str, *texts: str) -> tuple[float, float]:
        """Smallest ``(width, height)`` that fits any of ``texts``."""
        max_width = 0.0
        max_height = 0.0
        for width, height in self.text_extents(font_family, size, *texts):
            max_width = width if abs(max_width) < abs(width) else max_width
            max_height = height if abs(max_height) < abs(height) else max_height
        return max_width, max_height


_local = threading.local()


def _default_extents(unit: str) -> TextExtents:
    extents = getattr(_local, "extents", None)
    if extents is None:
        extents = _local.extents = TextExtents()
    extents.unit = unit
    return extents


def text_extents(font_family: str, size: float | str, *texts: str, unit: str = "mm") -> list[tuple[float, float]]:
    """Extents of each text, using a per-thread Pango layout."""
    return _default_extents(unit).text_extents(font_family, size, *texts)


def max_text_extents(font_family: str, size: float | str, *texts: str, unit: str = "mm") -> tuple[float, float]:
    """Maximum extents over ``texts``, using a per-thread Pango layout."""
    return _default_extents(unit).max_text_extents(font_family, size, *texts)
