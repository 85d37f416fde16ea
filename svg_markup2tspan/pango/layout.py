"""Text measurement with a PangoCairo layout (PyGObject)."""

from __future__ import annotations

import logging

from svg_markup2tspan.exceptions import PangoLibraryError
from svg_markup2tspan.interfaces import MarkupParser, TextMeasurer
from svg_markup2tspan.markup.attributes import PANGO_SCALE

logger = logging.getLogger(__name__)

# At 72 dpi one pixel is one point, so "<family> <n>px" descriptions and
# markup sizes in points agree.
LAYOUT_DPI = 72.0


def import_pango():
    """Return the ``Pango`` and ``PangoCairo`` introspection modules.

    Raises:
        PangoLibraryError: If PyGObject or the typelibs are not installed.
    """
    try:
        import gi

        gi.require_version("Pango", "1.0")
        gi.require_version("PangoCairo", "1.0")
        from gi.repository import Pango, PangoCairo
    except (ImportError, ValueError) as e:
        raise PangoLibraryError(f"Pango introspection bindings not available: {e}") from e
    return Pango, PangoCairo


class PangoMeasurer(TextMeasurer):
    """Measure ink extents of markup text.

    Owns one Pango context and layout; not safe to share across threads.

    Args:
        parser: Used to reject invalid markup before layout. Defaults to
            :class:`~svg_markup2tspan.pango.parser.PangoMarkupParser`.
    """

    def __init__(self, parser: MarkupParser | None = None) -> None:
        self._pango, pangocairo = import_pango()
        if parser is None:
            from svg_markup2tspan.pango.parser import PangoMarkupParser

            parser = PangoMarkupParser()
        self._parser = parser
        self._font: str | None = None

        self._context = pangocairo.FontMap.get_default().create_context()
        pangocairo.context_set_resolution(self._context, LAYOUT_DPI)
        self._layout = self._pango.Layout.new(self._context)

    def set_font(self, font_descriptor: str) -> None:
        """Use ``font_descriptor`` for subsequent measurements."""
        if font_descriptor == self._font:
            return
        self._layout.set_font_description(self._pango.FontDescription.from_string(font_descriptor))
        self._font = font_descriptor
        logger.debug("Layout font set to %r", font_descriptor)

    def extents(self, text: str) -> tuple[float, float]:
        """Ink ``(width, height)`` in points of ``text`` in the current font.

        Raises:
            MarkupParseError: If ``text`` is not valid markup.
        """
        # set_markup only warns on bad markup, so validate first
        self._parser.parse(text)

        self._layout.set_markup(text, -1)
        ink, _logical = self._layout.get_extents()
        return ink.width / PANGO_SCALE, ink.height / PANGO_SCALE

    def measure(self, font_descriptor: str, text: str) -> tuple[float, float]:
        self.set_font(font_descriptor)
        return self.extents(text)

    def close(self) -> None:
        self._layout = None
        self._context = None

    def __enter__(self) -> PangoMeasurer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
