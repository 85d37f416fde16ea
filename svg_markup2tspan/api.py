"""High-level conversion API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from svg_markup2tspan.config import Config
from svg_markup2tspan.exceptions import MarkupParseError
from svg_markup2tspan.interfaces import MarkupParser
from svg_markup2tspan.log import set_log_level
from svg_markup2tspan.markup.runs import StyleRun, compact
from svg_markup2tspan.markup.tspan import serialize

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Result of converting one markup string."""

    success: bool
    markup: str
    svg: str | None = None
    plain_text: str | None = None
    runs: list[StyleRun] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class MarkupConverter:
    """Convert Pango markup into SVG text with ``<tspan>`` elements.

    Example:
        >>> converter = MarkupConverter()
        >>> converter.convert("<b>bold</b> text")
        '<tspan style="dominant-baseline:inherit" font-weight="700">bold</tspan> text'
    """

    def __init__(
        self,
        parser: MarkupParser | None = None,
        config: Config | None = None,
        log_level: str | None = None,
    ) -> None:
        """Initialize converter.

        Args:
            parser: Markup parser. Defaults to libpango.
            config: Settings for units and escaping. Defaults to ``Config()``.
            log_level: Package log level. Left alone when not given, so a host
                application keeps control of the ``svg_markup2tspan`` logger.
        """
        self.config = config or Config()
        if log_level is not None:
            set_log_level(log_level)
        if parser is None:
            from svg_markup2tspan.pango import PangoMarkupParser

            parser = PangoMarkupParser()
        self.parser = parser

    def convert(self, markup: str) -> str:
        """Convert markup to tagged SVG text.

        Raises:
            MarkupParseError: If the markup is invalid.
        """
        return self._convert(markup).svg or ""

    def convert_safe(self, markup: str) -> ConversionResult:
        """Like :meth:`convert`, but report parse errors in the result instead of raising."""
        try:
            return self._convert(markup)
        except MarkupParseError as e:
            logger.warning("Skipping invalid markup: %s", e)
            return ConversionResult(success=False, markup=markup, errors=[str(e)])

    def _convert(self, markup: str) -> ConversionResult:
        plain, records = self.parser.parse(markup)
        runs = compact(records)
        svg = serialize(
            plain,
            runs,
            unit=self.config.length_unit,
            escape=self.config.escape_text,
        )
        return ConversionResult(
            success=True,
            markup=markup,
            svg=svg,
            plain_text=plain.decode("utf-8"),
            runs=runs,
        )


def markup_to_svg(markup: str, parser: MarkupParser | None = None, config: Config | None = None) -> str:
    """Convert markup to tagged SVG text in one call."""
    return MarkupConverter(parser=parser, config=config).convert(markup)
