"""Interfaces for the collaborators the converter and resolver rely on.

Concrete implementations live in :mod:`svg_markup2tspan.pango` (markup
parsing and measuring) and :mod:`svg_markup2tspan.fonts.fontconfig`
(font listing and matching).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from svg_markup2tspan.markup.attributes import AttributeRecord


class MarkupParser(ABC):
    """Turns markup into plain text plus attribute records."""

    @abstractmethod
    def parse(self, markup: str) -> tuple[bytes, list[AttributeRecord]]:
        """Parse markup.

        Args:
            markup: Markup text.

        Returns:
            UTF-8 plain text and its attribute records, ordered by start offset.

        Raises:
            MarkupParseError: If the markup is invalid.
        """


class TextMeasurer(ABC):
    """Measures text set in a given font."""

    @abstractmethod
    def measure(self, font_descriptor: str, text: str) -> tuple[float, float]:
        """Return ``(width, height)`` in points of ``text`` (which may contain markup)."""


class FontCatalogService(ABC):
    """Lists installed font families."""

    @abstractmethod
    def list_families(self) -> set[str]:
        """Return the installed family names."""


class FontMatcher(ABC):
    """Maps a family name or generic keyword to an installed family."""

    @abstractmethod
    def best_match(self, family: str) -> str:
        """Return the concrete installed family closest to ``family``."""
