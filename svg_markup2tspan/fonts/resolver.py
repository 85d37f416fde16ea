#!/usr/bin/env python3
"""
Font resolution utilities.

Picks a usable family from a CSS-style preference list such as
``"Helvetica, 'DejaVu Sans', sans"`` and turns it into a font description
string of the form ``"<family> <size>px"``.
"""

from __future__ import annotations

import logging

from svg_markup2tspan.fonts.catalog import FontCatalog, font_catalog
from svg_markup2tspan.interfaces import FontMatcher

logger = logging.getLogger(__name__)

GENERIC_FAMILIES = frozenset({"serif", "sans", "sans-serif", "monospace", "cursive", "fantasy"})
DEFAULT_FAMILY = "sans-serif"


def split_families(families: str) -> list[str]:
    """Split a preference list into normalized candidates (trimmed, unquoted, lower-case)."""
    candidates = []
    for family in families.split(","):
        family = family.strip(" \"'").lower()
        if family:
            candidates.append(family)
    return candidates


def select_family(families: str, catalog: FontCatalog) -> str:
    """First candidate that is installed or a generic keyword, else ``sans-serif``."""
    for family in split_families(families):
        if family in catalog or family in GENERIC_FAMILIES:
            return family
    return DEFAULT_FAMILY


def font_description(family: str, size: float) -> str:
    return "%s %fpx" % (family, size)


class FontResolver:
    """Resolve preference lists against the installed fonts."""

    def __init__(self, catalog: FontCatalog | None = None, matcher: FontMatcher | None = None) -> None:
        """Initialize resolver.

        Args:
            catalog: Installed families. Defaults to the process-wide catalog,
                which must have been built with ``init_font_catalog()``.
            matcher: Font match oracle. Defaults to fontconfig.
        """
        if matcher is None:
            from svg_markup2tspan.fonts.fontconfig import FontconfigMatcher

            matcher = FontconfigMatcher()
        self.catalog = catalog
        self.matcher = matcher

    def match_family(self, families: str) -> str:
        """Concrete installed family for a preference list."""
        catalog = self.catalog if self.catalog is not None else font_catalog()
        selected = select_family(families, catalog)
        matched = self.matcher.best_match(selected)
        logger.debug("Resolved %r -> %r -> %r", families, selected, matched)
        return matched

    def resolve(self, families: str, size: float) -> str:
        """Font description for ``families`` at ``size`` pixels."""
        return font_description(self.match_family(families), size)
