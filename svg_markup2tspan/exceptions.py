"""Exception hierarchy for svg-markup2tspan."""

from __future__ import annotations


class Markup2TspanError(Exception):
    """Base class for every error raised by this package."""


class MarkupParseError(Markup2TspanError):
    """Markup text could not be parsed."""

    def __init__(self, message: str, markup: str | None = None) -> None:
        super().__init__(message)
        self.markup = markup


class FontCatalogError(Markup2TspanError):
    """Installed font families could not be listed, or the catalog is not ready."""


class FontMatchError(Markup2TspanError):
    """The font matcher failed to return a family for a name."""

    def __init__(self, message: str, family: str | None = None) -> None:
        super().__init__(message)
        self.family = family


class PangoLibraryError(Markup2TspanError):
    """A native Pango/PangoCairo/GLib library could not be loaded."""


class UnitError(Markup2TspanError):
    """A length was given in a unit that cannot be converted to points."""


class ConfigError(Markup2TspanError):
    """Configuration file or value is invalid."""
