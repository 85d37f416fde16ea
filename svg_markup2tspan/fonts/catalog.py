"""Process-wide catalog of installed font families.

The catalog is built once by :func:`init_font_catalog` and is read-only
afterwards, so it can be shared by any number of threads.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from svg_markup2tspan.exceptions import FontCatalogError
from svg_markup2tspan.interfaces import FontCatalogService

logger = logging.getLogger(__name__)


class FontCatalog:
    """Immutable set of lower-cased family names."""

    __slots__ = ("_families",)

    def __init__(self, families: Iterable[str] = ()) -> None:
        self._families = frozenset(f.strip().lower() for f in families if f.strip())

    @classmethod
    def from_service(cls, service: FontCatalogService) -> FontCatalog:
        return cls(service.list_families())

    def __contains__(self, family: object) -> bool:
        return isinstance(family, str) and family.lower() in self._families

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._families))

    def __len__(self) -> int:
        return len(self._families)

    def __repr__(self) -> str:
        return f"FontCatalog({len(self._families)} families)"


_catalog: FontCatalog | None = None
_catalog_lock = threading.Lock()


def init_font_catalog(
    service: FontCatalogService | None = None, *, force: bool = False
) -> FontCatalog:
    """Build the process-wide catalog.

    Later calls return the existing catalog unless ``force`` is set.

    Args:
        service: Where to list families from. Defaults to fontconfig.
        force: Rebuild even if a catalog exists.

    Raises:
        FontCatalogError: If the service cannot list families.
    """
    global _catalog
    with _catalog_lock:
        if _catalog is None or force:
            if service is None:
                from svg_markup2tspan.fonts.fontconfig import FontconfigCatalogService

                service = FontconfigCatalogService()
            _catalog = FontCatalog.from_service(service)
            logger.debug("Font catalog built: %r", _catalog)
        return _catalog


def font_catalog() -> FontCatalog:
    """Return the catalog built by :func:`init_font_catalog`.

    Raises:
        FontCatalogError: If the catalog has not been initialized.
    """
    if _catalog is None:
        raise FontCatalogError("Font catalog not initialized; call init_font_catalog() first")
    return _catalog
