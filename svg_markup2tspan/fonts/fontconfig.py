"""Fontconfig command-line backend for font listing and matching."""

from __future__ import annotations

import logging
import subprocess

from svg_markup2tspan.exceptions import FontCatalogError, FontMatchError
from svg_markup2tspan.interfaces import FontCatalogService, FontMatcher

logger = logging.getLogger(__name__)


class FontconfigCatalogService(FontCatalogService):
    """List installed families with ``fc-list``."""

    def __init__(self, timeout: float = 8) -> None:
        self.timeout = timeout

    def list_families(self) -> set[str]:
        try:
            result = subprocess.run(
                ["fc-list", "--format=%{family}\\n"],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            raise FontCatalogError(f"fc-list failed: {e}") from e

        if result.returncode != 0:
            raise FontCatalogError(
                f"fc-list exited with {result.returncode}: {result.stderr.strip()}"
            )

        families: set[str] = set()
        for line in result.stdout.splitlines():
            # One font per line; a font may list several family names.
            families.update(f.strip() for f in line.split(",") if f.strip())
        logger.debug("fc-list reported %d families", len(families))
        return families


class FontconfigMatcher(FontMatcher):
    """Resolve a family or generic keyword with ``fc-match``."""

    def __init__(self, timeout: float = 5) -> None:
        self.timeout = timeout

    def best_match(self, family: str) -> str:
        try:
            result = subprocess.run(
                ["fc-match", "--format=%{family[0]}", family],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            raise FontMatchError(f"fc-match failed: {e}", family=family) from e

        matched = result.stdout.strip()
        if result.returncode != 0 or not matched:
            raise FontMatchError(
                f"fc-match found nothing for '{family}': {result.stderr.strip()}",
                family=family,
            )
        logger.debug("fc-match %r -> %r", family, matched)
        return matched
