"""Pytest configuration and shared fixtures for svg-markup2tspan tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

import svg_markup2tspan.fonts.catalog as catalog_module
from svg_markup2tspan.exceptions import MarkupParseError
from svg_markup2tspan.interfaces import FontCatalogService, FontMatcher, MarkupParser, TextMeasurer
from svg_markup2tspan.markup.attributes import AttributeRecord, AttrType, Style
from svg_markup2tspan.pango._lib import load_pango
from svg_markup2tspan.pango.layout import import_pango

# Paths
PROJECT_ROOT = Path(__file__).parent.parent


class FakeParser(MarkupParser):
    """Parser returning canned results keyed by markup."""

    def __init__(self, results: dict[str, tuple[bytes, list[AttributeRecord]]]) -> None:
        self.results = results

    def parse(self, markup: str) -> tuple[bytes, list[AttributeRecord]]:
        if markup not in self.results:
            raise MarkupParseError(f"Could not parse pango markup: {markup!r}", markup=markup)
        return self.results[markup]


class FakeMatcher(FontMatcher):
    """Matcher that title-cases names and records what it was asked."""

    def __init__(self, mapping: dict[str, str] | None = None) -> None:
        self.mapping = mapping or {}
        self.calls: list[str] = []

    def best_match(self, family: str) -> str:
        self.calls.append(family)
        return self.mapping.get(family, family.title())


class FakeCatalogService(FontCatalogService):
    def __init__(self, families: set[str]) -> None:
        self.families = families
        self.calls = 0

    def list_families(self) -> set[str]:
        self.calls += 1
        return set(self.families)


class FakeMeasurer(TextMeasurer):
    """Width is 10pt per character, height is 12pt per line."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def measure(self, font_descriptor: str, text: str) -> tuple[float, float]:
        self.calls.append((font_descriptor, text))
        lines = text.split("\n")
        return 10.0 * max(len(line) for line in lines), 12.0 * len(lines)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def sample_parser() -> FakeParser:
    """Parser knowing a handful of markup strings and their Pango parse results."""
    return FakeParser(
        {
            "plain <b>bold</b> plain": (
                b"plain bold plain",
                [AttributeRecord(AttrType.WEIGHT, 6, 10, 700)],
            ),
            "<i>italic</i> text": (
                b"italic text",
                [AttributeRecord(AttrType.STYLE, 0, 6, int(Style.ITALIC))],
            ),
            "no markup": (b"no markup", []),
            "a &lt; b": (b"a < b", []),
        }
    )


@pytest.fixture
def fake_matcher() -> FakeMatcher:
    return FakeMatcher()


@pytest.fixture
def reset_font_catalog() -> Generator[None, None, None]:
    """Run a test with no process-wide catalog, restoring the previous one after."""
    saved = catalog_module._catalog
    catalog_module._catalog = None
    yield
    catalog_module._catalog = saved


def _has_pango() -> bool:
    try:
        load_pango()
    except Exception:
        return False
    return True


requires_pango = pytest.mark.skipif(not _has_pango(), reason="Native Pango libraries not available")


def _has_pango_bindings() -> bool:
    try:
        import_pango()
    except Exception:
        return False
    return True


requires_pango_bindings = pytest.mark.skipif(
    not _has_pango_bindings(), reason="PyGObject Pango/PangoCairo bindings not available"
)
