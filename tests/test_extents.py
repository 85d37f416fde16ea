"""Tests for svg_markup2tspan.extents with a fake measurement oracle."""

import pytest
from conftest import FakeMatcher, FakeMeasurer

from svg_markup2tspan.exceptions import UnitError
from svg_markup2tspan.extents import TextExtents
from svg_markup2tspan.fonts.catalog import FontCatalog
from svg_markup2tspan.fonts.resolver import FontResolver
from svg_markup2tspan.interfaces import TextMeasurer


@pytest.fixture
def measurer() -> FakeMeasurer:
    return FakeMeasurer()


@pytest.fixture
def extents(measurer: FakeMeasurer) -> TextExtents:
    resolver = FontResolver(FontCatalog(["arial"]), FakeMatcher({"arial": "Arial"}))
    return TextExtents(measurer=measurer, resolver=resolver, unit="pt")


class TestTextExtents:
    """Tests for TextExtents.text_extents()."""

    def test_extents_per_text(self, extents: TextExtents) -> None:
        assert extents.text_extents("Arial", 10, "ab", "abcd") == [(20.0, 12.0), (40.0, 12.0)]

    def test_resolved_descriptor_is_passed(self, extents: TextExtents, measurer: FakeMeasurer) -> None:
        extents.text_extents("Helvetica, Arial", 10, "x")
        assert measurer.calls == [("Arial 10.000000px", "x")]

    def test_size_string_is_converted_to_points(self, extents: TextExtents, measurer: FakeMeasurer) -> None:
        extents.text_extents("Arial", "1in", "x")
        assert measurer.calls[0][0] == "Arial 72.000000px"

    def test_relative_size_raises(self, extents: TextExtents) -> None:
        with pytest.raises(UnitError):
            extents.text_extents("Arial", "1.5em", "x")

    def test_results_in_millimetres(self, measurer: FakeMeasurer) -> None:
        resolver = FontResolver(FontCatalog(), FakeMatcher())
        extents = TextExtents(measurer=measurer, resolver=resolver, unit="mm")
        [(width, height)] = extents.text_extents("serif", 10, "x" * 72)
        assert width == pytest.approx(254.0)
        assert height == pytest.approx(12 * 25.4 / 72)

    def test_no_texts(self, extents: TextExtents) -> None:
        assert extents.text_extents("Arial", 10) == []


class TestMaxTextExtents:
    """Tests for TextExtents.max_text_extents()."""

    def test_max_is_componentwise(self, extents: TextExtents) -> None:
        assert extents.max_text_extents("Arial", 10, "abc", "a\nb", "ab") == (30.0, 24.0)

    def test_no_texts_is_zero(self, extents: TextExtents) -> None:
        assert extents.max_text_extents("Arial", 10) == (0.0, 0.0)

    def test_compares_absolute_values(self) -> None:
        class SignedMeasurer(TextMeasurer):
            def measure(self, font_descriptor: str, text: str) -> tuple[float, float]:
                return {"a": (-50.0, 5.0), "b": (20.0, -8.0)}[text]

        resolver = FontResolver(FontCatalog(), FakeMatcher())
        extents = TextExtents(measurer=SignedMeasurer(), resolver=resolver, unit="pt")
        assert extents.max_text_extents("serif", 10, "a", "b") == (-50.0, -8.0)
