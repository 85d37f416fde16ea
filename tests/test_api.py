"""Tests for the high-level MarkupConverter API, using a canned parser."""

import logging
from collections.abc import Generator

import pytest
from conftest import FakeParser

from svg_markup2tspan import MarkupConverter, markup_to_svg
from svg_markup2tspan.config import Config
from svg_markup2tspan.exceptions import MarkupParseError
from svg_markup2tspan.markup.attributes import AttributeRecord, AttrType
from svg_markup2tspan.markup.runs import StyleRun, StyleState

OPEN = '<tspan style="dominant-baseline:inherit"'


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """The package logger, with its level restored after the test."""
    logger = logging.getLogger("svg_markup2tspan")
    saved = logger.level
    yield logger
    logger.setLevel(saved)


class TestMarkupConverter:
    """Tests for MarkupConverter.convert()."""

    def test_bold_scenario(self, sample_parser: FakeParser) -> None:
        converter = MarkupConverter(parser=sample_parser)
        assert converter.convert("plain <b>bold</b> plain") == (
            "plain " + OPEN + ' font-weight="700">bold</tspan> plain'
        )

    def test_plain_text_passes_through(self, sample_parser: FakeParser) -> None:
        assert MarkupConverter(parser=sample_parser).convert("no markup") == "no markup"

    def test_invalid_markup_raises(self, sample_parser: FakeParser) -> None:
        with pytest.raises(MarkupParseError):
            MarkupConverter(parser=sample_parser).convert("<b>unclosed")

    def test_escape_from_config(self, sample_parser: FakeParser) -> None:
        converter = MarkupConverter(parser=sample_parser, config=Config(escape_text=True))
        assert converter.convert("a &lt; b") == "a &lt; b"
        assert MarkupConverter(parser=sample_parser).convert("a &lt; b") == "a < b"

    def test_length_unit_from_config(self) -> None:
        parser = FakeParser({"x<sup>2</sup>": (b"x2", [AttributeRecord(AttrType.RISE, 1, 2, 2048)])})
        converter = MarkupConverter(parser=parser, config=Config(length_unit="pt"))
        assert converter.convert("x<sup>2</sup>") == "x" + OPEN + ' dy="-2">2</tspan>'

    def test_convert_safe_reports_errors(self, sample_parser: FakeParser) -> None:
        result = MarkupConverter(parser=sample_parser).convert_safe("<b>unclosed")
        assert not result.success
        assert result.svg is None
        assert "Could not parse" in result.errors[0]

    def test_convert_safe_returns_runs(self, sample_parser: FakeParser) -> None:
        result = MarkupConverter(parser=sample_parser).convert_safe("<i>italic</i> text")
        assert result.success
        assert result.plain_text == "italic text"
        assert result.runs == [StyleRun(0, StyleState(style=2)), StyleRun(6, StyleState())]

    def test_log_level_is_applied(self, sample_parser: FakeParser, package_logger: logging.Logger) -> None:
        MarkupConverter(parser=sample_parser, log_level="debug")
        assert package_logger.level == logging.DEBUG

    def test_host_log_level_is_kept(self, sample_parser: FakeParser, package_logger: logging.Logger) -> None:
        package_logger.setLevel(logging.INFO)
        MarkupConverter(parser=sample_parser, config=Config(log_level="ERROR"))
        markup_to_svg("no markup", parser=sample_parser)
        assert package_logger.level == logging.INFO


def test_markup_to_svg(sample_parser: FakeParser) -> None:
    assert markup_to_svg("<i>italic</i> text", parser=sample_parser) == (
        OPEN + ' font-style="italic">italic</tspan> text'
    )
