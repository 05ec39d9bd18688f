#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_confluence_parser.py
"""Unit tests for the line source and the Confluence block parsers."""

from io import StringIO
from unittest.mock import MagicMock, call

import pytest

from docsink import FileError, ParsingError, XhtmlSink
from docsink.parsers import (
    ByLineSource,
    ConfluenceParser,
    FigureBlock,
    FigureBlockParser,
    ParagraphBlock,
    ParagraphBlockParser,
)


@pytest.mark.unit
class TestByLineSource:
    """Tests for ByLineSource."""

    def test_reads_lines(self):
        """Test reading lines and line numbers."""
        source = ByLineSource("a\nb\r\nc")
        assert source.line_number == 0
        assert [source.next_line(), source.next_line(), source.next_line()] == ["a", "b", "c"]
        assert source.line_number == 3
        assert source.next_line() is None

    def test_unget(self):
        """Test pushing back the last line."""
        source = ByLineSource("a\nb")
        source.next_line()
        source.next_line()
        source.unget_line()
        assert source.line_number == 1
        assert source.next_line() == "b"

    def test_unget_twice(self):
        """Test that only one line can be pushed back."""
        source = ByLineSource("a\nb")
        source.next_line()
        source.unget_line()
        with pytest.raises(ValueError):
            source.unget_line()

    def test_unget_before_reading(self):
        """Test that nothing can be pushed back before reading."""
        with pytest.raises(ValueError):
            ByLineSource("a").unget_line()

    def test_unget_after_end(self):
        """Test that the end of input cannot be pushed back."""
        source = ByLineSource("a")
        source.next_line()
        source.next_line()
        with pytest.raises(ValueError):
            source.unget_line()

    def test_from_path(self, tmp_path):
        """Test reading a path."""
        path = tmp_path / "page.txt"
        path.write_text("x\ny", encoding="utf-8")
        source = ByLineSource(path)
        assert source.next_line() == "x"

    def test_missing_path(self, tmp_path):
        """Test that an unreadable path raises FileError."""
        with pytest.raises(FileError) as exc_info:
            ByLineSource(tmp_path / "missing.txt")
        assert exc_info.value.file_path.endswith("missing.txt")

    def test_from_stream(self):
        """Test reading a text stream."""
        assert ByLineSource(StringIO("s")).next_line() == "s"

    def test_unsupported(self):
        """Test that other objects are rejected."""
        with pytest.raises(TypeError):
            ByLineSource(42)


@pytest.mark.unit
class TestFigureBlockParser:
    """Tests for FigureBlockParser."""

    @pytest.mark.parametrize(
        "line,accepted",
        [
            ("!a.png!", True),
            ("!a.png! caption", True),
            ("!!", False),
            ("!a.png", False),
            ("a.png!", False),
            (" !a.png!", False),
            ("!x!y!", True),
        ],
    )
    def test_accept(self, line, accepted):
        """Test which lines start a figure."""
        assert FigureBlockParser().accept(line, ByLineSource("")) is accepted

    def test_image_without_caption(self):
        """Test a figure without caption."""
        block = FigureBlockParser().visit("!a.png!", ByLineSource(""))
        assert block == FigureBlock("a.png", None)

    def test_single_line_caption(self):
        """Test a caption on the figure line."""
        block = FigureBlockParser().visit("!a.png!   Sales  ", ByLineSource(""))
        assert block == FigureBlock("a.png", "Sales")

    def test_last_marker_ends_image(self):
        """Test that the image runs to the last exclamation mark."""
        block = FigureBlockParser().visit("!a!b.png! c", ByLineSource(""))
        assert block == FigureBlock("a!b.png", "c")

    def test_caption_line_break_stripped(self):
        """Test that a leading caption line break is removed."""
        block = FigureBlockParser().visit("!a.png! \\\\ Sales", ByLineSource(""))
        assert block == FigureBlock("a.png", "Sales")

    def test_caption_continues_to_blank_line(self):
        """Test that caption lines are joined up to the first blank line."""
        source = ByLineSource("  by region \nand year\n\nnext")
        block = FigureBlockParser().visit("!a.png! Sales", source)
        assert block == FigureBlock("a.png", "Sales by region and year")
        assert source.next_line() == "next"

    def test_caption_starting_on_next_line(self):
        """Test a caption given only on the following lines."""
        block = FigureBlockParser().visit("!a.png!", ByLineSource("Sales"))
        assert block == FigureBlock("a.png", "Sales")

    def test_blank_caption(self):
        """Test that a blank caption is dropped."""
        block = FigureBlockParser().visit("!a.png!   \\\\  ", ByLineSource("   "))
        assert block.caption is None

    def test_traverse_with_caption(self):
        """Test the legacy figure events sent for a captioned figure."""
        sink = MagicMock()
        FigureBlock("a.png", "Sales").traverse(sink)
        assert sink.mock_calls == [
            call.figure(),
            call.figure_graphics("a.png"),
            call.figure_caption(),
            call.text("Sales"),
            call.figure_caption_end(),
            call.figure_end(),
        ]

    def test_traverse_without_caption(self):
        """Test that no caption events are sent without a caption."""
        sink = MagicMock()
        FigureBlock("a.png").traverse(sink)
        assert sink.mock_calls == [call.figure(), call.figure_graphics("a.png"), call.figure_end()]


@pytest.mark.unit
class TestParagraphBlockParser:
    """Tests for ParagraphBlockParser."""

    def test_accept(self):
        """Test that any non-blank line starts a paragraph."""
        parser = ParagraphBlockParser()
        assert parser.accept("text", ByLineSource(""))
        assert not parser.accept("   ", ByLineSource(""))

    def test_visit_joins_lines(self):
        """Test that paragraph lines are joined with spaces."""
        source = ByLineSource(" second \nthird\n\nrest")
        block = ParagraphBlockParser().visit("first", source)
        assert block == ParagraphBlock("first second third")
        assert source.next_line() == "rest"


@pytest.mark.unit
class TestConfluenceParser:
    """Tests for ConfluenceParser."""

    def test_parse_document(self, sample_markup):
        """Test figures and paragraphs rendered in document order."""
        sink = XhtmlSink()
        ConfluenceParser().parse(sample_markup, sink)
        assert sink.getvalue() == (
            '<img src="images/chart.png" alt="Quarterly results by region" />'
            "<p>Plain text &amp; more on two lines</p>"
            '<img src="logo.png" />'
        )

    def test_parse_blocks(self):
        """Test block splitting without a sink."""
        blocks = ConfluenceParser().parse_blocks(ByLineSource("\n\n!a.png!\n\ntext\n"))
        assert blocks == [FigureBlock("a.png"), ParagraphBlock("text")]

    def test_empty_input(self):
        """Test that empty input produces no output."""
        sink = XhtmlSink()
        ConfluenceParser().parse("", sink)
        assert sink.getvalue() == ""

    def test_no_parser_accepts(self):
        """Test that an unparseable line raises ParsingError with its line number."""
        parser = ConfluenceParser(block_parsers=[FigureBlockParser()])
        with pytest.raises(ParsingError) as exc_info:
            parser.parse("!a.png!\n\nplain text", XhtmlSink())
        assert exc_info.value.line_number == 3
        assert exc_info.value.parsing_stage == "block"

    def test_custom_block_parsers_order(self):
        """Test that the first accepting parser wins."""
        parser = ConfluenceParser(block_parsers=[ParagraphBlockParser(), FigureBlockParser()])
        blocks = parser.parse_blocks(ByLineSource("!a.png!"))
        assert blocks == [ParagraphBlock("!a.png!")]

    def test_parse_prepared_source(self):
        """Test parsing from an existing ByLineSource."""
        sink = XhtmlSink()
        ConfluenceParser().parse(ByLineSource("hello"), sink)
        assert sink.getvalue() == "<p>hello</p>"
