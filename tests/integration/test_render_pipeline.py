#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_render_pipeline.py
"""Integration tests: markup parsing, strict checking and XHTML output together."""

from xml.dom import minidom

import pytest
from bs4 import BeautifulSoup

from docsink import ConfluenceParser, Justification, Numbering, ValidatingSink, XhtmlSink, XhtmlSinkOptions


def assert_well_formed(markup):
    """Parse the markup as XML inside a wrapper element."""
    minidom.parseString(f"<root>{markup}</root>")


def render_report(sink):
    """Send a document using most construct kinds to the sink."""
    sink.head()
    sink.text("Quarterly report")
    sink.head_end()

    sink.section(1, {"id": "summary"})
    sink.section_title(1)
    sink.anchor("Summary")
    sink.text("Summary")
    sink.anchor_end()
    sink.section_title_end(1)

    sink.paragraph()
    sink.text("Revenue grew ")
    sink.bold()
    sink.text("12%")
    sink.bold_end()
    sink.text(" see ")
    sink.link("#details")
    sink.text("details")
    sink.link_end()
    sink.text(" & ")
    sink.link("https://example.com/?q=1&r=2", target="_blank")
    sink.text("source")
    sink.link_end()
    sink.non_breaking_space()
    sink.text("2", {"valign": "sup"})
    sink.paragraph_end()

    sink.numbered_list(Numbering.LOWER_ALPHA)
    for item in ["first", "second"]:
        sink.numbered_list_item()
        sink.text(item)
        sink.numbered_list_item_end()
    sink.numbered_list_end()

    sink.table({"summary": "Sales"})
    sink.table_rows([Justification.LEFT, Justification.RIGHT], grid=True)
    for row in [["Region", "Sales"], ["North", "10"], ["South", "12"]]:
        sink.table_row()
        for value in row:
            sink.table_cell()
            sink.text(value)
            sink.table_cell_end()
        sink.table_row_end()
    sink.table_rows_end()
    sink.table_end()

    sink.verbatim(boxed=True)
    sink.text("if a < b:\n    pass")
    sink.verbatim_end()

    sink.figure(None)
    sink.figure_graphics("chart.png", {"alt": "Chart"})
    sink.figure_caption()
    sink.text("Sales by region")
    sink.figure_caption_end()
    sink.figure_end()

    sink.horizontal_rule()
    sink.section_end(1)


@pytest.mark.integration
class TestReportRendering:
    """Tests rendering a complete document."""

    def test_well_formed(self):
        """Test that the output is well-formed and matches under strict checking."""
        plain = XhtmlSink()
        render_report(plain)
        strict = ValidatingSink(XhtmlSink())
        render_report(strict)

        assert_well_formed(plain.getvalue())
        assert strict.getvalue() == plain.getvalue()
        assert plain.head_text == "Quarterly report"

    def test_structure(self):
        """Test the parsed structure of the output."""
        sink = XhtmlSink()
        render_report(sink)
        soup = BeautifulSoup(sink.getvalue(), "html.parser")

        section = soup.find("div", id="summary")
        assert section["class"] == ["section"]
        assert section.h2.a["name"] == "Summary"

        links = soup.p.find_all("a")
        assert links[0]["href"] == "#details"
        assert links[1]["href"] == "https://example.com/?q=1&r=2"
        assert links[1]["class"] == ["externalLink"]
        assert links[1]["target"] == "_blank"
        assert soup.p.sup.get_text() == "2"

        assert soup.ol["style"] == "list-style-type: lower-alpha"
        assert [td["align"] for td in soup.table.find_all("td")] == ["left", "right"] * 3
        assert [tr["class"] for tr in soup.table.find_all("tr")] == [["a"], ["b"], ["a"]]
        assert soup.find("div", class_="source").pre.get_text() == "if a < b:\n    pass"
        assert soup.find("div", class_="figure").img["alt"] == "Chart"
        assert soup.find("div", class_="figure").i.get_text() == "Sales by region"

    def test_crlf_output_file(self, tmp_path):
        """Test writing the report with CRLF line endings to a file."""
        target = tmp_path / "report.html"
        with XhtmlSink(target, XhtmlSinkOptions(line_separator="\r\n")) as sink:
            render_report(sink)
        data = target.read_bytes()
        assert b"if a &lt; b:\r\n    pass" in data
        assert b"\n" not in data.replace(b"\r\n", b"")


@pytest.mark.integration
class TestMarkupPipeline:
    """Tests parsing wiki markup into strict sinks."""

    def test_figures_and_paragraphs(self, sample_markup, tmp_path):
        """Test parsing into a strict sink writing to a file."""
        target = tmp_path / "page.html"
        with ValidatingSink(XhtmlSink(target)) as sink:
            ConfluenceParser().parse(sample_markup, sink)

        markup = target.read_text(encoding="utf-8")
        assert_well_formed(markup)
        soup = BeautifulSoup(markup, "html.parser")
        assert [img["src"] for img in soup.find_all("img")] == ["images/chart.png", "logo.png"]
        assert soup.img["alt"] == "Quarterly results by region"
        assert soup.p.get_text() == "Plain text & more on two lines"

    def test_markup_from_path(self, sample_markup, tmp_path):
        """Test parsing a markup file."""
        source = tmp_path / "page.txt"
        source.write_text(sample_markup, encoding="utf-8")
        sink = XhtmlSink()
        ConfluenceParser().parse(source, sink)
        assert sink.getvalue().startswith('<img src="images/chart.png"')
