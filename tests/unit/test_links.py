#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_links.py
"""Unit tests for link classification and link/anchor events."""

import pytest

from docsink import XhtmlSink, XhtmlSinkOptions
from docsink.sinks.links import is_external_html, is_external_link


@pytest.mark.unit
class TestLinkClassification:
    """Tests for href classification."""

    @pytest.mark.parametrize("href", ["http://x", "https://x", "ftp://x", "mailto:x", "file:/x", "HTTP://X"])
    def test_external_links(self, href):
        """Test scheme detection."""
        assert is_external_link(href)

    @pytest.mark.parametrize("href", ["foo.html", "foo.html#bar", "foo.htm", "dir/page.HTML", "./doc.pdf", "../x"])
    def test_external_html(self, href):
        """Test links to other documents."""
        assert not is_external_link(href)
        assert is_external_html(href)

    @pytest.mark.parametrize("href", ["#valid-id", "valid-id", "Section.1"])
    def test_internal(self, href):
        """Test fragment identifiers."""
        assert not is_external_link(href)
        assert not is_external_html(href)


@pytest.mark.unit
class TestLinkEvents:
    """Tests for link rendering."""

    @pytest.mark.parametrize("href", ["http://x", "https://x", "ftp://x", "mailto:x", "file:/x"])
    def test_external_class(self, sink, href):
        """Test that external links get the external link class."""
        sink.link(href)
        sink.text("x")
        sink.link_end()
        assert sink.getvalue() == f'<a class="externalLink" href="{href}">x</a>'

    @pytest.mark.parametrize("href", ["foo.html", "foo.html#bar"])
    def test_external_html_as_given(self, sink, href):
        """Test that links to other documents keep their href and get no class."""
        sink.link(href)
        assert sink.getvalue() == f'<a href="{href}">'

    def test_internal_with_marker(self, sink):
        """Test an internal link written with its leading marker."""
        sink.link("#valid-id")
        assert sink.getvalue() == '<a href="#valid-id">'

    def test_internal_without_marker(self, sink):
        """Test that a bare identifier gets its fragment marker."""
        sink.link("valid-id")
        assert sink.getvalue() == '<a href="#valid-id">'

    def test_href_escaped_once(self, sink):
        """Test that the href is escaped exactly once."""
        sink.link("http://x/?a=1&b=2")
        assert sink.getvalue() == '<a class="externalLink" href="http://x/?a=1&amp;b=2">'

    def test_target_argument_wins(self, sink):
        """Test that an explicit target replaces one in the attributes."""
        sink.link("page.html", {"target": "_top", "id": "l1"}, target="_blank")
        assert sink.getvalue() == '<a href="page.html" target="_blank" id="l1">'

    def test_target_from_attributes(self, sink):
        """Test that a target attribute is used when no argument is given."""
        sink.link("page.html", {"target": "_top"})
        assert sink.getvalue() == '<a href="page.html" target="_top">'

    def test_caller_href_ignored(self, sink):
        """Test that an href attribute never replaces the computed one."""
        sink.link("page.html", {"href": "evil.html", "rel": "next"})
        assert sink.getvalue() == '<a href="page.html" rel="next">'

    def test_caller_class_overrides_external_class(self, sink):
        """Test that a caller class replaces the external link class."""
        sink.link("http://x", {"class": "mine"})
        assert sink.getvalue() == '<a class="mine" href="http://x">'

    def test_external_class_option(self):
        """Test the external link class option."""
        sink = XhtmlSink(options=XhtmlSinkOptions(external_link_class="ext"))
        sink.link("https://x")
        assert sink.getvalue() == '<a class="ext" href="https://x">'


@pytest.mark.unit
class TestAnchors:
    """Tests for anchor events."""

    def test_name_encoded(self, sink):
        """Test that anchor names are encoded as identifiers."""
        sink.anchor("1 Intro")
        sink.anchor_end()
        assert sink.getvalue() == '<a name="a1_Intro"></a>'

    def test_empty_name_omitted(self, sink):
        """Test that an empty name writes no name attribute."""
        sink.anchor("")
        assert sink.getvalue() == "<a>"

    def test_anchor_attributes(self, sink):
        """Test anchor attributes use the base whitelist."""
        sink.anchor("top", {"id": "top", "target": "_blank"})
        assert sink.getvalue() == '<a name="top" id="top">'


@pytest.mark.unit
class TestHeadModeLinks:
    """Tests for link events in head mode."""

    def test_links_and_anchors_suppressed(self, sink):
        """Test that links and anchors write nothing in head mode."""
        sink.head()
        sink.link("http://x")
        sink.anchor("a")
        sink.text("Title")
        sink.anchor_end()
        sink.link_end()
        sink.head_end()
        assert sink.getvalue() == ""
        assert sink.head_text == "Title"
