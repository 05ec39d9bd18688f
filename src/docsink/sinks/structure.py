#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/structure.py
"""Block structure events: sections, lists, paragraphs and verbatim blocks.

Sections are numbered 1 to 5. A section is written as a ``div`` carrying the
section class, and its title as a heading one level below its depth, leaving
``h1`` for the document title. Depths outside the range write nothing.

All structure events are suppressed while the sink is in head mode.

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Union

from docsink.constants import (
    ATTR_ALIGN,
    ATTR_CLASS,
    ATTR_DECORATION,
    ATTR_ID,
    ATTR_STYLE,
    ATTR_WIDTH,
    DECORATION_BOXED,
    MAX_SECTION_LEVEL,
    MIN_SECTION_LEVEL,
    PAGE_BREAK_COMMENT,
    SECTION_TITLE_OFFSET,
)
from docsink.sinks.types import Numbering
from docsink.utils.attributes import AttributeSet, AttributesLike

if TYPE_CHECKING:
    from docsink.options.xhtml import XhtmlSinkOptions
    from docsink.sinks.state import RenderState
    from docsink.sinks.tags import TagEmitter

logger = logging.getLogger(__name__)

# A hyphen followed by another hyphen; comments must not contain "--"
_DOUBLE_HYPHEN = re.compile(r"-(?=-)")


def _in_section_range(level: int) -> bool:
    return MIN_SECTION_LEVEL <= level <= MAX_SECTION_LEVEL


def list_style_type(numbering: Union[Numbering, str, None]) -> str:
    """Map a numbering style to its CSS ``list-style-type`` token.

    Unknown values fall back to ``decimal``.
    """
    try:
        return Numbering(numbering).value
    except ValueError:
        return Numbering.DECIMAL.value


class StructureMixin:
    """Block structure event handlers for XHTML sinks."""

    options: XhtmlSinkOptions
    _state: RenderState
    _tags: TagEmitter

    if TYPE_CHECKING:

        def write(self, text: str) -> None: ...

        def _filter(self, attributes: AttributesLike, construct: str) -> AttributeSet: ...

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def section(self, level: int, attributes: AttributesLike = None) -> None:
        """Start a section of the given depth.

        The default class is ``options.section_class``; a ``class`` given by the
        caller replaces it.
        """
        if self._state.head_mode:
            return
        if not _in_section_range(level):
            logger.debug("Ignoring section start with out-of-range level %s", level)
            return

        atts = AttributeSet({ATTR_CLASS: self.options.section_class})
        atts.add_all(self._filter(attributes, "base"))
        self._tags.start_tag("div", atts)

    def section_end(self, level: int) -> None:
        if self._state.head_mode or not _in_section_range(level):
            return
        self._tags.end_tag("div")

    def section_title(self, level: int, attributes: AttributesLike = None) -> None:
        """Start a section title; depth 1 becomes ``h2`` through depth 5 as ``h6``."""
        if self._state.head_mode:
            return
        if not _in_section_range(level):
            logger.debug("Ignoring section title with out-of-range level %s", level)
            return
        self._tags.start_tag(f"h{level + SECTION_TITLE_OFFSET}", self._filter(attributes, "section"))

    def section_title_end(self, level: int) -> None:
        if self._state.head_mode or not _in_section_range(level):
            return
        self._tags.end_tag(f"h{level + SECTION_TITLE_OFFSET}")

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _block_start(self, tag: str, attributes: AttributesLike, construct: str = "base") -> None:
        if not self._state.head_mode:
            self._tags.start_tag(tag, self._filter(attributes, construct))

    def _block_end(self, tag: str) -> None:
        if not self._state.head_mode:
            self._tags.end_tag(tag)

    def unordered_list(self, attributes: AttributesLike = None) -> None:
        self._block_start("ul", attributes)

    def unordered_list_end(self) -> None:
        self._block_end("ul")

    def list_item(self, attributes: AttributesLike = None) -> None:
        self._block_start("li", attributes)

    def list_item_end(self) -> None:
        self._block_end("li")

    def numbered_list(
        self, numbering: Union[Numbering, str] = Numbering.DECIMAL, attributes: AttributesLike = None
    ) -> None:
        """Start an ordered list styled after ``numbering``.

        The computed ``style`` attribute replaces any style given by the caller.
        """
        if self._state.head_mode:
            return
        atts = self._filter(attributes, "section")
        atts[ATTR_STYLE] = f"list-style-type: {list_style_type(numbering)}"
        self._tags.start_tag("ol", atts)

    def numbered_list_end(self) -> None:
        self._block_end("ol")

    def numbered_list_item(self, attributes: AttributesLike = None) -> None:
        self._block_start("li", attributes)

    def numbered_list_item_end(self) -> None:
        self._block_end("li")

    def definition_list(self, attributes: AttributesLike = None) -> None:
        self._block_start("dl", attributes)

    def definition_list_end(self) -> None:
        self._block_end("dl")

    def defined_term(self, attributes: AttributesLike = None) -> None:
        self._block_start("dt", attributes)

    def defined_term_end(self) -> None:
        self._block_end("dt")

    def definition(self, attributes: AttributesLike = None) -> None:
        self._block_start("dd", attributes)

    def definition_end(self) -> None:
        self._block_end("dd")

    # ------------------------------------------------------------------
    # Paragraphs, rules and verbatim blocks
    # ------------------------------------------------------------------

    def paragraph(self, attributes: AttributesLike = None) -> None:
        self._block_start("p", attributes, "section")

    def paragraph_end(self) -> None:
        self._block_end("p")

    def horizontal_rule(self, attributes: AttributesLike = None) -> None:
        if not self._state.head_mode:
            self._tags.simple_tag("hr", self._filter(attributes, "hr"))

    def verbatim(self, attributes: AttributesLike = None, *, boxed: bool = False) -> None:
        """Start a preformatted block, written as ``<div><pre>``.

        A ``decoration="boxed"`` attribute (or ``boxed=True``) gives the container
        the source class. ``decoration`` itself is never written, ``width`` only
        goes to the ``pre`` element, ``align``, ``class`` and ``id`` only to the
        container.
        """
        if self._state.head_mode:
            return
        self._state.verbatim_mode = True

        atts = self._filter(attributes, "verbatim")
        if boxed:
            atts[ATTR_DECORATION] = DECORATION_BOXED
        if atts.contains(ATTR_DECORATION, DECORATION_BOXED):
            atts[ATTR_CLASS] = self.options.source_class
        atts.remove(ATTR_DECORATION)

        width = atts.pop(ATTR_WIDTH, None)
        self._tags.start_tag("div", atts)

        if width is not None:
            atts[ATTR_WIDTH] = width
        atts.remove(ATTR_ALIGN, ATTR_CLASS, ATTR_ID)
        self._tags.start_tag("pre", atts)

    def verbatim_end(self) -> None:
        if self._state.head_mode:
            return
        self._tags.end_tag("pre")
        self._tags.end_tag("div")
        self._state.verbatim_mode = False

    # ------------------------------------------------------------------
    # Comments and raw output
    # ------------------------------------------------------------------

    def page_break(self) -> None:
        self.comment(PAGE_BREAK_COMMENT)

    def comment(self, comment: str) -> None:
        """Write an XML comment; ``--`` inside the text is split so the comment stays closed."""
        safe_text = _DOUBLE_HYPHEN.sub("- ", comment)
        self.raw_text(f"<!-- {safe_text} -->")

    def raw_text(self, text: str) -> None:
        """Write text as-is, without escaping."""
        self.write(text)
