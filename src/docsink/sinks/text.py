#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/text.py
"""Text, inline decoration and head-mode events.

In head mode text is collected in the head buffer instead of being written,
and inline tags are suppressed. The buffer is handed to whoever renders the
document head through :meth:`TextMixin.consume_head_buffer`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docsink.constants import (
    ATTR_DECORATION,
    ATTR_VALIGN,
    DECORATION_LINE_THROUGH,
    DECORATION_UNDERLINE,
    NBSP_ENTITY,
    VALIGN_SUB,
    VALIGN_SUP,
)
from docsink.utils.attributes import AttributeSet, AttributesLike
from docsink.utils.html_utils import escape_html

if TYPE_CHECKING:
    from docsink.options.xhtml import XhtmlSinkOptions
    from docsink.sinks.state import RenderState
    from docsink.sinks.tags import TagEmitter


def _decoration_tags(attributes: AttributeSet) -> list[str]:
    """Inline tags requested by text attributes, outermost first."""
    tags = []
    if attributes.contains(ATTR_DECORATION, DECORATION_UNDERLINE):
        tags.append("u")
    if attributes.contains(ATTR_DECORATION, DECORATION_LINE_THROUGH):
        tags.append("s")
    if attributes.contains(ATTR_VALIGN, VALIGN_SUB):
        tags.append("sub")
    elif attributes.contains(ATTR_VALIGN, VALIGN_SUP):
        tags.append("sup")
    return tags


class TextMixin:
    """Text event handlers for XHTML sinks."""

    options: XhtmlSinkOptions
    _state: RenderState
    _tags: TagEmitter

    if TYPE_CHECKING:

        def write(self, text: str) -> None: ...

        def _filter(self, attributes: AttributesLike, construct: str) -> AttributeSet: ...

    # ------------------------------------------------------------------
    # Head mode
    # ------------------------------------------------------------------

    def head(self) -> None:
        """Enter head mode with an empty head buffer."""
        self._state.reset_buffer()
        self._state.head_mode = True

    def head_end(self) -> None:
        self._state.head_mode = False

    @property
    def head_text(self) -> str:
        """Text accumulated in head mode so far."""
        return self._state.head_text()

    def consume_head_buffer(self) -> str:
        """Return the accumulated head text and empty the buffer."""
        text = self._state.head_text()
        self._state.reset_buffer()
        return text

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def text(self, text: str, attributes: AttributesLike = None) -> None:
        """Write text, escaped exactly once.

        Attributes may request inline decoration: ``decoration="underline"``,
        ``decoration="line-through"`` and ``valign="sub"`` or ``"sup"``. The
        tags are nested in that order, subscript or superscript innermost.
        Decoration is ignored in head and verbatim mode.
        """
        if self._state.head_mode:
            self._state.head_buffer.append(text)
            return

        tags = [] if self._state.verbatim_mode or not attributes else _decoration_tags(AttributeSet(attributes))
        for tag in tags:
            self._tags.start_tag(tag)
        self.write(escape_html(text))
        for tag in reversed(tags):
            self._tags.end_tag(tag)

    def line_break(self, attributes: AttributesLike = None) -> None:
        if self._state.head_mode:
            self._state.head_buffer.append(self.options.line_separator)
        else:
            self._tags.simple_tag("br", self._filter(attributes, "br"))

    def non_breaking_space(self) -> None:
        if self._state.head_mode:
            self._state.head_buffer.append(" ")
        else:
            self.write(NBSP_ENTITY)

    # ------------------------------------------------------------------
    # Inline styles
    # ------------------------------------------------------------------

    def _inline_start(self, tag: str, attributes: AttributesLike) -> None:
        if not self._state.head_mode:
            self._tags.start_tag(tag, self._filter(attributes, "base"))

    def _inline_end(self, tag: str) -> None:
        if not self._state.head_mode:
            self._tags.end_tag(tag)

    def italic(self, attributes: AttributesLike = None) -> None:
        self._inline_start("i", attributes)

    def italic_end(self) -> None:
        self._inline_end("i")

    def bold(self, attributes: AttributesLike = None) -> None:
        self._inline_start("b", attributes)

    def bold_end(self) -> None:
        self._inline_end("b")

    def monospaced(self, attributes: AttributesLike = None) -> None:
        self._inline_start("tt", attributes)

    def monospaced_end(self) -> None:
        self._inline_end("tt")
