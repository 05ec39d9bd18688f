#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/figures.py
"""Figure events in their two calling conventions.

Legacy convention (``figure()`` called without arguments) builds a single
image tag out of raw fragments::

    figure()                 ->  <img
    figure_graphics("a.png") ->   src="a.png"
    figure_caption()         ->   alt="
    text("Caption")          ->  Caption
    figure_caption_end()     ->  "
    figure_end()             ->   />

Current convention (``figure(attributes)``, attributes may be None) writes a
container with a centered image paragraph and an italic caption paragraph.

The convention is chosen by the opening ``figure`` call and carried to the
graphics, caption and closing calls of the same figure.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from docsink.constants import ATTR_ALIGN, ATTR_ALT, ATTR_CLASS, ATTR_SRC
from docsink.options.base import UNSET
from docsink.sinks.types import FigureMode
from docsink.utils.attributes import AttributeSet, AttributesLike
from docsink.utils.html_utils import escape_html

if TYPE_CHECKING:
    from docsink.options.xhtml import XhtmlSinkOptions
    from docsink.sinks.state import RenderState
    from docsink.sinks.tags import TagEmitter

logger = logging.getLogger(__name__)


class FigureMixin:
    """Figure event handlers for XHTML sinks."""

    options: XhtmlSinkOptions
    _state: RenderState
    _tags: TagEmitter

    if TYPE_CHECKING:

        def write(self, text: str) -> None: ...

        def _filter(self, attributes: AttributesLike, construct: str) -> AttributeSet: ...

    def figure(self, attributes: Any = UNSET) -> None:
        """Start a figure.

        Parameters
        ----------
        attributes : AttributeSet, mapping or None, optional
            Omit entirely to use the legacy convention. Any value, ``None``
            included, selects the current convention with a figure container.

        """
        if self._state.figure_mode is not None:
            logger.debug("Figure started while a %s figure is still open", self._state.figure_mode.value)

        if attributes is UNSET:
            self._state.figure_mode = FigureMode.LEGACY
            self.write(f"<{self._tags.qualified('img')}")
            return

        self._state.figure_mode = FigureMode.CURRENT
        atts = self._filter(attributes, "base")
        if not atts.is_defined(ATTR_CLASS):
            atts[ATTR_CLASS] = self.options.figure_class
        self._tags.start_tag("div", atts)

    def figure_end(self) -> None:
        if self._state.figure_mode is FigureMode.LEGACY:
            self.write(" />")
        else:
            self._tags.end_tag("div")
        self._state.figure_mode = None

    def figure_graphics(self, src: str, attributes: Any = UNSET) -> None:
        """Write the figure image.

        Inside a legacy figure, calling without attributes writes only the
        ``src`` attribute of the open image tag. Otherwise a complete ``img``
        tag is written, wrapped in a centered paragraph inside a current figure.
        """
        if attributes is UNSET and self._state.figure_mode is FigureMode.LEGACY:
            self.write(f' {ATTR_SRC}="{escape_html(src)}"')
            return

        in_figure = self._state.in_figure
        if in_figure:
            self._tags.start_tag("p", AttributeSet({ATTR_ALIGN: "center"}))

        atts = AttributeSet({ATTR_SRC: src})
        atts.add_all(self._filter(None if attributes is UNSET else attributes, "img"))
        self._tags.simple_tag("img", atts)

        if in_figure:
            self._tags.end_tag("p")

    def figure_caption(self, attributes: Any = UNSET) -> None:
        """Start the figure caption.

        Inside a legacy figure, calling without attributes opens the ``alt``
        attribute of the image tag; caption text is escaped, so quotes cannot
        end it early. Otherwise a centered paragraph with italic text is opened.
        """
        if attributes is UNSET and self._state.figure_mode is FigureMode.LEGACY:
            self._state.caption_mode = FigureMode.LEGACY
            self.write(f' {ATTR_ALT}="')
            return

        self._state.caption_mode = FigureMode.CURRENT
        atts = AttributeSet({ATTR_ALIGN: "center"})
        atts.add_all(self._filter(None if attributes is UNSET else attributes, "base"))
        self._tags.start_tag("p", atts)
        self._tags.start_tag("i")

    def figure_caption_end(self) -> None:
        if self._state.caption_mode is FigureMode.LEGACY:
            self.write('"')
        else:
            self._tags.end_tag("i")
            self._tags.end_tag("p")
        self._state.caption_mode = None
