#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/tables.py
"""Table events.

Tables are opened in two steps. ``table()`` only records the caller's
attributes; ``table_rows()`` declares the column justification and writes the
``<table>`` tag, merging the recorded attributes over the defaults. Events are
expected in the order::

    table -> table_rows -> (table_row -> (table_cell | table_header_cell)* -> table_row_end)*
          -> table_rows_end -> table_end

Rows alternate between the two row classes. Cells take their ``align`` from
the declared justification; cells past the end of the justification array
reuse its last entry.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence, Union

from docsink.constants import ATTR_ALIGN, ATTR_BORDER, ATTR_CLASS, ATTR_WIDTH, DEFAULT_TABLE_ALIGN
from docsink.sinks.types import Justification
from docsink.utils.attributes import AttributeSet, AttributesLike

if TYPE_CHECKING:
    from docsink.options.xhtml import XhtmlSinkOptions
    from docsink.sinks.state import RenderState
    from docsink.sinks.tags import TagEmitter

logger = logging.getLogger(__name__)


def align_token(justification: Union[Justification, str, None]) -> str:
    """Map a justification to its ``align`` value; unrecognized values give ``center``."""
    try:
        return Justification(justification).value
    except ValueError:
        return Justification.CENTER.value


class TableMixin:
    """Table event handlers for XHTML sinks."""

    options: XhtmlSinkOptions
    _state: RenderState
    _tags: TagEmitter

    if TYPE_CHECKING:

        def _filter(self, attributes: AttributesLike, construct: str) -> AttributeSet: ...

    def table(self, attributes: AttributesLike = None) -> None:
        """Record table attributes; the tag itself is written by :meth:`table_rows`."""
        if self._state.pending_table_attributes:
            logger.debug("Discarding pending table attributes not consumed by table_rows()")
        self._state.pending_table_attributes = self._filter(attributes, "table")

    def table_end(self) -> None:
        self._tags.end_tag("table")

    def table_rows(self, justification: Sequence[Union[Justification, str]] | None = None, grid: bool = False) -> None:
        """Declare column justification and write the table start tag.

        Parameters
        ----------
        justification : sequence of Justification, optional
            Alignment per column
        grid : bool, default False
            Whether the table has a border (``border="1"``) or not (``border="0"``)

        Notes
        -----
        ``align``, ``border`` and ``class`` defaults are only used for keys the
        attributes recorded by :meth:`table` do not define.

        """
        self._state.set_justification(justification)

        pending = self._state.pending_table_attributes or AttributeSet()
        atts = AttributeSet()
        if not pending.is_defined(ATTR_ALIGN):
            atts[ATTR_ALIGN] = DEFAULT_TABLE_ALIGN
        if not pending.is_defined(ATTR_BORDER):
            atts[ATTR_BORDER] = "1" if grid else "0"
        if not pending.is_defined(ATTR_CLASS):
            atts[ATTR_CLASS] = self.options.table_class
        atts.add_all(pending)
        self._state.pending_table_attributes = None

        self._tags.start_tag("table", atts)

    def table_rows_end(self) -> None:
        """Forget the justification and restart row striping for the next table."""
        self._state.clear_justification()
        self._state.row_is_even = True

    def table_row(self, attributes: AttributesLike = None) -> None:
        """Start a row, alternating the row class on every call."""
        odd_class, even_class = self.options.row_classes
        atts = AttributeSet({ATTR_CLASS: odd_class if self._state.row_is_even else even_class})
        atts.add_all(self._filter(attributes, "tr"))
        self._tags.start_tag("tr", atts)

        self._state.row_is_even = not self._state.row_is_even
        self._state.cell_index = 0

    def table_row_end(self) -> None:
        self._tags.end_tag("tr")
        self._state.cell_index = 0

    def table_cell(self, attributes: AttributesLike = None, width: str | None = None) -> None:
        """Start a body cell. ``width`` is shorthand for a ``width`` attribute."""
        self._table_cell("td", attributes, width)

    def table_cell_end(self) -> None:
        self._table_cell_end("td")

    def table_header_cell(self, attributes: AttributesLike = None, width: str | None = None) -> None:
        """Start a header cell. ``width`` is shorthand for a ``width`` attribute."""
        self._table_cell("th", attributes, width)

    def table_header_cell_end(self) -> None:
        self._table_cell_end("th")

    def _table_cell(self, tag: str, attributes: AttributesLike, width: str | None) -> None:
        atts = AttributeSet()
        justification = self._state.current_justification()
        if justification is not None:
            atts[ATTR_ALIGN] = align_token(justification)

        cell_attributes = AttributeSet.coerce(attributes)
        if width is not None:
            cell_attributes[ATTR_WIDTH] = width
        atts.add_all(self._filter(cell_attributes, "td"))

        self._tags.start_tag(tag, atts)

    def _table_cell_end(self, tag: str) -> None:
        self._tags.end_tag(tag)
        if self._state.has_justification:
            self._state.cell_index += 1

    def table_caption(self, attributes: AttributesLike = None) -> None:
        self._tags.start_tag("caption", self._filter(attributes, "section"))

    def table_caption_end(self) -> None:
        self._tags.end_tag("caption")
