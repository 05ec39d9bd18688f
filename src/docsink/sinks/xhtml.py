#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/xhtml.py
"""XHTML sink.

This module provides the XhtmlSink class which turns a stream of document
events into XHTML markup. Each event writes its tags immediately; the only
text held back is the head buffer.

The sink trusts its caller: events out of order or unmatched produce
malformed output rather than errors. Wrap the sink in
:class:`docsink.sinks.validating.ValidatingSink` to have the calling contract
checked.

"""

from __future__ import annotations

import logging

from docsink.options.xhtml import XhtmlSinkOptions
from docsink.sinks.base import BaseSink
from docsink.sinks.figures import FigureMixin
from docsink.sinks.links import LinkMixin
from docsink.sinks.structure import StructureMixin
from docsink.sinks.tables import TableMixin
from docsink.sinks.text import TextMixin
from docsink.utils.io_utils import OutputTarget

logger = logging.getLogger(__name__)


class XhtmlSink(StructureMixin, TableMixin, FigureMixin, LinkMixin, TextMixin, BaseSink):
    """Render sink events as XHTML.

    Parameters
    ----------
    output : str, Path, IO[str], IO[bytes] or None, default None
        Output destination. With None, read the result with :meth:`getvalue`.
    options : XhtmlSinkOptions or None, default None
        XHTML rendering options

    Examples
    --------
    Render a small table:

        >>> from docsink import Justification, XhtmlSink
        >>> sink = XhtmlSink()
        >>> sink.table()
        >>> sink.table_rows([Justification.LEFT], grid=True)
        >>> sink.table_row()
        >>> sink.table_cell()
        >>> sink.text("A & B")
        >>> sink.table_cell_end()
        >>> sink.table_row_end()
        >>> sink.table_rows_end()
        >>> sink.table_end()
        >>> sink.getvalue()
        '<table align="center" border="1" class="bodyTable"><tr class="a"><td align="left">A &amp; B</td></tr></table>'

    """

    def __init__(self, output: OutputTarget = None, options: XhtmlSinkOptions | None = None):
        """Initialize the XHTML sink with an output destination and options."""
        BaseSink._validate_options_type(options, XhtmlSinkOptions, "xhtml")
        options = options or XhtmlSinkOptions()
        BaseSink.__init__(self, output, options)
        self.options: XhtmlSinkOptions = options
        self._tags.namespace = options.namespace
        logger.debug("Created XHTML sink writing to %s", self._destination.file_path or "stream")


__all__ = ["XhtmlSink"]
