"""docsink - stream document events into XHTML markup.

docsink renders a stream of structural document events (sections, lists,
tables, figures, links and styled text) as XHTML. The events are usually
produced by a markup parser; a Confluence wiki markup parser is included.

Key Features
------------
- Event sink writing XHTML directly to a path, stream or in-memory buffer
- Attribute whitelisting per construct
- Legacy and current figure conventions
- Optional strict wrapper checking the event order
- Block parser for Confluence figure and paragraph markup

Examples
--------
Render events directly:

    >>> from docsink import XhtmlSink
    >>> with XhtmlSink() as sink:
    ...     sink.paragraph()
    ...     sink.text("Fish & chips")
    ...     sink.paragraph_end()
    >>> sink.getvalue()
    '<p>Fish &amp; chips</p>'

Render wiki markup:

    >>> from docsink import ConfluenceParser
    >>> sink = XhtmlSink()
    >>> ConfluenceParser().parse("!logo.png!", sink)
    >>> sink.getvalue()
    '<img src="logo.png" />'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from docsink.exceptions import (
    DocSinkError,
    EventOrderError,
    FileError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from docsink.options import BaseSinkOptions, XhtmlSinkOptions
from docsink.parsers import ByLineSource, ConfluenceParser
from docsink.sinks import FigureMode, Justification, Numbering, ValidatingSink, XhtmlSink
from docsink.utils.attributes import AttributeSet

__all__ = [
    "__version__",
    # Sinks
    "XhtmlSink",
    "ValidatingSink",
    "FigureMode",
    "Justification",
    "Numbering",
    "AttributeSet",
    # Options
    "BaseSinkOptions",
    "XhtmlSinkOptions",
    # Parsers
    "ByLineSource",
    "ConfluenceParser",
    # Exceptions
    "DocSinkError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "EventOrderError",
]
