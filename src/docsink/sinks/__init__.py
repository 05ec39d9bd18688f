#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Event sinks turning document events into markup."""

from docsink.sinks.base import BaseSink
from docsink.sinks.state import RenderState
from docsink.sinks.tags import TagEmitter
from docsink.sinks.types import FigureMode, Justification, Numbering
from docsink.sinks.validating import ValidatingSink
from docsink.sinks.xhtml import XhtmlSink

__all__ = [
    "BaseSink",
    "RenderState",
    "TagEmitter",
    "FigureMode",
    "Justification",
    "Numbering",
    "ValidatingSink",
    "XhtmlSink",
]
