#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for docsink sinks.

Each sink has its own frozen Options dataclass. Use ``create_updated`` to
derive a modified copy.
"""

from __future__ import annotations

from docsink.options.base import UNSET, BaseSinkOptions, CloneFrozenMixin
from docsink.options.xhtml import XhtmlSinkOptions

__all__ = [
    "UNSET",
    "BaseSinkOptions",
    "CloneFrozenMixin",
    "XhtmlSinkOptions",
]
