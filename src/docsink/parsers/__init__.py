#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Block parsers producing sink events from wiki markup."""

from docsink.parsers.base import Block, BlockParser
from docsink.parsers.confluence import (
    ConfluenceParser,
    FigureBlock,
    FigureBlockParser,
    ParagraphBlock,
    ParagraphBlockParser,
)
from docsink.parsers.source import ByLineSource

__all__ = [
    "Block",
    "BlockParser",
    "ByLineSource",
    "ConfluenceParser",
    "FigureBlock",
    "FigureBlockParser",
    "ParagraphBlock",
    "ParagraphBlockParser",
]
