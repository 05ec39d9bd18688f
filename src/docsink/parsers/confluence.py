#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/parsers/confluence.py
"""Confluence wiki markup parser.

This module reads the block-level subset of Confluence markup needed to
render figures and plain paragraphs, and replays it as sink events.

Figure syntax
-------------
An image between two exclamation marks, optionally followed by a caption::

    !images/chart.png! Quarterly results
    by region

The caption runs to the first blank line; its lines are joined with single
spaces. A caption starting with a ``\\\\`` line break has the break removed.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from docsink.exceptions import ParsingError
from docsink.parsers.base import Block, BlockParser
from docsink.parsers.source import ByLineSource, SourceInput

logger = logging.getLogger(__name__)

_CAPTION_LINE_BREAK = "\\\\"


def _read_until_blank_line(source: ByLineSource) -> list[str]:
    """Read stripped lines up to, and consuming, the next blank line."""
    lines = []
    while (line := source.next_line()) is not None:
        if not line.strip():
            break
        lines.append(line.strip())
    return lines


def _join_text(*parts: str) -> str:
    return " ".join(part for part in parts if part)


@dataclass
class FigureBlock(Block):
    """An image with an optional caption."""

    image: str
    caption: str | None = None

    def traverse(self, sink: Any) -> None:
        """Emit the figure using the legacy figure events."""
        sink.figure()
        sink.figure_graphics(self.image)
        if self.caption is not None:
            sink.figure_caption()
            sink.text(self.caption)
            sink.figure_caption_end()
        sink.figure_end()


@dataclass
class ParagraphBlock(Block):
    """A run of text lines rendered as one paragraph."""

    text: str

    def traverse(self, sink: Any) -> None:
        sink.paragraph()
        sink.text(self.text)
        sink.paragraph_end()


class FigureBlockParser(BlockParser):
    """Parse ``!image! caption`` figure blocks."""

    def accept(self, line: str, source: ByLineSource) -> bool:
        return line.startswith("!") and line.rfind("!") > 1

    def visit(self, line: str, source: ByLineSource) -> FigureBlock:
        last_mark = line.rfind("!")
        image = line[1:last_mark]
        first_line = line[last_mark + 1 :].strip()

        if first_line.startswith(_CAPTION_LINE_BREAK):
            first_line = first_line[len(_CAPTION_LINE_BREAK) :]

        caption = _join_text(first_line.strip(), *_read_until_blank_line(source))
        return FigureBlock(image, caption if caption.strip() else None)


class ParagraphBlockParser(BlockParser):
    """Parse any non-blank line and its followers up to a blank line as a paragraph."""

    def accept(self, line: str, source: ByLineSource) -> bool:
        return bool(line.strip())

    def visit(self, line: str, source: ByLineSource) -> ParagraphBlock:
        return ParagraphBlock(_join_text(line.strip(), *_read_until_blank_line(source)))


class ConfluenceParser:
    """Parse Confluence markup into sink events.

    Parameters
    ----------
    block_parsers : sequence of BlockParser, optional
        Block parsers tried in order for each block. Defaults to figures
        first, then paragraphs.

    Examples
    --------
        >>> from docsink import XhtmlSink
        >>> sink = XhtmlSink()
        >>> ConfluenceParser().parse("!chart.png! Sales", sink)
        >>> sink.getvalue()
        '<img src="chart.png" alt="Sales" />'

    """

    def __init__(self, block_parsers: Sequence[BlockParser] | None = None):
        """Initialize the parser with its block parsers."""
        if block_parsers is None:
            block_parsers = [FigureBlockParser(), ParagraphBlockParser()]
        self.block_parsers = list(block_parsers)

    def parse_blocks(self, source: ByLineSource) -> list[Block]:
        """Split the source into blocks.

        Raises
        ------
        ParsingError
            If no block parser accepts a non-blank line

        """
        blocks = []
        while (line := source.next_line()) is not None:
            if not line.strip():
                continue
            parser = next((p for p in self.block_parsers if p.accept(line, source)), None)
            if parser is None:
                raise ParsingError(
                    f"No block parser accepts line {source.line_number}: {line!r}",
                    parsing_stage="block",
                    line_number=source.line_number,
                )
            blocks.append(parser.visit(line, source))
        logger.debug("Parsed %d blocks", len(blocks))
        return blocks

    def parse(self, input_data: SourceInput | ByLineSource, sink: Any) -> None:
        """Parse ``input_data`` and send every block to ``sink``.

        Parameters
        ----------
        input_data : str, Path, IO[str] or ByLineSource
            Markup text, a path to read it from, or a prepared source
        sink : object
            Receives the events, e.g. an XhtmlSink or ValidatingSink

        """
        source = input_data if isinstance(input_data, ByLineSource) else ByLineSource(input_data)
        for block in self.parse_blocks(source):
            block.traverse(sink)


__all__ = [
    "ConfluenceParser",
    "FigureBlock",
    "FigureBlockParser",
    "ParagraphBlock",
    "ParagraphBlockParser",
]
