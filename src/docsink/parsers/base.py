#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/parsers/base.py
"""Base classes for block parsers.

A document is parsed as a sequence of blocks. Each BlockParser recognizes one
kind of block by its first line (:meth:`BlockParser.accept`) and reads the
whole block from the source (:meth:`BlockParser.visit`). The resulting Block
replays itself as sink events through :meth:`Block.traverse`.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from docsink.parsers.source import ByLineSource

logger = logging.getLogger(__name__)


class Block(ABC):
    """A parsed block able to emit itself as sink events."""

    @abstractmethod
    def traverse(self, sink: Any) -> None:
        """Send the events describing this block to ``sink``.

        Parameters
        ----------
        sink : object
            Any object with the sink event interface, e.g. an XhtmlSink

        """
        ...


class BlockParser(ABC):
    """Abstract base class for block parsers.

    Examples
    --------
    A parser for horizontal rules:

        >>> class RuleBlock(Block):
        ...     def traverse(self, sink):
        ...         sink.horizontal_rule()
        >>>
        >>> class RuleBlockParser(BlockParser):
        ...     def accept(self, line, source):
        ...         return line.startswith("----")
        ...     def visit(self, line, source):
        ...         return RuleBlock()

    """

    @abstractmethod
    def accept(self, line: str, source: ByLineSource) -> bool:
        """Check whether ``line`` starts a block of this kind.

        Parameters
        ----------
        line : str
            Current line, already read from ``source``
        source : ByLineSource
            The remaining input

        Returns
        -------
        bool
            True if :meth:`visit` should be called for this line

        """
        ...

    @abstractmethod
    def visit(self, line: str, source: ByLineSource) -> Block:
        """Read the block starting at ``line``.

        Implementations may read further lines from ``source``; a line read
        ahead that does not belong to the block must be pushed back with
        :meth:`ByLineSource.unget_line`.

        Parameters
        ----------
        line : str
            First line of the block
        source : ByLineSource
            The remaining input

        Returns
        -------
        Block
            The parsed block

        """
        ...


__all__ = ["Block", "BlockParser"]
