#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/parsers/source.py
"""Line-oriented input for block parsers.

Block parsers consume their input one line at a time and may look ahead by
reading a line and handing it back with :meth:`ByLineSource.unget_line`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from docsink.constants import DEFAULT_ENCODING
from docsink.exceptions import FileError

logger = logging.getLogger(__name__)

SourceInput = Union[str, Path, IO[str]]


class ByLineSource:
    """Read source text line by line, with single-line push back.

    Parameters
    ----------
    source : str, Path or IO[str]
        Source text. A ``str`` is the text itself; a ``Path`` is read from
        disk; a text stream is read to its end.
    encoding : str, default "utf-8"
        Encoding used when reading a path

    Raises
    ------
    FileError
        If a path cannot be read

    Examples
    --------
        >>> source = ByLineSource("first\\nsecond")
        >>> source.next_line()
        'first'
        >>> source.unget_line()
        >>> source.next_line(), source.next_line(), source.next_line()
        ('first', 'second', None)

    """

    def __init__(self, source: SourceInput, encoding: str = DEFAULT_ENCODING):
        """Load the source text and split it into lines."""
        if isinstance(source, Path):
            try:
                text = source.read_text(encoding=encoding)
            except (OSError, UnicodeDecodeError) as e:
                raise FileError(str(source), original_error=e) from e
            logger.debug("Read %d characters from %s", len(text), source)
        elif isinstance(source, str):
            text = source
        elif hasattr(source, "read"):
            text = source.read()
        else:
            raise TypeError(f"Unsupported source type: {type(source)}")

        self._lines = text.splitlines()
        self._position = 0
        self._can_unget = False

    @property
    def line_number(self) -> int:
        """1-based number of the line last returned by :meth:`next_line`, 0 before the first."""
        return self._position

    def next_line(self) -> str | None:
        """Return the next line without its terminator, or None at the end of input."""
        if self._position >= len(self._lines):
            self._can_unget = False
            return None
        line = self._lines[self._position]
        self._position += 1
        self._can_unget = True
        return line

    def unget_line(self) -> None:
        """Push the line last returned by :meth:`next_line` back onto the source.

        Raises
        ------
        ValueError
            If no line was returned since the last push back

        """
        if not self._can_unget:
            raise ValueError("No line to unget")
        self._position -= 1
        self._can_unget = False


__all__ = ["ByLineSource", "SourceInput"]
