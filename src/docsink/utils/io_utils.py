#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides the scoped output destination used by sinks. A
destination is acquired when a sink is created, flushed on request and
released on close. Paths are opened (and owned) by the destination, while
file-like objects are borrowed: closing the destination flushes them but
leaves them open for the caller.

"""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from docsink.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

OutputTarget = Union[str, Path, IO[bytes], IO[str], None]


def _is_binary_stream(output: object) -> bool:
    """Detect whether a file-like object expects bytes."""
    # Strategy 1: Check concrete types first (most reliable)
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    # Strategy 2: Check io module base classes (robust for standard streams)
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    # Strategy 3: Check mode attribute (fallback for file objects)
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


class OutputDestination:
    """Text destination wrapping a path, a text stream or a binary stream.

    Parameters
    ----------
    output : str, Path, IO[str], IO[bytes] or None
        Where written text goes. ``None`` writes into an in-memory buffer
        whose content is available through :meth:`getvalue`.
    encoding : str, default "utf-8"
        Encoding for paths and binary streams

    Raises
    ------
    OutputWriteError
        If a path destination cannot be opened
    TypeError
        If the output type is not supported

    """

    def __init__(self, output: OutputTarget = None, encoding: str = "utf-8"):
        """Acquire the destination."""
        self.encoding = encoding
        self.file_path: str | None = None
        self._binary = False
        self._owned = False
        self._closed = False
        self._final_value: str | None = None

        if output is None:
            self._stream: IO[str] | IO[bytes] = StringIO()
            self._owned = True
        elif isinstance(output, (str, Path)):
            self.file_path = str(output)
            try:
                self._stream = Path(output).open("w", encoding=encoding, newline="")
            except OSError as e:
                raise OutputWriteError(self.file_path, original_error=e) from e
            self._owned = True
        elif hasattr(output, "write"):
            self._stream = output
            self._binary = _is_binary_stream(output)
        else:
            raise TypeError(f"Unsupported output type: {type(output)}")

    @property
    def closed(self) -> bool:
        """Whether the destination has been released."""
        return self._closed

    def write(self, text: str) -> None:
        """Write text to the destination.

        Raises
        ------
        OutputWriteError
            If the underlying stream rejects the write

        """
        try:
            if self._binary:
                cast(IO[bytes], self._stream).write(text.encode(self.encoding))
            else:
                cast(IO[str], self._stream).write(text)
        except (OSError, ValueError) as e:
            raise OutputWriteError(self.file_path, original_error=e) from e

    def flush(self) -> None:
        """Force buffered output to the destination."""
        try:
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise OutputWriteError(self.file_path, message="Failed to flush output", original_error=e) from e

    def close(self) -> None:
        """Release the destination. Borrowed streams are flushed, not closed."""
        if self._closed:
            return
        self._closed = True
        if isinstance(self._stream, StringIO) and self._owned:
            self._final_value = self._stream.getvalue()
        try:
            if self._owned:
                self._stream.close()
            else:
                self._stream.flush()
        except (OSError, ValueError) as e:
            raise OutputWriteError(self.file_path, message="Failed to close output", original_error=e) from e
        logger.debug("Released output destination %s", self.file_path or type(self._stream).__name__)

    def getvalue(self) -> str:
        """Return everything written so far to an in-memory destination.

        Raises
        ------
        TypeError
            If the destination is not the sink-owned in-memory buffer

        """
        if self._final_value is not None:
            return self._final_value
        if self._owned and isinstance(self._stream, StringIO):
            return self._stream.getvalue()
        raise TypeError("getvalue() is only available when the sink writes to its own buffer")


__all__ = ["OutputDestination", "OutputTarget"]
