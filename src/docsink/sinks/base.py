#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/base.py
"""Base class for event sinks.

This module defines the base class every sink inherits from. BaseSink owns
the output destination, the render state and the tag emitter; the
construct-specific event handlers are provided by mixins (see
``docsink.sinks.structure``, ``tables``, ``figures``, ``links`` and ``text``).

"""

from __future__ import annotations

import logging
import re
from types import TracebackType
from typing import Type

from docsink.exceptions import InvalidOptionsError, RenderingError
from docsink.options.base import BaseSinkOptions
from docsink.sinks.state import RenderState
from docsink.sinks.tags import TagEmitter
from docsink.utils.attributes import AttributeSet, AttributesLike, filter_attributes
from docsink.utils.io_utils import OutputDestination, OutputTarget

logger = logging.getLogger(__name__)

_EOL_PATTERN = re.compile(r"\r\n|\r|\n")


class BaseSink:
    """Base class for sinks writing markup text to an output destination.

    Parameters
    ----------
    output : str, Path, IO[str], IO[bytes] or None, default None
        Output destination. Paths are opened and owned by the sink; streams are
        borrowed. ``None`` writes into an internal buffer readable with
        :meth:`getvalue`.
    options : BaseSinkOptions or None, default None
        Sink options. If None, default options are used.

    Notes
    -----
    A sink renders exactly one document. Its state is not shared, so separate
    documents rendered concurrently each need their own sink.

    """

    def __init__(self, output: OutputTarget = None, options: BaseSinkOptions | None = None):
        """Acquire the destination and initialize the render state."""
        self.options = options or BaseSinkOptions()
        self._destination = OutputDestination(output, encoding=self.options.encoding)
        self._state = RenderState()
        self._tags = TagEmitter(self.write)

    @property
    def state(self) -> RenderState:
        """The render state of this sink."""
        return self._state

    @property
    def closed(self) -> bool:
        return self._destination.closed

    def write(self, text: str) -> None:
        """Write text with its line endings normalized.

        Raises
        ------
        RenderingError
            If the sink has been closed

        """
        if self._destination.closed:
            raise RenderingError("Cannot write to a closed sink", rendering_stage="output")
        self._destination.write(_EOL_PATTERN.sub(self.options.line_separator, text))

    def flush(self) -> None:
        """Force buffered output to the destination."""
        self._destination.flush()

    def close(self) -> None:
        """Release the destination. No further writes are valid afterwards."""
        self._destination.close()

    def getvalue(self) -> str:
        """Return the rendered text when the sink writes to its own buffer."""
        return self._destination.getvalue()

    def reset_state(self) -> None:
        """Reset the render state, e.g. before rendering another document."""
        self._state.reset()

    def __enter__(self) -> BaseSink:
        return self

    def __exit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _filter(self, attributes: AttributesLike, construct: str) -> AttributeSet:
        """Filter caller attributes against the whitelist of a construct."""
        allowed = getattr(self.options, "allowed_attributes", None)
        if allowed is None:
            return AttributeSet.coerce(attributes)
        return filter_attributes(attributes, allowed(construct))

    @staticmethod
    def _validate_options_type(options: BaseSinkOptions | None, expected_type: type, sink_name: str) -> None:
        """Validate that options are of the correct type for this sink.

        Parameters
        ----------
        options : BaseSinkOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        sink_name : str
            Name of the sink (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                sink_name=sink_name,
                expected_type=expected_type,
                received_type=type(options),
            )
