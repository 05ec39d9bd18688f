#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for sink options.

This module defines the foundation classes for the configuration options
used by docsink sinks.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docsink.constants import DEFAULT_ENCODING, DEFAULT_LINE_SEPARATOR, LineSeparator

UNSET = object()


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseSinkOptions(CloneFrozenMixin):
    """Base class for all sink options.

    Parameters
    ----------
    line_separator : {"\\n", "\\r\\n", "\\r"}, default "\\n"
        Line terminator that every line ending in written text is normalized to.
        Also appended to the head buffer on line breaks in head mode.
    encoding : str, default "utf-8"
        Encoding used when the sink writes to a path or a binary stream.

    """

    line_separator: LineSeparator = field(
        default=DEFAULT_LINE_SEPARATOR,
        metadata={
            "help": "Line terminator written output is normalized to",
            "choices": ["\n", "\r\n", "\r"],
            "importance": "advanced",
        },
    )
    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={"help": "Encoding used for path and binary stream destinations", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate base sink options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if self.line_separator not in ("\n", "\r\n", "\r"):
            raise ValueError(f"line_separator must be one of '\\n', '\\r\\n', '\\r', got {self.line_separator!r}")
        if not self.encoding:
            raise ValueError("encoding must be a non-empty string")
