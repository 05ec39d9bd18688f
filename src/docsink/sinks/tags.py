#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tag serialization for XML-style sinks.

The functions here turn a tag name and an attribute set into markup text.
They carry no document semantics; attribute values are escaped, names are
written as given.
"""

from __future__ import annotations

from typing import Callable

from docsink.utils.attributes import AttributesLike
from docsink.utils.html_utils import escape_html


def _qualified(tag: str, namespace: str | None) -> str:
    return f"{namespace}:{tag}" if namespace else tag


def format_attributes(attributes: AttributesLike) -> str:
    """Serialize attributes as ``name="value"`` pairs, each preceded by a space."""
    if not attributes:
        return ""
    return "".join(f' {name}="{escape_html(str(value))}"' for name, value in attributes.items())


def format_start_tag(
    tag: str, attributes: AttributesLike = None, *, simple: bool = False, namespace: str | None = None
) -> str:
    """Return a start tag, or a self-closing tag when ``simple`` is true.

    Examples
    --------
        >>> format_start_tag("td", {"align": "left"})
        '<td align="left">'
        >>> format_start_tag("br", simple=True)
        '<br />'

    """
    closing = " />" if simple else ">"
    return f"<{_qualified(tag, namespace)}{format_attributes(attributes)}{closing}"


def format_end_tag(tag: str, *, namespace: str | None = None) -> str:
    """Return an end tag."""
    return f"</{_qualified(tag, namespace)}>"


class TagEmitter:
    """Write tags through a text writer callable.

    Parameters
    ----------
    write : callable
        Receives each serialized tag
    namespace : str or None, default None
        Prefix written before every tag name

    """

    def __init__(self, write: Callable[[str], None], namespace: str | None = None):
        """Initialize the emitter with a writer and an optional namespace."""
        self._write = write
        self.namespace = namespace

    def qualified(self, tag: str) -> str:
        """Return ``tag`` with the namespace prefix, if any."""
        return _qualified(tag, self.namespace)

    def start_tag(self, tag: str, attributes: AttributesLike = None) -> None:
        """Write ``<tag ...>``."""
        self._write(format_start_tag(tag, attributes, namespace=self.namespace))

    def end_tag(self, tag: str) -> None:
        """Write ``</tag>``."""
        self._write(format_end_tag(tag, namespace=self.namespace))

    def simple_tag(self, tag: str, attributes: AttributesLike = None) -> None:
        """Write a self-closing ``<tag ... />``."""
        self._write(format_start_tag(tag, attributes, simple=True, namespace=self.namespace))
