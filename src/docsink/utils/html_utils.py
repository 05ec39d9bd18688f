#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from urllib.parse import quote

from docsink.constants import ID_EXTRA_CHARACTERS, URL_SAFE_CHARACTERS


def escape_html(text: str | None, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled.

    ``<``, ``>``, ``&`` and both quote characters are replaced by entities, so
    the result is safe in element content and in quoted attribute values.
    ``None`` becomes the empty string.
    """
    if text is None:
        return ""
    if not enabled:
        return text
    return _html_escape(text)


def encode_url(text: str | None) -> str | None:
    """Percent-encode a URL, leaving reserved and already-encoded characters alone.

    Non-ASCII characters are encoded as their UTF-8 byte sequences.

    Examples
    --------
        >>> encode_url("http://example.com/a b/ü")
        'http://example.com/a%20b/%C3%BC'

    """
    if text is None:
        return None
    return quote(text, safe=URL_SAFE_CHARACTERS)


def _is_id_char(char: str) -> bool:
    return char.isalnum() or char in ID_EXTRA_CHARACTERS


def encode_id(name: str | None) -> str | None:
    """Turn an arbitrary name into a valid fragment identifier.

    Leading and trailing whitespace is dropped, inner spaces become ``_``,
    characters that may not appear in an id are removed and the result is
    prefixed with ``a`` when it does not start with a letter.

    Examples
    --------
        >>> encode_id("1 Getting started!")
        'a1_Getting_started'

    """
    if name is None:
        return None

    name = name.strip()
    parts: list[str] = []
    for index, char in enumerate(name):
        if index == 0 and not char.isalpha():
            parts.append("a")
        if char == " ":
            parts.append("_")
        elif _is_id_char(char):
            parts.append(char)
    return "".join(parts)


def is_id(text: str | None) -> bool:
    """Check whether text is a valid fragment identifier.

    A valid id starts with a letter and contains only letters, digits and
    ``-``, ``_``, ``:`` or ``.``.
    """
    if not text:
        return False
    if not text[0].isalpha():
        return False
    return all(_is_id_char(char) for char in text)


__all__ = ["escape_html", "encode_url", "encode_id", "is_id"]
