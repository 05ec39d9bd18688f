#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/links.py
"""Link and anchor events.

Hrefs fall into three groups:

- external: an ``http:/``, ``https:/``, ``ftp:/``, ``mailto:`` or ``file:/``
  URL. Written as given, with the external link class.
- external html: a link to another rendered document (``.html``/``.htm``
  targets, optionally with a fragment) or anything that is not a valid
  fragment identifier. Written as given.
- internal: a fragment identifier in the current document, with or without
  its leading ``#``. Written as ``#identifier``.

Link and anchor events do nothing in head mode.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docsink.constants import (
    ATTR_CLASS,
    ATTR_HREF,
    ATTR_NAME,
    ATTR_TARGET,
    EXTERNAL_HTML_MARKERS,
    EXTERNAL_HTML_SUFFIXES,
    EXTERNAL_LINK_PREFIXES,
)
from docsink.utils.attributes import AttributeSet, AttributesLike
from docsink.utils.html_utils import encode_id, is_id

if TYPE_CHECKING:
    from docsink.options.xhtml import XhtmlSinkOptions
    from docsink.sinks.state import RenderState
    from docsink.sinks.tags import TagEmitter


def _strip_fragment_marker(href: str) -> str:
    return href[1:] if href.startswith("#") else href


def is_external_link(href: str) -> bool:
    """Check whether href starts with an external scheme (case-insensitive)."""
    return href.lower().startswith(EXTERNAL_LINK_PREFIXES)


def is_external_html(href: str) -> bool:
    """Check whether href points to another html document rather than a fragment.

    Links to other file formats are not recognized; such links should be
    relative paths starting with ``./`` or ``../``, which are never valid
    identifiers and so are treated as external html as well.
    """
    text = href.lower()
    return (
        any(marker in text for marker in EXTERNAL_HTML_MARKERS)
        or text.endswith(EXTERNAL_HTML_SUFFIXES)
        or not is_id(_strip_fragment_marker(text))
    )


class LinkMixin:
    """Link and anchor event handlers for XHTML sinks."""

    options: XhtmlSinkOptions
    _state: RenderState
    _tags: TagEmitter

    if TYPE_CHECKING:

        def _filter(self, attributes: AttributesLike, construct: str) -> AttributeSet: ...

    def link(self, href: str, attributes: AttributesLike = None, target: str | None = None) -> None:
        """Start a link.

        Parameters
        ----------
        href : str
            Link destination, unescaped
        attributes : AttributeSet, mapping or None
            Extra link attributes. A ``target`` in here is used when the
            ``target`` argument is not given; ``href`` is always ignored.
        target : str, optional
            Link target frame

        """
        if self._state.head_mode:
            return

        atts = self._filter(attributes, "link")
        if target is None:
            target = atts.get(ATTR_TARGET)
        atts.remove(ATTR_HREF, ATTR_TARGET)

        link_atts = AttributeSet()
        if is_external_link(href) or is_external_html(href):
            if is_external_link(href):
                link_atts[ATTR_CLASS] = self.options.external_link_class
            link_atts[ATTR_HREF] = href
        else:
            link_atts[ATTR_HREF] = "#" + _strip_fragment_marker(href)

        if target is not None:
            link_atts[ATTR_TARGET] = target
        link_atts.add_all(atts)

        self._tags.start_tag("a", link_atts)

    def link_end(self) -> None:
        if not self._state.head_mode:
            self._tags.end_tag("a")

    def anchor(self, name: str, attributes: AttributesLike = None) -> None:
        """Start an anchor whose name is ``name`` encoded as a valid identifier."""
        if self._state.head_mode:
            return

        atts = AttributeSet()
        anchor_id = encode_id(name)
        if anchor_id:
            atts[ATTR_NAME] = anchor_id
        atts.add_all(self._filter(attributes, "base"))
        self._tags.start_tag("a", atts)

    def anchor_end(self) -> None:
        if not self._state.head_mode:
            self._tags.end_tag("a")
