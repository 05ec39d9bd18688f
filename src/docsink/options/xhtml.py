#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the XHTML sink.

This module defines the options controlling the default classes, the tag
namespace prefix and the attribute whitelists used by XhtmlSink.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Mapping

from docsink.constants import (
    DEFAULT_ATTRIBUTE_WHITELISTS,
    DEFAULT_EXTERNAL_LINK_CLASS,
    DEFAULT_FIGURE_CLASS,
    DEFAULT_NAMESPACE,
    DEFAULT_ROW_CLASSES,
    DEFAULT_SECTION_CLASS,
    DEFAULT_SOURCE_CLASS,
    DEFAULT_TABLE_CLASS,
)
from docsink.options.base import BaseSinkOptions


# src/docsink/options/xhtml.py
@dataclass(frozen=True)
class XhtmlSinkOptions(BaseSinkOptions):
    """Configuration options for rendering sink events to XHTML.

    Parameters
    ----------
    section_class : str, default "section"
        Class given to section containers unless the caller supplies one.
    table_class : str, default "bodyTable"
        Class given to tables unless the caller supplies one.
    row_classes : tuple of (str, str), default ("a", "b")
        Classes alternated on successive table rows (odd rows, even rows).
    figure_class : str, default "figure"
        Class given to figure containers unless the caller supplies one.
    external_link_class : str, default "externalLink"
        Class added to links whose href uses an external scheme.
    source_class : str, default "source"
        Class given to boxed verbatim containers.
    namespace : str or None, default None
        Optional prefix written before every tag name (``ns:tag``).
    attribute_whitelists : mapping of str to collection of str, or None
        Overrides for the allowed attribute names per construct. Keys not given
        fall back to the defaults in ``docsink.constants.DEFAULT_ATTRIBUTE_WHITELISTS``.
        Known keys: base, section, verbatim, hr, link, table, tr, td, img, br.

    Examples
    --------
    Allow ``data-role`` on table cells:
        >>> from docsink.constants import TD_ATTRIBUTES
        >>> options = XhtmlSinkOptions(attribute_whitelists={"td": TD_ATTRIBUTES | {"data-role"}})

    """

    section_class: str = field(
        default=DEFAULT_SECTION_CLASS,
        metadata={"help": "Default class for section containers", "importance": "core"},
    )
    table_class: str = field(
        default=DEFAULT_TABLE_CLASS,
        metadata={"help": "Default class for tables", "importance": "core"},
    )
    row_classes: tuple[str, str] = field(
        default=DEFAULT_ROW_CLASSES,
        metadata={"help": "Classes alternated on odd and even table rows", "importance": "advanced"},
    )
    figure_class: str = field(
        default=DEFAULT_FIGURE_CLASS,
        metadata={"help": "Default class for figure containers", "importance": "core"},
    )
    external_link_class: str = field(
        default=DEFAULT_EXTERNAL_LINK_CLASS,
        metadata={"help": "Class added to external links", "importance": "core"},
    )
    source_class: str = field(
        default=DEFAULT_SOURCE_CLASS,
        metadata={"help": "Class for boxed verbatim blocks", "importance": "advanced"},
    )
    namespace: str | None = field(
        default=DEFAULT_NAMESPACE,
        metadata={"help": "Namespace prefix written before tag names", "importance": "advanced"},
    )
    attribute_whitelists: Mapping[str, Collection[str]] | None = field(
        default=None,
        metadata={"help": "Per-construct allowed attribute name overrides", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate XHTML sink options.

        Raises
        ------
        ValueError
            If a field value is invalid.

        """
        super().__post_init__()

        if len(self.row_classes) != 2:
            raise ValueError(f"row_classes must contain exactly two classes, got {len(self.row_classes)}")

        if self.namespace is not None and (not self.namespace or ":" in self.namespace):
            raise ValueError(f"namespace must be a non-empty prefix without ':', got {self.namespace!r}")

        if self.attribute_whitelists:
            unknown = set(self.attribute_whitelists) - set(DEFAULT_ATTRIBUTE_WHITELISTS)
            if unknown:
                raise ValueError(f"Unknown attribute whitelist construct(s): {', '.join(sorted(unknown))}")

    def allowed_attributes(self, construct: str) -> frozenset[str]:
        """Return the attribute names allowed for a construct.

        Parameters
        ----------
        construct : str
            Whitelist key, e.g. ``"table"`` or ``"td"``

        Returns
        -------
        frozenset of str
            Allowed attribute names

        """
        if self.attribute_whitelists and construct in self.attribute_whitelists:
            return frozenset(self.attribute_whitelists[construct])
        return DEFAULT_ATTRIBUTE_WHITELISTS[construct]
