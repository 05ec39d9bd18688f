#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the docsink library.

This module centralizes hardcoded values used across the sinks: type aliases,
default CSS classes, attribute names and the per-construct attribute whitelists.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Attribute Names - Names of sink event attributes
3. Attribute Whitelists - Allowed attribute names per construct
4. XHTML Sink Defaults - Default classes and markup fragments
5. Link Classification - Prefixes and suffixes used to classify hrefs
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LineSeparator = Literal["\n", "\r\n", "\r"]

# =============================================================================
# Attribute Names
# =============================================================================

ATTR_ABBR = "abbr"
ATTR_ALIGN = "align"
ATTR_ALT = "alt"
ATTR_BORDER = "border"
ATTR_CLASS = "class"
ATTR_DECORATION = "decoration"
ATTR_HREF = "href"
ATTR_ID = "id"
ATTR_LANG = "lang"
ATTR_NAME = "name"
ATTR_SRC = "src"
ATTR_STYLE = "style"
ATTR_TARGET = "target"
ATTR_TITLE = "title"
ATTR_VALIGN = "valign"
ATTR_WIDTH = "width"

# Values recognized on the decoration and valign attributes
DECORATION_UNDERLINE = "underline"
DECORATION_LINE_THROUGH = "line-through"
DECORATION_BOXED = "boxed"
VALIGN_SUB = "sub"
VALIGN_SUP = "sup"

# =============================================================================
# Attribute Whitelists
# =============================================================================

BASE_ATTRIBUTES: frozenset[str] = frozenset({ATTR_CLASS, ATTR_ID, ATTR_LANG, ATTR_STYLE, ATTR_TITLE})

SECTION_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {ATTR_ALIGN}

VERBATIM_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {ATTR_DECORATION, ATTR_ALIGN, ATTR_WIDTH}

HR_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {ATTR_ALIGN, "noshade", "size", ATTR_WIDTH}

LINK_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {
    "charset",
    "coords",
    "hreflang",
    ATTR_NAME,
    "rel",
    "rev",
    "shape",
    ATTR_TARGET,
    "type",
}

TABLE_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {
    ATTR_ALIGN,
    "bgcolor",
    ATTR_BORDER,
    "cellpadding",
    "cellspacing",
    "frame",
    "rules",
    "summary",
    ATTR_WIDTH,
}

TR_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {ATTR_ALIGN, "bgcolor", ATTR_VALIGN}

TD_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {
    ATTR_ABBR,
    ATTR_ALIGN,
    "axis",
    "bgcolor",
    "colspan",
    "headers",
    "height",
    "nowrap",
    "rowspan",
    "scope",
    ATTR_VALIGN,
    ATTR_WIDTH,
}

IMG_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {
    ATTR_ALIGN,
    ATTR_ALT,
    ATTR_BORDER,
    "height",
    "hspace",
    "ismap",
    "usemap",
    "vspace",
    ATTR_WIDTH,
}

BR_ATTRIBUTES: frozenset[str] = BASE_ATTRIBUTES | {"clear"}

# Construct name -> allowed attribute names. Keys are the names accepted by
# XhtmlSinkOptions.attribute_whitelists overrides.
DEFAULT_ATTRIBUTE_WHITELISTS: dict[str, frozenset[str]] = {
    "base": BASE_ATTRIBUTES,
    "section": SECTION_ATTRIBUTES,
    "verbatim": VERBATIM_ATTRIBUTES,
    "hr": HR_ATTRIBUTES,
    "link": LINK_ATTRIBUTES,
    "table": TABLE_ATTRIBUTES,
    "tr": TR_ATTRIBUTES,
    "td": TD_ATTRIBUTES,
    "img": IMG_ATTRIBUTES,
    "br": BR_ATTRIBUTES,
}

# =============================================================================
# XHTML Sink Defaults
# =============================================================================

DEFAULT_LINE_SEPARATOR: LineSeparator = "\n"
DEFAULT_ENCODING = "utf-8"
DEFAULT_NAMESPACE: str | None = None

DEFAULT_SECTION_CLASS = "section"
DEFAULT_TABLE_CLASS = "bodyTable"
DEFAULT_TABLE_ALIGN = "center"
DEFAULT_ROW_CLASSES: tuple[str, str] = ("a", "b")
DEFAULT_FIGURE_CLASS = "figure"
DEFAULT_EXTERNAL_LINK_CLASS = "externalLink"
DEFAULT_SOURCE_CLASS = "source"

# Section depths accepted by section events; titles map depth N to heading N + 1
MIN_SECTION_LEVEL = 1
MAX_SECTION_LEVEL = 5
SECTION_TITLE_OFFSET = 1

NBSP_ENTITY = "&#160;"
PAGE_BREAK_COMMENT = "PB"

# =============================================================================
# Link Classification
# =============================================================================

EXTERNAL_LINK_PREFIXES: tuple[str, ...] = ("http:/", "https:/", "ftp:/", "mailto:", "file:/")
EXTERNAL_HTML_MARKERS: tuple[str, ...] = (".html#", ".htm#")
EXTERNAL_HTML_SUFFIXES: tuple[str, ...] = (".htm", ".html")

# Characters left untouched by encode_url in addition to ASCII letters and digits
URL_SAFE_CHARACTERS = "-_.!~*'();/?:@&=+$,#%[]"

# Characters allowed in a fragment identifier besides letters and digits
ID_EXTRA_CHARACTERS = "-_:."
