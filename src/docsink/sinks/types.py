#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Enumerations used in sink event signatures."""

from __future__ import annotations

from enum import Enum


class Justification(str, Enum):
    """Horizontal alignment of a table column.

    The value is the ``align`` attribute written on cells.
    """

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Numbering(str, Enum):
    """Numbering style of an ordered list.

    The value is the CSS ``list-style-type`` token written on the list.
    """

    DECIMAL = "decimal"
    LOWER_ALPHA = "lower-alpha"
    UPPER_ALPHA = "upper-alpha"
    LOWER_ROMAN = "lower-roman"
    UPPER_ROMAN = "upper-roman"


class FigureMode(str, Enum):
    """Calling convention of the figure currently being rendered.

    LEGACY figures are written as a single raw ``<img`` fragment built up by the
    graphics and caption events; CURRENT figures are a ``div`` container.
    """

    LEGACY = "legacy"
    CURRENT = "current"


__all__ = ["Justification", "Numbering", "FigureMode"]
