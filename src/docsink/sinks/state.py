#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/state.py
"""Mutable state of one in-progress render.

Every sink owns exactly one RenderState. Concurrent renders need separate
sinks; the state is never shared, so no locking is involved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from docsink.sinks.types import FigureMode, Justification
from docsink.utils.attributes import AttributeSet


@dataclass
class RenderState:
    """Flags and counters consulted by the sink event handlers.

    Attributes
    ----------
    head_mode : bool
        Text is buffered and inline events are suppressed while true.
    verbatim_mode : bool
        True inside a preformatted block.
    cell_justification : tuple of Justification or None
        Column alignments declared by the current table.
    has_justification : bool
        Whether cell alignment is applied to the current table.
    cell_index : int
        Position within the justification array; reset by every row.
    row_is_even : bool
        Selects the class of the next table row; flips on every row start.
    pending_table_attributes : AttributeSet or None
        Attributes captured by ``table()`` until ``table_rows()`` writes the tag.
    figure_mode : FigureMode or None
        Convention of the open figure, None outside figures.
    caption_mode : FigureMode or None
        Convention of the open figure caption, None outside captions.
    head_buffer : list of str
        Text accumulated in head mode.

    """

    head_mode: bool = False
    verbatim_mode: bool = False
    cell_justification: tuple[Justification | str, ...] | None = None
    has_justification: bool = False
    cell_index: int = 0
    row_is_even: bool = True
    pending_table_attributes: AttributeSet | None = None
    figure_mode: FigureMode | None = None
    caption_mode: FigureMode | None = None
    head_buffer: list[str] = field(default_factory=list)

    @property
    def in_figure(self) -> bool:
        """Whether a current-convention figure container is open."""
        return self.figure_mode is FigureMode.CURRENT

    def set_justification(self, justification: Sequence[Justification | str] | None) -> None:
        """Declare the column alignments of the table being opened."""
        self.cell_justification = tuple(justification) if justification is not None else None
        self.has_justification = True

    def clear_justification(self) -> None:
        self.cell_justification = None
        self.has_justification = False

    def current_justification(self) -> Justification | str | None:
        """Alignment for the cell at ``cell_index``.

        Once the index passes the end of the declared array, the last entry
        applies to every remaining cell. Returns None when no justification
        is active or the array is empty.
        """
        if not self.has_justification or not self.cell_justification:
            return None
        return self.cell_justification[min(self.cell_index, len(self.cell_justification) - 1)]

    def head_text(self) -> str:
        return "".join(self.head_buffer)

    def reset_buffer(self) -> None:
        self.head_buffer = []

    def reset(self) -> None:
        """Restore every field to its initial value."""
        self.reset_buffer()
        self.head_mode = False
        self.verbatim_mode = False
        self.clear_justification()
        self.cell_index = 0
        self.row_is_even = True
        self.pending_table_attributes = None
        self.figure_mode = None
        self.caption_mode = None
