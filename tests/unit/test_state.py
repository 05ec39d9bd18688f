#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_state.py
"""Unit tests for RenderState."""

import pytest

from docsink.sinks.state import RenderState
from docsink.sinks.types import FigureMode, Justification


@pytest.mark.unit
class TestJustification:
    """Tests for the justification bookkeeping."""

    def test_inactive_by_default(self):
        """Test that a fresh state has no justification."""
        assert RenderState().current_justification() is None

    def test_indexes_declared_entries(self):
        """Test lookup by cell index."""
        state = RenderState()
        state.set_justification([Justification.LEFT, Justification.RIGHT])
        assert state.current_justification() is Justification.LEFT
        state.cell_index = 1
        assert state.current_justification() is Justification.RIGHT

    def test_last_entry_reused(self):
        """Test that indexes past the end reuse the last entry."""
        state = RenderState()
        state.set_justification([Justification.CENTER, Justification.LEFT])
        for index in range(2, 6):
            state.cell_index = index
            assert state.current_justification() is Justification.LEFT

    def test_empty_or_missing_array(self):
        """Test that an empty or absent array yields no justification."""
        state = RenderState()
        state.set_justification([])
        assert state.has_justification
        assert state.current_justification() is None
        state.set_justification(None)
        assert state.current_justification() is None

    def test_clear(self):
        """Test that clearing disables justification."""
        state = RenderState()
        state.set_justification([Justification.LEFT])
        state.clear_justification()
        assert not state.has_justification
        assert state.current_justification() is None


@pytest.mark.unit
class TestStateLifecycle:
    """Tests for head buffer handling and reset."""

    def test_head_buffer(self):
        """Test head text accumulation and buffer reset."""
        state = RenderState()
        state.head_buffer.extend(["Doc", " ", "Title"])
        assert state.head_text() == "Doc Title"
        state.reset_buffer()
        assert state.head_text() == ""

    def test_in_figure(self):
        """Test that only current-convention figures count as containers."""
        state = RenderState()
        assert not state.in_figure
        state.figure_mode = FigureMode.LEGACY
        assert not state.in_figure
        state.figure_mode = FigureMode.CURRENT
        assert state.in_figure

    def test_reset_restores_defaults(self):
        """Test that reset() returns every field to its initial value."""
        state = RenderState()
        state.head_mode = True
        state.verbatim_mode = True
        state.set_justification([Justification.LEFT])
        state.cell_index = 3
        state.row_is_even = False
        state.figure_mode = FigureMode.CURRENT
        state.caption_mode = FigureMode.LEGACY
        state.head_buffer.append("x")
        state.reset()
        assert state == RenderState()

    def test_states_are_independent(self):
        """Test that two states never share their buffers."""
        first, second = RenderState(), RenderState()
        first.head_buffer.append("x")
        assert second.head_buffer == []
