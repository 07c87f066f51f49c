"""
Unit Tests for Selection State
"""

import pytest
from dataclasses import FrozenInstanceError

from curriculum_toolkit.core.models import Grade
from curriculum_toolkit.units_tree.selection import (
    SelectionState,
    reset_selection,
    set_filtered_grade,
    set_search_keyword,
    toggle_expanded,
    toggle_problem,
    toggle_unit,
)


class TestSelectionState:
    """Tests for SelectionState construction."""

    def test_create_when_defaults_then_empty(self):
        state = SelectionState()

        assert state.selected_problem_ids == frozenset()
        assert not state.has_selection

    def test_create_when_lists_given_then_frozensets(self):
        state = SelectionState(selected_unit_ids=["u1", "u1"], selected_problem_ids=("p1",))

        assert state.selected_unit_ids == frozenset({"u1"})
        assert isinstance(state.selected_problem_ids, frozenset)
        assert state.has_selection

    def test_state_when_assigned_then_frozen(self):
        with pytest.raises(FrozenInstanceError):
            SelectionState().search_keyword = "x"


class TestToggles:
    """Tests for the toggle transitions."""

    def test_toggle_problem_when_twice_then_back_to_start(self):
        start = SelectionState()

        once = toggle_problem(start, "p1")
        twice = toggle_problem(once, "p1")

        assert once.selected_problem_ids == frozenset({"p1"})
        assert twice == start

    def test_toggle_problem_when_called_then_input_unchanged(self):
        start = SelectionState(selected_problem_ids={"p1"})

        toggle_problem(start, "p2")

        assert start.selected_problem_ids == frozenset({"p1"})

    def test_toggle_unit_when_called_then_only_units_change(self):
        state = toggle_unit(SelectionState(selected_problem_ids={"p1"}), "u1")

        assert state.selected_unit_ids == frozenset({"u1"})
        assert state.selected_problem_ids == frozenset({"p1"})

    def test_toggle_expanded_when_called_then_flips(self):
        state = toggle_expanded(SelectionState(), "c1")

        assert "c1" in state.expanded_node_ids
        assert "c1" not in toggle_expanded(state, "c1").expanded_node_ids


class TestFilters:
    """Tests for keyword, grade and reset."""

    def test_set_search_keyword_when_padded_then_trimmed(self):
        assert set_search_keyword(SelectionState(), "  integers ").search_keyword == "integers"

    @pytest.mark.parametrize("keyword", ["", "   ", None])
    def test_set_search_keyword_when_blank_then_cleared(self, keyword):
        state = SelectionState(search_keyword="old")

        assert set_search_keyword(state, keyword).search_keyword is None

    def test_set_filtered_grade_when_value_then_parsed(self):
        assert set_filtered_grade(SelectionState(), "3").filtered_grade is Grade.THIRD

    def test_set_filtered_grade_when_none_then_cleared(self):
        state = SelectionState(filtered_grade=Grade.FIRST)

        assert set_filtered_grade(state, None).filtered_grade is None

    def test_set_filtered_grade_when_invalid_then_raises(self):
        with pytest.raises(ValueError):
            set_filtered_grade(SelectionState(), 9)

    def test_reset_selection_when_called_then_empty_state(self):
        assert reset_selection() == SelectionState()
