"""
Module: units_tree.selection.state

Purpose:
    Immutable selection state for the units-tree picker and the plain
    transitions that produce a new state from an old one. The dashboard
    owns the current state; every function here returns a new value and
    leaves its input untouched.

Key Classes:
    - SelectionState: Selected units/problems, expanded nodes, keyword, grade

Key Functions:
    - toggle_unit(), toggle_problem(), toggle_expanded()
    - set_search_keyword(), set_filtered_grade(), reset_selection()
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional, Union

from curriculum_toolkit.core.models import Grade


def _toggled(ids: FrozenSet[str], item: str) -> FrozenSet[str]:
    return ids - {item} if item in ids else ids | {item}


@dataclass(frozen=True)
class SelectionState:
    """
    What the user has picked in the units tree (immutable).

    Attributes:
        selected_unit_ids: Units ticked as a whole
        selected_problem_ids: Individually selected problems
        expanded_node_ids: Nodes expanded in the tree widget
        search_keyword: Trimmed keyword, None when not searching
        filtered_grade: Grade filter, None for all grades

    Example:
        >>> state = toggle_problem(SelectionState(), "p1")
        >>> state.selected_problem_ids
        frozenset({'p1'})
        >>> toggle_problem(state, "p1").selected_problem_ids
        frozenset()
    """

    selected_unit_ids: FrozenSet[str] = field(default_factory=frozenset)
    selected_problem_ids: FrozenSet[str] = field(default_factory=frozenset)
    expanded_node_ids: FrozenSet[str] = field(default_factory=frozenset)
    search_keyword: Optional[str] = None
    filtered_grade: Optional[Grade] = None

    def __post_init__(self) -> None:
        # Accept any iterable of ids; store frozensets
        for name in ("selected_unit_ids", "selected_problem_ids", "expanded_node_ids"):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))

    @property
    def has_selection(self) -> bool:
        return bool(self.selected_unit_ids or self.selected_problem_ids)


def toggle_unit(state: SelectionState, unit_id: str) -> SelectionState:
    """Select the unit if unselected, otherwise deselect it."""
    return replace(state, selected_unit_ids=_toggled(state.selected_unit_ids, unit_id))


def toggle_problem(state: SelectionState, problem_id: str) -> SelectionState:
    """Select the problem if unselected, otherwise deselect it."""
    return replace(state, selected_problem_ids=_toggled(state.selected_problem_ids, problem_id))


def toggle_expanded(state: SelectionState, node_id: str) -> SelectionState:
    """Expand a collapsed node or collapse an expanded one."""
    return replace(state, expanded_node_ids=_toggled(state.expanded_node_ids, node_id))


def set_search_keyword(state: SelectionState, keyword: Optional[str]) -> SelectionState:
    """Store the trimmed keyword; blank clears the search."""
    cleaned = keyword.strip() if keyword else ""
    return replace(state, search_keyword=cleaned or None)


def set_filtered_grade(
    state: SelectionState,
    grade: Optional[Union[Grade, str, int]],
) -> SelectionState:
    """
    Set or clear the grade filter.

    Raises:
        ValueError: If grade is not 1-3
    """
    return replace(state, filtered_grade=Grade.parse(grade) if grade is not None else None)


def reset_selection() -> SelectionState:
    """Empty state: nothing selected, nothing expanded, no filters."""
    return SelectionState()
