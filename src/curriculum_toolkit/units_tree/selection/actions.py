"""
Module: units_tree.selection.actions

Purpose:
    Bulk select/deselect of every problem under a unit, subcategory or
    category. If all problems under the node are already selected they are
    all deselected; otherwise all of them are selected.

Key Functions:
    - toggle_all_problems_in_unit()
    - toggle_all_problems_in_subcategory()
    - toggle_all_problems_in_category()
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from curriculum_toolkit.core.models import Category, CurriculumNode, NodeType

from .state import SelectionState

logger = logging.getLogger(__name__)


def _find_node(categories: Iterable[Category], node_id: str, node_type: NodeType) -> Optional[CurriculumNode]:
    for category in categories:
        found = category.find(node_id)
        if found is not None and found.type == node_type:
            return found
    return None


def _toggle_all_under(
    state: SelectionState,
    categories: Iterable[Category],
    node_id: str,
    node_type: NodeType,
) -> SelectionState:
    node = _find_node(categories, node_id, node_type)
    if node is None:
        logger.debug(f"No {node_type.value} {node_id} in tree, selection unchanged")
        return state

    problem_ids = frozenset(problem.id for problem in node.iter_problems())
    if not problem_ids:
        return state

    if problem_ids <= state.selected_problem_ids:
        return replace(state, selected_problem_ids=state.selected_problem_ids - problem_ids)
    return replace(state, selected_problem_ids=state.selected_problem_ids | problem_ids)


def toggle_all_problems_in_unit(
    state: SelectionState,
    categories: Iterable[Category],
    unit_id: str,
) -> SelectionState:
    """
    Select or deselect every problem of a unit.

    Args:
        state: Current selection
        categories: Tree to look the unit up in
        unit_id: Unit id

    Returns:
        New state; the same state if the unit is unknown or has no problems
    """
    return _toggle_all_under(state, categories, unit_id, NodeType.UNIT)


def toggle_all_problems_in_subcategory(
    state: SelectionState,
    categories: Iterable[Category],
    subcategory_id: str,
) -> SelectionState:
    """Select or deselect every problem under a subcategory."""
    return _toggle_all_under(state, categories, subcategory_id, NodeType.SUBCATEGORY)


def toggle_all_problems_in_category(
    state: SelectionState,
    categories: Iterable[Category],
    category_id: str,
) -> SelectionState:
    """Select or deselect every problem under a category."""
    return _toggle_all_under(state, categories, category_id, NodeType.CATEGORY)
