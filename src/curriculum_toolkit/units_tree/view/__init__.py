"""
Module: units_tree.view

Purpose:
    UI-facing flattened tree and the stateless queries over it.

Key Functions:
    - convert_units_tree_for_component(): Categories -> TreeNode list
    - find_problem_in_tree(), find_problem_path(), group_selected_problems_by_unit()
"""

from .adapter import OriginalType, TreeNode, convert_units_tree_for_component
from .query import (
    SelectedProblemEntry,
    SelectedProblemGroup,
    find_problem_in_tree,
    find_problem_path,
    group_selected_problems_by_unit,
    iter_tree,
)

__all__ = [
    "OriginalType",
    "TreeNode",
    "convert_units_tree_for_component",
    "SelectedProblemEntry",
    "SelectedProblemGroup",
    "find_problem_in_tree",
    "find_problem_path",
    "group_selected_problems_by_unit",
    "iter_tree",
]
