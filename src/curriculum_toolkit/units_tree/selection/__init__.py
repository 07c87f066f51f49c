"""
Module: units_tree.selection

Purpose:
    Caller-owned selection state for exam composition, expressed as an
    immutable value with plain transition functions, plus summaries and
    keyword filtering over the converted tree.

Key Functions:
    - toggle_unit(), toggle_problem(), toggle_expanded(), reset_selection()
    - toggle_all_problems_in_unit/subcategory/category()
    - selected_problems_detail(), selected_problems_stats()
    - filter_categories()
"""

from .state import (
    SelectionState,
    toggle_unit,
    toggle_problem,
    toggle_expanded,
    set_search_keyword,
    set_filtered_grade,
    reset_selection,
)
from .actions import (
    toggle_all_problems_in_unit,
    toggle_all_problems_in_subcategory,
    toggle_all_problems_in_category,
)
from .summary import (
    SelectionStats,
    UnitSelectionSummary,
    selected_problems_detail,
    selected_problems_stats,
)
from .search import filter_categories, unit_matches

__all__ = [
    "SelectionState",
    "toggle_unit",
    "toggle_problem",
    "toggle_expanded",
    "set_search_keyword",
    "set_filtered_grade",
    "reset_selection",
    "toggle_all_problems_in_unit",
    "toggle_all_problems_in_subcategory",
    "toggle_all_problems_in_category",
    "SelectionStats",
    "UnitSelectionSummary",
    "selected_problems_detail",
    "selected_problems_stats",
    "filter_categories",
    "unit_matches",
]
