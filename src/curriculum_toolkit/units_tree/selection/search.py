"""
Module: units_tree.selection.search

Purpose:
    Keyword filter for the units tree. Keeps units whose name, unit code
    or description contains the keyword, or that own a problem whose
    title or content does; subcategories and categories left without
    units are pruned. Matching is case-insensitive substring.

Key Functions:
    - filter_categories(): Filtered copy of the tree
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence, Tuple

from curriculum_toolkit.core.models import Category, Unit


def _contains(text: Optional[str], keyword: str) -> bool:
    return bool(text) and keyword in text.lower()


def unit_matches(unit: Unit, keyword: str) -> bool:
    """Check a unit against a lowercase keyword."""
    if _contains(unit.name, keyword) or _contains(unit.unit_code, keyword) or _contains(unit.description, keyword):
        return True
    return any(
        _contains(problem.title, keyword) or _contains(problem.content, keyword)
        for problem in unit.iter_problems()
    )


def filter_categories(categories: Sequence[Category], keyword: Optional[str]) -> Tuple[Category, ...]:
    """
    Filter the tree by keyword.

    Args:
        categories: Converted tree
        keyword: Search text; None or blank disables filtering

    Returns:
        New categories containing only matching units (input unchanged)

    Example:
        >>> [c.name for c in filter_categories(categories, "INTEGER")]
        ['Numbers and operations']
    """
    term = (keyword or "").strip().lower()
    if not term:
        return tuple(categories)

    filtered = []
    for category in categories:
        subcategories = []
        for subcategory in category.children:
            units = tuple(unit for unit in subcategory.children if unit_matches(unit, term))
            if units:
                subcategories.append(replace(subcategory, children=units))
        if subcategories:
            filtered.append(replace(category, children=tuple(subcategories)))
    return tuple(filtered)
