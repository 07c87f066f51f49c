"""
Module: units_tree.stats

Purpose:
    Count the nodes of a converted tree in one depth-first pass.

Key Functions:
    - aggregate_stats(): Categories -> TreeStats

Dependencies:
    - curriculum_toolkit.core.models: Category, TreeStats

Used By:
    - units_tree.controller: build_units_tree()
"""

from __future__ import annotations

from typing import Iterable

from curriculum_toolkit.core.models import Category, NodeType, TreeStats


def aggregate_stats(categories: Iterable[Category], *, include_problems: bool = False) -> TreeStats:
    """
    Count categories, subcategories, units and (optionally) problems.

    Args:
        categories: Converted root categories
        include_problems: Whether problems were requested. When False,
            total_problems_count is None rather than 0.

    Returns:
        TreeStats matching a direct recount of the tree

    Example:
        >>> stats = aggregate_stats(categories, include_problems=True)
        >>> stats.unit_count == sum(1 for c in categories for _ in c.iter_units())
        True
    """
    counts = {NodeType.CATEGORY: 0, NodeType.SUBCATEGORY: 0, NodeType.UNIT: 0}
    total_problems = 0

    for category in categories:
        for node in category.iter_all():
            counts[node.type] += 1
            if node.type == NodeType.UNIT:
                total_problems += node.problem_count

    return TreeStats(
        category_count=counts[NodeType.CATEGORY],
        subcategory_count=counts[NodeType.SUBCATEGORY],
        unit_count=counts[NodeType.UNIT],
        total_problems_count=total_problems if include_problems else None,
    )
