"""
Module: units_tree.selection.summary

Purpose:
    Summaries of the selected problems for the exam-composition panel:
    per-unit detail (with category/subcategory names and point totals)
    and overall counts.

Key Functions:
    - selected_problems_detail(): Per-unit summaries in tree order
    - selected_problems_stats(): Totals across the selection

Key Classes:
    - UnitSelectionSummary
    - SelectionStats
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Tuple

from curriculum_toolkit.core.models import Category, Problem, ProblemKind


@dataclass(frozen=True)
class UnitSelectionSummary:
    """
    Selected problems of one unit with display context.

    Attributes:
        unit_id, unit_name, unit_code: Owning unit
        category_name, subcategory_name: Ancestors for display
        problems: Selected problems in unit order
    """

    unit_id: str
    unit_name: str
    unit_code: str
    category_name: str
    subcategory_name: str
    problems: Tuple[Problem, ...]

    @property
    def problem_count(self) -> int:
        return len(self.problems)

    @property
    def total_points(self) -> float:
        return sum(p.points for p in self.problems)


@dataclass(frozen=True)
class SelectionStats:
    """
    Totals across all selected problems.

    Invariants:
        - total_count == objective_count + subjective_count
        - unit_count <= total_count
    """

    total_count: int = 0
    objective_count: int = 0
    subjective_count: int = 0
    total_points: float = 0
    unit_count: int = 0
    selected_problems: Tuple[Problem, ...] = ()


def selected_problems_detail(
    categories: Iterable[Category],
    selected_ids: AbstractSet[str],
) -> List[UnitSelectionSummary]:
    """
    Summarize selected problems per unit.

    Units are visited in tree order; units with no selected problem are
    skipped. Ids not present in the tree are ignored.

    Args:
        categories: Converted tree
        selected_ids: Selected problem ids

    Returns:
        List of UnitSelectionSummary
    """
    if not selected_ids:
        return []

    summaries = []
    for category in categories:
        for subcategory in category.children:
            for unit in subcategory.children:
                chosen = tuple(p for p in unit.iter_problems() if p.id in selected_ids)
                if not chosen:
                    continue
                summaries.append(UnitSelectionSummary(
                    unit_id=unit.id,
                    unit_name=unit.name,
                    unit_code=unit.unit_code,
                    category_name=category.name,
                    subcategory_name=subcategory.name,
                    problems=chosen,
                ))
    return summaries


def selected_problems_stats(
    categories: Iterable[Category],
    selected_ids: AbstractSet[str],
) -> SelectionStats:
    """
    Count the selection by kind, points and distinct units.

    Returns:
        SelectionStats (all zero when nothing is selected)

    Example:
        >>> stats = selected_problems_stats(response.categories, {"p1", "p2"})
        >>> stats.total_count
        2
    """
    if not selected_ids:
        return SelectionStats()

    chosen: List[Problem] = []
    unit_ids = set()
    for category in categories:
        for unit in category.iter_units():
            for problem in unit.iter_problems():
                if problem.id in selected_ids:
                    chosen.append(problem)
                    unit_ids.add(unit.id)

    objective = sum(1 for p in chosen if p.kind == ProblemKind.OBJECTIVE)
    return SelectionStats(
        total_count=len(chosen),
        objective_count=objective,
        subjective_count=len(chosen) - objective,
        total_points=sum(p.points for p in chosen),
        unit_count=len(unit_ids),
        selected_problems=tuple(chosen),
    )
