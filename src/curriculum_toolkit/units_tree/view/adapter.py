"""
Module: units_tree.view.adapter

Purpose:
    Flatten the typed curriculum tree into the single node shape the
    tree-selection widget works with. Every level, problems included,
    becomes a TreeNode with a uniform `children` field and an
    `original_type` discriminant.

Key Functions:
    - convert_units_tree_for_component(): Categories -> TreeNode list

Key Classes:
    - OriginalType: category / subcategory / unit / problem
    - TreeNode: Flattened UI node

Used By:
    - units_tree.view.query: Tree queries
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from curriculum_toolkit.core.models import (
    Category,
    Difficulty,
    Problem,
    ProblemKind,
    Subcategory,
    Unit,
)


class OriginalType(str, Enum):
    """Which model a flattened node came from."""
    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    UNIT = "unit"
    PROBLEM = "problem"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TreeNode:
    """
    Flattened UI node (immutable).

    Attributes:
        id: Id of the source node or problem
        name: Display name (problem title for problems)
        original_type: Source level
        children: Child nodes; a unit's children are its problems.
            None for problems.
        kind: Problem kind (problems only)
        difficulty: Problem difficulty (problems only)
    """

    id: str
    name: str
    original_type: OriginalType
    children: Optional[Tuple[TreeNode, ...]] = None
    kind: Optional[ProblemKind] = None
    difficulty: Optional[Difficulty] = None

    @property
    def is_problem(self) -> bool:
        return self.original_type == OriginalType.PROBLEM

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "name": self.name,
            "originalType": str(self.original_type),
        }
        if self.children is not None:
            d["children"] = [child.to_dict() for child in self.children]
        if self.kind is not None:
            d["type"] = str(self.kind)
        if self.difficulty is not None:
            d["difficulty"] = str(self.difficulty)
        return d


def _problem_node(problem: Problem) -> TreeNode:
    return TreeNode(
        id=problem.id,
        name=problem.title,
        original_type=OriginalType.PROBLEM,
        kind=problem.kind,
        difficulty=problem.difficulty,
    )


def _unit_node(unit: Unit) -> TreeNode:
    return TreeNode(
        id=unit.id,
        name=unit.name,
        original_type=OriginalType.UNIT,
        children=tuple(_problem_node(p) for p in unit.problems or ()),
    )


def _subcategory_node(subcategory: Subcategory) -> TreeNode:
    return TreeNode(
        id=subcategory.id,
        name=subcategory.name,
        original_type=OriginalType.SUBCATEGORY,
        children=tuple(_unit_node(u) for u in subcategory.children),
    )


def _category_node(category: Category) -> TreeNode:
    return TreeNode(
        id=category.id,
        name=category.name,
        original_type=OriginalType.CATEGORY,
        children=tuple(_subcategory_node(s) for s in category.children),
    )


def convert_units_tree_for_component(categories: Iterable[Category]) -> List[TreeNode]:
    """
    Flatten categories into TreeNodes for the selection widget.

    Order is preserved at every level.

    Args:
        categories: Converted categories (e.g. UnitsTreeResponse.categories)

    Returns:
        One TreeNode per category
    """
    return [_category_node(category) for category in categories]
