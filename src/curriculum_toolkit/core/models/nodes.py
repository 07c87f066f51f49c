"""
Module: nodes

Purpose:
    Provides the normalized curriculum tree: Category -> Subcategory -> Unit.
    Each level is its own frozen dataclass carrying an explicit NodeType
    discriminant, so callers branch on `node.type` instead of re-reading
    backend tags. Problems hang off units in a separate field and are
    never part of `children`.

Key Functions:
    - Category.iter_units() / Category.iter_problems(): Walk the subtree
    - Category.find(node_id): Find a category/subcategory/unit by id
    - Unit.problem_count: Property calculated from problems
    - *.to_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .grades.Grade
    - .problems.Problem

Used By:
    - core.models.response.UnitsTreeResponse
    - units_tree.loading.converter
    - units_tree.stats
    - units_tree.view.adapter
    - units_tree.selection

Design Notes:
    The tree shape is enforced on construction: a Category may only hold
    Subcategory children, a Subcategory only Unit children, and a Unit
    never holds children. Siblings must be sorted by display_order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple, Union

from .grades import Grade
from .problems import Problem


class NodeType(str, Enum):
    """Level of a curriculum node."""
    CATEGORY = "category"        # Top-level strand, e.g. "Numbers and operations"
    SUBCATEGORY = "subcategory"  # e.g. "Integers and rationals"
    UNIT = "unit"                # Leaf unit that owns problems

    def __str__(self) -> str:
        return self.value


def _check_children(owner: str, children: Sequence, expected: type) -> None:
    """Validate child types and display_order ordering."""
    last_order = None
    for child in children:
        if not isinstance(child, expected):
            raise ValueError(
                f"Children of {owner} must be {expected.__name__} nodes, got {type(child).__name__}"
            )
        if last_order is not None and child.display_order < last_order:
            raise ValueError(
                f"Children of {owner} must be sorted by display_order "
                f"({child.display_order} < {last_order})"
            )
        last_order = child.display_order


@dataclass(frozen=True)
class Unit:
    """
    Leaf curriculum unit (immutable).

    Attributes:
        id: Backend node identifier
        name: Display name, e.g. "Adding integers"
        display_order: Position among siblings (ascending)
        parent_subcategory_id: Id of the owning subcategory ("" if unknown)
        unit_code: Curriculum code like "MATH_1_1_1"
        grade: School year, None when the backend sent none
        description: Optional description
        problems: Problems in backend order, None when not requested
        children: Always empty

    Invariants:
        - children == ()
        - problems[i].sequence_number == i + 1
    """

    id: str
    name: str
    display_order: Union[int, float]
    parent_subcategory_id: str
    unit_code: str
    grade: Optional[Grade] = None
    description: Optional[str] = None
    problems: Optional[Tuple[Problem, ...]] = None
    children: Tuple[()] = ()

    def __post_init__(self) -> None:
        """Validate unit on construction."""
        if self.children:
            raise ValueError(f"Unit {self.id} cannot have children")
        if self.problems is not None:
            for index, problem in enumerate(self.problems, start=1):
                if problem.sequence_number != index:
                    raise ValueError(
                        f"Problems of unit {self.id} must be numbered from 1 "
                        f"(got {problem.sequence_number} at position {index})"
                    )

    @property
    def type(self) -> NodeType:
        return NodeType.UNIT

    @property
    def problem_count(self) -> int:
        """Number of attached problems (0 when not requested)."""
        return len(self.problems) if self.problems else 0

    @property
    def total_points(self) -> float:
        """Sum of problem points, calculated on access."""
        return sum(p.points for p in self.problems or ())

    def iter_all(self) -> Iterator[Unit]:
        yield self

    def iter_units(self) -> Iterator[Unit]:
        yield self

    def iter_problems(self) -> Iterator[Problem]:
        yield from self.problems or ()

    def find(self, node_id: str) -> Optional[Unit]:
        return self if self.id == node_id else None

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "name": self.name,
            "type": str(self.type),
            "displayOrder": self.display_order,
            "parentSubcategoryId": self.parent_subcategory_id,
            "unitCode": self.unit_code,
            "grade": str(self.grade) if self.grade is not None else None,
            "children": [],
        }
        if self.description:
            d["description"] = self.description
        if self.problems is not None:
            d["problems"] = [problem.to_dict() for problem in self.problems]
        return d

    def __repr__(self) -> str:
        problems = f", problems={len(self.problems)}" if self.problems is not None else ""
        return f"Unit({self.id!r}, {self.name!r}{problems})"


@dataclass(frozen=True)
class Subcategory:
    """
    Middle curriculum level grouping units (immutable).

    Attributes:
        id: Backend node identifier
        name: Display name
        display_order: Position among siblings (ascending)
        parent_category_id: Id of the owning category ("" if unknown)
        description: Optional description
        children: Units sorted by display_order
    """

    id: str
    name: str
    display_order: Union[int, float]
    parent_category_id: str
    description: Optional[str] = None
    children: Tuple[Unit, ...] = ()

    def __post_init__(self) -> None:
        _check_children(f"subcategory {self.id}", self.children, Unit)

    @property
    def type(self) -> NodeType:
        return NodeType.SUBCATEGORY

    @property
    def problem_count(self) -> int:
        return sum(unit.problem_count for unit in self.children)

    def iter_all(self) -> Iterator[Union[Subcategory, Unit]]:
        """Pre-order walk of this node and its units."""
        yield self
        yield from self.children

    def iter_units(self) -> Iterator[Unit]:
        yield from self.children

    def iter_problems(self) -> Iterator[Problem]:
        for unit in self.children:
            yield from unit.iter_problems()

    def find(self, node_id: str) -> Optional[Union[Subcategory, Unit]]:
        if self.id == node_id:
            return self
        for unit in self.children:
            if unit.id == node_id:
                return unit
        return None

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "name": self.name,
            "type": str(self.type),
            "displayOrder": self.display_order,
            "parentCategoryId": self.parent_category_id,
            "children": [unit.to_dict() for unit in self.children],
        }
        if self.description:
            d["description"] = self.description
        return d

    def __repr__(self) -> str:
        return f"Subcategory({self.id!r}, {self.name!r}, units={len(self.children)})"


@dataclass(frozen=True)
class Category:
    """
    Top curriculum level (immutable).

    The tree structure is:
        Category ("Numbers and operations")
        └── Subcategory ("Integers and rationals")
            ├── Unit ("Adding integers") -> problems
            └── Unit ("Subtracting integers") -> problems

    Attributes:
        id: Backend node identifier
        name: Display name
        display_order: Position among siblings (ascending)
        description: Optional description
        children: Subcategories sorted by display_order

    Example:
        >>> unit = Unit("u1", "Adding integers", 1, "s1", "MATH_1_1_1")
        >>> sub = Subcategory("s1", "Integers", 1, "c1", children=(unit,))
        >>> cat = Category("c1", "Numbers", 1, children=(sub,))
        >>> cat.find("u1") is unit
        True
    """

    id: str
    name: str
    display_order: Union[int, float]
    description: Optional[str] = None
    children: Tuple[Subcategory, ...] = ()

    def __post_init__(self) -> None:
        _check_children(f"category {self.id}", self.children, Subcategory)

    @property
    def type(self) -> NodeType:
        return NodeType.CATEGORY

    @property
    def problem_count(self) -> int:
        return sum(sub.problem_count for sub in self.children)

    def iter_all(self) -> Iterator[CurriculumNode]:
        """Pre-order walk of this category, its subcategories and units."""
        yield self
        for sub in self.children:
            yield from sub.iter_all()

    def iter_units(self) -> Iterator[Unit]:
        for sub in self.children:
            yield from sub.iter_units()

    def iter_problems(self) -> Iterator[Problem]:
        for sub in self.children:
            yield from sub.iter_problems()

    def find(self, node_id: str) -> Optional[CurriculumNode]:
        """
        Find a node by id in this subtree.

        Returns:
            Matching node or None if not found
        """
        if self.id == node_id:
            return self
        for sub in self.children:
            found = sub.find(node_id)
            if found is not None:
                return found
        return None

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "name": self.name,
            "type": str(self.type),
            "displayOrder": self.display_order,
            "children": [sub.to_dict() for sub in self.children],
        }
        if self.description:
            d["description"] = self.description
        return d

    def __repr__(self) -> str:
        return f"Category({self.id!r}, {self.name!r}, subcategories={len(self.children)})"


CurriculumNode = Union[Category, Subcategory, Unit]
