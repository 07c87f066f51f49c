"""
Module: response

Purpose:
    Provides the immutable values handed to callers after a units-tree
    payload is processed: TreeStats (node counts), ConversionIssue (a raw
    node or problem the converter dropped) and UnitsTreeResponse (the
    assembled result stamped with a fetch timestamp).

Key Functions:
    - TreeStats.to_dict(): Omits totalProblemsCount when problems weren't fetched
    - UnitsTreeResponse.dropped_node_count: Count of dropped raw records
    - UnitsTreeResponse.to_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .nodes.Category
    - .grades.Grade

Used By:
    - units_tree.stats
    - units_tree.assembler
    - units_tree.controller
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .grades import Grade
from .nodes import Category


@dataclass(frozen=True, slots=True)
class TreeStats:
    """
    Node counts for a converted tree.

    Attributes:
        category_count: Number of categories
        subcategory_count: Number of subcategories
        unit_count: Number of units
        total_problems_count: Sum of problems over all units, or None when
            problems were not requested ("not fetched" vs "fetched and empty")
    """

    category_count: int = 0
    subcategory_count: int = 0
    unit_count: int = 0
    total_problems_count: Optional[int] = None

    def to_dict(self) -> dict:
        d = {
            "categoryCount": self.category_count,
            "subcategoryCount": self.subcategory_count,
            "unitCount": self.unit_count,
        }
        if self.total_problems_count is not None:
            d["totalProblemsCount"] = self.total_problems_count
        return d


@dataclass(frozen=True, slots=True)
class ConversionIssue:
    """
    A raw record the converter dropped instead of failing.

    Attributes:
        node_id: Raw id if one could be read, else ""
        kind: Raw kind tag ("CATEGORY", "UNKNOWN", "PROBLEM", ...)
        reason: Why the record was dropped
    """

    node_id: str
    kind: str
    reason: str

    def __str__(self) -> str:
        return f"{self.kind} {self.node_id or '<no id>'}: {self.reason}"


@dataclass(frozen=True)
class UnitsTreeResponse:
    """
    Assembled units-tree result (immutable).

    Attributes:
        categories: Converted categories sorted by display_order
        grade: Grade filter the tree was requested for (None = all grades)
        include_problems: Whether problems were requested
        stats: Counts recomputed from categories
        fetched_at: ISO-8601 UTC timestamp of assembly
        dropped: Raw records skipped during conversion

    Invariants:
        - stats equals a recount of categories
        - stats.total_problems_count is None iff include_problems is False
    """

    categories: Tuple[Category, ...]
    grade: Optional[Grade]
    include_problems: bool
    stats: TreeStats
    fetched_at: str
    dropped: Tuple[ConversionIssue, ...] = ()

    @property
    def dropped_node_count(self) -> int:
        return len(self.dropped)

    def to_dict(self) -> dict:
        d = {
            "categories": [category.to_dict() for category in self.categories],
            "includeProblems": self.include_problems,
            "stats": self.stats.to_dict(),
            "fetchedAt": self.fetched_at,
            "droppedNodeCount": self.dropped_node_count,
        }
        if self.grade is not None:
            d["grade"] = str(self.grade)
        return d
