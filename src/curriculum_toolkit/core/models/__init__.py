"""
Core Models Package

Immutable, validated data models for the curriculum units tree.

All models in this package are frozen dataclasses. A conversion always
builds a fresh tree; nothing downstream can modify a tree it was handed,
so callers may cache results keyed by (grade, include_problems).

| Backend shape | Model | Notes |
|---------------|-------|-------|
| node `kind: CATEGORY` | `Category` | children: Subcategory only |
| node `kind: SUBCATEGORY` | `Subcategory` | children: Unit only |
| node `kind: UNIT` | `Unit` | problems separate, children empty |
| problem record | `Problem` | kind/difficulty mapped from tags |
"""

from .grades import Grade, SUPPORTED_GRADES
from .problems import Difficulty, Problem, ProblemKind
from .nodes import Category, CurriculumNode, NodeType, Subcategory, Unit
from .response import ConversionIssue, TreeStats, UnitsTreeResponse

__all__ = [
    "Grade",
    "SUPPORTED_GRADES",
    "Difficulty",
    "Problem",
    "ProblemKind",
    "Category",
    "CurriculumNode",
    "NodeType",
    "Subcategory",
    "Unit",
    "ConversionIssue",
    "TreeStats",
    "UnitsTreeResponse",
]
