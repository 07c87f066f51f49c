"""
Curriculum Toolkit Core Package

Shared data models and utilities for the units-tree pipeline. These models
are the single source of truth for every later stage.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Frozen dataclasses; a new tree is built on every conversion

2. **Calculated Counts (Never Stored On Nodes)**
   - Problem counts and point totals are properties over the tree
   - TreeStats is recomputed from the tree, never copied from the backend

3. **Explicit Discriminant**
   - `node.type` is a NodeType; backend `kind` tags stop at the converter
"""

from .models import (
    Category,
    Subcategory,
    Unit,
    Problem,
    NodeType,
    ProblemKind,
    Difficulty,
    Grade,
    TreeStats,
    UnitsTreeResponse,
)

__all__ = [
    "Category",
    "Subcategory",
    "Unit",
    "Problem",
    "NodeType",
    "ProblemKind",
    "Difficulty",
    "Grade",
    "TreeStats",
    "UnitsTreeResponse",
]
