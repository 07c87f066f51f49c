"""
Module: units_tree.loading.converter

Purpose:
    Convert raw backend curriculum nodes into the normalized tree
    (Category -> Subcategory -> Unit, problems on units). The backend uses
    one recursive record for all three levels, told apart only by a kind
    tag; this module is where that tag is read for the last time.

Key Functions:
    - convert_node(): Convert one raw node and its subtree
    - convert_categories(): Convert the root node list
    - convert_problem(): Convert one raw problem record

Dependencies:
    - curriculum_toolkit.core.models: Category, Subcategory, Unit, Problem

Used By:
    - units_tree.controller: build_units_tree()

Error Policy:
    Fail-soft. Nothing here raises for bad input. A malformed node or
    problem (not an object, missing id, unknown kind tag, non-numeric or
    non-finite displayOrder, unknown question kind or difficulty, bad points) is
    dropped together with its subtree, logged at WARNING, and recorded as
    a ConversionIssue in the caller's `issues` list when one is given.
    A node whose kind is valid but sits at the wrong level (e.g. a UNIT
    directly under a CATEGORY) is dropped the same way, never coerced.
    A missing name is not a drop: it becomes "" with a warning.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from curriculum_toolkit.core.models import (
    Category,
    ConversionIssue,
    CurriculumNode,
    Difficulty,
    Grade,
    NodeType,
    Problem,
    ProblemKind,
    Subcategory,
    Unit,
)

logger = logging.getLogger(__name__)


# Backend node kind tags
CATEGORY = "CATEGORY"
SUBCATEGORY = "SUBCATEGORY"
UNIT = "UNIT"
NODE_KINDS = (CATEGORY, SUBCATEGORY, UNIT)

PROBLEM_KIND_TAG = "PROBLEM"

# Older backend builds used these keys for the same fields
_LEGACY_KEYS = {
    "kind": "type",
    "problems": "questions",
    "questionKind": "questionType",
    "previewText": "questionPreview",
}


def _field(raw: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Read `key`, falling back to its legacy spelling."""
    value = raw.get(key)
    if value is None and key in _LEGACY_KEYS:
        value = raw.get(_LEGACY_KEYS[key])
    return default if value is None else value


def _drop(issues: Optional[List[ConversionIssue]], node_id: Any, kind: Any, reason: str) -> None:
    """Log and record a dropped record."""
    issue = ConversionIssue(
        node_id=str(node_id) if node_id is not None else "",
        kind=str(kind) if kind is not None else "",
        reason=reason,
    )
    logger.warning(f"Dropped {issue}")
    if issues is not None:
        issues.append(issue)


def _read_id(value: Any) -> Optional[str]:
    """Backend ids are strings; integer ids are tolerated."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _read_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


# ─────────────────────────────────────────────────────────────────────────────
# Problems
# ─────────────────────────────────────────────────────────────────────────────

def convert_problem(
    raw: Any,
    unit_name: str,
    sequence_number: int = 1,
    *,
    issues: Optional[List[ConversionIssue]] = None,
) -> Optional[Problem]:
    """
    Convert one raw problem record.

    Args:
        raw: Raw problem mapping
        unit_name: Name of the owning unit
        sequence_number: 1-based position within the unit
        issues: Optional list that receives a ConversionIssue on drop

    Returns:
        Problem, or None if the record is malformed

    Example:
        >>> p = convert_problem({"id": "p1", "questionKind": "MULTIPLE_CHOICE",
        ...                      "difficulty": "하", "points": 5, "previewText": "x"}, "Unit 1")
        >>> (p.kind.value, p.difficulty.value)
        ('objective', 'low')
    """
    if not isinstance(raw, Mapping):
        _drop(issues, None, PROBLEM_KIND_TAG, f"problem is not an object ({type(raw).__name__})")
        return None

    problem_id = _read_id(raw.get("id"))
    if problem_id is None:
        _drop(issues, raw.get("id"), PROBLEM_KIND_TAG, "missing id")
        return None

    try:
        kind = ProblemKind.from_question_kind(_field(raw, "questionKind"))
        difficulty = Difficulty.from_tag(raw.get("difficulty"))
    except ValueError as e:
        _drop(issues, problem_id, PROBLEM_KIND_TAG, str(e))
        return None

    points = _read_number(raw.get("points"))
    if points is None or points < 0:
        _drop(issues, problem_id, PROBLEM_KIND_TAG, f"invalid points: {raw.get('points')!r}")
        return None

    preview = _field(raw, "previewText", "")
    if not isinstance(preview, str):
        preview = str(preview)

    return Problem(
        id=problem_id,
        sequence_number=sequence_number,
        title=preview,
        content=preview,
        kind=kind,
        difficulty=difficulty,
        points=points,
        unit_name=unit_name,
    )


def _convert_problems(
    raw: Mapping[str, Any],
    unit_id: str,
    unit_name: str,
    issues: Optional[List[ConversionIssue]],
) -> Optional[Tuple[Problem, ...]]:
    """Convert a unit's problem list, numbering survivors 1..n in input order."""
    raw_problems = _field(raw, "problems")
    if raw_problems is None:
        return None
    if not isinstance(raw_problems, list):
        logger.warning(f"Unit {unit_id}: problems is not a list, treating as not fetched")
        return None

    converted = [convert_problem(item, unit_name, issues=issues) for item in raw_problems]
    kept = [p for p in converted if p is not None]
    return tuple(
        replace(problem, sequence_number=index)
        for index, problem in enumerate(kept, start=1)
    )


# ─────────────────────────────────────────────────────────────────────────────
# Nodes
# ─────────────────────────────────────────────────────────────────────────────

def _misplaced_kind(raw: Any, expected: str) -> Optional[str]:
    """Known kind tag that does not belong where `expected` is required."""
    if not isinstance(raw, Mapping):
        return None
    kind = _field(raw, "kind")
    if kind in NODE_KINDS and kind != expected:
        return kind
    return None


def _convert_children(
    raw: Mapping[str, Any],
    node_id: str,
    owner: NodeType,
    expected: str,
    issues: Optional[List[ConversionIssue]],
) -> tuple:
    """
    Convert raw children of kind `expected`, sorted by display_order.

    A child whose kind belongs to another level is dropped before it is
    converted, so nesting depth is bounded by the three levels whatever
    the payload looks like.
    """
    raw_children = raw.get("children") or []
    if not isinstance(raw_children, list):
        logger.warning(f"{owner.value} {node_id}: children is not a list, ignoring")
        return ()

    kept = []
    for raw_child in raw_children:
        misplaced = _misplaced_kind(raw_child, expected)
        if misplaced is not None:
            _drop(
                issues, raw_child.get("id"), misplaced,
                f"{misplaced.lower()} not allowed under {owner.value} {node_id}",
            )
            continue
        child = convert_node(raw_child, node_id, issues=issues)
        if child is not None:
            kept.append(child)

    # sorted() is stable: equal display_order keeps backend order
    return tuple(sorted(kept, key=lambda n: n.display_order))


def convert_node(
    raw: Any,
    parent_id: Optional[str] = None,
    *,
    issues: Optional[List[ConversionIssue]] = None,
) -> Optional[CurriculumNode]:
    """
    Convert one raw node (and its subtree) into a normalized node.

    Dispatch on the node's kind tag:
    - CATEGORY: children converted recursively, only Subcategory kept
    - SUBCATEGORY: only Unit children kept, parent_category_id = parent_id
    - UNIT: terminal, problems attached, parent_subcategory_id = parent_id
    - anything else: warning, None (whole subtree dropped)

    Children are dispatched on their own tag: a tag that belongs to
    another level is dropped before recursing, so the walk stops at the
    UNIT level however deeply the payload nests.

    Args:
        raw: Raw node mapping from the backend
        parent_id: Id of the parent node, None at the root
        issues: Optional list that receives a ConversionIssue per drop

    Returns:
        Category, Subcategory or Unit, or None if the node was dropped

    Example:
        >>> node = convert_node({"id": "u1", "name": "Adding integers", "kind": "UNIT",
        ...                      "displayOrder": 1, "unitCode": None}, "s1")
        >>> (node.type.value, node.unit_code, node.parent_subcategory_id)
        ('unit', 'UNIT_u1', 's1')
    """
    if not isinstance(raw, Mapping):
        _drop(issues, None, None, f"node is not an object ({type(raw).__name__})")
        return None

    kind = _field(raw, "kind")
    node_id = _read_id(raw.get("id"))
    if node_id is None:
        _drop(issues, raw.get("id"), kind, "missing id")
        return None

    name = raw.get("name")
    if name is None:
        logger.warning(f"{kind} {node_id}: missing name, defaulting to empty")
        name = ""
    elif not isinstance(name, str):
        name = str(name)

    raw_order = raw.get("displayOrder")
    display_order = _read_number(0 if raw_order is None else raw_order)
    if display_order is None:
        _drop(issues, node_id, kind, f"invalid displayOrder: {raw_order!r}")
        return None

    description = raw.get("description") or None
    if description is not None and not isinstance(description, str):
        description = str(description)

    if kind == CATEGORY:
        return Category(
            id=node_id,
            name=name,
            display_order=display_order,
            description=description,
            children=_convert_children(raw, node_id, NodeType.CATEGORY, SUBCATEGORY, issues),
        )

    if kind == SUBCATEGORY:
        return Subcategory(
            id=node_id,
            name=name,
            display_order=display_order,
            parent_category_id=parent_id or "",
            description=description,
            children=_convert_children(raw, node_id, NodeType.SUBCATEGORY, UNIT, issues),
        )

    if kind == UNIT:
        raw_children = raw.get("children")
        if isinstance(raw_children, list):
            for raw_child in raw_children:
                child_id = raw_child.get("id") if isinstance(raw_child, Mapping) else None
                child_kind = _field(raw_child, "kind") if isinstance(raw_child, Mapping) else None
                _drop(issues, child_id, child_kind, f"units cannot have children (unit {node_id})")

        unit_code = raw.get("unitCode")
        return Unit(
            id=node_id,
            name=name,
            display_order=display_order,
            parent_subcategory_id=parent_id or "",
            unit_code=str(unit_code) if unit_code else f"UNIT_{node_id}",
            grade=_read_grade(raw.get("grade"), node_id),
            description=description,
            problems=_convert_problems(raw, node_id, name, issues),
        )

    _drop(issues, node_id, kind, f"Unknown node type: {kind!r}")
    return None


def _read_grade(value: Any, node_id: str) -> Optional[Grade]:
    if value is None:
        return None
    try:
        return Grade.parse(value)
    except ValueError:
        logger.warning(f"Unit {node_id}: ignoring invalid grade {value!r}")
        return None


def convert_categories(
    raw_nodes: Sequence[Any],
    *,
    issues: Optional[List[ConversionIssue]] = None,
) -> Tuple[Category, ...]:
    """
    Convert the root node list into categories.

    Only Category results are kept at the root; other kinds found there
    are dropped and recorded.

    Args:
        raw_nodes: Unwrapped backend node list
        issues: Optional list that receives a ConversionIssue per drop

    Returns:
        Categories sorted by display_order
    """
    categories = []
    for raw in raw_nodes:
        misplaced = _misplaced_kind(raw, CATEGORY)
        if misplaced is not None:
            _drop(issues, raw.get("id"), misplaced, f"{misplaced.lower()} found at root level")
            continue
        node = convert_node(raw, issues=issues)
        if node is not None:
            categories.append(node)
    return tuple(sorted(categories, key=lambda c: c.display_order))
