"""
Module: units_tree.view.query

Purpose:
    Read-only queries over the flattened TreeNode shape used while
    composing an exam: find a problem, get its path, and group a set of
    selected problem ids by owning unit.

Key Functions:
    - iter_tree(): Pre-order walk yielding (node, root-to-node names)
    - find_problem_in_tree(): Problem node by id
    - find_problem_path(): Root-to-problem name path
    - group_selected_problems_by_unit(): Selected ids grouped per unit

Key Classes:
    - SelectedProblemEntry: One selected problem with its path
    - SelectedProblemGroup: Selected problems of one unit

Design Notes:
    The engine holds no state. The selection set is owned by the caller
    and passed in; nothing here mutates the tree or the set. Walks use an
    explicit stack, so tree depth is not bounded by the recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterator, List, Optional, Sequence, Tuple

from curriculum_toolkit.core.models import Difficulty, ProblemKind

from .adapter import OriginalType, TreeNode


@dataclass(frozen=True, slots=True)
class SelectedProblemEntry:
    """
    A selected problem inside a unit group.

    Attributes:
        id: Problem id
        name: Problem display name
        kind: Problem kind (OBJECTIVE when the node carried none)
        difficulty: Difficulty (MEDIUM when the node carried none)
        path: Names from the root category down to the problem itself
    """

    id: str
    name: str
    kind: ProblemKind
    difficulty: Difficulty
    path: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": str(self.kind),
            "difficulty": str(self.difficulty),
            "path": list(self.path),
        }


@dataclass(frozen=True, slots=True)
class SelectedProblemGroup:
    """Selected problems belonging to one unit, in unit order."""

    unit_id: str
    unit_name: str
    problems: Tuple[SelectedProblemEntry, ...]

    def to_dict(self) -> dict:
        return {
            "unitId": self.unit_id,
            "unitName": self.unit_name,
            "problems": [entry.to_dict() for entry in self.problems],
        }


def iter_tree(nodes: Sequence[TreeNode]) -> Iterator[Tuple[TreeNode, Tuple[str, ...]]]:
    """
    Walk the tree depth-first in pre-order.

    Args:
        nodes: Root nodes

    Yields:
        (node, path) where path is the names from the root to node, inclusive
    """
    stack: List[Tuple[TreeNode, Tuple[str, ...]]] = [
        (node, (node.name,)) for node in reversed(nodes)
    ]
    while stack:
        node, path = stack.pop()
        yield node, path
        if node.children:
            for child in reversed(node.children):
                stack.append((child, path + (child.name,)))


def find_problem_in_tree(nodes: Sequence[TreeNode], problem_id: str) -> Optional[TreeNode]:
    """
    Find a problem node by id.

    Only nodes with original_type PROBLEM match; a unit or category that
    happens to share the id is skipped.

    Returns:
        First matching problem node in pre-order, or None
    """
    for node, _ in iter_tree(nodes):
        if node.id == problem_id and node.original_type == OriginalType.PROBLEM:
            return node
    return None


def find_problem_path(nodes: Sequence[TreeNode], problem_id: str) -> List[str]:
    """
    Names from the root down to a problem, inclusive.

    Returns:
        e.g. ["Numbers", "Integers", "Adding integers", "2 + 3 = ?"],
        or [] if the problem is not in the tree

    Example:
        >>> find_problem_path(tree, "p1")[-1] == find_problem_in_tree(tree, "p1").name
        True
    """
    for node, path in iter_tree(nodes):
        if node.id == problem_id and node.original_type == OriginalType.PROBLEM:
            return list(path)
    return []


def group_selected_problems_by_unit(
    nodes: Sequence[TreeNode],
    selected_ids: AbstractSet[str],
) -> List[SelectedProblemGroup]:
    """
    Group selected problem ids by the unit that owns them.

    For every unit node, its direct problem children found in
    `selected_ids` form one group. Units without a selected problem are
    left out. Groups follow tree order, not selection order; ids missing
    from the tree are ignored. A unit id seen twice (malformed tree)
    still yields a single group.

    Args:
        nodes: Root nodes
        selected_ids: Caller-owned selection (not modified)

    Returns:
        List of SelectedProblemGroup
    """
    if not selected_ids:
        return []

    grouped: Dict[str, Tuple[str, List[SelectedProblemEntry]]] = {}
    seen_problems: Dict[str, set] = {}

    for node, path in iter_tree(nodes):
        if node.original_type != OriginalType.UNIT or not node.children:
            continue

        for child in node.children:
            if child.original_type != OriginalType.PROBLEM or child.id not in selected_ids:
                continue
            if child.id in seen_problems.get(node.id, ()):
                continue
            entry = SelectedProblemEntry(
                id=child.id,
                name=child.name,
                kind=child.kind or ProblemKind.OBJECTIVE,
                difficulty=child.difficulty or Difficulty.MEDIUM,
                path=path + (child.name,),
            )
            grouped.setdefault(node.id, (node.name, []))[1].append(entry)
            seen_problems.setdefault(node.id, set()).add(child.id)

    return [
        SelectedProblemGroup(unit_id=unit_id, unit_name=unit_name, problems=tuple(entries))
        for unit_id, (unit_name, entries) in grouped.items()
    ]
