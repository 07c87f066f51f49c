"""
Unit Tests for Tree Queries

Tests for find_problem_in_tree, find_problem_path and
group_selected_problems_by_unit.
"""

import pytest

from curriculum_toolkit.core.models import Difficulty, ProblemKind
from curriculum_toolkit.units_tree.view.adapter import (
    OriginalType,
    TreeNode,
    convert_units_tree_for_component,
)
from curriculum_toolkit.units_tree.view.query import (
    find_problem_in_tree,
    find_problem_path,
    group_selected_problems_by_unit,
    iter_tree,
)


@pytest.fixture
def tree(sample_categories):
    return convert_units_tree_for_component(sample_categories)


class TestIterTree:
    """Tests for the pre-order walk."""

    def test_iter_when_called_then_pre_order(self, tree):
        ids = [node.id for node, _ in iter_tree(tree)]

        assert ids == ["c1", "s1", "u1", "p1", "p2", "p3", "u2", "p4", "p5",
                       "s2", "u3", "c2", "s3", "u4", "p6"]

    def test_iter_when_deep_chain_then_no_recursion_limit(self):
        node = TreeNode("leaf", "leaf", OriginalType.PROBLEM)
        for depth in range(5000):
            node = TreeNode(f"n{depth}", f"n{depth}", OriginalType.CATEGORY, children=(node,))

        assert sum(1 for _ in iter_tree([node])) == 5001


class TestFindProblem:
    """Tests for find_problem_in_tree and find_problem_path."""

    def test_find_when_present_then_returns_node(self, tree):
        node = find_problem_in_tree(tree, "p5")

        assert node.name == "Explain why -(-3) = 3"
        assert node.kind == ProblemKind.SUBJECTIVE

    def test_find_when_absent_then_none(self, tree):
        assert find_problem_in_tree(tree, "nope") is None

    def test_find_when_id_is_unit_then_none(self, tree):
        """Only problem nodes match."""
        assert find_problem_in_tree(tree, "u1") is None

    def test_find_path_when_present_then_root_to_problem(self, tree):
        assert find_problem_path(tree, "p4") == [
            "Numbers and operations",
            "Integers",
            "Subtracting integers",
            "5 - 8 = ?",
        ]

    def test_find_path_when_absent_then_empty(self, tree):
        assert find_problem_path(tree, "nope") == []

    def test_find_path_when_present_then_ends_with_problem_name(self, tree):
        for problem_id in ["p1", "p2", "p3", "p4", "p5", "p6"]:
            path = find_problem_path(tree, problem_id)

            assert len(path) == 4
            assert path[-1] == find_problem_in_tree(tree, problem_id).name


class TestGroupSelectedProblemsByUnit:
    """Tests for group_selected_problems_by_unit."""

    def test_group_when_empty_selection_then_empty(self, tree):
        assert group_selected_problems_by_unit(tree, set()) == []

    def test_group_when_selection_spans_units_then_tree_order(self, tree):
        groups = group_selected_problems_by_unit(tree, {"p6", "p4", "p1", "p3"})

        assert [(g.unit_id, [p.id for p in g.problems]) for g in groups] == [
            ("u1", ["p1", "p3"]),
            ("u2", ["p4"]),
            ("u4", ["p6"]),
        ]
        assert groups[0].unit_name == "Adding integers"

    def test_group_when_id_not_in_tree_then_ignored(self, tree):
        """An unknown id yields no group and no entry."""
        groups = group_selected_problems_by_unit(tree, {"p2", "ghost"})

        assert len(groups) == 1
        assert [p.id for p in groups[0].problems] == ["p2"]

    def test_group_when_only_unknown_ids_then_empty(self, tree):
        assert group_selected_problems_by_unit(tree, {"ghost"}) == []

    def test_group_when_entries_then_carry_path_and_tags(self, tree):
        entry = group_selected_problems_by_unit(tree, {"p1"})[0].problems[0]

        assert entry.path == ("Numbers and operations", "Integers", "Adding integers", "2 + 3 = ?")
        assert entry.kind == ProblemKind.OBJECTIVE
        assert entry.difficulty == Difficulty.LOW

    def test_group_when_problem_lacks_tags_then_defaults(self):
        problem = TreeNode("p1", "Untagged", OriginalType.PROBLEM)
        unit = TreeNode("u1", "Unit", OriginalType.UNIT, children=(problem,))

        entry = group_selected_problems_by_unit([unit], {"p1"})[0].problems[0]

        assert entry.kind == ProblemKind.OBJECTIVE
        assert entry.difficulty == Difficulty.MEDIUM

    def test_group_when_unit_id_repeated_then_single_group(self):
        first = TreeNode("u1", "Unit", OriginalType.UNIT, children=(
            TreeNode("p1", "A", OriginalType.PROBLEM),
        ))
        second = TreeNode("u1", "Unit", OriginalType.UNIT, children=(
            TreeNode("p1", "A", OriginalType.PROBLEM),
            TreeNode("p2", "B", OriginalType.PROBLEM),
        ))

        groups = group_selected_problems_by_unit([first, second], {"p1", "p2"})

        assert len(groups) == 1
        assert [p.id for p in groups[0].problems] == ["p1", "p2"]

    def test_group_when_selected_then_selection_not_modified(self, tree):
        selected = frozenset({"p1", "ghost"})

        group_selected_problems_by_unit(tree, selected)

        assert selected == frozenset({"p1", "ghost"})

    def test_group_when_every_problem_selected_then_each_once(self, tree):
        groups = group_selected_problems_by_unit(tree, {f"p{i}" for i in range(1, 7)})
        ids = [p.id for g in groups for p in g.problems]

        assert sorted(ids) == ["p1", "p2", "p3", "p4", "p5", "p6"]

    def test_to_dict_when_group_then_camel_case(self, tree):
        result = group_selected_problems_by_unit(tree, {"p6"})[0].to_dict()

        assert result["unitId"] == "u4"
        assert result["problems"][0]["type"] == "subjective"
        assert result["problems"][0]["path"][-1] == "Prove the angle sum"
