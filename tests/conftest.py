import copy
import sys
from types import SimpleNamespace
from pathlib import Path

import pytest

# Add src to sys.path so we can import curriculum_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def raw_problem(problem_id, kind="MULTIPLE_CHOICE", difficulty="중", points=5, preview=None):
    """Build a raw backend problem record."""
    return {
        "id": problem_id,
        "questionKind": kind,
        "difficulty": difficulty,
        "points": points,
        "previewText": preview if preview is not None else f"Problem {problem_id}",
    }


def raw_unit(unit_id, name, display_order=1, problems=None, **extra):
    """Build a raw UNIT node."""
    node = {
        "id": unit_id,
        "name": name,
        "kind": "UNIT",
        "displayOrder": display_order,
        "unitCode": f"MATH_{unit_id.upper()}",
        "grade": 1,
        "children": [],
    }
    if problems is not None:
        node["problems"] = problems
    node.update(extra)
    return node


def raw_subcategory(sub_id, name, display_order=1, children=()):
    return {
        "id": sub_id,
        "name": name,
        "kind": "SUBCATEGORY",
        "displayOrder": display_order,
        "children": list(children),
    }


def raw_category(cat_id, name, display_order=1, children=()):
    return {
        "id": cat_id,
        "name": name,
        "kind": "CATEGORY",
        "displayOrder": display_order,
        "children": list(children),
    }


# Two categories (backend order reversed), three subcategories, four units,
# six problems.
SAMPLE_TREE = [
    raw_category("c2", "Geometry", 2, [
        raw_subcategory("s3", "Plane figures", 1, [
            raw_unit("u4", "Triangles", 1, [
                raw_problem("p6", "SUBJECTIVE", "상", 10, "Prove the angle sum"),
            ]),
        ]),
    ]),
    raw_category("c1", "Numbers and operations", 1, [
        raw_subcategory("s2", "Rationals", 2, [
            raw_unit("u3", "Fractions", 1, []),
        ]),
        raw_subcategory("s1", "Integers", 1, [
            raw_unit("u2", "Subtracting integers", 2, [
                raw_problem("p4", "MULTIPLE_CHOICE", "중", 4, "5 - 8 = ?"),
                raw_problem("p5", "SUBJECTIVE", "상", 6, "Explain why -(-3) = 3"),
            ]),
            raw_unit("u1", "Adding integers", 1, [
                raw_problem("p1", "MULTIPLE_CHOICE", "하", 3, "2 + 3 = ?"),
                raw_problem("p2", "MULTIPLE_CHOICE", "중", 4, "-2 + 7 = ?"),
                raw_problem("p3", "SUBJECTIVE", "상", 5, "Integer addition rules"),
            ]),
        ]),
    ]),
]


# Common test fixtures
@pytest.fixture
def sample_tree() -> list:
    """Raw node array with problems (deep copy per test)."""
    return copy.deepcopy(SAMPLE_TREE)


@pytest.fixture
def sample_envelope(sample_tree) -> dict:
    """The sample tree wrapped in a SUCCESS envelope."""
    return {"result": "SUCCESS", "message": "", "data": sample_tree}


@pytest.fixture
def sample_categories(sample_tree):
    """Converted categories for the sample tree."""
    from curriculum_toolkit.units_tree.loading import convert_categories
    return convert_categories(sample_tree)


@pytest.fixture
def raw():
    """Builders for raw backend records."""
    return SimpleNamespace(
        problem=raw_problem,
        unit=raw_unit,
        subcategory=raw_subcategory,
        category=raw_category,
    )
