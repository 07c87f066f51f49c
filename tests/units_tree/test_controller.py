"""
Integration Tests for the Units-Tree Controller

End-to-end: payload -> response.
"""

import json
import logging

import pytest

from curriculum_toolkit.core.models import Grade
from curriculum_toolkit.core.utils.serialization import PayloadError
from curriculum_toolkit.units_tree import (
    EnvelopeError,
    ShapeError,
    UnitsTreeConfig,
    build_units_tree,
    load_units_tree,
)


class TestBuildUnitsTree:
    """Tests for build_units_tree."""

    @pytest.fixture
    def nameless_payload(self) -> list:
        """Single path whose nodes carry only id, kind and children."""
        return [{"id": "c1", "kind": "CATEGORY", "children": [
            {"id": "s1", "kind": "SUBCATEGORY", "children": [
                {"id": "u1", "kind": "UNIT", "children": [], "problems": [
                    {"id": "p1", "questionKind": "MULTIPLE_CHOICE", "difficulty": "하",
                     "points": 5, "previewText": "x"},
                ]},
            ]},
        ]}]

    @pytest.mark.parametrize("strict", [False, True])
    def test_build_when_nodes_have_no_name_then_counted(self, nameless_payload, strict):
        response = build_units_tree(nameless_payload, UnitsTreeConfig(include_problems=True, strict=strict))

        assert response.stats.to_dict() == {
            "categoryCount": 1,
            "subcategoryCount": 1,
            "unitCount": 1,
            "totalProblemsCount": 1,
        }
        assert response.dropped_node_count == 0

    def test_build_when_envelope_then_response(self, sample_envelope):
        response = build_units_tree(sample_envelope, UnitsTreeConfig(grade=1, include_problems=True))

        assert response.grade == Grade.FIRST
        assert response.include_problems is True
        assert response.stats.to_dict() == {
            "categoryCount": 2,
            "subcategoryCount": 3,
            "unitCount": 4,
            "totalProblemsCount": 6,
        }
        assert response.dropped_node_count == 0

    def test_build_when_no_config_then_defaults(self, sample_tree):
        response = build_units_tree(sample_tree)

        assert response.grade is None
        assert response.stats.total_problems_count is None

    def test_build_when_envelope_error_then_propagates(self):
        with pytest.raises(EnvelopeError, match="no grade"):
            build_units_tree({"result": "ERROR", "message": "no grade", "data": []})

    def test_build_when_not_array_then_shape_error(self):
        with pytest.raises(ShapeError):
            build_units_tree({"categories": []})

    def test_build_when_strict_and_invalid_then_shape_error(self, sample_tree):
        sample_tree[0]["kind"] = "UNKNOWN"

        with pytest.raises(ShapeError):
            build_units_tree(sample_tree, UnitsTreeConfig(strict=True))

    def test_build_when_malformed_nodes_then_dropped_and_counted(self, sample_tree, caplog):
        sample_tree[0]["kind"] = "UNKNOWN"

        with caplog.at_level(logging.WARNING):
            response = build_units_tree(sample_tree)

        assert [c.id for c in response.categories] == ["c1"]
        assert response.dropped_node_count == 1
        assert "Dropped 1 malformed record" in caplog.text

    def test_build_when_called_then_logs_summary(self, sample_tree, caplog):
        with caplog.at_level(logging.INFO, logger="curriculum_toolkit.units_tree.controller"):
            build_units_tree(sample_tree, UnitsTreeConfig(include_problems=True))

        assert "Built units tree: 2 categories" in caplog.text
        assert "6 problems" in caplog.text


class TestLoadUnitsTree:
    """Tests for load_units_tree."""

    def test_load_when_file_then_response(self, tmp_path, sample_envelope):
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(sample_envelope, ensure_ascii=False), encoding="utf-8")

        response = load_units_tree(path, UnitsTreeConfig(include_problems=True))

        assert response.stats.unit_count == 4

    def test_load_when_missing_then_payload_error(self, tmp_path):
        with pytest.raises(PayloadError):
            load_units_tree(tmp_path / "missing.json")
