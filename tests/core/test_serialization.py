"""
Unit Tests for Serialization Utilities

Tests for payload loading and response output.
"""

import json
import pytest
from pathlib import Path

from curriculum_toolkit.core.models import Category, TreeStats, UnitsTreeResponse
from curriculum_toolkit.core.utils.serialization import (
    PayloadError,
    load_payload_json,
    response_to_json,
    save_response_json,
)


@pytest.fixture
def response() -> UnitsTreeResponse:
    return UnitsTreeResponse(
        categories=(Category("c1", "수와 연산", 1),),
        grade=None,
        include_problems=False,
        stats=TreeStats(1, 0, 0),
        fetched_at="2026-10-18T09:30:00.000Z",
    )


class TestLoadPayloadJson:
    """Tests for load_payload_json."""

    def test_load_when_envelope_file_then_returns_dict(self, tmp_path: Path, sample_envelope):
        path = tmp_path / "payload.json"
        path.write_text(json.dumps(sample_envelope, ensure_ascii=False), encoding="utf-8")

        payload = load_payload_json(path)

        assert payload["result"] == "SUCCESS"
        assert len(payload["data"]) == 2

    def test_load_when_missing_file_then_raises(self, tmp_path: Path):
        with pytest.raises(PayloadError, match="not found"):
            load_payload_json(tmp_path / "missing.json")

    def test_load_when_invalid_json_then_raises(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(PayloadError, match="Invalid JSON"):
            load_payload_json(path)


class TestResponseOutput:
    """Tests for response_to_json / save_response_json."""

    def test_response_to_json_when_non_ascii_then_kept(self, response):
        text = response_to_json(response)

        assert "수와 연산" in text
        assert json.loads(text)["stats"] == {"categoryCount": 1, "subcategoryCount": 0, "unitCount": 0}

    def test_save_when_nested_path_then_creates_dirs(self, tmp_path: Path, response):
        path = tmp_path / "out" / "nested" / "response.json"

        save_response_json(response, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["fetchedAt"] == "2026-10-18T09:30:00.000Z"
        assert data["categories"][0]["name"] == "수와 연산"
