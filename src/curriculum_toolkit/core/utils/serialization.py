"""
Serialization Utilities

JSON file helpers around the units-tree pipeline.

- `load_payload_json()` reads a saved backend response (bare node array or
  `{result, message, data}` envelope) without interpreting it; unwrapping
  and conversion stay in `units_tree`.
- `save_response_json()` / `response_to_json()` write an assembled
  UnitsTreeResponse in the camelCase shape the dashboard consumes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.response import UnitsTreeResponse


class PayloadError(Exception):
    """Error reading a payload file."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Payload Loading
# ─────────────────────────────────────────────────────────────────────────────

def load_payload_json(path: Path) -> Any:
    """
    Load a raw units-tree payload from disk.

    Args:
        path: Path to a JSON file holding the backend response

    Returns:
        Decoded JSON value (list or dict), not yet unwrapped

    Raises:
        PayloadError: If the file is missing, unreadable or not valid JSON

    Example:
        >>> payload = load_payload_json(Path("units_tree_grade1.json"))
        >>> payload["result"]
        'SUCCESS'
    """
    if not path.exists():
        raise PayloadError(f"Payload file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise PayloadError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise PayloadError(f"Cannot read {path}: {e}") from e


# ─────────────────────────────────────────────────────────────────────────────
# Response Output
# ─────────────────────────────────────────────────────────────────────────────

def response_to_json(response: UnitsTreeResponse, *, indent: int | None = 2) -> str:
    """Serialize a response to a JSON string (non-ASCII names kept as-is)."""
    return json.dumps(response.to_dict(), ensure_ascii=False, indent=indent)


def save_response_json(response: UnitsTreeResponse, path: Path) -> None:
    """
    Write a response to disk as JSON.

    Creates parent directories as needed.

    Args:
        response: Assembled response to write
        path: Destination file
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(response_to_json(response))
        f.write("\n")
