"""
Schema Validation Utilities

Validates backend units-tree payloads against the raw tree schema.

Two levels:
- Basic (default): the payload is a list whose items are objects. Anything
  finer is left to the converter, which drops bad nodes individually.
- Strict: full JSON Schema validation with `jsonschema`, reporting every
  violation with its JSON path. Used when a caller wants the backend
  contract enforced instead of degraded.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


RAW_TREE_SCHEMA = "raw_tree"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_raw_tree(data: Any, *, strict: bool = False) -> None:
    """
    Validate an unwrapped units-tree payload.

    Args:
        data: Value extracted from the backend response
        strict: If True, validate every node and problem with jsonschema

    Raises:
        ValidationError: If data is invalid. `path` points at the first
            offending element, `errors` lists every violation found.

    Example:
        >>> validate_raw_tree([{"id": "c1", "name": "Numbers", "kind": "CATEGORY"}], strict=True)
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Expected a list of nodes, got {type(data).__name__}",
            path="",
        )

    for i, node in enumerate(data):
        if not isinstance(node, dict):
            raise ValidationError(
                f"Node must be an object, got {type(node).__name__}",
                path=f"[{i}]",
            )

    if strict:
        schema = _load_schema(RAW_TREE_SCHEMA)
        validator = jsonschema.Draft202012Validator(schema)
        found = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        if found:
            first = found[0]
            raise ValidationError(
                f"Schema validation failed: {first.message}",
                path=_format_path(first.absolute_path),
                errors=[f"{_format_path(e.absolute_path) or '<root>'}: {e.message}" for e in found],
            )


def _format_path(parts) -> str:
    """Render a jsonschema path deque as `[0].children[2].id`."""
    out = ""
    for part in parts:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out
