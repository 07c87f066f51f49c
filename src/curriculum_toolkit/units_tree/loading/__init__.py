"""
Module: units_tree.loading

Purpose:
    Turn a decoded backend payload into normalized curriculum nodes.
    Unwraps the optional response envelope, then converts raw nodes.

Key Functions:
    - unwrap_envelope(): Bare array or {result, message, data} -> node list
    - extract_response_data(): Envelope-only variant
    - ensure_node_array(): Shape / strict schema check
    - convert_node(): Convert one raw node and its subtree
    - convert_categories(): Convert the root node list

Dependencies:
    - curriculum_toolkit.core.models: Normalized models
    - curriculum_toolkit.core.schemas.validator: Strict schema validation

Used By:
    - units_tree.controller: build_units_tree()
"""

from .envelope import (
    unwrap_envelope,
    extract_response_data,
    ensure_node_array,
    UnitsTreeError,
    EnvelopeError,
    ShapeError,
)
from .converter import convert_node, convert_categories, convert_problem

__all__ = [
    "unwrap_envelope",
    "extract_response_data",
    "ensure_node_array",
    "UnitsTreeError",
    "EnvelopeError",
    "ShapeError",
    "convert_node",
    "convert_categories",
    "convert_problem",
]
