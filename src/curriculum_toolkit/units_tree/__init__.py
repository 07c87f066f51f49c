"""
Module: units_tree

Purpose:
    Curriculum units-tree pipeline: turn a fetched backend payload into a
    normalized, counted, immutable tree, and answer the queries exam
    composition needs.

Key Functions:
    - build_units_tree(): Payload -> UnitsTreeResponse (main entry point)
    - load_units_tree(): JSON file -> UnitsTreeResponse
    - unwrap_envelope(), convert_node(), aggregate_stats(), assemble_response()
    - convert_units_tree_for_component(): Flatten for the selection widget
    - find_problem_in_tree(), find_problem_path(), group_selected_problems_by_unit()

Key Classes:
    - UnitsTreeConfig: Request filter and validation mode
    - EnvelopeError / ShapeError: Payload-level failures

Dependencies:
    - jsonschema: Strict payload validation
    - curriculum_toolkit.core.models: Immutable tree models
"""

from .config import UnitsTreeConfig
from .loading import (
    unwrap_envelope,
    extract_response_data,
    convert_node,
    convert_categories,
    UnitsTreeError,
    EnvelopeError,
    ShapeError,
)
from .stats import aggregate_stats
from .assembler import assemble_response
from .controller import build_units_tree, load_units_tree
from .view import (
    TreeNode,
    OriginalType,
    convert_units_tree_for_component,
    find_problem_in_tree,
    find_problem_path,
    group_selected_problems_by_unit,
)

__all__ = [
    # Config
    "UnitsTreeConfig",
    # Loading
    "unwrap_envelope",
    "extract_response_data",
    "convert_node",
    "convert_categories",
    "UnitsTreeError",
    "EnvelopeError",
    "ShapeError",
    # Stats / assembly
    "aggregate_stats",
    "assemble_response",
    # Controller
    "build_units_tree",
    "load_units_tree",
    # View
    "TreeNode",
    "OriginalType",
    "convert_units_tree_for_component",
    "find_problem_in_tree",
    "find_problem_path",
    "group_selected_problems_by_unit",
]
