"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_raw_tree,
    ValidationError,
    RAW_TREE_SCHEMA,
)

__all__ = [
    "validate_raw_tree",
    "ValidationError",
    "RAW_TREE_SCHEMA",
]
