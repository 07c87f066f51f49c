"""
Module: units_tree.controller

Purpose:
    Orchestrate the units-tree pipeline for one fetched payload.
    Unwrap → Validate shape → Convert → Aggregate → Assemble

Key Functions:
    - build_units_tree(): Decoded payload -> UnitsTreeResponse
    - load_units_tree(): JSON file -> UnitsTreeResponse

Dependencies:
    - units_tree.loading: Envelope unwrapping and node conversion
    - units_tree.stats: Node counts
    - units_tree.assembler: Response composition
    - core.utils.serialization: Payload file reading

Used By:
    - curriculum_toolkit.cli
    - The dashboard's data-fetching layer (after its HTTP call)
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, List, Optional

from curriculum_toolkit.core.models import ConversionIssue, UnitsTreeResponse
from curriculum_toolkit.core.utils.serialization import load_payload_json

from .assembler import assemble_response
from .config import UnitsTreeConfig
from .loading import convert_categories, ensure_node_array, unwrap_envelope
from .stats import aggregate_stats

logger = logging.getLogger(__name__)


def build_units_tree(payload: Any, config: Optional[UnitsTreeConfig] = None) -> UnitsTreeResponse:
    """
    Build a units-tree response from a decoded backend payload.

    Pipeline:
    1. Unwrap the optional {result, message, data} envelope
    2. Check the node array (schema-validated when config.strict)
    3. Convert raw nodes, dropping malformed ones
    4. Aggregate stats from the converted tree
    5. Assemble the response with a fetch timestamp

    Args:
        payload: Bare node array or envelope, already JSON-decoded
        config: Request filter and validation mode (defaults apply if None)

    Returns:
        UnitsTreeResponse

    Raises:
        EnvelopeError: The backend reported failure
        ShapeError: The payload is not a node array (or fails strict validation)

    Example:
        >>> response = build_units_tree(payload, UnitsTreeConfig(grade="1", include_problems=True))
        >>> response.stats.unit_count
        12
    """
    config = config or UnitsTreeConfig()
    start_time = time.perf_counter()

    raw_nodes = ensure_node_array(unwrap_envelope(payload), strict=config.strict)

    issues: List[ConversionIssue] = []
    categories = convert_categories(raw_nodes, issues=issues)
    stats = aggregate_stats(categories, include_problems=config.include_problems)

    response = assemble_response(
        categories,
        stats,
        grade=config.grade,
        include_problems=config.include_problems,
        issues=issues,
    )

    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"Built units tree: {stats.category_count} categories, "
        f"{stats.subcategory_count} subcategories, {stats.unit_count} units"
        + (f", {stats.total_problems_count} problems" if stats.total_problems_count is not None else "")
        + f" in {duration_ms:.1f}ms"
    )
    if issues:
        logger.warning(f"Dropped {len(issues)} malformed record(s) while converting units tree")

    return response


def load_units_tree(path: Path, config: Optional[UnitsTreeConfig] = None) -> UnitsTreeResponse:
    """
    Load a saved payload file and build its response.

    Raises:
        PayloadError: File missing or not valid JSON
        EnvelopeError / ShapeError: As for build_units_tree()
    """
    payload = load_payload_json(path)
    return build_units_tree(payload, config)
