"""
Module: units_tree.assembler

Purpose:
    Compose converted categories, their stats and the request filter into
    the UnitsTreeResponse handed to callers. No business logic beyond
    composition and the fetch timestamp.

Key Functions:
    - assemble_response(): Build the immutable response value
    - utc_timestamp(): ISO-8601 UTC timestamp
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from curriculum_toolkit.core.models import (
    Category,
    ConversionIssue,
    Grade,
    TreeStats,
    UnitsTreeResponse,
)


def utc_timestamp() -> str:
    """Current time as ISO-8601 with millisecond precision, e.g. 2026-10-18T09:30:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble_response(
    categories: Iterable[Category],
    stats: TreeStats,
    *,
    grade: Optional[Grade] = None,
    include_problems: bool = False,
    issues: Iterable[ConversionIssue] = (),
    fetched_at: Optional[str] = None,
) -> UnitsTreeResponse:
    """
    Assemble the response for one payload.

    Args:
        categories: Converted categories (already sorted)
        stats: Stats aggregated from the same categories
        grade: Grade filter of the request
        include_problems: Whether problems were requested
        issues: Records the converter dropped
        fetched_at: Timestamp override; defaults to now (UTC)

    Returns:
        UnitsTreeResponse
    """
    return UnitsTreeResponse(
        categories=tuple(categories),
        grade=grade,
        include_problems=include_problems,
        stats=stats,
        fetched_at=fetched_at or utc_timestamp(),
        dropped=tuple(issues),
    )
