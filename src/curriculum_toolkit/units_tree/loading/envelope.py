"""
Module: units_tree.loading.envelope

Purpose:
    Strip the optional `{result, message, data}` wrapper some backend
    responses put around the units-tree node array, and check that what
    remains is an array of raw nodes.

Key Functions:
    - unwrap_envelope(): Accept bare array or envelope, return the array
    - extract_response_data(): Strict variant for payloads that must be wrapped
    - ensure_node_array(): Shape check, optionally full schema validation

Key Classes:
    - UnitsTreeError: Base for errors surfaced to the fetching layer
    - EnvelopeError: Backend explicitly reported failure
    - ShapeError: Payload is not a node array (or fails the schema)

Dependencies:
    - curriculum_toolkit.core.schemas.validator: Strict schema validation

Used By:
    - units_tree.controller: build_units_tree()
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from curriculum_toolkit.core.schemas.validator import ValidationError, validate_raw_tree

logger = logging.getLogger(__name__)


SUCCESS_STATUS = "SUCCESS"
SHAPE_ERROR_MESSAGE = "expected array of curriculum nodes"


class UnitsTreeError(Exception):
    """Base error for units-tree payloads the caller cannot render."""
    pass


class EnvelopeError(UnitsTreeError):
    """The backend wrapped the response and reported failure."""

    def __init__(self, message: str, status: str = ""):
        super().__init__(message)
        self.status = status


class ShapeError(UnitsTreeError):
    """The payload is not an array of curriculum nodes."""

    def __init__(self, message: str = SHAPE_ERROR_MESSAGE, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_envelope(payload: Any) -> bool:
    return isinstance(payload, Mapping) and "result" in payload


def _is_success(status: Any) -> bool:
    return isinstance(status, str) and status.strip().upper() == SUCCESS_STATUS


def unwrap_envelope(payload: Any) -> List[Any]:
    """
    Return the raw node array carried by a backend response.

    Process:
    1. A list is passed through unchanged
    2. A mapping with a `result` field is an envelope: a non-SUCCESS
       result fails, otherwise `data` is extracted
    3. Whatever was extracted must be a list

    Args:
        payload: Decoded backend response

    Returns:
        The raw node list (same object, not copied)

    Raises:
        EnvelopeError: Envelope with a failure result
        ShapeError: Anything that does not yield a list

    Example:
        >>> unwrap_envelope({"result": "SUCCESS", "message": "", "data": []})
        []
        >>> unwrap_envelope({"result": "ERROR", "message": "no grade", "data": []})
        Traceback (most recent call last):
        ...
        EnvelopeError: api failure: no grade
    """
    if isinstance(payload, list):
        return payload

    if _is_envelope(payload):
        status = payload.get("result")
        if not _is_success(status):
            message = payload.get("message") or ""
            raise EnvelopeError(f"api failure: {message}", status=str(status))
        data = payload.get("data")
        logger.debug(f"Unwrapped envelope (result={status}, has_data={data is not None})")
    else:
        data = payload

    if not isinstance(data, list):
        raise ShapeError(SHAPE_ERROR_MESSAGE)
    return data


def extract_response_data(envelope: Mapping[str, Any]) -> List[Any]:
    """
    Extract `data` from a payload that must be an envelope.

    Unlike unwrap_envelope(), a bare array is rejected.

    Raises:
        EnvelopeError: result is not SUCCESS
        ShapeError: Not an envelope, or data is not a list
    """
    if not _is_envelope(envelope):
        raise ShapeError("expected {result, message, data} envelope")
    return unwrap_envelope(envelope)


def ensure_node_array(data: Any, *, strict: bool = False) -> List[Any]:
    """
    Check an unwrapped payload before conversion.

    Args:
        data: Output of unwrap_envelope()
        strict: Also validate every node and problem against the schema

    Returns:
        data unchanged

    Raises:
        ShapeError: data is not a list, or (strict) violates the schema
    """
    if not isinstance(data, list):
        raise ShapeError(SHAPE_ERROR_MESSAGE)
    if strict:
        try:
            validate_raw_tree(data, strict=True)
        except ValidationError as e:
            raise ShapeError(f"{SHAPE_ERROR_MESSAGE}: {e}", path=e.path, errors=e.errors) from e
    return data
