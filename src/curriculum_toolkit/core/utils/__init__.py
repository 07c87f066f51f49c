"""
Core Utilities Package

JSON file helpers for payloads and responses.
"""

from .serialization import (
    load_payload_json,
    response_to_json,
    save_response_json,
    PayloadError,
)

__all__ = [
    "load_payload_json",
    "response_to_json",
    "save_response_json",
    "PayloadError",
]
