"""Utility helpers for standardized error responses."""
from typing import Any


def error_response(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return a standardized error payload.

    ``message`` is repeated at the top level so clients that only read
    ``{"message": ...}`` keep working.
    """

    payload: dict[str, Any] = {"message": message, "error": {"code": code, "message": message}}
    if details:
        payload["error"]["details"] = details
    return payload
