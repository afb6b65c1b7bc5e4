"""Error classes and helpers for the server date formatter.

Public parse operations never raise: they log and return None. The
structured errors below are raised by the strict parse path and by
timezone resolution, and can be turned into serializable payloads for
callers that report failures upstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass
class AppError(Exception):
    """Base formatter error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class UnparsableDateError(AppError, ValueError):
    """Raised when a value does not match any accepted wire format."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("UNPARSABLE_DATE", message, details)


class InvalidTimezoneError(AppError, ValueError):
    """Raised when a configured timezone name is not a known IANA zone."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_CONFIG", message, details)


def to_error_payload(error: Exception) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Examples:
        >>> try:
        ...     raise UnparsableDateError("Unparsable date", {"value": "soon"})
        ... except Exception as e:
        ...     payload = to_error_payload(e)
        ...     assert payload["code"] == "UNPARSABLE_DATE"
    """

    if isinstance(error, AppError):
        return error.to_payload()
    # Fallback: wrap generic exceptions
    return {"code": "INTERNAL", "message": str(error)}
