"""Error classes and helpers for the Course Notes MCP Server.

Every failure a request can hit maps to one structured exception here.
The tool dispatcher converts them to error envelopes; nothing below is
allowed to escape the dispatch boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass(eq=False)
class AppError(Exception):
    """Base application error with a code and optional details."""

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


class RequestValidationError(AppError):
    """Raised when tool arguments are malformed or missing."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("VALIDATION_ERROR", message, details)


class NotFoundError(AppError):
    """Raised when a local transcript cannot be found or read."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("NOT_FOUND", message, details)


class ExternalToolError(AppError):
    """Raised when a helper process fails or returns output we cannot use."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("EXTERNAL_TOOL_ERROR", message, details)


class WriteError(AppError):
    """Raised when a transcript cannot be written to disk."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("WRITE_ERROR", message, details)


def to_error_payload(error: Exception) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Args:
        error: The exception to convert.

    Returns:
        A dictionary with ``code``, ``message`` and optional ``details``.

    Examples:
        >>> payload = to_error_payload(NotFoundError("Transcript file not found"))
        >>> payload["code"]
        'NOT_FOUND'
    """

    if isinstance(error, AppError):
        return error.to_payload()
    # Fallback: wrap generic exceptions
    details: Dict[str, Any] = {"type": type(error).__name__}
    return {"code": "INTERNAL_ERROR", "message": str(error), "details": details}
