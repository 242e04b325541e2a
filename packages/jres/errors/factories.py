"""Factory helpers for creating consistent response building errors."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail

ENCODING_FAILURE_MESSAGE = "Response message could not be encoded"


def missing_index_message(index: str) -> str:
    """Return the wire message used when ``index`` is missing."""
    return f"{index.capitalize()} index is missing from built response message"


def missing_index_error(index: str, *, status: str | None = None) -> ErrorDetail:
    """Create a validation error for a required index that was never set."""
    metadata = {"index": index}
    if status is not None:
        metadata["status"] = status
    return ErrorDetail(
        code=codes.MISSING_REQUIRED_FIELD,
        message=missing_index_message(index),
        category=ErrorCategory.VALIDATION,
        retryable=False,
        metadata=_meta(metadata),
    )


def invalid_status_error(received: object) -> ErrorDetail:
    """Create a validation error for an unrecognized status value.

    The wire message matches a missing status; only the code and metadata
    tell the two apart.
    """
    return ErrorDetail(
        code=codes.INVALID_STATUS,
        message=missing_index_message("status"),
        category=ErrorCategory.VALIDATION,
        retryable=False,
        metadata=_meta({"index": "status", "received": repr(received)}),
    )


def encoding_error(exc: Exception) -> ErrorDetail:
    """Create an internal error for a payload the JSON encoder rejected."""
    return ErrorDetail(
        code=codes.ENCODING_FAILURE,
        message=ENCODING_FAILURE_MESSAGE,
        category=ErrorCategory.INTERNAL,
        retryable=False,
        metadata=_meta(
            {"exception_type": type(exc).__name__, "reason": str(exc)}
        ),
    )


def _meta(metadata: Mapping[str, str] | None) -> dict[str, str]:
    """Normalize optional metadata into a mutable plain dict."""
    if metadata is None:
        return {}
    return dict(metadata)
