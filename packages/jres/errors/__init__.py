"""Public error API for response building."""

from . import codes
from .factories import (
    ENCODING_FAILURE_MESSAGE,
    encoding_error,
    invalid_status_error,
    missing_index_error,
    missing_index_message,
)
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ENCODING_FAILURE_MESSAGE",
    "ErrorCategory",
    "ErrorDetail",
    "codes",
    "encoding_error",
    "invalid_status_error",
    "missing_index_error",
    "missing_index_message",
]
