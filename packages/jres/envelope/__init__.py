"""Public envelope API: the response builder and its supporting types."""

from .builder import ResponseBuilder
from .encoding import encode_payload, wrap_jsonp
from .envelope import ResponseEnvelope, internal_error_envelope
from .factories import error, fail, success
from .result import BuildResult
from .status import (
    CODE,
    DATA,
    INDEX_ORDER,
    MESSAGE,
    REQUIRED_INDEXES,
    STATUS,
    ResponseStatus,
    resolve_status,
)

__all__ = [
    "CODE",
    "DATA",
    "INDEX_ORDER",
    "MESSAGE",
    "REQUIRED_INDEXES",
    "STATUS",
    "BuildResult",
    "ResponseBuilder",
    "ResponseEnvelope",
    "ResponseStatus",
    "encode_payload",
    "error",
    "fail",
    "internal_error_envelope",
    "resolve_status",
    "success",
    "wrap_jsonp",
]
