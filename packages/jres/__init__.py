"""Builder for JSend-style success/fail/error response envelopes.

Example::

    from packages.jres import ResponseBuilder, ResponseStatus

    body = (
        ResponseBuilder()
        .set_status(ResponseStatus.SUCCESS)
        .add_data("id", 1)
        .to_json()
    )
    # '{"status":"success","data":{"id":1}}'
"""

from packages.jres.envelope import (
    BuildResult,
    ResponseBuilder,
    ResponseEnvelope,
    ResponseStatus,
    error,
    fail,
    success,
)
from packages.jres.errors import ErrorCategory, ErrorDetail

__all__ = [
    "BuildResult",
    "ErrorCategory",
    "ErrorDetail",
    "ResponseBuilder",
    "ResponseEnvelope",
    "ResponseStatus",
    "error",
    "fail",
    "success",
]
