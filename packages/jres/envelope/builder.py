"""Chained builder for JSend-style response envelopes.

Callers set fields in any order, then serialize with ``to_json`` or
``to_jsonp``. Serialization never raises: a response that is missing an
index its status requires is replaced by an internal-error envelope such as
``{"status":"error","message":"Data index is missing from built response message"}``.
"""

from __future__ import annotations

from typing import Any, Mapping

from packages.jres.config import ResponseSettings, get_response_settings
from packages.jres.errors import (
    ErrorDetail,
    encoding_error,
    invalid_status_error,
    missing_index_error,
)
from packages.jres.logging import get_logger, log_internal_error

from .encoding import encode_payload, wrap_jsonp
from .envelope import ResponseEnvelope, internal_error_envelope
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

logger = get_logger(__name__)


class ResponseBuilder:
    """Mutable response state with chained setters and terminal serializers."""

    def __init__(
        self,
        status: ResponseStatus | str | None = None,
        data: Mapping[str, Any] | None = None,
        message: str | None = None,
        jsonp_callback: str | None = None,
        *,
        error_code: int | None = None,
        settings: ResponseSettings | None = None,
    ) -> None:
        self._status = status
        self._data = dict(data) if data is not None else None
        self._message = message
        self._error_code = error_code
        self._jsonp_callback = jsonp_callback
        self._settings = settings

    @property
    def status(self) -> ResponseStatus | str | None:
        return self._status

    @property
    def data(self) -> dict[str, Any] | None:
        return self._data

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def error_code(self) -> int | None:
        return self._error_code

    @property
    def jsonp_callback(self) -> str | None:
        return self._jsonp_callback

    @property
    def settings(self) -> ResponseSettings:
        """Return explicit settings, falling back to process-wide settings."""
        if self._settings is not None:
            return self._settings
        return get_response_settings()

    def set_status(self, status: ResponseStatus | str | None) -> ResponseBuilder:
        """Overwrite the status; the value is checked only when building."""
        self._status = status
        return self

    def set_data(self, data: Mapping[str, Any] | None) -> ResponseBuilder:
        """Replace the whole data mapping; ``None`` clears it."""
        self._data = dict(data) if data is not None else None
        return self

    def add_data(self, key: str | None, value: Any) -> ResponseBuilder:
        """Set one data entry, creating the mapping if needed.

        A ``None`` key is ignored.
        """
        if key is None:
            return self
        if self._data is None:
            self._data = {}
        self._data[key] = value
        return self

    def set_message(self, message: str | None) -> ResponseBuilder:
        self._message = message
        return self

    def set_error_code(self, error_code: int | None) -> ResponseBuilder:
        self._error_code = error_code
        return self

    def set_jsonp_callback(self, jsonp_callback: str | None) -> ResponseBuilder:
        self._jsonp_callback = jsonp_callback
        return self

    def build(self) -> BuildResult:
        """Validate current fields against the status and snapshot them.

        Indexes are checked in wire order (status, message, data, code); the
        first required one that is unset replaces the response with an
        internal-error envelope.
        """
        status = resolve_status(self._status)
        if status is None:
            if self._status is None:
                return self._fallback(missing_index_error(STATUS))
            return self._fallback(invalid_status_error(self._status))

        values = {MESSAGE: self._message, DATA: self._data, CODE: self._error_code}
        required = REQUIRED_INDEXES[status]
        for index in INDEX_ORDER:
            if values[index] is None and index in required:
                return self._fallback(missing_index_error(index, status=status.value))

        return BuildResult(
            envelope=ResponseEnvelope(
                status=status,
                message=self._message,
                data=dict(self._data) if self._data is not None else None,
                code=self._error_code,
            )
        )

    def to_json(self) -> str:
        """Serialize the response, or its internal-error substitute, as JSON."""
        result = self.build()
        settings = self.settings
        try:
            return encode_payload(result.envelope.to_payload(), settings=settings)
        except (TypeError, ValueError, RecursionError) as exc:
            fallback = self._fallback(encoding_error(exc))
            return encode_payload(fallback.envelope.to_payload(), settings=settings)

    def to_jsonp(self) -> str:
        """Serialize as JSON wrapped in the JSONP callback, when one is set."""
        return wrap_jsonp(self._jsonp_callback, self.to_json())

    def _fallback(self, detail: ErrorDetail) -> BuildResult:
        """Return the internal-error result for ``detail`` and log it."""
        if self.settings.log_internal_errors:
            log_internal_error(logger, detail)
        return BuildResult(
            envelope=internal_error_envelope(detail.message), errors=[detail]
        )
