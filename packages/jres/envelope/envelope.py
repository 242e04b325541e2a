"""Immutable snapshot of a built response envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .status import CODE, DATA, MESSAGE, STATUS, ResponseStatus


@dataclass(frozen=True)
class ResponseEnvelope:
    """Validated envelope fields ready for encoding."""

    status: ResponseStatus
    message: str | None = None
    data: Mapping[str, Any] | None = None
    code: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the wire mapping: status first, unset fields omitted."""
        payload: dict[str, Any] = {STATUS: self.status.value}
        if self.message is not None:
            payload[MESSAGE] = self.message
        if self.data is not None:
            payload[DATA] = dict(self.data)
        if self.code is not None:
            payload[CODE] = self.code
        return payload


def internal_error_envelope(message: str) -> ResponseEnvelope:
    """Build the status-and-message envelope substituted for a bad response."""
    return ResponseEnvelope(status=ResponseStatus.ERROR, message=message)
