"""JSON and JSONP encoding for response payloads."""

from __future__ import annotations

import json
from typing import Any, Mapping

from packages.jres.config import ResponseSettings


def encode_payload(payload: Mapping[str, Any], *, settings: ResponseSettings) -> str:
    """Encode ``payload`` as compact JSON.

    Raises ``TypeError`` for values the encoder cannot serialize,
    ``ValueError`` for NaN/Infinity or circular references, and
    ``RecursionError`` for data nested deeper than the interpreter allows.
    """
    text = json.dumps(
        payload,
        ensure_ascii=settings.ensure_ascii,
        allow_nan=False,
        separators=(",", ":"),
    )
    if settings.escape_slashes:
        text = text.replace("/", "\\/")
    return text


def wrap_jsonp(callback: str | None, body: str) -> str:
    """Wrap ``body`` as ``callback(body)``; return it unchanged without a callback.

    The callback is not escaped or validated.
    """
    if callback is None:
        return body
    return f"{callback}({body})"
