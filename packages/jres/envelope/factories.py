"""Convenience constructors for builders pre-set to one status."""

from __future__ import annotations

from typing import Any, Mapping

from .builder import ResponseBuilder
from .status import ResponseStatus


def success(
    data: Mapping[str, Any] | None = None, **kwargs: Any
) -> ResponseBuilder:
    """Start a success response carrying ``data``."""
    return ResponseBuilder(ResponseStatus.SUCCESS, data=data, **kwargs)


def fail(
    message: str | None = None,
    data: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> ResponseBuilder:
    """Start a fail response, typically for rejected caller input."""
    return ResponseBuilder(ResponseStatus.FAIL, data=data, message=message, **kwargs)


def error(
    message: str | None = None,
    code: int | None = None,
    data: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> ResponseBuilder:
    """Start an error response with an optional numeric error code."""
    return ResponseBuilder(
        ResponseStatus.ERROR, data=data, message=message, error_code=code, **kwargs
    )
