"""Structured log events emitted while building responses."""

from __future__ import annotations

import logging
from typing import Any

from packages.jres.errors import ErrorDetail

from . import fields


def internal_error_fields(detail: ErrorDetail) -> dict[str, Any]:
    """Return structured fields describing one internal-error fallback.

    ``metadata`` stays a nested mapping so JSON logs keep the index, status
    and exception details queryable.
    """
    return {
        fields.EVENT: fields.INTERNAL_ERROR_FALLBACK_EVENT,
        fields.ERROR_CODE: detail.code,
        fields.ERROR_CATEGORY: detail.category.value,
        fields.METADATA: dict(detail.metadata),
    }


def log_internal_error(logger: logging.Logger, detail: ErrorDetail) -> None:
    """Warn that a response was replaced by its internal-error envelope."""
    logger.warning(
        detail.message,
        extra={fields.EXTRA_FIELDS: internal_error_fields(detail)},
    )
