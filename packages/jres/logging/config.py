"""Stdout logging configuration for applications serving jres responses.

``configure_logging`` installs one stdout handler on the root logger, driven
by ``LoggingSettings`` (``JRES_LOGGING__*``). Structured fields attached with
``extra={"extra_fields": {...}}``, such as internal-error fallbacks, are
rendered as JSON members or ``key=value`` suffixes.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Mapping

from . import fields

if TYPE_CHECKING:
    from packages.jres.config import LoggingSettings


class ServiceFilter(logging.Filter):
    """Stamp service and environment names on each record."""

    def __init__(self, *, service: str, environment: str) -> None:
        super().__init__()
        self._service = service
        self._environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service
        record.environment = self._environment
        return True


class JsonFormatter(logging.Formatter):
    """One compact JSON object per record, structured fields kept nested."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        for name in (fields.SERVICE, fields.ENVIRONMENT):
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value

        payload.update(_extra_fields(record))

        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable lines with structured fields flattened to ``key=value``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        pairs = sorted(_flatten(_extra_fields(record)).items())
        if not pairs:
            return message
        return message + " " + " ".join(f"{key}={value}" for key, value in pairs)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure root logging from ``settings`` or the process-wide settings.

    Existing root handlers are replaced, so repeated calls never duplicate
    output.
    """
    if settings is None:
        from packages.jres.config import get_settings

        settings = get_settings().logging

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(settings.level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(settings.level)
    handler.addFilter(
        ServiceFilter(service=settings.service, environment=settings.environment)
    )
    handler.setFormatter(JsonFormatter() if settings.json_output else PlainFormatter())
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from Python's standard logging hierarchy."""
    return logging.getLogger(name)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    extra = getattr(record, fields.EXTRA_FIELDS, None)
    if not isinstance(extra, Mapping):
        return {}
    return dict(extra)


def _flatten(values: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings into dotted keys (``metadata.index``)."""
    flat: dict[str, Any] = {}
    for key, value in values.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, prefix=f"{name}."))
        else:
            flat[name] = value
    return flat
