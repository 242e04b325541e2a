"""Public logging API for jres.

Thin layer over Python's ``logging`` module: stdout emission, JSON or plain
formatting, and structured internal-error fallback events.
"""

from . import fields
from .config import (
    JsonFormatter,
    PlainFormatter,
    ServiceFilter,
    configure_logging,
    get_logger,
)
from .events import internal_error_fields, log_internal_error

__all__ = [
    "JsonFormatter",
    "PlainFormatter",
    "ServiceFilter",
    "configure_logging",
    "fields",
    "get_logger",
    "internal_error_fields",
    "log_internal_error",
]
