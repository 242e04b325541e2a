"""Status discriminator and index table for JSend-style responses."""

from __future__ import annotations

from enum import Enum
from typing import Mapping


class ResponseStatus(str, Enum):
    """The three response states; each selects its own required indexes."""

    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


STATUS = "status"
MESSAGE = "message"
DATA = "data"
CODE = "code"

# Serialization and validation order after the status index.
INDEX_ORDER: tuple[str, ...] = (MESSAGE, DATA, CODE)

REQUIRED_INDEXES: Mapping[ResponseStatus, frozenset[str]] = {
    ResponseStatus.SUCCESS: frozenset({DATA}),
    ResponseStatus.FAIL: frozenset({MESSAGE}),
    ResponseStatus.ERROR: frozenset({MESSAGE}),
}


def resolve_status(value: object) -> ResponseStatus | None:
    """Return the matching ``ResponseStatus`` or ``None`` if unrecognized.

    Matching is exact and case-sensitive: ``"SUCCESS"`` is not a status.
    """
    if isinstance(value, ResponseStatus):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ResponseStatus(value)
    except ValueError:
        return None
