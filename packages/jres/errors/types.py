"""Canonical error types for response building.

Errors in this package are values, not exceptions: the builder records them
on its build result and degrades to a well-formed internal-error envelope.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """High-level categories for response building errors."""

    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object explaining an internal-error envelope."""

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
