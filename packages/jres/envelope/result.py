"""Build result pairing an envelope with the errors that shaped it."""

from __future__ import annotations

from dataclasses import dataclass, field

from packages.jres.errors import ErrorDetail

from .envelope import ResponseEnvelope


@dataclass(frozen=True)
class BuildResult:
    """Outcome of ``ResponseBuilder.build``.

    ``envelope`` is always present. When ``errors`` is non-empty it is the
    internal-error envelope substituted for the caller's response.
    """

    envelope: ResponseEnvelope
    errors: list[ErrorDetail] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when no errors are present."""
        return len(self.errors) == 0

    @property
    def is_internal_error(self) -> bool:
        """Return True when the envelope is a substituted internal error."""
        return not self.ok
