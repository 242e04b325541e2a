"""Error code constants for response building.

These codes are machine-readable identifiers attached to ``ErrorDetail``
values. They never reach the wire format; the serialized internal-error
envelope carries only a status and a human-readable message.
"""

# Validation
MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
INVALID_STATUS = "INVALID_STATUS"

# Internal
ENCODING_FAILURE = "ENCODING_FAILURE"
