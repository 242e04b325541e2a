"""Canonical logging field names for structured response logs."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"
EVENT = "event"

# Record attribute carrying structured fields passed through ``extra=``.
EXTRA_FIELDS = "extra_fields"

# Internal-error fallback fields.
ERROR_CODE = "error_code"
ERROR_CATEGORY = "error_category"
METADATA = "metadata"
INTERNAL_ERROR_FALLBACK_EVENT = "internal_error_fallback"

# Service-level fields stamped on every record by ``configure_logging``.
SERVICE = "service"
ENVIRONMENT = "environment"
