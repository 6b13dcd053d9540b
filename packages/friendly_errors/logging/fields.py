"""Canonical logging field names for friendly-errors log records."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Resolution fields, passed per record through ``extra=``.
ERROR_SHAPE = "error_shape"
ERROR_CODE = "error_code"
RESOLUTION_STEP = "resolution_step"

# CLI invocation fields.
COMMAND = "command"

# Process-wide fields seeded by ``configure_logging``.
SERVICE = "service"
ENVIRONMENT = "environment"

RECORD_FIELDS: tuple[str, ...] = (ERROR_SHAPE, ERROR_CODE, RESOLUTION_STEP)
