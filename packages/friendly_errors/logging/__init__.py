"""Public logging API for friendly-errors."""

from .config import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
    structured_fields,
)
from .context import current_context, log_context

__all__ = [
    "configure_logging",
    "current_context",
    "get_logger",
    "JsonFormatter",
    "log_context",
    "PlainFormatter",
    "structured_fields",
]
