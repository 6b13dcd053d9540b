"""Logging configuration for friendly-errors.

The library only emits DEBUG records through ``get_logger``. Resolution
details travel as ``extra=`` attributes named in ``fields.RECORD_FIELDS`` and
are emitted as top-level keys next to the bound context.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from . import fields
from .context import current_context, seed_context


def structured_fields(record: logging.LogRecord) -> dict[str, str]:
    """Return bound context plus the record's resolution fields."""
    payload = current_context()
    for name in fields.RECORD_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            payload[name] = str(value)
    return payload


class JsonFormatter(logging.Formatter):
    """One JSON object per line with core, context and resolution keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **structured_fields(record),
        }
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable lines with structured fields appended as key=value."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extra = structured_fields(record)
        if not extra:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in sorted(extra.items()))
        return f"{message} {suffix}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Install a single root handler writing to ``stream`` (stdout by default).

    Existing root handlers are replaced so repeated calls never duplicate
    emissions.
    """
    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    handler.setLevel(level.upper())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())

    seed_context(
        **{fields.SERVICE: service or None, fields.ENVIRONMENT: environment or None}
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
