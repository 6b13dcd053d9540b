"""Conversion between display errors and plain serializable records."""

from __future__ import annotations

from typing import Any, Mapping

from .logging import get_logger
from .probe import probe, to_text
from .types import KNOWN_FIELDS, DisplayError, SerializedError

_LOGGER = get_logger(__name__)


def to_json(error: object) -> SerializedError:
    """Project the five known fields of ``error`` into a plain record.

    Absent fields are left out rather than defaulted, and nothing is
    validated.
    """
    found = probe(error)
    record: dict[str, Any] = {
        name: found.known[name] for name in KNOWN_FIELDS if name in found.known
    }
    return record  # type: ignore[return-value]


def from_json(record: Mapping[str, Any]) -> DisplayError:
    """Rebuild a ``DisplayError`` from a serialized record.

    Every record key is kept: the known fields are assigned directly and the
    rest land in ``extra`` as a shallow copy.
    """
    message = record.get("message")
    error = DisplayError(
        message=to_text(message) if message is not None else "",
        description=record.get("description"),
        code=record.get("code"),
        stack=record.get("stack"),
        report=record.get("report"),
        extra={key: item for key, item in record.items() if key not in KNOWN_FIELDS},
    )
    _LOGGER.debug("restored error from record keys=%s", sorted(map(str, record)))
    return error
