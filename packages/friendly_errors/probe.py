"""Shape classification and field extraction for arbitrary error values.

Everything the resolver, the report policy and the codec know about an input
comes through ``probe``. It never raises, whatever it is handed.
"""

from __future__ import annotations

import errno
import traceback
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .types import KNOWN_FIELDS, DisplayError, ErrorShape


@dataclass(frozen=True, slots=True)
class ErrorFields:
    """Known and extra fields read from one error value.

    ``known`` only holds fields that are present. ``enumerable`` is what a
    field dump shows: every record key, or an exception's fields minus its
    message.
    """

    shape: ErrorShape
    known: Mapping[str, Any] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)
    enumerable: Mapping[str, Any] = field(default_factory=dict)

    def has(self, name: str) -> bool:
        """Return whether a known or extra field is present."""
        return name in self.known or name in self.extra

    def get(self, name: str, default: Any = None) -> Any:
        """Return a known or extra field value."""
        if name in self.known:
            return self.known[name]
        return self.extra.get(name, default)

    @property
    def code(self) -> str | None:
        """Return the code when it is usable as a registry key."""
        value = self.known.get("code")
        return value if isinstance(value, str) else None


def classify(value: object) -> ErrorShape:
    """Classify an arbitrary value before any field access."""
    if value is None:
        return ErrorShape.ABSENT
    if isinstance(value, BaseException):
        return ErrorShape.STRUCTURED
    if isinstance(value, Mapping):
        return ErrorShape.RECORD
    return ErrorShape.SCALAR


def probe(value: object) -> ErrorFields:
    """Read display fields from ``value`` according to its shape."""
    shape = classify(value)
    if shape is ErrorShape.RECORD:
        return _probe_record(value)  # type: ignore[arg-type]
    if shape is ErrorShape.STRUCTURED:
        if isinstance(value, DisplayError):
            return _probe_display_error(value)
        return _probe_exception(value)  # type: ignore[arg-type]
    return ErrorFields(shape=shape)


def is_blank(value: object) -> bool:
    """Return whether ``value`` is missing or only whitespace."""
    if value is None:
        return True
    return not to_text(value).strip()


def to_text(value: object) -> str:
    """Convert any value to text, even when its ``__str__`` is broken."""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _probe_record(record: Mapping[Any, Any]) -> ErrorFields:
    items = {to_text(key): item for key, item in record.items()}
    known = {name: items[name] for name in KNOWN_FIELDS if name in items}
    extra = {key: item for key, item in items.items() if key not in KNOWN_FIELDS}
    return ErrorFields(
        shape=ErrorShape.RECORD, known=known, extra=extra, enumerable=items
    )


def _probe_display_error(error: DisplayError) -> ErrorFields:
    known: dict[str, Any] = {"message": error.message}
    for name in ("description", "stack", "report", "code"):
        item = _read_attr(error, name)
        if item is not None:
            known[name] = item
    if "stack" not in known and error.__traceback__ is not None:
        known["stack"] = _format_traceback(error)
    return _structured(known, dict(error.extra))


def _probe_exception(exc: BaseException) -> ErrorFields:
    message = _read_attr(exc, "message")
    known: dict[str, Any] = {"message": message if message is not None else to_text(exc)}
    for name in ("description", "stack", "report", "code"):
        item = _read_attr(exc, name)
        if item is not None:
            known[name] = item

    extra = {
        key: item
        for key, item in vars(exc).items()
        if not key.startswith("_") and key not in KNOWN_FIELDS
    }

    if isinstance(exc, OSError):
        if (
            not isinstance(known.get("code"), str)
            and isinstance(exc.errno, int)
            and exc.errno in errno.errorcode
        ):
            known["code"] = errno.errorcode[exc.errno]
        if exc.filename is not None:
            extra.setdefault("path", exc.filename)

    if "stack" not in known and exc.__traceback__ is not None:
        known["stack"] = _format_traceback(exc)
    return _structured(known, extra)


def _read_attr(exc: BaseException, name: str) -> Any:
    """Read one attribute; a missing or failing attribute counts as absent."""
    try:
        return getattr(exc, name, None)
    except Exception:
        return None


def _structured(known: dict[str, Any], extra: dict[str, Any]) -> ErrorFields:
    enumerable = {name: item for name, item in known.items() if name != "message"}
    enumerable.update(extra)
    return ErrorFields(
        shape=ErrorShape.STRUCTURED, known=known, extra=extra, enumerable=enumerable
    )


def _format_traceback(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
