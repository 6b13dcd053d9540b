"""Canonical error types for friendly-errors.

``DisplayError`` is the in-memory shape produced by the factories and the
codec. The resolver accepts far more than ``DisplayError`` though, so shapes
are described by ``ErrorShape`` and read through ``probe.probe``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, TypedDict

KNOWN_FIELDS: tuple[str, ...] = ("message", "description", "stack", "report", "code")

Property = Literal["title", "description"]


class ErrorShape(str, Enum):
    """Coarse classification of an arbitrary error value."""

    STRUCTURED = "structured"
    RECORD = "record"
    SCALAR = "scalar"
    ABSENT = "absent"


@dataclass(eq=False)
class DisplayError(Exception):
    """Error carrying display fields alongside arbitrary extras.

    ``None`` on any optional field means the field is absent. In particular
    ``report=None`` is not a falsy marker: the error is still reported.
    """

    message: str
    description: str | None = None
    code: str | None = None
    stack: str | None = None
    report: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        """Return the error message."""
        return self.message


class InvalidErrorTitleError(ValueError):
    """Raised when an error is constructed with a blank title."""

    def __init__(self, title: object) -> None:
        super().__init__(f"Invalid error title: {title!r}")
        self.title = title


class SerializedError(TypedDict, total=False):
    """Plain record form of an error; absent fields are omitted."""

    message: str
    description: str
    stack: str
    report: bool
    code: str
