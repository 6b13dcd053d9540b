"""Scoped logging context built on ``contextvars``.

Bound values are merged into every structured log line emitted while they
are in scope.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar(
    "friendly_errors_log_context", default=MappingProxyType({})
)


def current_context() -> dict[str, str]:
    """Return a copy of the values bound in the current scope."""
    return dict(_LOG_CONTEXT.get())


def seed_context(**values: object) -> None:
    """Bind values for the rest of the current context (process startup)."""
    _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **_as_text(values)})


@contextmanager
def log_context(**values: object) -> Iterator[None]:
    """Bind values for the duration of a block; ``None`` values are dropped."""
    token = _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **_as_text(values)})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def _as_text(values: Mapping[str, object]) -> dict[str, str]:
    return {key: str(value) for key, value in values.items() if value is not None}
