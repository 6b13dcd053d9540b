"""Factory helpers for creating display errors."""

from __future__ import annotations

from typing import Any

from .logging import get_logger
from .probe import is_blank, to_text
from .types import DisplayError, InvalidErrorTitleError

_LOGGER = get_logger(__name__)


def create_error(
    title: str,
    description: str | None = None,
    *,
    report: bool | None = None,
    code: str | None = None,
    **options: Any,
) -> DisplayError:
    """Create an error whose message is ``title``.

    Only an explicit falsy ``report`` marks the error as not reportable;
    leaving it unset keeps the report-by-default behavior. Unrecognized
    options are ignored.
    """
    if is_blank(title):
        _LOGGER.debug("rejected blank error title: %r", title)
        raise InvalidErrorTitleError(title)
    if options:
        _LOGGER.debug("ignoring unknown error options: %s", sorted(options))

    return DisplayError(
        message=to_text(title),
        description=description,
        code=code,
        report=False if report is not None and not report else None,
    )


def create_user_error(title: str, description: str | None = None) -> DisplayError:
    """Create an error caused by user action, which is never reported."""
    return create_error(title, description, report=False)
