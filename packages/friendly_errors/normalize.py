"""Exception normalization into display errors."""

from __future__ import annotations

from .probe import probe, to_text
from .types import DisplayError


def exception_to_error(exc: BaseException) -> DisplayError:
    """Normalize a Python exception into a ``DisplayError``.

    ``OSError`` codes become errno mnemonics (``ENOENT`` and friends) and the
    offending filename is kept as the ``path`` extra, so the result resolves
    to the same human-friendly text as the original exception. A traceback is
    only captured if ``exc`` has already been raised.
    """
    if isinstance(exc, DisplayError):
        return exc

    found = probe(exc)
    known = found.known
    return DisplayError(
        message=to_text(known.get("message", "")),
        description=known.get("description"),
        code=known.get("code"),
        stack=known.get("stack"),
        report=known.get("report"),
        extra=dict(found.extra),
    )
