"""Report policy: whether an error should reach external error tracking."""

from __future__ import annotations

from .probe import probe


def should_report(error: object) -> bool:
    """Return whether ``error`` should be forwarded to error tracking.

    Errors we don't control carry no ``report`` marker and are reported. Only
    a present, falsy marker opts out. A marker with no usable truth value is
    ignored.
    """
    found = probe(error)
    if "report" not in found.known:
        return True
    try:
        return bool(found.known["report"])
    except Exception:
        return True
