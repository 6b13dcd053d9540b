"""Title and description resolution for arbitrary error values.

Both resolvers walk a fixed precedence chain and always return a string:
code-specific human-friendly text outranks raw messages, which outrank a bare
code, which outranks the generic fallback.
"""

from __future__ import annotations

import json
import pprint
from typing import Any, Mapping

from .codes import lookup
from .config import DisplaySettings
from .logging import fields, get_logger
from .probe import ErrorFields, is_blank, probe, to_text
from .types import ErrorShape

_LOGGER = get_logger(__name__)
_DEFAULT_DISPLAY = DisplaySettings()


def get_title(error: object, *, settings: DisplaySettings | None = None) -> str:
    """Return the best available title for ``error``."""
    display = settings or _DEFAULT_DISPLAY
    found = probe(error)

    if found.shape is ErrorShape.SCALAR:
        return to_text(error)

    generate = lookup(found.code, "title")
    if generate is not None:
        _log_step(found, "code_title")
        return generate(error)

    message = found.get("message")
    if not is_blank(message):
        return to_text(message)

    code = found.known.get("code")
    if not is_blank(code):
        _log_step(found, "bare_code")
        return display.code_title_template.format(code=to_text(code))

    _log_step(found, "fallback")
    return display.fallback_title


def get_description(error: object, *, settings: DisplaySettings | None = None) -> str:
    """Return the best available description for ``error``.

    Explicit descriptions always win. The last resort is a JSON dump of the
    value's fields, so nothing the caller attached is lost.
    """
    display = settings or _DEFAULT_DISPLAY
    found = probe(error)

    if found.shape in (ErrorShape.SCALAR, ErrorShape.ABSENT):
        return ""

    description = found.known.get("description")
    if not is_blank(description):
        return to_text(description)

    generate = lookup(found.code, "description")
    if generate is not None:
        _log_step(found, "code_description")
        return generate(error)

    stack = found.known.get("stack")
    if not is_blank(stack):
        return to_text(stack)

    if not found.enumerable:
        return ""

    _log_step(found, "field_dump")
    return _dump_fields(found.enumerable, indent=display.dump_indent)


def _dump_fields(enumerable: Mapping[str, Any], *, indent: int) -> str:
    """Pretty-print fields as JSON, or as a Python literal when JSON can't hold them."""
    try:
        return json.dumps(_text_keys(enumerable, ()), indent=indent, default=to_text)
    except (TypeError, ValueError, RecursionError):
        return pprint.pformat(dict(enumerable), indent=1, width=80)


def _text_keys(value: Any, parents: tuple[int, ...]) -> Any:
    """Stringify mapping keys at every depth; cycles raise ``ValueError``."""
    if not isinstance(value, (Mapping, list, tuple)):
        return value
    if id(value) in parents:
        raise ValueError("circular reference in error fields")
    inner = (*parents, id(value))
    if isinstance(value, Mapping):
        return {to_text(key): _text_keys(item, inner) for key, item in value.items()}
    return [_text_keys(item, inner) for item in value]


def _log_step(found: ErrorFields, step: str) -> None:
    _LOGGER.debug(
        "resolved error text",
        extra={
            fields.RESOLUTION_STEP: step,
            fields.ERROR_SHAPE: found.shape.value,
            fields.ERROR_CODE: found.code,
        },
    )
