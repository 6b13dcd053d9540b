"""Human-friendly translations for well-known error codes.

Codes are the POSIX errno mnemonics that OS-level failures carry. Each entry
pairs a title generator with a description generator; both take the
offending error value and must return a string for any input.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .probe import is_blank, probe, to_text

ENOENT = "ENOENT"
EPERM = "EPERM"
EACCES = "EACCES"
ENOMEM = "ENOMEM"

Generator = Callable[[Any], str]


@dataclass(frozen=True, slots=True)
class CodeEntry:
    """Title and description generators for one code."""

    title: Generator
    description: Generator


def _constant(text: str) -> Generator:
    def generate(_error: Any) -> str:
        return text

    return generate


def _missing_path_title(error: Any) -> str:
    path = probe(error).get("path")
    if is_blank(path):
        return "No such file or directory"
    return f"No such file or directory: {to_text(path)}"


_PERMISSIONS_DESCRIPTION = "Please ensure you have to necessary permissions for this task"

HUMAN_FRIENDLY: Mapping[str, CodeEntry] = MappingProxyType(
    {
        ENOENT: CodeEntry(
            title=_missing_path_title,
            description=_constant("The file you're trying to access doesn't exist"),
        ),
        EPERM: CodeEntry(
            title=_constant("You're not authorized to perform this operation"),
            description=_constant(_PERMISSIONS_DESCRIPTION),
        ),
        EACCES: CodeEntry(
            title=_constant("You don't have access to this resource"),
            description=_constant(_PERMISSIONS_DESCRIPTION),
        ),
        ENOMEM: CodeEntry(
            title=_constant("Your system ran out of memory"),
            description=_constant(
                "Make sure your system has enough available memory for this task"
            ),
        ),
    }
)


def lookup(code: object, prop: object) -> Generator | None:
    """Return the generator for ``code``/``prop`` or ``None`` when unknown."""
    if not isinstance(code, str) or prop not in ("title", "description"):
        return None
    entry = HUMAN_FRIENDLY.get(code)
    if entry is None:
        return None
    return entry.title if prop == "title" else entry.description
