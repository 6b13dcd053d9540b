"""Tests for title and description resolution."""

from __future__ import annotations

import errno
import json

import pytest

from packages.friendly_errors import (
    DisplayError,
    create_error,
    get_description,
    get_title,
    should_report,
)
from packages.friendly_errors.config import DisplaySettings


def test_title_prefers_code_translation_over_message() -> None:
    """Known codes should outrank raw messages."""
    error = {"code": "ENOENT", "path": "/tmp/x", "message": "ENOENT: open '/tmp/x'"}

    assert get_title(error) == "No such file or directory: /tmp/x"


def test_title_uses_message_when_code_is_unknown() -> None:
    """A non-blank message should be returned verbatim."""
    assert get_title({"message": "boom", "code": "XYZ"}) == "boom"
    assert get_title(DisplayError(message="  padded  ")) == "  padded  "


def test_title_falls_back_to_bare_code() -> None:
    """Unknown codes without a message should still be shown."""
    assert get_title({"code": "XYZ"}) == "Error code: XYZ"
    assert get_title({"code": "XYZ", "message": "   "}) == "Error code: XYZ"


@pytest.mark.parametrize("value", [{}, None, {"code": "  "}, DisplayError(message="")])
def test_title_generic_fallback(value: object) -> None:
    """Values with nothing presentable should get the generic title."""
    assert get_title(value) == "An error occurred"


@pytest.mark.parametrize(("value", "expected"), [(42, "42"), ("boom", "boom"), (1.5, "1.5")])
def test_title_of_scalar_is_its_string_form(value: object, expected: str) -> None:
    """Scalars thrown as errors should be shown as text."""
    assert get_title(value) == expected


def test_title_of_known_code() -> None:
    """ENOMEM should translate to the out-of-memory title."""
    assert get_title({"code": "ENOMEM"}) == "Your system ran out of memory"


def test_title_of_oserror_uses_errno_translation() -> None:
    """Native OSError values should get the same friendly titles."""
    error = PermissionError(errno.EACCES, "Permission denied", "/etc/shadow")

    assert get_title(error) == "You don't have access to this resource"


def test_title_respects_display_settings() -> None:
    """Fallback strings should come from display settings."""
    settings = DisplaySettings(fallback_title="Oops", code_title_template="Code {code}")

    assert get_title({}, settings=settings) == "Oops"
    assert get_title({"code": "XYZ"}, settings=settings) == "Code XYZ"


def test_description_explicit_description_wins() -> None:
    """Human-authored descriptions should outrank code translations."""
    error = create_error("Failed", "Check the cable", code="EACCES")

    assert get_description(error) == "Check the cable"


def test_description_blank_falls_through_to_code() -> None:
    """Blank descriptions should not hide the code description."""
    value = {"description": "  ", "code": "EACCES"}

    assert get_description(value) == "Please ensure you have to necessary permissions for this task"


def test_description_uses_stack_when_nothing_better() -> None:
    """An attached stack is the best remaining detail."""
    assert get_description({"stack": "at main.py:1"}) == "at main.py:1"

    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        assert "RuntimeError: boom" in get_description(exc)


@pytest.mark.parametrize("value", [42, "boom", None, {}, DisplayError(message="only message")])
def test_description_empty_when_nothing_to_show(value: object) -> None:
    """Scalars, absent values and field-less errors have no description."""
    assert get_description(value) == ""


def test_description_dumps_fields_as_last_resort() -> None:
    """Remaining fields should be dumped as pretty-printed JSON."""
    value = {"message": "boom", "code": "XYZ", "attempt": 3}

    description = get_description(value)

    assert json.loads(description) == value
    assert description.startswith("{\n  ")


def test_description_dump_handles_unserializable_values() -> None:
    """Arbitrary extra values should not break the field dump."""
    error = DisplayError(message="boom", extra={"when": object, "tags": {1, 2}})

    dumped = json.loads(get_description(error))

    assert set(dumped) == {"when", "tags"}
    assert dumped["when"] == str(object)


def test_description_dump_indent_from_settings() -> None:
    """Dump indentation should follow display settings."""
    settings = DisplaySettings(dump_indent=4)

    assert get_description({"code": 1}, settings=settings) == '{\n    "code": 1\n}'


def test_resolvers_tolerate_failing_exception_attributes() -> None:
    """Exceptions with raising properties should still resolve."""

    class LazyError(Exception):
        @property
        def code(self) -> str:
            raise RuntimeError("code not loaded")

    error = LazyError("lazy")

    assert get_title(error) == "lazy"
    assert get_description(error) == ""
    assert should_report(error) is True


def test_title_of_oserror_with_non_integer_errno() -> None:
    """An unhashable errno should fall back to the message."""
    assert get_title(OSError(["x"], "bad")) == "[Errno ['x']] bad"


def test_description_dump_stringifies_nested_keys() -> None:
    """Non-string keys at any depth should be dumped as text."""
    description = get_description({"meta": {(1, 2): 3, 4: [{None: "x"}]}})

    assert json.loads(description) == {"meta": {"(1, 2)": 3, "4": [{"None": "x"}]}}


def test_description_dump_of_self_referencing_record() -> None:
    """Cyclic records should still produce a description."""
    record: dict[str, object] = {"message": "loop"}
    record["self"] = record

    description = get_description(record)

    assert "'message': 'loop'" in description
    assert "Recursion" in description
