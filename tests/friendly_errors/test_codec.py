"""Tests for serializing display errors to plain records and back."""

from __future__ import annotations

import errno

import pytest

from packages.friendly_errors import (
    DisplayError,
    create_error,
    create_user_error,
    from_json,
    probe,
    should_report,
    to_json,
)

_FIELDS = ("message", "description", "stack", "report", "code")


def _observable(error: object) -> dict[str, object]:
    known = probe(error).known
    return {name: known.get(name) for name in _FIELDS if name in known}


def test_to_json_projects_only_known_fields() -> None:
    """Extra fields should not be serialized."""
    error = DisplayError(
        message="boom",
        description="details",
        code="EPERM",
        stack="at x",
        report=False,
        extra={"path": "/tmp/x"},
    )

    assert to_json(error) == {
        "message": "boom",
        "description": "details",
        "stack": "at x",
        "report": False,
        "code": "EPERM",
    }


def test_to_json_omits_absent_fields() -> None:
    """Missing fields should be absent rather than defaulted."""
    assert to_json(create_error("Foo")) == {"message": "Foo"}


def test_to_json_of_record_is_a_projection() -> None:
    """Plain records should be projected without validation."""
    assert to_json({"message": 1, "other": True, "report": None}) == {
        "message": 1,
        "report": None,
    }


@pytest.mark.parametrize(
    "error",
    [
        create_error("Foo"),
        create_error("Foo", "Bar", code="ENOENT"),
        create_user_error("T", "D"),
        DisplayError(message="m", stack="trace", report=True, code="X"),
    ],
)
def test_round_trip_preserves_observable_fields(error: DisplayError) -> None:
    """from_json(to_json(e)) should keep every observable field, absence included."""
    restored = from_json(to_json(error))

    assert isinstance(restored, DisplayError)
    assert _observable(restored) == _observable(error)
    assert should_report(restored) is should_report(error)


def test_round_trip_keeps_stack_of_raised_exception() -> None:
    """The traceback text of a raised error should survive serialization."""
    try:
        raise create_error("Foo")
    except DisplayError as exc:
        record = to_json(exc)

    restored = from_json(record)

    assert restored.stack == record["stack"]
    assert "DisplayError" in restored.stack


def test_round_trip_of_native_oserror() -> None:
    """Native OSError codes should be carried over as mnemonics."""
    record = to_json(FileNotFoundError(errno.ENOENT, "No such file", "/tmp/x"))

    assert record["code"] == "ENOENT"
    assert from_json(record).code == "ENOENT"


def test_from_json_keeps_unknown_keys_as_extra() -> None:
    """Unknown record keys should be merged shallowly into extra fields."""
    payload = {"retries": [1, 2]}
    record = {"message": "boom", "path": "/tmp/x", "payload": payload}

    error = from_json(record)

    assert error.message == "boom"
    assert error.extra == {"path": "/tmp/x", "payload": payload}
    assert error.extra["payload"] is payload


def test_from_json_without_message() -> None:
    """Records without a message should rebuild an error with an empty message."""
    error = from_json({"code": "EPERM"})

    assert error.message == ""
    assert error.code == "EPERM"


def test_round_trip_collapses_none_report_marker_to_absent() -> None:
    """A present-but-None marker comes back absent, so the error is reported again."""
    record = {"message": "boom", "report": None}

    restored = from_json(to_json(record))

    assert should_report(record) is False
    assert restored.report is None
    assert "report" not in to_json(restored)
    assert should_report(restored) is True
