"""Public friendly-errors API.

Turns arbitrary error values into a presentable title and description,
translates well-known OS error codes into human-friendly text, and decides
whether an error should be escalated to external error tracking.
"""

from . import codes
from .codec import from_json, to_json
from .codes import HUMAN_FRIENDLY, CodeEntry, lookup
from .factories import create_error, create_user_error
from .normalize import exception_to_error
from .policy import should_report
from .probe import ErrorFields, classify, is_blank, probe
from .resolve import get_description, get_title
from .types import (
    DisplayError,
    ErrorShape,
    InvalidErrorTitleError,
    SerializedError,
)

__all__ = [
    "CodeEntry",
    "DisplayError",
    "ErrorFields",
    "ErrorShape",
    "HUMAN_FRIENDLY",
    "InvalidErrorTitleError",
    "SerializedError",
    "classify",
    "codes",
    "create_error",
    "create_user_error",
    "exception_to_error",
    "from_json",
    "get_description",
    "get_title",
    "is_blank",
    "lookup",
    "probe",
    "should_report",
    "to_json",
]
