"""Public API for friendly-errors configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    DisplaySettings,
    FriendlyErrorsSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DisplaySettings",
    "FriendlyErrorsSettings",
    "LoggingSettings",
    "load_settings",
]
