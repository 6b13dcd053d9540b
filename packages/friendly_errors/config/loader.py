"""Deterministic settings resolution.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/friendly-errors/friendly-errors.yaml
4) Model defaults

Environment variable format:
- Prefix: ``FRIENDLY_ERRORS_``
- Nested keys: ``__`` separator
- Example: ``FRIENDLY_ERRORS_DISPLAY__DUMP_INDENT=4`` -> ``display.dump_indent = 4``
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import YamlConfigSettingsSource

from .models import DEFAULT_CONFIG_PATH, ENV_PREFIX, FriendlyErrorsSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> FriendlyErrorsSettings:
    """Resolve settings from explicit sources instead of ambient process state.

    Unlike constructing ``FriendlyErrorsSettings()`` directly, the caller
    controls the environment mapping and YAML path, which keeps resolution
    reproducible in tests and in the CLI.
    """
    resolved_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    file_data = YamlConfigSettingsSource(
        FriendlyErrorsSettings,
        yaml_file=resolved_path,
        yaml_file_encoding="utf-8",
    )()
    env_data = _load_env_config(
        environ=environ if environ is not None else os.environ,
        prefix=ENV_PREFIX,
    )

    merged = _merge_dicts(dict(file_data), env_data)
    merged = _merge_dicts(merged, cli_params or {})
    return FriendlyErrorsSettings.model_validate(merged)


def _load_env_config(*, environ: Mapping[str, str], prefix: str) -> dict[str, Any]:
    """Map prefixed environment variables into a nested mapping."""
    output: dict[str, Any] = {}
    for key, raw_value in environ.items():
        if not key.upper().startswith(prefix):
            continue
        path = [
            segment.strip().lower()
            for segment in key[len(prefix) :].split("__")
            if segment.strip()
        ]
        if not path:
            continue

        cursor = output
        for segment in path[:-1]:
            child = cursor.get(segment)
            if not isinstance(child, dict):
                child = {}
                cursor[segment] = child
            cursor = child
        cursor[path[-1]] = raw_value
    return output


def _merge_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge mappings, with ``override`` taking precedence."""
    result = dict(base)
    for key, override_value in override.items():
        base_value = result.get(key)
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = _merge_dicts(base_value, override_value)
            continue
        result[key] = override_value
    return result
