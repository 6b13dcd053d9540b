"""Typed configuration models for friendly-errors runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = (
    Path.home() / ".config" / "friendly-errors" / "friendly-errors.yaml"
)
ENV_PREFIX = "FRIENDLY_ERRORS_"


class LoggingSettings(BaseModel):
    """Structured logging configuration for the CLI and host applications."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "friendly-errors"
    environment: str = "dev"


class DisplaySettings(BaseModel):
    """Fallback strings and dump formatting used by the resolver."""

    fallback_title: str = "An error occurred"
    code_title_template: str = "Error code: {code}"
    dump_indent: int = Field(default=2, ge=0)

    @field_validator("fallback_title")
    @classmethod
    def _reject_blank_fallback(cls, value: str) -> str:
        """The last-resort title must itself be presentable."""
        if not value.strip():
            raise ValueError("display.fallback_title must not be blank")
        return value

    @field_validator("code_title_template")
    @classmethod
    def _require_code_placeholder(cls, value: str) -> str:
        """Reject templates that would drop the error code."""
        if "{code}" not in value:
            raise ValueError("display.code_title_template must contain '{code}'")
        try:
            value.format(code="")
        except (IndexError, KeyError) as exc:
            raise ValueError(
                f"display.code_title_template has an unknown placeholder: {exc}"
            ) from exc
        return value


class FriendlyErrorsSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )
