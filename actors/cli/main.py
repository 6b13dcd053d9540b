"""friendly-errors command-line actor implemented with Typer."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from packages.friendly_errors import (
    HUMAN_FRIENDLY,
    InvalidErrorTitleError,
    create_error,
    create_user_error,
    get_description,
    get_title,
    should_report,
    to_json,
)
from packages.friendly_errors.config import (
    DisplaySettings,
    FriendlyErrorsSettings,
    load_settings,
)
from packages.friendly_errors.logging import configure_logging, get_logger, log_context
from packages.friendly_errors.logging import fields as log_fields

SUCCESS_EXIT_CODE = 0
INPUT_ERROR_EXIT_CODE = 2

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class CliConfig:
    """Global CLI runtime options shared by every command."""

    as_json: bool
    settings: FriendlyErrorsSettings

    @property
    def display(self) -> DisplaySettings:
        """Return resolver display settings."""
        return self.settings.display


def _emit_output(data: Any, as_json: bool) -> None:
    """Render command output in requested format."""
    if as_json:
        typer.echo(json.dumps(data, sort_keys=True, separators=(",", ":"), default=str))
        return
    typer.echo(_render_human(data))


def _emit_error(message: str, as_json: bool) -> None:
    """Render input errors to stderr."""
    if as_json:
        typer.echo(json.dumps({"error": message}), err=True)
        return
    typer.echo(f"error: {message}", err=True)


def _render_human(data: Any) -> str:
    """Return human-oriented rendering for command results."""
    if isinstance(data, list):
        return "\n\n".join(_render_human(item) for item in data)
    if not isinstance(data, dict):
        return str(data)

    lines: list[str] = []
    for key, value in data.items():
        if value is None or value == "":
            continue
        label = key.replace("_", " ").capitalize()
        if isinstance(value, bool):
            value = "yes" if value else "no"
        text = str(value)
        if "\n" in text:
            lines.append(f"{label}:")
            lines.extend(f"  {line}" for line in text.splitlines())
        else:
            lines.append(f"{label}: {text}")
    return "\n".join(lines)


def _fail(cfg: CliConfig, message: str) -> typer.Exit:
    """Report one input error and build the matching exit."""
    _emit_error(message, cfg.as_json)
    return typer.Exit(code=INPUT_ERROR_EXIT_CODE)


def _require_config(ctx: typer.Context) -> CliConfig:
    """Return typed CLI config from Typer context."""
    cfg = ctx.obj
    if not isinstance(cfg, CliConfig):
        raise typer.BadParameter("CLI context was not initialized")
    return cfg


def _parse_value(raw: str) -> Any:
    """Parse a JSON document, keeping bare words as plain strings."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        if raw.lstrip().startswith(("{", "[")):
            raise
        return raw


app = typer.Typer(no_args_is_help=True, help="Human-friendly error display helpers")


@app.callback()
def main(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
    config: Path | None = typer.Option(None, "--config", help="YAML settings file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Override log level"),
) -> None:
    """Resolve global options, settings and logging.

    Logs go to stderr so ``--json`` output on stdout stays machine-readable.
    """
    cli_params: dict[str, Any] = {}
    if log_level is not None:
        cli_params["logging"] = {"level": log_level.upper()}

    try:
        settings = load_settings(cli_params=cli_params, config_path=config)
    except ValidationError as exc:
        _emit_error(f"invalid settings: {exc}", as_json)
        raise typer.Exit(code=INPUT_ERROR_EXIT_CODE) from exc

    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
        stream=sys.stderr,
    )
    ctx.obj = CliConfig(as_json=as_json, settings=settings)


@app.command("describe")
def describe_command(
    ctx: typer.Context,
    record: str | None = typer.Argument(
        None, help="Error value as JSON (object or scalar)"
    ),
    message: str | None = typer.Option(None, help="Error message"),
    code: str | None = typer.Option(None, help="Error code, e.g. ENOENT"),
    description: str | None = typer.Option(None, help="Error description"),
    path: str | None = typer.Option(None, help="Offending filesystem path"),
    no_report: bool = typer.Option(
        False, "--no-report", help="Mark the error as not reportable"
    ),
) -> None:
    """Show the title, description and report decision for an error."""
    cfg = _require_config(ctx)
    with log_context(**{log_fields.COMMAND: "describe"}):
        value: Any = {}
        if record is not None:
            try:
                value = _parse_value(record)
            except json.JSONDecodeError as exc:
                raise _fail(cfg, f"invalid error record: {exc}") from exc

        overrides = {
            key: item
            for key, item in (
                ("message", message),
                ("code", code),
                ("description", description),
                ("path", path),
            )
            if item is not None
        }
        if no_report:
            overrides["report"] = False
        if overrides:
            if not isinstance(value, dict):
                raise _fail(cfg, "options can only extend a JSON object record")
            value = {**value, **overrides}

        _LOGGER.debug("describing error value of type %s", type(value).__name__)
        _emit_output(
            {
                "title": get_title(value, settings=cfg.display),
                "description": get_description(value, settings=cfg.display),
                "report": should_report(value),
            },
            cfg.as_json,
        )
    raise typer.Exit(code=SUCCESS_EXIT_CODE)


@app.command("codes")
def codes_command(ctx: typer.Context) -> None:
    """List the error codes with human-friendly translations."""
    cfg = _require_config(ctx)
    entries = [
        {
            "code": code,
            "title": entry.title({"code": code}),
            "description": entry.description({"code": code}),
        }
        for code, entry in sorted(HUMAN_FRIENDLY.items())
    ]
    _emit_output(entries, cfg.as_json)
    raise typer.Exit(code=SUCCESS_EXIT_CODE)


@app.command("create")
def create_command(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Error title"),
    description: str | None = typer.Argument(None, help="Error description"),
    code: str | None = typer.Option(None, help="Error code, e.g. EACCES"),
    user: bool = typer.Option(
        False, "--user", help="Create a user error, which is never reported"
    ),
) -> None:
    """Build an error and print its serialized record."""
    cfg = _require_config(ctx)
    with log_context(**{log_fields.COMMAND: "create"}):
        try:
            if user:
                error = create_user_error(title, description)
            else:
                error = create_error(title, description, code=code)
        except InvalidErrorTitleError as exc:
            raise _fail(cfg, str(exc)) from exc
        if user and code is not None:
            error.code = code
        _emit_output(dict(to_json(error)), cfg.as_json)
    raise typer.Exit(code=SUCCESS_EXIT_CODE)


if __name__ == "__main__":
    app()
