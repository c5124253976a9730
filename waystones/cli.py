"""Command-line interface for Waystones configuration values.

Responsibilities:
- Expose value kinds and canonical rendering to shell users.
- Validate ad-hoc `key:kind=value` assignments with configuration properties.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from typing import Annotated, Any

import typer

from .cli_rendering import echo_value_rows, exit_with_command_error
from .config import ConfigLoader, ConfigProperty, RuntimeSettings
from .errors import InvalidValueError, UnknownKindError
from .kinds import kind_label, kind_names, resolve_parser

app = typer.Typer(
    name="waystones",
    no_args_is_help=True,
    help="Waystones configuration value CLI.",
)


def _parse_assignment(assignment: str) -> tuple[str, str, str]:
    """Split a `key:kind=value` assignment into its parts."""

    target, separator, value = assignment.partition("=")
    key, kind_separator, kind = target.partition(":")
    if not separator or not kind_separator or not key.strip() or not kind.strip():
        raise ValueError(
            f"Malformed assignment `{assignment}`; expected `key:kind=value`."
        )
    return key.strip(), kind.strip(), value


@app.command("kinds")
def kinds_command() -> None:
    """List the built-in value kinds."""

    for name in kind_names():
        typer.echo(name)
    typer.echo("list[<kind>]")
    typer.echo("range[<min>..<max>]")


@app.command("parse", context_settings={"ignore_unknown_options": True})
def parse_command(
    kind: Annotated[str, typer.Argument(help="Value kind, e.g. `percentage` or `list[int]`.")],
    value: Annotated[str, typer.Argument(help="Raw value to parse.")],
) -> None:
    """Parse a raw value and print its canonical form."""

    try:
        parser = resolve_parser(kind)
    except UnknownKindError as exc:
        exit_with_command_error("parse", exc)

    parsed = parser.parse(value)
    if parsed is None:
        exit_with_command_error(
            "parse",
            InvalidValueError(kind=kind_label(parser), raw=value),
        )
    typer.echo(parser.render(parsed))


@app.command("check", context_settings={"ignore_unknown_options": True})
def check_command(
    assignments: Annotated[
        list[str],
        typer.Argument(help="Assignments in `key:kind=value` form."),
    ],
) -> None:
    """Resolve several values and print their canonical forms."""

    settings = RuntimeSettings.from_env()
    logger = settings.create_logger(sink=sys.stderr)

    properties: list[ConfigProperty[Any]] = []
    payload: dict[str, str] = {}
    try:
        for assignment in assignments:
            key, kind, value = _parse_assignment(assignment)
            if key in payload:
                raise ValueError(f"Key `{key}` is assigned more than once.")
            properties.append(ConfigProperty(key=key, parser=resolve_parser(kind), required=True))
            payload[key] = value
    except ValueError as exc:
        exit_with_command_error("check", exc)

    rendered: dict[str, str | None] = {}
    failures: list[InvalidValueError] = []
    for prop in properties:
        try:
            snapshot = ConfigLoader.from_mapping(
                [prop], {prop.key: payload[prop.key]}, logger=logger
            )
        except InvalidValueError as exc:
            failures.append(exc)
            continue
        rendered.update(snapshot.render())

    echo_value_rows(rendered)
    if failures:
        for failure in failures[:-1]:
            typer.secho(f"check failed: {failure.detail}", fg=typer.colors.RED, err=True)
        exit_with_command_error("check", failures[-1])


def main() -> None:
    """Run the Waystones CLI application."""

    app()
