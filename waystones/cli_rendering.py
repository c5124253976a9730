"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and resolved value rows.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from .errors import InvalidValueError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, InvalidValueError):
        typer.secho(f"{command_name} failed: {exc.detail}", fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_value_rows(rendered: Mapping[str, str | None]) -> None:
    """Print `key = value` rows in declaration order."""

    for key, value in rendered.items():
        typer.echo(f"{key} = {value if value is not None else '<unset>'}")
