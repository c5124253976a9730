"""Structured logging for configuration value resolution.

Responsibilities:
- Emit concise, deterministic key-level resolution logs through `loguru`.
- Keep raw values of secret keys out of log output.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_REDACTED = "<redacted>"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character
        if character.isalnum() or character in {"-", "_", ".", ":", "/", "@", "%", "<", ">"}
        else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class ConfigEventLogger:
    """Emit deterministic logs for configuration values falling back or failing."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stdout
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level.upper(), colorize=False)

    def _emit(self, level: str, event: str, key: str, **context: object) -> None:
        """Emit one structured configuration log line."""

        line = f"[config] level={level} key={key} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_missing(self, key: str, default: str) -> None:
        """Emit an absent-value event resolved by the property default."""

        self._emit("DEBUG", "missing", key, default=default)

    def log_fallback(
        self, key: str, kind: str, raw: object, default: str, secret: bool = False
    ) -> None:
        """Emit an invalid-value event resolved by the property default."""

        shown = _REDACTED if secret else raw
        self._emit("WARNING", "fallback", key, default=default, kind=kind, raw=shown)

    def log_invalid(self, key: str, kind: str, raw: object, secret: bool = False) -> None:
        """Emit a rejected required-value event."""

        shown = _REDACTED if secret else raw
        self._emit("ERROR", "invalid", key, kind=kind, raw=shown)
