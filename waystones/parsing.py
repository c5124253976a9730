"""Shared text helpers for raw configuration value normalization."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def raw_text(value: object) -> str | None:
    """Return the textual form of a raw input without trimming it.

    Booleans are lowered to `true`/`false` so that they read the same as
    their configuration-file spelling.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
