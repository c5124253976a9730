"""Domain exceptions for configuration value resolution and CLI diagnostics."""

from __future__ import annotations


class UnknownKindError(ValueError):
    """Raised when a value kind expression does not name a known parser."""

    def __init__(self, kind: str) -> None:
        """Initialize an unknown-kind error for the given expression."""

        super().__init__(f"Unknown value kind `{kind}`.")
        self.kind = kind


class InvalidValueError(ValueError):
    """Raised when a value that must be present cannot be parsed."""

    def __init__(
        self,
        *,
        kind: str,
        raw: str | None,
        key: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize an invalid value error, optionally scoped to a key."""

        if raw is None:
            subject = f"`{key}`" if key is not None else "Value"
            detail = f"{subject} requires a {kind} value."
        elif key is None:
            detail = f"Invalid {kind} value: {raw}"
        else:
            detail = f"Invalid {kind} value for `{key}`: {raw}"
        super().__init__(detail)
        self.key = key
        self.kind = kind
        self.raw = raw
        self.detail = detail
        self.hint = hint
