"""Parser contract shared by every configuration value kind.

Responsibilities:
- Define the `parse`/`render` pair that all value parsers implement.
- Provide the default textual rendering inherited by concrete parsers.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")


class Parser(Protocol[T]):
    """Protocol for converting raw configuration input into typed values.

    Concrete parsers subclass this protocol explicitly to inherit the default
    `render`. Parsing never raises: malformed input is reported as `None`.
    """

    def parse(self, value: object) -> T | None:
        """Parse a raw value, returning `None` when it is malformed."""

    def render(self, value: T) -> str:
        """Render a parsed value in its canonical textual form."""

        return str(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
