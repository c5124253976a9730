"""Parsers for enumerations and homogeneous lists.

Key types:
- `EnumParser`: case-insensitive member lookup by name.
- `ListParser`: combinator delegating each element to an inner parser.
"""

from __future__ import annotations

from enum import Enum
import re
from typing import TypeVar

from ..parsing import raw_text
from .base import Parser, T

E = TypeVar("E", bound=Enum)

_LIST_SEPARATOR_PATTERN = re.compile(r"[\s,]+")


class EnumParser(Parser[E]):
    """Look up enum members by name, ignoring case."""

    def __init__(self, enum_type: type[E]) -> None:
        """Initialize the parser for a fixed enum type."""

        self.enum_type = enum_type

    def parse(self, value: object) -> E | None:
        if isinstance(value, self.enum_type):
            return value
        text = raw_text(value)
        if text is None:
            return None

        token = text.lower()
        for member in self.enum_type:
            if member.name.lower() == token:
                return member
        return None

    def render(self, value: E) -> str:
        return value.name

    def __repr__(self) -> str:
        return f"EnumParser({self.enum_type.__name__})"


class ListParser(Parser[list[T]]):
    """Parse a list of values with an inner element parser.

    Accepts either a native list/tuple or text in `[a, b, c]` or `a b c` form.
    Parsing is fail-fast: one invalid element rejects the whole list.
    """

    def __init__(self, parser: Parser[T]) -> None:
        """Initialize the combinator around an element parser."""

        self.parser = parser

    def parse(self, value: object) -> list[T] | None:
        if isinstance(value, (list, tuple)):
            items: list[object] = list(value)
        else:
            text = raw_text(value)
            if text is None:
                return None
            items = self._split(text)

        parsed: list[T] = []
        for item in items:
            element = self.parser.parse(item)
            if element is None:
                return None
            parsed.append(element)
        return parsed

    def render(self, value: list[T]) -> str:
        """Render elements with the inner parser inside square brackets."""

        return "[" + ", ".join(self.parser.render(item) for item in value) + "]"

    @staticmethod
    def _split(text: str) -> list[object]:
        """Unwrap optional brackets and split on comma/whitespace runs.

        Separators inside nested brackets belong to the nested element, so a
        rendered list of lists reads back element by element. Text with
        unbalanced brackets is split flat.
        """

        body = text.strip()
        if not _is_balanced(body):
            if body.startswith("[") and body.endswith("]"):
                body = body[1:-1]
            return [token for token in _LIST_SEPARATOR_PATTERN.split(body) if token]

        if _closing_index(body) == len(body) - 1:
            body = body[1:-1]

        tokens: list[object] = []
        current: list[str] = []
        depth = 0
        for character in body:
            if depth == 0 and (character == "," or character.isspace()):
                if current:
                    tokens.append("".join(current))
                    current = []
                continue
            if character == "[":
                depth += 1
            elif character == "]":
                depth -= 1
            current.append(character)
        if current:
            tokens.append("".join(current))
        return tokens

    def __repr__(self) -> str:
        return f"ListParser({self.parser!r})"


def _is_balanced(text: str) -> bool:
    """Return whether every `]` closes an earlier `[` and none stay open."""

    depth = 0
    for character in text:
        if character == "[":
            depth += 1
        elif character == "]":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def _closing_index(text: str) -> int | None:
    """Return the index of the bracket closing a leading `[`, if any."""

    if not text.startswith("["):
        return None
    depth = 0
    for index, character in enumerate(text):
        if character == "[":
            depth += 1
        elif character == "]":
            depth -= 1
            if depth == 0:
                return index
    return None
