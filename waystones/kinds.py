"""Kind-tag dispatch between configuration collaborators and parsers.

Responsibilities:
- Name the built-in value kinds and map each to its shared parser.
- Resolve composite kind expressions (`list[int]`, `range[0..10]`).
- Expose the `parse_value`/`render_value` entry points used by loaders and CLI.
"""

from __future__ import annotations

from enum import Enum
import re
from typing import Any, Union

from .errors import UnknownKindError
from .parsers import (
    BOOLEAN,
    DOUBLE,
    INT,
    LOCALE,
    LOCATION,
    NON_NEGATIVE_INT,
    PERCENTAGE,
    STRING,
    EnumParser,
    ListParser,
    Parser,
    RangeParser,
)

_LIST_KIND_PATTERN = re.compile(r"list\[(.+)\]", re.IGNORECASE)
_RANGE_KIND_PATTERN = re.compile(
    r"range\[\s*([+-]?[0-9]+)\s*\.\.\s*([+-]?[0-9]+)\s*\]",
    re.IGNORECASE,
)


class ValueKind(str, Enum):
    """Built-in configuration value kinds with a shared parser instance."""

    STRING = "string"
    INT = "int"
    NON_NEGATIVE_INT = "non-negative-int"
    DOUBLE = "double"
    PERCENTAGE = "percentage"
    BOOLEAN = "boolean"
    LOCALE = "locale"
    LOCATION = "location"


_KIND_PARSERS: dict[ValueKind, Parser[Any]] = {
    ValueKind.STRING: STRING,
    ValueKind.INT: INT,
    ValueKind.NON_NEGATIVE_INT: NON_NEGATIVE_INT,
    ValueKind.DOUBLE: DOUBLE,
    ValueKind.PERCENTAGE: PERCENTAGE,
    ValueKind.BOOLEAN: BOOLEAN,
    ValueKind.LOCALE: LOCALE,
    ValueKind.LOCATION: LOCATION,
}

KindSpec = Union[ValueKind, str, Parser[Any]]


def resolve_parser(kind: KindSpec) -> Parser[Any]:
    """Return the parser for a kind tag, kind expression or parser instance.

    Raises:
        UnknownKindError: If a textual kind expression names no parser.
    """

    if isinstance(kind, ValueKind):
        return _KIND_PARSERS[kind]
    if isinstance(kind, str):
        return _resolve_expression(kind)
    return kind


def _resolve_expression(expression: str) -> Parser[Any]:
    """Resolve a textual kind name or composite expression."""

    normalized = expression.strip().lower()
    for kind in ValueKind:
        if kind.value == normalized:
            return _KIND_PARSERS[kind]

    list_match = _LIST_KIND_PATTERN.fullmatch(normalized)
    if list_match is not None:
        return ListParser(_resolve_expression(list_match.group(1)))

    range_match = _RANGE_KIND_PATTERN.fullmatch(normalized)
    if range_match is not None:
        return RangeParser(int(range_match.group(1)), int(range_match.group(2)))

    raise UnknownKindError(expression)


def kind_label(kind: KindSpec) -> str:
    """Return a short human-readable label for a kind in diagnostics."""

    if isinstance(kind, ValueKind):
        return kind.value
    if isinstance(kind, str):
        return kind.strip()

    for value_kind, parser in _KIND_PARSERS.items():
        if parser is kind:
            return value_kind.value
    if isinstance(kind, RangeParser):
        return f"range[{kind.minimum}..{kind.maximum}]"
    if isinstance(kind, ListParser):
        return f"list[{kind_label(kind.parser)}]"
    if isinstance(kind, EnumParser):
        return f"enum[{kind.enum_type.__name__}]"
    return type(kind).__name__


def parse_value(kind: KindSpec, raw: object) -> Any | None:
    """Parse a raw value for the given kind, returning `None` when invalid."""

    return resolve_parser(kind).parse(raw)


def render_value(kind: KindSpec, value: Any) -> str:
    """Render a typed value in the canonical text form of its kind."""

    return resolve_parser(kind).render(value)


def kind_names() -> list[str]:
    """Return the names of the built-in kinds in declaration order."""

    return [kind.value for kind in ValueKind]
