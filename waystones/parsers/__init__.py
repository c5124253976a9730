"""Composable parsers for configuration values.

Every parser implements `Parser[T]`: `parse` turns raw input into a typed
value or `None`, `render` produces the canonical text for a typed value.
"""

from .base import Parser
from .location import LOCATION, LocationParser
from .primitives import (
    BOOLEAN,
    DOUBLE,
    INT,
    STRING,
    BooleanParser,
    DoubleParser,
    IntParser,
    StringParser,
)
from .structured import EnumParser, ListParser
from .validating import (
    LOCALE,
    NON_NEGATIVE_INT,
    PERCENTAGE,
    LocaleParser,
    NonNegativeIntParser,
    PercentageParser,
    RangeParser,
)

__all__ = [
    "BOOLEAN",
    "BooleanParser",
    "DOUBLE",
    "DoubleParser",
    "EnumParser",
    "INT",
    "IntParser",
    "LOCALE",
    "LOCATION",
    "ListParser",
    "LocaleParser",
    "LocationParser",
    "NON_NEGATIVE_INT",
    "NonNegativeIntParser",
    "PERCENTAGE",
    "Parser",
    "PercentageParser",
    "RangeParser",
    "STRING",
    "StringParser",
]
