"""Primitive parsers converting raw input without extra validation.

Key types:
- `StringParser`, `IntParser`, `DoubleParser`, `BooleanParser` and their
  shared module-level instances.
"""

from __future__ import annotations

import math
import re

from ..models.datatypes import INT32_MAX, INT32_MIN
from ..parsing import raw_text
from .base import Parser

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|NaN|Infinity)"
)
_TRUE_BOOLEAN_TOKENS = frozenset({"1", "t", "true"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "f", "false"})


class StringParser(Parser[str]):
    """Stringify any present input.

    `None` is treated as an absent value and yields `None`, not the text `None`.
    """

    def parse(self, value: object) -> str | None:
        return raw_text(value)


class IntParser(Parser[int]):
    """Parse base-10 signed 32-bit integers."""

    def parse(self, value: object) -> int | None:
        """Parse an optionally signed run of ASCII digits."""

        text = raw_text(value)
        if text is None or not _INTEGER_PATTERN.fullmatch(text):
            return None
        parsed = int(text)
        if not INT32_MIN <= parsed <= INT32_MAX:
            return None
        return parsed


class DoubleParser(Parser[float]):
    """Parse floating-point literals, including `NaN` and `Infinity`."""

    def parse(self, value: object) -> float | None:
        """Parse an ASCII decimal or exponent literal, or a `NaN`/`Infinity` token."""

        if isinstance(value, float):
            return value
        text = raw_text(value)
        if text is None or not _DOUBLE_PATTERN.fullmatch(text):
            return None
        return float(text)

    def render(self, value: float) -> str:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)


class BooleanParser(Parser[bool]):
    """Parse the `1`/`t`/`true` and `0`/`f`/`false` token families."""

    def parse(self, value: object) -> bool | None:
        text = raw_text(value)
        if text is None:
            return None

        token = text.lower()
        if token in _TRUE_BOOLEAN_TOKENS:
            return True
        if token in _FALSE_BOOLEAN_TOKENS:
            return False
        return None

    def render(self, value: bool) -> str:
        return "true" if value else "false"


STRING = StringParser()
INT = IntParser()
DOUBLE = DoubleParser()
BOOLEAN = BooleanParser()
