"""Parsers that layer a validity constraint over textual conversion.

Responsibilities:
- Restrict integers to non-negative or inclusive bounded values.
- Convert `%`-suffixed text into ratios and back.
- Normalize language tags into `Locale` values without rejecting input.
"""

from __future__ import annotations

from decimal import Decimal
import math
import re

from ..models.datatypes import Locale
from ..parsing import raw_text
from .base import Parser
from .primitives import IntParser

_PERCENTAGE_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?%$")
_RENDER_SEARCH_STEPS = 8


class NonNegativeIntParser(IntParser):
    """Integer parser rejecting negative values."""

    def parse(self, value: object) -> int | None:
        parsed = super().parse(value)
        if parsed is None or parsed < 0:
            return None
        return parsed


class RangeParser(IntParser):
    """Integer parser accepting only values inside an inclusive bound.

    Attributes:
        minimum: Smallest accepted value.
        maximum: Largest accepted value.
    """

    def __init__(self, minimum: int, maximum: int) -> None:
        """Initialize the inclusive `[minimum, maximum]` bound."""

        self.minimum = minimum
        self.maximum = maximum

    def parse(self, value: object) -> int | None:
        parsed = super().parse(value)
        if parsed is None or not self.minimum <= parsed <= self.maximum:
            return None
        return parsed

    def __repr__(self) -> str:
        return f"RangeParser({self.minimum}, {self.maximum})"


class PercentageParser(Parser[float]):
    """Parse `42.5%` style text into the ratio `0.425`.

    Ratios that overflow to infinity are rejected.
    """

    def parse(self, value: object) -> float | None:
        text = raw_text(value)
        if text is None or not _PERCENTAGE_PATTERN.fullmatch(text):
            return None
        ratio = float(text[:-1]) / 100
        if not math.isfinite(ratio):
            return None
        return ratio

    def render(self, value: float) -> str:
        """Render a ratio as the shortest positional percentage that parses back to it.

        The percent value is searched among the floats next to `value * 100`,
        since the product may round away from a number whose division by 100
        yields `value` again.
        """

        if not math.isfinite(value) or value < 0:
            return f"{value * 100}%"
        if value == 0:
            return "0%"

        scaled = value * 100
        candidates = [scaled]
        below = above = scaled
        for _ in range(_RENDER_SEARCH_STEPS):
            below = math.nextafter(below, 0.0)
            above = math.nextafter(above, math.inf)
            candidates.extend((below, above))

        exact = [
            _positional(candidate)
            for candidate in candidates
            if math.isfinite(candidate) and candidate >= 0 and candidate / 100 == value
        ]
        if not exact:
            return f"{_positional(scaled)}%"
        return f"{min(exact, key=len)}%"


class LocaleParser(Parser[Locale]):
    """Normalize any present input into a `Locale`.

    Unrecognized tags are not rejected; they produce a partial or
    undetermined locale instead.
    """

    def parse(self, value: object) -> Locale | None:
        if isinstance(value, Locale):
            return value
        text = raw_text(value)
        if text is None:
            return None
        return Locale.from_language_tag(text)

    def render(self, value: Locale) -> str:
        return value.to_language_tag()


NON_NEGATIVE_INT = NonNegativeIntParser()
PERCENTAGE = PercentageParser()
LOCALE = LocaleParser()


def _positional(number: float) -> str:
    """Format a non-negative float as exact decimal digits without an exponent."""

    return format(Decimal(repr(number)).normalize(), "f")
