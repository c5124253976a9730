"""Fixed-width codec for world locations.

The persisted form is `WORLD@XXXXXXXXYYYYYYYYZZZZZZZZ`: a world token, `@`,
then the x, y and z block coordinates, each as exactly eight hex digits of
its signed 32-bit two's-complement value. The groups carry no separators,
so every group must be exactly eight digits wide. Parsing accepts either hex
case; rendering emits uppercase.
"""

from __future__ import annotations

import re

from ..models.datatypes import Location
from ..parsing import raw_text
from .base import Parser

_LOCATION_PATTERN = re.compile(
    r"^(\w+)@([0-9A-F]{8})([0-9A-F]{8})([0-9A-F]{8})$",
    re.IGNORECASE | re.ASCII,
)
_WORD_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def decode_coordinate(hex_digits: str) -> int:
    """Decode eight hex digits as a signed 32-bit integer."""

    unsigned = int(hex_digits, 16)
    if unsigned & _SIGN_BIT:
        return unsigned - (_WORD_MASK + 1)
    return unsigned


def encode_coordinate(value: int) -> str:
    """Encode a signed 32-bit integer as eight uppercase hex digits."""

    return f"{value & _WORD_MASK:08X}"


class LocationParser(Parser[Location]):
    """Parse and render the compact hex location format."""

    def parse(self, value: object) -> Location | None:
        if isinstance(value, Location):
            return value
        text = raw_text(value)
        if text is None:
            return None

        match = _LOCATION_PATTERN.fullmatch(text)
        if match is None:
            return None
        world, x, y, z = match.groups()
        return Location(
            world=world,
            x=decode_coordinate(x),
            y=decode_coordinate(y),
            z=decode_coordinate(z),
        )

    def render(self, value: Location) -> str:
        return (
            f"{value.world}@"
            f"{encode_coordinate(value.x)}"
            f"{encode_coordinate(value.y)}"
            f"{encode_coordinate(value.z)}"
        )


LOCATION = LocationParser()
