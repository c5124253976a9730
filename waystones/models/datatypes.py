"""Typed values produced by the structured configuration parsers.

Key types:
- `Location`: a world token plus three signed 32-bit block coordinates.
- `Locale`: a normalized language tag split into its subtags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_LANGUAGE_PATTERN = re.compile(r"^[A-Za-z]{2,8}$")
_SCRIPT_PATTERN = re.compile(r"^[A-Za-z]{4}$")
_REGION_PATTERN = re.compile(r"^(?:[A-Za-z]{2}|[0-9]{3})$")
_VARIANT_PATTERN = re.compile(r"^(?:[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3})$")
_UNDETERMINED = "und"
_WORLD_PATTERN = re.compile(r"\w+", re.ASCII)


@dataclass(frozen=True, slots=True)
class Location:
    """A block position inside a named world.

    Attributes:
        world: Opaque world token of ASCII word characters.
        x: Signed 32-bit block X coordinate.
        y: Signed 32-bit block Y coordinate.
        z: Signed 32-bit block Z coordinate.
    """

    world: str
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if not _WORLD_PATTERN.fullmatch(self.world):
            raise ValueError(
                f"World token must be ASCII letters, digits or underscores, got `{self.world}`."
            )
        for axis, value in (("x", self.x), ("y", self.y), ("z", self.z)):
            if not INT32_MIN <= value <= INT32_MAX:
                raise ValueError(
                    f"Coordinate `{axis}` must fit a signed 32-bit integer, got {value}."
                )


@dataclass(frozen=True, slots=True)
class Locale:
    """A language identifier normalized from a BCP 47 style tag.

    Attributes:
        language: Lowercase language subtag, empty when undetermined.
        script: Titlecase script subtag.
        region: Uppercase region subtag (alpha-2 or UN M.49 digits).
        variants: Variant subtags in source order.
    """

    language: str = ""
    script: str = ""
    region: str = ""
    variants: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_language_tag(cls, tag: str) -> Locale:
        """Build a locale from a language tag without ever failing.

        Both `-` and `_` separate subtags. The first ill-formed subtag and
        everything after it is ignored, so a tag with an ill-formed language
        produces the empty (undetermined) locale.
        """

        subtags = tag.strip().replace("_", "-").split("-")
        if not _LANGUAGE_PATTERN.fullmatch(subtags[0]):
            return cls()

        language = subtags[0].lower()
        if language == _UNDETERMINED:
            language = ""
        index = 1
        script = ""
        region = ""
        variants: list[str] = []

        if index < len(subtags) and _SCRIPT_PATTERN.fullmatch(subtags[index]):
            script = subtags[index].title()
            index += 1
        if index < len(subtags) and _REGION_PATTERN.fullmatch(subtags[index]):
            region = subtags[index].upper()
            index += 1
        while index < len(subtags) and _VARIANT_PATTERN.fullmatch(subtags[index]):
            variants.append(subtags[index])
            index += 1

        return cls(language=language, script=script, region=region, variants=tuple(variants))

    def to_language_tag(self) -> str:
        """Render the locale as a well-formed language tag."""

        parts = [self.language or _UNDETERMINED]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "-".join(parts)
