"""Unit tests for location and locale value types."""

from __future__ import annotations

import pytest

from waystones.models import INT32_MIN, Locale, Location


def test_location_is_immutable_value() -> None:
    """Locations should compare by value and reject mutation."""

    first = Location(world="world", x=1, y=2, z=3)

    assert first == Location(world="world", x=1, y=2, z=3)
    with pytest.raises(AttributeError):
        first.x = 5  # type: ignore[misc]


def test_location_validates_every_axis() -> None:
    """Each axis should be range-checked with its name in the error."""

    with pytest.raises(ValueError, match="`z`"):
        Location(world="world", x=0, y=0, z=INT32_MIN - 1)


def test_locale_from_language_tag_stops_at_ill_formed_subtag() -> None:
    """Subtags after the first ill-formed one should be ignored."""

    assert Locale.from_language_tag("en-US-!!-GB") == Locale(language="en", region="US")
    assert Locale.from_language_tag("fr-toolongscript") == Locale(language="fr")
    assert Locale.from_language_tag("1234") == Locale()


def test_locale_to_language_tag_uses_undetermined_language() -> None:
    """A locale without language should render with the `und` marker."""

    assert Locale().to_language_tag() == "und"
    assert Locale(region="US").to_language_tag() == "und-US"
    assert Locale(language="de", region="CH", variants=("1996",)).to_language_tag() == (
        "de-CH-1996"
    )


@pytest.mark.parametrize("world", ["my world", "", "world@1", "wörld", "nether-hub"])
def test_location_rejects_world_tokens_outside_ascii_word_characters(world: str) -> None:
    """World tokens that could not be rendered and parsed back are rejected."""

    with pytest.raises(ValueError, match="World token"):
        Location(world=world, x=0, y=0, z=0)
