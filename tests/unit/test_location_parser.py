"""Unit tests for the fixed-width hex location codec."""

from __future__ import annotations

import pytest

from waystones.models import INT32_MAX, INT32_MIN, Location
from waystones.parsers import LOCATION
from waystones.parsers.location import decode_coordinate, encode_coordinate


def test_location_render_uses_padded_twos_complement_hex() -> None:
    """Each coordinate should render as eight uppercase two's-complement digits."""

    location = Location(world="world", x=1, y=-1, z=256)

    assert LOCATION.render(location) == "world@00000001FFFFFFFF00000100"


def test_location_roundtrip_recovers_world_and_coordinates() -> None:
    """Rendering then parsing should recover the exact world and coordinates."""

    location = Location(world="world", x=1, y=-1, z=256)

    assert LOCATION.parse(LOCATION.render(location)) == location


def test_location_parser_accepts_either_hex_case() -> None:
    """Hex digits should be accepted in lower and upper case."""

    parsed = LOCATION.parse("world_nether@00000001ffffffff00000100")

    assert parsed == Location(world="world_nether", x=1, y=-1, z=256)


def test_location_parser_handles_32bit_extremes() -> None:
    """Coordinate extremes should survive the codec bit-exactly."""

    location = Location(world="end", x=INT32_MIN, y=INT32_MAX, z=0)
    rendered = LOCATION.render(location)

    assert rendered == "end@800000007FFFFFFF00000000"
    assert LOCATION.parse(rendered) == location


@pytest.mark.parametrize(
    "raw",
    [
        "world@123",
        "world@00000001FFFFFFFF0000010",
        "world@00000001FFFFFFFF000001000",
        "world@0000000GFFFFFFFF00000100",
        "world@00000001-FFFFFFFF-00000100",
        "@00000001FFFFFFFF00000100",
        "wor ld@00000001FFFFFFFF00000100",
        "wörld@00000001FFFFFFFF00000100",
        "world00000001FFFFFFFF00000100",
        "world@00000001FFFFFFFF00000100\n",
        "",
        None,
    ],
)
def test_location_parser_rejects_malformed_input(raw: object) -> None:
    """Any deviation from the fixed-width grammar should fail."""

    assert LOCATION.parse(raw) is None


def test_location_parser_passes_location_values_through() -> None:
    """Already-typed locations should parse to themselves."""

    location = Location(world="world", x=10, y=64, z=-10)

    assert LOCATION.parse(location) is location


def test_coordinate_codec_helpers() -> None:
    """Coordinate helpers should map between signed values and eight hex digits."""

    assert encode_coordinate(-1) == "FFFFFFFF"
    assert encode_coordinate(255) == "000000FF"
    assert decode_coordinate("FFFFFFFE") == -2
    assert decode_coordinate("7fffffff") == INT32_MAX
    assert decode_coordinate("80000000") == INT32_MIN


def test_location_rejects_coordinates_outside_32bit_range() -> None:
    """Locations should not be constructible with coordinates the codec cannot carry."""

    with pytest.raises(ValueError, match="signed 32-bit"):
        Location(world="world", x=INT32_MAX + 1, y=0, z=0)


@pytest.mark.parametrize("world", ["world", "world_nether", "DIM1", "_"])
def test_every_constructible_location_roundtrips(world: str) -> None:
    """Any location that can be built should render to parseable text."""

    location = Location(world=world, x=INT32_MIN, y=0, z=INT32_MAX)

    assert LOCATION.parse(LOCATION.render(location)) == location
