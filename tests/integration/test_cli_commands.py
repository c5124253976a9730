"""CLI command tests for parsing, checking and listing value kinds."""

from typer.testing import CliRunner

from waystones.cli import app


def test_kinds_command_lists_builtin_and_composite_kinds() -> None:
    """Kinds command should list every built-in kind and the composite forms."""

    runner = CliRunner()

    result = runner.invoke(app, ["kinds"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "percentage" in lines
    assert "location" in lines
    assert "list[<kind>]" in lines


def test_parse_command_prints_canonical_form() -> None:
    """Parse command should print the rendered form of a valid value."""

    runner = CliRunner()

    percentage = runner.invoke(app, ["parse", "percentage", "42.50%"])
    location = runner.invoke(app, ["parse", "location", "world@00000001ffffffff00000100"])
    numbers = runner.invoke(app, ["parse", "list[int]", "[1, 2,3]"])

    assert percentage.exit_code == 0, percentage.output
    assert percentage.output.strip() == "42.5%"
    assert location.output.strip() == "world@00000001FFFFFFFF00000100"
    assert numbers.output.strip() == "[1, 2, 3]"


def test_parse_command_reports_invalid_value() -> None:
    """Parse command should fail with exit code 1 for an invalid value."""

    runner = CliRunner()

    result = runner.invoke(app, ["parse", "boolean", "yes"])

    assert result.exit_code == 1
    assert "parse failed: Invalid boolean value: yes" in result.output


def test_parse_command_reports_unknown_kind() -> None:
    """Parse command should report unknown kinds instead of crashing."""

    runner = CliRunner()

    result = runner.invoke(app, ["parse", "bogus", "1"])

    assert result.exit_code == 1
    assert "parse failed: Unknown value kind `bogus`." in result.output


def test_check_command_prints_rows_for_valid_assignments() -> None:
    """Check command should print `key = value` rows in assignment order."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["check", "wait-time:non-negative-int=+5", "boost:percentage=50%", "debug:boolean=T"],
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "wait-time = 5",
        "boost = 50%",
        "debug = true",
    ]


def test_check_command_fails_when_any_value_is_invalid() -> None:
    """Check command should print valid rows, log the invalid ones and exit 1."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["check", "radius:range[1..64]=128", "name:string=hub"],
        env={"WAYSTONES_LOG_LEVEL": "ERROR"},
    )

    assert result.exit_code == 1
    assert "name = hub" in result.output
    assert "key=radius event=invalid kind=range_1..64_ raw=128" in result.output
    assert "check failed: Invalid range[1..64] value for `radius`: 128" in result.output


def test_check_command_rejects_malformed_assignments() -> None:
    """Assignments without a kind or value separator should be rejected."""

    runner = CliRunner()

    malformed = runner.invoke(app, ["check", "wait-time=5"])
    duplicate = runner.invoke(app, ["check", "a:int=1", "a:int=2"])
    unknown = runner.invoke(app, ["check", "a:nope=1"])

    assert malformed.exit_code == 1
    assert "expected `key:kind=value`" in malformed.output
    assert duplicate.exit_code == 1
    assert "assigned more than once" in duplicate.output
    assert unknown.exit_code == 1
    assert "Unknown value kind `nope`" in unknown.output


def test_parse_command_accepts_negative_values() -> None:
    """Values starting with `-` should be parsed as values, not options."""

    runner = CliRunner()

    integer = runner.invoke(app, ["parse", "int", "-5"])
    double = runner.invoke(app, ["parse", "double", "-1.5"])
    bounded = runner.invoke(app, ["parse", "range[-10..10]", "-11"])

    assert integer.exit_code == 0, integer.output
    assert integer.output.strip() == "-5"
    assert double.exit_code == 0, double.output
    assert double.output.strip() == "-1.5"
    assert bounded.exit_code == 1
    assert "parse failed: Invalid range[-10..10] value: -11" in bounded.output


def test_check_command_accepts_negative_values() -> None:
    """Negative values inside assignments should resolve normally."""

    runner = CliRunner()

    result = runner.invoke(app, ["check", "depth:range[-64..0]=-32"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["depth = -32"]
