"""Tests for the command line entry point."""

import re

from calcalc import add, distance_between
from calcalc.cli import DEMO_DAYS, DEMO_FIRST, DEMO_SECOND, main


def test_distance_command(capsys):
    code = main(["distance", "2023-01-12 00:00:00", "2024-05-08 00:00:00"])
    out = capsys.readouterr().out

    assert code == 0
    assert out.strip() == str(
        distance_between("2023-01-12 00:00:00", "2024-05-08 00:00:00")
    )


def test_add_command(capsys):
    code = main(["add", "2023-01-12 00:00:00", "1", "week"])

    assert code == 0
    assert capsys.readouterr().out == "2023-01-19 00:00:00\n"


def test_add_command_negative_amount(capsys):
    code = main(["add", "2023-01-12 00:00:00", "-1", "day"])

    assert code == 0
    assert capsys.readouterr().out == "2023-01-11 00:00:00\n"


def test_now_command(capsys):
    code = main(["now", "--utc"])
    out = capsys.readouterr().out

    assert code == 0
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\n", out)


def test_demo_without_command(capsys):
    """Test that running without a command prints the demonstration."""
    code = main([])
    out = capsys.readouterr().out

    assert code == 0
    expected = (
        f"{distance_between(DEMO_FIRST, DEMO_SECOND)}\n"
        f"{add(DEMO_FIRST, DEMO_DAYS, 'day')}\n"
    )
    assert out == expected


def test_bad_input_reports_error(capsys):
    """Test that library errors become a message and exit status 2."""
    code = main(["distance", "2023/01/12", "2024-05-08 00:00:00"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "does not match" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_unit_reports_error(capsys):
    code = main(["add", "2023-01-12 00:00:00", "2", "fortnight"])

    assert code == 2
    assert "Invalid unit" in capsys.readouterr().err
