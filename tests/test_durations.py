"""Unit tests for durations.py."""

import pytest
from ticktty.durations import DurationError, parse_duration


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10s", 10_000),
        ("90", 90_000),
        ("1m", 60_000),
        ("5 min", 300_000),
        ("1h30m", 5_400_000),
        ("1h 30m", 5_400_000),
        ("1.5h", 5_400_000),
        ("250ms", 250),
        ("2 hours 5 seconds", 7_205_000),
        ("1d", 86_400_000),
        ("  10S  ", 10_000),
        ("10 5", 15_000),
        (".5m", 30_000),
    ],
)
def test_valid_durations(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text", ["", "   ", "abc", "10x", "m10", "0", "0s", "1h-30m", "1.5.5", "10s!"]
)
def test_invalid_durations(text):
    with pytest.raises(DurationError):
        parse_duration(text)


def test_duration_error_is_value_error():
    assert issubclass(DurationError, ValueError)


def test_long_digit_run_is_rejected():
    with pytest.raises(DurationError):
        parse_duration("1" * 40 + "!")


def test_long_digit_run_with_unknown_unit():
    with pytest.raises(DurationError, match="Unknown duration unit"):
        parse_duration("1" * 40 + "x")
