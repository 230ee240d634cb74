"""Parsing of human duration strings like "1h 30m"."""

import re

# Milliseconds per unit.
UNITS = {
    "ms": 1,
    "msec": 1,
    "msecs": 1,
    "millisecond": 1,
    "milliseconds": 1,
    "s": 1000,
    "sec": 1000,
    "secs": 1000,
    "second": 1000,
    "seconds": 1000,
    "m": 60 * 1000,
    "min": 60 * 1000,
    "mins": 60 * 1000,
    "minute": 60 * 1000,
    "minutes": 60 * 1000,
    "h": 60 * 60 * 1000,
    "hr": 60 * 60 * 1000,
    "hrs": 60 * 60 * 1000,
    "hour": 60 * 60 * 1000,
    "hours": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
    "day": 24 * 60 * 60 * 1000,
    "days": 24 * 60 * 60 * 1000,
}

# A bare number with no unit is seconds.
DEFAULT_UNIT = "s"

_TOKEN = re.compile(r"(\d+(?:\.\d+)?|\.\d+)(?:\s*([a-z]+))?")


class DurationError(ValueError):
    """Raised for a duration string that cannot be parsed."""


def parse_duration(text: str) -> int:
    """Parse a duration into whole milliseconds.

    Examples:
        >>> parse_duration("10s")
        10000
        >>> parse_duration("1h 30m")
        5400000

    Raises:
        DurationError: If the text is empty, malformed, uses an unknown unit,
            or adds up to zero.
    """
    cleaned = text.strip().lower()
    if not cleaned:
        raise DurationError(f"Invalid duration: {text!r}")

    total = 0.0
    pos = 0
    needs_gap = False
    for match in _TOKEN.finditer(cleaned):
        gap = cleaned[pos:match.start()]
        if gap.strip() or (needs_gap and not gap):
            raise DurationError(f"Invalid duration: {text!r}")
        number, unit = match.groups()
        factor = UNITS.get(unit or DEFAULT_UNIT)
        if factor is None:
            raise DurationError(f"Unknown duration unit {unit!r} in {text!r}")
        total += float(number) * factor
        # Two numbers in a row must be split by whitespace.
        needs_gap = unit is None
        pos = match.end()
    if pos == 0 or pos != len(cleaned):
        raise DurationError(f"Invalid duration: {text!r}")

    ms = round(total)
    if ms <= 0:
        raise DurationError(f"Duration must be positive: {text!r}")
    return ms
