"""Time and duration formatting."""

import math
from datetime import datetime
from typing import Tuple, Union

# A wall-clock moment (clock mode) or remaining milliseconds (timer mode).
TimePoint = Union[datetime, int, float]


def is_duration(time_point: TimePoint) -> bool:
    """True if the time point is a remaining duration rather than a moment."""
    return not isinstance(time_point, datetime)


def ceil_seconds(remaining_ms: float) -> int:
    """Whole seconds left, rounded up so a running countdown never shows zero."""
    return math.ceil(remaining_ms / 1000)


def split_duration(remaining_ms: float) -> Tuple[int, int, int]:
    """Split remaining milliseconds into (hours, minutes, seconds).

    Hours are not wrapped at 24.
    """
    total = ceil_seconds(remaining_ms)
    return total // 3600, (total // 60) % 60, total % 60


def _hms(hours: int, minutes: int, seconds: int) -> str:
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_clock(instant: datetime) -> str:
    """Format a wall-clock moment as 24-hour HH:MM:SS."""
    return _hms(instant.hour, instant.minute, instant.second)


def format_duration(remaining_ms: float) -> str:
    """Format remaining milliseconds as HH:MM:SS.

    Examples:
        >>> format_duration(65000)
        '00:01:05'
        >>> format_duration(1)
        '00:00:01'
    """
    return _hms(*split_duration(remaining_ms))


def format_time_point(time_point: TimePoint) -> str:
    if is_duration(time_point):
        return format_duration(time_point)
    return format_clock(time_point)
