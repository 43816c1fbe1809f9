"""
Game clock helpers.

The transcript clock counts down within a quarter from 12:00 to 00:00.
All arithmetic is done on whole seconds.
"""

import re

from .errors import ClockFormatError

QUARTER_LENGTH_SECONDS = 12 * 60
QUARTER_START_CLOCK = "12:00"
BENCH_CLOCK = "00:00"

_CLOCK_RE = re.compile(r"^(\d{2}):(\d{2})$")


def is_valid_clock(value: str) -> bool:
    """Return True for a well-formed MM:SS clock with seconds below 60."""
    match = _CLOCK_RE.match(value or "")
    return bool(match) and int(match.group(2)) < 60


def to_seconds(value: str) -> int:
    """
    Convert an MM:SS clock string to seconds.

    Raises:
        ClockFormatError: If value is not MM:SS
    """
    if not is_valid_clock(value):
        raise ClockFormatError(f"Invalid clock value: {value!r}")
    minutes, seconds = value.split(":")
    return int(minutes) * 60 + int(seconds)


def fmt_mmss(seconds: int) -> str:
    """
    Format seconds as MM:SS string.

    Example:
        >>> fmt_mmss(90)
        '01:30'
    """
    m = seconds // 60
    s = seconds % 60
    return f"{m:02d}:{s:02d}"


def clock_diff(start: str, end: str) -> int:
    """Seconds elapsed from start to end on a countdown clock (may be negative)."""
    return to_seconds(start) - to_seconds(end)


def seconds_to_minutes(seconds: int) -> int:
    """Whole minutes, rounded half up."""
    return (seconds + 30) // 60
