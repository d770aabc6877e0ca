import math
import re
from typing import Optional, Tuple
from exceptions.custom_errors import InvalidTimeFormatError
from utils.constants import CLOCK_FORMAT, MINUTES_PER_DAY

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def to_minutes(clock: str) -> int:
    """
    Convert a wall-clock string "HH:MM" into minutes since midnight.

    Hours must lie in 0..23 and minutes in 0..59. Single-digit hours ("9:05") are accepted,
    anything else raises InvalidTimeFormatError.
    """
    if not isinstance(clock, str):
        raise InvalidTimeFormatError(f"Expected a 'HH:MM' string, got {type(clock).__name__}: {clock!r}")
    match = _CLOCK_RE.match(clock.strip())
    if not match:
        raise InvalidTimeFormatError(f"Invalid time '{clock}'; expected 'HH:MM'.")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormatError(f"Time '{clock}' is out of range 00:00-23:59.")
    return hours * 60 + minutes


def to_clock(total_minutes: int) -> str:
    """Convert minutes since midnight back to a zero-padded "HH:MM" string (no day rollover)."""
    if isinstance(total_minutes, bool) or not isinstance(total_minutes, int):
        raise InvalidTimeFormatError(f"Minute value must be an integer, got {total_minutes!r}")
    if not 0 <= total_minutes < MINUTES_PER_DAY:
        raise InvalidTimeFormatError(
            f"Minute value {total_minutes} is outside a single day (0-{MINUTES_PER_DAY - 1})."
        )
    return CLOCK_FORMAT % divmod(total_minutes, 60)


def parse_window(window: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse a "HH:MM-HH:MM" interval (lunch break, maintenance window) into (start, end) minutes.

    Empty or missing windows return None. The end must come strictly after the start;
    overnight windows are not supported.
    """
    if window is None or not str(window).strip():
        return None
    parts = str(window).split("-")
    if len(parts) != 2:
        raise InvalidTimeFormatError(f"Invalid window '{window}'; expected 'HH:MM-HH:MM'.")
    start, end = to_minutes(parts[0]), to_minutes(parts[1])
    if end <= start:
        raise InvalidTimeFormatError(f"Window '{window}' must end after it starts.")
    return start, end


def overlaps(start: int, end: int, window: Optional[Tuple[int, int]]) -> bool:
    """Half-open overlap test between [start, end) and a (window_start, window_end) pair."""
    if window is None:
        return False
    return start < window[1] and end > window[0]


def round_half_up(value: float) -> int:
    """Round halves up (2.5 -> 3) instead of to even as the built-in round() does."""
    return int(math.floor(value + 0.5))
