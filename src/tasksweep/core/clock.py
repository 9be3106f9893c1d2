"""Pure wall-clock conversion - no I/O dependencies."""

from .errors import InvalidTimeError

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def to_minutes(hhmm: str) -> int:
    """
    Convert a 24-hour "HH:MM" string to minutes since midnight.

    Raises InvalidTimeError if the string is not two numeric fields
    or the fields are out of range.
    """
    if not isinstance(hhmm, str):
        raise InvalidTimeError(f"Invalid time: {hhmm!r}")

    parts = hhmm.strip().split(":")
    if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidTimeError(f"Invalid time format: {hhmm!r}")

    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidTimeError(f"Invalid time value: {hhmm!r}")
    return hours * MINUTES_PER_HOUR + minutes


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM"."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise InvalidTimeError(f"Minutes out of range: {minutes}")
    return f"{minutes // MINUTES_PER_HOUR:02d}:{minutes % MINUTES_PER_HOUR:02d}"
