"""Fixed-width decimal timestamps at a chosen precision."""

from core.errors import ClockUnavailable, TimestampOverflow
from utils.timestamp import NANOS_PER_SECOND, read_clock


def timestamp_value(precision, clock=read_clock):
    """Integer timestamp scaled to `precision`, read from `clock`."""
    try:
        seconds, nanos = clock()
    except (OSError, ValueError, OverflowError) as exc:
        raise ClockUnavailable("clock read failed", cause=exc) from exc

    if seconds < 0 or not 0 <= nanos < NANOS_PER_SECOND:
        raise ClockUnavailable(
            "clock returned an unusable reading",
            context={"seconds": seconds, "nanoseconds": nanos},
        )

    return seconds * precision.per_second + nanos // precision.nanos_per_unit


def digits_at(precision, clock=read_clock):
    """Current time as exactly `precision` decimal digits, zero-padded on the left.

    Readings too wide for the precision raise TimestampOverflow rather than
    being truncated.
    """
    value = timestamp_value(precision, clock)
    digits = str(value).zfill(precision.value)
    if len(digits) > precision.value:
        raise TimestampOverflow(
            f"timestamp {value} does not fit {precision.value} digits",
            value=value,
            width=precision.value,
        )
    return digits
