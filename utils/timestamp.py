"""Wall-clock readings and timestamp formatting."""

import time
from datetime import datetime, timezone

NANOS_PER_SECOND = 1_000_000_000


def read_clock():
    """Current wall-clock time as (seconds, nanoseconds) since Unix epoch."""
    return divmod(time.time_ns(), NANOS_PER_SECOND)


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    seconds, micros = divmod(epoch_us, 1_000_000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
