from utils.timestamp import now_micros, format_timestamp, read_clock
from core.errors import (
    BaseSlugError,
    InvalidParameter,
    InvalidSlug,
    ClockUnavailable,
    TimestampOverflow,
    RandomnessUnavailable,
)

__all__ = [
    "now_micros",
    "format_timestamp",
    "read_clock",
    "BaseSlugError",
    "InvalidParameter",
    "InvalidSlug",
    "ClockUnavailable",
    "TimestampOverflow",
    "RandomnessUnavailable",
]
