"""Public slug entry points."""

import os

from slugs.encoder import decode, encode
from slugs.precision import Precision
from slugs.timestamp import digits_at
from utils.timestamp import read_clock

DEFAULT_LENGTH = Precision.MICROSECONDS.value


def generate_slug(length=DEFAULT_LENGTH, *, clock=read_clock, randbytes=os.urandom, sampling="modulo"):
    """Generate a time-derived slug of `length` letters plus one separator.

    `length` picks the timestamp precision (10=seconds, 13=milliseconds,
    16=microseconds, 19=nanoseconds); None means the default of 16.
    Slugs from the same time unit may collide; slugs from different units
    never do.
    """
    if length is None:
        length = DEFAULT_LENGTH
    precision = Precision.from_length(length)
    return encode(digits_at(precision, clock), randbytes=randbytes, sampling=sampling)


def slug_timestamp(slug):
    """Precision and integer timestamp a slug was generated at."""
    digits = decode(slug)
    return Precision(len(digits)), int(digits)
