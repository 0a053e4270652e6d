"""
Digit string <-> slug encoding.

Each digit becomes one letter picked at random from its bucket, with a
separator before the letter at index len // 2. Letters are drawn with one
strong random byte each:

- "modulo": byte % bucket size. Sizes 5 and 6 do not divide 256, so the
  first letters of a bucket are very slightly favoured. This matches the
  letter distribution of earlier releases.
- "rejection": bytes at or above the largest multiple of the bucket size are
  discarded and redrawn, giving a uniform pick.
"""

import os

from core.errors import InvalidParameter, InvalidSlug, RandomnessUnavailable
from slugs.buckets import SEPARATOR, bucket_for, digit_for
from slugs.precision import Precision

SAMPLING_MODES = ("modulo", "rejection")


def _random_byte(randbytes):
    try:
        data = randbytes(1)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessUnavailable("strong random source failed", cause=exc) from exc
    if not isinstance(data, (bytes, bytearray)) or len(data) != 1:
        raise RandomnessUnavailable(
            "strong random source returned no usable byte",
            context={"received": repr(data)},
        )
    return data[0]


def _pick_index(size, randbytes, sampling):
    byte = _random_byte(randbytes)
    if sampling == "rejection":
        limit = 256 - 256 % size
        while byte >= limit:
            byte = _random_byte(randbytes)
    return byte % size


def encode(digits, randbytes=os.urandom, sampling="modulo"):
    """Map each digit to a random letter of its bucket and insert the separator."""
    if sampling not in SAMPLING_MODES:
        raise InvalidParameter(
            f"unknown sampling mode {sampling!r}",
            name="sampling",
            value=sampling,
            allowed=SAMPLING_MODES,
        )

    half = len(digits) // 2
    chars = []
    for position, char in enumerate(digits):
        if not ("0" <= char <= "9"):
            raise InvalidParameter(
                f"non-digit {char!r} at position {position}",
                name="digits",
                value=digits,
            )
        if position == half:
            chars.append(SEPARATOR)
        bucket = bucket_for(ord(char) - ord("0"))
        chars.append(bucket[_pick_index(len(bucket), randbytes, sampling)])
    return "".join(chars)


def decode(slug):
    """Recover the digit string a slug was encoded from.

    Works because buckets are disjoint: every letter identifies its digit.
    """
    if not isinstance(slug, str):
        raise InvalidSlug("slug must be a string", name="slug", value=slug)

    letters = slug.replace(SEPARATOR, "")
    allowed = [p.value for p in Precision]
    if len(letters) not in allowed:
        raise InvalidSlug(
            f"slug must hold 10, 13, 16, or 19 letters, got {len(letters)}",
            name="slug",
            value=slug,
            allowed=allowed,
        )

    half = len(letters) // 2
    if slug.count(SEPARATOR) != 1 or slug[half] != SEPARATOR:
        raise InvalidSlug(f"slug must have one {SEPARATOR!r} at index {half}", name="slug", value=slug)

    digits = []
    for letter in letters:
        digit = digit_for(letter)
        if digit is None:
            raise InvalidSlug(f"{letter!r} is not in any bucket", name="slug", value=slug)
        digits.append(str(digit))
    return "".join(digits)


def is_slug(value):
    try:
        decode(value)
    except InvalidSlug:
        return False
    return True
