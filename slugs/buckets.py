"""
Digit to letter buckets.

52 letters split across 10 buckets, one per decimal digit, following the
QWERTY rows. Even digits start lowercase, odd digits start uppercase, so
every ASCII letter lives in exactly one bucket.
"""

from types import MappingProxyType

BUCKETS = (
    "qWeRtY",  # 0
    "QwErTy",  # 1
    "uIoPa",   # 2
    "UiOpA",   # 3
    "sDfGh",   # 4
    "SdFgH",   # 5
    "jKlZx",   # 6
    "JkLzX",   # 7
    "cVbNm",   # 8
    "CvBnM",   # 9
)

BUCKET_SIZES = tuple(len(bucket) for bucket in BUCKETS)

SEPARATOR = "-"

LETTER_TO_DIGIT = MappingProxyType(
    {letter: digit for digit, bucket in enumerate(BUCKETS) for letter in bucket}
)


def bucket_for(digit):
    return BUCKETS[digit]


def digit_for(letter):
    """Digit whose bucket holds `letter`, or None."""
    return LETTER_TO_DIGIT.get(letter)
