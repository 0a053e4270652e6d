from slugs.buckets import BUCKETS, SEPARATOR
from slugs.encoder import decode, encode, is_slug
from slugs.generator import DEFAULT_LENGTH, generate_slug, slug_timestamp
from slugs.precision import Precision
from slugs.timestamp import digits_at

__all__ = [
    "BUCKETS",
    "SEPARATOR",
    "DEFAULT_LENGTH",
    "Precision",
    "digits_at",
    "encode",
    "decode",
    "is_slug",
    "generate_slug",
    "slug_timestamp",
]
