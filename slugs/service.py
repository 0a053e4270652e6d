import os
import threading

from config import load_config
from core.errors import BaseSlugError, InvalidParameter
from slugs.generator import generate_slug, slug_timestamp
from slugs.precision import Precision
from utils.timestamp import format_timestamp, read_clock


class SlugService:
    """Issues slugs with configured defaults and keeps issuance counters."""

    def __init__(self, config=None, clock=read_clock, randbytes=os.urandom):
        self.config = config or load_config().slugs
        self._clock = clock
        self._randbytes = randbytes
        self._lock = threading.Lock()
        self._issued = {p.unit: 0 for p in Precision}
        self.failures = 0

    def generate(self, length=None):
        return self.generate_many(1, length)[0]

    def generate_many(self, count, length=None):
        if length is None:
            length = self.config.default_length
        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= self.config.max_batch:
            raise InvalidParameter(
                f"count must be between 1 and {self.config.max_batch}",
                name="count",
                value=count,
            )

        try:
            slugs = [
                generate_slug(length, clock=self._clock, randbytes=self._randbytes, sampling=self.config.sampling)
                for _ in range(count)
            ]
        except BaseSlugError:
            with self._lock:
                self.failures += 1
            raise

        with self._lock:
            self._issued[Precision(length).unit] += count
        return slugs

    def describe(self, slug):
        precision, value = slug_timestamp(slug)
        epoch_us = value * 1_000_000 // precision.per_second
        return {
            "slug": slug,
            "precision": precision.unit,
            "length": precision.value,
            "digits": str(value).zfill(precision.value),
            "value": value,
            "timestamp": format_timestamp(epoch_us),
        }

    def get_stats(self):
        with self._lock:
            return {
                "issued": dict(self._issued),
                "total_issued": sum(self._issued.values()),
                "failures": self.failures,
            }
