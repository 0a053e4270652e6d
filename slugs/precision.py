from enum import IntEnum

from core.errors import InvalidParameter

ALLOWED_HINT = "10=seconds, 13=milliseconds, 16=microseconds, 19=nanoseconds"


class Precision(IntEnum):
    """Timestamp precision; the value is the digit count of the rendered timestamp."""
    SECONDS = 10
    MILLISECONDS = 13
    MICROSECONDS = 16
    NANOSECONDS = 19

    @property
    def unit(self):
        return self.name.lower()

    @property
    def per_second(self):
        return 10 ** (self.value - 10)

    @property
    def nanos_per_unit(self):
        return 10 ** (19 - self.value)

    @classmethod
    def from_length(cls, length):
        # bool is an int subclass but never a length
        if isinstance(length, bool) or not isinstance(length, int) or length not in cls._value2member_map_:
            raise InvalidParameter(
                f"slug length must be 10, 13, 16, or 19 ({ALLOWED_HINT})",
                name="length",
                value=length,
                allowed=[p.value for p in cls],
            )
        return cls(length)
