"""Slug errors, distinguishable by type."""

from utils.timestamp import format_timestamp


class BaseSlugError(Exception):
    """Base error carrying context and the time it was raised."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.message = message
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        return {"error": type(self).__name__, "message": self.message, "context": self.context}


class InvalidParameter(BaseSlugError):
    """Caller passed a value outside the accepted set."""

    def __init__(self, message, name=None, value=None, allowed=None, **kwargs):
        context = kwargs.pop("context", {})
        if name:
            context["parameter"] = name
            context["value"] = value
        if allowed is not None:
            context["allowed"] = list(allowed)
        super().__init__(message, context=context, **kwargs)


class InvalidSlug(InvalidParameter):
    """String is not a well-formed slug."""


class ClockUnavailable(BaseSlugError):
    """Wall clock could not be read or returned an unusable reading."""


class TimestampOverflow(ClockUnavailable):
    """Timestamp does not fit the fixed digit width of its precision."""

    def __init__(self, message, value=None, width=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(value=value, width=width)
        super().__init__(message, context=context, **kwargs)


class RandomnessUnavailable(BaseSlugError):
    """Strong random source failed to supply bytes."""
