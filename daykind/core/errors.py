"""Fel som kastas vid ogiltiga indata till slicern."""


class DayKindError(ValueError):
    """Base class for invalid input to the day kind operations."""


class InvalidRangeError(DayKindError):
    """Range start lies after its end."""


class NaiveDatetimeError(DayKindError):
    """A datetime without tzinfo was passed where a local instant is required."""


class TimezoneMismatchError(DayKindError):
    """Range start and end are expressed in different timezones."""
