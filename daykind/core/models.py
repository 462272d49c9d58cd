import datetime

from pydantic import BaseModel

from daykind.core.day_kind import DayKind
from daykind.core.slicing import DayKindSlice


class DayKindResponse(BaseModel):
    """Classification of a single calendar date."""
    date: datetime.date
    kind: DayKind
    holiday: str | None = None


class SliceListResponse(BaseModel):
    """Slices covering a requested range."""
    timezone: str
    start: datetime.datetime
    end: datetime.datetime
    slices: list[DayKindSlice]


class NextStartResponse(BaseModel):
    """Start of the next period of a kind."""
    kind: DayKind
    start: datetime.datetime
    next_start: datetime.datetime


class HolidayEntry(BaseModel):
    """One holiday in the bundled calendar."""
    date: datetime.date
    ordinal: int
    name: str


class HolidayListResponse(BaseModel):
    """All holidays of one year."""
    year: int
    country: str
    holidays: list[HolidayEntry]
