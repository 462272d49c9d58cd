# daykind/routes/day_kinds.py
"""
API endpoints for day kind classification, range slicing and next start.
"""

import datetime

from fastapi import APIRouter, HTTPException, status

from daykind.core.config import DEFAULT_COUNTRY
from daykind.core.day_kind import classify_day, next_start
from daykind.core.errors import DayKindError
from daykind.core.holidays import holiday_name, holidays_for_year
from daykind.core.logging_config import get_logger
from daykind.core.models import (
    DayKindResponse,
    HolidayEntry,
    HolidayListResponse,
    NextStartResponse,
    SliceListResponse,
)
from daykind.core.slicing import slice_on_day_kind
from daykind.core.time_utils import day_of_year
from daykind.core.validators import (
    validate_instant,
    validate_kind,
    validate_span,
    validate_timezone,
    validate_year,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["day_kinds"])


@router.get("/day-kind/{day}", response_model=DayKindResponse)
async def get_day_kind(day: datetime.date):
    """Classify a single calendar date."""
    validate_year(day.year)
    return DayKindResponse(date=day, kind=classify_day(day), holiday=holiday_name(day))


@router.get("/day-kinds", response_model=SliceListResponse)
async def get_day_kind_slices(start: str, end: str, tz: str | None = None):
    """Slice [start, end) into maximal runs of one day kind."""
    zone = validate_timezone(tz)
    start_dt = validate_instant(start, zone, "start")
    end_dt = validate_instant(end, zone, "end")

    try:
        slices = slice_on_day_kind(start_dt, end_dt)
        validate_span(start_dt, end_dt)
        result = list(slices)
    except DayKindError as e:
        logger.warning(f"Rejected range {start!r} -> {end!r}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return SliceListResponse(timezone=zone.key, start=start_dt, end=end_dt, slices=result)


@router.get("/day-kinds/next", response_model=NextStartResponse)
async def get_next_start(kind: str, start: str | None = None, tz: str | None = None):
    """Find the start of the next period of a kind, counting from start (default now)."""
    zone = validate_timezone(tz)
    target = validate_kind(kind)
    start_dt = validate_instant(start, zone, "start") if start is not None else datetime.datetime.now(zone)

    return NextStartResponse(kind=target, start=start_dt, next_start=next_start(target, start_dt))


@router.get("/holidays/{year}", response_model=HolidayListResponse)
async def get_holidays(year: int):
    """List the holidays of a year in the bundled calendar."""
    year = validate_year(year)
    holidays = [
        HolidayEntry(date=holiday_date, ordinal=day_of_year(holiday_date), name=name)
        for holiday_date, name in holidays_for_year(year)
    ]
    return HolidayListResponse(year=year, country=DEFAULT_COUNTRY, holidays=holidays)
