"""Uppdelning av tidsintervall i sammanhängande perioder med samma DayKind."""

import datetime
import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from daykind.core.day_kind import DayKind, HolidayLookup, classify_day
from daykind.core.errors import InvalidRangeError, TimezoneMismatchError
from daykind.core.holidays import next_upcoming_holiday
from daykind.core.time_utils import ensure_aware, next_local_midnight, to_utc

logger = logging.getLogger(__name__)


class DayKindSlice(BaseModel):
    """Half-open range [start, end) over which every instant has the same kind."""

    model_config = ConfigDict(frozen=True)

    start: datetime.datetime
    end: datetime.datetime
    kind: DayKind

    @property
    def range(self) -> tuple[datetime.datetime, datetime.datetime]:
        return self.start, self.end

    @property
    def duration(self) -> datetime.timedelta:
        # Samma tzinfo ger väggklocksdifferens, så räkna i UTC
        return to_utc(self.end) - to_utc(self.start)

    def contains(self, dt: datetime.datetime) -> bool:
        return to_utc(self.start) <= to_utc(dt) < to_utc(self.end)


def slice_on_day_kind(
    start: datetime.datetime,
    end: datetime.datetime,
    next_holiday: HolidayLookup = next_upcoming_holiday,
) -> Iterator[DayKindSlice]:
    """
    Delar upp [start, end) i maximala perioder med samma DayKind.

    Första perioden börjar exakt på start och sista slutar exakt på end,
    även mitt på dagen. Alla gränser däremellan ligger på lokal midnatt.
    Sekvensen är lat; anropa igen med samma argument för att börja om.

    Args:
        start: Tidszonsmedveten start (inklusive)
        end: Tidszonsmedvetet slut (exklusive), i samma tidszon som start
        next_holiday: Helgdagskalender

    Returns:
        Iterator av DayKindSlice i tidsordning

    Raises:
        NaiveDatetimeError: start eller end saknar tidszon
        TimezoneMismatchError: start och end har olika tidszon
        InvalidRangeError: start ligger efter end
    """
    ensure_aware(start, "start")
    ensure_aware(end, "end")

    if start.tzinfo != end.tzinfo:
        logger.error("Range endpoints in different timezones. start=%s end=%s", start.tzinfo, end.tzinfo)
        raise TimezoneMismatchError(f"start and end must share one timezone, got {start.tzinfo} and {end.tzinfo}")

    if to_utc(start) > to_utc(end):
        logger.error("Range start after end. start=%s end=%s", start.isoformat(), end.isoformat())
        raise InvalidRangeError(f"Range start {start.isoformat()} is after end {end.isoformat()}")

    logger.debug("Slicing %s -> %s on day kind", start.isoformat(), end.isoformat())
    return _iter_slices(start, end, next_holiday)


def slice_from(
    start: datetime.datetime,
    next_holiday: HolidayLookup = next_upcoming_holiday,
) -> Iterator[DayKindSlice]:
    """
    Som slice_on_day_kind men utan slut.

    Sekvensen tar aldrig slut av sig själv; anroparen måste sluta läsa.
    """
    ensure_aware(start, "start")
    return _iter_slices(start, None, next_holiday)


def _iter_slices(
    start: datetime.datetime,
    end: datetime.datetime | None,
    next_holiday: HolidayLookup,
) -> Iterator[DayKindSlice]:
    """Stegar fram en lokal midnatt i taget och ger en period per typbyte."""
    cursor = start
    kind: DayKind | None = None

    while end is None or to_utc(cursor) < to_utc(end):
        if kind is None:
            kind = classify_day(cursor, next_holiday)

        step = cursor
        while True:
            next_midnight = next_local_midnight(step)

            if end is not None and to_utc(end) < to_utc(next_midnight):
                yield DayKindSlice(start=cursor, end=end, kind=kind)
                return

            # Typen vid gränsen följer med till nästa period
            next_kind = classify_day(next_midnight, next_holiday)
            if next_kind != kind:
                yield DayKindSlice(start=cursor, end=next_midnight, kind=kind)
                cursor, kind = next_midnight, next_kind
                break

            step = next_midnight
