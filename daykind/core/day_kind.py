"""Klassning av kalenderdagar: vardag, dag före helgdag eller helgdag."""

import datetime
import enum
import logging
from collections.abc import Callable

from daykind.core.holidays import UpcomingHoliday, next_upcoming_holiday
from daykind.core.time_utils import day_of_year, to_date

logger = logging.getLogger(__name__)

#: Signatur för helgdagskalendern som klassningen frågar.
HolidayLookup = Callable[[datetime.date], UpcomingHoliday]

SATURDAY = 5
SUNDAY = 6


class DayKind(enum.Enum):
    """Classification of a calendar day. Compared by equality only."""

    WEEKDAY = "weekday"
    DAY_BEFORE_HOLIDAY = "day_before_holiday"
    HOLIDAY = "holiday"

    def next_start(
        self,
        dt: datetime.datetime,
        next_holiday: HolidayLookup = next_upcoming_holiday,
    ) -> datetime.datetime:
        """
        Returns the next occurrence of this kind.

        If dt already falls on a day of this kind, dt itself is returned.
        """
        return next_start(self, dt, next_holiday=next_holiday)


def classify_day(
    day: datetime.date,
    next_holiday: HolidayLookup = next_upcoming_holiday,
) -> DayKind:
    """
    Klassar en dag.

    - Söndag är alltid helgdag.
    - Dagen som är nästa helgdag är helgdag.
    - Dagen före nästa helgdag, och varje lördag, är dag före helgdag.
    - Allt annat är vardag.

    Jämförelsen görs på dagnummer inom året. Kalendern måste därför lista
    nyårsafton som egen helgdag; 31 december ses annars inte som dagen
    före 1 januari.

    Args:
        day: Datum, eller tidszonsmedveten datetime (dess lokala datum används)
        next_holiday: Helgdagskalender som ger närmaste helgdag på eller efter ett datum

    Returns:
        DayKind för dagen
    """
    day = to_date(day)
    weekday = day.weekday()
    if weekday == SUNDAY:
        return DayKind.HOLIDAY

    ordinal = day_of_year(day)
    holiday_ordinal = next_holiday(day).ordinal

    # Helgdag går före dag-före-helgdag
    if ordinal == holiday_ordinal:
        return DayKind.HOLIDAY
    if ordinal == holiday_ordinal - 1 or weekday == SATURDAY:
        return DayKind.DAY_BEFORE_HOLIDAY
    return DayKind.WEEKDAY


def day_kind(day: datetime.date) -> DayKind:
    """Classify day against the bundled Swedish calendar."""
    return classify_day(day)


def next_start(
    kind: DayKind,
    dt: datetime.datetime,
    next_holiday: HolidayLookup = next_upcoming_holiday,
) -> datetime.datetime:
    """
    Returnerar starten på nästa period av given typ, med dt inräknad.

    Kör slicern utan slut från dt och tar första skivan av rätt typ.
    Ingen övre gräns finns; varje typ återkommer inom en vecka.

    Args:
        kind: Efterfrågad DayKind
        dt: Tidszonsmedveten starttidpunkt
        next_holiday: Helgdagskalender

    Returns:
        dt om dt redan är av typen kind, annars lokal midnatt då typen börjar
    """
    from .slicing import slice_from

    match = next(s for s in slice_from(dt, next_holiday=next_holiday) if s.kind == kind)
    logger.debug("Next %s from %s starts at %s", kind.value, dt.isoformat(), match.start.isoformat())
    return match.start
