"""Svensk helgdagskalender."""

import datetime
import logging
from collections.abc import Callable
from functools import lru_cache
from typing import NamedTuple

from daykind.core.time_utils import day_of_year, to_date

logger = logging.getLogger(__name__)


class UpcomingHoliday(NamedTuple):
    """Nearest holiday on or after a queried date."""

    ordinal: int
    date: datetime.date
    name: str


def easter_sunday(year: int) -> datetime.date:
    """Anonymous Gregorian algorithm."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return datetime.date(year, month, day)


def _first_weekday_from(date_: datetime.date, weekday: int) -> datetime.date:
    """First date on or after date_ falling on weekday (0 = Monday)."""
    return date_ + datetime.timedelta(days=(weekday - date_.weekday()) % 7)


def nyarsdagen(year: int) -> datetime.date:
    """New Year's Day: January 1st."""
    return datetime.date(year, 1, 1)


def trettondagen(year: int) -> datetime.date:
    """Epiphany / January 6."""
    return datetime.date(year, 1, 6)


def langfredagen(year: int) -> datetime.date:
    """Good Friday (Långfredagen): Friday before Easter Sunday."""
    return easter_sunday(year) - datetime.timedelta(days=2)


def annandagpask(year: int) -> datetime.date:
    """Easter Monday: the day after Easter Sunday."""
    return easter_sunday(year) + datetime.timedelta(days=1)


def forsta_maj(year: int) -> datetime.date:
    """May 1st (Labour Day)."""
    return datetime.date(year, 5, 1)


def kristi_himmelsfardsdag(year: int) -> datetime.date:
    """Ascension Day: 39 days after Easter Sunday (Thursday)."""
    return easter_sunday(year) + datetime.timedelta(days=39)


def pingstdagen(year: int) -> datetime.date:
    """Pentecost: 49 days after Easter Sunday."""
    return easter_sunday(year) + datetime.timedelta(days=49)


def nationaldagen(year: int) -> datetime.date:
    """Swedish National Day, June 6th."""
    return datetime.date(year, 6, 6)


def midsommarafton(year: int) -> datetime.date:
    """Friday between 19 and 25 June."""
    return _first_weekday_from(datetime.date(year, 6, 19), 4)


def midsommardagen(year: int) -> datetime.date:
    """Saturday between 20 and 26 June."""
    return midsommarafton(year) + datetime.timedelta(days=1)


def alla_helgons_dag(year: int) -> datetime.date:
    """Saturday between 31 Oct and 6 Nov."""
    return _first_weekday_from(datetime.date(year, 10, 31), 5)


def julafton(year: int) -> datetime.date:
    """Christmas Eve: December 24th."""
    return datetime.date(year, 12, 24)


def juldagen(year: int) -> datetime.date:
    """Christmas Day: December 25th."""
    return datetime.date(year, 12, 25)


def annandag_jul(year: int) -> datetime.date:
    """Boxing Day: December 26th."""
    return datetime.date(year, 12, 26)


def nyarsafton(year: int) -> datetime.date:
    """New Year's Eve: December 31st."""
    return datetime.date(year, 12, 31)


# Påskafton och pingstafton är alltid lördagar och listas inte här;
# lördagar blir dag före helgdag ändå eftersom söndagen alltid är helgdag.
# Nyårsafton måste finnas med: klassningen jämför dagnummer inom samma år
# och kan inte se att 31 december ligger dagen före 1 januari.
_HOLIDAYS: tuple[tuple[str, Callable[[int], datetime.date]], ...] = (
    ("Nyårsdagen", nyarsdagen),
    ("Trettondedag jul", trettondagen),
    ("Långfredagen", langfredagen),
    ("Påskdagen", easter_sunday),
    ("Annandag påsk", annandagpask),
    ("Första maj", forsta_maj),
    ("Kristi himmelsfärdsdag", kristi_himmelsfardsdag),
    ("Pingstdagen", pingstdagen),
    ("Sveriges nationaldag", nationaldagen),
    ("Midsommarafton", midsommarafton),
    ("Midsommardagen", midsommardagen),
    ("Alla helgons dag", alla_helgons_dag),
    ("Julafton", julafton),
    ("Juldagen", juldagen),
    ("Annandag jul", annandag_jul),
    ("Nyårsafton", nyarsafton),
)


@lru_cache(maxsize=32)
def holidays_for_year(year: int) -> tuple[tuple[datetime.date, str], ...]:
    """
    Returnerar årets helgdagar som (datum, namn), sorterade på datum.

    Cachas per år eftersom klassningen frågar om samma år för varje dag.
    """
    days = sorted((compute(year), name) for name, compute in _HOLIDAYS)
    logger.debug("Built holiday calendar for %s (%d holidays)", year, len(days))
    return tuple(days)


def next_upcoming_holiday(day: datetime.date) -> UpcomingHoliday:
    """
    Returnerar närmaste helgdag på eller efter day.

    Tittar in i nästa år när inget återstår i innevarande år.
    """
    day = to_date(day)

    for holiday_date, name in holidays_for_year(day.year):
        if holiday_date >= day:
            return UpcomingHoliday(day_of_year(holiday_date), holiday_date, name)

    holiday_date, name = holidays_for_year(day.year + 1)[0]
    return UpcomingHoliday(day_of_year(holiday_date), holiday_date, name)


def holiday_name(day: datetime.date) -> str | None:
    """Name of the holiday falling on day, or None."""
    day = to_date(day)
    for holiday_date, name in holidays_for_year(day.year):
        if holiday_date == day:
            return name
    return None


def is_holiday(day: datetime.date) -> bool:
    """True if day is a listed holiday (Sundays are not listed)."""
    return holiday_name(day) is not None
