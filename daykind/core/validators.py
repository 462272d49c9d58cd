import datetime
from zoneinfo import ZoneInfo

from fastapi import HTTPException, status

from daykind.core.config import ConfigurationError, get_max_span_days, get_timezone
from daykind.core.day_kind import DayKind
from daykind.core.time_utils import parse_instant, to_utc

MIN_YEAR = 1583  # första hela gregorianska året
MAX_YEAR = 9998


def validate_timezone(name: str | None) -> ZoneInfo:
    """
    Slå upp tidszonen för en request.

    Saknas namn används standardtidszonen. Okänd tidszon ger HTTP 400.
    """
    try:
        return get_timezone(name)
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e


def validate_kind(value: str) -> DayKind:
    """Tolka kind-parametern ("weekday", "day_before_holiday", "holiday")."""
    try:
        return DayKind(value.strip().lower())
    except ValueError as e:
        allowed = ", ".join(kind.value for kind in DayKind)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown day kind {value!r}, expected one of: {allowed}",
        ) from e


def validate_instant(value: str, tz: ZoneInfo, field_name: str) -> datetime.datetime:
    """
    Tolka en ISO 8601-tidpunkt i tz, ogiltigt värde ger HTTP 400.

    Året kontrolleras efter konvertering till tz, eftersom slicern alltid
    räknar fram nästa dags midnatt.
    """
    try:
        instant = parse_instant(value, tz)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {field_name}: {e}",
        ) from e
    validate_year(instant.year)
    return instant


def validate_span(start: datetime.datetime, end: datetime.datetime) -> None:
    """
    Säkerställ att intervallet inte är för långt.

    Ordningen (start före end) kontrolleras av slicern själv.
    """
    max_days = get_max_span_days()
    if to_utc(end) - to_utc(start) > datetime.timedelta(days=max_days):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Range spans more than {max_days} days",
        )


def validate_year(year: int) -> int:
    """Year must lie within the Gregorian range the Easter algorithm supports."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
        )
    return year
