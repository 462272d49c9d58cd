import datetime
import logging
from zoneinfo import ZoneInfo

from daykind.core.errors import NaiveDatetimeError

logger = logging.getLogger(__name__)


def to_date(value: datetime.date) -> datetime.date:
    """Local calendar date of a date or datetime."""
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def day_of_year(value: datetime.date) -> int:
    """1-based ordinal of the date within its year."""
    return to_date(value).timetuple().tm_yday


def ensure_aware(dt: datetime.datetime, field_name: str = "datetime") -> datetime.datetime:
    """Return dt unchanged, or raise NaiveDatetimeError if it carries no timezone."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        logger.error("Naive %s passed where a local instant is required: %r", field_name, dt)
        raise NaiveDatetimeError(f"{field_name} must be timezone-aware, got {dt.isoformat()}")
    return dt


def to_utc(dt: datetime.datetime) -> datetime.datetime:
    """Same instant in UTC. Jämförelser i samma tzinfo sker på väggtid och ignorerar fold."""
    return dt.astimezone(datetime.timezone.utc)


def local_midnight(day: datetime.date, tz: datetime.tzinfo) -> datetime.datetime:
    """
    Start of the calendar day in tz.

    Handles:
    1) ordinary days: 00:00 local time
    2) DST gaps over midnight: the first wall-clock time that exists that day
    """
    wall = datetime.datetime.combine(to_date(day), datetime.time(0, 0), tzinfo=tz)
    # Rundtur via UTC flyttar en obefintlig väggtid till första giltiga tidpunkt
    return wall.astimezone(datetime.timezone.utc).astimezone(tz)


def next_local_midnight(dt: datetime.datetime) -> datetime.datetime:
    """Local midnight of the calendar day following dt, in dt's own timezone."""
    ensure_aware(dt)
    return local_midnight(dt.date() + datetime.timedelta(days=1), dt.tzinfo)


def parse_instant(value: str, tz: ZoneInfo) -> datetime.datetime:
    """Parse an ISO 8601 string into an aware datetime in tz.

    Handles:
    1) "YYYY-MM-DD" (midnight in tz)
    2) naive "YYYY-MM-DDTHH:MM[:SS]" (wall-clock time in tz)
    3) offset or "Z" suffixed strings (converted to tz)
    4) error handling via logging + ValueError
    """
    s = value.strip() if isinstance(value, str) else value
    if not s:
        logger.error("Instant is empty. value=%r tz=%s", value, tz)
        raise ValueError("Instant is empty")

    try:
        parsed = datetime.datetime.fromisoformat(s)
    except (TypeError, ValueError) as e:
        logger.warning("Failed parsing instant as ISO 8601. value=%r tz=%s", value, tz)
        raise ValueError(f"Invalid ISO 8601 instant: {value!r}") from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)
