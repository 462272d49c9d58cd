# daykind/core/config.py

import os
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class ConfigurationError(RuntimeError):
    """Raised when an environment setting cannot be used."""


# ==========================
# Tidszon och kalender
# ==========================

#: Tidszon som används när anroparen inte anger någon.
#: Helgdagskalendern är svensk, så Stockholm är den naturliga standarden.
DEFAULT_TIMEZONE: Final[str] = "Europe/Stockholm"

#: Landskod för den helgdagskalender som följer med paketet.
DEFAULT_COUNTRY: Final[str] = "SE"

#: Miljövariabel som skriver över DEFAULT_TIMEZONE.
TIMEZONE_ENV_VAR: Final[str] = "DAYKIND_TIMEZONE"


# ==========================
# API-begränsningar
# ==========================

#: Största antal dagar ett intervall får spänna över i /api/day-kinds.
#: Slicern kostar en klassning per dag, så gränsen håller svarstiden nere.
MAX_SPAN_DAYS_DEFAULT: Final[int] = 3660

#: Miljövariabel som skriver över MAX_SPAN_DAYS_DEFAULT.
MAX_SPAN_DAYS_ENV_VAR: Final[str] = "DAYKIND_MAX_SPAN_DAYS"


def is_production() -> bool:
    """True when PRODUCTION=true is set in the environment."""
    return os.getenv("PRODUCTION", "false").lower() == "true"


def get_timezone(name: str | None = None) -> ZoneInfo:
    """
    Resolve a timezone by IANA name.

    Falls back to DAYKIND_TIMEZONE and then DEFAULT_TIMEZONE when no name is
    given. Unknown names raise ConfigurationError.
    """
    tz_name = (name or os.getenv(TIMEZONE_ENV_VAR, "") or DEFAULT_TIMEZONE).strip()
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown timezone: {tz_name!r}") from e


def get_max_span_days() -> int:
    """Maximum number of days an API range may span."""
    raw = os.getenv(MAX_SPAN_DAYS_ENV_VAR, "").strip()
    if not raw:
        return MAX_SPAN_DAYS_DEFAULT
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{MAX_SPAN_DAYS_ENV_VAR} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ConfigurationError(f"{MAX_SPAN_DAYS_ENV_VAR} must be positive, got {value}")
    return value
