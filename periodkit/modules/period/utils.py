import logging
import re
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta, MO, SU

from periodkit.core.exceptions import InvalidTimezoneFormatError
from periodkit.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# Labels that may precede the signed offset in a short timezone name ("GMT+2")
OFFSET_LABELS = ("GMT", "UTC")

# +H, +HH, +HHMM, +HH:MM, optionally followed by seconds as strftime("%z") emits
OFFSET_PATTERN = re.compile(r"([+-])(\d{1,2})(?::?(\d{2}))?(?::?(\d{2})(?:\.\d+)?)?")


def parse_offset_minutes(offset_text: Optional[str]) -> int:
    """
    Convert an offset text such as "GMT+2", "+0530" or "-03:30" to minutes.

    Only the hour component is counted; minute remainders are dropped, so
    "+05:30" gives 300. Absent text (including a bare "GMT") means UTC.

    Raises:
        InvalidTimezoneFormatError: if text is present but not an offset
    """
    if not offset_text:
        return 0

    text = offset_text.strip()
    if text[:3].upper() in OFFSET_LABELS:
        text = text[3:]
    if not text:
        return 0

    match = OFFSET_PATTERN.fullmatch(text)
    if not match:
        raise InvalidTimezoneFormatError(offset_text)

    sign, hour = match.group(1), match.group(2)
    return int(sign + hour) * 60


def get_utc_offset(timezone_name: Optional[str], at: Optional[datetime] = None) -> int:
    """
    Resolve an IANA timezone to its UTC offset in minutes at a given instant.

    Args:
        timezone_name: IANA timezone such as "Europe/Paris"
        at: Instant to resolve the offset for (defaults to now)

    Returns:
        Signed offset in whole minutes, 0 if the timezone is empty or unknown
    """
    if not timezone_name:
        return 0

    try:
        tz = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {timezone_name!r}, falling back to UTC")
        return 0

    instant = at if at is not None else utc_now()
    offset_text = instant.astimezone(tz).strftime("%z")
    minutes = parse_offset_minutes(offset_text)
    logger.debug(f"Resolved timezone {timezone_name} ({offset_text}) to {minutes} minutes")
    return minutes


class PeriodUtils:
    @staticmethod
    def start_of_day(dt: datetime) -> datetime:
        return dt.replace(hour=0, minute=0, second=0, microsecond=0)

    @staticmethod
    def end_of_day(dt: datetime) -> datetime:
        return dt.replace(hour=23, minute=59, second=59, microsecond=999999)

    @staticmethod
    def start_of_week(dt: datetime) -> datetime:
        """Monday of the ISO week containing dt, at 00:00."""
        return PeriodUtils.start_of_day(dt + relativedelta(weekday=MO(-1)))

    @staticmethod
    def end_of_week(dt: datetime) -> datetime:
        """Sunday of the ISO week containing dt, at end of day."""
        return PeriodUtils.end_of_day(dt + relativedelta(weekday=SU(+1)))

    @staticmethod
    def start_of_month(dt: datetime) -> datetime:
        return PeriodUtils.start_of_day(dt + relativedelta(day=1))

    @staticmethod
    def end_of_month(dt: datetime) -> datetime:
        # day=31 clamps to the last day of shorter months
        return PeriodUtils.end_of_day(dt + relativedelta(day=31))
