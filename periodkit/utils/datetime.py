import logging
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

DateInput = Union[datetime, date, str, int, float]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_user_timezone(dt: datetime, utc_offset_minutes: int) -> datetime:
    """Shift an aware datetime to a fixed UTC offset given in minutes."""
    return dt.astimezone(timezone(timedelta(minutes=utc_offset_minutes)))


def to_aware_datetime(value: DateInput) -> Optional[datetime]:
    """
    Coerce a datetime, date, ISO-8601 string or epoch milliseconds to an
    aware datetime.

    Naive values are taken to be UTC. Returns None when the value cannot be
    interpreted as an instant.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug(f"Epoch milliseconds out of range: {value}")
            return None

    if isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError):
            logger.debug(f"Not an ISO-8601 timestamp: {value!r}")
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    return None
