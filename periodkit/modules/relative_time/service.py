import logging
import math
from datetime import datetime
from typing import Optional, Tuple

from babel.dates import format_timedelta

from periodkit.modules.relative_time.types import (
    TIME_AGO_RANGES,
    UNIT_SECONDS,
    RelativeTimeUnit,
)
from periodkit.utils.datetime import DateInput, to_aware_datetime, utc_now

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def select_unit(delta_seconds: float) -> Tuple[int, RelativeTimeUnit]:
    """
    Pick the display unit for a signed delta and the value to show with it.

    The value is the delta divided by the previous bucket's upper bound
    (1 for the first bucket), rounded half up. A NaN delta matches no
    bucket and comes out as zero seconds.
    """
    magnitude = abs(delta_seconds)
    previous_threshold = 1
    for threshold, unit in TIME_AGO_RANGES:
        if magnitude < threshold:
            return _round_half_up(delta_seconds / previous_threshold), unit
        previous_threshold = threshold
    return 0, RelativeTimeUnit.SECOND


def render_relative(value: int, unit: RelativeTimeUnit, locale: str = "en") -> str:
    """Render e.g. (-3, HOUR) as "3 hours ago" in the given locale."""
    return format_timedelta(
        value * UNIT_SECONDS[unit],
        granularity=unit.value,
        threshold=math.inf,
        add_direction=True,
        locale=locale.replace("-", "_"),
    )


def time_ago(
    date: DateInput, locale: str = "en", now: Optional[datetime] = None
) -> str:
    """
    Format an instant as a localized relative time such as "5 minutes ago"
    or "in 2 hours".

    Args:
        date: datetime, date, ISO-8601 string or epoch milliseconds
        locale: Locale identifier such as "en", "fr" or "pt-BR"
        now: Reference instant (defaults to the current time)

    Returns:
        The localized phrase. A date that cannot be interpreted renders as
        zero seconds ("in 0 seconds")

    Raises:
        babel.core.UnknownLocaleError: if locale has no CLDR data

    Examples:
        >>> time_ago(utc_now() - timedelta(minutes=1))
        '1 minute ago'
        >>> time_ago(utc_now() + timedelta(hours=1), "fr")
        'dans 1 heure'
    """
    target = to_aware_datetime(date)
    if target is None:
        logger.warning(f"Cannot interpret {date!r} as a date")
        delta_seconds = math.nan
    else:
        reference = to_aware_datetime(now) if now is not None else utc_now()
        delta_seconds = math.floor((target - reference).total_seconds())
    value, unit = select_unit(delta_seconds)
    return render_relative(value, unit, locale)
