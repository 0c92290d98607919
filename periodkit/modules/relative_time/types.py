import math
from enum import Enum
from typing import List, Tuple


class RelativeTimeUnit(str, Enum):
    """Units understood by the CLDR relative-time patterns."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# Seconds per unit, matching the month/year lengths used by babel.dates
UNIT_SECONDS = {
    RelativeTimeUnit.SECOND: 1,
    RelativeTimeUnit.MINUTE: 60,
    RelativeTimeUnit.HOUR: 3600,
    RelativeTimeUnit.DAY: 86400,
    RelativeTimeUnit.WEEK: 604800,
    RelativeTimeUnit.MONTH: 2592000,
    RelativeTimeUnit.YEAR: 31536000,
}

# (exclusive upper bound in seconds, unit), ascending
TIME_AGO_RANGES: List[Tuple[float, RelativeTimeUnit]] = [
    (60, RelativeTimeUnit.SECOND),  # < 1 minute
    (3600, RelativeTimeUnit.MINUTE),  # < 1 hour
    (86400, RelativeTimeUnit.HOUR),  # < 1 day
    (604800, RelativeTimeUnit.DAY),  # < 1 week
    (2592000, RelativeTimeUnit.WEEK),  # < 1 month
    (31536000, RelativeTimeUnit.MONTH),  # < 1 year
    (math.inf, RelativeTimeUnit.YEAR),
]
