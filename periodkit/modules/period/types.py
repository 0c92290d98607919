from enum import Enum


class DateFormat(str, Enum):
    """Output patterns used to render range boundaries."""

    RFC3339 = "%Y-%m-%dT%H:%M:%S.%fZ"  # literal Z, whatever the offset
    YYYY_MM_DD = "%Y-%m-%d"


class PresetDateRange(str, Enum):
    """Named calendar periods that need no parameters."""

    TODAY = "TODAY"
    YESTERDAY = "YESTERDAY"
    THIS_WEEK = "THIS_WEEK"
    LAST_WEEK = "LAST_WEEK"
    THIS_MONTH = "THIS_MONTH"
    LAST_MONTH = "LAST_MONTH"
