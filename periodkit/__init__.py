"""Calendar-aligned date ranges and relative time phrases."""

from periodkit.core.exceptions import (
    InvalidTimezoneFormatError,
    PeriodKitError,
    UnsupportedDateFormatError,
    UnsupportedPresetError,
)
from periodkit.modules.period.dto import DateRangeResult
from periodkit.modules.period.service import Period
from periodkit.modules.period.types import DateFormat, PresetDateRange
from periodkit.modules.period.utils import get_utc_offset, parse_offset_minutes
from periodkit.modules.relative_time.service import time_ago

__version__ = "1.0.0"

__all__ = [
    "DateFormat",
    "DateRangeResult",
    "InvalidTimezoneFormatError",
    "Period",
    "PeriodKitError",
    "PresetDateRange",
    "UnsupportedDateFormatError",
    "UnsupportedPresetError",
    "get_utc_offset",
    "parse_offset_minutes",
    "time_ago",
]
