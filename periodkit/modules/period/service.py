import logging
from datetime import datetime
from typing import Callable, Dict, Optional, Union

from dateutil.relativedelta import relativedelta

from periodkit.core.exceptions import UnsupportedDateFormatError, UnsupportedPresetError
from periodkit.modules.period.dto import DateRangeResult
from periodkit.modules.period.types import DateFormat, PresetDateRange
from periodkit.modules.period.utils import PeriodUtils, get_utc_offset
from periodkit.utils.datetime import to_user_timezone, utc_now

logger = logging.getLogger(__name__)


def _coerce_date_format(date_format: Union[DateFormat, str]) -> DateFormat:
    if isinstance(date_format, DateFormat):
        return date_format
    if isinstance(date_format, str):
        if date_format in DateFormat.__members__:
            return DateFormat[date_format]
        try:
            return DateFormat(date_format)
        except ValueError:
            pass
    raise UnsupportedDateFormatError(date_format)


def _coerce_preset(preset: Union[PresetDateRange, str]) -> PresetDateRange:
    if isinstance(preset, PresetDateRange):
        return preset
    if isinstance(preset, str):
        try:
            return PresetDateRange(preset)
        except ValueError:
            pass
    raise UnsupportedPresetError(preset)


class Period:
    """
    Calendar-aligned date ranges in a fixed timezone offset.

    The offset is resolved once, when the period is built. Build a new
    Period to pick up a different offset (e.g. after a DST change).
    """

    def __init__(
        self, date_format: Union[DateFormat, str], timezone: Optional[str] = None
    ):
        """
        Args:
            date_format: Pattern used to render range boundaries
            timezone: IANA timezone such as "Europe/Paris" (defaults to UTC)
        """
        self._date_format = _coerce_date_format(date_format)
        self._timezone = timezone
        self._utc_offset = self.get_offset(timezone) if timezone else 0

    @property
    def timezone(self) -> Optional[str]:
        return self._timezone

    @property
    def utc_offset(self) -> int:
        """Offset from UTC in minutes, as resolved at construction."""
        return self._utc_offset

    @property
    def date_format(self) -> DateFormat:
        return self._date_format

    def __repr__(self) -> str:
        return (
            f"Period(date_format={self._date_format.name}, "
            f"timezone={self._timezone!r}, utc_offset={self._utc_offset})"
        )

    def get_offset(self, timezone: str) -> int:
        """Difference in minutes between timezone and UTC right now; 0 if unknown."""
        return get_utc_offset(timezone)

    # Preset ranges
    # ============================================================================

    def today(self) -> DateRangeResult:
        now = self._now()
        return self._render(PeriodUtils.start_of_day(now), PeriodUtils.end_of_day(now))

    def yesterday(self) -> DateRangeResult:
        day = self._now() - relativedelta(days=1)
        return self._render(PeriodUtils.start_of_day(day), PeriodUtils.end_of_day(day))

    def this_week(self) -> DateRangeResult:
        now = self._now()
        return self._render(PeriodUtils.start_of_week(now), PeriodUtils.end_of_week(now))

    def last_week(self) -> DateRangeResult:
        day = self._now() - relativedelta(weeks=1)
        return self._render(PeriodUtils.start_of_week(day), PeriodUtils.end_of_week(day))

    def this_month(self) -> DateRangeResult:
        now = self._now()
        return self._render(PeriodUtils.start_of_month(now), PeriodUtils.end_of_month(now))

    def last_month(self) -> DateRangeResult:
        day = self._now() - relativedelta(months=1)
        return self._render(PeriodUtils.start_of_month(day), PeriodUtils.end_of_month(day))

    def create_defined_range(
        self, preset: Union[PresetDateRange, str]
    ) -> DateRangeResult:
        """Compute one of the named calendar periods."""
        handlers: Dict[PresetDateRange, Callable[[], DateRangeResult]] = {
            PresetDateRange.TODAY: self.today,
            PresetDateRange.YESTERDAY: self.yesterday,
            PresetDateRange.THIS_WEEK: self.this_week,
            PresetDateRange.LAST_WEEK: self.last_week,
            PresetDateRange.THIS_MONTH: self.this_month,
            PresetDateRange.LAST_MONTH: self.last_month,
        }
        handler = handlers.get(_coerce_preset(preset))
        if handler is None:
            raise UnsupportedPresetError(preset)
        return handler()

    # Custom ranges
    # ============================================================================

    def create_past_date_range(
        self, prev_days: int, including_today: bool
    ) -> DateRangeResult:
        """
        Range ending now (or one day ago) and starting prev_days before that.

        Boundaries are not aligned to day start/end. A negative prev_days
        gives a range whose start lies after its end.
        """
        end = self._now()
        if not including_today:
            end -= relativedelta(days=1)
        start = end - relativedelta(days=prev_days)
        return self._render(start, end)

    # Helper methods
    # ============================================================================

    def _now(self) -> datetime:
        return to_user_timezone(utc_now(), self._utc_offset)

    def _render(self, start: datetime, end: datetime) -> DateRangeResult:
        return DateRangeResult(
            start=start.strftime(self._date_format.value),
            end=end.strftime(self._date_format.value),
        )
