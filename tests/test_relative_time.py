"""Tests for relative time formatting."""

import math
from datetime import date, datetime, timedelta, timezone

import pytest
from babel.core import UnknownLocaleError

from periodkit.modules.relative_time.service import render_relative, select_unit, time_ago
from periodkit.modules.relative_time.types import RelativeTimeUnit

NOW = datetime(2024, 5, 17, 13, 0, 0, tzinfo=timezone.utc)


def _ago(**kwargs) -> str:
    return time_ago(NOW - timedelta(**kwargs), now=NOW)


def _ahead(**kwargs) -> str:
    return time_ago(NOW + timedelta(**kwargs), now=NOW)


class TestSelectUnit:
    """Test the bucket table."""

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (0, (0, RelativeTimeUnit.SECOND)),
            (59, (59, RelativeTimeUnit.SECOND)),
            (-59, (-59, RelativeTimeUnit.SECOND)),
            (60, (1, RelativeTimeUnit.MINUTE)),
            (3599, (60, RelativeTimeUnit.MINUTE)),
            (3600, (1, RelativeTimeUnit.HOUR)),
            (86399, (24, RelativeTimeUnit.HOUR)),
            (86400, (1, RelativeTimeUnit.DAY)),
            (604799, (7, RelativeTimeUnit.DAY)),
            (604800, (1, RelativeTimeUnit.WEEK)),
            (2591999, (4, RelativeTimeUnit.WEEK)),
            (2592000, (1, RelativeTimeUnit.MONTH)),
            (31535999, (12, RelativeTimeUnit.MONTH)),
            (31536000, (1, RelativeTimeUnit.YEAR)),
            (-315360000, (-10, RelativeTimeUnit.YEAR)),
        ],
    )
    def test_bucket_boundaries(self, delta, expected):
        assert select_unit(delta) == expected

    def test_nan_delta_falls_through_to_zero_seconds(self):
        assert select_unit(math.nan) == (0, RelativeTimeUnit.SECOND)

    def test_halves_round_towards_positive_infinity(self):
        assert select_unit(90) == (2, RelativeTimeUnit.MINUTE)
        assert select_unit(-90) == (-1, RelativeTimeUnit.MINUTE)
        assert select_unit(-5400) == (-1, RelativeTimeUnit.HOUR)
        assert select_unit(5400) == (2, RelativeTimeUnit.HOUR)


class TestRenderRelative:
    """Test locale-aware rendering of a value and unit."""

    def test_english_past_and_future(self):
        assert render_relative(-3, RelativeTimeUnit.HOUR) == "3 hours ago"
        assert render_relative(2, RelativeTimeUnit.DAY) == "in 2 days"

    def test_english_singular(self):
        assert render_relative(-1, RelativeTimeUnit.WEEK) == "1 week ago"

    def test_french(self):
        assert render_relative(1, RelativeTimeUnit.HOUR, "fr") == "dans 1 heure"
        assert render_relative(-2, RelativeTimeUnit.DAY, "fr") == "il y a 2 jours"

    def test_accepts_hyphenated_locale(self):
        assert render_relative(-5, RelativeTimeUnit.MINUTE, "en-US") == "5 minutes ago"


class TestTimeAgo:
    """Test time_ago end to end with a fixed reference instant."""

    def test_one_minute_ago(self):
        assert _ago(minutes=1) == "1 minute ago"

    def test_in_one_hour(self):
        assert _ahead(hours=1) == "in 1 hour"

    def test_seconds(self):
        assert _ago(seconds=30) == "30 seconds ago"
        assert _ahead(seconds=59) == "in 59 seconds"

    def test_partial_seconds_are_floored(self):
        assert _ahead(seconds=59, milliseconds=900) == "in 59 seconds"
        assert _ago(milliseconds=500) == "1 second ago"

    def test_days_weeks_months_years(self):
        assert _ago(days=1) == "1 day ago"
        assert _ago(days=3) == "3 days ago"
        assert _ago(days=8) == "1 week ago"
        assert _ago(days=45) == "1 month ago"
        assert _ahead(days=75) == "in 3 months"
        assert _ago(days=400) == "1 year ago"

    def test_ninety_minutes_is_reported_in_hours(self):
        assert _ago(minutes=90) == "1 hour ago"
        assert _ahead(minutes=90) == "in 2 hours"

    def test_locale(self):
        assert time_ago(NOW + timedelta(hours=1), "fr", now=NOW) == "dans 1 heure"
        assert time_ago(NOW - timedelta(days=2), "de", now=NOW) == "vor 2 Tagen"

    def test_unknown_locale_propagates(self):
        with pytest.raises(UnknownLocaleError):
            time_ago(NOW - timedelta(hours=1), "xx", now=NOW)

    def test_iso_string_input(self):
        assert time_ago("2024-05-17T10:00:00Z", now=NOW) == "3 hours ago"

    def test_naive_inputs_are_utc(self):
        assert time_ago(datetime(2024, 5, 17, 10, 0), now=NOW) == "3 hours ago"
        assert time_ago("2024-05-17T10:00:00", now=NOW) == "3 hours ago"

    def test_epoch_milliseconds_input(self):
        epoch_ms = int(NOW.timestamp() * 1000) - 60000
        assert time_ago(epoch_ms, now=NOW) == "1 minute ago"

    def test_date_input(self):
        assert time_ago(date(2024, 5, 16), now=NOW) == "2 days ago"

    def test_aware_input_in_other_zone(self):
        paris = timezone(timedelta(hours=2))
        assert time_ago(datetime(2024, 5, 17, 14, 0, tzinfo=paris), now=NOW) == "1 hour ago"

    @pytest.mark.parametrize("value", ["not a date", "", "2024-13-45", float("nan"), object()])
    def test_unparseable_input_renders_zero_seconds(self, value, caplog):
        assert time_ago(value, now=NOW) == "in 0 seconds"
        assert "Cannot interpret" in caplog.text

    def test_unparseable_input_uses_locale(self):
        assert time_ago("not a date", "de", now=NOW) == "in 0 Sekunden"

    def test_defaults_to_current_time(self, freeze_now):
        freeze_now(2024, 5, 17, 13, 0)
        assert time_ago("2024-05-17T12:00:00Z") == "1 hour ago"
