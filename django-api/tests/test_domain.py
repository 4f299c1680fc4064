"""Unit tests for domain primitives and period resolution.

Run with: pytest tests/test_domain.py -v
"""

from datetime import date, datetime

import pytest

from events.domain import DateWindow, Period, Weekday
from events.domain.periods import month_window, resolve_period, week_window
from events.domain.value_objects import END_OF_DAY, end_of_day, start_of_day


class TestWeekday:
    """Tests for the fixed weekday enumeration."""

    def test_sunday_is_zero(self):
        """Sunday starts the week regardless of locale."""
        assert Weekday.of(date(2024, 6, 9)) is Weekday.SUN
        assert Weekday.SUN == 0

    def test_saturday_is_six(self):
        assert Weekday.of(date(2024, 6, 15)) is Weekday.SAT

    def test_abbreviations_in_week_order(self):
        assert Weekday.abbreviations() == ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

    def test_monday_abbreviation(self):
        assert Weekday.of(date(2024, 6, 10)).abbreviation == "Mon"


class TestDateWindow:
    """Tests for DateWindow bounds."""

    def test_bounds_are_inclusive(self):
        window = DateWindow(start=datetime(2024, 6, 1), end=datetime(2024, 6, 2))
        assert window.contains(datetime(2024, 6, 1))
        assert window.contains(datetime(2024, 6, 2))

    def test_outside_bounds(self):
        window = DateWindow(start=datetime(2024, 6, 1), end=datetime(2024, 6, 2))
        assert not window.contains(datetime(2024, 5, 31, 23, 59))
        assert not window.contains(datetime(2024, 6, 2, 0, 0, 1))

    def test_open_bounds_contain_everything(self):
        assert DateWindow().contains(datetime(1999, 1, 1))

    def test_for_day_spans_whole_day(self):
        window = DateWindow.for_day(date(2024, 6, 12))
        assert window.start == datetime(2024, 6, 12, 0, 0)
        assert window.end == datetime(2024, 6, 12, 23, 59, 59, 999000)

    def test_day_boundaries(self):
        assert start_of_day(date(2024, 6, 12)) == datetime(2024, 6, 12)
        assert end_of_day(date(2024, 6, 12)).time() == END_OF_DAY


class TestPeriodResolver:
    """Tests for resolve_period boundaries."""

    NOW = datetime(2024, 6, 12, 10, 30)

    def test_this_week_is_sunday_to_saturday(self):
        window = resolve_period("this_week", now=self.NOW)
        assert window.start == datetime(2024, 6, 9, 0, 0, 0)
        assert window.end == datetime(2024, 6, 15, 23, 59, 59, 999000)

    def test_this_week_on_a_sunday_starts_that_day(self):
        window = week_window(datetime(2024, 6, 9, 7, 0))
        assert window.start == datetime(2024, 6, 9)

    def test_this_week_on_a_saturday_night(self):
        window = week_window(datetime(2024, 6, 15, 23, 0))
        assert window.start == datetime(2024, 6, 9)
        assert window.end.date() == date(2024, 6, 15)

    def test_week_across_month_boundary(self):
        window = week_window(datetime(2024, 7, 2))
        assert window.start == datetime(2024, 6, 30)
        assert window.end.date() == date(2024, 7, 6)

    def test_this_month(self):
        window = resolve_period(Period.THIS_MONTH, now=self.NOW)
        assert window.start == datetime(2024, 6, 1)
        assert window.end == datetime(2024, 6, 30, 23, 59, 59, 999000)

    def test_month_window_leap_february(self):
        window = month_window(date(2024, 2, 10))
        assert window.end.date() == date(2024, 2, 29)

    def test_custom_forces_end_of_day(self):
        """The end keeps its date but always runs to 23:59:59.999."""
        window = resolve_period(
            "custom", datetime(2024, 6, 1, 8, 0), datetime(2024, 6, 20, 8, 0), now=self.NOW
        )
        assert window.end == datetime(2024, 6, 20, 23, 59, 59, 999000)

    def test_custom_keeps_start_as_given(self):
        window = resolve_period(
            "custom", datetime(2024, 6, 1, 8, 0), datetime(2024, 6, 20), now=self.NOW
        )
        assert window.start == datetime(2024, 6, 1, 8, 0)

    def test_custom_accepts_plain_dates(self):
        window = resolve_period("custom", date(2024, 6, 1), date(2024, 6, 20), now=self.NOW)
        assert window.start == datetime(2024, 6, 1)
        assert window.end == datetime(2024, 6, 20, 23, 59, 59, 999000)

    @pytest.mark.parametrize(
        "period, start, end",
        [
            (None, None, None),
            ("yesterday", None, None),
            ("custom", datetime(2024, 6, 1), None),
            ("custom", None, datetime(2024, 6, 20)),
        ],
    )
    def test_fallbacks_resolve_to_this_week(self, period, start, end):
        window = resolve_period(period, start, end, now=self.NOW)
        assert window == week_window(self.NOW)
