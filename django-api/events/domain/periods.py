"""Translate logical reporting periods into concrete date windows."""

import calendar
from datetime import date, datetime, timedelta

from events.domain.value_objects import DateWindow, Period, end_of_day, start_of_day


def week_window(now: datetime) -> DateWindow:
    """Calendar week containing ``now``, Sunday through Saturday."""
    days_since_sunday = (now.weekday() + 1) % 7
    sunday = now.date() - timedelta(days=days_since_sunday)
    return DateWindow(
        start=start_of_day(sunday),
        end=end_of_day(sunday + timedelta(days=6)),
    )


def month_window(now: datetime | date) -> DateWindow:
    """First to last calendar day of the month containing ``now``."""
    last_day = calendar.monthrange(now.year, now.month)[1]
    return DateWindow(
        start=start_of_day(date(now.year, now.month, 1)),
        end=end_of_day(date(now.year, now.month, last_day)),
    )


def resolve_period(
    period: Period | str | None,
    start: datetime | date | None = None,
    end: datetime | date | None = None,
    *,
    now: datetime,
) -> DateWindow:
    """Resolve a timesheet period to ``[start, end]``.

    ``custom`` keeps ``start`` as supplied and stretches ``end`` to the last
    millisecond of its day. A custom period missing either bound, and any
    unrecognized period, falls back to the current week.
    """
    period = _coerce(period)

    if period is Period.THIS_MONTH:
        return month_window(now)

    if period is Period.CUSTOM and start is not None and end is not None:
        if not isinstance(start, datetime):
            start = start_of_day(start)
        return DateWindow(start=start, end=end_of_day(_day_of(end)))

    return week_window(now)


def _coerce(period: Period | str | None) -> Period | None:
    if period is None or isinstance(period, Period):
        return period
    try:
        return Period(period)
    except ValueError:
        return None


def _day_of(value: datetime | date) -> date:
    return value.date() if isinstance(value, datetime) else value
