"""Calendar views built from expanded occurrences."""

from collections.abc import Iterable
from datetime import datetime

from dateutil.relativedelta import relativedelta

from events.domain.models import Event, WindowEvents
from events.domain.periods import month_window
from events.domain.recurrence import expand_events
from events.domain.value_objects import DateWindow, start_of_day


def build_window_events(events: Iterable[Event], reference: datetime) -> WindowEvents:
    """Expand candidate events over the reference month and split out its day."""
    month = month_window(reference)
    monthly = expand_events(events, month.start, month.end)
    day = DateWindow.for_day(reference.date())
    today = [occurrence for occurrence in monthly if day.contains(occurrence.start_date)]
    return WindowEvents(today=today, monthly=monthly)


def upcoming_window(now: datetime, years: int = 1) -> DateWindow:
    """From the start of today to the same moment ``years`` ahead."""
    return DateWindow(start=start_of_day(now.date()), end=now + relativedelta(years=years))
