"""Recurring event expansion.

Turns one stored event definition into the concrete occurrences that fall
inside a query window. Works on any record exposing the recurrence fields,
so ORM rows never need to reach this module.

Iteration is bounded twice: by ``end_recurrence_count`` (counted from the
anchor date, not from the window) and by a hard cap of
``MAX_RECURRENCE_YEARS`` after the anchor.
"""

from collections.abc import Iterable, Iterator, Sequence
from datetime import date, datetime, timedelta
from typing import Protocol, TypeVar

from events.domain.models import Occurrence
from events.domain.value_objects import RepeatPattern, Weekday, end_of_day, start_of_day

MAX_RECURRENCE_YEARS = 5

ONE_DAY = timedelta(days=1)


class RecurringEvent(Protocol):
    """Fields the expander reads. Everything else is carried through as-is."""

    @property
    def start_date(self) -> datetime | None: ...

    @property
    def is_recurring(self) -> bool: ...

    @property
    def repeat_pattern(self) -> str | None: ...

    @property
    def repeat_days(self) -> Sequence[str] | None: ...

    @property
    def end_recurrence_count(self) -> int | None: ...

    @property
    def end_recurrence_date(self) -> date | None: ...


E = TypeVar("E", bound=RecurringEvent)


def expand_event(
    event: E,
    window_start: datetime | None = None,
    window_end: datetime | None = None,
) -> Iterator[Occurrence[E]]:
    """Yield the occurrences of ``event`` inside ``[window_start, window_end]``.

    Occurrences are produced in ascending date order. The generator holds no
    state beyond its arguments, so calling it again restarts the sequence.
    """
    anchor = event.start_date
    if anchor is None:
        return

    if not event.is_recurring:
        if window_start is not None and anchor < window_start:
            return
        if window_end is not None and anchor > window_end:
            return
        yield Occurrence(event=event, start_date=anchor)
        return

    hard_limit = _years_after(anchor, MAX_RECURRENCE_YEARS)
    if event.end_recurrence_date is not None:
        recurrence_end = start_of_day(event.end_recurrence_date)
    else:
        recurrence_end = hard_limit

    loop_end = min(recurrence_end, hard_limit)
    if window_end is not None:
        loop_end = min(loop_end, window_end)
    loop_end = end_of_day(loop_end.date())

    target_count = event.end_recurrence_count
    repeat_days = set(event.repeat_days or ())
    anchor_day = anchor.date()
    current = start_of_day(anchor_day)
    matches = 0

    while current <= loop_end:
        if target_count is not None and matches >= target_count:
            break

        if _is_match(event.repeat_pattern, repeat_days, anchor_day, current.date()):
            matches += 1
            instance = current.replace(
                hour=anchor.hour, minute=anchor.minute, second=anchor.second
            )
            if window_start is None or instance >= window_start:
                yield Occurrence(event=event, start_date=instance)

        current = current + ONE_DAY


def _years_after(value: datetime, years: int) -> datetime:
    """Same wall-clock time ``years`` later. A Feb 29 anchor rolls over to Mar 1."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, month=3, day=1)


def _is_match(pattern: str | None, repeat_days: set[str], anchor: date, day: date) -> bool:
    if Weekday.of(day).abbreviation not in repeat_days:
        return False

    if pattern == RepeatPattern.WEEKLY.value:
        return True
    if pattern == RepeatPattern.EVERY_TWO_WEEKS.value:
        # Parity is anchored on the literal start date, even when that
        # weekday is not itself a repeat day.
        weeks_since_anchor = (day - anchor).days // 7
        return weeks_since_anchor % 2 == 0
    return False


def expand_events(
    events: Iterable[E],
    window_start: datetime | None = None,
    window_end: datetime | None = None,
) -> list[Occurrence[E]]:
    """Expand every event and merge the results in occurrence order."""
    occurrences = [
        occurrence
        for event in events
        for occurrence in expand_event(event, window_start, window_end)
    ]
    occurrences.sort(key=lambda occurrence: occurrence.start_date)
    return occurrences
