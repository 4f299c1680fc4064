"""Hour aggregation over expanded event occurrences."""

from collections.abc import Iterable
from datetime import date, datetime

from events.domain.models import CoachRef, Event, TimesheetLine, TimesheetSummary
from events.domain.recurrence import expand_event
from events.domain.value_objects import DateWindow

BREAKDOWN_SEPARATOR = " • "
UNTYPED_LABEL = "Other"

# Only the time of day matters; every value is pinned to the same date.
_REFERENCE_DATE = date(2000, 1, 1)
_TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%H:%M:%S.%f", "%I:%M %p", "%I:%M:%S %p")


def parse_time_of_day(value: str | None) -> datetime | None:
    if not value:
        return None
    text = value.strip()
    for fmt in _TIME_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return datetime.combine(_REFERENCE_DATE, parsed.time())
    return None


def calculate_hours(start_time: str | None, end_time: str | None) -> float:
    """Hours between two time-of-day strings, never negative.

    Unparseable input counts as zero hours.
    """
    start = parse_time_of_day(start_time)
    end = parse_time_of_day(end_time)
    if start is None or end is None:
        return 0.0
    hours = (end - start).total_seconds() / 3600
    return hours if hours > 0 else 0.0


def _line(event: Event, occurred_at: datetime, **extra) -> TimesheetLine:
    return TimesheetLine(
        event_id=event.id,
        date=occurred_at,
        event_type=event.event_type,
        name=event.name,
        start_time=event.start_time,
        end_time=event.end_time,
        total_hours=calculate_hours(event.start_time, event.end_time),
        location=event.location,
        address=event.address,
        notes=event.notes,
        **extra,
    )


def build_coach_lines(
    coach: CoachRef, events: Iterable[Event], window: DateWindow
) -> list[TimesheetLine]:
    """One line per occurrence the coach is responsible for."""
    return [
        _line(occurrence.event, occurrence.start_date, coach=coach)
        for event in events
        for occurrence in expand_event(event, window.start, window.end)
    ]


def build_team_lines(events: Iterable[Event], window: DateWindow) -> list[TimesheetLine]:
    """One line per occurrence, listing every coach assigned to the event."""
    return [
        _line(occurrence.event, occurrence.start_date, coaches=occurrence.event.coaches)
        for event in events
        for occurrence in expand_event(event, window.start, window.end)
    ]


def sort_lines(lines: list[TimesheetLine]) -> list[TimesheetLine]:
    return sorted(lines, key=lambda line: line.date)


def summarize(lines: Iterable[TimesheetLine]) -> TimesheetSummary:
    """Total hours, per-type breakdown, active coaches and hours per coach."""
    total = 0.0
    hours_by_type: dict[str, float] = {}
    active_coaches: set[int] = set()

    for line in lines:
        total += line.total_hours
        label = line.event_type or UNTYPED_LABEL
        hours_by_type[label] = hours_by_type.get(label, 0.0) + line.total_hours
        if line.coach is not None:
            active_coaches.add(line.coach.id)
        else:
            active_coaches.update(coach.id for coach in line.coaches)

    breakdown = BREAKDOWN_SEPARATOR.join(
        f"{label}: {hours:.1f}h" for label, hours in hours_by_type.items()
    )
    average = round(total / len(active_coaches), 1) if active_coaches else 0
    return TimesheetSummary(
        total_hours=round(total, 1),
        breakdown=breakdown,
        active_coaches=len(active_coaches),
        average_hours=average,
    )
