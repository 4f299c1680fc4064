"""Domain models representing persisted state and its read-side projections.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, TypeVar

from events.domain.value_objects import DateWindow


@dataclass(frozen=True)
class CoachRef:
    """Coach identity fields carried on events and timesheet lines."""

    id: int
    first_name: str
    last_name: str
    email: str = ""
    profile_picture: str | None = None


@dataclass(frozen=True)
class TeamRef:
    """Team identity fields carried on events."""

    id: int
    name: str
    logo: str | None = None


@dataclass(frozen=True)
class Team:
    """Domain representation of a Team with its assigned coaches."""

    id: int
    name: str
    age_group: str
    logo: str | None = None
    coaches: tuple[CoachRef, ...] = ()


@dataclass(frozen=True)
class Event:
    """Domain representation of a calendar Event.

    ``start_date`` anchors the recurrence and carries the time-of-day every
    occurrence inherits. ``start_time``/``end_time`` are free-form
    time-of-day strings used for durations.
    """

    id: int
    event_type: str
    name: str
    start_date: datetime | None
    start_time: str
    end_time: str
    team: TeamRef | None = None
    end_date: datetime | None = None
    location: str = ""
    address: str = ""
    notes: str = ""
    event_link: str = ""
    gamechanger_link: str = ""
    is_recurring: bool = False
    repeat_pattern: str | None = None
    repeat_days: tuple[str, ...] = ()
    end_recurrence_count: int | None = None
    end_recurrence_date: date | None = None
    coaches: tuple[CoachRef, ...] = ()


@dataclass(frozen=True)
class EventDraft:
    """Writable fields of an event, as accepted on create and update."""

    team_id: int
    event_type: str
    name: str
    start_date: datetime
    start_time: str
    end_time: str
    address: str
    end_date: datetime | None = None
    location: str = ""
    notes: str = ""
    event_link: str = ""
    gamechanger_link: str = ""
    is_recurring: bool = False
    repeat_pattern: str | None = None
    repeat_days: tuple[str, ...] = ()
    end_recurrence_count: int | None = None
    end_recurrence_date: date | None = None


E = TypeVar("E")


@dataclass(frozen=True)
class Occurrence(Generic[E]):
    """One concrete, dated instance of an event. Never persisted."""

    event: E
    start_date: datetime


@dataclass(frozen=True)
class WindowEvents:
    """Occurrences of a month, plus the subset falling on the reference day."""

    today: list[Occurrence[Event]]
    monthly: list[Occurrence[Event]]


@dataclass(frozen=True)
class TimesheetLine:
    """One worked occurrence.

    Coach timesheets carry the responsible ``coach``; team timesheets leave it
    unset and list every assigned coach in ``coaches``.
    """

    event_id: int
    date: datetime
    event_type: str
    name: str
    start_time: str
    end_time: str
    total_hours: float
    location: str = ""
    address: str = ""
    notes: str = ""
    coach: CoachRef | None = None
    coaches: tuple[CoachRef, ...] = ()


@dataclass(frozen=True)
class TimesheetSummary:
    total_hours: float
    breakdown: str
    active_coaches: int
    average_hours: float


@dataclass(frozen=True)
class Timesheet:
    window: DateWindow
    lines: list[TimesheetLine]
    summary: TimesheetSummary


@dataclass(frozen=True)
class TeamTimesheet:
    team: Team
    window: DateWindow
    lines: list[TimesheetLine]
    summary: TimesheetSummary
