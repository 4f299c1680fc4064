from events.domain.models import (
    CoachRef,
    Event,
    EventDraft,
    Occurrence,
    Team,
    TeamRef,
    TeamTimesheet,
    Timesheet,
    TimesheetLine,
    TimesheetSummary,
    WindowEvents,
)
from events.domain.value_objects import DateWindow, EventType, Period, RepeatPattern, Weekday

__all__ = [
    "CoachRef",
    "Event",
    "EventDraft",
    "Occurrence",
    "Team",
    "TeamRef",
    "TeamTimesheet",
    "Timesheet",
    "TimesheetLine",
    "TimesheetSummary",
    "WindowEvents",
    "DateWindow",
    "EventType",
    "Period",
    "RepeatPattern",
    "Weekday",
]
