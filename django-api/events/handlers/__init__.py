from events.handlers.views import (
    CoachEventListView,
    CoachTimesheetView,
    EventCoachesView,
    EventDetailView,
    EventListView,
    TeamScheduleView,
    TeamTimesheetView,
    TimesheetView,
)

__all__ = [
    "CoachEventListView",
    "CoachTimesheetView",
    "EventCoachesView",
    "EventDetailView",
    "EventListView",
    "TeamScheduleView",
    "TeamTimesheetView",
    "TimesheetView",
]
