from django.urls import path

from events.handlers import (
    CoachEventListView,
    CoachTimesheetView,
    EventCoachesView,
    EventDetailView,
    EventListView,
    TeamScheduleView,
    TeamTimesheetView,
    TimesheetView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/timesheet", TimesheetView.as_view(), name="timesheet"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<int:event_id>/coaches",
        EventCoachesView.as_view(),
        name="event-coaches",
    ),
    path(
        "coaches/<int:coach_id>/events",
        CoachEventListView.as_view(),
        name="coach-event-list",
    ),
    path(
        "coaches/<int:coach_id>/timesheet",
        CoachTimesheetView.as_view(),
        name="coach-timesheet",
    ),
    path("teams/<int:team_id>/schedule", TeamScheduleView.as_view(), name="team-schedule"),
    path("teams/<int:team_id>/teamsheet", TeamTimesheetView.as_view(), name="team-teamsheet"),
]
