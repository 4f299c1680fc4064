"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let the exception handler map domain errors to HTTP responses
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.errors import envelope
from events.handlers.serializers import (
    CoachIdsSerializer,
    CoachSerializer,
    EventInputSerializer,
    EventQuerySerializer,
    EventSerializer,
    OccurrenceSerializer,
    PeriodQuerySerializer,
    TeamTimesheetSerializer,
    TimesheetQuerySerializer,
    TimesheetSerializer,
    WindowEventsSerializer,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def _validated(serializer_class, data) -> dict:
    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        query = _validated(EventQuerySerializer, request.query_params)
        result = get_event_service().get_events(
            team_id=query.get("teamId"), reference=query.get("date")
        )
        return envelope("Events fetched successfully", WindowEventsSerializer(result).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(
            serializer.to_draft(), serializer.validated_data.get("coach_ids")
        )
        return envelope(
            "Event created successfully",
            EventSerializer(event).data,
            status_code=status.HTTP_201_CREATED,
        )


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        event = get_event_service().get_event(event_id)
        return envelope("Event fetched successfully", EventSerializer(event).data)

    def put(self, request: Request, event_id: int) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(
            event_id, serializer.to_draft(), serializer.validated_data.get("coach_ids")
        )
        return envelope("Event updated successfully", EventSerializer(event).data)

    def delete(self, request: Request, event_id: int) -> Response:
        get_event_service().delete_event(event_id)
        return envelope("Event deleted successfully")


class EventCoachesView(APIView):
    """Handler for PUT /api/events/{event_id}/coaches"""

    def put(self, request: Request, event_id: int) -> Response:
        body = _validated(CoachIdsSerializer, request.data)
        coaches = get_event_service().update_event_coaches(event_id, body["coach_ids"])
        return envelope(
            "Event coaches updated successfully", CoachSerializer(coaches, many=True).data
        )


class TimesheetView(APIView):
    """Handler for GET /api/events/timesheet"""

    def get(self, request: Request) -> Response:
        query = _validated(TimesheetQuerySerializer, request.query_params)
        result = get_event_service().get_timesheet(
            period=query["period"],
            start_date=query.get("startDate"),
            end_date=query.get("endDate"),
            coach_id=query.get("coachId"),
        )
        return envelope("Timesheet fetched successfully", TimesheetSerializer(result).data)


class CoachEventListView(APIView):
    """Handler for GET /api/coaches/{coach_id}/events"""

    def get(self, request: Request, coach_id: int) -> Response:
        query = _validated(EventQuerySerializer, request.query_params)
        result = get_event_service().get_coach_events(
            coach_id, team_id=query.get("teamId"), reference=query.get("date")
        )
        return envelope("Events fetched successfully", WindowEventsSerializer(result).data)


class CoachTimesheetView(APIView):
    """Handler for GET /api/coaches/{coach_id}/timesheet"""

    def get(self, request: Request, coach_id: int) -> Response:
        query = _validated(PeriodQuerySerializer, request.query_params)
        result = get_event_service().get_timesheet(
            period=query["period"],
            start_date=query.get("startDate"),
            end_date=query.get("endDate"),
            coach_id=coach_id,
        )
        return envelope("Timesheet fetched successfully", TimesheetSerializer(result).data)


class TeamScheduleView(APIView):
    """Handler for GET /api/teams/{team_id}/schedule"""

    def get(self, request: Request, team_id: int) -> Response:
        occurrences = get_event_service().get_team_schedule(team_id)
        return envelope(
            "Team schedule fetched successfully",
            OccurrenceSerializer(occurrences, many=True).data,
        )


class TeamTimesheetView(APIView):
    """Handler for GET /api/teams/{team_id}/teamsheet"""

    def get(self, request: Request, team_id: int) -> Response:
        query = _validated(PeriodQuerySerializer, request.query_params)
        result = get_event_service().get_team_timesheet(
            team_id,
            period=query["period"],
            start_date=query.get("startDate"),
            end_date=query.get("endDate"),
        )
        return envelope("Teamsheet fetched successfully", TeamTimesheetSerializer(result).data)
