"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import date, datetime

from events.domain import (
    CoachRef,
    Event,
    EventDraft,
    Period,
    TeamTimesheet,
    Timesheet,
    WindowEvents,
)
from events.domain.errors import CoachNotFoundError, EventNotFoundError, TeamNotFoundError
from events.domain.models import Occurrence
from events.domain.periods import month_window, resolve_period
from events.domain.recurrence import expand_events
from events.domain.schedule import build_window_events, upcoming_window
from events.domain.timesheet import build_coach_lines, build_team_lines, sort_lines, summarize
from events.localtime import local_now
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for scheduling, calendar and timesheet operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def get_events(
        self, team_id: int | None = None, reference: datetime | None = None
    ) -> WindowEvents:
        """Return the occurrences of the month containing ``reference`` (default now)."""
        reference = reference or local_now()
        team_ids = [team_id] if team_id is not None else None
        candidates = self._store.find_events(month_window(reference), team_ids=team_ids)
        return self._window_events(candidates, reference)

    def get_coach_events(
        self, coach_id: int, team_id: int | None = None, reference: datetime | None = None
    ) -> WindowEvents:
        """Like get_events, limited to the teams the coach is assigned to.

        Raises:
            CoachNotFoundError: If the coach does not exist.
        """
        if self._store.get_coach(coach_id) is None:
            raise CoachNotFoundError([coach_id])

        team_ids = self._store.get_coach_team_ids(coach_id)
        if team_id is not None:
            if team_id not in team_ids:
                return WindowEvents(today=[], monthly=[])
            team_ids = [team_id]

        reference = reference or local_now()
        candidates = self._store.find_events(month_window(reference), team_ids=team_ids)
        return self._window_events(candidates, reference)

    def _window_events(self, candidates: list[Event], reference: datetime) -> WindowEvents:
        result = build_window_events(candidates, reference)
        logger.debug(
            "Expanded %d candidate events into %d occurrences for %s",
            len(candidates),
            len(result.monthly),
            reference.strftime("%Y-%m"),
        )
        return result

    def get_team_schedule(
        self, team_id: int, now: datetime | None = None
    ) -> list[Occurrence[Event]]:
        """Return a team's occurrences from today through one year ahead.

        Raises:
            TeamNotFoundError: If the team does not exist.
        """
        if self._store.get_team(team_id) is None:
            raise TeamNotFoundError(team_id)

        window = upcoming_window(now or local_now())
        candidates = self._store.find_events(window, team_ids=[team_id])
        return expand_events(candidates, window.start, window.end)

    def get_timesheet(
        self,
        period: Period | str | None = None,
        start_date: datetime | date | None = None,
        end_date: datetime | date | None = None,
        coach_id: int | None = None,
        now: datetime | None = None,
    ) -> Timesheet:
        """Return worked occurrences per coach over the resolved period.

        All coaches are included unless ``coach_id`` is given.

        Raises:
            CoachNotFoundError: If ``coach_id`` is given and does not exist.
        """
        if coach_id is not None and self._store.get_coach(coach_id) is None:
            raise CoachNotFoundError([coach_id])

        window = resolve_period(period, start_date, end_date, now=now or local_now())

        lines = []
        for coach in self._store.list_coaches(coach_id):
            candidates = self._store.find_events(window, coach_id=coach.id)
            lines.extend(build_coach_lines(coach, candidates, window))
        lines = sort_lines(lines)

        logger.debug("Timesheet %s..%s has %d lines", window.start, window.end, len(lines))
        return Timesheet(window=window, lines=lines, summary=summarize(lines))

    def get_team_timesheet(
        self,
        team_id: int,
        period: Period | str | None = None,
        start_date: datetime | date | None = None,
        end_date: datetime | date | None = None,
        now: datetime | None = None,
    ) -> TeamTimesheet:
        """Return a team's occurrences with hours over the resolved period.

        Raises:
            TeamNotFoundError: If the team does not exist.
        """
        team = self._store.get_team(team_id)
        if team is None:
            raise TeamNotFoundError(team_id)

        window = resolve_period(period, start_date, end_date, now=now or local_now())
        candidates = self._store.find_events(window, team_ids=[team_id])
        lines = sort_lines(build_team_lines(candidates, window))
        return TeamTimesheet(team=team, window=window, lines=lines, summary=summarize(lines))

    def get_event(self, event_id: int) -> Event:
        """Return an event definition by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, draft: EventDraft, coach_ids: list[int] | None = None) -> Event:
        """Create an event for an existing team.

        Raises:
            TeamNotFoundError: If the team does not exist.
            CoachNotFoundError: If any coach does not exist.
        """
        coach_ids = coach_ids or []
        self._check_team(draft.team_id)
        self._check_coaches(coach_ids)
        event = self._store.create_event(draft, coach_ids)
        logger.info("Created event %s for team %s", event.id, draft.team_id)
        return event

    def update_event(
        self, event_id: int, draft: EventDraft, coach_ids: list[int] | None = None
    ) -> Event:
        """Overwrite an event definition.

        Raises:
            EventNotFoundError: If the event does not exist.
            TeamNotFoundError: If the new team does not exist.
            CoachNotFoundError: If any coach does not exist.
        """
        self.get_event(event_id)
        self._check_team(draft.team_id)
        if coach_ids:
            self._check_coaches(coach_ids)
        event = self._store.update_event(event_id, draft, coach_ids)
        logger.info("Updated event %s", event_id)
        return event

    def update_event_coaches(self, event_id: int, coach_ids: list[int]) -> tuple[CoachRef, ...]:
        """Replace the coaches assigned to an event.

        Raises:
            EventNotFoundError: If the event does not exist.
            CoachNotFoundError: If any coach does not exist.
        """
        self.get_event(event_id)
        self._check_coaches(coach_ids)
        coaches = self._store.set_event_coaches(event_id, coach_ids)
        logger.info("Assigned %d coaches to event %s", len(coaches), event_id)
        return coaches

    def delete_event(self, event_id: int) -> None:
        """Delete an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        self.get_event(event_id)
        self._store.delete_event(event_id)
        logger.info("Deleted event %s", event_id)

    def _check_team(self, team_id: int) -> None:
        if self._store.get_team(team_id) is None:
            raise TeamNotFoundError(team_id)

    def _check_coaches(self, coach_ids: list[int]) -> None:
        if not coach_ids:
            return
        missing = self._store.missing_coach_ids(coach_ids)
        if missing:
            raise CoachNotFoundError(missing)
