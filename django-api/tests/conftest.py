"""Pytest configuration and shared fixtures."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from itertools import count

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models
from events.domain import CoachRef, DateWindow, Event, EventDraft, Team, TeamRef
from events.stores.interfaces import EventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_event():
    """Build domain events with sensible defaults."""
    ids = count(1)

    def build(**overrides) -> Event:
        fields = {
            "id": next(ids),
            "event_type": "Practice",
            "name": "Practice",
            "start_date": datetime(2024, 6, 3, 18, 0),
            "start_time": "18:00",
            "end_time": "19:30",
            "team": TeamRef(id=1, name="U12 Texans"),
        }
        fields.update(overrides)
        return Event(**fields)

    return build


class InMemoryEventStore(EventStore):
    """Dict-backed store applying the same coarse window filter as the ORM."""

    def __init__(self) -> None:
        self.events: dict[int, Event] = {}
        self.teams: dict[int, Team] = {}
        self.coaches: dict[int, CoachRef] = {}
        self._ids = count(1000)

    def add_team(self, team: Team) -> Team:
        self.teams[team.id] = team
        for coach in team.coaches:
            self.coaches[coach.id] = coach
        return team

    def add_event(self, event: Event) -> Event:
        self.events[event.id] = event
        for coach in event.coaches:
            self.coaches.setdefault(coach.id, coach)
        return event

    def _may_occur(self, event: Event, window: DateWindow) -> bool:
        if not event.is_recurring:
            return window.contains(event.start_date)
        if window.end is not None and event.start_date > window.end:
            return False
        if window.start is not None and event.end_recurrence_date is not None:
            return event.end_recurrence_date >= window.start.date()
        return True

    def find_events(
        self,
        window: DateWindow,
        team_ids: Iterable[int] | None = None,
        coach_id: int | None = None,
    ) -> list[Event]:
        team_ids = set(team_ids) if team_ids is not None else None
        found = []
        for event in self.events.values():
            if team_ids is not None and event.team.id not in team_ids:
                continue
            if coach_id is not None and coach_id not in {coach.id for coach in event.coaches}:
                continue
            if self._may_occur(event, window):
                found.append(event)
        return sorted(found, key=lambda event: event.start_date)

    def get_event(self, event_id: int) -> Event | None:
        return self.events.get(event_id)

    def _from_draft(self, event_id: int, draft: EventDraft, coaches: tuple) -> Event:
        team = self.teams[draft.team_id]
        fields = {name: getattr(draft, name) for name in draft.__dataclass_fields__}
        fields.pop("team_id")
        return Event(
            id=event_id,
            team=TeamRef(id=team.id, name=team.name, logo=team.logo),
            coaches=coaches,
            **fields,
        )

    def create_event(self, draft: EventDraft, coach_ids: list[int]) -> Event:
        coaches = tuple(self.coaches[coach_id] for coach_id in coach_ids)
        return self.add_event(self._from_draft(next(self._ids), draft, coaches))

    def update_event(
        self, event_id: int, draft: EventDraft, coach_ids: list[int] | None
    ) -> Event:
        if coach_ids is None:
            coaches = self.events[event_id].coaches
        else:
            coaches = tuple(self.coaches[coach_id] for coach_id in coach_ids)
        return self.add_event(self._from_draft(event_id, draft, coaches))

    def set_event_coaches(self, event_id: int, coach_ids: list[int]) -> tuple[CoachRef, ...]:
        coaches = tuple(self.coaches[coach_id] for coach_id in coach_ids)
        self.events[event_id] = replace(self.events[event_id], coaches=coaches)
        return coaches

    def delete_event(self, event_id: int) -> None:
        self.events.pop(event_id, None)

    def get_team(self, team_id: int) -> Team | None:
        return self.teams.get(team_id)

    def get_coach(self, coach_id: int) -> CoachRef | None:
        return self.coaches.get(coach_id)

    def list_coaches(self, coach_id: int | None = None) -> list[CoachRef]:
        if coach_id is not None:
            return [self.coaches[coach_id]] if coach_id in self.coaches else []
        return list(self.coaches.values())

    def get_coach_team_ids(self, coach_id: int) -> list[int]:
        return [
            team.id
            for team in self.teams.values()
            if coach_id in {coach.id for coach in team.coaches}
        ]

    def missing_coach_ids(self, coach_ids: Iterable[int]) -> list[int]:
        return [coach_id for coach_id in coach_ids if coach_id not in self.coaches]


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


# ORM fixtures


@pytest.fixture
def coach_row(db) -> models.Coach:
    return models.Coach.objects.create(
        first_name="Dana", last_name="Reyes", email="dana@example.com"
    )


@pytest.fixture
def team_row(db, coach_row) -> models.Team:
    team = models.Team.objects.create(name="U12 Texans", age_group="U12")
    models.TeamCoach.objects.create(team=team, coach=coach_row)
    return team


@pytest.fixture
def make_event_row(db, team_row):
    """Create persisted events; ``start_date`` is given as a naive local datetime."""

    def create(coaches=(), **overrides) -> models.Event:
        fields = {
            "team": team_row,
            "event_type": models.Event.EventType.PRACTICE,
            "name": "Practice",
            "start_date": datetime(2024, 6, 3, 18, 0),
            "start_time": "18:00",
            "end_time": "19:30",
            "address": "1 Field Rd",
        }
        fields.update(overrides)
        fields["start_date"] = timezone.make_aware(fields["start_date"])
        row = models.Event.objects.create(**fields)
        row.coaches.set(coaches)
        return row

    return create
