"""Django ORM implementation of the EventStore."""

from collections.abc import Iterable
from dataclasses import asdict

from django.db import transaction
from django.db.models import Q

from events import models
from events.domain import CoachRef, DateWindow, Event, EventDraft, Team, TeamRef
from events.localtime import to_db, to_local
from events.stores.interfaces import EventStore


def _coach(row: models.Coach) -> CoachRef:
    return CoachRef(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        profile_picture=row.profile_picture,
    )


def _event(row: models.Event) -> Event:
    return Event(
        id=row.id,
        event_type=row.event_type,
        name=row.name,
        start_date=to_local(row.start_date),
        start_time=row.start_time,
        end_time=row.end_time,
        team=TeamRef(id=row.team.id, name=row.team.name, logo=row.team.logo),
        end_date=to_local(row.end_date),
        location=row.location,
        address=row.address,
        notes=row.notes,
        event_link=row.event_link,
        gamechanger_link=row.gamechanger_link,
        is_recurring=row.is_recurring,
        repeat_pattern=row.repeat_pattern,
        repeat_days=tuple(row.repeat_days or ()),
        end_recurrence_count=row.end_recurrence_count,
        end_recurrence_date=row.end_recurrence_date,
        coaches=tuple(_coach(coach) for coach in row.coaches.all()),
    )


def overlap_condition(window: DateWindow) -> Q:
    """Coarse filter for events that may occur inside ``window``."""
    one_off = Q(is_recurring=False)
    recurring = Q(is_recurring=True)
    if window.start is not None:
        one_off &= Q(start_date__gte=to_db(window.start))
        recurring &= Q(end_recurrence_date__isnull=True) | Q(
            end_recurrence_date__gte=window.start.date()
        )
    if window.end is not None:
        one_off &= Q(start_date__lte=to_db(window.end))
        recurring &= Q(start_date__lte=to_db(window.end))
    return one_off | recurring


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _events(self):
        return models.Event.objects.select_related("team").prefetch_related("coaches")

    def find_events(
        self,
        window: DateWindow,
        team_ids: Iterable[int] | None = None,
        coach_id: int | None = None,
    ) -> list[Event]:
        queryset = self._events().filter(overlap_condition(window))
        if team_ids is not None:
            queryset = queryset.filter(team_id__in=list(team_ids))
        if coach_id is not None:
            queryset = queryset.filter(coaches__id=coach_id)
        return [_event(row) for row in queryset.order_by("start_date")]

    def get_event(self, event_id: int) -> Event | None:
        row = self._events().filter(pk=event_id).first()
        return _event(row) if row is not None else None

    def _fields(self, draft: EventDraft) -> dict:
        fields = asdict(draft)
        fields["start_date"] = to_db(draft.start_date)
        fields["end_date"] = to_db(draft.end_date)
        fields["repeat_days"] = list(draft.repeat_days)
        return fields

    @transaction.atomic
    def create_event(self, draft: EventDraft, coach_ids: list[int]) -> Event:
        row = models.Event.objects.create(**self._fields(draft))
        row.coaches.set(coach_ids)
        return self.get_event(row.id)

    @transaction.atomic
    def update_event(
        self, event_id: int, draft: EventDraft, coach_ids: list[int] | None
    ) -> Event:
        row = models.Event.objects.get(pk=event_id)
        for name, value in self._fields(draft).items():
            setattr(row, name, value)
        row.save()
        if coach_ids is not None:
            row.coaches.set(coach_ids)
        return self.get_event(row.id)

    def set_event_coaches(self, event_id: int, coach_ids: list[int]) -> tuple[CoachRef, ...]:
        row = models.Event.objects.get(pk=event_id)
        row.coaches.set(coach_ids)
        return tuple(_coach(coach) for coach in row.coaches.all())

    def delete_event(self, event_id: int) -> None:
        models.Event.objects.filter(pk=event_id).delete()

    def get_team(self, team_id: int) -> Team | None:
        row = models.Team.objects.prefetch_related("coaches").filter(pk=team_id).first()
        if row is None:
            return None
        return Team(
            id=row.id,
            name=row.name,
            age_group=row.age_group,
            logo=row.logo,
            coaches=tuple(_coach(coach) for coach in row.coaches.all()),
        )

    def get_coach(self, coach_id: int) -> CoachRef | None:
        row = models.Coach.objects.filter(pk=coach_id).first()
        return _coach(row) if row is not None else None

    def list_coaches(self, coach_id: int | None = None) -> list[CoachRef]:
        queryset = models.Coach.objects.all()
        if coach_id is not None:
            queryset = queryset.filter(pk=coach_id)
        return [_coach(row) for row in queryset]

    def get_coach_team_ids(self, coach_id: int) -> list[int]:
        return list(
            models.TeamCoach.objects.filter(coach_id=coach_id).values_list("team_id", flat=True)
        )

    def missing_coach_ids(self, coach_ids: Iterable[int]) -> list[int]:
        wanted = list(dict.fromkeys(coach_ids))
        found = set(models.Coach.objects.filter(pk__in=wanted).values_list("id", flat=True))
        return [coach_id for coach_id in wanted if coach_id not in found]
