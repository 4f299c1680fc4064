"""Integration tests for the Django ORM event store.

Run with: pytest tests/test_stores.py -v
"""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
from django.core.management import call_command
from django.utils import timezone

from events import models
from events.domain import DateWindow, EventDraft
from events.localtime import local_now, to_db, to_local
from events.stores.django_store import DjangoEventStore

JUNE = DateWindow(start=datetime(2024, 6, 1), end=datetime(2024, 6, 30, 23, 59, 59, 999000))


@pytest.fixture
def store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.mark.django_db
class TestFindEvents:
    """The coarse window filter returns every event that may occur."""

    def test_window_prefilter(self, store, make_event_row):
        make_event_row(name="June one-off", start_date=datetime(2024, 6, 12, 9, 0))
        make_event_row(name="May one-off", start_date=datetime(2024, 5, 30, 9, 0))
        make_event_row(
            name="Open series",
            start_date=datetime(2024, 1, 8, 18, 0),
            is_recurring=True,
            repeat_pattern="Weekly",
            repeat_days=["Mon"],
        )
        make_event_row(
            name="Ended series",
            start_date=datetime(2024, 1, 8, 18, 0),
            is_recurring=True,
            repeat_pattern="Weekly",
            repeat_days=["Mon"],
            end_recurrence_date=date(2024, 5, 31),
        )
        make_event_row(
            name="Series ending in window",
            start_date=datetime(2024, 1, 8, 18, 0),
            is_recurring=True,
            repeat_pattern="Weekly",
            repeat_days=["Tue"],
            end_recurrence_date=date(2024, 6, 1),
        )
        make_event_row(
            name="Future series",
            start_date=datetime(2024, 7, 1, 18, 0),
            is_recurring=True,
            repeat_pattern="Weekly",
            repeat_days=["Mon"],
        )

        names = {event.name for event in store.find_events(JUNE)}

        assert names == {"June one-off", "Open series", "Series ending in window"}

    def test_returns_naive_local_datetimes(self, store, make_event_row, coach_row):
        make_event_row(start_date=datetime(2024, 6, 12, 9, 0), coaches=[coach_row])

        [event] = store.find_events(JUNE)

        assert event.start_date == datetime(2024, 6, 12, 9, 0)
        assert event.start_date.tzinfo is None
        assert event.team.name == "U12 Texans"
        assert [coach.email for coach in event.coaches] == ["dana@example.com"]

    def test_team_filter(self, store, make_event_row):
        other = models.Team.objects.create(name="U14 Comets", age_group="U14")
        make_event_row(name="Texans", start_date=datetime(2024, 6, 12, 9, 0))
        make_event_row(name="Comets", team=other, start_date=datetime(2024, 6, 13, 9, 0))

        events = store.find_events(JUNE, team_ids=[other.id])

        assert [event.name for event in events] == ["Comets"]

    def test_coach_filter(self, store, make_event_row, coach_row):
        make_event_row(name="Assigned", start_date=datetime(2024, 6, 12, 9, 0), coaches=[coach_row])
        make_event_row(name="Unassigned", start_date=datetime(2024, 6, 13, 9, 0))

        events = store.find_events(JUNE, coach_id=coach_row.id)

        assert [event.name for event in events] == ["Assigned"]


@pytest.mark.django_db
class TestWrites:
    """Create, update and lookups through the store."""

    def test_create_event_round_trip(self, store, team_row, coach_row):
        draft = EventDraft(
            team_id=team_row.id,
            event_type="Practice",
            name="Batting cage",
            start_date=datetime(2024, 7, 1, 17, 0),
            start_time="17:00",
            end_time="18:00",
            address="1 Field Rd",
            is_recurring=True,
            repeat_pattern="Every_Two_Weeks",
            repeat_days=("Mon", "Thu"),
            end_recurrence_count=6,
        )

        event = store.create_event(draft, [coach_row.id])

        assert event.start_date == datetime(2024, 7, 1, 17, 0)
        assert event.repeat_days == ("Mon", "Thu")
        assert event.end_recurrence_count == 6
        assert [coach.id for coach in event.coaches] == [coach_row.id]

    def test_update_event_keeps_coaches(self, store, make_event_row, coach_row, team_row):
        row = make_event_row(coaches=[coach_row])
        draft = EventDraft(
            team_id=team_row.id,
            event_type="Tournament",
            name="Renamed",
            start_date=datetime(2024, 6, 3, 18, 0),
            start_time="18:00",
            end_time="21:00",
            address="1 Field Rd",
        )

        event = store.update_event(row.id, draft, None)

        assert event.name == "Renamed"
        assert event.event_type == "Tournament"
        assert len(event.coaches) == 1

    def test_delete_event(self, store, make_event_row):
        row = make_event_row()
        store.delete_event(row.id)
        assert store.get_event(row.id) is None

    def test_team_with_coaches(self, store, team_row, coach_row):
        team = store.get_team(team_row.id)
        assert team.age_group == "U12"
        assert [coach.id for coach in team.coaches] == [coach_row.id]

    def test_coach_lookups(self, store, team_row, coach_row):
        assert store.get_coach_team_ids(coach_row.id) == [team_row.id]
        assert store.missing_coach_ids([coach_row.id, 999]) == [999]
        assert store.get_coach(999) is None
        assert [coach.id for coach in store.list_coaches(coach_row.id)] == [coach_row.id]


@pytest.mark.django_db
def test_migrations_cover_models():
    """``migrate`` builds the same schema the models declare."""
    call_command("makemigrations", "events", "--check", "--dry-run", verbosity=0)


class TestLocalTime:
    """Naive local time at the ORM boundary follows TIME_ZONE."""

    def test_to_local_from_utc(self, settings):
        settings.TIME_ZONE = "America/Chicago"
        assert to_local(datetime(2024, 6, 12, 14, 0, tzinfo=UTC)) == datetime(2024, 6, 12, 9, 0)

    def test_to_db_is_aware_in_local_zone(self, settings):
        settings.TIME_ZONE = "America/Chicago"
        value = to_db(datetime(2024, 6, 12, 9, 0))
        assert value.astimezone(UTC) == datetime(2024, 6, 12, 14, 0, tzinfo=UTC)

    def test_local_now_is_naive_wall_clock(self, settings):
        settings.TIME_ZONE = "Asia/Tokyo"
        now = local_now()

        assert now.tzinfo is None
        expected = timezone.now().astimezone(ZoneInfo("Asia/Tokyo")).replace(tzinfo=None)
        assert abs(expected - now) < timedelta(seconds=5)
