"""Serializers for query/body validation and for rendering domain models."""

from datetime import datetime

from rest_framework import serializers
from rest_framework.settings import ISO_8601

from events.domain import EventDraft, EventType, Period, RepeatPattern, Weekday
from events.localtime import to_local

DATE_INPUT_FORMATS = [ISO_8601, "%Y-%m-%d"]


class LocalDateTimeField(serializers.DateTimeField):
    """Accepts ISO dates or datetimes and yields naive local datetimes."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("input_formats", DATE_INPUT_FORMATS)
        super().__init__(**kwargs)

    def to_internal_value(self, value) -> datetime:
        return to_local(super().to_internal_value(value))


# Input


class EventQuerySerializer(serializers.Serializer):
    """Query string for monthly calendar views."""

    teamId = serializers.IntegerField(min_value=1, required=False)
    date = LocalDateTimeField(required=False)


class PeriodQuerySerializer(serializers.Serializer):
    """Query string for timesheets. Explicit dates only go with ``custom``."""

    period = serializers.ChoiceField(
        choices=[period.value for period in Period], default=Period.THIS_WEEK.value
    )
    startDate = LocalDateTimeField(required=False)
    endDate = LocalDateTimeField(required=False)

    def validate(self, attrs: dict) -> dict:
        custom = attrs["period"] == Period.CUSTOM.value
        for name in ("startDate", "endDate"):
            given = attrs.get(name) is not None
            if custom and not given:
                raise serializers.ValidationError({name: f"{name} is required for a custom period"})
            if not custom and given:
                raise serializers.ValidationError({name: f"{name} is only allowed for a custom period"})
        return attrs


class TimesheetQuerySerializer(PeriodQuerySerializer):
    coachId = serializers.IntegerField(min_value=1, required=False)


def unique_coach_ids(value: list[int]) -> list[int]:
    if len(set(value)) != len(value):
        raise serializers.ValidationError("Coach IDs must be unique")
    return value


class CoachIdsSerializer(serializers.Serializer):
    coach_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), validators=[unique_coach_ids]
    )


class EventInputSerializer(serializers.Serializer):
    """Body for creating or replacing an event."""

    team_id = serializers.IntegerField(min_value=1)
    event_type = serializers.ChoiceField(choices=[event_type.value for event_type in EventType])
    name = serializers.CharField(max_length=100)
    start_date = LocalDateTimeField()
    end_date = LocalDateTimeField(required=False, allow_null=True)
    start_time = serializers.CharField()
    end_time = serializers.CharField()
    location = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    address = serializers.CharField()
    event_link = serializers.URLField(required=False, allow_blank=True, default="")
    gamechanger_link = serializers.URLField(required=False, allow_blank=True, default="")
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    is_recurring = serializers.BooleanField(default=False)
    repeat_pattern = serializers.ChoiceField(
        choices=[pattern.value for pattern in RepeatPattern], required=False, allow_null=True
    )
    repeat_days = serializers.ListField(
        child=serializers.ChoiceField(choices=Weekday.abbreviations()),
        required=False,
        allow_null=True,
    )
    end_recurrence_count = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    end_recurrence_date = serializers.DateField(required=False, allow_null=True)
    coach_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False, validators=[unique_coach_ids]
    )

    def validate(self, attrs: dict) -> dict:
        if attrs["is_recurring"]:
            if not attrs.get("repeat_pattern"):
                raise serializers.ValidationError(
                    {"repeat_pattern": "Repeat pattern is required for recurring events"}
                )
            if not attrs.get("repeat_days"):
                raise serializers.ValidationError(
                    {"repeat_days": "Select at least one day for recurring events"}
                )
        if attrs.get("end_recurrence_count") is not None and attrs.get("end_recurrence_date"):
            raise serializers.ValidationError(
                {"end_recurrence_date": "Cannot specify both recurrence count and end date"}
            )
        return attrs

    def to_draft(self) -> EventDraft:
        data = dict(self.validated_data)
        data.pop("coach_ids", None)
        data["repeat_days"] = tuple(data.get("repeat_days") or ())
        return EventDraft(**data)


# Output


class CoachSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.CharField()
    profile_picture = serializers.CharField(allow_null=True)


class TeamRefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    logo = serializers.CharField(allow_null=True)


class TeamSerializer(TeamRefSerializer):
    age_group = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Stored event definition."""

    id = serializers.IntegerField()
    team = TeamRefSerializer(allow_null=True)
    event_type = serializers.CharField()
    name = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField(allow_null=True)
    start_time = serializers.CharField()
    end_time = serializers.CharField()
    location = serializers.CharField()
    address = serializers.CharField()
    event_link = serializers.CharField()
    gamechanger_link = serializers.CharField()
    notes = serializers.CharField()
    is_recurring = serializers.BooleanField()
    repeat_pattern = serializers.CharField(allow_null=True)
    repeat_days = serializers.ListField(child=serializers.CharField())
    end_recurrence_count = serializers.IntegerField(allow_null=True)
    end_recurrence_date = serializers.DateField(allow_null=True)
    coaches = CoachSerializer(many=True)
    coach_ids = serializers.SerializerMethodField()

    def get_coach_ids(self, event) -> list[int]:
        return [coach.id for coach in event.coaches]


class OccurrenceSerializer(serializers.Serializer):
    """One dated instance of an event."""

    id = serializers.IntegerField(source="event.id")
    name = serializers.CharField(source="event.name")
    event_type = serializers.CharField(source="event.event_type")
    start_date = serializers.DateTimeField()
    start_time = serializers.CharField(source="event.start_time")
    end_time = serializers.CharField(source="event.end_time")
    location = serializers.CharField(source="event.location")
    address = serializers.CharField(source="event.address")
    team = TeamRefSerializer(source="event.team", allow_null=True)
    coaches = CoachSerializer(source="event.coaches", many=True)
    is_recurring = serializers.BooleanField(source="event.is_recurring")


class WindowEventsSerializer(serializers.Serializer):
    today_events = OccurrenceSerializer(source="today", many=True)
    monthly_events = OccurrenceSerializer(source="monthly", many=True)


class TimesheetLineSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="event_id")
    date = serializers.DateTimeField()
    event_type = serializers.CharField()
    name = serializers.CharField()
    start_time = serializers.CharField()
    end_time = serializers.CharField()
    total_hours = serializers.FloatField()
    notes = serializers.CharField()
    coach = CoachSerializer()


class TeamsheetLineSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="event_id")
    date = serializers.DateTimeField()
    event_type = serializers.CharField()
    name = serializers.CharField()
    start_time = serializers.CharField()
    end_time = serializers.CharField()
    location = serializers.CharField()
    address = serializers.CharField()
    total_hours = serializers.FloatField()
    notes = serializers.CharField()
    coaches = CoachSerializer(many=True)


class SummaryFieldsMixin(serializers.Serializer):
    start_date = serializers.DateTimeField(source="window.start")
    end_date = serializers.DateTimeField(source="window.end")
    total_hourly_hours = serializers.FloatField(source="summary.total_hours")
    breakdown = serializers.CharField(source="summary.breakdown")
    active_coaches = serializers.IntegerField(source="summary.active_coaches")
    avg_hourly_hours = serializers.FloatField(source="summary.average_hours")


class TimesheetSerializer(SummaryFieldsMixin):
    timesheet = TimesheetLineSerializer(source="lines", many=True)


class TeamTimesheetSerializer(SummaryFieldsMixin):
    team = TeamSerializer()
    coaches = CoachSerializer(source="team.coaches", many=True)
    teamsheet = TeamsheetLineSerializer(source="lines", many=True)
