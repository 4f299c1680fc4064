"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

from django.db import models


class Coach(models.Model):
    """Persistence model for coaches."""

    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20, blank=True)
    profile_picture = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["first_name", "last_name"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Team(models.Model):
    """Persistence model for teams."""

    name = models.CharField(max_length=100)
    age_group = models.CharField(max_length=50)
    logo = models.URLField(max_length=500, blank=True, null=True)
    coaches = models.ManyToManyField(Coach, through="TeamCoach", related_name="teams")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class TeamCoach(models.Model):
    """Assignment of a coach to a team."""

    team = models.ForeignKey(Team, on_delete=models.CASCADE)
    coach = models.ForeignKey(Coach, on_delete=models.CASCADE)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["team", "coach"], name="uniq_team_coach"),
        ]


class Event(models.Model):
    """Persistence model for calendar events, recurring or one-off."""

    class EventType(models.TextChoices):
        TOURNAMENT = "Tournament"
        PRACTICE = "Practice"
        SOCIAL_EVENT = "Social_Event"
        STRENGTH_CONDITIONING = "Strength_Conditioning"

    class RepeatPattern(models.TextChoices):
        WEEKLY = "Weekly"
        EVERY_TWO_WEEKS = "Every_Two_Weeks"

    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name="events")
    event_type = models.CharField(max_length=32, choices=EventType.choices)
    name = models.CharField(max_length=100)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(blank=True, null=True)
    start_time = models.CharField(max_length=16)
    end_time = models.CharField(max_length=16)
    location = models.CharField(max_length=255, blank=True)
    address = models.CharField(max_length=255)
    event_link = models.URLField(blank=True)
    gamechanger_link = models.URLField(blank=True)
    notes = models.TextField(blank=True)
    is_recurring = models.BooleanField(default=False)
    repeat_pattern = models.CharField(
        max_length=32, choices=RepeatPattern.choices, blank=True, null=True
    )
    repeat_days = models.JSONField(default=list, blank=True)
    end_recurrence_count = models.PositiveIntegerField(blank=True, null=True)
    end_recurrence_date = models.DateField(blank=True, null=True)
    coaches = models.ManyToManyField(Coach, related_name="events", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_date"]
        indexes = [
            models.Index(fields=["team", "start_date"], name="event_team_start_idx"),
            models.Index(fields=["is_recurring", "start_date"], name="event_recurring_start_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.start_date}"
