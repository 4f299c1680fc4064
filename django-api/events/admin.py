from django.contrib import admin

from events.models import Coach, Event, Team, TeamCoach


class TeamCoachInline(admin.TabularInline):
    model = TeamCoach
    extra = 1


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ["name", "age_group", "created_at"]
    search_fields = ["name"]
    inlines = [TeamCoachInline]


@admin.register(Coach)
class CoachAdmin(admin.ModelAdmin):
    list_display = ["first_name", "last_name", "email"]
    search_fields = ["first_name", "last_name", "email"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "team", "event_type", "start_date", "is_recurring", "repeat_pattern"]
    list_filter = ["team", "event_type", "is_recurring"]
    search_fields = ["name", "location"]
    filter_horizontal = ["coaches"]
