from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Coach",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("first_name", models.CharField(max_length=50)),
                ("last_name", models.CharField(max_length=50)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("phone", models.CharField(blank=True, max_length=20)),
                ("profile_picture", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["first_name", "last_name"],
            },
        ),
        migrations.CreateModel(
            name="Team",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("name", models.CharField(max_length=100)),
                ("age_group", models.CharField(max_length=50)),
                ("logo", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="TeamCoach",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "coach",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, to="events.coach"
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, to="events.team"
                    ),
                ),
            ],
        ),
        migrations.AddField(
            model_name="team",
            name="coaches",
            field=models.ManyToManyField(
                related_name="teams", through="events.TeamCoach", to="events.coach"
            ),
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("Tournament", "Tournament"),
                            ("Practice", "Practice"),
                            ("Social_Event", "Social Event"),
                            ("Strength_Conditioning", "Strength Conditioning"),
                        ],
                        max_length=32,
                    ),
                ),
                ("name", models.CharField(max_length=100)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                ("start_time", models.CharField(max_length=16)),
                ("end_time", models.CharField(max_length=16)),
                ("location", models.CharField(blank=True, max_length=255)),
                ("address", models.CharField(max_length=255)),
                ("event_link", models.URLField(blank=True)),
                ("gamechanger_link", models.URLField(blank=True)),
                ("notes", models.TextField(blank=True)),
                ("is_recurring", models.BooleanField(default=False)),
                (
                    "repeat_pattern",
                    models.CharField(
                        blank=True,
                        choices=[("Weekly", "Weekly"), ("Every_Two_Weeks", "Every Two Weeks")],
                        max_length=32,
                        null=True,
                    ),
                ),
                ("repeat_days", models.JSONField(blank=True, default=list)),
                ("end_recurrence_count", models.PositiveIntegerField(blank=True, null=True)),
                ("end_recurrence_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "coaches",
                    models.ManyToManyField(blank=True, related_name="events", to="events.coach"),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to="events.team",
                    ),
                ),
            ],
            options={
                "ordering": ["start_date"],
            },
        ),
        migrations.AddConstraint(
            model_name="teamcoach",
            constraint=models.UniqueConstraint(fields=("team", "coach"), name="uniq_team_coach"),
        ),
        migrations.AddIndex(
            model_name="event",
            index=models.Index(fields=["team", "start_date"], name="event_team_start_idx"),
        ),
        migrations.AddIndex(
            model_name="event",
            index=models.Index(fields=["is_recurring", "start_date"], name="event_recurring_start_idx"),
        ),
    ]
