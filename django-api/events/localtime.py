"""Conversions between naive local time and the database's aware datetimes.

The domain works on naive datetimes in ``settings.TIME_ZONE``.
"""

from datetime import datetime

from django.conf import settings
from django.utils import timezone


def local_now() -> datetime:
    """Current wall-clock time in the configured zone, without tzinfo."""
    return timezone.localtime().replace(tzinfo=None)


def to_local(value: datetime | None) -> datetime | None:
    """Aware database timestamp to naive local time."""
    if value is None or timezone.is_naive(value):
        return value
    return timezone.localtime(value).replace(tzinfo=None)


def to_db(value: datetime | None) -> datetime | None:
    """Naive local time to whatever the database layer expects."""
    if value is None or not settings.USE_TZ or timezone.is_aware(value):
        return value
    return timezone.make_aware(value)
