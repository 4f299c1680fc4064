"""Domain primitives for scheduling: enumerations, windows, and day boundaries."""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum, IntEnum
from typing import Self

END_OF_DAY = time(23, 59, 59, 999000)


class EventType(Enum):
    """Event categories. Opaque to recurrence, used for hour breakdowns."""

    TOURNAMENT = "Tournament"
    PRACTICE = "Practice"
    SOCIAL_EVENT = "Social_Event"
    STRENGTH_CONDITIONING = "Strength_Conditioning"


class RepeatPattern(Enum):
    """How often a recurring event repeats on its weekdays."""

    WEEKLY = "Weekly"
    EVERY_TWO_WEEKS = "Every_Two_Weeks"


class Period(Enum):
    """Logical reporting periods accepted by timesheet queries."""

    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    CUSTOM = "custom"


class Weekday(IntEnum):
    """Fixed weekday enumeration, Sunday first, independent of locale."""

    SUN = 0
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6

    @property
    def abbreviation(self) -> str:
        return self.name.capitalize()

    @classmethod
    def of(cls, value: date) -> Self:
        # date.weekday() counts from Monday
        return cls((value.weekday() + 1) % 7)

    @classmethod
    def abbreviations(cls) -> tuple[str, ...]:
        return tuple(day.abbreviation for day in cls)


def start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min)


def end_of_day(value: date) -> datetime:
    return datetime.combine(value, END_OF_DAY)


@dataclass(frozen=True)
class DateWindow:
    """A closed datetime range. Either bound may be open (None)."""

    start: datetime | None = None
    end: datetime | None = None

    def contains(self, moment: datetime) -> bool:
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True

    @classmethod
    def for_day(cls, value: date) -> Self:
        return cls(start=start_of_day(value), end=end_of_day(value))
