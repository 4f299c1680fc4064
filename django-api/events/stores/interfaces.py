"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Datetimes crossing this
boundary are naive and expressed in the configured local time zone.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from events.domain import CoachRef, DateWindow, Event, EventDraft, Team


class EventStore(ABC):
    """Interface for event, team and coach persistence operations."""

    @abstractmethod
    def find_events(
        self,
        window: DateWindow,
        team_ids: Iterable[int] | None = None,
        coach_id: int | None = None,
    ) -> list[Event]:
        """Return every event that could produce an occurrence in ``window``.

        One-off events must start inside the window. Recurring events must
        start on or before the window end and not stop recurring before the
        window start. The result may be a superset; it must never miss one.
        ``team_ids`` of None means all teams.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: int) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft, coach_ids: list[int]) -> Event:
        """Persist a new event and assign its coaches."""
        ...

    @abstractmethod
    def update_event(
        self, event_id: int, draft: EventDraft, coach_ids: list[int] | None
    ) -> Event:
        """Overwrite an event. ``coach_ids`` of None keeps current coaches."""
        ...

    @abstractmethod
    def set_event_coaches(self, event_id: int, coach_ids: list[int]) -> tuple[CoachRef, ...]:
        """Replace the coaches assigned to an event."""
        ...

    @abstractmethod
    def delete_event(self, event_id: int) -> None:
        ...

    @abstractmethod
    def get_team(self, team_id: int) -> Team | None:
        """Return a team with its coaches, or None if not found."""
        ...

    @abstractmethod
    def get_coach(self, coach_id: int) -> CoachRef | None:
        ...

    @abstractmethod
    def list_coaches(self, coach_id: int | None = None) -> list[CoachRef]:
        """Return all coaches, or only the given one when ``coach_id`` is set."""
        ...

    @abstractmethod
    def get_coach_team_ids(self, coach_id: int) -> list[int]:
        """Return the IDs of the teams a coach is assigned to."""
        ...

    @abstractmethod
    def missing_coach_ids(self, coach_ids: Iterable[int]) -> list[int]:
        """Return the subset of ``coach_ids`` that do not exist."""
        ...
