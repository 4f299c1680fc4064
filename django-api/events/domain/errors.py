"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    COACH_NOT_FOUND = "COACH_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class TeamNotFoundError(DomainError):
    """Raised when a team is not found."""

    def __init__(self, team_id: int) -> None:
        super().__init__(
            code=ErrorCode.TEAM_NOT_FOUND,
            message="Team not found",
        )
        object.__setattr__(self, "team_id", team_id)


class CoachNotFoundError(DomainError):
    """Raised when one or more coaches are not found."""

    def __init__(self, coach_ids: list[int]) -> None:
        super().__init__(
            code=ErrorCode.COACH_NOT_FOUND,
            message="Coach not found" if len(coach_ids) == 1 else "One or more coaches not found",
        )
        object.__setattr__(self, "coach_ids", coach_ids)
