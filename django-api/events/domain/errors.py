"""Domain error codes for the events module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    NO_EVENTS_FOUND = "NO_EVENTS_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_FILTER = "INVALID_FILTER"
    INVALID_EVENT_DATES = "INVALID_EVENT_DATES"
    INVALID_EVENT_PRICE = "INVALID_EVENT_PRICE"
    DUPLICATE_EVENT = "DUPLICATE_EVENT"


@dataclass(frozen=True, eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
            details={"event_id": event_id},
        )


class NoEventsFoundError(DomainError):
    """Raised when a filtered listing matches no events."""

    def __init__(self, **filters: str) -> None:
        super().__init__(
            code=ErrorCode.NO_EVENTS_FOUND,
            message="No events match the given filters",
            details=filters,
        )


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidFilterError(DomainError):
    """Raised when a filter parameter has an unusable value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FILTER,
            message=f"Invalid value for filter '{name}'",
            details={name: value},
        )


class InvalidEventDatesError(DomainError):
    """Raised when an event would end before it starts."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_DATES,
            message="End date must not be before start date",
        )


class InvalidEventPriceError(DomainError):
    """Raised when a free event would carry a paid admission price."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_PRICE,
            message="A paid admission price requires fee to be true",
        )


class DuplicateEventError(DomainError):
    """Raised when an event with the same name and start date exists."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EVENT,
            message="An event with this name and start date already exists",
            details={"name": name},
        )
