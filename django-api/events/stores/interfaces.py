"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from events.domain import Event, EventDraft, EventId, EventStatus


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def find_by_id(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_all_by_category_order_by_start_date_asc(self, category: str) -> list[Event]:
        """Return events in exactly this category, earliest start first."""
        ...

    @abstractmethod
    def find_all_by_status_order_by_created_at_desc(self, status: EventStatus) -> list[Event]:
        """Return events with this status, newest first."""
        ...

    @abstractmethod
    def find_all_by_location_containing_ignore_case(self, location: str) -> list[Event]:
        """Return events whose location contains the text, ignoring case."""
        ...

    @abstractmethod
    def find_all_by_category_and_status_order_by_start_date_asc(
        self, category: str, status: EventStatus
    ) -> list[Event]:
        """Return events matching both category and status, earliest start first."""
        ...

    @abstractmethod
    def exists_by_id(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def exists_by_name_and_start_date(
        self, name: str, start_date: date | None, exclude_id: EventId | None = None
    ) -> bool:
        """Check if another event has this name and start date."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored events."""
        ...

    @abstractmethod
    def count_by_status(self, status: EventStatus) -> int:
        """Return the number of events with this status."""
        ...

    @abstractmethod
    def save(self, draft: EventDraft, event_id: EventId | None = None) -> Event:
        """Insert a new event, or overwrite the event with the given ID."""
        ...

    @abstractmethod
    def save_all(self, drafts: Iterable[EventDraft]) -> int:
        """Bulk insert events and return how many were stored."""
        ...

    @abstractmethod
    def delete_by_id(self, event_id: EventId) -> bool:
        """Delete an event. Return False if it did not exist."""
        ...
