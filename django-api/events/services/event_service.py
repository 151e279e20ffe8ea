"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import replace
from typing import Any

from events.domain import Event, EventDraft, EventId, EventStatus
from events.domain.errors import (
    DuplicateEventError,
    EventNotFoundError,
    InvalidEventDatesError,
    InvalidEventIdError,
    InvalidEventPriceError,
    InvalidFilterError,
    NoEventsFoundError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(
        self,
        category: str | None = None,
        status: str | None = None,
        location: str | None = None,
    ) -> list[Event]:
        """Return events, narrowed by whichever filters are present.

        Filters are applied with this precedence: category and status
        together, category alone, status alone, location. Without filters
        every event is returned.

        Raises:
            InvalidFilterError: If status names no known status.
            NoEventsFoundError: If a filter was given and nothing matched.
        """
        category = _clean(category)
        location = _clean(location)
        event_status = self._parse_status(status)

        if category and event_status:
            events = self._store.find_all_by_category_and_status_order_by_start_date_asc(
                category, event_status
            )
        elif category:
            events = self._store.find_all_by_category_order_by_start_date_asc(category)
        elif event_status:
            events = self._store.find_all_by_status_order_by_created_at_desc(event_status)
        elif location:
            events = self._store.find_all_by_location_containing_ignore_case(location)
        else:
            return self._store.find_all()

        if not events:
            filters = {"category": category, "status": _clean(status), "location": location}
            raise NoEventsFoundError(**{k: v for k, v in filters.items() if v})
        return events

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.find_by_id(self._parse_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, draft: EventDraft) -> Event:
        """Store a new event.

        Raises:
            DuplicateEventError: If an event with the same name and start date exists.
        """
        if self._store.exists_by_name_and_start_date(draft.name, draft.start_date):
            raise DuplicateEventError(draft.name)
        event = self._store.save(draft)
        logger.info("Created event %s '%s'", event.id, event.name)
        return event

    def update_event(self, event_id: str, draft: EventDraft) -> Event:
        """Replace every writable field of an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            DuplicateEventError: If another event has the same name and start date.
        """
        parsed_id = self._parse_id(event_id)
        if not self._store.exists_by_id(parsed_id):
            raise EventNotFoundError(event_id)
        return self._replace(parsed_id, draft)

    def partial_update_event(self, event_id: str, changes: dict[str, Any]) -> Event:
        """Apply only the given field changes to an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidEventDatesError: If the merged event would end before it starts.
            InvalidEventPriceError: If the merged event is free but has a positive price.
            DuplicateEventError: If another event has the same name and start date.
        """
        existing = self.get_event(event_id)
        draft = replace(existing.to_draft(), **changes)
        if draft.start_date and draft.end_date and draft.end_date < draft.start_date:
            raise InvalidEventDatesError()
        if draft.admission_price and draft.admission_price.amount > 0 and not draft.fee:
            raise InvalidEventPriceError()
        return self._replace(existing.id, draft)

    def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if not self._store.delete_by_id(self._parse_id(event_id)):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", event_id)

    def count_events(self, status: str | None = None) -> int:
        """Return the number of events, optionally only those with a status."""
        event_status = self._parse_status(status)
        if event_status is None:
            return self._store.count()
        return self._store.count_by_status(event_status)

    def _replace(self, event_id: EventId, draft: EventDraft) -> Event:
        if self._store.exists_by_name_and_start_date(
            draft.name, draft.start_date, exclude_id=event_id
        ):
            raise DuplicateEventError(draft.name)
        event = self._store.save(draft, event_id=event_id)
        logger.info("Updated event %s", event_id)
        return event

    @staticmethod
    def _parse_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except (TypeError, ValueError) as exc:
            raise InvalidEventIdError() from exc

    @staticmethod
    def _parse_status(status: str | None) -> EventStatus | None:
        status = _clean(status)
        if status is None:
            return None
        try:
            return EventStatus.parse(status)
        except ValueError as exc:
            raise InvalidFilterError("status", status) from exc
