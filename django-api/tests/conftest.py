"""Pytest configuration and shared fixtures."""

import uuid
from collections.abc import Iterable
from dataclasses import fields
from datetime import date, datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import Event, EventDraft, EventId, EventStatus
from events.services.event_service import EventService
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """EventStore backed by a dict, for service unit tests."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.saved_batches: list[int] = []
        self._clock = datetime(2030, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def find_all(self) -> list[Event]:
        return sorted(self.events.values(), key=lambda e: e.created_at, reverse=True)

    def find_by_id(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def find_all_by_category_order_by_start_date_asc(self, category: str) -> list[Event]:
        matches = [e for e in self.events.values() if e.category == category]
        return sorted(matches, key=lambda e: e.start_date or date.min)

    def find_all_by_status_order_by_created_at_desc(self, status: EventStatus) -> list[Event]:
        return [e for e in self.find_all() if e.status == status]

    def find_all_by_location_containing_ignore_case(self, location: str) -> list[Event]:
        return [e for e in self.find_all() if location.lower() in e.location.lower()]

    def find_all_by_category_and_status_order_by_start_date_asc(
        self, category: str, status: EventStatus
    ) -> list[Event]:
        return [
            e
            for e in self.find_all_by_category_order_by_start_date_asc(category)
            if e.status == status
        ]

    def exists_by_id(self, event_id: EventId) -> bool:
        return event_id in self.events

    def exists_by_name_and_start_date(self, name, start_date, exclude_id=None) -> bool:
        return any(
            e.name == name and e.start_date == start_date and e.id != exclude_id
            for e in self.events.values()
        )

    def count(self) -> int:
        return len(self.events)

    def count_by_status(self, status: EventStatus) -> int:
        return len(self.find_all_by_status_order_by_created_at_desc(status))

    def save(self, draft: EventDraft, event_id: EventId | None = None) -> Event:
        now = self._tick()
        if event_id is None:
            event_id, created_at = EventId(uuid.uuid4()), now
        else:
            created_at = self.events[event_id].created_at
        values = {f.name: getattr(draft, f.name) for f in fields(draft)}
        event = Event(id=event_id, created_at=created_at, updated_at=now, **values)
        self.events[event_id] = event
        return event

    def save_all(self, drafts: Iterable[EventDraft]) -> int:
        drafts = list(drafts)
        for draft in drafts:
            self.save(draft)
        self.saved_batches.append(len(drafts))
        return len(drafts)

    def delete_by_id(self, event_id: EventId) -> bool:
        return self.events.pop(event_id, None) is not None


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(memory_store: InMemoryEventStore) -> EventService:
    return EventService(memory_store)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def future_date() -> date:
    return date.today() + timedelta(days=30)


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
