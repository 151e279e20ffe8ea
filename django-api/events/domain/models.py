"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, fields
from datetime import date, datetime

from events.domain.value_objects import MAX_LATITUDE, MAX_LONGITUDE, EventId, EventStatus, Money


@dataclass(frozen=True)
class EventDraft:
    """The writable part of an event, as supplied on create or update."""

    name: str
    category: str = ""
    location: str = ""
    organizer_name: str = ""
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    status: EventStatus = EventStatus.ACTIVE
    fee: bool = False
    admission_price: Money | None = None
    latitude: float | None = None
    longitude: float | None = None

    def __post_init__(self) -> None:
        if self.latitude is not None and not -MAX_LATITUDE <= self.latitude <= MAX_LATITUDE:
            raise ValueError("Latitude must be between -90 and 90")
        if self.longitude is not None and not -MAX_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            raise ValueError("Longitude must be between -180 and 180")


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    category: str
    location: str
    organizer_name: str
    description: str
    start_date: date | None
    end_date: date | None
    status: EventStatus
    fee: bool
    admission_price: Money | None
    latitude: float | None
    longitude: float | None
    created_at: datetime
    updated_at: datetime

    def to_draft(self) -> EventDraft:
        return EventDraft(**{f.name: getattr(self, f.name) for f in fields(EventDraft)})
